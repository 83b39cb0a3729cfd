"""Content fingerprinting over raw document bytes.

This module computes the digest that identifies a measurement payload.
Fingerprints and identities share one configured algorithm.
"""

from __future__ import annotations

import hashlib

from core.constants import DEFAULT_HASH_ALGORITHM
from core.errors import DigestFailureError


def compute_fingerprint(data: bytes, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
    """Hash raw bytes with the configured digest algorithm.

    Args:
        data: Unmodified document bytes.
        algorithm: hashlib algorithm name.

    Returns:
        Hex digest string.

    Raises:
        DigestFailureError: If the algorithm cannot produce a digest.
    """
    return hash_bytes(data, algorithm)


def hash_text(text: str, algorithm: str = DEFAULT_HASH_ALGORITHM) -> str:
    """Hash a string's UTF-8 encoding with the configured algorithm."""
    return hash_bytes(text.encode("utf-8"), algorithm)


def hash_bytes(data: bytes, algorithm: str) -> str:
    """Return the hex digest of ``data``.

    Args:
        data: Input bytes.
        algorithm: hashlib algorithm name.

    Returns:
        Hex digest string.

    Raises:
        DigestFailureError: If hashlib rejects the algorithm.
    """
    try:
        hasher = hashlib.new(algorithm)
        hasher.update(data)
        return hasher.hexdigest()
    except (ValueError, TypeError) as error:
        raise DigestFailureError(
            f"Failed to compute '{algorithm}' digest: {error}. "
            "Configure HFR_DIGEST_ALGORITHM with a fixed-length hashlib algorithm."
        ) from error
