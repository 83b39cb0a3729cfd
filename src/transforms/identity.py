"""Measurement identity generation.

The ``timestamped`` scheme digests filename, wall-clock millis and
fingerprint, so identical content ingested twice gets two ids. The
``content`` scheme drops the clock and is idempotent.
"""

from __future__ import annotations

from core.clock import Clock, SystemClock
from core.constants import DEFAULT_HASH_ALGORITHM, IDENTITY_SCHEME_CONTENT
from transforms.content_fingerprint import hash_text


def generate_identity(
    filename: str,
    fingerprint: str,
    scheme: str,
    algorithm: str = DEFAULT_HASH_ALGORITHM,
    clock: Clock | None = None,
) -> str:
    """Build a measurement identity id.

    Args:
        filename: Original file name.
        fingerprint: Content fingerprint of the file.
        scheme: ``timestamped`` or ``content``.
        algorithm: hashlib algorithm name.
        clock: Time source; wall clock if omitted.

    Returns:
        Hex digest identity.
    """
    return hash_text(build_identity_seed(filename, fingerprint, scheme, clock), algorithm)


def build_identity_seed(
    filename: str,
    fingerprint: str,
    scheme: str,
    clock: Clock | None = None,
) -> str:
    """Return the string digested into an identity."""
    if scheme == IDENTITY_SCHEME_CONTENT:
        return f"{filename}-{fingerprint}"
    timestamp = (clock or SystemClock()).now_millis()
    return f"{filename}-{timestamp}-{fingerprint}"
