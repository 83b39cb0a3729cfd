"""Unit tests for content fingerprinting."""

from __future__ import annotations

import hashlib

import pytest

from core.errors import DigestFailureError
from transforms.content_fingerprint import compute_fingerprint
from tests.fixture_paths import VALID_TUV, fixture_path


def test_compute_fingerprint_is_deterministic() -> None:
    """Identical bytes should always give identical fingerprints."""
    data = fixture_path(VALID_TUV).read_bytes()

    assert compute_fingerprint(data) == compute_fingerprint(bytes(data))


def test_compute_fingerprint_changes_with_one_byte() -> None:
    """Flipping a single byte should change the fingerprint."""
    data = bytearray(fixture_path(VALID_TUV).read_bytes())
    original = compute_fingerprint(bytes(data))
    data[len(data) // 2] ^= 0x01

    assert compute_fingerprint(bytes(data)) != original


def test_compute_fingerprint_uses_configured_algorithm() -> None:
    """The configured algorithm should drive the digest."""
    assert compute_fingerprint(b"radar", "md5") == hashlib.md5(b"radar").hexdigest()


def test_compute_fingerprint_defaults_to_sha256() -> None:
    assert compute_fingerprint(b"radar") == hashlib.sha256(b"radar").hexdigest()


def test_compute_fingerprint_raises_digest_failure_for_unknown_algorithm() -> None:
    """Unknown algorithms should surface as digest failures."""
    with pytest.raises(DigestFailureError):
        compute_fingerprint(b"radar", "no-such-digest")
