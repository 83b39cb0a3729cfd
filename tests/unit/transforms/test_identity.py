"""Unit tests for measurement identity generation."""

from __future__ import annotations

import hashlib

from core.clock import FixedClock
from transforms.identity import build_identity_seed, generate_identity

_FILENAME = "TOTL_IBIZ_2023_05_01_0000.tuv"
_FINGERPRINT = "ab" * 32


def test_build_identity_seed_joins_filename_time_and_fingerprint() -> None:
    """Timestamped seeds should embed the injected clock value."""
    seed = build_identity_seed(_FILENAME, _FINGERPRINT, "timestamped", FixedClock(42))

    assert seed == f"{_FILENAME}-42-{_FINGERPRINT}"


def test_generate_identity_digests_seed() -> None:
    """Identity should be the configured digest of the seed."""
    identity = generate_identity(
        _FILENAME, _FINGERPRINT, "timestamped", "sha256", FixedClock(42)
    )

    expected = hashlib.sha256(f"{_FILENAME}-42-{_FINGERPRINT}".encode("utf-8")).hexdigest()
    assert identity == expected


def test_generate_identity_timestamped_differs_across_time() -> None:
    """Re-ingesting identical content at another instant yields a new id."""
    first = generate_identity(_FILENAME, _FINGERPRINT, "timestamped", clock=FixedClock(1))
    second = generate_identity(_FILENAME, _FINGERPRINT, "timestamped", clock=FixedClock(2))

    assert first != second


def test_generate_identity_content_scheme_ignores_clock() -> None:
    """Content identities should be stable for identical input."""
    first = generate_identity(_FILENAME, _FINGERPRINT, "content", clock=FixedClock(1))
    second = generate_identity(_FILENAME, _FINGERPRINT, "content", clock=FixedClock(2))

    assert first == second


def test_generate_identity_content_scheme_depends_on_filename() -> None:
    """Same content under another name should get another id."""
    first = generate_identity(_FILENAME, _FINGERPRINT, "content")
    second = generate_identity("TOTL_IBIZ_2023_05_01_0100.tuv", _FINGERPRINT, "content")

    assert first != second
