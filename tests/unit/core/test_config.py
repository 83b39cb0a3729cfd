"""Unit tests for core config parsing."""

from __future__ import annotations

import pytest

from core.config import HfrConfig
from core.errors import HfrConfigError


def test_from_env_reads_data_root(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should resolve data root from environment."""
    monkeypatch.setenv("HFR_DATA_ROOT", "./.tmp-hfr")

    config = HfrConfig.from_env()

    assert config.data_root.name == ".tmp-hfr"


def test_from_env_uses_documented_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    """Unset variables should fall back to strict sha256 legacy behavior."""
    for variable in (
        "HFR_DIGEST_ALGORITHM",
        "HFR_PARSE_POLICY",
        "HFR_HEADER_SCOPE",
        "HFR_IDENTITY_SCHEME",
        "HFR_DEFAULT_OWNER",
    ):
        monkeypatch.delenv(variable, raising=False)

    config = HfrConfig.from_env()

    assert (
        config.digest_algorithm,
        config.parse_policy,
        config.header_scope,
        config.identity_scheme,
        config.default_owner,
    ) == ("sha256", "strict", "document", "timestamped", "SOCIB")


def test_from_env_normalizes_choice_case(monkeypatch: pytest.MonkeyPatch) -> None:
    """Enumerated values should be accepted case-insensitively."""
    monkeypatch.setenv("HFR_PARSE_POLICY", " Lenient ")

    config = HfrConfig.from_env()

    assert config.parse_policy == "lenient"


def test_from_env_raises_for_unknown_digest(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should reject digest names hashlib does not provide."""
    monkeypatch.setenv("HFR_DIGEST_ALGORITHM", "not-a-hash")

    with pytest.raises(HfrConfigError):
        HfrConfig.from_env()


def test_from_env_raises_for_variable_length_digest(monkeypatch: pytest.MonkeyPatch) -> None:
    """Shake digests need a length and cannot back fingerprints."""
    monkeypatch.setenv("HFR_DIGEST_ALGORITHM", "shake_256")

    with pytest.raises(HfrConfigError):
        HfrConfig.from_env()


def test_from_env_raises_for_invalid_parse_policy(monkeypatch: pytest.MonkeyPatch) -> None:
    """Config should fail for parse policies outside strict/lenient."""
    monkeypatch.setenv("HFR_PARSE_POLICY", "silent")

    with pytest.raises(HfrConfigError, match="HFR_PARSE_POLICY"):
        HfrConfig.from_env()


def test_from_env_raises_for_blank_owner(monkeypatch: pytest.MonkeyPatch) -> None:
    """A blank default owner should be rejected."""
    monkeypatch.setenv("HFR_DEFAULT_OWNER", "   ")

    with pytest.raises(HfrConfigError):
        HfrConfig.from_env()
