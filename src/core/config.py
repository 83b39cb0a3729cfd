"""Runtime configuration model for the HF radar ledger.

This module owns all environment variable parsing and validation.
Other modules consume a typed config object instead of raw env reads.
"""

from __future__ import annotations

from dataclasses import dataclass
import hashlib
import os
from pathlib import Path

from core.constants import (
    DEFAULT_DATA_ROOT,
    DEFAULT_HASH_ALGORITHM,
    DEFAULT_OWNER,
    HEADER_SCOPE_DOCUMENT,
    IDENTITY_SCHEME_TIMESTAMPED,
    PARSE_POLICY_STRICT,
    SUPPORTED_HEADER_SCOPES,
    SUPPORTED_IDENTITY_SCHEMES,
    SUPPORTED_PARSE_POLICIES,
)
from core.errors import HfrConfigError


@dataclass(frozen=True)
class HfrConfig:
    """Validated runtime configuration.

    Attributes:
        data_root: Local root directory for the file-backed ledger.
        digest_algorithm: Hash algorithm used for fingerprints and identities.
        parse_policy: ``strict`` aborts on bad rows, ``lenient`` rejects them.
        header_scope: ``document`` scans all lines, ``preamble`` stops at the table.
        identity_scheme: ``timestamped`` includes wall-clock time, ``content`` does not.
        default_owner: Owner used when a request does not name one.
        s3_region: Optional default AWS region for S3 reads.
        s3_profile: Optional AWS profile for boto3 session initialization.
    """

    data_root: Path
    digest_algorithm: str = DEFAULT_HASH_ALGORITHM
    parse_policy: str = PARSE_POLICY_STRICT
    header_scope: str = HEADER_SCOPE_DOCUMENT
    identity_scheme: str = IDENTITY_SCHEME_TIMESTAMPED
    default_owner: str = DEFAULT_OWNER
    s3_region: str | None = None
    s3_profile: str | None = None

    @classmethod
    def from_env(cls) -> "HfrConfig":
        """Build config from process environment variables.

        Returns:
            A validated config object.

        Raises:
            HfrConfigError: If environment values are invalid.
        """
        data_root_value = os.getenv("HFR_DATA_ROOT", str(DEFAULT_DATA_ROOT))
        return cls(
            data_root=Path(data_root_value).expanduser().resolve(),
            digest_algorithm=_parse_digest_algorithm(
                os.getenv("HFR_DIGEST_ALGORITHM", DEFAULT_HASH_ALGORITHM)
            ),
            parse_policy=_parse_choice(
                "HFR_PARSE_POLICY",
                os.getenv("HFR_PARSE_POLICY", PARSE_POLICY_STRICT),
                SUPPORTED_PARSE_POLICIES,
            ),
            header_scope=_parse_choice(
                "HFR_HEADER_SCOPE",
                os.getenv("HFR_HEADER_SCOPE", HEADER_SCOPE_DOCUMENT),
                SUPPORTED_HEADER_SCOPES,
            ),
            identity_scheme=_parse_choice(
                "HFR_IDENTITY_SCHEME",
                os.getenv("HFR_IDENTITY_SCHEME", IDENTITY_SCHEME_TIMESTAMPED),
                SUPPORTED_IDENTITY_SCHEMES,
            ),
            default_owner=_parse_owner(os.getenv("HFR_DEFAULT_OWNER", DEFAULT_OWNER)),
            s3_region=os.getenv("HFR_S3_REGION"),
            s3_profile=os.getenv("HFR_S3_PROFILE"),
        )


def _parse_digest_algorithm(raw_value: str) -> str:
    """Validate a digest algorithm name against hashlib.

    Args:
        raw_value: Raw string from environment.

    Returns:
        Normalized lowercase algorithm name.

    Raises:
        HfrConfigError: If hashlib does not provide the algorithm.
    """
    algorithm = raw_value.strip().lower()
    if algorithm not in hashlib.algorithms_available or algorithm.startswith("shake_"):
        raise HfrConfigError(
            "Invalid HFR_DIGEST_ALGORITHM value: "
            f"'{raw_value}' is not a fixed-length hashlib digest. "
            "Use a supported algorithm such as sha256."
        )
    return algorithm


def _parse_choice(variable: str, raw_value: str, choices: tuple[str, ...]) -> str:
    """Validate an enumerated environment value.

    Args:
        variable: Environment variable name for error context.
        raw_value: Raw string from environment.
        choices: Allowed values.

    Returns:
        Normalized lowercase value.

    Raises:
        HfrConfigError: If value is not one of the choices.
    """
    value = raw_value.strip().lower()
    if value not in choices:
        raise HfrConfigError(
            f"Invalid {variable} value: expected one of {choices}, got '{raw_value}'. "
            f"Set {variable} to a supported value."
        )
    return value


def _parse_owner(raw_value: str) -> str:
    owner = raw_value.strip()
    if not owner:
        raise HfrConfigError(
            "Invalid HFR_DEFAULT_OWNER value: owner must not be blank. "
            "Unset HFR_DEFAULT_OWNER or provide an owner name."
        )
    return owner
