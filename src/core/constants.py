"""Core constants used across HF radar ledger modules.

This module centralizes file-format and ledger constants.
Keeping values here avoids magic literals in business logic.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_DATA_ROOT = Path(".hfr")
LEDGER_DIR_NAME = "ledger"
WORLD_STATE_FILE_NAME = "world_state.json"
HISTORY_FILE_NAME = "history.jsonl"

TABLE_START_MARKER = "%TableStart:"
TABLE_HEADER_LINE_COUNT = 2
TABLE_FOOTER_LINE_COUNT = 8
HEADER_KEY_PREFIX = "%"
EXCLUDED_HEADER_KEYS = ("SiteSource",)
HEADER_KEY_TIMESTAMP = "TimeStamp"
HEADER_KEY_PROCESSED_TIMESTAMP = "ProcessedTimeStamp"
HEADER_KEY_TABLE_ROWS = "TableRows"

VECTOR_COLUMN_NAMES = (
    "Longitude",
    "Latitude",
    "UComp",
    "VComp",
    "VectorFlag",
    "UStdDev",
    "VStdDev",
    "Covariance",
    "XDistance",
    "YDistance",
    "Range",
    "Bearing",
    "Velocity",
    "Direction",
    "SiteContributers1",
    "SiteContributers2",
    "SiteContributers3",
    "SiteContributers4",
    "SiteContributers5",
    "SiteContributers6",
)
VECTOR_COLUMN_COUNT = len(VECTOR_COLUMN_NAMES)

DEFAULT_HASH_ALGORITHM = "sha256"
DEFAULT_OWNER = "SOCIB"
SOFTWARE_VERSION = 1
DEFAULT_LINKS = ""
SUPPORTED_SOURCE_EXTENSIONS = (".tuv",)

PARSE_POLICY_STRICT = "strict"
PARSE_POLICY_LENIENT = "lenient"
SUPPORTED_PARSE_POLICIES = (PARSE_POLICY_STRICT, PARSE_POLICY_LENIENT)
HEADER_SCOPE_DOCUMENT = "document"
HEADER_SCOPE_PREAMBLE = "preamble"
SUPPORTED_HEADER_SCOPES = (HEADER_SCOPE_DOCUMENT, HEADER_SCOPE_PREAMBLE)
IDENTITY_SCHEME_TIMESTAMPED = "timestamped"
IDENTITY_SCHEME_CONTENT = "content"
SUPPORTED_IDENTITY_SCHEMES = (IDENTITY_SCHEME_TIMESTAMPED, IDENTITY_SCHEME_CONTENT)
