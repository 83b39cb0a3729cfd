"""Pytest configuration shared by unit and integration tests."""

from __future__ import annotations

import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent


def pytest_sessionstart() -> None:
    """Expose the src packages and the tests helpers to imports."""
    for import_root in (PROJECT_ROOT / "src", PROJECT_ROOT):
        if str(import_root) not in sys.path:
            sys.path.insert(0, str(import_root))
