"""
pytest configuration and fixtures.
"""

import pytest

# Add src to path for imports
import sys
from pathlib import Path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from httpstatus import StatusCodeRegistry


@pytest.fixture
def small_table() -> list:
    """A small, valid (code, name, phrase, description) table."""
    return [
        (0, "UNKNOWN", "Unknown", "Sentinel."),
        (200, "OK", "OK", "Success."),
        (404, "NOT_FOUND", "Not Found", "Missing."),
        (413, "CONTENT_TOO_LARGE", "Content Too Large", "Too big."),
        (503, "SERVICE_UNAVAILABLE", "Service Unavailable", "Down."),
    ]


@pytest.fixture
def small_aliases() -> dict:
    """Aliases that are valid for small_table."""
    return {
        "PAYLOAD_TOO_LARGE": "CONTENT_TOO_LARGE",
        "REQUEST_ENTITY_TOO_LARGE": "CONTENT_TOO_LARGE",
        "NO_STATUS": "UNKNOWN",
    }


@pytest.fixture
def small_registry(small_table, small_aliases) -> StatusCodeRegistry:
    """Registry built from the small table."""
    return StatusCodeRegistry.from_table(small_table, small_aliases)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove HTTPSTATUS_* variables so config defaults apply."""
    for name in ("HTTPSTATUS_LOG_LEVEL", "HTTPSTATUS_OUTPUT", "HTTPSTATUS_ALIASES"):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch
