"""
Registry exceptions.

Lookups fail loudly instead of returning a default:

    RegistryError
    ├── UnknownNameError            by_name("NOT_A_STATUS")
    ├── UnknownCodeError            by_code(999)
    └── RegistryConfigurationError  inconsistent table at construction

The two lookup errors also subclass KeyError, so code that already
catches KeyError around a dict of status codes keeps working.
"""

from typing import List


class RegistryError(Exception):
    """Base class for all registry errors."""


class UnknownNameError(RegistryError, KeyError):
    """
    Raised when a name matches neither a canonical name nor an alias.

    Matching is exact and case-sensitive, so "not_found" is unknown even
    though "NOT_FOUND" exists.
    """

    def __init__(self, name: str):
        super().__init__(f"Unknown status name: {name!r}")
        self.name = name

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.args[0]


class UnknownCodeError(RegistryError, KeyError):
    """Raised when a numeric code is not in the table."""

    def __init__(self, code):
        super().__init__(f"Unknown status code: {code!r}")
        self.code = code

    def __str__(self) -> str:
        return self.args[0]


class RegistryConfigurationError(RegistryError):
    """
    Raised when a registry is built from an inconsistent table.

    Carries every problem found, not only the first, so a broken table can
    be fixed in one pass.
    """

    def __init__(self, problems: List[str]):
        message = "Invalid status code table: " + "; ".join(problems)
        super().__init__(message)
        self.problems = list(problems)
