"""
=============================================================================
CATALOG TOOL CONFIGURATION
=============================================================================

Settings for `python -m httpstatus`. The registry itself takes no
configuration: its table is fixed. This only controls how the command-line
tool logs and prints.

=============================================================================
CONFIGURATION SOURCES
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                    CONFIGURATION HIERARCHY                          │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   Priority (highest to lowest):                                     │
    │                                                                      │
    │   1. Command-line arguments                                         │
    │      └── python -m httpstatus --json 404                           │
    │                                                                      │
    │   2. Environment variables                                          │
    │      └── HTTPSTATUS_OUTPUT=json python -m httpstatus 404           │
    │                                                                      │
    │   3. Default values (in this dataclass)                            │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

=============================================================================
"""

import os
from dataclasses import dataclass


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
OUTPUT_FORMATS = ("text", "json")


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class CatalogConfig:
    """
    Configuration for the catalog command-line tool.

    =========================================================================
    CONFIGURATION GROUPS
    =========================================================================

    LOGGING
    - log_level

    OUTPUT
    - output_format, include_aliases

    =========================================================================
    """

    log_level: str = "WARNING"
    """
    Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
    DEBUG shows the registry build message.
    """

    output_format: str = "text"
    """
    Output format: 'text' or 'json'.
    Text is one status line per entry; JSON is for generating docs.
    """

    include_aliases: bool = False
    """
    Show alias names next to each entry in listings.
    """

    @classmethod
    def from_env(cls) -> "CatalogConfig":
        """
        Create configuration from environment variables.

        HTTPSTATUS_LOG_LEVEL  Logging level (default: WARNING)
        HTTPSTATUS_OUTPUT     Output format (default: text)
        HTTPSTATUS_ALIASES    Show aliases, 1/true/yes/on (default: off)
        """
        return cls(
            log_level=os.getenv("HTTPSTATUS_LOG_LEVEL", "WARNING"),
            output_format=os.getenv("HTTPSTATUS_OUTPUT", "text"),
            include_aliases=_env_flag(os.getenv("HTTPSTATUS_ALIASES", "")),
        )

    def validate(self) -> None:
        """
        Validate configuration values.

        Called before anything is printed, so a typo in an environment
        variable fails immediately with a clear message.
        """
        if self.log_level.upper() not in LOG_LEVELS:
            raise ValueError(
                f"Invalid log level: {self.log_level}. Must be one of {', '.join(LOG_LEVELS)}."
            )

        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Invalid output format: {self.output_format}. Must be 'text' or 'json'."
            )
