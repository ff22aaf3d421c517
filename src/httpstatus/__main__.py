"""
=============================================================================
HTTPSTATUS CLI ENTRY POINT
=============================================================================

Look up and list status codes from the command line.

=============================================================================
USAGE
=============================================================================

    # Look up by code or by name (aliases work too)
    python -m httpstatus 404
    python -m httpstatus UNPROCESSABLE_ENTITY

    # Several at once
    python -m httpstatus 200 301 NOT_FOUND

    # List everything, or one class
    python -m httpstatus --list
    python -m httpstatus --list --class client_error

    # JSON for generating documentation
    python -m httpstatus --list --json --aliases

=============================================================================
EXIT STATUS
=============================================================================

    0   every query resolved
    1   at least one query was unknown, or the configuration is invalid

=============================================================================
"""

import argparse
import json
import logging
import sys
from typing import List, Optional

from . import __version__
from .config import CatalogConfig, LOG_LEVELS
from .entry import StatusCodeEntry
from .errors import RegistryError
from .registry import StatusCodeRegistry, default_registry
from .status_codes import StatusClass


logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="httpstatus",
        description="Look up HTTP status codes by number or symbolic name",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python -m httpstatus 404                     # By code
  python -m httpstatus PAYLOAD_TOO_LARGE       # By name or alias
  python -m httpstatus --list --class success  # All 2xx codes
  python -m httpstatus --list --json           # Machine readable
        """
    )

    parser.add_argument(
        "queries",
        nargs="*",
        metavar="QUERY",
        help="Status code (e.g. 404) or name (e.g. NOT_FOUND)"
    )

    # ─────────────────────────────────────────────────────────────────────
    # LISTING ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────

    parser.add_argument(
        "--list", "-L",
        action="store_true",
        help="List every status code in ascending order"
    )

    parser.add_argument(
        "--class", "-c",
        dest="status_class",
        choices=[status_class.name.lower() for status_class in StatusClass],
        default=None,
        help="Only list codes of this class (implies --list)"
    )

    # ─────────────────────────────────────────────────────────────────────
    # OUTPUT ARGUMENTS
    # ─────────────────────────────────────────────────────────────────────
    # Defaults are None so that unset flags fall back to the environment.

    parser.add_argument(
        "--json", "-j",
        dest="output_format",
        action="store_const",
        const="json",
        default=None,
        help="Print JSON instead of status lines"
    )

    parser.add_argument(
        "--aliases", "-a",
        dest="include_aliases",
        action="store_const",
        const=True,
        default=None,
        help="Show alias names for each entry"
    )

    parser.add_argument(
        "--log-level", "-l",
        choices=LOG_LEVELS,
        default=None,
        help="Logging level (default: WARNING)"
    )

    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"httpstatus {__version__}"
    )

    return parser


def resolve_config(args: argparse.Namespace) -> CatalogConfig:
    """Environment first, then any flags given on the command line."""
    config = CatalogConfig.from_env()
    if args.log_level is not None:
        config.log_level = args.log_level
    if args.output_format is not None:
        config.output_format = args.output_format
    if args.include_aliases is not None:
        config.include_aliases = args.include_aliases
    config.validate()
    return config


def setup_logging(config: CatalogConfig) -> None:
    """Configure logging based on config."""
    level = getattr(logging, config.log_level.upper(), logging.WARNING)

    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    logging.getLogger("httpstatus").setLevel(level)


def lookup(registry: StatusCodeRegistry, query: str) -> StatusCodeEntry:
    """Treat decimal queries as codes and everything else as names."""
    if query.isdecimal():
        return registry.by_code(int(query))
    return registry.by_name(query)


def format_text(
    registry: StatusCodeRegistry,
    entry: StatusCodeEntry,
    include_aliases: bool,
) -> str:
    """
    Format one entry as a line:

        404 Not Found (NOT_FOUND, Client Error)
    """
    line = f"{entry.status_line} ({entry.canonical_name}, {entry.status_class.label})"
    if include_aliases:
        aliases = registry.aliases_of(entry.canonical_name)
        if aliases:
            line += f" aliases: {', '.join(aliases)}"
    return line


def format_json(
    registry: StatusCodeRegistry,
    entries: List[StatusCodeEntry],
    include_aliases: bool,
) -> str:
    records = []
    for entry in entries:
        record = entry.to_dict()
        if include_aliases:
            record["aliases"] = list(registry.aliases_of(entry.canonical_name))
        records.append(record)
    return json.dumps(records, indent=2)


def main(argv: Optional[List[str]] = None, registry: StatusCodeRegistry = default_registry) -> int:
    """
    Main CLI entry point.

    Returns the process exit status instead of calling sys.exit(), so
    tests can call it directly.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    setup_logging(config)

    # =========================================================================
    # COLLECT ENTRIES
    # =========================================================================

    entries: List[StatusCodeEntry] = []
    failed = False

    if args.list or args.status_class:
        if args.status_class:
            entries.extend(registry.by_class(StatusClass[args.status_class.upper()]))
        else:
            entries.extend(registry.all())

    for query in args.queries:
        try:
            entries.append(lookup(registry, query))
        except RegistryError as e:
            logger.debug(f"Lookup failed for {query!r}")
            print(f"Error: {e}", file=sys.stderr)
            failed = True

    if not entries and not failed:
        parser.print_usage(sys.stderr)
        return 1

    # =========================================================================
    # PRINT
    # =========================================================================

    if config.output_format == "json":
        print(format_json(registry, entries, config.include_aliases))
    else:
        for entry in entries:
            print(format_text(registry, entry, config.include_aliases))

    return 1 if failed else 0


# =============================================================================
# ENTRY POINT
# =============================================================================
# This allows running: python -m httpstatus

if __name__ == "__main__":
    sys.exit(main())
