"""
=============================================================================
STATUS CODE REGISTRY
=============================================================================

Read-only lookups over the status code table.

=============================================================================
LOOKUP FLOW
=============================================================================

    ┌─────────────────────────────────────────────────────────────────────┐
    │                         by_name(name)                                │
    ├─────────────────────────────────────────────────────────────────────┤
    │                                                                      │
    │   "UNPROCESSABLE_ENTITY"                                            │
    │          │                                                           │
    │          ▼                                                           │
    │   canonical name? ── no ──► alias? ── no ──► UnknownNameError       │
    │          │                    │                                      │
    │         yes                  yes: "UNPROCESSABLE_CONTENT"           │
    │          │                    │                                      │
    │          ▼                    ▼                                      │
    │        entry ◄────────────── entry (the SAME object)                │
    │                                                                      │
    └─────────────────────────────────────────────────────────────────────┘

    by_code(code) is a single dict lookup; a miss is UnknownCodeError.

=============================================================================
LIFECYCLE
=============================================================================

The registry is validated once, in __init__. If the table is inconsistent
the constructor raises RegistryConfigurationError and no registry object
exists to serve bad data. The default registry is built at import time,
so a broken table fails `import httpstatus` rather than the first lookup.

After construction nothing changes: entries are frozen dataclasses, the
ordered view is a tuple and the alias table is a read-only mapping. Any
number of threads can read concurrently without locking.

=============================================================================
"""

import logging
from collections import Counter
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, Mapping, Optional, Tuple

from .entry import StatusCodeEntry
from .errors import RegistryConfigurationError, UnknownCodeError, UnknownNameError
from .status_codes import ALIASES, STATUS_TABLE, StatusClass, class_of


logger = logging.getLogger(__name__)

MIN_CODE = 0
MAX_CODE = 599


class StatusCodeRegistry:
    """
    Immutable mapping between status codes, names and metadata.

    =========================================================================
    USAGE
    =========================================================================

        registry = StatusCodeRegistry.from_table(STATUS_TABLE, ALIASES)

        registry.by_code(404).canonical_name      # "NOT_FOUND"
        registry.by_name("PAYLOAD_TOO_LARGE")     # entry for 413
        registry.class_of(503)                    # StatusClass.SERVER_ERROR

        for entry in registry.all():              # ascending by code
            print(entry.status_line)

    =========================================================================
    """

    def __init__(
        self,
        entries: Iterable[StatusCodeEntry],
        aliases: Optional[Mapping[str, str]] = None,
    ):
        """
        Build and validate a registry.

        Args:
            entries: One entry per code. Order does not matter.
            aliases: alias name -> canonical name.

        Raises:
            RegistryConfigurationError: If names or codes collide, an alias
                points nowhere, an alias hides a canonical name, or a code
                is outside 0-599 or not an integer.
        """
        entries = tuple(entries)
        aliases = dict(aliases or {})

        problems = self._validate(entries, aliases)
        if problems:
            logger.error(f"Refusing to build status code registry: {len(problems)} problem(s)")
            raise RegistryConfigurationError(problems)

        self._entries: Tuple[StatusCodeEntry, ...] = tuple(
            sorted(entries, key=lambda entry: entry.code)
        )
        self._by_code: Dict[int, StatusCodeEntry] = {
            entry.code: entry for entry in self._entries
        }
        self._by_name: Dict[str, StatusCodeEntry] = {
            entry.canonical_name: entry for entry in self._entries
        }
        self._aliases = MappingProxyType(aliases)

        logger.debug(
            f"Status code registry ready: {len(self._entries)} codes, "
            f"{len(self._aliases)} aliases"
        )

    @classmethod
    def from_table(
        cls,
        table: Iterable[Tuple[int, str, str, str]],
        aliases: Optional[Mapping[str, str]] = None,
    ) -> "StatusCodeRegistry":
        """Build a registry from (code, name, phrase, description) rows."""
        return cls(
            (StatusCodeEntry(code, name, phrase, description)
             for code, name, phrase, description in table),
            aliases,
        )

    @staticmethod
    def _validate(
        entries: Tuple[StatusCodeEntry, ...],
        aliases: Dict[str, str],
    ) -> list:
        problems = []

        name_counts = Counter(entry.canonical_name for entry in entries)
        for name, count in name_counts.items():
            if count > 1:
                problems.append(f"canonical name {name} is defined {count} times")

        code_counts = Counter(entry.code for entry in entries)
        for code, count in code_counts.items():
            if count > 1:
                problems.append(f"code {code} has {count} canonical entries")

        for entry in entries:
            if isinstance(entry.code, bool) or not isinstance(entry.code, int):
                problems.append(
                    f"code {entry.code!r} ({entry.canonical_name}) is not an integer"
                )
            elif not MIN_CODE <= entry.code <= MAX_CODE:
                problems.append(
                    f"code {entry.code} ({entry.canonical_name}) is outside "
                    f"{MIN_CODE}-{MAX_CODE}"
                )

        for alias, target in sorted(aliases.items()):
            if alias in name_counts:
                problems.append(f"alias {alias} shadows a canonical name")
            if target not in name_counts:
                problems.append(f"alias {alias} refers to unknown name {target}")

        return problems

    # ─────────────────────────────────────────────────────────────────────
    # LOOKUPS
    # ─────────────────────────────────────────────────────────────────────

    def by_name(self, name: str) -> StatusCodeEntry:
        """
        Resolve a canonical name or alias to its entry.

        Matching is exact and case-sensitive. An alias resolves to the very
        same entry object as its canonical name.

        Raises:
            UnknownNameError: If nothing matches.
        """
        if not isinstance(name, str):
            raise UnknownNameError(name)

        entry = self._by_name.get(name)
        if entry is None:
            canonical = self._aliases.get(name)
            if canonical is None:
                raise UnknownNameError(name)
            entry = self._by_name[canonical]
        return entry

    def by_code(self, code: int) -> StatusCodeEntry:
        """
        Resolve a numeric code to its canonical entry.

        Code 0 is a real entry (the UNKNOWN sentinel) and resolves normally.

        Raises:
            UnknownCodeError: If the code is not in the table.
        """
        # bool is an int subclass, and 404.0 would hash like 404
        if isinstance(code, bool) or not isinstance(code, int):
            raise UnknownCodeError(code)

        try:
            return self._by_code[code]
        except KeyError:
            raise UnknownCodeError(code) from None

    @staticmethod
    def class_of(code: int) -> StatusClass:
        """Classify any integer; never raises. See status_codes.class_of."""
        return class_of(code)

    def all(self) -> Tuple[StatusCodeEntry, ...]:
        """
        Every entry, ascending by code.

        The tuple can be iterated any number of times and cannot be
        modified, so callers may hold on to it.
        """
        return self._entries

    # ─────────────────────────────────────────────────────────────────────
    # DOCUMENTATION HELPERS
    # ─────────────────────────────────────────────────────────────────────

    @property
    def aliases(self) -> Mapping[str, str]:
        """Read-only alias -> canonical name mapping."""
        return self._aliases

    def aliases_of(self, name: str) -> Tuple[str, ...]:
        """Aliases of the entry `name` resolves to, sorted."""
        canonical = self.by_name(name).canonical_name
        return tuple(sorted(
            alias for alias, target in self._aliases.items() if target == canonical
        ))

    def names_for(self, code: int) -> Tuple[str, ...]:
        """Canonical name first, then aliases."""
        entry = self.by_code(code)
        return (entry.canonical_name,) + self.aliases_of(entry.canonical_name)

    def by_class(self, status_class: StatusClass) -> Tuple[StatusCodeEntry, ...]:
        """Entries of one class, ascending by code."""
        return tuple(
            entry for entry in self._entries if entry.status_class is status_class
        )

    # ─────────────────────────────────────────────────────────────────────
    # CONTAINER PROTOCOL
    # ─────────────────────────────────────────────────────────────────────

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[StatusCodeEntry]:
        return iter(self._entries)

    def __contains__(self, item) -> bool:
        if isinstance(item, str):
            return item in self._by_name or item in self._aliases
        if isinstance(item, int) and not isinstance(item, bool):
            return item in self._by_code
        return False

    def __repr__(self) -> str:
        return f"StatusCodeRegistry({len(self._entries)} codes, {len(self._aliases)} aliases)"


# =============================================================================
# DEFAULT REGISTRY
# =============================================================================
# Built eagerly at import. Everything below delegates to it.
# =============================================================================

default_registry = StatusCodeRegistry.from_table(STATUS_TABLE, ALIASES)


def by_name(name: str) -> StatusCodeEntry:
    """Look up a name in the default registry."""
    return default_registry.by_name(name)


def by_code(code: int) -> StatusCodeEntry:
    """Look up a code in the default registry."""
    return default_registry.by_code(code)


def all_entries() -> Tuple[StatusCodeEntry, ...]:
    """All default registry entries, ascending by code."""
    return default_registry.all()


# =============================================================================
# MODULE SUMMARY
# =============================================================================
#
# 1. StatusCodeRegistry: validated once, read-only afterwards
# 2. by_name / by_code: explicit errors, never silent defaults
# 3. class_of: pure classification, never fails
# 4. all(): restartable ascending view for listings and docs
# 5. default_registry: built from STATUS_TABLE + ALIASES at import
# =============================================================================
