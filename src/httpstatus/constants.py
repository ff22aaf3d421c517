"""
Symbolic status code constants.

HTTPStatus is an IntEnum generated from the default registry, so the
constants and the registry can never drift apart:

    >>> HTTPStatus.NOT_FOUND
    <HTTPStatus.NOT_FOUND: 404>
    >>> HTTPStatus.NOT_FOUND == 404
    True
    >>> HTTPStatus.NOT_FOUND.phrase
    'Not Found'

Aliases are enum aliases: they are the same member, not a second constant
that happens to share a value:

    >>> HTTPStatus.PAYLOAD_TOO_LARGE is HTTPStatus.CONTENT_TOO_LARGE
    True
"""

from enum import IntEnum

from .entry import StatusCodeEntry
from .registry import default_registry
from .status_codes import StatusClass


class _RegistryBackedStatus(IntEnum):
    """Member behaviour for HTTPStatus; every property reads the registry."""

    @property
    def entry(self) -> StatusCodeEntry:
        return default_registry.by_code(int(self))

    @property
    def phrase(self) -> str:
        return self.entry.reason_phrase

    @property
    def description(self) -> str:
        return self.entry.description

    @property
    def status_class(self) -> StatusClass:
        return self.entry.status_class

    @property
    def is_informational(self) -> bool:
        return self.entry.is_informational

    @property
    def is_success(self) -> bool:
        return self.entry.is_success

    @property
    def is_redirect(self) -> bool:
        return self.entry.is_redirect

    @property
    def is_client_error(self) -> bool:
        return self.entry.is_client_error

    @property
    def is_server_error(self) -> bool:
        return self.entry.is_server_error

    @property
    def is_error(self) -> bool:
        return self.entry.is_error


def _member_definitions():
    # Canonical names first so they become the members; aliases declared
    # afterwards with the same value become enum aliases of them.
    members = [(entry.canonical_name, entry.code) for entry in default_registry.all()]
    for alias in sorted(default_registry.aliases):
        members.append((alias, default_registry.by_name(alias).code))
    return members


HTTPStatus = _RegistryBackedStatus("HTTPStatus", _member_definitions(), module=__name__)
