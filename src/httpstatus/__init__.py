"""
=============================================================================
HTTPSTATUS - Canonical HTTP Status Code Registry
=============================================================================

One collision-free table of HTTP status codes, with lookups by code and by
name, for HTTP clients, servers, routers and log pipelines to share.

=============================================================================
PACKAGE LAYOUT
=============================================================================

    httpstatus/
    ├── __init__.py       # Public API (this file)
    ├── __main__.py       # python -m httpstatus
    ├── status_codes.py   # StatusClass, class_of(), the static table
    ├── entry.py          # StatusCodeEntry record
    ├── errors.py         # UnknownNameError, UnknownCodeError, ...
    ├── registry.py       # StatusCodeRegistry + default registry
    ├── constants.py      # HTTPStatus IntEnum
    └── config.py         # CLI configuration

=============================================================================
QUICK START
=============================================================================

    from httpstatus import HTTPStatus, by_code, by_name, class_of

    by_code(404).reason_phrase              # "Not Found"
    by_name("UNPROCESSABLE_ENTITY").code    # 422 (alias)
    class_of(503)                           # StatusClass.SERVER_ERROR

    HTTPStatus.CREATED == 201               # True
    HTTPStatus.CREATED.phrase               # "Created"

=============================================================================
"""

__version__ = "1.0.0"

from .status_codes import StatusClass, class_of
from .entry import StatusCodeEntry
from .errors import (
    RegistryError,
    UnknownNameError,
    UnknownCodeError,
    RegistryConfigurationError,
)
from .registry import (
    StatusCodeRegistry,
    default_registry,
    by_name,
    by_code,
    all_entries,
)
from .constants import HTTPStatus


__all__ = [
    # Version
    "__version__",

    # Table
    "StatusClass",
    "class_of",
    "StatusCodeEntry",

    # Registry
    "StatusCodeRegistry",
    "default_registry",
    "by_name",
    "by_code",
    "all_entries",

    # Constants
    "HTTPStatus",

    # Errors
    "RegistryError",
    "UnknownNameError",
    "UnknownCodeError",
    "RegistryConfigurationError",
]
