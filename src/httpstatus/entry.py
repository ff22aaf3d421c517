"""
Status code entries.

A StatusCodeEntry is one row of the registry: the code, its canonical
name, the reason phrase and a short description. Entries are frozen, so a
registry handing them out cannot be corrupted by its callers.

    HTTP/1.1 404 Not Found
             ─── ─────────
              │      │
              │      └── reason_phrase
              └───────── code
"""

from dataclasses import dataclass
from typing import Optional

from .status_codes import StatusClass, class_of


MDN_STATUS_URL = "https://developer.mozilla.org/en-US/docs/Web/HTTP/Status/{code}"


@dataclass(frozen=True)
class StatusCodeEntry:
    """
    Immutable record for a single status code.

    The class is not stored: it is always derived from the code, so an
    entry can never claim to be a 2xx while carrying a 404.

        >>> entry = StatusCodeEntry(404, "NOT_FOUND", "Not Found")
        >>> entry.status_line
        '404 Not Found'
        >>> entry.is_client_error
        True
    """

    code: int
    canonical_name: str
    reason_phrase: str
    description: str = ""

    @property
    def status_class(self) -> StatusClass:
        return class_of(self.code)

    @property
    def is_informational(self) -> bool:
        return self.status_class is StatusClass.INFORMATIONAL

    @property
    def is_success(self) -> bool:
        return self.status_class is StatusClass.SUCCESS

    @property
    def is_redirect(self) -> bool:
        return self.status_class is StatusClass.REDIRECTION

    @property
    def is_client_error(self) -> bool:
        return self.status_class is StatusClass.CLIENT_ERROR

    @property
    def is_server_error(self) -> bool:
        return self.status_class is StatusClass.SERVER_ERROR

    @property
    def is_error(self) -> bool:
        """True for 4xx and 5xx. Nonstandard codes are not errors here."""
        return self.is_client_error or self.is_server_error

    @property
    def status_line(self) -> str:
        """Code and reason phrase as they appear on an HTTP status line."""
        return f"{self.code} {self.reason_phrase}"

    @property
    def documentation_url(self) -> Optional[str]:
        """MDN reference page, or None for nonstandard codes."""
        if self.status_class is StatusClass.NONSTANDARD:
            return None
        return MDN_STATUS_URL.format(code=self.code)

    def to_dict(self) -> dict:
        """
        Convert to a dictionary for JSON output.

        Includes the derived class, which asdict() would leave out.
        """
        return {
            "code": self.code,
            "name": self.canonical_name,
            "phrase": self.reason_phrase,
            "class": self.status_class.label,
            "description": self.description,
            "documentation_url": self.documentation_url,
        }

    def __str__(self) -> str:
        return self.status_line
