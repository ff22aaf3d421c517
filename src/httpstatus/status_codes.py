"""
=============================================================================
HTTP STATUS CODE TABLE (RFC 9110)
=============================================================================

This module holds the one static source table every registry is built
from: code, canonical name, reason phrase and a one-line description for
each status code, plus the alias table for alternate spellings.

=============================================================================
STATUS CODE CATEGORIES
=============================================================================

HTTP status codes are 3-digit numbers grouped by the first digit:

    ┌────────────────────────────────────────────────────────────────────┐
    │                      STATUS CODE CATEGORIES                        │
    ├────────┬───────────────────────────────────────────────────────────┤
    │  1xx   │ INFORMATIONAL: Request received, continuing process      │
    │  2xx   │ SUCCESS: Request received, understood, accepted          │
    │  3xx   │ REDIRECTION: Further action needed                       │
    │  4xx   │ CLIENT ERROR: Problem with the request                   │
    │  5xx   │ SERVER ERROR: Problem with the server                    │
    ├────────┼───────────────────────────────────────────────────────────┤
    │  0     │ NONSTANDARD: "unknown" sentinel (no response at all)     │
    │  599   │ NONSTANDARD: Network Connect Timeout (proxies)           │
    └────────┴───────────────────────────────────────────────────────────┘

=============================================================================
CANONICAL NAMES VS ALIASES
=============================================================================

Several codes have been renamed over the years:

    413  Request Entity Too Large  (RFC 2616)
         Payload Too Large         (RFC 7231)
         Content Too Large         (RFC 9110)   <── canonical

Each code has exactly ONE canonical name (the current RFC 9110 spelling).
Older spellings are kept in ALIASES and resolve to the same entry, so
code written against any of them keeps working.

=============================================================================
"""

from enum import Enum
from typing import Dict, Tuple


class StatusClass(Enum):
    """
    The class of a status code, as given by its first digit.

    The value is the display label used in listings:

        >>> StatusClass.CLIENT_ERROR.label
        'Client Error'
    """

    INFORMATIONAL = "Informational"
    SUCCESS = "Success"
    REDIRECTION = "Redirection"
    CLIENT_ERROR = "Client Error"
    SERVER_ERROR = "Server Error"
    NONSTANDARD = "Nonstandard"

    @property
    def label(self) -> str:
        return self.value


# First digit -> class. Anything not listed here is NONSTANDARD.
_CLASS_BY_DIGIT = {
    1: StatusClass.INFORMATIONAL,
    2: StatusClass.SUCCESS,
    3: StatusClass.REDIRECTION,
    4: StatusClass.CLIENT_ERROR,
    5: StatusClass.SERVER_ERROR,
}

UNKNOWN_CODE = 0
NETWORK_CONNECT_TIMEOUT_CODE = 599


def class_of(code: int) -> StatusClass:
    """
    Classify a status code by its leading digit.

    Never raises. The two library-specific codes (0 and 599) and anything
    outside 100-599 are NONSTANDARD:

        >>> class_of(404)
        <StatusClass.CLIENT_ERROR: 'Client Error'>
        >>> class_of(599)
        <StatusClass.NONSTANDARD: 'Nonstandard'>
    """
    if code in (UNKNOWN_CODE, NETWORK_CONNECT_TIMEOUT_CODE):
        return StatusClass.NONSTANDARD
    if not 100 <= code <= 599:
        return StatusClass.NONSTANDARD
    return _CLASS_BY_DIGIT[code // 100]


# =============================================================================
# THE TABLE
# =============================================================================
#
# (code, canonical name, reason phrase, description)
#
# Ordered by code. The registry sorts anyway, but keeping the source sorted
# makes review of additions easier.
# =============================================================================

STATUS_TABLE: Tuple[Tuple[int, str, str, str], ...] = (
    # Nonstandard sentinel
    (0, "UNKNOWN", "Unknown",
     "Unknown or undefined status, e.g. the request never got a response."),

    # 1xx Informational
    (100, "CONTINUE", "Continue",
     "The request headers were received; the client should send the body."),
    (101, "SWITCHING_PROTOCOLS", "Switching Protocols",
     "The server is switching to the protocol named in the Upgrade header."),
    (102, "PROCESSING", "Processing",
     "WebDAV: the request was received and is still being processed."),
    (103, "EARLY_HINTS", "Early Hints",
     "Preload the resources in the Link header while the response is prepared."),

    # 2xx Success
    (200, "OK", "OK",
     "The request succeeded."),
    (201, "CREATED", "Created",
     "The request succeeded and one or more new resources were created."),
    (202, "ACCEPTED", "Accepted",
     "The request was accepted for processing, which has not completed."),
    (203, "NON_AUTHORITATIVE_INFORMATION", "Non-Authoritative Information",
     "Success, but the payload was modified by a transforming proxy."),
    (204, "NO_CONTENT", "No Content",
     "The request succeeded and there is no content to return."),
    (205, "RESET_CONTENT", "Reset Content",
     "The request succeeded; the client should reset the document view."),
    (206, "PARTIAL_CONTENT", "Partial Content",
     "Only the part of the resource asked for by the Range header is sent."),
    (207, "MULTI_STATUS", "Multi-Status",
     "WebDAV: status information for multiple independent operations."),
    (208, "ALREADY_REPORTED", "Already Reported",
     "WebDAV: the members of a binding were already enumerated."),
    (226, "IM_USED", "IM Used",
     "The response is the result of instance manipulations on the resource."),

    # 3xx Redirection
    (300, "MULTIPLE_CHOICES", "Multiple Choices",
     "The request has more than one possible response."),
    (301, "MOVED_PERMANENTLY", "Moved Permanently",
     "The resource moved permanently to the URL in the Location header."),
    (302, "FOUND", "Found",
     "The resource is temporarily at the URL in the Location header."),
    (303, "SEE_OTHER", "See Other",
     "Fetch the response from another URI with GET."),
    (304, "NOT_MODIFIED", "Not Modified",
     "The cached representation is still valid."),
    (305, "USE_PROXY", "Use Proxy",
     "Deprecated: the resource must be accessed through a proxy."),
    (306, "SWITCH_PROXY", "Switch Proxy",
     "No longer used; reserved."),
    (307, "TEMPORARY_REDIRECT", "Temporary Redirect",
     "Temporary redirect that preserves the request method."),
    (308, "PERMANENT_REDIRECT", "Permanent Redirect",
     "Permanent redirect that preserves the request method."),

    # 4xx Client Error
    (400, "BAD_REQUEST", "Bad Request",
     "The request is malformed and cannot be processed."),
    (401, "UNAUTHORIZED", "Unauthorized",
     "Authentication is required and has failed or not been provided."),
    (402, "PAYMENT_REQUIRED", "Payment Required",
     "Reserved for future use by digital payment systems."),
    (403, "FORBIDDEN", "Forbidden",
     "The client is known but not allowed to access the resource."),
    (404, "NOT_FOUND", "Not Found",
     "The server cannot find the requested resource."),
    (405, "METHOD_NOT_ALLOWED", "Method Not Allowed",
     "The request method is not supported by the target resource."),
    (406, "NOT_ACCEPTABLE", "Not Acceptable",
     "No representation matches the request's Accept headers."),
    (407, "PROXY_AUTHENTICATION_REQUIRED", "Proxy Authentication Required",
     "The client must authenticate with the proxy first."),
    (408, "REQUEST_TIMEOUT", "Request Timeout",
     "The server timed out waiting for the request."),
    (409, "CONFLICT", "Conflict",
     "The request conflicts with the current state of the resource."),
    (410, "GONE", "Gone",
     "The resource existed but has been permanently removed."),
    (411, "LENGTH_REQUIRED", "Length Required",
     "The request must include a Content-Length header."),
    (412, "PRECONDITION_FAILED", "Precondition Failed",
     "A precondition in the request headers evaluated to false."),
    (413, "CONTENT_TOO_LARGE", "Content Too Large",
     "The request body is larger than the server will process."),
    (414, "URI_TOO_LONG", "URI Too Long",
     "The request URI is longer than the server will interpret."),
    (415, "UNSUPPORTED_MEDIA_TYPE", "Unsupported Media Type",
     "The media type of the request body is not supported."),
    (416, "RANGE_NOT_SATISFIABLE", "Range Not Satisfiable",
     "The range in the Range header cannot be fulfilled."),
    (417, "EXPECTATION_FAILED", "Expectation Failed",
     "The expectation in the Expect header cannot be met."),
    (418, "IM_A_TEAPOT", "I'm a teapot",
     "RFC 2324: the server refuses to brew coffee because it is a teapot."),
    (421, "MISDIRECTED_REQUEST", "Misdirected Request",
     "The request reached a server that cannot produce a response for it."),
    (422, "UNPROCESSABLE_CONTENT", "Unprocessable Content",
     "The request is well formed but semantically invalid."),
    (423, "LOCKED", "Locked",
     "WebDAV: the resource is locked."),
    (424, "FAILED_DEPENDENCY", "Failed Dependency",
     "WebDAV: the request depended on another request that failed."),
    (425, "TOO_EARLY", "Too Early",
     "The server will not risk processing a request that might be replayed."),
    (426, "UPGRADE_REQUIRED", "Upgrade Required",
     "The client must switch to the protocol in the Upgrade header."),
    (428, "PRECONDITION_REQUIRED", "Precondition Required",
     "The origin server requires the request to be conditional."),
    (429, "TOO_MANY_REQUESTS", "Too Many Requests",
     "The client sent too many requests in a given time (rate limiting)."),
    (431, "REQUEST_HEADER_FIELDS_TOO_LARGE", "Request Header Fields Too Large",
     "One or more header fields, or all of them together, are too large."),
    (451, "UNAVAILABLE_FOR_LEGAL_REASONS", "Unavailable For Legal Reasons",
     "Access is denied as a consequence of a legal demand."),

    # 5xx Server Error
    (500, "INTERNAL_SERVER_ERROR", "Internal Server Error",
     "The server hit an unexpected condition."),
    (501, "NOT_IMPLEMENTED", "Not Implemented",
     "The server does not support the functionality required."),
    (502, "BAD_GATEWAY", "Bad Gateway",
     "A gateway or proxy received an invalid response upstream."),
    (503, "SERVICE_UNAVAILABLE", "Service Unavailable",
     "The server is overloaded or down for maintenance."),
    (504, "GATEWAY_TIMEOUT", "Gateway Timeout",
     "A gateway or proxy did not get a timely response upstream."),
    (505, "HTTP_VERSION_NOT_SUPPORTED", "HTTP Version Not Supported",
     "The HTTP version used in the request is not supported."),
    (506, "VARIANT_ALSO_NEGOTIATES", "Variant Also Negotiates",
     "Transparent content negotiation resulted in a circular reference."),
    (507, "INSUFFICIENT_STORAGE", "Insufficient Storage",
     "WebDAV: the server cannot store the representation."),
    (508, "LOOP_DETECTED", "Loop Detected",
     "WebDAV: the server detected an infinite loop."),
    (510, "NOT_EXTENDED", "Not Extended",
     "Further extensions to the request are required."),
    (511, "NETWORK_AUTHENTICATION_REQUIRED", "Network Authentication Required",
     "The client must authenticate to gain network access (captive portal)."),

    # Nonstandard
    (599, "NETWORK_CONNECT_TIMEOUT_ERROR", "Network Connect Timeout Error",
     "Nonstandard: a proxy timed out connecting to the upstream server."),
)


# =============================================================================
# ALIASES
# =============================================================================
#
# alias -> canonical name. Aliases never get entries of their own.
# =============================================================================

ALIASES: Dict[str, str] = {
    "UNKNOWN_STATUS": "UNKNOWN",
    "NO_STATUS": "UNKNOWN",
    "Accepted": "ACCEPTED",
    "NON_AUTHORITATIVE_INFO": "NON_AUTHORITATIVE_INFORMATION",
    "MOVED_TEMPORARILY": "FOUND",
    "PAYLOAD_TOO_LARGE": "CONTENT_TOO_LARGE",
    "REQUEST_ENTITY_TOO_LARGE": "CONTENT_TOO_LARGE",
    "REQUEST_URI_TOO_LONG": "URI_TOO_LONG",
    "REQUESTED_RANGE_NOT_SATISFIABLE": "RANGE_NOT_SATISFIABLE",
    "UNPROCESSABLE_ENTITY": "UNPROCESSABLE_CONTENT",
    "HEADER_FIELDS_TOO_LARGE": "REQUEST_HEADER_FIELDS_TOO_LARGE",
}


# =============================================================================
# MODULE SUMMARY
# =============================================================================
#
# 1. StatusClass + class_of(): classification by leading digit
# 2. STATUS_TABLE: the single source of truth, one row per code
# 3. ALIASES: old/alternate spellings mapped onto canonical names
#
# ADDING A CODE:
# - Add one row to STATUS_TABLE
# - Put any alternate spellings in ALIASES, never as a second row
# - The registry validates both at import time
# =============================================================================
