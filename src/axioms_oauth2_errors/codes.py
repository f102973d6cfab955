"""OAuth 2.0 error identifiers (RFC 6749 section 5.2 and 4.1.2.1).

``ErrorType`` values travel on the wire in the ``error`` field. ``ErrorCode``
values never leave the server; they identify the failure scenario for
logging and programmatic dispatch and must never be renumbered. New scenarios
take the next unused number.
"""

from enum import Enum, IntEnum


class ErrorType(str, Enum):
    """Wire-visible ``error`` identifiers."""

    INVALID_GRANT = "invalid_grant"
    UNSUPPORTED_GRANT_TYPE = "unsupported_grant_type"
    INVALID_REQUEST = "invalid_request"
    INVALID_CLIENT = "invalid_client"
    INVALID_SCOPE = "invalid_scope"
    INVALID_CREDENTIALS = "invalid_credentials"
    SERVER_ERROR = "server_error"
    ACCESS_DENIED = "access_denied"

    def __str__(self) -> str:
        return self.value


class ErrorCode(IntEnum):
    """Stable scenario identifiers."""

    INVALID_GRANT = 1
    UNSUPPORTED_GRANT_TYPE = 2
    INVALID_REQUEST = 3
    INVALID_CLIENT = 4
    INVALID_SCOPE = 5
    INVALID_CREDENTIALS = 6
    SERVER_ERROR = 7
    INVALID_REFRESH_TOKEN = 8
    ACCESS_DENIED = 9


ALLOWED_STATUS_CODES = frozenset([400, 401, 500])
