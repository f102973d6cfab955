"""Axioms OAuth2 Errors - RFC 6749 error responses for authorization servers.

This package classifies OAuth 2.0 protocol failures and renders them as
wire-correct HTTP responses: JSON error bodies, redirect delivery through the
query string or fragment, and ``WWW-Authenticate`` challenges for failed
client authentication.
"""

from .auth import build_challenge, detect_auth_scheme
from .codes import ALLOWED_STATUS_CODES, ErrorCode, ErrorType
from .config import ErrorResponseConfig
from .errors import (
    ProtocolError,
    access_denied,
    invalid_client,
    invalid_credentials,
    invalid_grant,
    invalid_refresh_token,
    invalid_request,
    invalid_scope,
    server_error,
    unsupported_grant_type,
)
from .response import build_redirect_uri, generate_http_response, get_http_headers

__all__ = [
    "ALLOWED_STATUS_CODES",
    "ErrorCode",
    "ErrorResponseConfig",
    "ErrorType",
    "ProtocolError",
    "access_denied",
    "build_challenge",
    "build_redirect_uri",
    "detect_auth_scheme",
    "generate_http_response",
    "get_http_headers",
    "invalid_client",
    "invalid_credentials",
    "invalid_grant",
    "invalid_refresh_token",
    "invalid_request",
    "invalid_scope",
    "server_error",
    "unsupported_grant_type",
]

try:
    from ._version import version as __version__
except ImportError:
    __version__ = "unknown"
