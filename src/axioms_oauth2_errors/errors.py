"""OAuth 2.0 protocol errors following RFC 6749.

Every failure scenario the authorization server reports is a ``ProtocolError``
built by exactly one of the factory functions below. All scenarios share the
same shape and differ only by their fixed ``code``, ``error_type``, status and
message:

- invalid_grant (HTTP 400): grant is invalid, expired, revoked or mismatched
- unsupported_grant_type (HTTP 400): grant type not supported
- invalid_request (HTTP 400): missing, duplicated or malformed parameter
- invalid_client (HTTP 401): client authentication failed
- invalid_scope (HTTP 400): requested scope is invalid, unknown or malformed
- invalid_credentials (HTTP 401): resource owner credentials were incorrect
- server_error (HTTP 500): unexpected condition inside the server
- invalid_refresh_token (HTTP 400, reported as invalid_request)
- access_denied (HTTP 401): resource owner or server denied the request
"""

from typing import Any, Mapping, Optional, Union

import httpx
from box import Box

from .codes import ALLOWED_STATUS_CODES, ErrorCode, ErrorType
from .response import generate_http_response, get_http_headers


class ProtocolError(Exception):
    """An OAuth 2.0 failure, ready to be rendered as an HTTP response.

    Instances are read-only and compare equal when all their fields match.
    Prefer the factory functions in this module over calling the constructor.

    Args:
        message: Human readable description, sent in the ``message`` field.
        code: Stable scenario identifier, never sent to the client.
        error_type: Wire identifier, sent in the ``error`` field.
        http_status_code: HTTP status code to send (400, 401 or 500).
        hint: Optional guidance on what caused the failure.
        redirect_uri: Optional URI to redirect the user agent back to.

    Raises:
        ValueError: If any field violates the error invariants.
    """

    def __init__(
        self,
        message: str,
        code: Union[ErrorCode, int],
        error_type: Union[ErrorType, str],
        http_status_code: int = 400,
        *,
        hint: Optional[str] = None,
        redirect_uri: Optional[str] = None,
    ):
        if not message:
            raise ValueError("ProtocolError message must not be empty")

        if http_status_code not in ALLOWED_STATUS_CODES:
            raise ValueError(
                f"Invalid HTTP status code {http_status_code} for ProtocolError, "
                f"expected one of {sorted(ALLOWED_STATUS_CODES)}"
            )

        self._message = message
        self._code = ErrorCode(code)
        self._error_type = ErrorType(error_type)
        self._http_status_code = http_status_code
        self._hint = hint
        self._redirect_uri = redirect_uri
        super().__init__(message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def code(self) -> ErrorCode:
        return self._code

    @property
    def error_type(self) -> ErrorType:
        return self._error_type

    @property
    def http_status_code(self) -> int:
        return self._http_status_code

    @property
    def hint(self) -> Optional[str]:
        return self._hint

    @property
    def redirect_uri(self) -> Optional[str]:
        return self._redirect_uri

    @property
    def payload(self) -> Box:
        """JSON payload sent to the client.

        Returns:
            Box: Immutable (frozen) Box with ``error``, ``message`` and,
            when set, ``hint``.
        """
        payload = {"error": self._error_type.value, "message": self._message}
        if self._hint is not None:
            payload["hint"] = self._hint
        return Box(payload, frozen_box=True)

    def get_http_headers(
        self,
        request: Optional[httpx.Request] = None,
        *,
        server_params: Optional[Mapping[str, Any]] = None,
        config: Optional[Any] = None,
    ):
        """Get all headers that have to be sent with the error response.

        See :func:`axioms_oauth2_errors.response.get_http_headers`.
        """
        return get_http_headers(
            self, request, server_params=server_params, config=config
        )

    def generate_http_response(
        self,
        response: Optional[httpx.Response] = None,
        use_fragment: bool = False,
        *,
        request: Optional[httpx.Request] = None,
        server_params: Optional[Mapping[str, Any]] = None,
        config: Optional[Any] = None,
    ) -> httpx.Response:
        """Generate the HTTP response for this error.

        See :func:`axioms_oauth2_errors.response.generate_http_response`.
        """
        return generate_http_response(
            self,
            response,
            use_fragment,
            request=request,
            server_params=server_params,
            config=config,
        )

    def _fields(self):
        return (
            self._message,
            self._code,
            self._error_type,
            self._http_status_code,
            self._hint,
            self._redirect_uri,
        )

    def __eq__(self, other):
        if not isinstance(other, ProtocolError):
            return NotImplemented
        return self._fields() == other._fields()

    def __hash__(self):
        return hash(self._fields())

    def __reduce__(self):
        message, code, error_type, status, hint, redirect_uri = self._fields()
        return (
            _rebuild,
            (type(self), message, code, error_type, status, hint, redirect_uri),
        )

    def __repr__(self) -> str:
        return (
            f"ProtocolError(code={int(self._code)}, "
            f"error_type={self._error_type.value!r}, "
            f"http_status_code={self._http_status_code}, "
            f"message={self._message!r}, hint={self._hint!r}, "
            f"redirect_uri={self._redirect_uri!r})"
        )


def _rebuild(cls, message, code, error_type, status, hint, redirect_uri):
    return cls(message, code, error_type, status, hint=hint, redirect_uri=redirect_uri)


def invalid_grant() -> ProtocolError:
    """Invalid grant error."""
    return ProtocolError(
        "The provided authorization grant is invalid, expired, revoked, does not "
        "match the redirection URI used in the authorization request, or was "
        "issued to another client.",
        ErrorCode.INVALID_GRANT,
        ErrorType.INVALID_GRANT,
        400,
        hint="Check the `grant_type` parameter",
    )


def unsupported_grant_type() -> ProtocolError:
    """Unsupported grant type error."""
    return ProtocolError(
        "The authorization grant type is not supported by the authorization server.",
        ErrorCode.UNSUPPORTED_GRANT_TYPE,
        ErrorType.UNSUPPORTED_GRANT_TYPE,
        400,
        hint="Check the `grant_type` parameter",
    )


def invalid_request(parameter: str, *, hint: Optional[str] = None) -> ProtocolError:
    """Invalid request error.

    Args:
        parameter: Name of the missing or invalid request parameter.
        hint: Explicit hint, used verbatim instead of the generated one.
    """
    if hint is None:
        hint = f"Check the `{parameter}` parameter"

    return ProtocolError(
        "The request is missing a required parameter, includes an invalid "
        "parameter value, includes a parameter more than once, or is otherwise "
        "malformed.",
        ErrorCode.INVALID_REQUEST,
        ErrorType.INVALID_REQUEST,
        400,
        hint=hint,
    )


def invalid_client() -> ProtocolError:
    """Client authentication failed."""
    return ProtocolError(
        "Client authentication failed",
        ErrorCode.INVALID_CLIENT,
        ErrorType.INVALID_CLIENT,
        401,
    )


def invalid_scope(scope: str, *, redirect_uri: Optional[str] = None) -> ProtocolError:
    """Invalid scope error.

    Args:
        scope: The offending scope.
        redirect_uri: URI to redirect the user agent back to, if any.
    """
    return ProtocolError(
        "The requested scope is invalid, unknown, or malformed",
        ErrorCode.INVALID_SCOPE,
        ErrorType.INVALID_SCOPE,
        400,
        hint=f"Check the `{scope}` scope",
        redirect_uri=redirect_uri,
    )


def invalid_credentials() -> ProtocolError:
    return ProtocolError(
        "The user credentials were incorrect.",
        ErrorCode.INVALID_CREDENTIALS,
        ErrorType.INVALID_CREDENTIALS,
        401,
    )


def server_error(hint: str) -> ProtocolError:
    """Server error.

    The hint describes the internal failure and is folded into the message;
    it must not carry secrets since it is sent to the client.
    """
    return ProtocolError(
        "The authorization server encountered an unexpected condition which "
        f"prevented it from fulfilling the request: {hint}",
        ErrorCode.SERVER_ERROR,
        ErrorType.SERVER_ERROR,
        500,
    )


def invalid_refresh_token(*, hint: Optional[str] = None) -> ProtocolError:
    """Invalid refresh token, reported to the client as ``invalid_request``."""
    return ProtocolError(
        "The refresh token is invalid.",
        ErrorCode.INVALID_REFRESH_TOKEN,
        ErrorType.INVALID_REQUEST,
        400,
        hint=hint,
    )


def access_denied(
    *, hint: Optional[str] = None, redirect_uri: Optional[str] = None
) -> ProtocolError:
    """Access denied by the resource owner or the authorization server.

    Args:
        hint: Optional guidance passed through as-is.
        redirect_uri: URI to redirect the user agent back to, if any.
    """
    return ProtocolError(
        "The resource owner or authorization server denied the request.",
        ErrorCode.ACCESS_DENIED,
        ErrorType.ACCESS_DENIED,
        401,
        hint=hint,
        redirect_uri=redirect_uri,
    )
