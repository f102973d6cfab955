"""Render OAuth 2.0 protocol errors as HTTP responses.

The renderer never mutates a response handed in by the caller. Every step
(set a header, append the body, set the status) produces a new
``httpx.Response`` and only the final one is returned.
"""

import json
import logging
from typing import TYPE_CHECKING, Any, Dict, Mapping, Optional

import httpx

from .auth import build_challenge, detect_auth_scheme
from .codes import ErrorType
from .config import DEFAULT_ERROR_CONTENT_TYPE, get_config_value

if TYPE_CHECKING:
    from .errors import ProtocolError

logger = logging.getLogger(__name__)


def get_http_headers(
    error: "ProtocolError",
    request: Optional[httpx.Request] = None,
    *,
    server_params: Optional[Mapping[str, Any]] = None,
    config: Optional[Any] = None,
) -> Dict[str, str]:
    """Get all headers that have to be sent with the error response.

    ``WWW-Authenticate`` is only ever computed for ``invalid_client`` and only
    when the original request is supplied and reveals the client's scheme.
    ``server_params`` belong to the request and are ignored when no
    ``request`` is given.

    Args:
        error: The protocol error being rendered.
        request: Original inbound request, if available.
        server_params: Server-side parameters that accompany the request.
        config: Optional configuration object or dict.

    Returns:
        Dict[str, str]: Header name to value.
    """
    headers = {
        "Content-Type": get_config_value(
            config, "AXIOMS_ERROR_CONTENT_TYPE", DEFAULT_ERROR_CONTENT_TYPE
        ),
    }

    if error.error_type == ErrorType.INVALID_CLIENT:
        scheme = detect_auth_scheme(request, server_params, config)
        if scheme is not None:
            headers["WWW-Authenticate"] = build_challenge(scheme, config)

    return headers


def build_redirect_uri(
    redirect_uri: str, payload: Mapping[str, str], use_fragment: bool = False
) -> str:
    """Merge error parameters into a redirect URI.

    Parameters already present in the query survive unless the payload uses
    the same name. A query parameter given more than once keeps only its last
    value. In fragment mode the merged set goes into the fragment and
    the query is left as it was.

    Raises:
        httpx.InvalidURL: If the redirect URI cannot be parsed.
    """
    url = httpx.URL(redirect_uri)
    existing = dict(url.params.multi_items())
    merged = httpx.QueryParams({**existing, **payload})

    if use_fragment:
        return str(url.copy_with(fragment=str(merged)))
    return str(url.copy_with(params=merged))


def _with_changes(
    response: httpx.Response,
    *,
    status_code: Optional[int] = None,
    headers: Optional[httpx.Headers] = None,
    content: Optional[bytes] = None,
) -> httpx.Response:
    """Return a copy of ``response`` with the given parts replaced."""
    new_headers = httpx.Headers(response.headers if headers is None else headers)
    # content is always the decoded body; httpx recomputes the length
    new_headers.pop("content-length", None)
    new_headers.pop("content-encoding", None)
    try:
        request = response.request
    except RuntimeError:
        request = None
    return httpx.Response(
        status_code=response.status_code if status_code is None else status_code,
        headers=new_headers,
        content=response.read() if content is None else content,
        request=request,
        extensions=response.extensions,
    )


def with_header(response: httpx.Response, name: str, value: str) -> httpx.Response:
    headers = httpx.Headers(response.headers)
    headers[name] = value
    return _with_changes(response, headers=headers)


def with_body(response: httpx.Response, body: bytes) -> httpx.Response:
    """Return a copy of ``response`` with ``body`` appended to its content."""
    return _with_changes(response, content=response.read() + body)


def with_status(response: httpx.Response, status_code: int) -> httpx.Response:
    return _with_changes(response, status_code=status_code)


def generate_http_response(
    error: "ProtocolError",
    response: Optional[httpx.Response] = None,
    use_fragment: bool = False,
    *,
    request: Optional[httpx.Request] = None,
    server_params: Optional[Mapping[str, Any]] = None,
    config: Optional[Any] = None,
) -> httpx.Response:
    """Generate the HTTP response for a protocol error.

    The JSON body is written even when a ``Location`` header is set for
    redirect delivery.

    Args:
        error: The protocol error being rendered.
        response: Response in progress; a fresh one is used when omitted.
        use_fragment: Put redirect parameters in the URI fragment instead of
            the query string.
        request: Original inbound request, used for ``invalid_client``.
        server_params: Server-side parameters that accompany the request.
        config: Optional configuration object or dict.

    Returns:
        httpx.Response: The final response to send to the client.

    Raises:
        httpx.InvalidURL: If the error's redirect URI cannot be parsed.
    """
    if response is None:
        response = httpx.Response(200)

    headers = get_http_headers(
        error, request, server_params=server_params, config=config
    )
    payload = error.payload

    if error.redirect_uri is not None:
        headers["Location"] = build_redirect_uri(
            error.redirect_uri, payload, use_fragment
        )

    for name, value in headers.items():
        response = with_header(response, name, value)

    response = with_body(response, json.dumps(payload.to_dict()).encode("utf-8"))

    logger.info(
        f"Rendered OAuth error {error.error_type.value} "
        f"(code={int(error.code)}, status={error.http_status_code}"
        f"{', redirect' if error.redirect_uri is not None else ''})"
    )
    if error.hint is not None:
        logger.debug(f"OAuth error {error.error_type.value} hint: {error.hint}")

    return with_status(response, error.http_status_code)
