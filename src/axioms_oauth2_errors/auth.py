"""Authentication scheme detection for ``invalid_client`` challenges.

RFC 6749, section 5.2: if the client attempted to authenticate via the
``Authorization`` request header field, the authorization server MUST respond
with HTTP 401 and include a ``WWW-Authenticate`` response header field
matching the authentication scheme used by the client.
"""

import logging
from typing import Any, Mapping, Optional

import httpx

from .config import (
    DEFAULT_AUTH_REALM,
    DEFAULT_AUTH_SCHEMES,
    DEFAULT_BASIC_AUTH_USER_PARAMS,
    get_config_value,
)

logger = logging.getLogger(__name__)


def detect_auth_scheme(
    request: Optional[httpx.Request],
    server_params: Optional[Mapping[str, Any]] = None,
    config: Optional[Any] = None,
) -> Optional[str]:
    """Determine which authentication scheme the client tried to use.

    Basic credentials handed over by the server (for example ``REMOTE_USER``
    in a WSGI environ) win over the ``Authorization`` header. Otherwise the
    first ``Authorization`` header value is matched against the configured
    scheme prefixes, in order.

    Args:
        request: Original inbound request, or None when unavailable.
        server_params: Server-side parameters that accompany the request.
        config: Optional configuration object or dict.

    Returns:
        Optional[str]: ``"Basic"``, ``"Bearer"``, ``"MAC"`` (or another
        configured scheme), or None when no scheme can be determined.
    """
    if request is None:
        return None

    user_params = get_config_value(
        config, "AXIOMS_BASIC_AUTH_USER_PARAMS", DEFAULT_BASIC_AUTH_USER_PARAMS
    )
    if server_params:
        for param in user_params:
            if server_params.get(param) is not None:
                logger.debug(f"Basic credentials found in server parameter {param}")
                return "Basic"

    auth_headers = request.headers.get_list("authorization")
    if not auth_headers:
        return None

    schemes = get_config_value(config, "AXIOMS_AUTH_SCHEMES", DEFAULT_AUTH_SCHEMES)
    for scheme in schemes:
        if auth_headers[0].startswith(scheme):
            logger.debug(f"Authorization header uses the {scheme} scheme")
            return scheme

    logger.debug("Authorization header uses an unrecognised scheme")
    return None


def build_challenge(scheme: str, config: Optional[Any] = None) -> str:
    """Build a ``WWW-Authenticate`` header value for the given scheme.

    Example:
        Basic::

            build_challenge("Bearer")  # 'Bearer realm="OAuth"'
    """
    realm = get_config_value(config, "AXIOMS_AUTH_REALM", DEFAULT_AUTH_REALM)
    return f'{scheme} realm="{realm}"'
