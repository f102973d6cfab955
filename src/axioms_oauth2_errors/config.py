"""Axioms OAuth2 error response configuration."""

# ruff: noqa: N803
# Allow uppercase argument names for config (they match environment variable names)

import logging
from typing import Any, Dict, List, Optional

logger = logging.getLogger(__name__)

DEFAULT_AUTH_REALM = "OAuth"
DEFAULT_AUTH_SCHEMES = ("Bearer", "MAC", "Basic")
DEFAULT_BASIC_AUTH_USER_PARAMS = ("REMOTE_USER",)
DEFAULT_ERROR_CONTENT_TYPE = "application/json"


class ErrorResponseConfig:
    """Configuration for rendering OAuth 2.0 error responses.

    All configuration variables follow the AXIOMS_* naming convention, so the
    same settings object (or a plain dict) used by other Axioms packages can be
    passed straight to the renderer.

    Example:
        Basic::

            from axioms_oauth2_errors.config import ErrorResponseConfig
            config = ErrorResponseConfig(
                AXIOMS_AUTH_REALM="api.example.com",
                AXIOMS_BASIC_AUTH_USER_PARAMS=["REMOTE_USER", "AUTH_USER"],
            )
            # List all config values
            print(config.to_dict())
    """

    def __init__(
        self,
        AXIOMS_AUTH_REALM: str = DEFAULT_AUTH_REALM,
        AXIOMS_AUTH_SCHEMES: Optional[List[str]] = None,
        AXIOMS_BASIC_AUTH_USER_PARAMS: Optional[List[str]] = None,
        AXIOMS_ERROR_CONTENT_TYPE: str = DEFAULT_ERROR_CONTENT_TYPE,
    ):
        """Initialize error response configuration.

        Args:
            AXIOMS_AUTH_REALM: Realm advertised in the WWW-Authenticate challenge
                (default: "OAuth")
            AXIOMS_AUTH_SCHEMES: Authorization header prefixes recognised when
                echoing the client's scheme, checked in order
                (default: ["Bearer", "MAC", "Basic"])
            AXIOMS_BASIC_AUTH_USER_PARAMS: Server parameter names through which
                the server hands over a basic-auth username
                (default: ["REMOTE_USER"])
            AXIOMS_ERROR_CONTENT_TYPE: Content type of the error body
                (default: "application/json")
        """
        self.AXIOMS_AUTH_REALM = AXIOMS_AUTH_REALM
        self.AXIOMS_AUTH_SCHEMES = AXIOMS_AUTH_SCHEMES or list(DEFAULT_AUTH_SCHEMES)
        self.AXIOMS_BASIC_AUTH_USER_PARAMS = AXIOMS_BASIC_AUTH_USER_PARAMS or list(
            DEFAULT_BASIC_AUTH_USER_PARAMS
        )
        self.AXIOMS_ERROR_CONTENT_TYPE = AXIOMS_ERROR_CONTENT_TYPE

        self._validate()

    def _validate(self):
        """Validate configuration values."""
        if not self.AXIOMS_AUTH_REALM:
            raise ValueError("AXIOMS_AUTH_REALM must not be empty")

        if '"' in self.AXIOMS_AUTH_REALM:
            raise ValueError("AXIOMS_AUTH_REALM must not contain double quotes")

        if not self.AXIOMS_ERROR_CONTENT_TYPE:
            raise ValueError("AXIOMS_ERROR_CONTENT_TYPE must not be empty")

        if not all(self.AXIOMS_AUTH_SCHEMES):
            raise ValueError("AXIOMS_AUTH_SCHEMES must not contain empty schemes")

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary.

        Returns:
            Dictionary containing all configuration values.
        """
        return {
            "AXIOMS_AUTH_REALM": self.AXIOMS_AUTH_REALM,
            "AXIOMS_AUTH_SCHEMES": self.AXIOMS_AUTH_SCHEMES,
            "AXIOMS_BASIC_AUTH_USER_PARAMS": self.AXIOMS_BASIC_AUTH_USER_PARAMS,
            "AXIOMS_ERROR_CONTENT_TYPE": self.AXIOMS_ERROR_CONTENT_TYPE,
        }

    def __repr__(self) -> str:
        """String representation of config."""
        items = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"ErrorResponseConfig({items})"


def get_config_value(config: Optional[Any], key: str, default: Any = None) -> Any:
    """Get configuration value from config object.

    Supports both dict-like and object attribute access patterns. A value of
    ``None`` is treated as unset and yields the default.

    Args:
        config: Configuration object or dict.
        key: Configuration key to retrieve.
        default: Default value if key not found.

    Returns:
        Configuration value or default.
    """
    if config is None:
        return default

    if isinstance(config, dict):
        value = config.get(key, default)
    else:
        value = getattr(config, key, default)

    if value is None:
        logger.debug(f"Config key {key} is unset, using default")
        return default
    return value
