"""
Configuration for fetch_request_builder.
"""
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .types import BodyMiddleware, HeaderMiddleware


# Default values
DEFAULT_CONTENT_TYPE = "application/json"
DEFAULT_TIMEOUT = 30.0


@dataclass
class MiddlewareConfig:
    """Middleware slots for a request.

    - header: called with the live header mapping before the request
    - body: called with the live body before the request

    A slot left as None (or holding anything that is not callable) does not
    replace a previously registered middleware.
    """

    header: Optional[HeaderMiddleware] = None
    body: Optional[BodyMiddleware] = None


def _is_ssl_verify_disabled_by_env() -> bool:
    """
    Check if SSL verification is disabled via environment variables.

    Returns True if any of these are set:
    - NODE_TLS_REJECT_UNAUTHORIZED=0
    - SSL_CERT_VERIFY=0
    """
    node_tls = os.environ.get("NODE_TLS_REJECT_UNAUTHORIZED", "")
    ssl_cert_verify = os.environ.get("SSL_CERT_VERIFY", "")
    return node_tls == "0" or ssl_cert_verify == "0"


class RequestBuilderSettings(BaseSettings):
    """Settings loaded from FETCH_REQUEST_BUILDER_* environment variables."""

    model_config = SettingsConfigDict(env_prefix="FETCH_REQUEST_BUILDER_")

    # Pretty print each dispatched request
    verbose: bool = False

    # Default httpx transport
    timeout: float = DEFAULT_TIMEOUT
    verify_ssl: bool = True

    @property
    def effective_verify_ssl(self) -> bool:
        return self.verify_ssl and not _is_ssl_verify_disabled_by_env()


@lru_cache()
def get_settings() -> RequestBuilderSettings:
    """Get cached settings instance."""
    return RequestBuilderSettings()
