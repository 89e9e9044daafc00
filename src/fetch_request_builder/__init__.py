"""
Chainable HTTP request builder with pre-flight middlewares.

Builds the headers, body and method of a single request through fluent calls,
then dispatches it through a fetch-compatible transport (httpx by default).
"""
from .types import (
    HTTP_METHOD,
    UNDEFINED,
    HttpMethod,
    RequestParameters,
    Transport,
    TypeKind,
    TypeProbe,
    classify,
    type_of,
)
from .exceptions import (
    RequestBuilderError,
    ConfigError,
    InvalidHeaderError,
    InvalidBodyError,
)
from .config import (
    DEFAULT_CONTENT_TYPE,
    MiddlewareConfig,
    RequestBuilderSettings,
    get_settings,
)
from .core.request_builder import RequestBuilder, build_url
from .core.middleware import run_with_middleware
from .transport import HttpxTransport, get_default_transport
from .factory import request_factory

__all__ = [
    # Types
    "HTTP_METHOD",
    "UNDEFINED",
    "HttpMethod",
    "RequestParameters",
    "Transport",
    "TypeKind",
    "TypeProbe",
    "classify",
    "type_of",
    # Errors
    "RequestBuilderError",
    "ConfigError",
    "InvalidHeaderError",
    "InvalidBodyError",
    # Config
    "DEFAULT_CONTENT_TYPE",
    "MiddlewareConfig",
    "RequestBuilderSettings",
    "get_settings",
    # Builder
    "RequestBuilder",
    "build_url",
    "run_with_middleware",
    # Transport
    "HttpxTransport",
    "get_default_transport",
    # Factory
    "request_factory",
]

__version__ = "0.1.0"
