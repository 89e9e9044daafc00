"""
Factory for request builders.

`request_factory` captures a base URL and API version and returns a binder.
Every binder call produces a fresh RequestBuilder for one path:

    request = request_factory("https://api.example.com", "v1")
    response = await request("/users").with_bearer_authorization(token).get()
"""
import logging
from typing import Any, Callable, Optional

from .core.request_builder import RequestBuilder
from .exceptions import ConfigError
from .types import Transport, type_of

logger = logging.getLogger("fetch_request_builder.factory")

RequestBinder = Callable[[Any], RequestBuilder]


def request_factory(
    base_url: Any,
    api_version: Optional[str] = None,
    transport: Optional[Transport] = None,
    verbose: Optional[bool] = None,
) -> RequestBinder:
    """
    Create a binder producing request builders for base_url.

    Args:
        base_url: Root URL; paths are appended to it verbatim.
        api_version: Informational API version (e.g. "v1"), exposed on each
            builder for the transport to use.
        transport: Fetch-compatible callable `transport(url, params)`.
            Defaults to a shared HttpxTransport.
        verbose: Print every dispatched request. None defers to settings.

    Raises:
        ConfigError: base_url is not a string.
    """
    if type_of(base_url).is_not_string():
        raise ConfigError("base_url must be of type string")

    logger.debug(f"request_factory: base_url={base_url}, api_version={api_version}")

    def bind(path: Any) -> RequestBuilder:
        return RequestBuilder(
            base_url,
            api_version,
            path,
            transport=transport,
            verbose=verbose,
        )

    return bind
