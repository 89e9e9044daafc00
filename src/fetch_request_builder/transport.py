"""
Fetch-compatible transport backed by httpx.
"""
import logging
import math
from typing import Any, Dict, Optional

import httpx

from .config import RequestBuilderSettings, get_settings
from .types import RequestParameters

logger = logging.getLogger("fetch_request_builder.transport")


class HttpxTransport:
    """Async callable `transport(url, params) -> httpx.Response`.

    The response is returned as-is: status codes are not checked and the body
    is not parsed.
    """

    def __init__(
        self,
        httpx_client: Optional[httpx.AsyncClient] = None,
        settings: Optional[RequestBuilderSettings] = None,
    ):
        if httpx_client is not None:
            self._client = httpx_client
        else:
            settings = settings or get_settings()
            self._client = httpx.AsyncClient(
                timeout=settings.timeout,
                verify=settings.effective_verify_ssl,
            )
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    async def __call__(self, url: str, params: RequestParameters) -> httpx.Response:
        if self._closed:
            raise RuntimeError("Transport has been closed")

        method = params.get("method", "GET")
        headers = params.get("headers") or {}
        logger.debug(f"HttpxTransport: {method} {url}")

        return await self._client.request(
            method=method,
            url=url,
            headers=headers,
            **_body_kwargs(params),
        )

    async def aclose(self) -> None:
        """Close the underlying httpx client."""
        self._closed = True
        await self._client.aclose()

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()


def _body_kwargs(params: RequestParameters) -> Dict[str, Any]:
    """Map a request body onto the matching httpx keyword."""
    if "body" not in params:
        return {}
    body = params["body"]
    if isinstance(body, (str, bytes, bytearray)):
        return {"content": body}
    if isinstance(body, dict):
        # form fields
        return {"data": body}
    return {"content": to_text(body)}


def to_text(value: Any) -> str:
    """Convert a body to text the way fetch's String() coercion does."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
    if isinstance(value, (list, tuple)):
        return ",".join("" if item is None else to_text(item) for item in value)
    return str(value)


_default_transport: Optional[HttpxTransport] = None


def get_default_transport() -> HttpxTransport:
    """Return the shared transport, creating it on first use."""
    global _default_transport
    if _default_transport is None or _default_transport.closed:
        _default_transport = HttpxTransport()
    return _default_transport
