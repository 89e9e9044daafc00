"""
Request builder for fetch_request_builder.

A RequestBuilder accumulates headers, a body and middlewares through chainable
calls, then dispatches a single request through a fetch-compatible transport.
"""
import json
import logging
import math
from decimal import Decimal
from fractions import Fraction
from typing import Any, Dict, Optional

from ..config import DEFAULT_CONTENT_TYPE, MiddlewareConfig, get_settings
from ..console import mask_headers, print_request
from ..exceptions import InvalidBodyError, InvalidHeaderError
from ..types import (
    HTTP_METHOD,
    UNDEFINED,
    HttpMethod,
    RequestParameters,
    Transport,
    type_of,
)
from .middleware import run_with_middleware

logger = logging.getLogger("fetch_request_builder.request_builder")


def build_url(base_url: str, path: Any) -> str:
    """Concatenate base URL and path; a non-string path yields the base URL."""
    if type_of(path).is_string():
        return f"{base_url}{path}"
    return base_url


def _json_safe(value: Any) -> Any:
    """Map numbers onto what JSON.stringify emits; non-finite becomes null."""
    if isinstance(value, bool):
        return value
    if isinstance(value, (Decimal, Fraction)):
        if isinstance(value, Decimal) and value.is_nan():
            return None
        value = float(value)
    if isinstance(value, float):
        return value if math.isfinite(value) else None
    if isinstance(value, dict):
        return {key: _json_safe(item) for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(item) for item in value]
    return value


def serialize_json(body: Any) -> str:
    """Serialize body the way JSON.stringify does (compact separators)."""
    return json.dumps(
        _json_safe(body),
        separators=(",", ":"),
        ensure_ascii=False,
        allow_nan=False,
    )


class RequestBuilder:
    """Mutable description of one pending HTTP request.

    Every `with_*` call returns the same instance so calls can be chained:

        await (
            request("/users")
            .with_bearer_authorization(token)
            .with_body({"name": "test"})
            .post_json()
        )

    An instance is meant to be owned by a single logical request. Nothing
    prevents reuse after a dispatch, but there is no reset.
    """

    def __init__(
        self,
        base_url: str,
        api_version: Optional[str],
        path: Any,
        transport: Optional[Transport] = None,
        verbose: Optional[bool] = None,
    ):
        self._base_url = base_url
        self._api_version = api_version
        self._path = path
        self._headers: Dict[str, str] = {}
        self._body: Any = None
        self._middlewares = MiddlewareConfig()
        self._transport = transport
        self._verbose = verbose

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_version(self) -> Optional[str]:
        return self._api_version

    @property
    def path(self) -> Any:
        return self._path

    @property
    def headers(self) -> Dict[str, str]:
        """Live header mapping."""
        return self._headers

    @property
    def body(self) -> Any:
        return self._body

    @property
    def middlewares(self) -> MiddlewareConfig:
        return self._middlewares

    # -- fluent mutators -------------------------------------------------

    def with_header(self, key: Any, value: Any) -> "RequestBuilder":
        """Set a header. Both key and value must be strings."""
        if type_of(key).is_not_string() or type_of(value).is_not_string():
            raise InvalidHeaderError(key, value)
        # Copy-on-write: a mapping already handed to a dispatch stays intact
        self._headers = {**self._headers, key: value}
        logger.debug(f"with_header: {key}={mask_headers({key: value})[key]}")
        return self

    def with_authorization(self, token: Any) -> "RequestBuilder":
        """Set the Authorization header to token."""
        return self.with_header("Authorization", token)

    def with_bearer_authorization(self, token: Any) -> "RequestBuilder":
        """Set the Authorization header to `Bearer <token>`."""
        return self.with_authorization(f"Bearer {token}")

    def with_body(self, body: Any) -> "RequestBuilder":
        """Set the body. Anything except None/UNDEFINED is accepted."""
        if type_of(body).is_undefined_or_null():
            raise InvalidBodyError(body)
        self._body = body
        logger.debug(f"with_body: type={type(body).__name__}")
        return self

    def with_content_type(self, content_type: Any) -> "RequestBuilder":
        """Set the Content-Type header."""
        return self.with_header("Content-Type", content_type)

    def with_middleware(
        self,
        config: Optional[MiddlewareConfig] = None,
        *,
        header: Any = UNDEFINED,
        body: Any = UNDEFINED,
    ) -> "RequestBuilder":
        """Register header and/or body middlewares.

        Slots may be given through a MiddlewareConfig or as keywords; keywords
        win. A slot whose value is not callable is ignored and the existing
        middleware for that slot is kept.
        """
        if config is not None:
            if header is UNDEFINED:
                header = config.header
            if body is UNDEFINED:
                body = config.body

        for slot, candidate in (("header", header), ("body", body)):
            probe = type_of(candidate)
            if probe.is_function():
                setattr(self._middlewares, slot, candidate)
            elif not probe.is_undefined_or_null():
                logger.warning(
                    f"with_middleware: ignoring non-callable {slot} middleware "
                    f"of type {type(candidate).__name__}"
                )
        return self

    # -- parameter assembly ----------------------------------------------

    def build_parameters(self, method: HttpMethod) -> RequestParameters:
        """Prepare the parameters handed to the transport.

        The body is included only when one is set and a string Content-Type
        header is present. JSON content types get the body serialized.
        """
        content_type = self._headers.get("Content-Type")
        is_body_included = (
            not type_of(self._body).is_undefined_or_null()
            and type_of(content_type).is_string()
        )

        parameters: RequestParameters = {
            "method": method,
            "headers": dict(self._headers),
        }
        if is_body_included:
            parameters["body"] = (
                serialize_json(self._body)
                if content_type.startswith("application/json")
                else self._body
            )
        return parameters

    # -- dispatch --------------------------------------------------------

    def _get_transport(self) -> Transport:
        if self._transport is None:
            # imported lazily so builders with an injected transport never
            # create an httpx client
            from ..transport import get_default_transport

            self._transport = get_default_transport()
        return self._transport

    def _is_verbose(self) -> bool:
        if self._verbose is None:
            return get_settings().verbose
        return self._verbose

    async def _call(self, method: HttpMethod, path: Any) -> Any:
        url = build_url(self._base_url, path)
        transport = self._get_transport()

        def send():
            parameters = self.build_parameters(method)
            logger.debug(
                f"RequestBuilder._call: method={method}, url={url}, "
                f"headers={mask_headers(parameters['headers'])}, "
                f"has_body={'body' in parameters}"
            )
            if self._is_verbose():
                print_request(method, url, parameters["headers"], parameters.get("body"))
            return transport(url, parameters)

        return await run_with_middleware(self, send)

    async def get(self, path: Optional[str] = None) -> Any:
        """GET request."""
        return await self._call(HTTP_METHOD["GET"], path or self._path)

    async def post(self, path: Optional[str] = None) -> Any:
        """POST request."""
        return await self._call(HTTP_METHOD["POST"], path or self._path)

    async def post_json(self, path: Optional[str] = None) -> Any:
        """POST request with `Content-Type: application/json`.

        The header is set once the coroutine runs, not when it is created.
        """
        return await self.with_content_type(DEFAULT_CONTENT_TYPE).post(path or self._path)

    async def put(self, path: Optional[str] = None) -> Any:
        """PUT request."""
        return await self._call(HTTP_METHOD["PUT"], path or self._path)

    async def put_json(self, path: Optional[str] = None) -> Any:
        """PUT request with `Content-Type: application/json`.

        The header is set once the coroutine runs, not when it is created.
        """
        return await self.with_content_type(DEFAULT_CONTENT_TYPE).put(path or self._path)

    async def delete(self, path: Optional[str] = None) -> Any:
        """DELETE request."""
        return await self._call(HTTP_METHOD["DELETE"], path or self._path)

    def __repr__(self) -> str:
        return (
            f"RequestBuilder(base_url={self._base_url!r}, "
            f"api_version={self._api_version!r}, path={self._path!r}, "
            f"headers={mask_headers(self._headers)!r})"
        )
