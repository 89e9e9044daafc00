"""
Middleware pipeline for request builders.

Two stages run strictly in order before the request continuation:

1. header stage: called with the builder's live header mapping
2. body stage: called with the builder's live body

Each stage is awaited before the next one starts. A failing stage propagates
its exception and the continuation is never invoked.
"""
import inspect
import logging
from typing import TYPE_CHECKING, Any, Awaitable, Callable, Union

if TYPE_CHECKING:
    from .request_builder import RequestBuilder

logger = logging.getLogger("fetch_request_builder.middleware")


async def resolve(result: Union[Awaitable[Any], Any]) -> Any:
    """Await the result if it is awaitable, otherwise return it."""
    if inspect.isawaitable(result):
        return await result
    return result


async def run_with_middleware(
    builder: "RequestBuilder",
    continuation: Callable[[], Union[Awaitable[Any], Any]],
) -> Any:
    """Run the registered middlewares, then the continuation."""
    middlewares = builder.middlewares

    if middlewares.header:
        logger.debug("run_with_middleware: running header middleware")
        await resolve(middlewares.header(builder.headers))

    if middlewares.body:
        logger.debug("run_with_middleware: running body middleware")
        await resolve(middlewares.body(builder.body))

    return await resolve(continuation())
