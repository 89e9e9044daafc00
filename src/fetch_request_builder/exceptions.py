"""
Exceptions raised by fetch_request_builder.

All of them are raised synchronously from the offending call, before any
builder state is touched.
"""
from typing import Any


class RequestBuilderError(Exception):
    """Base class for request builder errors."""

    code = "REQUEST_BUILDER_ERROR"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.name = type(self).__name__


class ConfigError(RequestBuilderError, TypeError):
    """Error thrown when the factory receives an invalid base URL."""

    code = "CONFIG_ERROR"


class InvalidHeaderError(RequestBuilderError):
    """Error thrown when a header key or value is not a string."""

    code = "INVALID_HEADER"

    def __init__(self, key: Any, value: Any) -> None:
        super().__init__(f"Invalid Header for the request. Found {key}/{value}")
        self.key = key
        self.value = value


class InvalidBodyError(RequestBuilderError):
    """Error thrown when the body is null or undefined."""

    code = "INVALID_BODY"

    def __init__(self, body: Any) -> None:
        super().__init__(f"Invalid body. Found {body}")
        self.body = body
