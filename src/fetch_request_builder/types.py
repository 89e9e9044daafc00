"""
Type definitions for fetch_request_builder.
"""
import enum
import math
from dataclasses import dataclass
from decimal import Decimal
from fractions import Fraction
from typing import (
    Any,
    Awaitable,
    Callable,
    Dict,
    Literal,
    Protocol,
    TypedDict,
    Union,
)


# HTTP methods
HttpMethod = Literal["GET", "POST", "PUT", "DELETE"]

HTTP_METHOD: Dict[str, HttpMethod] = {
    "GET": "GET",
    "PUT": "PUT",
    "POST": "POST",
    "DELETE": "DELETE",
}


class _Undefined:
    """Marker for a value that was never supplied."""

    _instance = None

    def __new__(cls) -> "_Undefined":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "undefined"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


class TypeKind(str, enum.Enum):
    """Runtime category of a value."""

    NULL = "null"
    UNDEFINED = "undefined"
    ARRAY = "array"
    NAN = "NaN"
    SYMBOL = "symbol"
    STRING = "string"
    OBJECT = "object"
    NUMBER = "number"
    BOOLEAN = "boolean"
    FUNCTION = "function"


def classify(value: Any) -> TypeKind:
    """Classify a value. First match wins."""
    if value is None:
        return TypeKind.NULL
    if value is UNDEFINED:
        return TypeKind.UNDEFINED
    if isinstance(value, (list, tuple)):
        return TypeKind.ARRAY
    if isinstance(value, float) and math.isnan(value):
        return TypeKind.NAN
    if isinstance(value, Decimal) and value.is_nan():
        return TypeKind.NAN
    # bool is an int subclass, check it first
    if isinstance(value, bool):
        return TypeKind.BOOLEAN
    if isinstance(value, (int, float, Decimal, Fraction)):
        return TypeKind.NUMBER
    if isinstance(value, str):
        return TypeKind.STRING
    if isinstance(value, enum.Enum):
        return TypeKind.SYMBOL
    if callable(value):
        return TypeKind.FUNCTION
    return TypeKind.OBJECT


@dataclass(frozen=True)
class TypeProbe:
    """Capability probe over a classified value.

    Example:
        type_of("someRandomString").is_string()  # True
        type_of("someRandomString").is_number()  # False
    """

    kind: TypeKind

    def is_null(self) -> bool:
        return self.kind is TypeKind.NULL

    def is_undefined(self) -> bool:
        return self.kind is TypeKind.UNDEFINED

    def is_nan(self) -> bool:
        return self.kind is TypeKind.NAN

    def is_array(self) -> bool:
        return self.kind is TypeKind.ARRAY

    def is_symbol(self) -> bool:
        return self.kind is TypeKind.SYMBOL

    def is_string(self) -> bool:
        return self.kind is TypeKind.STRING

    def is_object(self) -> bool:
        return self.kind is TypeKind.OBJECT

    def is_number(self) -> bool:
        return self.kind is TypeKind.NUMBER

    def is_boolean(self) -> bool:
        return self.kind is TypeKind.BOOLEAN

    def is_function(self) -> bool:
        return self.kind is TypeKind.FUNCTION

    def is_not_string(self) -> bool:
        return self.kind is not TypeKind.STRING

    def is_undefined_or_null(self) -> bool:
        return self.kind in (TypeKind.NULL, TypeKind.UNDEFINED)


def type_of(value: Any) -> TypeProbe:
    """Return the type probe for a value."""
    return TypeProbe(classify(value))


class RequestParameters(TypedDict, total=False):
    """Parameters handed to the transport."""

    method: HttpMethod
    headers: Dict[str, str]
    body: Any


class Transport(Protocol):
    """Fetch-compatible transport interface."""

    def __call__(self, url: str, params: RequestParameters) -> Awaitable[Any]:
        """Perform the request."""
        ...


# A middleware may be a coroutine function or a plain callable
HeaderMiddleware = Callable[[Dict[str, str]], Union[Awaitable[Any], Any]]
BodyMiddleware = Callable[[Any], Union[Awaitable[Any], Any]]
