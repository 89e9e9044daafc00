"""
Core request building and middleware execution.
"""
from .request_builder import RequestBuilder, build_url, serialize_json
from .middleware import run_with_middleware

__all__ = [
    "RequestBuilder",
    "build_url",
    "serialize_json",
    "run_with_middleware",
]
