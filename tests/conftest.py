"""
Shared fixtures for fetch_request_builder tests.
"""
import pytest
from unittest.mock import AsyncMock, MagicMock

from fetch_request_builder.config import get_settings
from fetch_request_builder.factory import request_factory


BASE_URL = "https://api.x.com"


@pytest.fixture(autouse=True)
def clear_settings_cache(monkeypatch):
    """Settings are cached; isolate each test from the environment."""
    monkeypatch.delenv("FETCH_REQUEST_BUILDER_VERBOSE", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def mock_response():
    """Opaque response returned by the mock transport."""
    response = MagicMock()
    response.status_code = 200
    return response


@pytest.fixture
def mock_transport(mock_response):
    """Fetch-compatible transport returning mock_response."""
    return AsyncMock(return_value=mock_response)


@pytest.fixture
def request_binder(mock_transport):
    """Binder over BASE_URL using the mock transport."""
    return request_factory(BASE_URL, "v1", transport=mock_transport, verbose=False)


@pytest.fixture
def builder(request_binder):
    """Builder bound to /users."""
    return request_binder("/users")
