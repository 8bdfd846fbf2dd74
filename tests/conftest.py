import httpx
import pytest
from batchfetch.cache import store as cache_store
from batchfetch.cache.store import ResultCache
from batchfetch.core import config

@pytest.fixture(autouse=True)
def setup_test_environment():
    """Setup test environment: real transports unless a test opts into mock mode"""
    # Store original values
    original_use_mock = config.settings.USE_MOCK
    original_backend = config.settings.FETCH_BACKEND

    config.settings.USE_MOCK = False
    config.settings.FETCH_BACKEND = "async"
    cache_store.cache.clear()

    yield

    # Restore original values
    config.settings.USE_MOCK = original_use_mock
    config.settings.FETCH_BACKEND = original_backend
    cache_store.cache.clear()

@pytest.fixture
def fresh_cache():
    return ResultCache()

@pytest.fixture
def make_client():
    """
    Build an AsyncClient backed by httpx.MockTransport.
    `handler` receives the request and returns a Response or raises a transport error.
    """
    def _make(handler):
        return httpx.AsyncClient(transport=httpx.MockTransport(handler), timeout=30)
    return _make
