import pytest
from fastapi.testclient import TestClient

from app.catalog.router import get_books_client
from app.config import Settings, get_settings
from app.main import create_app
from tests.helpers import StubBooksClient


@pytest.fixture(autouse=True)
def reset_settings_cache():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def settings():
    return Settings(_env_file=None, MAX_UPSTREAM_CALLS=5)


@pytest.fixture()
def stub_upstream():
    return StubBooksClient()


@pytest.fixture()
def client(settings, stub_upstream):
    app = create_app(settings)
    app.dependency_overrides[get_books_client] = lambda: stub_upstream
    with TestClient(app) as test_client:
        yield test_client
