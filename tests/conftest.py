import httpx
import pytest
from starlette.testclient import TestClient

from app.config import Settings, get_settings
from app.main import app
from app.routers.proxy import get_http_client


class FakeTMDB:
    """Records outbound requests and answers them with a canned response."""

    def __init__(self):
        self.requests = []
        self.status_code = 200
        self.payload = {"page": 1, "results": []}
        self.error = None

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if isinstance(self.payload, (bytes, str)):
            return httpx.Response(self.status_code, content=self.payload)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture
def tmdb():
    return FakeTMDB()


@pytest.fixture
def settings():
    return Settings(tmdb_api_key="test-key")


@pytest.fixture
def client(tmdb, settings):
    http = httpx.AsyncClient(transport=httpx.MockTransport(tmdb))
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_http_client] = lambda: http
    with TestClient(app) as test_client:
        yield test_client
        test_client.portal.call(http.aclose)
    app.dependency_overrides.clear()
