# Centralized pytest configuration file (fixtures, hooks, plugins, etc.)
import pytest
from asgi_lifespan import LifespanManager
from fastapi import FastAPI, Request
from httpx import AsyncClient, ASGITransport

from urlshort.app import fallback_app
from urlshort.config import settings, RouteRule
from urlshort.main import create_app


REDIRECTS = {
    '/urlshort': 'https://github.com/gophercises/urlshort',
    '/urlshort-final': 'https://github.com/gophercises/urlshort/tree/solution',
    '/docs': 'https://example.com/docs?lang=en',
}


#----Routes overrides for tests----
@pytest.fixture(scope='session', autouse=True)
def set_routes():
    settings.routes = [
        RouteRule(prefix='/hello', upstream='http://upstream'),
        RouteRule(prefix='/echo', upstream='http://upstream'),
    ]


@pytest.fixture
def upstream_app() -> FastAPI:
    app = FastAPI()     # mock upstream app for tests

    @app.get("/")
    async def hello(request: Request):  # tests path+method forwarding and response body
        return {
            "message": "hello from upstream",
            "received_headers": dict(request.headers),
            "query": dict(request.query_params),
        }

    @app.post("/")
    async def echo(payload: dict): # tests body forwarding and proxy correctness
        return payload

    return app


@pytest.fixture
async def upstream_client(upstream_app: FastAPI):
    client = AsyncClient(
        transport=ASGITransport(app=upstream_app),
        base_url="http://upstream"
    )
    yield client
    await client.aclose()


@pytest.fixture
async def shortener_client(upstream_client: AsyncClient):
    """Client for the redirect service, with the fallback's upstream mocked via ASGITransport"""
    application = create_app(REDIRECTS)

    # Lifespan is forwarded through the redirect handler to the fallback app
    async with LifespanManager(application):
        await fallback_app.state.http_client.aclose()
        fallback_app.state.http_client = upstream_client

        async with AsyncClient(
                transport=ASGITransport(app=application),
                base_url="http://shortener") as client:
            yield client
