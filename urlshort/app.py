import logging
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, HTTPException, Request, Response

from .config import settings
from .routing import find_upstream

logger = logging.getLogger(__name__)

HOP_BY_HOP_HEADERS = {
    b'connection',
    b'keep-alive',
    b'proxy-authentication',
    b'proxy-authorization',
    b'te',
    b'trailers',
    b'transfer-encoding',
    b'upgrade',
    b'host',
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown logic."""
    #---- Startup ----
    if not hasattr(app.state, 'http_client'):
        app.state.http_client = httpx.AsyncClient(timeout=settings.upstream_timeout)

    try:
        yield
    finally:
        #---- Shutdown ----
        if hasattr(app.state, 'http_client'):
            await app.state.http_client.aclose()
            del app.state.http_client

# fallback for paths missing from the redirect table
fallback_app = FastAPI(lifespan=lifespan)


@fallback_app.api_route(
    path="/{path:path}",
    methods=["GET", "POST", "PUT", "DELETE", "PATCH", "OPTIONS", "HEAD"],
)
async def proxy(path: str, request: Request):
    upstream, suffix = find_upstream("/" + path, settings.routes)
    if not upstream:
        raise HTTPException(status_code=404, detail="No upstream route found")

    url = upstream.rstrip("/") + suffix
    headers = [
        (k, v) for k, v in request.headers.raw if k.lower() not in HOP_BY_HOP_HEADERS
    ]

    body = await request.body()

    try:
        resp = await request.app.state.http_client.request(
            request.method,
            url,
            headers=headers,
            content=body,
            params=request.query_params
        )
    except httpx.HTTPError as exc:
        logger.warning("Upstream %s failed: %s", url, exc)
        raise HTTPException(status_code=502, detail=str(exc))

    filtered_headers = {
        k: v for k, v in resp.headers.items()
        if k.lower() not in { "content-encoding", "transfer-encoding", "connection" }
    }

    return Response(
        content=resp.content,
        status_code=resp.status_code,
        headers=filtered_headers
    )
