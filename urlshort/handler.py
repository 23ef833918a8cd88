import logging
from collections.abc import Mapping
from pathlib import Path
from types import MappingProxyType

from starlette.responses import RedirectResponse
from starlette.types import ASGIApp, Receive, Scope, Send

from .loader import build_map, load_file, parse_json, parse_yaml

logger = logging.getLogger(__name__)


class MapHandler:
    """
    ASGI app that redirects mapped paths and hands everything else to a fallback.

    Lookup is an exact match on the request path. A hit answers 302 Found with
    the destination in the Location header; a miss (and every non-HTTP scope,
    lifespan included) is passed to `fallback` unchanged.
    """
    def __init__(self, paths_to_urls: Mapping[str, str], fallback: ASGIApp):
        self.paths_to_urls = MappingProxyType(dict(paths_to_urls))
        self.fallback = fallback

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.fallback(scope, receive, send)
            return

        path = scope["path"]
        dest = self.paths_to_urls.get(path)
        if dest is None:
            logger.debug("No redirect for %s, using fallback", path)
            await self.fallback(scope, receive, send)
            return

        logger.debug("Redirecting %s -> %s", path, dest)
        response = RedirectResponse(dest, status_code=302)
        await response(scope, receive, send)


def map_handler(paths_to_urls: Mapping[str, str], fallback: ASGIApp) -> MapHandler:
    return MapHandler(paths_to_urls, fallback)


def yaml_handler(yaml_bytes: bytes | str, fallback: ASGIApp) -> MapHandler:
    """
    Build a MapHandler from a YAML list of path/url pairs.

    The only errors raised are RedirectConfigError for undecodable YAML.
    """
    return MapHandler(build_map(parse_yaml(yaml_bytes)), fallback)


def json_handler(json_bytes: bytes | str, fallback: ASGIApp) -> MapHandler:
    return MapHandler(build_map(parse_json(json_bytes)), fallback)


def file_handler(path: str | Path, fallback: ASGIApp) -> MapHandler:
    return MapHandler(build_map(load_file(path)), fallback)
