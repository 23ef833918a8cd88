import logging
from collections.abc import Mapping

from .app import fallback_app
from .config import Settings, settings
from .handler import MapHandler
from .loader import build_map, load_file
from .log import setup_logging

logger = logging.getLogger(__name__)


def load_redirects(config: Settings) -> dict[str, str]:
    """Redirect table from the configured file, else the in-memory defaults."""
    if config.redirect_file:
        return build_map(load_file(config.redirect_file))
    return build_map(config.redirects)


def create_app(paths_to_urls: Mapping[str, str] | None = None) -> MapHandler:
    if paths_to_urls is None:
        paths_to_urls = load_redirects(settings)

    handler = MapHandler(paths_to_urls, fallback=fallback_app)
    logger.info("Serving %d redirects", len(handler.paths_to_urls))
    return handler


setup_logging(settings.log_level)
application = create_app()
