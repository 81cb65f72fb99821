"""aiohttp server for docpages.

Application factory and route registration.
"""

import logging

from aiohttp import web

from docpages.api.pages import create_pages_routes
from docpages.app_keys import log_requests_key, renderer_key
from docpages.config import Config
from docpages.core.renderer import MarkdownRenderer
from docpages.core.types import Renderer

logger = logging.getLogger(__name__)


def create_app(config: Config, *, renderer: Renderer | None = None) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        renderer: Renderer serving the pages route. Defaults to a
                  MarkdownRenderer over config.docs.source_dir.

    Returns:
        Configured aiohttp application
    """
    app = web.Application()

    if renderer is None:
        renderer = MarkdownRenderer(config.docs.source_dir)

    app[renderer_key] = renderer
    app[log_requests_key] = config.logging.log_requests

    app.router.add_routes(create_pages_routes())

    return app


def run_server(config: Config) -> None:
    """Run the server.

    Args:
        config: Application configuration
    """
    app = create_app(config)
    logger.info(f"Serving {config.docs.source_dir} on {config.server.host}:{config.server.port}")
    web.run_app(app, host=config.server.host, port=config.server.port, print=None)
