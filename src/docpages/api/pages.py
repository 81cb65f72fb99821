"""Pages endpoint.

Maps GET /{lang}/{cat}/{doc} to the configured renderer and returns its HTML
and status unchanged.
"""

import json
import logging

from aiohttp import web

from docpages.app_keys import log_requests_key, renderer_key
from docpages.core.types import MissingParameterError, PageRequest, PageResponse, Renderer

logger = logging.getLogger(__name__)


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/{lang}/{cat}/{doc}", get_page),
    ]


def render_page(renderer: Renderer, page: PageRequest) -> PageResponse:
    """Render a page through the given renderer.

    Renderer failures are not handled here and propagate to the caller.
    """
    return renderer.render(page)


async def get_page(request: web.Request) -> web.Response:
    if request.app[log_requests_key] and logger.isEnabledFor(logging.DEBUG):
        logger.debug(f"Inbound request:\n{json.dumps(_describe_request(request), indent=2)}")

    # Other route definitions may mount this handler without all three segments.
    try:
        page = PageRequest.from_params(request.match_info)
    except MissingParameterError as e:
        raise web.HTTPBadRequest(text=str(e)) from e

    result = render_page(request.app[renderer_key], page)
    return web.Response(status=result.status, text=result.html, content_type="text/html")


def _describe_request(request: web.Request) -> dict[str, object]:
    return {
        "method": request.method,
        "path": request.path,
        "query": dict(request.query),
        "params": dict(request.match_info),
        "headers": dict(request.headers),
    }
