"""Application keys for type-safe app configuration access."""

from aiohttp import web

from docpages.core.types import Renderer

renderer_key = web.AppKey("renderer", Renderer)
log_requests_key = web.AppKey("log_requests", bool)
