"""Application keys for type-safe app configuration access."""

from aiohttp import web

from plainwiki.core.renderer import TemplateRenderer
from plainwiki.core.store import PageStore

store_key = web.AppKey("store", PageStore)
renderer_key = web.AppKey("renderer", TemplateRenderer)
max_body_size_key = web.AppKey("max_body_size", int)
