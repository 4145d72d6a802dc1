"""HTTP handlers for wiki pages."""

from plainwiki.handlers.dispatch import TitleHandler, TitleRoute, wrap
from plainwiki.handlers.pages import create_pages_routes

__all__ = ["TitleHandler", "TitleRoute", "create_pages_routes", "wrap"]
