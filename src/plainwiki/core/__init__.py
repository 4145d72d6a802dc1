"""Page model, storage, title validation and template rendering."""

from plainwiki.core.page import Page
from plainwiki.core.renderer import RenderError, TemplateRenderer
from plainwiki.core.store import PageStore
from plainwiki.core.titles import ACTIONS, RouteMatch, is_valid_title, validate_path

__all__ = [
    "ACTIONS",
    "Page",
    "PageStore",
    "RenderError",
    "RouteMatch",
    "TemplateRenderer",
    "is_valid_title",
    "validate_path",
]
