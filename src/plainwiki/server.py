"""aiohttp server for plainwiki.

Application factory and route registration.
"""

from aiohttp import web

from plainwiki.app_keys import max_body_size_key, renderer_key, store_key
from plainwiki.config import Config
from plainwiki.core.renderer import TemplateRenderer
from plainwiki.core.store import PageStore
from plainwiki.handlers.pages import create_pages_routes

FRONT_PAGE = "FrontPage"

# Form encoding can expand each body byte to three characters ("%XX").
_FORM_ENCODING_OVERHEAD = 3


async def front_page_redirect(request: web.Request) -> web.StreamResponse:
    """Redirect the site root to the front page."""
    raise web.HTTPFound(f"/view/{FRONT_PAGE}")


def create_app(
    config: Config,
    *,
    renderer: TemplateRenderer | None = None,
) -> web.Application:
    """Create aiohttp application.

    Args:
        config: Application configuration
        renderer: Prebuilt template renderer. If None, one is built from
                  config.templates, loading all templates up front.

    Returns:
        Configured aiohttp application

    Raises:
        jinja2.TemplateError: If the templates cannot be loaded
    """
    max_body_size = config.storage.max_body_size
    app = web.Application(
        client_max_size=max_body_size * _FORM_ENCODING_OVERHEAD + 1024,
    )

    if renderer is None:
        renderer = TemplateRenderer(config.templates.directory)

    app[store_key] = PageStore(config.storage.data_dir)
    app[renderer_key] = renderer
    app[max_body_size_key] = max_body_size

    app.router.add_get("/", front_page_redirect)
    app.router.add_routes(create_pages_routes())

    return app


def run_server(config: Config, *, app: web.Application | None = None) -> None:
    """Run the server.

    Args:
        config: Application configuration
        app: Application to serve. If None, one is created from config.
    """
    if app is None:
        app = create_app(config)
    web.run_app(app, host=config.server.host, port=config.server.port)
