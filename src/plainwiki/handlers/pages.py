"""Page view, edit and save handlers.

Each handler receives an already validated title from its TitleRoute.

    (missing)  --view-->  redirect to edit
    (any)      --edit-->  edit form, blank for a missing page
    (form)     --save-->  redirect to view, or 500 on a storage failure
"""

import logging
from urllib.parse import parse_qsl

from aiohttp import web

from plainwiki.app_keys import max_body_size_key, renderer_key, store_key
from plainwiki.core.page import Page
from plainwiki.core.renderer import CHARSET, CONTENT_TYPE, RenderError
from plainwiki.handlers.dispatch import wrap

logger = logging.getLogger(__name__)


def create_pages_routes() -> list[web.RouteDef]:
    return [
        web.get("/view/{title:.*}", view_page.handle),
        web.get("/edit/{title:.*}", edit_page.handle),
        web.post("/save/{title:.*}", save_page.handle),
    ]


@wrap("view")
async def view_page(request: web.Request, title: str) -> web.StreamResponse:
    store = request.app[store_key]

    try:
        page = store.load(title)
    except FileNotFoundError:
        raise web.HTTPFound(f"/edit/{title}") from None
    except OSError as e:
        return _server_error(f"Failed to load page {title}", e)

    return _render(request, "view", page)


@wrap("edit")
async def edit_page(request: web.Request, title: str) -> web.StreamResponse:
    store = request.app[store_key]

    try:
        page = store.load(title)
    except FileNotFoundError:
        page = Page(title=title)
    except OSError as e:
        return _server_error(f"Failed to load page {title}", e)

    return _render(request, "edit", page)


@wrap("save")
async def save_page(request: web.Request, title: str) -> web.StreamResponse:
    store = request.app[store_key]
    max_body_size = request.app[max_body_size_key]

    body = await _read_body(request)
    if len(body) > max_body_size:
        raise web.HTTPRequestEntityTooLarge(max_size=max_body_size, actual_size=len(body))

    try:
        store.save(Page(title=title, body=body))
    except OSError as e:
        return _server_error(f"Failed to save page {title}", e)

    logger.info(f"Saved page {title}")
    raise web.HTTPFound(f"/view/{title}")


async def _read_body(request: web.Request) -> bytes:
    """Return the submitted "body" form field as raw bytes.

    URL-encoded forms are decoded byte for byte, so bodies that are not valid
    UTF-8 are stored unchanged. A missing field is an empty body.
    """
    if request.content_type == "application/x-www-form-urlencoded":
        raw = await request.read()
        try:
            query = raw.decode("ascii")
        except UnicodeDecodeError:
            raise web.HTTPBadRequest(text="form data must be URL-encoded") from None
        # latin-1 maps each percent-decoded byte to one code point and back
        for name, value in parse_qsl(query, keep_blank_values=True, encoding="latin-1"):
            if name == "body":
                return value.encode("latin-1")
        return b""

    form = await request.post()
    text = form.get("body", "")
    if not isinstance(text, str):
        raise web.HTTPBadRequest(text="body must be a text field")
    return text.encode(CHARSET)


def _render(request: web.Request, template_name: str, page: Page) -> web.Response:
    renderer = request.app[renderer_key]
    try:
        html = renderer.render(template_name, page)
    except RenderError as e:
        return _server_error(f"Failed to render page {page.title}", e)
    return web.Response(body=html, content_type=CONTENT_TYPE, charset=CHARSET)


def _server_error(context: str, error: Exception) -> web.Response:
    logger.error(f"{context}: {error}")
    return web.Response(status=500, text=str(error))
