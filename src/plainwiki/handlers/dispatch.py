"""Route dispatch for title-taking handlers.

A page handler never parses the request path itself. It is wrapped in a
TitleRoute, which validates the path and passes on only the title.
"""

import logging
from collections.abc import Awaitable, Callable

from aiohttp import web

from plainwiki.core.titles import ACTIONS, validate_path

logger = logging.getLogger(__name__)

TitleHandler = Callable[[web.Request, str], Awaitable[web.StreamResponse]]


class TitleRoute:
    """Request handler that validates the page title before delegating.

    Register ``route.handle`` with the aiohttp router.

    Args:
        action: Route action the path must carry ("edit", "save" or "view")
        handler: Coroutine called as handler(request, title) with a valid title
    """

    def __init__(self, action: str, handler: TitleHandler) -> None:
        if action not in ACTIONS:
            raise ValueError(f"Unknown action: {action!r}")
        self.action = action
        self.handler = handler

    async def handle(self, request: web.Request) -> web.StreamResponse:
        """Validate the request path and call the handler with its title."""
        match = validate_path(request.path)
        if match is None or match.action != self.action:
            logger.debug(f"No page route for {request.path!r}")
            raise web.HTTPNotFound()
        return await self.handler(request, match.title)

    def __repr__(self) -> str:
        name = getattr(self.handler, "__name__", repr(self.handler))
        return f"TitleRoute({self.action!r}, {name})"


def wrap(action: str) -> Callable[[TitleHandler], TitleRoute]:
    """Decorator turning a title handler into a TitleRoute for an action."""

    def decorator(handler: TitleHandler) -> TitleRoute:
        return TitleRoute(action, handler)

    return decorator
