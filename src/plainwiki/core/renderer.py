"""HTML rendering of pages with Jinja2 templates.

Templates are loaded once when the renderer is built and are never reloaded,
so the renderer can be shared by all requests.
"""

from pathlib import Path

import jinja2

from plainwiki.core.page import Page

TEMPLATE_NAMES = ("edit", "view")
CONTENT_TYPE = "text/html"
CHARSET = "utf-8"


class RenderError(Exception):
    """Raised when a page cannot be rendered."""


class TemplateRenderer:
    """Renders the view and edit templates for a page.

    Uses the templates bundled with the package unless a directory is given.
    Each template receives the page as ``page``.
    """

    def __init__(self, directory: Path | None = None) -> None:
        """Initialize renderer and load all templates.

        Args:
            directory: Directory containing view.html and edit.html.
                       If None, the bundled templates are used.

        Raises:
            jinja2.TemplateError: If a template is missing or fails to compile
        """
        self._directory = directory

        loader: jinja2.BaseLoader
        if directory is not None:
            loader = jinja2.FileSystemLoader(directory)
        else:
            loader = jinja2.PackageLoader("plainwiki", "templates")

        #: The jinja2.Environment instance, read-only after initialization.
        self.env = jinja2.Environment(
            loader=loader,
            autoescape=jinja2.select_autoescape(default=True),
            undefined=jinja2.StrictUndefined,
        )
        self._templates = {
            name: self.env.get_template(f"{name}.html") for name in TEMPLATE_NAMES
        }

    @property
    def directory(self) -> Path | None:
        """Template directory, or None for the bundled templates."""
        return self._directory

    def render(self, template_name: str, page: Page) -> bytes:
        """Render a template for a page.

        Args:
            template_name: "view" or "edit"
            page: Page to render

        Returns:
            Encoded HTML body

        Raises:
            RenderError: If the template is unknown or rendering fails
        """
        template = self._templates.get(template_name)
        if template is None:
            raise RenderError(f"Unknown template: {template_name}")

        try:
            html = template.render(page=page)
        except jinja2.TemplateError as e:
            raise RenderError(f"Failed to render {template_name}: {e}") from e

        return html.encode(CHARSET)
