"""File-based page storage.

Storage layout:
    pages/
    ├── FrontPage.txt      # Raw body bytes of page "FrontPage"
    └── TestPage.txt

Each page is one file named after its title. Saves write a temporary sibling
file and rename it over the target, so readers only ever see complete pages.
"""

import logging
import os
import tempfile
from pathlib import Path

from plainwiki.core.page import Page
from plainwiki.core.titles import is_valid_title

logger = logging.getLogger(__name__)

PAGE_SUFFIX = ".txt"
FILE_MODE = 0o600


class PageStore:
    """Loads and saves pages under a single flat directory.

    Holds no state besides the root path; every call opens, uses and closes
    its own file.
    """

    def __init__(self, root: Path) -> None:
        """Initialize store with its root directory.

        Args:
            root: Directory holding the page files. Created on first save.
        """
        self._root = root

    @property
    def root(self) -> Path:
        """Directory holding the page files."""
        return self._root

    def path_for(self, title: str) -> Path:
        """Return the backing file path for a title.

        Raises:
            ValueError: If the title is not a valid page title
        """
        if not is_valid_title(title):
            raise ValueError(f"Invalid page title: {title!r}")
        return self._root / f"{title}{PAGE_SUFFIX}"

    def load(self, title: str) -> Page:
        """Load a page from disk.

        Args:
            title: Page title

        Returns:
            A new Page with the file's full contents as body

        Raises:
            FileNotFoundError: If the page has no backing file
            OSError: On any other filesystem failure
            ValueError: If the title is not a valid page title
        """
        path = self.path_for(title)
        body = path.read_bytes()
        return Page(title=title, body=body)

    def save(self, page: Page) -> None:
        """Write a page to disk, replacing any previous contents.

        The file is created with owner read/write permissions only.

        Args:
            page: Page to persist

        Raises:
            OSError: On any filesystem failure. The previous file, if any,
                is left untouched.
            ValueError: If the page title is not a valid page title
        """
        path = self.path_for(page.title)
        self._root.mkdir(parents=True, exist_ok=True)

        fd, tmp_name = tempfile.mkstemp(
            dir=self._root,
            prefix=f".{page.title}.",
            suffix=".tmp",
        )
        try:
            with os.fdopen(fd, "wb") as f:
                f.write(page.body)
            os.chmod(tmp_name, FILE_MODE)
            os.replace(tmp_name, path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

        logger.debug(f"Saved page {page.title} ({len(page.body)} bytes) to {path}")
