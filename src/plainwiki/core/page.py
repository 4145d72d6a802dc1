"""Page value type."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Page:
    """A wiki page.

    The title is the storage key and must already be a valid title
    (see plainwiki.core.titles). The body is stored verbatim.
    """

    title: str
    body: bytes = b""

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, with undecodable bytes replaced."""
        return self.body.decode("utf-8", errors="replace")
