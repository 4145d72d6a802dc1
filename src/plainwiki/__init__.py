"""plainwiki - a minimal file-backed wiki server."""

__version__ = "0.1.0"
