"""Shared test fixtures."""

from pathlib import Path

import pytest
from plainwiki.config import Config, ServerConfig, StorageConfig, TemplatesConfig


@pytest.fixture
def data_dir(tmp_path: Path) -> Path:
    """Create the page storage directory."""
    pages = tmp_path / "pages"
    pages.mkdir(exist_ok=True)
    return pages


@pytest.fixture
def test_config(data_dir: Path) -> Config:
    """Create a test configuration storing pages under tmp_path."""
    return Config(
        server=ServerConfig(),
        storage=StorageConfig(data_dir=data_dir, max_body_size=1024),
        templates=TemplatesConfig(),
    )
