"""Configuration management for plainwiki.

Supports TOML configuration format with auto-discovery.
"""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

CONFIG_FILENAME = "plainwiki.toml"
DEFAULT_MAX_BODY_SIZE = 1024 * 1024


@dataclass
class ServerConfig:
    """Server configuration."""

    host: str = "127.0.0.1"
    port: int = 8080


@dataclass
class StorageConfig:
    """Page storage configuration."""

    data_dir: Path = field(default_factory=lambda: Path("pages"))
    max_body_size: int = DEFAULT_MAX_BODY_SIZE


@dataclass
class TemplatesConfig:
    """Template configuration.

    When directory is None the templates bundled with the package are used.
    """

    directory: Path | None = None


@dataclass
class Config:
    """Application configuration."""

    server: ServerConfig
    storage: StorageConfig
    templates: TemplatesConfig
    config_path: Path | None = None

    @classmethod
    def load(cls, config_path: Path | None = None) -> Config:
        """Load configuration from file.

        If config_path is provided, loads from that file.
        Otherwise, searches for plainwiki.toml in current directory and parents.

        Args:
            config_path: Optional explicit path to config file

        Returns:
            Config instance with defaults for missing sections

        Raises:
            FileNotFoundError: If explicit config_path doesn't exist
            ValueError: If configuration is invalid
        """
        if config_path is not None:
            if not config_path.exists():
                raise FileNotFoundError(f"Configuration file not found: {config_path}")
            return cls._load_from_file(config_path)

        discovered_path = cls._discover_config()
        if discovered_path is None:
            return cls._default()

        return cls._load_from_file(discovered_path)

    @classmethod
    def _discover_config(cls) -> Path | None:
        """Search for config file in current directory and parents."""
        current = Path.cwd()
        while True:
            candidate = current / CONFIG_FILENAME
            if candidate.exists():
                return candidate
            parent = current.parent
            if parent == current:
                return None
            current = parent

    @classmethod
    def _default(cls) -> Config:
        return cls(
            server=ServerConfig(),
            storage=StorageConfig(),
            templates=TemplatesConfig(),
        )

    @classmethod
    def _load_from_file(cls, path: Path) -> Config:
        """Load configuration from a specific file.

        Args:
            path: Path to TOML configuration file

        Returns:
            Config instance

        Raises:
            ValueError: If configuration is invalid
        """
        with path.open("rb") as f:
            try:
                data = tomllib.load(f)
            except tomllib.TOMLDecodeError as e:
                raise ValueError(f"Invalid TOML in {path}: {e}") from e

        config_dir = path.parent

        return cls(
            server=cls._parse_server(data.get("server")),
            storage=cls._parse_storage(data.get("storage"), config_dir),
            templates=cls._parse_templates(data.get("templates"), config_dir),
            config_path=path,
        )

    @classmethod
    def _parse_server(cls, data: object) -> ServerConfig:
        """Parse server configuration section.

        Args:
            data: Raw server section data

        Returns:
            ServerConfig instance
        """
        if data is None:
            return ServerConfig()

        if not isinstance(data, dict):
            raise ValueError("server section must be a dictionary")

        host = data.get("host", "127.0.0.1")
        if not isinstance(host, str):
            raise ValueError("server.host must be a string")

        port = data.get("port", 8080)
        if not isinstance(port, int) or isinstance(port, bool):
            raise ValueError("server.port must be an integer")

        return ServerConfig(host=host, port=port)

    @classmethod
    def _parse_storage(cls, data: object, config_dir: Path) -> StorageConfig:
        """Parse storage configuration section.

        Args:
            data: Raw storage section data
            config_dir: Directory containing config file (for relative paths)

        Returns:
            StorageConfig instance
        """
        if data is None:
            return StorageConfig(data_dir=config_dir / "pages")

        if not isinstance(data, dict):
            raise ValueError("storage section must be a dictionary")

        data_dir = data.get("data_dir", "pages")
        if not isinstance(data_dir, str):
            raise ValueError("storage.data_dir must be a string")

        max_body_size = data.get("max_body_size", DEFAULT_MAX_BODY_SIZE)
        if (
            not isinstance(max_body_size, int)
            or isinstance(max_body_size, bool)
            or max_body_size <= 0
        ):
            raise ValueError("storage.max_body_size must be a positive integer")

        return StorageConfig(
            data_dir=config_dir / data_dir,
            max_body_size=max_body_size,
        )

    @classmethod
    def _parse_templates(cls, data: object, config_dir: Path) -> TemplatesConfig:
        if data is None:
            return TemplatesConfig()

        if not isinstance(data, dict):
            raise ValueError("templates section must be a dictionary")

        directory = data.get("directory")
        if directory is None:
            return TemplatesConfig()
        if not isinstance(directory, str):
            raise ValueError("templates.directory must be a string")

        return TemplatesConfig(directory=config_dir / directory)

    def with_overrides(
        self,
        *,
        host: str | None = None,
        port: int | None = None,
        data_dir: Path | None = None,
        templates_dir: Path | None = None,
    ) -> Config:
        """Create a new Config with CLI overrides applied.

        Only non-None values override the existing config. The original
        Config is not modified.

        Args:
            host: Override server.host
            port: Override server.port
            data_dir: Override storage.data_dir
            templates_dir: Override templates.directory

        Returns:
            New Config instance with overrides applied
        """
        server = self.server
        if host is not None or port is not None:
            server = replace(
                self.server,
                host=host if host is not None else self.server.host,
                port=port if port is not None else self.server.port,
            )

        storage = self.storage
        if data_dir is not None:
            storage = replace(self.storage, data_dir=data_dir)

        templates = self.templates
        if templates_dir is not None:
            templates = replace(self.templates, directory=templates_dir)

        return replace(self, server=server, storage=storage, templates=templates)
