"""CLI interface for plainwiki."""

import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
import jinja2

from plainwiki.config import Config


@click.group()
def cli() -> None:
    """plainwiki - a minimal file-backed wiki."""


@cli.command()
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover plainwiki.toml)",
)
@click.option(
    "--data-dir",
    "-d",
    type=click.Path(path_type=Path, file_okay=False),
    default=None,
    help="Page storage directory (overrides config)",
)
@click.option(
    "--templates-dir",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Directory with view.html and edit.html (overrides config)",
)
@click.option(
    "--host",
    default=None,
    help="Host to bind to (overrides config)",
)
@click.option(
    "--port",
    "-p",
    type=int,
    default=None,
    help="Port to bind to (overrides config)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
def serve(
    config_path: Path | None,
    data_dir: Path | None,
    templates_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
) -> None:
    """Start the wiki server."""
    from plainwiki.app_keys import renderer_key
    from plainwiki.server import create_app, run_server

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = Config.load(config_path).with_overrides(
            host=host,
            port=port,
            data_dir=data_dir,
            templates_dir=templates_dir,
        )
    except (OSError, ValueError) as e:
        _fail(f"Invalid configuration: {e}")

    try:
        app = create_app(config)
    except jinja2.TemplateError as e:
        _fail(f"Failed to load templates: {e}")

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Data directory: {config.storage.data_dir}")
    renderer = app[renderer_key]
    if renderer.directory is not None:
        click.echo(f"Templates: {renderer.directory}")
    else:
        click.echo("Templates: bundled")
    click.echo(f"Max page size: {config.storage.max_body_size} bytes")

    run_server(config, app=app)


def _fail(message: str) -> NoReturn:
    click.echo(click.style(f"Error: {message}", fg="red"), err=True)
    sys.exit(1)
