"""CLI interface for docpages.

Command-line tool for serving and rendering documentation pages.
"""

import logging
import sys
from pathlib import Path

import click

from docpages.config import Config

_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, path_type=Path),
    default=None,
    help="Path to configuration file (default: auto-discover docpages.toml)",
)

_source_dir_option = click.option(
    "--source-dir",
    "-s",
    type=click.Path(exists=True, path_type=Path, file_okay=False),
    default=None,
    help="Documentation source directory (overrides config)",
)


@click.group()
def cli() -> None:
    """docpages - localized documentation pages over HTTP."""


@cli.command()
@_config_option
@_source_dir_option
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
@click.option(
    "--log-requests/--no-log-requests",
    default=None,
    help="Enable/disable inbound request dumps (overrides config, default: enabled)",
)
def serve(
    config_path: Path | None,
    source_dir: Path | None,
    host: str | None,
    port: int | None,
    verbose: bool,
    log_requests: bool | None,
) -> None:
    """Start the documentation server."""
    from docpages.server import run_server

    config = _load_config(config_path).with_overrides(
        host=host,
        port=port,
        source_dir=source_dir,
        log_level="DEBUG" if verbose else None,
        log_requests=log_requests,
    )
    _configure_logging(config)

    click.echo(f"Starting server on {config.server.host}:{config.server.port}")
    click.echo(f"Source directory: {config.docs.source_dir}")
    if config.logging.log_requests:
        click.echo(f"Request logging: enabled (level {config.logging.level})")
    else:
        click.echo("Request logging: disabled")

    run_server(config)


@cli.command()
@click.argument("lang")
@click.argument("cat")
@click.argument("doc")
@_config_option
@_source_dir_option
def render(
    lang: str,
    cat: str,
    doc: str,
    config_path: Path | None,
    source_dir: Path | None,
) -> None:
    """Render a single page to stdout."""
    from docpages.api.pages import render_page
    from docpages.core.renderer import MarkdownRenderer
    from docpages.core.types import PageRequest

    config = _load_config(config_path).with_overrides(source_dir=source_dir)
    renderer = MarkdownRenderer(config.docs.source_dir)

    result = render_page(renderer, PageRequest(lang=lang, cat=cat, doc=doc))

    click.echo(result.html)
    click.echo(f"Status: {result.status}", err=True)
    if result.status >= 400:
        sys.exit(1)


def _load_config(config_path: Path | None) -> Config:
    try:
        return Config.load(config_path)
    except (FileNotFoundError, ValueError) as e:
        raise click.ClickException(str(e)) from e


def _configure_logging(config: Config) -> None:
    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    cli()
