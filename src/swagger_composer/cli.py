"""CLI entry point for swagger-composer."""

import json
import logging
from pathlib import Path

import click

from swagger_composer.builder.document import build_document, write_document
from swagger_composer.config import ComposerConfig, load_config
from swagger_composer.errors import ComposerError
from swagger_composer.parser.routes import load_routes


def _load_config(config_path: Path | None, **overrides) -> ComposerConfig:
    try:
        return load_config(config_path, **overrides)
    except ComposerError as e:
        raise click.ClickException(str(e)) from e


def _route_options(f):
    f = click.option("--ws", "ws_routes", multiple=True, type=click.Path(path_type=Path), help="WebSocket route module (repeatable).")(f)
    f = click.option("--http", "http_routes", multiple=True, type=click.Path(path_type=Path), help="HTTP route module (repeatable).")(f)
    f = click.option("-c", "--config", "config_path", default=None, type=click.Path(exists=True, path_type=Path), help="YAML project config file.")(f)
    return f


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log route loading and definition merges.")
def main(verbose: bool):
    """Build one OpenAPI document from route modules and schema sidecars."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")


@main.command()
@_route_options
@click.option("-o", "--output", default=None, type=click.Path(path_type=Path), help="Output file for the document.")
@click.option("--format", "fmt", default=None, type=click.Choice(["json", "yaml"]), help="Output format.")
@click.option("--title", default=None, help="Document title.")
@click.option("--readme", default=None, type=click.Path(exists=True, path_type=Path), help="Text placed first in the description.")
@click.option("--changelog", default=None, type=click.Path(exists=True, path_type=Path), help="Text appended to the description.")
@click.option("--version", "doc_version", default=None, help="Document version (overrides --pyproject).")
@click.option("--pyproject", default=None, type=click.Path(path_type=Path), help="pyproject.toml to read the version from.")
def build(
    config_path: Path | None,
    http_routes: tuple[Path, ...],
    ws_routes: tuple[Path, ...],
    output: Path | None,
    fmt: str | None,
    title: str | None,
    readme: Path | None,
    changelog: Path | None,
    doc_version: str | None,
    pyproject: Path | None,
):
    """Compose the OpenAPI document and write it to disk."""
    config = _load_config(
        config_path,
        http_routes=http_routes,
        ws_routes=ws_routes,
        output=output,
        format=fmt,
        title=title,
        readme=readme,
        changelog=changelog,
        version=doc_version,
        pyproject=pyproject,
    )

    click.echo(f"Loading {len(config.http_routes)} HTTP and {len(config.ws_routes)} WebSocket routes...")
    try:
        document = build_document(config)
    except (ComposerError, json.JSONDecodeError) as e:
        raise click.ClickException(str(e)) from e

    operations = sum(len(methods) for methods in document["paths"].values())
    click.echo(f"Composed {operations} operations across {len(document['paths'])} paths.")

    write_document(document, config.output, config.format)
    click.echo(f"Document saved to {config.output}")


@main.command()
@_route_options
def routes(config_path: Path | None, http_routes: tuple[Path, ...], ws_routes: tuple[Path, ...]):
    """List routes in the order they are folded into the document."""
    config = _load_config(config_path, http_routes=http_routes, ws_routes=ws_routes)
    try:
        loaded = load_routes(config.http_routes, config.ws_routes)
    except (ComposerError, json.JSONDecodeError) as e:
        raise click.ClickException(str(e)) from e

    for route in loaded:
        kind = "ws" if route.is_websocket else "http"
        click.echo(f"{route.method.upper():7} {route.metadata.path}  [{kind}] {route.module}")
    click.echo(f"Found {len(loaded)} routes.")
