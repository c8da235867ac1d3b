"""Compose the OpenAPI document from loaded routes.

Routes are folded one at a time, in module path order, into a single
accumulator. The order matters: definitions follow first-writer-wins and a
later route with the same path and method replaces an earlier one.
"""

import json
import logging
import os
import tempfile
from functools import reduce
from pathlib import Path

import yaml
from pydantic import BaseModel

from swagger_composer.builder.content import build_request_body, build_responses
from swagger_composer.builder.definitions import merge_definitions
from swagger_composer.builder.parameters import build_parameters
from swagger_composer.config import ComposerConfig, resolve_version
from swagger_composer.parser.base import RouteDocs
from swagger_composer.parser.routes import load_routes

logger = logging.getLogger(__name__)

OPENAPI_VERSION = "3.0.0"


class DocumentInfo(BaseModel):
    """Document-wide metadata attached after all routes are folded."""

    title: str
    description: str = ""
    version: str
    site_title: str
    logo_url: str
    logo_alt_text: str


class ComposeState(BaseModel):
    paths: dict[str, dict[str, dict]] = {}
    definitions: dict[str, dict] = {}
    discarded: list[str] = []


def build_swagger_route(route: RouteDocs) -> dict:
    """Build the operation object for one route."""
    meta = route.metadata
    swagger_route: dict = {"definitions": {}}
    if meta.description is not None:
        swagger_route["description"] = meta.description
    swagger_route["parameters"] = build_parameters(route.query)
    swagger_route["requestBody"] = build_request_body(route.body, meta.accepts)
    swagger_route["responses"] = build_responses(route.response, meta.content_types, route.is_websocket)
    swagger_route["summary"] = meta.path
    swagger_route["tags"] = list(meta.tags)
    return swagger_route


def fold_route(state: ComposeState, route: RouteDocs) -> ComposeState:
    definitions, discarded = merge_definitions(state.definitions, route.body, route.query, route.response)
    state.definitions = definitions
    state.discarded.extend(discarded)

    methods = state.paths.setdefault(route.metadata.path, {})
    methods[route.method] = build_swagger_route(route)
    return state


def compose_document(routes: list[RouteDocs], info: DocumentInfo) -> dict:
    """Fold routes, in the order given, into a complete document."""
    state = reduce(fold_route, routes, ComposeState())
    if state.discarded:
        logger.info("Kept first definition for %d duplicate names", len(state.discarded))
    logger.info("Composed %d paths and %d definitions", len(state.paths), len(state.definitions))

    return {
        "customSiteTitle": info.site_title,
        "definitions": state.definitions,
        "info": {
            "description": info.description,
            "title": info.title,
            "version": info.version,
            "x-logo": {
                "altText": info.logo_alt_text,
                "url": info.logo_url,
            },
        },
        "openapi": OPENAPI_VERSION,
        "paths": state.paths,
        "servers": [],
    }


def _read_text(path: Path | None) -> str:
    if path is None:
        return ""
    return path.read_text(encoding="utf-8")


def build_info(config: ComposerConfig) -> DocumentInfo:
    return DocumentInfo(
        title=config.title,
        description=_read_text(config.readme) + _read_text(config.changelog),
        version=resolve_version(config),
        site_title=config.site_title,
        logo_url=config.logo_url,
        logo_alt_text=config.logo_alt_text,
    )


def build_document(config: ComposerConfig) -> dict:
    """Load every configured route and compose the document."""
    routes = load_routes(config.http_routes, config.ws_routes)
    return compose_document(routes, build_info(config))


class _NoAliasDumper(yaml.SafeDumper):
    """Schemas are shared between fragments and definitions; write them out in full."""

    def ignore_aliases(self, data):
        return True


def dump_document(document: dict, fmt: str = "json") -> str:
    if fmt == "yaml":
        return yaml.dump(document, Dumper=_NoAliasDumper, sort_keys=False, allow_unicode=True)
    return json.dumps(document, indent=2, ensure_ascii=False)


def write_document(document: dict, output: Path, fmt: str = "json") -> None:
    """Write the document, replacing ``output`` only once the full text is on disk."""
    text = dump_document(document, fmt)
    output.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(dir=output.parent, prefix=f".{output.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        os.replace(tmp_name, output)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
