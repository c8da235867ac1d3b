"""Route module loader.

Imports each route module from its file, validates the module-level
``route`` export, and attaches the schema sidecars found beside it.
"""

import hashlib
import importlib.util
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import ValidationError

from swagger_composer.errors import RouteLoadError
from swagger_composer.parser.base import RouteDocs, RouteMetadata
from swagger_composer.parser.fragments import read_fragment, sidecar_path

logger = logging.getLogger(__name__)

ROUTE_EXPORT = "route"
MODULE_SUFFIX = ".py"


def _import_module(module_path: Path):
    digest = hashlib.sha1(str(module_path).encode("utf-8")).hexdigest()[:12]
    name = f"_swagger_route_{module_path.stem}_{digest}"
    spec = importlib.util.spec_from_file_location(name, module_path)
    if spec is None or spec.loader is None:
        raise RouteLoadError(module_path, "Cannot import route file")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


def _read_sidecar(module_path: Path, kind: str) -> dict | None:
    path = sidecar_path(module_path, kind)
    try:
        fragment = read_fragment(path)
    except UnicodeDecodeError as e:
        raise RouteLoadError(path, "Sidecar is not UTF-8 text:") from e
    if fragment is not None and not isinstance(fragment, dict):
        raise RouteLoadError(path, f"Sidecar must hold a JSON object, got {type(fragment).__name__}:")
    return fragment


def load_route(module_path: Path, is_websocket: bool = False) -> RouteDocs:
    """Load one route module and its sidecar fragments.

    WebSocket routes never carry a body or response fragment, only a query.
    """
    module = _import_module(module_path)
    route = getattr(module, ROUTE_EXPORT, None)
    if not route:
        raise RouteLoadError(module_path)

    try:
        metadata = RouteMetadata.model_validate(route, from_attributes=True)
    except ValidationError as e:
        raise RouteLoadError(module_path, f"Invalid route metadata ({e.error_count()} errors) in") from e

    body = None if is_websocket else _read_sidecar(module_path, "body")
    query = _read_sidecar(module_path, "query")
    response = None if is_websocket else _read_sidecar(module_path, "response")

    logger.debug("Loaded %s %s from %s", metadata.method, metadata.path, module_path)
    return RouteDocs(
        module=module_path,
        metadata=metadata,
        is_websocket=is_websocket,
        body=body,
        query=query,
        response=response,
    )


def load_routes(
    http_routes: list[Path],
    ws_routes: list[Path],
    max_workers: int | None = None,
) -> list[RouteDocs]:
    """Load every route module concurrently.

    Only ``.py`` modules are considered. The result is ordered by module
    path string regardless of the order loads complete in.
    """
    jobs = [(Path(p), False) for p in http_routes] + [(Path(p), True) for p in ws_routes]
    jobs = [job for job in jobs if job[0].suffix == MODULE_SUFFIX]
    jobs.sort(key=lambda job: str(job[0]))
    if not jobs:
        return []

    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        return list(pool.map(lambda job: load_route(*job), jobs))
