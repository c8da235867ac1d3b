"""Schema sidecar files written next to each route module.

A route module ``foo.py`` may have ``foo.body.json``, ``foo.query.json``
and ``foo.response.json`` beside it, each holding a JSON Schema fragment.
"""

import json
from pathlib import Path

FRAGMENT_KINDS = ("body", "query", "response")


def sidecar_path(module_path: Path, kind: str) -> Path:
    """Return the sidecar path for ``kind`` by swapping the module's extension."""
    if kind not in FRAGMENT_KINDS:
        raise ValueError(f"Unknown fragment kind: {kind}")
    return module_path.with_name(f"{module_path.stem}.{kind}.json")


def sidecar_paths(module_path: Path) -> dict[str, Path]:
    return {kind: sidecar_path(module_path, kind) for kind in FRAGMENT_KINDS}


def read_fragment(path: Path | None) -> dict | None:
    """Read and parse a fragment, or return None when the file does not exist.

    Malformed JSON is not caught: a bad sidecar aborts the build.
    """
    if path is None:
        return None
    try:
        text = path.read_text(encoding="utf-8")
    except (FileNotFoundError, IsADirectoryError):
        return None
    return json.loads(text)
