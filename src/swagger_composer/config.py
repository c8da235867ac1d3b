"""Project configuration for a document build.

Settings come from an optional YAML file and are overridden by CLI options.
"""

import tomllib
from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ValidationError, model_validator

from swagger_composer.errors import ConfigError

DEFAULT_OUTPUT = Path("static") / "docs" / "swagger.json"
DEFAULT_VERSION = "0.0.0"

PATH_KEYS = ("readme", "changelog", "pyproject", "output")
ROUTE_LIST_KEYS = ("http_routes", "ws_routes")


class ComposerConfig(BaseModel):
    title: str = "API"
    site_title: str | None = None
    logo_url: str = "./docs/logo.png"
    logo_alt_text: str | None = None
    http_routes: list[Path] = []
    ws_routes: list[Path] = []
    readme: Path | None = None
    changelog: Path | None = None
    pyproject: Path | None = None
    version: str | None = None
    output: Path = DEFAULT_OUTPUT
    format: Literal["json", "yaml"] = "json"

    @model_validator(mode="after")
    def _default_titles(self):
        if self.site_title is None:
            self.site_title = f"{self.title} Documentation"
        if self.logo_alt_text is None:
            self.logo_alt_text = f"{self.title} logo"
        return self


def _anchor_paths(data: dict, base_dir: Path) -> dict:
    """Resolve relative paths from a config file against the file's directory."""

    def anchor(value):
        path = Path(value)
        return path if path.is_absolute() else base_dir / path

    for key in PATH_KEYS:
        if data.get(key) is not None:
            data[key] = anchor(data[key])
    for key in ROUTE_LIST_KEYS:
        if data.get(key):
            data[key] = [anchor(p) for p in data[key]]
    return data


def load_config(file_path: Path | None = None, **overrides) -> ComposerConfig:
    """Load config from YAML (if given) and apply the non-empty overrides."""
    data: dict = {}
    if file_path is not None:
        try:
            data = yaml.safe_load(file_path.read_text(encoding="utf-8")) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"Cannot read config {file_path}: {e}") from e
        if not isinstance(data, dict):
            raise ConfigError(f"Config {file_path} must be a mapping")
        data = _anchor_paths(data, file_path.parent)

    for key, value in overrides.items():
        if value is None or value == ():
            continue
        data[key] = list(value) if isinstance(value, tuple) else value

    try:
        return ComposerConfig(**data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config: {e}") from e


def read_project_version(pyproject: Path) -> str | None:
    """Read the version declared in a pyproject.toml, PEP 621 or Poetry style."""
    try:
        with pyproject.open("rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except tomllib.TOMLDecodeError as e:
        raise ConfigError(f"Cannot parse {pyproject}: {e}") from e

    version = data.get("project", {}).get("version")
    if version is None:
        version = data.get("tool", {}).get("poetry", {}).get("version")
    return version


def resolve_version(config: ComposerConfig) -> str:
    if config.version:
        return config.version
    if config.pyproject is not None:
        version = read_project_version(config.pyproject)
        if version:
            return version
    return DEFAULT_VERSION
