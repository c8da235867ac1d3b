"""Data models for loaded route modules.

The loader converts each route module's ``route`` export into these
models so the builder never has to probe arbitrary objects.
"""

from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class RouteMetadata(BaseModel):
    """Metadata a route module declares about itself."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)

    path: str  # /chromium/pdf
    method: str = "get"  # get / post / put / delete / patch
    tags: list[str] = []
    description: str | None = None
    auth: Any = None
    accepts: list[str] = []
    content_types: list[str] = Field(default=[], validation_alias=AliasChoices("contentTypes", "content_types"))
    title: str | None = None

    @field_validator("method")
    @classmethod
    def _lowercase_method(cls, value: str) -> str:
        return value.lower()

    @field_validator("tags", "accepts", "content_types", mode="before")
    @classmethod
    def _none_as_empty(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, (set, frozenset, tuple)):
            return list(value)
        return value


class RouteDocs(BaseModel):
    """A route's metadata together with its three optional schema fragments."""

    model_config = ConfigDict(frozen=True)

    module: Path
    metadata: RouteMetadata
    is_websocket: bool = False
    body: dict | None = None
    query: dict | None = None
    response: dict | None = None

    @property
    def method(self) -> str:
        return "get" if self.is_websocket else self.metadata.method
