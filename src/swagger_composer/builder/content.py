"""Build ``responses`` and ``requestBody`` objects for one route.

This is a best-effort mapping. Routes returning several content types get
placeholder schemas because the fragment cannot say which type carries
which schema, and accepted body types are only correlated by JSON vs not.
"""

import copy

from swagger_composer.builder.shapes import (
    ObjectSchema,
    RefSchema,
    StringSchema,
    UnionSchema,
    normalize_body,
)
from swagger_composer.errors import ERROR_RESPONSES

JSON_CONTENT_TYPE = "application/json"
WEBSOCKET_UPGRADE = {"description": "Indicates successful WebSocket upgrade."}


def _with_description(response: dict, content: dict) -> dict:
    result = {"content": content}
    if response.get("description") is not None:
        result["description"] = response["description"]
    return result


def build_responses(response: dict | None, content_types: list[str], is_websocket: bool = False) -> dict:
    """Return the responses map, seeded with the standard error responses."""
    responses = copy.deepcopy(ERROR_RESPONSES)

    if is_websocket:
        responses["101"] = dict(WEBSOCKET_UPGRADE)
        return responses

    if response is None:
        return responses

    if len(content_types) == 1:
        [content_type] = content_types
        responses["200"] = _with_description(response, {content_type: {"schema": response}})
    else:
        content = {c: {"schema": {"type": "text"}} for c in content_types}
        responses["200"] = _with_description(response, content)

    return responses


def build_request_body(body: dict | None, accepts: list[str]) -> dict:
    """Return ``{"content": {...}}`` for a body fragment."""
    content: dict = {}

    for shape in normalize_body(body):
        if isinstance(shape, UnionSchema):
            for variant in shape.variants:
                if isinstance(variant, StringSchema):
                    for accept in accepts:
                        if accept != JSON_CONTENT_TYPE:
                            content[accept] = {"schema": {"type": "string"}}
                elif isinstance(variant, RefSchema):
                    content[JSON_CONTENT_TYPE] = {"schema": {"$ref": variant.ref}}
        elif isinstance(shape, ObjectSchema):
            schema: dict = {}
            if shape.properties is not None:
                schema["properties"] = shape.properties
            schema["type"] = "object"
            content[JSON_CONTENT_TYPE] = {"schema": schema}

    return {"content": content}
