"""Classify body fragments into a closed set of shapes.

The content assembler switches over these shapes instead of probing
optional keys on raw JSON Schema dicts.
"""

from typing import Any

from pydantic import BaseModel


class ObjectSchema(BaseModel):
    properties: Any = None


class StringSchema(BaseModel):
    pass


class RefSchema(BaseModel):
    ref: str


class UnknownSchema(BaseModel):
    pass


VariantShape = StringSchema | RefSchema | UnknownSchema


class UnionSchema(BaseModel):
    variants: list[VariantShape]


BodyShape = ObjectSchema | UnionSchema


def classify_variant(variant: Any) -> list[VariantShape]:
    """Classify one ``anyOf`` member.

    A member can be both string-typed and a ``$ref``; it then yields both shapes.
    """
    if not isinstance(variant, dict):
        return [UnknownSchema()]
    shapes: list[VariantShape] = []
    if variant.get("type") == "string":
        shapes.append(StringSchema())
    ref = variant.get("$ref")
    if ref and isinstance(ref, str):
        shapes.append(RefSchema(ref=ref))
    return shapes or [UnknownSchema()]


def normalize_body(fragment: dict | None) -> list[BodyShape]:
    """Return the shapes a body fragment carries.

    A fragment may be both a union and an object; the union comes first.
    """
    if not fragment:
        return []
    shapes: list[BodyShape] = []
    any_of = fragment.get("anyOf")
    if any_of and isinstance(any_of, list):
        variants = [shape for v in any_of for shape in classify_variant(v)]
        shapes.append(UnionSchema(variants=variants))
    if fragment.get("type") == "object":
        shapes.append(ObjectSchema(properties=fragment.get("properties")))
    return shapes
