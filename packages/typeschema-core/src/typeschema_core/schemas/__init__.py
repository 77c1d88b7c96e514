"""JSON Schema node models and their canonical encoding."""

from __future__ import annotations

from typeschema_core.schemas.json_schema import (
    ArraySchema,
    BooleanSchema,
    JsonSchema,
    NumberSchema,
    ObjectSchema,
    SchemaEncoder,
    StringSchema,
    encode,
    get_encoder,
    parse_schema,
    to_json,
)

__all__ = [
    "JsonSchema",
    "ObjectSchema",
    "StringSchema",
    "NumberSchema",
    "ArraySchema",
    "BooleanSchema",
    "SchemaEncoder",
    "get_encoder",
    "encode",
    "to_json",
    "parse_schema",
]
