"""JSON Schema node models.

This module defines the closed set of schema node variants produced by
schema derivation:

- ObjectSchema: an object with properties, required names and/or
  additionalProperties
- StringSchema: a string, optionally restricted to an enumeration
- NumberSchema: any numeric value (integers and floating point)
- ArraySchema: an array whose items follow another schema
- BooleanSchema: a boolean

Every node carries a ``type`` literal that discriminates the variant, so
``JsonSchema`` is a tagged union rather than an open class hierarchy.
Nodes are frozen value objects compared structurally.

Encoding follows one policy everywhere: fields holding their default are
emitted (the ``type`` discriminator), absent optional fields are omitted
rather than written as null, and an empty ``required`` list is omitted.
"""

from __future__ import annotations

import json
from functools import lru_cache
from typing import Annotated, Any, Literal, Union

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    JsonValue,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    model_serializer,
)

from typeschema_core.config import get_settings


class _SchemaNode(BaseModel):
    """Shared configuration for all schema node variants."""

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    def to_json_element(self) -> dict[str, Any]:
        """Encode this node with the shared :class:`SchemaEncoder`."""
        return get_encoder().encode(self)


class ObjectSchema(_SchemaNode):
    """An "object" schema.

    Attributes:
        properties: Property schemas keyed by field name, in declaration order.
        required: Names of required properties. Never emitted when empty.
        additional_properties: Raw JSON value for ``additionalProperties``.
            Maps are described as open objects whose values follow this schema.
    """

    type: Literal["object"] = "object"
    properties: dict[str, JsonSchema] | None = None
    required: tuple[str, ...] | None = None
    additional_properties: JsonValue | None = Field(
        default=None,
        alias="additionalProperties",
    )

    @model_serializer(mode="wrap")
    def _omit_empty_required(self, handler: SerializerFunctionWrapHandler) -> dict[str, Any]:
        data = handler(self)
        if data.get("required") == []:
            del data["required"]
        return data


class StringSchema(_SchemaNode):
    """A "string" schema, optionally restricted to ``enum`` values."""

    type: Literal["string"] = "string"
    enum: tuple[str, ...] | None = None


class NumberSchema(_SchemaNode):
    """A "number" schema. Covers every integer and floating point kind."""

    type: Literal["number"] = "number"


class ArraySchema(_SchemaNode):
    """An "array" schema whose elements follow ``items``."""

    type: Literal["array"] = "array"
    items: JsonSchema


class BooleanSchema(_SchemaNode):
    """A "boolean" schema."""

    type: Literal["boolean"] = "boolean"


JsonSchema = Annotated[
    Union[ObjectSchema, StringSchema, NumberSchema, ArraySchema, BooleanSchema],
    Field(discriminator="type"),
]
"""Any schema node, discriminated by its ``type`` field."""

ObjectSchema.model_rebuild()
ArraySchema.model_rebuild()

_schema_adapter: TypeAdapter[JsonSchema] = TypeAdapter(JsonSchema)


class SchemaEncoder:
    """Encodes schema nodes into canonical JSON values.

    The encoding policy is fixed: the ``type`` discriminator and other
    defaults are always emitted, absent optional fields are never written as
    null. Only the text layout of :meth:`dumps` is configurable.

    One instance is shared per process (see :func:`get_encoder`).

    Args:
        indent: Indentation for :meth:`dumps`. ``None`` writes compact JSON.
    """

    def __init__(self, *, indent: int | None = None) -> None:
        self.indent = indent

    def encode(self, node: BaseModel) -> dict[str, Any]:
        """Encode a schema node into a JSON-compatible dictionary.

        Args:
            node: Any schema node variant.

        Returns:
            Dictionary with a ``type`` key and only the fields that are set.

        Example:
            >>> SchemaEncoder().encode(ArraySchema(items=StringSchema()))
            {'type': 'array', 'items': {'type': 'string'}}
        """
        return node.model_dump(mode="json", by_alias=True, exclude_none=True)

    def dumps(self, node: BaseModel, *, indent: int | None = None) -> str:
        """Encode a schema node and serialize it to JSON text."""
        return json.dumps(
            self.encode(node),
            indent=self.indent if indent is None else indent,
        )


@lru_cache(maxsize=1)
def get_encoder() -> SchemaEncoder:
    """Return the process-wide encoder, laid out with the configured indent."""
    return SchemaEncoder(indent=get_settings().indent)


def encode(node: JsonSchema) -> dict[str, Any]:
    """Encode a schema node with the process-wide encoder."""
    return get_encoder().encode(node)


def to_json(node: JsonSchema, *, indent: int | None = None) -> str:
    """Encode a schema node and return it as JSON text."""
    return get_encoder().dumps(node, indent=indent)


def parse_schema(data: dict[str, Any]) -> JsonSchema:
    """Build a schema node from its encoded form.

    Args:
        data: Encoded schema, e.g. loaded from an exported file.

    Returns:
        The matching schema variant, selected by ``data["type"]``.

    Raises:
        pydantic.ValidationError: If ``data`` is not a schema this module
            can represent.
    """
    return _schema_adapter.validate_python(data)
