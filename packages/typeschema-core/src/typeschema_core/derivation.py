"""Schema derivation from type descriptors.

:func:`derive_schema` maps one :class:`~typeschema_core.descriptors.TypeDescriptor`
onto one schema node by dispatching on the descriptor kind and recursing into
children:

    primitive string/char          -> StringSchema
    primitive boolean              -> BooleanSchema
    primitive numeric kinds        -> NumberSchema
    class, object                  -> ObjectSchema with properties/required
    list                           -> ArraySchema(items=<item schema>)
    map                            -> ObjectSchema(additionalProperties=<value schema>)
    polymorphic (open or sealed)   -> ObjectSchema() without properties
    enum                           -> StringSchema(enum=<member names>)
    contextual                     -> UnsupportedKindError

Maps lose their key information and polymorphic types are not expanded into
their subtypes. Both are deliberate simplifications.

A field is required when it is neither optional (no default in the owning
type) nor nullable. Recursion follows the descriptor tree without cycle
detection, so a self-referential descriptor never terminates.
"""

from __future__ import annotations

from typing import Any

import structlog

from typeschema_core.descriptors import (
    DescriptorKind,
    DescriptorProvider,
    PrimitiveKind,
    TypeDescriptor,
)
from typeschema_core.errors import MalformedDescriptorError, UnsupportedKindError
from typeschema_core.initializer import ensure_initialized
from typeschema_core.schemas.json_schema import (
    ArraySchema,
    BooleanSchema,
    JsonSchema,
    NumberSchema,
    ObjectSchema,
    StringSchema,
    encode,
)

logger = structlog.get_logger(__name__)

_STRING_KINDS = frozenset({PrimitiveKind.string, PrimitiveKind.char})
_NUMBER_KINDS = frozenset(
    {
        PrimitiveKind.byte,
        PrimitiveKind.short,
        PrimitiveKind.int,
        PrimitiveKind.long,
        PrimitiveKind.float,
        PrimitiveKind.double,
    }
)


def json_schema(tp: Any, *, provider: DescriptorProvider | None = None) -> JsonSchema:
    """Return the JSON Schema for a Python type.

    Runs registered initializers, describes ``tp`` with ``provider`` and
    derives the schema from the resulting descriptor.

    Args:
        tp: The type to describe, e.g. a pydantic model or dataclass.
        provider: Descriptor provider. Defaults to
            :class:`~typeschema_core.introspection.PythonTypeDescriptorProvider`.

    Returns:
        The schema node for ``tp``.

    Raises:
        IntrospectionError: If the provider cannot describe ``tp``.
        UnsupportedKindError: If ``tp`` contains a contextual kind.

    Example:
        >>> class Person(BaseModel):
        ...     name: str
        ...     age: float | None
        ...     emails: list[str] = []
        >>> encode(json_schema(Person))["required"]
        ['name']

        Here ``name`` is required because it is neither nullable nor
        defaulted, ``age`` is nullable and ``emails`` has a default.
    """
    ensure_initialized()
    if provider is None:
        from typeschema_core.introspection import PythonTypeDescriptorProvider

        provider = PythonTypeDescriptorProvider()

    descriptor = provider.describe(tp)
    schema = derive_schema(descriptor)
    logger.debug(
        "schema_derived",
        serial_name=descriptor.serial_name,
        kind=descriptor.kind.value,
        schema_type=schema.type,
    )
    return schema


def derive_schema(descriptor: TypeDescriptor) -> JsonSchema:
    """Derive the schema node for ``descriptor``.

    Raises:
        UnsupportedKindError: If the descriptor (or a nested one) is contextual.
        MalformedDescriptorError: If a descriptor lacks children its kind needs.
    """
    match descriptor.kind:
        case DescriptorKind.primitive:
            return _primitive_schema(descriptor)
        case DescriptorKind.class_ | DescriptorKind.object:
            return _object_schema(descriptor)
        case DescriptorKind.list:
            return _array_schema(descriptor)
        case DescriptorKind.map:
            return _map_schema(descriptor)
        case DescriptorKind.polymorphic_open | DescriptorKind.polymorphic_sealed:
            return _polymorphic_schema(descriptor)
        case DescriptorKind.enum:
            return _enum_schema(descriptor)
        case DescriptorKind.contextual:
            raise UnsupportedKindError(
                descriptor.kind.value,
                serial_name=descriptor.serial_name,
            )
        case _:
            raise UnsupportedKindError(str(descriptor.kind), serial_name=descriptor.serial_name)


def is_element_required(descriptor: TypeDescriptor, index: int) -> bool:
    """Return True if the field at ``index`` is required.

    A field is required only if it has no default in the owning type and
    its type is not nullable.
    """
    return not descriptor.is_element_optional(index) and not (
        descriptor.get_element_descriptor(index).nullable
    )


def _object_schema(descriptor: TypeDescriptor) -> ObjectSchema:
    properties: dict[str, JsonSchema] = {}
    required: list[str] = []

    for index in range(descriptor.elements_count):
        name = descriptor.get_element_name(index)
        properties[name] = derive_schema(descriptor.get_element_descriptor(index))

        if is_element_required(descriptor, index):
            required.append(name)

    return ObjectSchema(
        properties=properties,
        required=tuple(required) or None,
    )


def _array_schema(descriptor: TypeDescriptor) -> ArraySchema:
    # Lists have a single element descriptor for items
    return ArraySchema(items=derive_schema(descriptor.get_element_descriptor(0)))


def _map_schema(descriptor: TypeDescriptor) -> ObjectSchema:
    # Keys are assumed string-like and are not modeled
    value_schema = derive_schema(descriptor.get_element_descriptor(1))
    return ObjectSchema(additional_properties=encode(value_schema))


def _polymorphic_schema(descriptor: TypeDescriptor) -> ObjectSchema:
    # Subtypes are not expanded
    return ObjectSchema()


def _enum_schema(descriptor: TypeDescriptor) -> StringSchema:
    return StringSchema(enum=tuple(descriptor.element_names))


def _primitive_schema(descriptor: TypeDescriptor) -> JsonSchema:
    kind = descriptor.primitive
    if kind is None:
        raise MalformedDescriptorError(
            "primitive descriptor has no primitive kind",
            serial_name=descriptor.serial_name,
        )
    if kind in _STRING_KINDS:
        return StringSchema()
    if kind is PrimitiveKind.boolean:
        return BooleanSchema()
    if kind in _NUMBER_KINDS:
        return NumberSchema()
    raise UnsupportedKindError(f"primitive:{kind.value}", serial_name=descriptor.serial_name)
