"""Structural type descriptors.

A descriptor is the read-only, possibly nested description of a type that
schema derivation consumes. It says what *kind* of structure a type is
(primitive, class, list, map, enum, ...) and lists its children:

- class/object: one element per field, in declaration order
- list: one element, the item type
- map: two elements, key then value
- enum: one element per member (only the names matter)

Descriptors come from a :class:`DescriptorProvider`. The derivation engine
only depends on this module, never on how a provider inspects types, so
tests can build descriptors by hand with the factory helpers below.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from enum import Enum
from typing import Any, Protocol, runtime_checkable

from pydantic import BaseModel, ConfigDict, Field

from typeschema_core.errors import MalformedDescriptorError


class DescriptorKind(str, Enum):
    """Structural kind of a described type."""

    primitive = "primitive"
    class_ = "class"
    object = "object"
    list = "list"
    map = "map"
    polymorphic_open = "polymorphic_open"
    polymorphic_sealed = "polymorphic_sealed"
    enum = "enum"
    contextual = "contextual"


class PrimitiveKind(str, Enum):
    """Sub-kind of a primitive descriptor."""

    string = "string"
    char = "char"
    boolean = "boolean"
    byte = "byte"
    short = "short"
    int = "int"
    long = "long"
    float = "float"
    double = "double"


class DescriptorElement(BaseModel):
    """A named child of a descriptor.

    Attributes:
        name: Field name, member name, or positional label (``key``/``value``).
        descriptor: Descriptor of the child type. Enum members carry none.
        optional: True when the owning type supplies a default for the field.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str
    descriptor: TypeDescriptor | None = None
    optional: bool = False


class TypeDescriptor(BaseModel):
    """Read-only structural description of a type.

    Attributes:
        serial_name: Display name of the described type.
        kind: Structural kind that drives schema derivation.
        primitive: Primitive sub-kind; set only when ``kind`` is primitive.
        nullable: True when the type also admits null.
        elements: Ordered children, meaning depends on ``kind``.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    serial_name: str
    kind: DescriptorKind
    primitive: PrimitiveKind | None = None
    nullable: bool = False
    elements: tuple[DescriptorElement, ...] = Field(default_factory=tuple)

    @property
    def elements_count(self) -> int:
        return len(self.elements)

    @property
    def element_names(self) -> list[str]:
        return [element.name for element in self.elements]

    def _element(self, index: int) -> DescriptorElement:
        if not 0 <= index < len(self.elements):
            raise MalformedDescriptorError(
                f"no element at index {index}",
                serial_name=self.serial_name,
                index=index,
                internal_details=f"kind={self.kind.value} elements_count={len(self.elements)}",
            )
        return self.elements[index]

    def get_element_name(self, index: int) -> str:
        return self._element(index).name

    def is_element_optional(self, index: int) -> bool:
        return self._element(index).optional

    def get_element_descriptor(self, index: int) -> TypeDescriptor:
        """Return the descriptor of the child at ``index``.

        Raises:
            MalformedDescriptorError: If the element does not exist or has no
                descriptor.
        """
        element = self._element(index)
        if element.descriptor is None:
            raise MalformedDescriptorError(
                f"element '{element.name}' has no descriptor",
                serial_name=self.serial_name,
                index=index,
            )
        return element.descriptor


TypeDescriptor.model_rebuild()
DescriptorElement.model_rebuild()


@runtime_checkable
class DescriptorProvider(Protocol):
    """Supplies descriptors for concrete types.

    Implementations wrap a reflection or metadata facility. The default one is
    :class:`typeschema_core.introspection.PythonTypeDescriptorProvider`.
    """

    def describe(self, tp: Any) -> TypeDescriptor:
        """Return the descriptor for ``tp``."""
        ...


# Factory helpers for building descriptors by hand.


def primitive(kind: PrimitiveKind | str, *, name: str | None = None) -> TypeDescriptor:
    kind = PrimitiveKind(kind)
    return TypeDescriptor(
        serial_name=name or kind.value,
        kind=DescriptorKind.primitive,
        primitive=kind,
    )


def string() -> TypeDescriptor:
    return primitive(PrimitiveKind.string)


def boolean() -> TypeDescriptor:
    return primitive(PrimitiveKind.boolean)


def number(kind: PrimitiveKind | str = PrimitiveKind.double) -> TypeDescriptor:
    return primitive(kind)


def nullable(descriptor: TypeDescriptor) -> TypeDescriptor:
    """Return a copy of ``descriptor`` that also admits null."""
    if descriptor.nullable:
        return descriptor
    return descriptor.model_copy(
        update={"nullable": True, "serial_name": f"{descriptor.serial_name}?"}
    )


def field(name: str, descriptor: TypeDescriptor, *, optional: bool = False) -> DescriptorElement:
    return DescriptorElement(name=name, descriptor=descriptor, optional=optional)


def record(name: str, fields: Sequence[DescriptorElement] = ()) -> TypeDescriptor:
    """Describe a class with the given fields, or a stateless object when empty."""
    return TypeDescriptor(
        serial_name=name,
        kind=DescriptorKind.class_ if fields else DescriptorKind.object,
        elements=tuple(fields),
    )


def list_of(item: TypeDescriptor, *, name: str | None = None) -> TypeDescriptor:
    return TypeDescriptor(
        serial_name=name or f"list<{item.serial_name}>",
        kind=DescriptorKind.list,
        elements=(DescriptorElement(name="0", descriptor=item),),
    )


def map_of(key: TypeDescriptor, value: TypeDescriptor, *, name: str | None = None) -> TypeDescriptor:
    return TypeDescriptor(
        serial_name=name or f"map<{key.serial_name}, {value.serial_name}>",
        kind=DescriptorKind.map,
        elements=(
            DescriptorElement(name="key", descriptor=key),
            DescriptorElement(name="value", descriptor=value),
        ),
    )


def enum_of(name: str, members: Iterable[str]) -> TypeDescriptor:
    return TypeDescriptor(
        serial_name=name,
        kind=DescriptorKind.enum,
        elements=tuple(DescriptorElement(name=member) for member in members),
    )


def polymorphic(name: str, *, sealed: bool = False) -> TypeDescriptor:
    return TypeDescriptor(
        serial_name=name,
        kind=DescriptorKind.polymorphic_sealed if sealed else DescriptorKind.polymorphic_open,
    )


def contextual(name: str) -> TypeDescriptor:
    return TypeDescriptor(serial_name=name, kind=DescriptorKind.contextual)
