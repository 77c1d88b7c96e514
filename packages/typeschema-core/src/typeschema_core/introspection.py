"""Descriptors from Python type annotations.

:class:`PythonTypeDescriptorProvider` is the default
:class:`~typeschema_core.descriptors.DescriptorProvider`. It reads the
structure of pydantic models, dataclasses, enums and typing generics and
turns it into a :class:`~typeschema_core.descriptors.TypeDescriptor`.

Mapping:

    str                                   -> primitive string
    bool                                  -> primitive boolean
    int                                   -> primitive long
    float, Decimal                        -> primitive double
    Enum subclass, Literal["a", ...]      -> enum
    list/tuple[X, ...]/set/Sequence[X]    -> list
    dict/Mapping[K, V]                    -> map
    X | None                              -> X, nullable
    A | B (several non-None types)        -> polymorphic (sealed)
    abstract class                        -> polymorphic (open)
    pydantic model, dataclass             -> class (object when it has no fields)
    Any, object                           -> contextual

A pydantic field is optional when it is not required (it has a default). A
dataclass field is optional when it declares ``default`` or
``default_factory``.
"""

from __future__ import annotations

import collections
import collections.abc
import dataclasses
import inspect
import types
import typing
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel

from typeschema_core.descriptors import (
    DescriptorElement,
    PrimitiveKind,
    TypeDescriptor,
    contextual,
    enum_of,
    field,
    list_of,
    map_of,
    nullable,
    polymorphic,
    primitive,
    record,
)
from typeschema_core.errors import IntrospectionError

_NONE_TYPE = type(None)

_PRIMITIVES: dict[Any, PrimitiveKind] = {
    str: PrimitiveKind.string,
    bool: PrimitiveKind.boolean,
    int: PrimitiveKind.long,
    float: PrimitiveKind.double,
    Decimal: PrimitiveKind.double,
}

_SEQUENCE_ORIGINS = frozenset(
    {
        list,
        tuple,
        set,
        frozenset,
        collections.deque,
        collections.abc.Iterable,
        collections.abc.Collection,
        collections.abc.Sequence,
        collections.abc.MutableSequence,
        collections.abc.Set,
        collections.abc.MutableSet,
    }
)

_MAPPING_ORIGINS = frozenset(
    {
        dict,
        collections.OrderedDict,
        collections.defaultdict,
        collections.abc.Mapping,
        collections.abc.MutableMapping,
    }
)


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return tp.__qualname__
    return repr(tp).replace("typing.", "")


class PythonTypeDescriptorProvider:
    """Builds descriptors from Python types.

    Example:
        >>> @dataclass
        ... class Point:
        ...     x: float
        ...     y: float = 0.0
        >>> descriptor = PythonTypeDescriptorProvider().describe(Point)
        >>> descriptor.element_names
        ['x', 'y']
        >>> descriptor.is_element_optional(1)
        True
    """

    def describe(self, tp: Any) -> TypeDescriptor:
        """Return the descriptor for ``tp``.

        Raises:
            IntrospectionError: If ``tp`` (or a type nested in it) is not
                supported or refers to itself.
        """
        return self._describe(tp, ())

    def _describe(self, tp: Any, seen: tuple[type, ...]) -> TypeDescriptor:
        origin = typing.get_origin(tp)
        args = typing.get_args(tp)

        if origin is Annotated:
            return self._describe(args[0], seen)

        supertype = getattr(tp, "__supertype__", None)
        if supertype is not None:
            # typing.NewType
            return self._describe(supertype, seen)

        if tp is Any or tp is object:
            return contextual(_type_name(tp))

        if origin is Union or origin is types.UnionType:
            return self._describe_union(tp, args, seen)

        if origin is Literal:
            return self._describe_literal(tp, args)

        if origin in _SEQUENCE_ORIGINS or tp in _SEQUENCE_ORIGINS:
            return self._describe_sequence(tp, origin, args, seen)

        if origin in _MAPPING_ORIGINS or tp in _MAPPING_ORIGINS:
            key, value = args if len(args) == 2 else (str, Any)
            return map_of(self._describe(key, seen), self._describe(value, seen), name=_type_name(tp))

        if tp in _PRIMITIVES:
            return primitive(_PRIMITIVES[tp], name=_type_name(tp))

        if isinstance(tp, type):
            if issubclass(tp, Enum):
                return enum_of(tp.__qualname__, _enum_member_names(tp))
            if tp in seen:
                raise IntrospectionError(
                    "type refers to itself",
                    type_name=tp.__qualname__,
                    internal_details=" -> ".join(t.__qualname__ for t in (*seen, tp)),
                )
            if inspect.isabstract(tp):
                return polymorphic(tp.__qualname__)
            if issubclass(tp, BaseModel):
                return self._describe_model(tp, (*seen, tp))
            if dataclasses.is_dataclass(tp):
                return self._describe_dataclass(tp, (*seen, tp))

        raise IntrospectionError("unsupported type", type_name=_type_name(tp))

    def _describe_union(
        self, tp: Any, args: tuple[Any, ...], seen: tuple[type, ...]
    ) -> TypeDescriptor:
        members = [arg for arg in args if arg is not _NONE_TYPE]
        if not members:
            raise IntrospectionError("union has no non-None member", type_name=_type_name(tp))

        if len(members) == 1:
            descriptor = self._describe(members[0], seen)
        else:
            # Validate members eagerly so unsupported types fail here too
            for member in members:
                self._describe(member, seen)
            descriptor = polymorphic(_type_name(tp), sealed=True)

        if len(members) < len(args):
            return nullable(descriptor)
        return descriptor

    def _describe_literal(self, tp: Any, args: tuple[Any, ...]) -> TypeDescriptor:
        values = [arg.value if isinstance(arg, Enum) else arg for arg in args]
        if not all(isinstance(value, str) for value in values):
            raise IntrospectionError(
                "only string literals can be described",
                type_name=_type_name(tp),
            )
        return enum_of(_type_name(tp), values)

    def _describe_sequence(
        self, tp: Any, origin: Any, args: tuple[Any, ...], seen: tuple[type, ...]
    ) -> TypeDescriptor:
        if origin is tuple and args and not (len(args) == 2 and args[1] is Ellipsis):
            raise IntrospectionError(
                "fixed-length tuples are not supported, use tuple[X, ...]",
                type_name=_type_name(tp),
            )
        item = args[0] if args else Any
        return list_of(self._describe(item, seen), name=_type_name(tp))

    def _describe_model(self, model: type[BaseModel], seen: tuple[type, ...]) -> TypeDescriptor:
        elements: list[DescriptorElement] = []
        for name, info in model.model_fields.items():
            elements.append(
                field(
                    info.serialization_alias or info.alias or name,
                    self._describe(info.annotation, seen),
                    optional=not info.is_required(),
                )
            )
        return record(model.__qualname__, elements)

    def _describe_dataclass(self, cls: type, seen: tuple[type, ...]) -> TypeDescriptor:
        try:
            hints = typing.get_type_hints(cls, include_extras=True)
        except NameError as exc:
            raise IntrospectionError(
                "annotations could not be resolved",
                type_name=cls.__qualname__,
                internal_details=str(exc),
            ) from exc
        elements: list[DescriptorElement] = []
        for item in dataclasses.fields(cls):
            has_default = (
                item.default is not dataclasses.MISSING
                or item.default_factory is not dataclasses.MISSING
            )
            elements.append(
                field(
                    item.name,
                    self._describe(hints.get(item.name, item.type), seen),
                    optional=has_default,
                )
            )
        return record(cls.__qualname__, elements)


def _enum_member_names(enum_cls: type[Enum]) -> list[str]:
    # String-valued members serialize as their value, others by name
    return [
        member.value if isinstance(member.value, str) else member.name
        for member in enum_cls
    ]


def describe(tp: Any) -> TypeDescriptor:
    """Describe ``tp`` with the default provider."""
    return PythonTypeDescriptorProvider().describe(tp)

