"""typeschema-core: JSON Schema derivation from type structure.

This package provides:
- JsonSchema: Schema node models (object, string, number, array, boolean)
- TypeDescriptor: Structural description of a type
- derive_schema / json_schema: Descriptor (or Python type) to schema
- PythonTypeDescriptorProvider: Descriptors from pydantic models,
  dataclasses, enums and typing generics
- JSON Schema export utilities
"""

from __future__ import annotations

__version__ = "0.1.0"

# Configuration
from typeschema_core.config import TypeSchemaSettings, get_settings

# Derivation
from typeschema_core.derivation import derive_schema, is_element_required, json_schema

# Descriptors
from typeschema_core.descriptors import (
    DescriptorElement,
    DescriptorKind,
    DescriptorProvider,
    PrimitiveKind,
    TypeDescriptor,
)

# Error types
from typeschema_core.errors import (
    IntrospectionError,
    MalformedDescriptorError,
    TypeSchemaError,
    UnsupportedKindError,
)

# JSON Schema export functions
from typeschema_core.export import export_type_schema

# Initialization hooks
from typeschema_core.initializer import ensure_initialized, register_initializer
from typeschema_core.introspection import PythonTypeDescriptorProvider, describe

# Schema models
from typeschema_core.schemas import (
    ArraySchema,
    BooleanSchema,
    JsonSchema,
    NumberSchema,
    ObjectSchema,
    SchemaEncoder,
    StringSchema,
    encode,
    parse_schema,
    to_json,
)

__all__ = [
    "__version__",
    # Configuration
    "TypeSchemaSettings",
    "get_settings",
    # Derivation
    "derive_schema",
    "is_element_required",
    "json_schema",
    # Descriptors
    "DescriptorElement",
    "DescriptorKind",
    "DescriptorProvider",
    "PrimitiveKind",
    "TypeDescriptor",
    "PythonTypeDescriptorProvider",
    "describe",
    # Errors
    "TypeSchemaError",
    "UnsupportedKindError",
    "MalformedDescriptorError",
    "IntrospectionError",
    # Export
    "export_type_schema",
    # Initialization
    "ensure_initialized",
    "register_initializer",
    # Schema models
    "JsonSchema",
    "ObjectSchema",
    "StringSchema",
    "NumberSchema",
    "ArraySchema",
    "BooleanSchema",
    "SchemaEncoder",
    "encode",
    "to_json",
    "parse_schema",
]
