"""JSON Schema export functions for typeschema.

This module writes derived schemas to disk, e.g. for IDE validation or for
sharing a contract with services written in other languages.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog

from typeschema_core.derivation import json_schema
from typeschema_core.descriptors import DescriptorProvider
from typeschema_core.schemas.json_schema import encode, get_encoder

logger = structlog.get_logger(__name__)


def export_type_schema(
    tp: Any,
    output_path: Path | str | None = None,
    *,
    provider: DescriptorProvider | None = None,
) -> dict[str, Any]:
    """Derive and export the JSON Schema of a type.

    Args:
        tp: The type to describe.
        output_path: Optional path to write the schema file. If provided,
            creates parent directories as needed.
        provider: Descriptor provider, defaults to Python introspection.

    Returns:
        Dictionary containing the encoded JSON Schema.

    Example:
        >>> schema = export_type_schema(Person)
        >>> schema["type"]
        'object'

        >>> # Export to file
        >>> export_type_schema(Person, Path("schemas/person.schema.json"))
    """
    node = json_schema(tp, provider=provider)
    schema = encode(node)

    if output_path is not None:
        _write_schema_file(node, output_path)

    return schema


def _write_schema_file(node: Any, path: Path | str) -> None:
    """Write schema to JSON file.

    Args:
        node: Schema node to write.
        path: Output file path.
    """
    output_path = Path(path)

    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(get_encoder().dumps(node) + "\n", encoding="utf-8")

    logger.info("schema_exported", path=str(output_path))
