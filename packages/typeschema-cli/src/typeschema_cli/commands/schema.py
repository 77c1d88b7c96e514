"""typeschema schema command - Derive and export JSON Schema.

Targets are given as ``package.module:QualifiedName`` and must be importable
from the current environment.
"""

from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any

import click

from typeschema_cli.errors import CLIError, handle_schema_error, handle_write_error
from typeschema_cli.output import print_json, success


def load_target(target: str) -> Any:
    """Import the type named by ``target``.

    Args:
        target: ``package.module:QualifiedName``, e.g. ``app.models:User``
            or ``app.models:Outer.Inner``.

    Returns:
        The imported object.

    Raises:
        CLIError: If the target is malformed or cannot be imported.
    """
    module_name, sep, qualname = target.partition(":")
    if not sep or not module_name or not qualname:
        raise CLIError(f"Invalid target '{target}'. Expected 'package.module:TypeName'")

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        raise CLIError(f"Cannot import module '{module_name}': {e}") from None

    for part in qualname.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError:
            raise CLIError(f"'{module_name}' has no attribute '{qualname}'") from None
    return obj


def _derive(target: str) -> Any:
    # Import here to avoid heavy imports at CLI startup
    from typeschema_core import TypeSchemaError, json_schema

    tp = load_target(target)
    try:
        return json_schema(tp)
    except TypeSchemaError as e:
        handle_schema_error(e, target)


@click.group()
def schema() -> None:
    """Derive JSON Schema from Python types.

    **Commands:**

    - `typeschema schema show` - Print the JSON Schema of a type
    - `typeschema schema export` - Write the JSON Schema of a type to a file
    """
    pass


@schema.command("show")
@click.argument("target")
@click.option(
    "--compact",
    is_flag=True,
    default=False,
    help="Print the schema on a single line.",
)
def show_schema(target: str, compact: bool) -> None:
    """Print the JSON Schema of TARGET.

    TARGET is an importable type given as `package.module:TypeName`.

    Examples:

        typeschema schema show app.models:User

        typeschema schema show app.models:User --compact
    """
    from typeschema_core import encode, get_settings

    node = _derive(target)
    print_json(encode(node), indent=None if compact else get_settings().indent)


@schema.command("export")
@click.argument("target")
@click.option(
    "-o",
    "--output",
    "output_path",
    type=click.Path(),
    default=None,
    help="Output path [default: ./schemas/<TypeName>.schema.json]",
)
def export_schema(target: str, output_path: str | None) -> None:
    """Export the JSON Schema of TARGET to a file.

    Examples:

        typeschema schema export app.models:User

        typeschema schema export app.models:User --output custom/path/user.schema.json
    """
    from typeschema_core import TypeSchemaError, export_type_schema

    tp = load_target(target)
    if output_path is None:
        type_name = target.partition(":")[2].rsplit(".", 1)[-1]
        output_path = f"./schemas/{type_name}.schema.json"
    output = Path(output_path)

    try:
        export_type_schema(tp, output)
    except TypeSchemaError as e:
        handle_schema_error(e, target)
    except OSError as e:
        handle_write_error(output_path, e)

    success(f"Schema exported to {output}")
