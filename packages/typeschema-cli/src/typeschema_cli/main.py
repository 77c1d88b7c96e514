"""Entry point for the ``typeschema`` command."""

from __future__ import annotations

import click
import rich_click as rclick

from typeschema_cli import __version__
from typeschema_cli.commands.schema import schema
from typeschema_cli.output import set_no_color

rclick.rich_click.TEXT_MARKUP = "markdown"


def _apply_no_color(ctx: click.Context, param: click.Parameter, value: bool) -> None:
    if value:
        set_no_color(True)


def _configure_logging(ctx: click.Context, param: click.Parameter, value: str | None) -> None:
    from typeschema_core.observability import configure_logging

    configure_logging(log_level=value)


@rclick.group()
@click.version_option(version=__version__, prog_name="typeschema")
@click.option(
    "--no-color",
    is_flag=True,
    is_eager=True,
    expose_value=False,
    callback=_apply_no_color,
    help="Disable colored output.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"], case_sensitive=False),
    default=None,
    expose_value=False,
    callback=_configure_logging,
    help="Log level [default: TYPESCHEMA_LOG_LEVEL or WARNING].",
)
def cli() -> None:
    """typeschema - JSON Schema from Python types.

    - `typeschema schema show app.models:User` - Print a schema
    - `typeschema schema export app.models:User` - Write a schema file
    """


cli.add_command(schema)


if __name__ == "__main__":
    cli()
