"""Errors raised by typeschema commands.

A failed command exits with ``EXIT_USER_ERROR`` when the target cannot be
loaded or described, and with ``EXIT_SYSTEM_ERROR`` when the schema file
cannot be written.
"""

from __future__ import annotations

from typing import NoReturn

import click

from typeschema_cli.output import error
from typeschema_core.errors import TypeSchemaError

EXIT_USER_ERROR = 1
EXIT_SYSTEM_ERROR = 2


class CLIError(click.ClickException):
    """A command failure reported to the user without a traceback.

    Attributes:
        message: User-facing error message.
        exit_code: Process exit code.
    """

    def __init__(self, message: str, exit_code: int = EXIT_USER_ERROR) -> None:
        super().__init__(message)
        self.exit_code = exit_code

    def show(self, file: object = None) -> None:
        error(self.format_message())


def handle_schema_error(err: TypeSchemaError, target: str) -> NoReturn:
    """Re-raise a typeschema-core error as a user error for ``target``."""
    raise CLIError(f"Schema derivation failed for {target}: {err.user_message}") from err


def handle_write_error(path: str, err: OSError) -> NoReturn:
    """Re-raise a failed file write as a system error.

    Args:
        path: Path the schema was written to.
        err: Error raised by the filesystem.

    Raises:
        CLIError: Always, with ``EXIT_SYSTEM_ERROR``.
    """
    reason = err.strerror or type(err).__name__
    raise CLIError(f"Cannot write {path}: {reason}", exit_code=EXIT_SYSTEM_ERROR) from err
