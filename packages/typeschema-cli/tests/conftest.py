"""Shared test fixtures for typeschema-cli tests.

Provides CliRunner fixtures and temporary directory helpers
for testing CLI commands.
"""

from __future__ import annotations

import logging
from collections.abc import Generator

import pytest
import structlog
from click.testing import CliRunner

from typeschema_cli import output


@pytest.fixture(autouse=True)
def reset_cli_state() -> Generator[None, None, None]:
    """Keep debug logs out of command output and restore the module console."""
    structlog.reset_defaults()
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
        cache_logger_on_first_use=False,
    )
    original_console = output.console
    yield
    output.console = original_console
    structlog.reset_defaults()


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click test runner.

    Returns:
        CliRunner instance for testing CLI commands.
    """
    return CliRunner()


@pytest.fixture
def isolated_runner(cli_runner: CliRunner) -> Generator[CliRunner, None, None]:
    """Create a Click test runner with an isolated filesystem.

    Yields:
        CliRunner instance with isolated filesystem.
    """
    with cli_runner.isolated_filesystem():
        yield cli_runner
