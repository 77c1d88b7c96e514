"""Shared pytest fixtures for typeschema-core tests.

This module provides structlog configuration and hand-built descriptors
used across the unit tests.
"""

from __future__ import annotations

from collections.abc import Generator

import pytest
import structlog

from typeschema_core import descriptors as d
from typeschema_core.descriptors import TypeDescriptor
from typeschema_core.initializer import reset_initializers


@pytest.fixture(autouse=True)
def configure_structlog_for_tests() -> None:
    """Configure structlog to output to stdout for test capture.

    This fixture ensures structlog outputs to stdout so that capsys
    can capture the output in tests.
    """
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        # No explicit file: each logger picks up the current sys.stdout (capsys)
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,  # Important for test isolation
    )


@pytest.fixture(autouse=True)
def clean_initializers() -> Generator[None, None, None]:
    """Start and finish every test with an empty initializer registry."""
    reset_initializers()
    yield
    reset_initializers()


@pytest.fixture
def person_descriptor() -> TypeDescriptor:
    """Return the descriptor of a person record.

    Fields:
    - name: string, no default (required)
    - age: nullable double, no default
    - emails: list of strings with a default
    """
    return d.record(
        "Person",
        [
            d.field("name", d.string()),
            d.field("age", d.nullable(d.number("double"))),
            d.field("emails", d.list_of(d.string()), optional=True),
        ],
    )


@pytest.fixture
def person_schema_json() -> dict[str, object]:
    """Return the expected encoded schema for ``person_descriptor``."""
    return {
        "type": "object",
        "properties": {
            "name": {"type": "string"},
            "age": {"type": "number"},
            "emails": {"type": "array", "items": {"type": "string"}},
        },
        "required": ["name"],
    }
