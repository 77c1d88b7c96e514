"""Unit tests for JSON Schema export."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path

import pytest
from pydantic import BaseModel

from typeschema_core.errors import UnsupportedKindError
from typeschema_core.export import export_type_schema


class Status(str, Enum):
    active = "active"
    disabled = "disabled"


class Account(BaseModel):
    id: str
    status: Status = Status.active
    limits: dict[str, float] = {}


class Opaque(BaseModel):
    data: object


class TestExportTypeSchema:
    """Tests for export_type_schema()."""

    def test_returns_encoded_schema(self) -> None:
        schema = export_type_schema(Account)
        assert schema == {
            "type": "object",
            "properties": {
                "id": {"type": "string"},
                "status": {"type": "string", "enum": ["active", "disabled"]},
                "limits": {"type": "object", "additionalProperties": {"type": "number"}},
            },
            "required": ["id"],
        }

    def test_writes_file_and_creates_directories(self, tmp_path: Path) -> None:
        output = tmp_path / "nested" / "dir" / "account.schema.json"
        schema = export_type_schema(Account, output)

        assert output.exists()
        assert json.loads(output.read_text()) == schema

    def test_file_keeps_property_order(self, tmp_path: Path) -> None:
        output = tmp_path / "account.schema.json"
        export_type_schema(Account, output)

        content = json.loads(output.read_text())
        assert list(content["properties"]) == ["id", "status", "limits"]

    def test_unsupported_type_writes_nothing(self, tmp_path: Path) -> None:
        output = tmp_path / "opaque.schema.json"
        with pytest.raises(UnsupportedKindError):
            export_type_schema(Opaque, output)
        assert not output.exists()
