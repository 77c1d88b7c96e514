"""Tests for typeschema schema command."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from typeschema_cli.commands.schema import export_schema, load_target, schema, show_schema
from typeschema_cli.errors import EXIT_SYSTEM_ERROR, CLIError

PERSON_SCHEMA = {
    "type": "object",
    "properties": {
        "name": {"type": "string"},
        "age": {"type": "number"},
        "emails": {"type": "array", "items": {"type": "string"}},
    },
    "required": ["name"],
}


class TestLoadTarget:
    """Tests for resolving package.module:TypeName targets."""

    def test_loads_class(self) -> None:
        import sample_models

        assert load_target("sample_models:Person") is sample_models.Person

    def test_loads_nested_class(self) -> None:
        import sample_models

        assert load_target("sample_models:Team.Settings") is sample_models.Team.Settings

    @pytest.mark.parametrize("target", ["sample_models", "sample_models:", ":Person"])
    def test_rejects_malformed_target(self, target: str) -> None:
        with pytest.raises(CLIError, match="Invalid target"):
            load_target(target)

    def test_rejects_missing_module(self) -> None:
        with pytest.raises(CLIError, match="Cannot import module"):
            load_target("no_such_module_here:Thing")

    def test_rejects_missing_attribute(self) -> None:
        with pytest.raises(CLIError, match="has no attribute"):
            load_target("sample_models:Missing")


class TestSchemaGroup:
    """Tests for schema command group."""

    def test_schema_help(self, cli_runner: CliRunner) -> None:
        """Test schema --help shows subcommands."""
        result = cli_runner.invoke(schema, ["--help"])
        assert result.exit_code == 0
        assert "export" in result.output.lower()
        assert "show" in result.output.lower()


class TestSchemaShow:
    """Tests for schema show command."""

    def test_show_prints_schema(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(show_schema, ["sample_models:Person"])
        assert result.exit_code == 0
        assert json.loads(result.output) == PERSON_SCHEMA

    def test_show_compact(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(show_schema, ["sample_models:Person", "--compact"])
        assert result.exit_code == 0
        assert len(result.output.strip().splitlines()) == 1
        assert json.loads(result.output) == PERSON_SCHEMA

    def test_show_dataclass_with_enum_map(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(show_schema, ["sample_models:Team"])
        assert result.exit_code == 0
        content = json.loads(result.output)
        assert content["required"] == ["name"]
        assert content["properties"]["roles"] == {
            "type": "object",
            "additionalProperties": {"type": "string", "enum": ["admin", "viewer"]},
        }
        assert content["properties"]["members"]["items"] == PERSON_SCHEMA

    def test_show_unsupported_kind_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(show_schema, ["sample_models:Dynamic"])
        assert result.exit_code == 1
        assert "contextual" in result.output

    def test_show_unsupported_type_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(show_schema, ["sample_models:NOT_A_TYPE"])
        assert result.exit_code == 1
        assert "unsupported" in result.output

    def test_show_bad_target_fails(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(show_schema, ["sample_models"])
        assert result.exit_code == 1
        assert "Invalid target" in result.output


class TestSchemaExport:
    """Tests for schema export command."""

    def test_export_creates_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        """Test schema export creates JSON file."""
        output_file = tmp_path / "schema.json"
        result = cli_runner.invoke(
            export_schema, ["sample_models:Person", "--output", str(output_file)]
        )
        assert result.exit_code == 0
        assert output_file.exists()
        assert json.loads(output_file.read_text()) == PERSON_SCHEMA

    def test_export_default_path(self, isolated_runner: CliRunner) -> None:
        """Without --output the file is named after the type."""
        result = isolated_runner.invoke(export_schema, ["sample_models:Person"])
        assert result.exit_code == 0
        assert Path("schemas/Person.schema.json").exists()

    def test_export_creates_directory_if_needed(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """Test export creates nested directories."""
        output_file = tmp_path / "nested" / "dir" / "schema.json"
        result = cli_runner.invoke(
            export_schema, ["sample_models:Person", "-o", str(output_file)]
        )
        assert result.exit_code == 0
        assert output_file.exists()

    def test_export_reports_success(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        output_file = tmp_path / "person.json"
        result = cli_runner.invoke(
            export_schema, ["sample_models:Person", "-o", str(output_file)]
        )
        assert "Schema exported" in result.output

    def test_export_unsupported_kind_writes_nothing(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        output_file = tmp_path / "dynamic.json"
        result = cli_runner.invoke(
            export_schema, ["sample_models:Dynamic", "-o", str(output_file)]
        )
        assert result.exit_code == 1
        assert not output_file.exists()

    def test_export_onto_directory_is_system_error(
        self, cli_runner: CliRunner, tmp_path: Path
    ) -> None:
        """A path that cannot be written as a file exits with code 2."""
        target_dir = tmp_path / "taken"
        target_dir.mkdir()
        result = cli_runner.invoke(
            export_schema, ["sample_models:Person", "-o", str(target_dir)]
        )
        assert result.exit_code == EXIT_SYSTEM_ERROR
        assert "Cannot write" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)
