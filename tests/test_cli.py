"""Tests for the command-line interface."""

import json
from pathlib import Path
from typing import Any

import pytest
from typer.testing import CliRunner

from oca_validator.cli import EXIT_INVALID, EXIT_SETUP_ERROR, app

runner = CliRunner()


def write_json(path: Path, data: Any) -> Path:
    """Write data as JSON and return the path."""
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


@pytest.fixture
def valid_data_file(tmp_path: Path, valid_person_record: dict[str, Any]) -> Path:
    """Write a valid person record."""
    return write_json(tmp_path / "valid.json", valid_person_record)


@pytest.fixture
def invalid_data_file(tmp_path: Path, valid_person_record: dict[str, Any]) -> Path:
    """Write a person record with two errors."""
    record = {**valid_person_record, "age": "old", "color": "blue"}
    del record["name"]
    return write_json(tmp_path / "invalid.json", record)


class TestValidateCommand:
    """Tests for the validate command."""

    def test_valid(self, schema_yaml_file: Path, valid_data_file: Path) -> None:
        """Test that a valid record exits cleanly."""
        result = runner.invoke(
            app, ["validate", "-s", str(schema_yaml_file), "-d", str(valid_data_file)]
        )
        assert result.exit_code == 0
        assert "Data is valid" in result.stdout

    def test_invalid(self, schema_yaml_file: Path, invalid_data_file: Path) -> None:
        """Test that an invalid record exits with the invalid code."""
        result = runner.invoke(
            app, ["validate", "-s", str(schema_yaml_file), "-d", str(invalid_data_file)]
        )
        assert result.exit_code == EXIT_INVALID
        assert "Errors: 3" in result.stdout

    def test_json_output(self, schema_json_file: Path, invalid_data_file: Path) -> None:
        """Test machine-readable output in declaration order."""
        result = runner.invoke(
            app,
            ["validate", "-s", str(schema_json_file), "-d", str(invalid_data_file), "--json"],
        )
        assert result.exit_code == EXIT_INVALID
        payload = json.loads(result.stdout)
        assert payload["valid"] is False
        assert [e["attribute"] for e in payload["errors"]] == ["name", "age", "color"]
        assert [e["rule"] for e in payload["errors"]] == [
            "missing_required_value",
            "not_a_number",
            "not_in_entry_codes",
        ]

    def test_order_option(self, schema_json_file: Path, invalid_data_file: Path) -> None:
        """Test sorting errors by name from the command line."""
        result = runner.invoke(
            app,
            [
                "validate",
                "-s",
                str(schema_json_file),
                "-d",
                str(invalid_data_file),
                "--json",
                "--order",
                "name",
            ],
        )
        payload = json.loads(result.stdout)
        assert [e["attribute"] for e in payload["errors"]] == ["age", "color", "name"]

    def test_invalid_order_option(self, schema_json_file: Path, valid_data_file: Path) -> None:
        """Test that unknown orders are rejected."""
        result = runner.invoke(
            app,
            [
                "validate",
                "-s",
                str(schema_json_file),
                "-d",
                str(valid_data_file),
                "--order",
                "random",
            ],
        )
        assert result.exit_code == EXIT_SETUP_ERROR

    def test_strict_option(self, tmp_path: Path, schema_json_file: Path) -> None:
        """Test that --strict checks array elements."""
        data = write_json(tmp_path / "data.json", {"name": "a", "age": 1, "tags": [1]})

        lenient = runner.invoke(
            app, ["validate", "-s", str(schema_json_file), "-d", str(data), "--json"]
        )
        assert lenient.exit_code == 0

        strict = runner.invoke(
            app,
            ["validate", "-s", str(schema_json_file), "-d", str(data), "--json", "--strict"],
        )
        assert strict.exit_code == EXIT_INVALID
        payload = json.loads(strict.stdout)
        assert [e["attribute"] for e in payload["errors"]] == ["tags[0]"]

    def test_strict_from_config(self, tmp_path: Path, schema_json_file: Path) -> None:
        """Test that strict mode can come from the config file."""
        data = write_json(tmp_path / "data.json", {"name": "a", "age": 1, "tags": [1]})
        config = tmp_path / "config.yaml"
        config.write_text("validation:\n  strict_nested: true\n", encoding="utf-8")

        result = runner.invoke(
            app,
            ["validate", "-s", str(schema_json_file), "-d", str(data), "-c", str(config)],
        )
        assert result.exit_code == EXIT_INVALID

        overridden = runner.invoke(
            app,
            [
                "validate",
                "-s",
                str(schema_json_file),
                "-d",
                str(data),
                "-c",
                str(config),
                "--no-strict",
            ],
        )
        assert overridden.exit_code == 0

    def test_not_an_object(self, tmp_path: Path, schema_json_file: Path) -> None:
        """Test that non-object data is a setup error."""
        data = write_json(tmp_path / "data.json", [1, 2])
        result = runner.invoke(app, ["validate", "-s", str(schema_json_file), "-d", str(data)])
        assert result.exit_code == EXIT_SETUP_ERROR
        assert "Data is not an object" in result.stdout

    def test_unparsable_data(self, tmp_path: Path, schema_json_file: Path) -> None:
        """Test that malformed JSON is a setup error."""
        data = tmp_path / "data.json"
        data.write_text("{oops", encoding="utf-8")
        result = runner.invoke(
            app, ["validate", "-s", str(schema_json_file), "-d", str(data), "--json"]
        )
        assert result.exit_code == EXIT_SETUP_ERROR
        payload = json.loads(result.stdout)
        assert payload["valid"] is False
        assert payload["setup_error"].startswith("Failed to parse data")

    def test_non_json_constant_keeps_stdout_json(
        self, tmp_path: Path, schema_json_file: Path
    ) -> None:
        """Test that Infinity in the data is rejected and --json output stays strict JSON."""
        data = tmp_path / "data.json"
        data.write_text('{"age": Infinity}', encoding="utf-8")
        result = runner.invoke(
            app, ["validate", "-s", str(schema_json_file), "-d", str(data), "--json"]
        )
        assert result.exit_code == EXIT_SETUP_ERROR

        def reject(name: str) -> Any:
            raise AssertionError(name)

        payload = json.loads(result.stdout, parse_constant=reject)
        assert "Invalid JSON constant: Infinity" in payload["setup_error"]

    def test_invalid_schema(self, tmp_path: Path, valid_data_file: Path) -> None:
        """Test that a broken schema is a setup error."""
        schema = write_json(tmp_path / "schema.json", {"attributes": {"x": {"type": "Int"}}})
        result = runner.invoke(app, ["validate", "-s", str(schema), "-d", str(valid_data_file)])
        assert result.exit_code == EXIT_SETUP_ERROR

    def test_invalid_config(
        self, tmp_path: Path, schema_json_file: Path, valid_data_file: Path
    ) -> None:
        """Test that a broken config is a setup error."""
        config = tmp_path / "config.yaml"
        config.write_text("validation:\n  error_order: random\n", encoding="utf-8")
        result = runner.invoke(
            app,
            [
                "validate",
                "-s",
                str(schema_json_file),
                "-d",
                str(valid_data_file),
                "-c",
                str(config),
            ],
        )
        assert result.exit_code == EXIT_SETUP_ERROR


class TestOtherCommands:
    """Tests for inspect and version."""

    def test_inspect(self, schema_yaml_file: Path) -> None:
        """Test listing schema attributes."""
        result = runner.invoke(app, ["inspect", "-s", str(schema_yaml_file)])
        assert result.exit_code == 0
        for name in ("name", "age", "tags", "address"):
            assert name in result.stdout
        assert "Total attributes: 10" in result.stdout

    def test_inspect_broken_schema(self, tmp_path: Path) -> None:
        """Test that a broken schema fails inspect."""
        schema = write_json(tmp_path / "schema.json", {"fields": {}})
        result = runner.invoke(app, ["inspect", "-s", str(schema)])
        assert result.exit_code == EXIT_SETUP_ERROR

    def test_version(self) -> None:
        """Test the version command."""
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert "oca-validator version" in result.stdout
