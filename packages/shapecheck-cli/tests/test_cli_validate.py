"""
Tests for the shapecheck command line: validate and schema commands.
"""

import pytest
import yaml
from click.testing import CliRunner
from shapecheck_cli.cli import cli

SCHEMA_YAML = """
enums:
  Role: [ADMIN, REGULAR]
types:
  User:
    fields:
      id: ID!
      name: String!
      role: Role
      location: Location
  Location:
    fields:
      city: String!
      residents: "[User!]!"
"""


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SHAPECHECK_STRICT", "SHAPECHECK_DEEP", "SHAPECHECK_SUMMARY_LIMIT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.yaml"
    path.write_text(SCHEMA_YAML)
    return path


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return str(path)


class TestValidateCommand:
    """shapecheck validate SCHEMA DATA --type NAME"""

    def test_conforming_document(self, tmp_path, schema_file):
        data = _write(tmp_path, "user.yaml", "id: 1\nname: Ann\nrole: ADMIN\nlocation:\n  city: Oslo\n  residents: []\n")

        result = CliRunner().invoke(cli, ["validate", str(schema_file), data, "--type", "User!"])

        assert result.exit_code == 0, result.output
        assert "conforms" in result.output

    def test_errors_exit_with_one(self, tmp_path, schema_file):
        data = _write(tmp_path, "user.yaml", "id: 1\nname: 5\nrole: OWNER\nlocation: null\n")

        result = CliRunner().invoke(cli, ["validate", str(schema_file), data, "--type", "User!"])

        assert result.exit_code == 1
        assert "Validation failed with 3 errors" in result.output
        assert 'expected field "name" to be `String`, but was `Integer`' in result.output

    def test_loose_mode(self, tmp_path, schema_file):
        data = _write(tmp_path, "user.yaml", "id: 1\nname: Ann\nrole: null\nlocation: null\n")

        strict = CliRunner().invoke(cli, ["validate", str(schema_file), data, "--type", "User!"])
        loose = CliRunner().invoke(cli, ["validate", str(schema_file), data, "--type", "User!", "--loose"])

        assert strict.exit_code == 1
        assert loose.exit_code == 0, loose.output

    def test_deep_mode(self, tmp_path, schema_file):
        data = _write(tmp_path, "user.yaml", "id: 1\nname: Ann\nrole: ADMIN\nlocation:\n  city: 7\n  residents: []\n")

        shallow = CliRunner().invoke(cli, ["validate", str(schema_file), data, "--type", "User!"])
        deep = CliRunner().invoke(cli, ["validate", str(schema_file), data, "--type", "User!", "--deep"])

        assert shallow.exit_code == 0, shallow.output
        assert deep.exit_code == 1
        assert "location.city" in deep.output

    def test_export(self, tmp_path, schema_file):
        data = _write(tmp_path, "user.yaml", "id: 1\nrole: ADMIN\nlocation: null\n")
        export = tmp_path / "errors.yaml"

        result = CliRunner().invoke(
            cli, ["validate", str(schema_file), data, "--type", "User!", "--loose", "--export", str(export)]
        )

        assert result.exit_code == 1
        report = yaml.safe_load(export.read_text())
        assert report["type"] == "User!"
        assert report["errors"] == [
            {"kind": "MISSING_FIELD", "path": "name", "context": report["errors"][0]["context"]}
        ]
        assert report["errors"][0]["context"]["accessor"] == "name"

    def test_unknown_type_is_a_load_error(self, tmp_path, schema_file):
        data = _write(tmp_path, "user.yaml", "id: 1\n")

        result = CliRunner().invoke(cli, ["validate", str(schema_file), data, "--type", "Widget"])

        assert result.exit_code == 2
        assert "unknown type" in result.output

    def test_unknown_scalar_is_a_configuration_error(self, tmp_path):
        schema = _write(tmp_path, "schema.yaml", "types:\n  Item:\n    fields:\n      id: ID!\n")
        data = _write(tmp_path, "item.yaml", "id: 1\n")
        scalars = _write(tmp_path, "scalars.yaml", "Money: [Currency]\n")

        result = CliRunner().invoke(cli, ["validate", schema, data, "--type", "Item", "--scalars", scalars])

        assert result.exit_code == 2

    def test_json_document_with_camel_case_keys(self, tmp_path):
        schema = _write(
            tmp_path,
            "schema.yaml",
            "types:\n  Event:\n    fields:\n      createdAt: String!\n      startsAt: String\n",
        )
        data = _write(tmp_path, "event.json", '{"createdAt": "2024-05-01", "startsAt": "2024-06-01"}')

        result = CliRunner().invoke(cli, ["validate", schema, data, "--type", "Event!"])

        assert result.exit_code == 0, result.output

    def test_config_file(self, tmp_path, schema_file):
        data = _write(tmp_path, "user.yaml", "id: 1\nname: Ann\nrole: null\nlocation: null\n")
        config = _write(tmp_path, "shapecheck.yaml", "strict: false\n")

        result = CliRunner().invoke(cli, ["validate", str(schema_file), data, "--type", "User", "--config", config])

        assert result.exit_code == 0, result.output


class TestSchemaCommand:
    """shapecheck schema SCHEMA"""

    def test_lists_types_and_fields(self, schema_file):
        result = CliRunner().invoke(cli, ["schema", str(schema_file)])

        assert result.exit_code == 0, result.output
        assert "User" in result.output
        assert "residents: [User!]!" in result.output

    def test_single_type(self, schema_file):
        result = CliRunner().invoke(cli, ["schema", str(schema_file), "--type", "Location"])

        assert result.exit_code == 0, result.output
        assert "city: String!" in result.output
        assert "role" not in result.output

    def test_unknown_type(self, schema_file):
        result = CliRunner().invoke(cli, ["schema", str(schema_file), "--type", "Widget"])

        assert result.exit_code == 2
