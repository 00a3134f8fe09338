"""
Tests for validation options: defaults, environment flags and YAML files.
"""

import pytest
from shapecheck_core.config import ValidationOptions, load_options
from shapecheck_core.models.errors import ConfigurationError


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("SHAPECHECK_STRICT", "SHAPECHECK_DEEP", "SHAPECHECK_SUMMARY_LIMIT"):
        monkeypatch.delenv(name, raising=False)


class TestValidationOptions:
    def test_defaults(self):
        options = ValidationOptions.from_env()

        assert options.strict is True
        assert options.deep is False
        assert options.summary_limit == 5

    def test_env_flags(self, monkeypatch):
        monkeypatch.setenv("SHAPECHECK_STRICT", "no")
        monkeypatch.setenv("SHAPECHECK_DEEP", "1")
        monkeypatch.setenv("SHAPECHECK_SUMMARY_LIMIT", "3")

        options = ValidationOptions.from_env()

        assert (options.strict, options.deep, options.summary_limit) == (False, True, 3)

    def test_bad_limit_falls_back(self, monkeypatch):
        monkeypatch.setenv("SHAPECHECK_SUMMARY_LIMIT", "many")

        assert ValidationOptions.from_env().summary_limit == 5

    def test_root_context(self):
        context = ValidationOptions(strict=False, deep=True).context()

        assert context.path == ()
        assert (context.strict, context.deep) == (False, True)


class TestLoadOptions:
    def test_yaml_overrides(self, tmp_path):
        path = tmp_path / "shapecheck.yaml"
        path.write_text("deep: true\nsummary_limit: 10\n")

        options = load_options(path)

        assert (options.strict, options.deep, options.summary_limit) == (True, True, 10)

    def test_missing_file_uses_defaults(self, tmp_path):
        assert load_options(tmp_path / "absent.yaml") == ValidationOptions()

    def test_invalid_values(self, tmp_path):
        path = tmp_path / "shapecheck.yaml"
        path.write_text("summary_limit: 0\n")

        with pytest.raises(ConfigurationError, match="Invalid options"):
            load_options(path)
