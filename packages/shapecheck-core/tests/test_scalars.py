"""
Tests for the scalar mapping table and value categorization.
"""

import datetime
import decimal

import pytest
from shapecheck_core.data.scalars import (
    BUILTIN_SCALARS,
    DEFAULT_SCALAR_MAPPING,
    DEFAULT_SCALARS,
    ScalarMapping,
    ValueCategory,
    categorize,
    category_name,
    load_scalar_mapping,
)
from shapecheck_core.models.errors import ConfigurationError, UnknownScalarKindError


class TestCategorize:
    """Native value categories."""

    @pytest.mark.parametrize(
        "value, category",
        [
            (None, ValueCategory.NULL),
            (True, ValueCategory.BOOLEAN),
            (0, ValueCategory.INTEGER),
            (1.0, ValueCategory.FLOAT),
            (decimal.Decimal("1.10"), ValueCategory.DECIMAL),
            ("x", ValueCategory.STRING),
            (datetime.datetime(2024, 1, 1), ValueCategory.DATETIME),
            (datetime.date(2024, 1, 1), ValueCategory.DATE),
            ({"a": 1}, ValueCategory.HASH),
            ([1], ValueCategory.LIST),
            ((1,), ValueCategory.LIST),
            (frozenset(), ValueCategory.LIST),
        ],
    )
    def test_categories(self, value, category):
        assert categorize(value) is category

    def test_bytes_and_objects_have_no_category(self):
        assert categorize(b"raw") is None
        assert categorize(object()) is None
        assert category_name(b"raw") == "bytes"


class TestScalarMapping:
    """Closed mapping with completeness checks."""

    def test_default_mapping_covers_builtin_scalars(self):
        assert set(BUILTIN_SCALARS) <= set(DEFAULT_SCALARS)
        assert DEFAULT_SCALARS.accepted("ID") == (ValueCategory.INTEGER, ValueCategory.STRING)

    def test_incomplete_mapping_rejected_at_construction(self):
        table = {tag: categories for tag, categories in DEFAULT_SCALAR_MAPPING.items() if tag != "Float"}

        with pytest.raises(ConfigurationError, match="missing: Float"):
            ScalarMapping(table)

    def test_empty_category_set_rejected(self):
        with pytest.raises(ConfigurationError, match="at least one"):
            DEFAULT_SCALARS.extend({"Money": []})

    def test_unknown_category_rejected(self):
        with pytest.raises(ConfigurationError, match="unknown value category"):
            DEFAULT_SCALARS.extend({"Money": ["Currency"]})

    def test_lookup_miss_raises(self):
        with pytest.raises(UnknownScalarKindError):
            DEFAULT_SCALARS.accepted("Money")

    def test_extend_returns_new_mapping(self):
        extended = DEFAULT_SCALARS.extend({"Money": ["Decimal", "Integer"]})

        assert "Money" in extended
        assert "Money" not in DEFAULT_SCALARS
        assert extended.accepts("Money", decimal.Decimal("9.99"))
        assert not extended.accepts("Money", "9.99")


class TestLoadScalarMapping:
    """Custom scalars from YAML."""

    def test_load_custom_scalars(self, tmp_path):
        path = tmp_path / "scalars.yaml"
        path.write_text("Money: [Decimal, Integer]\nUrl: [String]\n")

        mapping = load_scalar_mapping(path)

        assert mapping.accepted("Url") == (ValueCategory.STRING,)
        assert mapping.accepted("Int") == (ValueCategory.INTEGER,)

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_scalar_mapping(tmp_path / "absent.yaml")

    def test_invalid_structure(self, tmp_path):
        path = tmp_path / "scalars.yaml"
        path.write_text("- Money\n")

        with pytest.raises(ValueError, match="Invalid scalar mapping"):
            load_scalar_mapping(path)
