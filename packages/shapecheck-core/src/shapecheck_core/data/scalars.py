"""
Scalar mapping table: which native value categories each scalar tag accepts.

The table is static configuration. It is checked for completeness when it is
built, so a lookup miss while validating always means a schema uses a scalar
nobody declared, which is a configuration defect rather than bad data.
"""

from __future__ import annotations

import datetime
import decimal
from collections.abc import Mapping, Sequence, Set
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import TypeAdapter

from shapecheck_core.data.loader import load_yaml_typed
from shapecheck_core.models.errors import ConfigurationError, UnknownScalarKindError


class ValueCategory(str, Enum):
    INTEGER = "Integer"
    FLOAT = "Float"
    DECIMAL = "Decimal"
    STRING = "String"
    BOOLEAN = "Boolean"
    DATETIME = "DateTime"
    DATE = "Date"
    HASH = "Hash"
    LIST = "List"
    NULL = "Null"


BUILTIN_SCALARS = ("Int", "ID", "String", "Float", "Boolean", "ISO8601DateTime", "ISO8601Date", "JSON")

DEFAULT_SCALAR_MAPPING: dict[str, tuple[ValueCategory, ...]] = {
    "Int": (ValueCategory.INTEGER,),
    "ID": (ValueCategory.INTEGER, ValueCategory.STRING),
    "String": (ValueCategory.STRING,),
    "Float": (ValueCategory.FLOAT, ValueCategory.INTEGER, ValueCategory.DECIMAL),
    "Boolean": (ValueCategory.BOOLEAN,),
    "ISO8601DateTime": (ValueCategory.DATETIME,),
    "ISO8601Date": (ValueCategory.DATE,),
    "JSON": (
        ValueCategory.HASH,
        ValueCategory.LIST,
        ValueCategory.STRING,
        ValueCategory.INTEGER,
        ValueCategory.FLOAT,
        ValueCategory.BOOLEAN,
        ValueCategory.NULL,
    ),
}


def categorize(value: Any) -> ValueCategory | None:
    """Return the category of a native value, or None if it has none."""
    # bool before int, datetime before date: both are subclasses
    if value is None:
        return ValueCategory.NULL
    if isinstance(value, bool):
        return ValueCategory.BOOLEAN
    if isinstance(value, int):
        return ValueCategory.INTEGER
    if isinstance(value, float):
        return ValueCategory.FLOAT
    if isinstance(value, decimal.Decimal):
        return ValueCategory.DECIMAL
    if isinstance(value, str):
        return ValueCategory.STRING
    if isinstance(value, datetime.datetime):
        return ValueCategory.DATETIME
    if isinstance(value, datetime.date):
        return ValueCategory.DATE
    if isinstance(value, Mapping):
        return ValueCategory.HASH
    if isinstance(value, (Sequence, Set)) and not isinstance(value, (bytes, bytearray)):
        return ValueCategory.LIST
    return None


def category_name(value: Any) -> str:
    category = categorize(value)
    return category.value if category is not None else type(value).__name__


class ScalarMapping:
    """Closed mapping from scalar tag to the set of accepted value categories."""

    def __init__(
        self,
        table: Mapping[str, Sequence[ValueCategory | str]],
        required: Sequence[str] = BUILTIN_SCALARS,
    ):
        resolved: dict[str, tuple[ValueCategory, ...]] = {}
        for tag, categories in table.items():
            try:
                resolved[tag] = tuple(ValueCategory(c) for c in categories)
            except ValueError as e:
                raise ConfigurationError(f"scalar {tag!r} maps to an unknown value category: {e}") from e
            if not resolved[tag]:
                raise ConfigurationError(f"scalar {tag!r} must accept at least one value category")

        missing = [tag for tag in required if tag not in resolved]
        if missing:
            raise ConfigurationError(f"scalar mapping is incomplete, missing: {', '.join(missing)}")

        self._table = resolved

    def __contains__(self, tag: str) -> bool:
        return tag in self._table

    def __iter__(self):
        return iter(self._table)

    def __len__(self) -> int:
        return len(self._table)

    def accepted(self, tag: str) -> tuple[ValueCategory, ...]:
        try:
            return self._table[tag]
        except KeyError:
            raise UnknownScalarKindError(tag) from None

    def accepts(self, tag: str, value: Any) -> bool:
        return categorize(value) in self.accepted(tag)

    def extend(self, extra: Mapping[str, Sequence[ValueCategory | str]]) -> ScalarMapping:
        """Return a new mapping with custom scalars added or overridden."""
        return ScalarMapping({**self._table, **extra})


DEFAULT_SCALARS = ScalarMapping(DEFAULT_SCALAR_MAPPING)


def load_scalar_mapping(path: Path | str, base: ScalarMapping = DEFAULT_SCALARS) -> ScalarMapping:
    """Load custom scalar tags from YAML (``Money: [Decimal, Integer]``) on top of ``base``."""
    extra = load_yaml_typed(path, adapter=TypeAdapter(dict[str, list[str]]), what="scalar mapping")
    return base.extend(extra)
