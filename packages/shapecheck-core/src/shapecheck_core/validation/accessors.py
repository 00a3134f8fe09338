"""
Value accessors: how the validator reads fields from runtime values.

The validator never touches a value's object model directly. It asks an
accessor which key a field is stored under, whether that key exists and, if
so, for its current value.

Decoded documents are keyed by the schema's own field names (``createdAt``),
while Python objects expose snake_case attributes (``created_at``); an
explicitly declared accessor wins for both.

Only a missing attribute or key counts as an absent field. Any other
exception raised while reading a value (a failing property, a broken
``__getitem__``) is a defect in the value's object model and propagates out
of validation unchanged.
"""

from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from shapecheck_core.models.types import FieldDescriptor


@runtime_checkable
class ValueAccessor(Protocol):
    def key(self, value: Any, field: FieldDescriptor) -> str: ...

    def has(self, value: Any, key: str) -> bool: ...

    def get(self, value: Any, key: str) -> Any: ...


class AttributeAccessor:
    """Reads attributes and properties (plain objects, dataclasses, pydantic models)."""

    def key(self, value: Any, field: FieldDescriptor) -> str:
        return field.accessor

    def has(self, value: Any, key: str) -> bool:
        return hasattr(value, key)

    def get(self, value: Any, key: str) -> Any:
        return getattr(value, key)


class MappingAccessor:
    """Reads keys of dict-like values (decoded JSON/YAML documents)."""

    def key(self, value: Any, field: FieldDescriptor) -> str:
        return field.mapping_key

    def has(self, value: Any, key: str) -> bool:
        return isinstance(value, Mapping) and key in value

    def get(self, value: Any, key: str) -> Any:
        return value[key]


class AutoAccessor:
    """Uses key lookup for mappings and attribute lookup for everything else."""

    def __init__(self):
        self._mapping = MappingAccessor()
        self._attribute = AttributeAccessor()

    def _pick(self, value: Any) -> ValueAccessor:
        return self._mapping if isinstance(value, Mapping) else self._attribute

    def key(self, value: Any, field: FieldDescriptor) -> str:
        return self._pick(value).key(value, field)

    def has(self, value: Any, key: str) -> bool:
        return self._pick(value).has(value, key)

    def get(self, value: Any, key: str) -> Any:
        return self._pick(value).get(value, key)


DEFAULT_ACCESSOR = AutoAccessor()
