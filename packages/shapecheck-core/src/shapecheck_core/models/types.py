"""
Schema type graph: kinds, nodes, object definitions and field descriptors.

Object definitions are shared between every node that refers to them, so a
field may be typed as its own enclosing object (directly or through other
objects). Nodes are immutable; nullable and non-null variants of the same
object share one definition.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Iterable

from shapecheck_core.models.errors import SchemaDefinitionError


class TypeKind(str, Enum):
    SCALAR = "SCALAR"
    ENUM = "ENUM"
    LIST = "LIST"
    OBJECT = "OBJECT"


_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])|(?<=[A-Z])(?=[A-Z][a-z])")


def underscore(name: str) -> str:
    """Convert a camelCase field name into its snake_case accessor key."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class EnumValue:
    """One permitted enum member: schema name plus its runtime value."""

    name: str
    value: Any = None

    def __post_init__(self):
        if self.value is None:
            object.__setattr__(self, "value", self.name)


@dataclass(frozen=True, eq=False)
class TypeNode:
    """One node of the schema graph."""

    kind: TypeKind
    name: str
    nullable: bool = True
    of_type: TypeNode | None = None
    scalar: str | None = None
    enum_values: tuple[EnumValue, ...] = ()
    definition: ObjectDefinition | None = field(default=None, repr=False)

    @property
    def is_list(self) -> bool:
        return self.kind is TypeKind.LIST

    @property
    def is_scalar(self) -> bool:
        return self.kind is TypeKind.SCALAR

    @property
    def is_enum(self) -> bool:
        return self.kind is TypeKind.ENUM

    @property
    def is_object(self) -> bool:
        return self.kind is TypeKind.OBJECT

    @property
    def fields(self) -> tuple[FieldDescriptor, ...]:
        if self.definition is None:
            raise SchemaDefinitionError(f"type {self.name} of kind {self.kind.value} has no fields")
        return tuple(self.definition.fields)

    @property
    def permitted_values(self) -> list[Any]:
        return [member.value for member in self.enum_values]

    def unwrap(self) -> TypeNode:
        """Strip list wrappers and return the innermost named type."""
        node = self
        while node.is_list:
            node = node.of_type
        return node

    def non_null(self) -> TypeNode:
        return self if not self.nullable else replace(self, nullable=False)

    def as_nullable(self) -> TypeNode:
        return self if self.nullable else replace(self, nullable=True)

    def to_type_string(self) -> str:
        """Render SDL-style notation, e.g. ``[User!]!``."""
        inner = f"[{self.of_type.to_type_string()}]" if self.is_list else self.name
        return inner if self.nullable else f"{inner}!"

    def __str__(self) -> str:
        return self.to_type_string()


@dataclass(frozen=True)
class FieldDescriptor:
    """A named, typed field of an object type.

    Without an explicit ``accessor`` the attribute name is the snake_case form
    of ``name`` and mappings are looked up by ``name`` itself.
    """

    name: str
    type: TypeNode
    accessor: str = ""
    explicit_accessor: bool = field(init=False, default=False)

    def __post_init__(self):
        object.__setattr__(self, "explicit_accessor", bool(self.accessor))
        if not self.accessor:
            object.__setattr__(self, "accessor", underscore(self.name))

    @property
    def mapping_key(self) -> str:
        return self.accessor if self.explicit_accessor else self.name


@dataclass(eq=False)
class ObjectDefinition:
    """Declaration side of an object type; fields are appended while building."""

    name: str
    fields: list[FieldDescriptor] = field(default_factory=list, repr=False)

    def add_field(self, name: str, type: TypeNode, accessor: str | None = None) -> FieldDescriptor:
        if any(existing.name == name for existing in self.fields):
            raise SchemaDefinitionError(f"field {name!r} is already declared on {self.name}")
        descriptor = FieldDescriptor(name=name, type=type, accessor=accessor or "")
        self.fields.append(descriptor)
        return descriptor

    def type(self, nullable: bool = True) -> TypeNode:
        return object_type(self, nullable=nullable)


def scalar(tag: str, nullable: bool = True) -> TypeNode:
    return TypeNode(kind=TypeKind.SCALAR, name=tag, nullable=nullable, scalar=tag)


def enum_type(name: str, values: Iterable[EnumValue | str], nullable: bool = True) -> TypeNode:
    members = tuple(v if isinstance(v, EnumValue) else EnumValue(v) for v in values)
    if not members:
        raise SchemaDefinitionError(f"enum {name} must declare at least one value")
    return TypeNode(kind=TypeKind.ENUM, name=name, nullable=nullable, enum_values=members)


def list_of(inner: TypeNode, nullable: bool = True) -> TypeNode:
    return TypeNode(kind=TypeKind.LIST, name=f"[{inner.name}]", nullable=nullable, of_type=inner)


def object_type(definition: ObjectDefinition, nullable: bool = True) -> TypeNode:
    return TypeNode(kind=TypeKind.OBJECT, name=definition.name, nullable=nullable, definition=definition)
