"""
Schema source for shapecheck: type reference parsing and YAML schema documents.

A schema document declares enums and object types whose fields are written as
SDL-style type references:

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

Objects are declared before any field is resolved, so forward and
self-referential references are allowed.
"""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import Any, Callable, Iterable

from shapecheck_core.data.loader import load_yaml_typed
from shapecheck_core.data.scalars import DEFAULT_SCALARS, ScalarMapping
from shapecheck_core.models.errors import SchemaDefinitionError
from shapecheck_core.models.schema_doc import SchemaRec
from shapecheck_core.models.types import (
    EnumValue,
    ObjectDefinition,
    TypeNode,
    enum_type,
    list_of,
    scalar,
)

_LOGGER = logging.getLogger("shapecheck.schema")

_TYPE_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


def parse_type_ref(ref: str, resolve: Callable[[str], TypeNode]) -> TypeNode:
    """Parse ``[User!]!``-style notation; ``resolve`` maps a bare name to its nullable node."""
    text = ref.strip()
    nullable = True
    if text.endswith("!"):
        nullable = False
        text = text[:-1].rstrip()

    if text.startswith("[") or text.endswith("]"):
        if not (text.startswith("[") and text.endswith("]")) or len(text) < 3:
            raise SchemaDefinitionError(f"malformed list type reference {ref!r}")
        return list_of(parse_type_ref(text[1:-1], resolve), nullable=nullable)

    if not _TYPE_NAME.fullmatch(text):
        raise SchemaDefinitionError(f"malformed type reference {ref!r}")

    node = resolve(text)
    return node if nullable else node.non_null()


class Schema:
    """Registry of named types: scalars from the mapping, declared enums and objects."""

    def __init__(self, scalars: ScalarMapping = DEFAULT_SCALARS):
        self.scalars = scalars
        self._named: dict[str, TypeNode] = {tag: scalar(tag) for tag in scalars}
        self._objects: dict[str, ObjectDefinition] = {}

    def _register(self, name: str, node: TypeNode) -> None:
        if name in self._named:
            raise SchemaDefinitionError(f"type {name} is already declared")
        self._named[name] = node

    def declare_enum(self, name: str, values: Iterable[EnumValue | str]) -> TypeNode:
        node = enum_type(name, values)
        self._register(name, node)
        return node

    def declare_object(self, name: str) -> ObjectDefinition:
        definition = ObjectDefinition(name)
        self._register(name, definition.type())
        self._objects[name] = definition
        return definition

    def named(self, name: str) -> TypeNode:
        try:
            return self._named[name]
        except KeyError:
            raise SchemaDefinitionError(f"unknown type {name!r}") from None

    def type(self, ref: str) -> TypeNode:
        return parse_type_ref(ref, self.named)

    def object(self, name: str) -> ObjectDefinition:
        try:
            return self._objects[name]
        except KeyError:
            raise SchemaDefinitionError(f"unknown object type {name!r}") from None

    def objects(self) -> list[ObjectDefinition]:
        return list(self._objects.values())

    def names(self) -> list[str]:
        return list(self._named)

    def __contains__(self, name: str) -> bool:
        return name in self._named


def build_schema(rec: SchemaRec, scalars: ScalarMapping = DEFAULT_SCALARS) -> Schema:
    schema = Schema(scalars.extend(rec.scalars) if rec.scalars else scalars)

    for name, enum_rec in rec.enums.items():
        schema.declare_enum(name, [EnumValue(key, value) for key, value in enum_rec.values.items()])

    # two passes so fields may reference objects declared later (or their own type)
    definitions = {name: schema.declare_object(name) for name in rec.types}
    for name, object_rec in rec.types.items():
        for field_name, field_rec in object_rec.fields.items():
            try:
                field_type = schema.type(field_rec.type)
            except SchemaDefinitionError as e:
                raise SchemaDefinitionError(f"{name}.{field_name}: {e}") from e
            definitions[name].add_field(field_name, field_type, accessor=field_rec.accessor)

    _LOGGER.debug("built schema with %d enums and %d object types", len(rec.enums), len(rec.types))
    return schema


def load_schema(path: Path | str, scalars: ScalarMapping = DEFAULT_SCALARS) -> Schema:
    """Load a YAML schema document into a :class:`Schema`."""
    return build_schema(load_yaml_typed(path, model=SchemaRec, what="schema document"), scalars=scalars)


def schema_from_dict(data: dict[str, Any], scalars: ScalarMapping = DEFAULT_SCALARS) -> Schema:
    return build_schema(SchemaRec.model_validate(data), scalars=scalars)
