from .errors import (
    ConfigurationError,
    ErrorKind,
    SchemaDefinitionError,
    ShapecheckError,
    UnknownScalarKindError,
    ValidationError,
)
from .types import (
    EnumValue,
    FieldDescriptor,
    ObjectDefinition,
    TypeKind,
    TypeNode,
    enum_type,
    list_of,
    object_type,
    scalar,
)

__all__ = [
    "ConfigurationError",
    "EnumValue",
    "ErrorKind",
    "FieldDescriptor",
    "ObjectDefinition",
    "SchemaDefinitionError",
    "ShapecheckError",
    "TypeKind",
    "TypeNode",
    "UnknownScalarKindError",
    "ValidationError",
    "enum_type",
    "list_of",
    "object_type",
    "scalar",
]
