from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ErrorKind(str, Enum):
    """Closed set of conformance problems the validator reports."""

    MISSING_FIELD = "MISSING_FIELD"
    NOT_NULLABLE = "NOT_NULLABLE"
    NIL_IN_STRICT_MODE = "NIL_IN_STRICT_MODE"
    LIST_KIND_MISMATCH = "LIST_KIND_MISMATCH"
    WRONG_TYPE = "WRONG_TYPE"
    WRONG_ENUM_VALUE = "WRONG_ENUM_VALUE"


class ValidationError(BaseModel):
    """A single conformance error with its kind, field path, and payload."""

    model_config = ConfigDict(extra="ignore", frozen=True)
    kind: ErrorKind
    path: str
    context: dict = Field(default_factory=dict)


class ShapecheckError(Exception):
    """Base class for fatal shapecheck errors."""


class ConfigurationError(ShapecheckError, ValueError):
    """Configuration is incomplete or malformed (not a data problem)."""


class UnknownScalarKindError(ConfigurationError, LookupError):
    """A schema scalar tag has no entry in the scalar mapping table."""

    def __init__(self, tag: str):
        super().__init__(f"Unknown scalar type {tag!r}: add it to the scalar mapping")
        self.tag = tag


class SchemaDefinitionError(ShapecheckError, ValueError):
    """A schema declaration is malformed or references an unknown type."""
