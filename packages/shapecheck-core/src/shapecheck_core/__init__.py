from shapecheck_core.config import ValidationOptions, load_options
from shapecheck_core.data.schema_loader import Schema, load_schema
from shapecheck_core.matchers import DeclaredTypeMatcher, ResponseMatcher, TypeMatcher, assert_conforms
from shapecheck_core.models.errors import ErrorKind, UnknownScalarKindError, ValidationError
from shapecheck_core.validation import ValidationContext, format_errors, summarize, validate

__all__ = [
    "DeclaredTypeMatcher",
    "ErrorKind",
    "ResponseMatcher",
    "Schema",
    "TypeMatcher",
    "UnknownScalarKindError",
    "ValidationContext",
    "ValidationError",
    "ValidationOptions",
    "assert_conforms",
    "format_errors",
    "load_options",
    "load_schema",
    "summarize",
    "validate",
]
