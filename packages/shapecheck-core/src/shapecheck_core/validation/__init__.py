from .accessors import AttributeAccessor, AutoAccessor, MappingAccessor, ValueAccessor
from .conformance import ConformanceValidator, is_list_like, validate
from .context import ValidationContext, render_path
from .formatting import format_error, format_errors, summarize

__all__ = [
    "AttributeAccessor",
    "AutoAccessor",
    "ConformanceValidator",
    "MappingAccessor",
    "ValidationContext",
    "ValueAccessor",
    "format_error",
    "format_errors",
    "is_list_like",
    "render_path",
    "summarize",
    "validate",
]
