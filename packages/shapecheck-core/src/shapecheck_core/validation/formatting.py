"""Render conformance errors as human-readable, path-qualified messages."""

from typing import Iterable

from shapecheck_core.models.errors import ErrorKind, ValidationError

DEFAULT_SUMMARY_LIMIT = 5

ERROR_MESSAGES = {
    ErrorKind.MISSING_FIELD: 'expected field "{field}" to be present, but `{record}` has no `{accessor}` accessor',
    ErrorKind.NOT_NULLABLE: 'expected non-nullable field "{field}" not to be `None`',
    ErrorKind.NIL_IN_STRICT_MODE: (
        'Using `strictly` matcher which does not allow `None` values, but field "{field}" is `None`. '
        "Use `loosely` matcher to allow `None` values"
    ),
    ErrorKind.WRONG_TYPE: 'expected field "{field}" to be {expected_type}, but was `{actual_type}`',
    ErrorKind.WRONG_ENUM_VALUE: 'expected field "{field}" to be one of [{expected_values}], but was {actual_value}',
}

_LIST_KIND_MESSAGES = {
    True: 'expected field "{field}" to be a list, but was `{actual_type}`',
    False: 'expected field "{field}" not to be a list, but was `{actual_type}`',
}


def _template(error: ValidationError) -> str:
    if error.kind is ErrorKind.LIST_KIND_MISMATCH:
        return _LIST_KIND_MESSAGES[bool(error.context.get("expected_list"))]
    try:
        return ERROR_MESSAGES[error.kind]
    except KeyError:
        raise LookupError(f"no message template for error kind {error.kind!r}") from None


def format_error(error: ValidationError) -> str:
    payload = dict(error.context)
    if error.kind is ErrorKind.WRONG_ENUM_VALUE:
        payload["expected_values"] = ", ".join(payload.get("expected_values", []))
    return _template(error).format(field=error.path, **payload)


def format_errors(errors: Iterable[ValidationError]) -> list[str]:
    return [format_error(error) for error in errors]


def summarize(messages: list[str], limit: int = DEFAULT_SUMMARY_LIMIT, indent: int = 2) -> str:
    """Keep the first ``limit`` messages and indent the block for embedding in a failure report."""
    pad = " " * indent
    lines = "\n".join(messages[:limit]).splitlines()
    return "\n".join(f"{pad}{line}" if line else line for line in lines)
