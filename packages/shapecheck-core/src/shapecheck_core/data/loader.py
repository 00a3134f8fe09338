"""
YAML documents: schemas, scalar mappings, options and the value graphs checked against them.

Every reader takes a ``what`` label ("schema document", "scalar mapping", ...)
so load errors name the kind of document that failed, not just the file.
"""

from pathlib import Path
from typing import Any, TypeVar, overload

import yaml
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

T = TypeVar("T")


def _describe_yaml_error(e: yaml.YAMLError) -> str:
    mark = getattr(e, "problem_mark", None)
    problem = getattr(e, "problem", None) or str(e)
    if mark is None:
        return problem
    return f"{problem} (line {mark.line + 1}, column {mark.column + 1})"


def _read_yaml_raw(path: Path | str, what: str, allow_null: bool = False) -> Any:
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"{what.capitalize()} not found: {p}")

    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise ValueError(f"{what.capitalize()} {p} is not valid UTF-8: {e}") from e

    if not text.strip():
        raise ValueError(f"Empty {what}: {p}")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML in {what} {p}: {_describe_yaml_error(e)}") from e

    # an explicit `null` is a value of its own, but never a schema or a mapping
    if data is None and not allow_null:
        raise ValueError(f"Empty {what}: {p}")

    return data


def read_yaml(path: Path | str) -> Any:
    """Read a value document (YAML or JSON). A document holding just ``null`` yields ``None``."""
    return _read_yaml_raw(path, "value document", allow_null=True)


@overload
def load_yaml_typed(path: Path | str, *, adapter: TypeAdapter[T], what: str = ...) -> T: ...


@overload
def load_yaml_typed(path: Path | str, *, model: type[T], what: str = ...) -> T: ...


def load_yaml_typed(
    path: Path | str,
    *,
    adapter: TypeAdapter[T] | None = None,
    model: type[T] | None = None,
    what: str = "YAML document",
) -> T:
    """Read YAML and validate it into a typed object using Pydantic v2.

    Exactly one of {adapter, model} must be supplied.

    Example (schema document):
        load_yaml_typed("schemas/users.yaml", model=SchemaRec, what="schema document")

    Example (custom scalars):
        load_yaml_typed("schemas/scalars.yaml", adapter=TypeAdapter(dict[str, list[str]]), what="scalar mapping")
    """
    if (adapter is None) == (model is None):
        raise ValueError("Provide exactly one of 'adapter' or 'model'.")

    data = _read_yaml_raw(path, what)

    try:
        if adapter is not None:
            return adapter.validate_python(data)
        return TypeAdapter(model).validate_python(data)  # type: ignore[arg-type]
    except PydanticValidationError as e:
        details = "; ".join(
            f"{'.'.join(str(part) for part in err['loc']) or '(top level)'}: {err['msg']}" for err in e.errors()
        )
        raise ValueError(f"Invalid {what} {path}: {details}") from e
