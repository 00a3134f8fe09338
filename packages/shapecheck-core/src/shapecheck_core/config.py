"""
Validation options for shapecheck matchers and the CLI.

Environment flags (all optional):

    SHAPECHECK_STRICT = "0" | "1"
        Default: "1". Report `None` in nullable fields as an error.

    SHAPECHECK_DEEP = "0" | "1"
        Default: "0". Recurse into nested object fields.

    SHAPECHECK_SUMMARY_LIMIT = int >= 1
        Default: "5". Number of messages kept in a failure summary.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from shapecheck_core.data.loader import load_yaml_typed
from shapecheck_core.models.errors import ConfigurationError
from shapecheck_core.validation.context import ValidationContext


def _env_bool(name: str, default: bool) -> bool:
    val = os.getenv(name)
    if val is None:
        return default
    return str(val).strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    val = os.getenv(name)
    if val is None:
        return default
    try:
        return max(1, int(val))
    except ValueError:
        return default


class ValidationOptions(BaseModel):
    """Strictness, depth, and reporting options for a validation run."""

    model_config = ConfigDict(extra="ignore", frozen=True)
    strict: bool = True
    deep: bool = False
    summary_limit: int = Field(default=5, ge=1)

    @classmethod
    def from_env(cls) -> ValidationOptions:
        return cls(
            strict=_env_bool("SHAPECHECK_STRICT", True),
            deep=_env_bool("SHAPECHECK_DEEP", False),
            summary_limit=_env_int("SHAPECHECK_SUMMARY_LIMIT", 5),
        )

    def context(self) -> ValidationContext:
        return ValidationContext.root(strict=self.strict, deep=self.deep)


def load_options(path: Path | str | None = None) -> ValidationOptions:
    """Load options from YAML on top of the environment defaults; a missing file keeps the defaults."""
    defaults = ValidationOptions.from_env()
    if not path:
        return defaults
    try:
        overrides = load_yaml_typed(path, adapter=TypeAdapter(dict[str, Any]), what="options file")
        return ValidationOptions.model_validate({**defaults.model_dump(), **overrides})
    except FileNotFoundError:
        return defaults
    except (ValueError, PydanticValidationError) as e:
        raise ConfigurationError(f"Invalid options in {path}: {e}") from e
