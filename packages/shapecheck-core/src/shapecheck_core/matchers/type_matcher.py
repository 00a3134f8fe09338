"""
Type matchers for test suites.

Usage:

    assert TypeMatcher(user_type).matches(user)
    assert TypeMatcher(UserRecord).loosely().deeply().matches(user)
    assert DeclaredTypeMatcher().matches(user_record)
    assert_conforms(user, user_type, deep=True)

A model class takes part by declaring ``__schema_type__`` (a TypeNode).
"""

from typing import Any

from shapecheck_core.config import ValidationOptions
from shapecheck_core.data.scalars import ScalarMapping
from shapecheck_core.models.errors import ValidationError
from shapecheck_core.models.types import TypeNode
from shapecheck_core.validation.accessors import ValueAccessor
from shapecheck_core.validation.conformance import validate
from shapecheck_core.validation.context import ValidationContext
from shapecheck_core.validation.formatting import format_errors, summarize


def resolve_type(type_or_model: Any) -> TypeNode:
    """Return the TypeNode itself, or the ``__schema_type__`` a model class declares."""
    if isinstance(type_or_model, TypeNode):
        return type_or_model
    declared = getattr(type_or_model, "__schema_type__", None)
    if isinstance(declared, TypeNode):
        return declared
    raise TypeError(f"{type_or_model!r} is neither a TypeNode nor declares __schema_type__")


class TypeMatcher:
    """Matches a value against a schema type and explains mismatches."""

    def __init__(
        self,
        type_or_model: Any,
        *,
        strict: bool | None = None,
        deep: bool | None = None,
        options: ValidationOptions | None = None,
        accessor: ValueAccessor | None = None,
        scalars: ScalarMapping | None = None,
    ):
        self.options = options or ValidationOptions.from_env()
        self._strict = self.options.strict if strict is None else strict
        self._deep = self.options.deep if deep is None else deep
        self._accessor = accessor
        self._scalars = scalars
        self.type = resolve_type(type_or_model) if type_or_model is not None else None
        self.value: Any = None
        self.errors: list[ValidationError] = []

    def strictly(self) -> "TypeMatcher":
        self._strict = True
        return self

    def loosely(self) -> "TypeMatcher":
        self._strict = False
        return self

    def deeply(self) -> "TypeMatcher":
        self._deep = True
        return self

    def shallow(self) -> "TypeMatcher":
        self._deep = False
        return self

    def matches(self, value: Any) -> bool:
        if self.type is None:
            raise TypeError("no schema type to match against")
        self.value = value
        context = ValidationContext.root(strict=self._strict, deep=self._deep)
        self.errors = validate(value, self.type, context, accessor=self._accessor, scalars=self._scalars)
        return not self.errors

    @property
    def error_messages(self) -> list[str]:
        return format_errors(self.errors)

    @property
    def failure_message(self) -> str:
        message = f"Expected {self.value!r} to match {self.type}, but it didn't:\n"
        return message + summarize(self.error_messages, limit=self.options.summary_limit)

    @property
    def failure_message_when_negated(self) -> str:
        return f"Expected {self.value!r} not to match {self.type}, but it did"

    @property
    def description(self) -> str:
        mode = "strictly" if self._strict else "loosely"
        depth = "deeply" if self._deep else "shallowly"
        return f"satisfy schema type {self.type} {mode} and {depth}"


class DeclaredTypeMatcher(TypeMatcher):
    """Matches an instance against the ``__schema_type__`` of its own class."""

    def __init__(self, **kwargs: Any):
        super().__init__(None, **kwargs)

    def matches(self, value: Any) -> bool:
        self.type = resolve_type(type(value))
        return super().matches(value)


def assert_conforms(value: Any, type_or_model: Any, **kwargs: Any) -> None:
    """Raise AssertionError with the failure summary when ``value`` does not conform."""
    __tracebackhide__ = True
    matcher = TypeMatcher(type_or_model, **kwargs)
    if not matcher.matches(value):
        raise AssertionError(matcher.failure_message)
