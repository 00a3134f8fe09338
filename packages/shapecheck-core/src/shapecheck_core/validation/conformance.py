"""
Conformance validation: does a runtime value graph satisfy a schema type?

For each (value, type, path) exactly one check runs, in this order:
null handling, list-kind consistency (recursing into elements), scalar
category, enum membership, object fields. Errors are collected across the
whole traversal and returned together; the only exception raised is
UnknownScalarKindError, which signals an incomplete scalar mapping.

Object traversal carries a visited set of value identities along the current
branch, so cyclic value graphs over self-referential types terminate. The set
is copied on each descent and never shared with sibling branches.
"""

from __future__ import annotations

import logging
import reprlib
from collections.abc import Sequence, Set
from typing import Any

from shapecheck_core.codebase.debug import trace
from shapecheck_core.data.scalars import DEFAULT_SCALARS, ScalarMapping, ValueCategory, categorize, category_name
from shapecheck_core.models.errors import ErrorKind, UnknownScalarKindError, ValidationError
from shapecheck_core.models.types import FieldDescriptor, TypeNode
from shapecheck_core.validation.accessors import DEFAULT_ACCESSOR, ValueAccessor
from shapecheck_core.validation.context import ValidationContext

_LOGGER = logging.getLogger("shapecheck.validation")

_RECORD_REPR = reprlib.Repr()
_RECORD_REPR.maxstring = 60
_RECORD_REPR.maxother = 60


def is_list_like(value: Any) -> bool:
    return isinstance(value, (Sequence, Set)) and not isinstance(value, (str, bytes, bytearray))


def describe_expected(categories: Sequence[ValueCategory]) -> str:
    names = [f"`{category.value}`" for category in categories]
    if len(names) > 1:
        return f"one of {', '.join(names)}"
    return names[0]


def _same_enum_value(value: Any, candidate: Any) -> bool:
    # booleans are not the integers 0 and 1 here, matching categorize()
    if isinstance(value, bool) != isinstance(candidate, bool):
        return False
    return value == candidate


def _error(kind: ErrorKind, context: ValidationContext, **payload: Any) -> ValidationError:
    return ValidationError(kind=kind, path=context.rendered_path, context=payload)


class ConformanceValidator:
    """Recursively compares values against schema types, collecting errors."""

    def __init__(self, accessor: ValueAccessor | None = None, scalars: ScalarMapping | None = None):
        self.accessor = accessor or DEFAULT_ACCESSOR
        self.scalars = scalars or DEFAULT_SCALARS

    @trace
    def validate(self, value: Any, type: TypeNode, context: ValidationContext | None = None) -> list[ValidationError]:
        context = context or ValidationContext.root()
        errors = self.validate_value(value, type, context)
        _LOGGER.debug(
            "validated %s against %s (strict=%s, deep=%s): %d error(s)",
            value.__class__.__name__,
            type,
            context.strict,
            context.deep,
            len(errors),
        )
        return errors

    def validate_field(self, owner: Any, field: FieldDescriptor, context: ValidationContext) -> list[ValidationError]:
        field_context = context.with_field(field.name)
        key = self.accessor.key(owner, field)
        if not self.accessor.has(owner, key):
            return [
                _error(
                    ErrorKind.MISSING_FIELD,
                    field_context,
                    accessor=key,
                    record=_RECORD_REPR.repr(owner),
                )
            ]
        return self.validate_value(self.accessor.get(owner, key), field.type, field_context)

    def validate_value(self, value: Any, type: TypeNode, context: ValidationContext) -> list[ValidationError]:
        if value is None:
            return self._check_null(type, context)
        if type.is_list or (is_list_like(value) and not self._accepts_list(type, context)):
            return self._check_list(value, type, context)
        if type.is_scalar:
            return self._check_scalar(value, type, context)
        if type.is_enum:
            return self._check_enum(value, type, context)
        if type.is_object:
            return self._check_object(value, type, context)
        return []

    def _check_null(self, type: TypeNode, context: ValidationContext) -> list[ValidationError]:
        if not type.nullable:
            return [_error(ErrorKind.NOT_NULLABLE, context)]
        if context.strict:
            return [_error(ErrorKind.NIL_IN_STRICT_MODE, context)]
        return []

    def _accepts_list(self, type: TypeNode, context: ValidationContext) -> bool:
        # JSON-like scalars take collections as ordinary values
        return type.is_scalar and ValueCategory.LIST in self._accepted(type, context)

    def _check_list(self, value: Any, type: TypeNode, context: ValidationContext) -> list[ValidationError]:
        if not type.is_list:
            return [_error(ErrorKind.LIST_KIND_MISMATCH, context, expected_list=False, actual_type=category_name(value))]
        if not is_list_like(value):
            return [_error(ErrorKind.LIST_KIND_MISMATCH, context, expected_list=True, actual_type=category_name(value))]

        errors = []
        for index, item in enumerate(value):
            errors.extend(self.validate_value(item, type.of_type, context.with_index(index)))
        return errors

    def _accepted(self, type: TypeNode, context: ValidationContext) -> tuple[ValueCategory, ...]:
        try:
            return self.scalars.accepted(type.scalar)
        except UnknownScalarKindError:
            _LOGGER.error("scalar %r at %s has no entry in the scalar mapping", type.scalar, context.rendered_path)
            raise

    def _check_scalar(self, value: Any, type: TypeNode, context: ValidationContext) -> list[ValidationError]:
        accepted = self._accepted(type, context)
        if categorize(value) in accepted:
            return []
        return [
            _error(
                ErrorKind.WRONG_TYPE,
                context,
                expected_type=describe_expected(accepted),
                expected_categories=[category.value for category in accepted],
                actual_type=category_name(value),
            )
        ]

    def _check_enum(self, value: Any, type: TypeNode, context: ValidationContext) -> list[ValidationError]:
        permitted = type.permitted_values
        if any(_same_enum_value(value, candidate) for candidate in permitted):
            return []
        return [
            _error(
                ErrorKind.WRONG_ENUM_VALUE,
                context,
                expected_values=[repr(candidate) for candidate in permitted],
                actual_value=repr(value),
            )
        ]

    def _check_object(self, value: Any, type: TypeNode, context: ValidationContext) -> list[ValidationError]:
        # nested objects are only expanded in deep mode; the root object always is
        if not context.deep and context.field_depth > 0:
            return []
        if context.has_visited(value):
            _LOGGER.debug("skipping already visited %s at %s", type.name, context.rendered_path)
            return []

        branch = context.with_visited(value)
        errors = []
        for field in type.unwrap().fields:
            errors.extend(self.validate_field(value, field, branch))
        return errors


def validate(
    value: Any,
    type: TypeNode,
    context: ValidationContext | None = None,
    *,
    accessor: ValueAccessor | None = None,
    scalars: ScalarMapping | None = None,
) -> list[ValidationError]:
    """Validate ``value`` against ``type`` and return every conformance error found."""
    return ConformanceValidator(accessor=accessor, scalars=scalars).validate(value, type, context)
