from typing import Any, Protocol

from shapecheck_core.config import ValidationOptions
from shapecheck_core.data.scalars import ScalarMapping
from shapecheck_core.models.errors import ValidationError
from shapecheck_core.models.types import TypeNode
from shapecheck_core.validation.accessors import ValueAccessor
from shapecheck_core.validation.conformance import validate
from shapecheck_core.validation.context import ValidationContext
from shapecheck_core.validation.formatting import format_errors, summarize


class Response(Protocol):
    success: Any
    result: Any


class ResponseMatcher:
    """Checks that a handler response succeeded and its result fits the declared type.

    The result is checked loosely and shallowly: nullability and list shape of
    the result itself, then the fields of the object (or of each object in a
    list result) one level deep.
    """

    DEFAULT_ERROR_MESSAGE = "Response is not successful"

    def __init__(
        self,
        type: TypeNode,
        *,
        options: ValidationOptions | None = None,
        accessor: ValueAccessor | None = None,
        scalars: ScalarMapping | None = None,
    ):
        self.type = type
        self.options = options or ValidationOptions.from_env()
        self._accessor = accessor
        self._scalars = scalars
        self.errors: list[ValidationError] = []
        self._error_message: str | None = None

    def matches(self, response: Response) -> bool:
        self.errors = []
        self._error_message = None

        success = response.success
        if callable(success):
            success = success()
        if not success:
            self._error_message = self.DEFAULT_ERROR_MESSAGE
            return False

        context = ValidationContext.root(strict=False, deep=False)
        self.errors = validate(response.result, self.type, context, accessor=self._accessor, scalars=self._scalars)
        if self.errors:
            self._error_message = "Response type does not match the expected type:\n" + summarize(
                format_errors(self.errors), limit=self.options.summary_limit
            )
        return not self.errors

    @property
    def failure_message(self) -> str:
        return self._error_message or self.DEFAULT_ERROR_MESSAGE
