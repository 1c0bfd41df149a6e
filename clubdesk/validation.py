"""Generic validation entry points over any entity schema.

validate_data / safe_parse never raise: a failed validation comes back as
data. validate_or_throw / transform_response raise SchemaValidationError for
call sites that have no local handling.

Errors are keyed by top-level field name, so a nested failure such as a
negative Duration.hours lands under "Duration". List items are prefixed with
their index ("1.ram"). Model-level errors use "__root__".
"""

import logging
from collections.abc import Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from clubdesk.errors import (
    ROOT_PATH,
    FieldConstraintViolation,
    SchemaValidationError,
    first_errors,
    format_validation_errors,
    group_violations,
)

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)

# Error type raised by rule chains; each carries its messages in ctx
CHECKS_ERROR = "field_checks"


@dataclass(frozen=True)
class ValidationResult(Generic[ModelT]):
    """Outcome of validate_data: data on success, per-field messages otherwise."""

    success: bool
    data: ModelT | None = None
    errors: dict[str, list[str]] = field(default_factory=dict)
    raw: ValidationError | None = None

    def payload(self, *, exclude_unset: bool = False) -> dict[str, Any]:
        """Dump validated data for sending. Use exclude_unset for update patches."""
        if self.data is None:
            raise ValueError("Validation failed; there is no payload")
        return self.data.model_dump(exclude_unset=exclude_unset)


@dataclass(frozen=True)
class SafeParseResult(Generic[ModelT]):
    """Outcome of safe_parse: data or the error validate_or_throw would raise."""

    success: bool
    data: ModelT | None = None
    error: SchemaValidationError | None = None


def field_path(loc: Sequence[int | str]) -> str:
    """Collapse a pydantic error location to a field path.

    Leading list indices are kept, then the first field name; anything deeper
    (union tags, nested fields) is folded into that field.
    """
    parts: list[str] = []
    for item in loc:
        parts.append(str(item))
        if isinstance(item, str):
            break
    return ".".join(parts) or ROOT_PATH


def collect_violations(error: ValidationError) -> Iterator[FieldConstraintViolation]:
    """Expand a pydantic ValidationError into one violation per message."""
    for detail in error.errors(include_url=False):
        path = field_path(detail["loc"])
        messages: Sequence[str] = (detail["msg"],)
        if detail["type"] == CHECKS_ERROR:
            messages = (detail.get("ctx") or {}).get("messages") or messages
        for message in messages:
            yield FieldConstraintViolation(
                path=path,
                message=message,
                kind=detail["type"],
                input=detail.get("input"),
            )


def validate_data(schema: type[ModelT], data: Any) -> ValidationResult[ModelT]:
    """Validate data against a schema without raising.

    Args:
        schema: Entity schema (any pydantic model)
        data: Raw input, e.g. form values or a decoded API payload

    Returns:
        ValidationResult with the validated model, or with errors grouped by
        field path in schema order
    """
    try:
        validated = schema.model_validate(data)
    except ValidationError as e:
        errors = group_violations(collect_violations(e))
        logger.debug("%s validation failed:\n%s", schema.__name__, format_validation_errors(errors))
        return ValidationResult(success=False, errors=errors, raw=e)

    return ValidationResult(success=True, data=validated)


def validate_or_throw(schema: type[ModelT], data: Any) -> ModelT:
    """Validate data against a schema.

    Raises:
        SchemaValidationError: If any field fails; carries the full message map
    """
    try:
        return schema.model_validate(data)
    except ValidationError as e:
        error = SchemaValidationError(schema.__name__, collect_violations(e))
        logger.warning("%s", error)
        raise error from e


def safe_parse(schema: type[ModelT], data: Any) -> SafeParseResult[ModelT]:
    """Validate without raising, returning the structured error on failure."""
    try:
        validated = schema.model_validate(data)
    except ValidationError as e:
        error = SchemaValidationError(schema.__name__, collect_violations(e))
        return SafeParseResult(success=False, error=error)

    return SafeParseResult(success=True, data=validated)


def get_field_error(errors: Mapping[str, Sequence[str]], path: str) -> str | None:
    """First error message for a field, or None."""
    messages = errors.get(path)
    if not messages:
        return None
    return messages[0]


def _unwrap(response: Any) -> Any:
    # The backend answers either with the payload itself or with {"data": payload}
    if isinstance(response, Mapping) and response.get("data") is not None:
        return response["data"]
    return response


def transform_response(schema: type[ModelT], response: Any) -> ModelT:
    """Validate a single-entity API response.

    Args:
        schema: Entity schema of the expected record
        response: Decoded JSON body, bare or wrapped in {"data": ...}

    Returns:
        Validated record

    Raises:
        SchemaValidationError: If the payload does not match the schema
    """
    return validate_or_throw(schema, _unwrap(response))


@lru_cache(maxsize=None)
def _list_adapter(schema: type[BaseModel]) -> TypeAdapter:
    return TypeAdapter(list[schema])


def transform_list_response(schema: type[ModelT], response: Any) -> list[ModelT]:
    """Validate a list API response. Errors are keyed "<index>.<field>".

    Raises:
        SchemaValidationError: If the payload is not a list or any item fails
    """
    try:
        return _list_adapter(schema).validate_python(_unwrap(response))
    except ValidationError as e:
        error = SchemaValidationError(f"list[{schema.__name__}]", collect_violations(e))
        logger.warning("%s", error)
        raise error from e


__all__ = [
    "SafeParseResult",
    "ValidationResult",
    "collect_violations",
    "field_path",
    "first_errors",
    "format_validation_errors",
    "get_field_error",
    "safe_parse",
    "transform_list_response",
    "transform_response",
    "validate_data",
    "validate_or_throw",
]
