"""Validation error taxonomy.

A FieldConstraintViolation is one failed rule on one field path.
A SchemaValidationError aggregates every violation of a single validation
attempt and carries the per-field message map the forms consume.
"""

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

ROOT_PATH = "__root__"


class FieldConstraintViolation(BaseModel):
    """Single rule failure attributed to one field path."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Field path (top-level field, index-prefixed for lists)")
    message: str = Field(..., description="Human-readable message")
    kind: str = Field(..., description="Error type reported by the validator")
    input: Any = Field(None, description="Offending input value")


def group_violations(violations: Iterable[FieldConstraintViolation]) -> dict[str, list[str]]:
    """Group violation messages by field path, keeping first-seen order."""
    errors: dict[str, list[str]] = {}
    for violation in violations:
        errors.setdefault(violation.path, []).append(violation.message)
    return errors


def first_errors(errors: Mapping[str, Sequence[str]]) -> dict[str, str]:
    """First message per field, the shape inline form errors use."""
    return {path: messages[0] for path, messages in errors.items() if messages}


def format_validation_errors(errors: Mapping[str, Sequence[str]]) -> str:
    """Render an error map as "field: message" lines.

    Args:
        errors: Field path -> messages, as returned by validate_data

    Returns:
        One line per message, fields in map order, messages in list order
    """
    return "\n".join(f"{field}: {message}" for field, messages in errors.items() for message in messages)


class SchemaValidationError(ValueError):
    """Raised when input does not satisfy an entity schema."""

    def __init__(self, schema_name: str, violations: Iterable[FieldConstraintViolation]) -> None:
        self.schema_name = schema_name
        self.violations = tuple(violations)
        self.errors = group_violations(self.violations)
        super().__init__(f"{schema_name} validation failed:\n{format_validation_errors(self.errors)}")

    def first_errors(self) -> dict[str, str]:
        """First message per field."""
        return first_errors(self.errors)
