"""Validation and value normalization for the computer-club console."""

from clubdesk.errors import FieldConstraintViolation, SchemaValidationError
from clubdesk.log import setup_logging
from clubdesk.schemas import (
    ENTITY_SCHEMAS,
    PC,
    Client,
    ClientCreate,
    ClientUpdate,
    PCCreate,
    PCUpdate,
    Session,
    SessionCreate,
    SessionUpdate,
)
from clubdesk.validation import (
    SafeParseResult,
    ValidationResult,
    first_errors,
    format_validation_errors,
    get_field_error,
    safe_parse,
    transform_list_response,
    transform_response,
    validate_data,
    validate_or_throw,
)
from clubdesk.values import (
    duration_to_seconds,
    duration_to_time_string,
    format_cost_number,
    format_currency,
    format_duration,
    parse_cost,
    parse_time_string,
)

__version__ = "0.1.0"

__all__ = [
    "ENTITY_SCHEMAS",
    "PC",
    "Client",
    "ClientCreate",
    "ClientUpdate",
    "FieldConstraintViolation",
    "PCCreate",
    "PCUpdate",
    "SafeParseResult",
    "SchemaValidationError",
    "Session",
    "SessionCreate",
    "SessionUpdate",
    "ValidationResult",
    "duration_to_seconds",
    "duration_to_time_string",
    "first_errors",
    "format_cost_number",
    "format_currency",
    "format_duration",
    "format_validation_errors",
    "get_field_error",
    "parse_cost",
    "parse_time_string",
    "safe_parse",
    "setup_logging",
    "transform_list_response",
    "transform_response",
    "validate_data",
    "validate_or_throw",
]
