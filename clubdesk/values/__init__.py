"""Parsers and display formatters for polymorphic field values."""

from clubdesk.values.cost import Cost, format_cost_number, format_currency, parse_cost
from clubdesk.values.dates import (
    format_date,
    format_date_for_input,
    format_date_time,
    format_relative_time,
    is_parseable_date,
    parse_date,
)
from clubdesk.values.duration import (
    Duration,
    duration_to_seconds,
    duration_to_time_string,
    format_duration,
    parse_time_string,
)

__all__ = [
    "Cost",
    "Duration",
    "duration_to_seconds",
    "duration_to_time_string",
    "format_cost_number",
    "format_currency",
    "format_date",
    "format_date_for_input",
    "format_date_time",
    "format_duration",
    "format_relative_time",
    "is_parseable_date",
    "parse_cost",
    "parse_date",
    "parse_time_string",
]
