"""Duration normalization.

A session duration is either free text ("2 hours") or a struct of optional
hours/minutes/seconds. Text is already human-readable and passes through
untouched; structs are rendered with Ukrainian unit markers or as HH:MM:SS.
"""

import math
from collections.abc import Mapping
from typing import Any

Duration = str | Mapping[str, Any]

# Unit field -> display suffix, in display order
DURATION_UNITS: tuple[tuple[str, str], ...] = (
    ("hours", "г"),
    ("minutes", "хв"),
    ("seconds", "с"),
)

ZERO_DURATION = "0с"


def _get_part(duration: Any, name: str) -> Any:
    if isinstance(duration, Mapping):
        return duration.get(name)
    return getattr(duration, name, None)


def _format_number(value: Any) -> str:
    """Render numbers the way the console shows them: 2.0 -> "2", 2.5 -> "2.5"."""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def _to_number(segment: str) -> int | float:
    text = segment.strip()
    if not text:
        return 0
    try:
        return int(text)
    except ValueError:
        pass
    try:
        number = float(text)
    except ValueError:
        return 0
    if not math.isfinite(number):
        return 0
    return int(number) if number.is_integer() else number


def format_duration(duration: Duration) -> str:
    """Format duration as a readable string, e.g. "2г 30хв".

    Args:
        duration: Free text or a struct with hours/minutes/seconds

    Returns:
        Text unchanged, or the non-zero parts joined by spaces ("0с" if none)
    """
    if isinstance(duration, str):
        return duration

    parts = []
    for name, suffix in DURATION_UNITS:
        amount = _get_part(duration, name)
        if amount:
            parts.append(f"{_format_number(amount)}{suffix}")
    return " ".join(parts) if parts else ZERO_DURATION


def duration_to_time_string(duration: Duration) -> str:
    """Convert a duration struct to HH:MM:SS for time inputs. Text passes through."""
    if isinstance(duration, str):
        return duration

    return ":".join(
        _format_number(_get_part(duration, name) or 0).rjust(2, "0") for name, _ in DURATION_UNITS
    )


def parse_time_string(time_string: str) -> dict[str, int | float]:
    """Parse HH:MM:SS into a duration struct.

    Segments map left to right onto hours, minutes and seconds. Missing or
    non-numeric segments become 0. Values are not clamped, so "1:75" yields
    75 minutes.
    """
    segments = time_string.split(":")
    values = [_to_number(segment) for segment in segments[: len(DURATION_UNITS)]]
    values += [0] * (len(DURATION_UNITS) - len(values))
    return {name: value for (name, _), value in zip(DURATION_UNITS, values)}


def duration_to_seconds(duration: Duration) -> int | float:
    """Total seconds of a duration.

    Strings are read as HH:MM:SS, so free text such as "2 hours" counts as 0.
    """
    if isinstance(duration, str):
        parts: Any = parse_time_string(duration)
    else:
        parts = duration

    total: int | float = 0
    for (name, _), factor in zip(DURATION_UNITS, (3600, 60, 1)):
        amount = _get_part(parts, name)
        if isinstance(amount, (int, float)) and not isinstance(amount, bool):
            total += amount * factor
    return total
