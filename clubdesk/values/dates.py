"""Date parsing and Ukrainian date display.

parse_date is the permissive "does this look like a date" check the schemas
use for birth, buy_date and Time. ISO 8601 goes through datetime.fromisoformat;
everything else (month names, slash formats, RFC 2822, the browser's
Date.toString() form, bare years) through dateutil. It is not strict ISO
validation.
"""

import math
import re
from datetime import date, datetime, time, timezone, tzinfo
from typing import Any
from zoneinfo import ZoneInfo

from dateutil import parser as date_parser

from clubdesk.config import get_settings

# Genitive month names, as used after a day number
MONTHS_GENITIVE = (
    "січня",
    "лютого",
    "березня",
    "квітня",
    "травня",
    "червня",
    "липня",
    "серпня",
    "вересня",
    "жовтня",
    "листопада",
    "грудня",
)

# "GMT+0300" is UTC+3; dateutil reads a sign after a zone name POSIX-style
_ZONE_PREFIXED_OFFSET = re.compile(r"\b(?:GMT|UTC)(?=[+-]\d)", re.IGNORECASE)

# "(Eastern European Summer Time)" suffix of Date.toString()
_ZONE_DESCRIPTION = re.compile(r"\s*\([^()]*\)\s*$")


def _zone(name: str | None = None) -> tzinfo:
    if name is None:
        name = get_settings().timezone
    if name.upper() == "UTC":
        return timezone.utc
    return ZoneInfo(name)


def _default_moment() -> datetime:
    # Missing month/day default to January 1st, missing year to the current one
    return datetime.combine(date.today().replace(month=1, day=1), time())


def parse_date(value: Any) -> datetime | None:
    """Parse a date or datetime value.

    Args:
        value: String, datetime or date

    Returns:
        Parsed datetime (aware if the input carried an offset), or None
    """
    if isinstance(value, datetime):
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    if not isinstance(value, str):
        return None

    text = value.strip()
    if not text:
        return None

    iso_text = text[:-1] + "+00:00" if text[-1] in "Zz" else text
    try:
        return datetime.fromisoformat(iso_text)
    except (ValueError, OverflowError):
        pass

    text = _ZONE_DESCRIPTION.sub("", text)
    text = _ZONE_PREFIXED_OFFSET.sub("", text)
    try:
        return date_parser.parse(text, default=_default_moment())
    except (ValueError, OverflowError):
        return None


def is_parseable_date(value: Any) -> bool:
    """Check whether parse_date accepts the value."""
    return parse_date(value) is not None


def _localized(value: Any, tz_name: str | None) -> datetime | None:
    parsed = parse_date(value)
    if parsed is None:
        return None
    if parsed.tzinfo is not None:
        return parsed.astimezone(_zone(tz_name))
    return parsed


def _date_label(moment: datetime) -> str:
    return f"{moment.day} {MONTHS_GENITIVE[moment.month - 1]} {moment.year} р."


def format_date(value: Any, *, tz_name: str | None = None, missing: str | None = None) -> str:
    """Format a date as "19 жовтня 2026 р.".

    Aware values are shown in the configured timezone; naive ones as given.
    Unparseable values render as the missing placeholder.
    """
    moment = _localized(value, tz_name)
    if moment is None:
        return missing if missing is not None else get_settings().missing_value
    return _date_label(moment)


def format_date_time(value: Any, *, tz_name: str | None = None, missing: str | None = None) -> str:
    """Format a date and time as "19 жовтня 2026 р., 14:05"."""
    moment = _localized(value, tz_name)
    if moment is None:
        return missing if missing is not None else get_settings().missing_value
    return f"{_date_label(moment)}, {moment:%H:%M}"


def format_date_for_input(value: Any, include_time: bool = False) -> str:
    """Format a date for date / datetime-local inputs.

    Args:
        value: Date in any parseable shape
        include_time: Return YYYY-MM-DDTHH:MM instead of YYYY-MM-DD

    Returns:
        ISO prefix in UTC for aware values, or "" when unparseable
    """
    moment = parse_date(value)
    if moment is None:
        return ""
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)

    iso = moment.replace(tzinfo=None).isoformat(timespec="seconds")
    return iso[:16] if include_time else iso[:10]


def format_relative_time(
    value: Any,
    *,
    now: datetime | None = None,
    tz_name: str | None = None,
    missing: str | None = None,
) -> str:
    """Format how long ago a moment was, e.g. "2 год тому".

    Naive values and a naive `now` are taken to be in the configured timezone.
    Anything a week old or older falls back to format_date.

    Args:
        value: Moment in any parseable shape
        now: Reference time for tests (defaults to current time)
        tz_name: Timezone override
        missing: Placeholder override for unparseable values
    """
    moment = parse_date(value)
    if moment is None:
        return missing if missing is not None else get_settings().missing_value

    zone = _zone(tz_name)
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=zone)
    if now is None:
        now = datetime.now(zone)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=zone)

    seconds = math.floor((now - moment).total_seconds())
    minutes = seconds // 60
    hours = minutes // 60
    days = hours // 24

    if seconds < 60:
        return "щойно"
    if minutes < 60:
        return f"{minutes} хв тому"
    if hours < 24:
        return f"{hours} год тому"
    if days < 7:
        return f"{days} дн тому"

    return format_date(moment, tz_name=tz_name, missing=missing)
