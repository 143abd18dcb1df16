"""Normalization of date inputs to RFC 1123 text."""

from datetime import datetime, timezone
from email.utils import format_datetime
from typing import Any

from rsspod.errors import InvalidDateError


def format_date(value: Any, operation: str) -> str:
    """Normalize a date value for an RSS date field.

    Accepts three shapes:
        - datetime: converted to UTC (naive values are taken as UTC)
        - int: Unix epoch seconds
        - str: used verbatim

    The zone is written as "GMT" (e.g. "Mon, 02 Jan 2006 15:04:05 GMT"),
    not "UTC"; both name the same instant.

    Args:
        value: The date to normalize
        operation: Name of the calling setter, used in error messages

    Returns:
        RFC 1123 date-time in GMT, or the string unchanged

    Raises:
        InvalidDateError: If value is none of the accepted shapes, or lies
            outside the years 1-9999 once converted to UTC
    """
    if isinstance(value, str):
        return value

    try:
        if isinstance(value, datetime):
            moment = value
            if moment.tzinfo is None:
                moment = moment.replace(tzinfo=timezone.utc)
            return format_datetime(moment.astimezone(timezone.utc), usegmt=True)

        # bool is an int subclass but never a timestamp
        if isinstance(value, int) and not isinstance(value, bool):
            return format_datetime(
                datetime.fromtimestamp(value, tz=timezone.utc), usegmt=True
            )
    except (OverflowError, OSError, ValueError) as e:
        raise InvalidDateError(operation, value, reason=str(e)) from e

    raise InvalidDateError(operation, value)
