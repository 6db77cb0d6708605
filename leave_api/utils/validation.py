from __future__ import annotations
"""Presence checks shared by the write endpoints.

Only presence/non-blank is enforced; anything deeper is out of scope.
"""
from datetime import date, datetime, timezone
from typing import Any, Iterable, Mapping
from leave_api.errors import ValidationError

INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def is_blank(value: Any) -> bool:
    return not isinstance(value, str) or len(value) < 1


def require_fields(data: Any, fields: Iterable[str], message: str) -> Mapping[str, Any]:
    """Every field must be present and truthy, otherwise 400 echoing the payload."""
    if not isinstance(data, dict) or not all(data.get(f) for f in fields):
        raise ValidationError(message, data=data)
    return data


def parse_calendar_date(value: Any, field_name: str, data: Any = None) -> date:
    """Accept YYYY-MM-DD or a full ISO-8601 timestamp; keep the calendar date.

    Timestamps with an offset are converted to UTC first.
    """
    if isinstance(value, str):
        try:
            parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
        except ValueError:
            pass
        else:
            if parsed.tzinfo is not None:
                parsed = parsed.astimezone(timezone.utc)
            return parsed.date()
    raise ValidationError(f'Invalid date for {field_name}.', data=data)

__all__ = ['fits_int64', 'is_blank', 'require_fields', 'parse_calendar_date']
