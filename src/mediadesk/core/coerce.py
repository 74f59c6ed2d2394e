"""Coercion helpers for request field values.

Form fields arrive as text or loosely typed JSON. Empty text is treated
as an absent value (None) and never raises; malformed non-empty text
raises ValueError with a message naming the field.
"""

from __future__ import annotations

from datetime import date, datetime, timezone

# Largest value a SQLite INTEGER column can hold
MAX_DB_INT = 2**63 - 1


def blank_to_none(value: str | None) -> str | None:
    """Return None for None or whitespace-only text, else the text unchanged."""
    if value is None:
        return None
    if isinstance(value, str) and not value.strip():
        return None
    return value


def parse_date(value: str | date | None, field_name: str = "date") -> date | None:
    """Parse an ISO date or datetime into a calendar date.

    Datetimes with an offset are converted to UTC first, so
    "1990-05-01T23:30:00-02:00" becomes 1990-05-02.
    """
    if isinstance(value, datetime):
        return _utc_date(value)
    if isinstance(value, date):
        return value
    text = blank_to_none(value)
    if text is None:
        return None

    text = text.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        if len(text) == 10:
            return date.fromisoformat(text)
        return _utc_date(datetime.fromisoformat(text))
    except ValueError as e:
        raise ValueError(f"Invalid {field_name}: {value!r}") from e


def _utc_date(value: datetime) -> date:
    if value.tzinfo is not None:
        value = value.astimezone(timezone.utc)
    return value.date()


def parse_int(value: str | int | float | None, field_name: str = "value") -> int | None:
    """Parse an integer from int, whole float or numeric text."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise ValueError(f"Invalid {field_name}: {value!r}")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"Invalid {field_name}: {value!r}")
        return int(value)

    text = blank_to_none(value)
    if text is None:
        return None
    try:
        number = float(text.strip())
    except ValueError as e:
        raise ValueError(f"Invalid {field_name}: {value!r}") from e
    if not number.is_integer():
        raise ValueError(f"Invalid {field_name}: {value!r}")
    return int(number)
