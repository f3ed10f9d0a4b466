"""Kernel time – Elasticsearch-style date math.

Supported forms::

    now                 current instant
    now-15m             15 minutes ago
    now/d               start of today (end of today when ``round_up``)
    now-1M/M            start of last month
    2024-03-01          absolute date (midnight in the target timezone)
    2024-03-01T10:00Z   absolute timestamp
    2024-03-01||+1d/d   absolute anchor followed by math

Operators are ``+``, ``-`` and ``/`` (rounding; only by a single unit).
Units are ``y M w d h H m s ms``.
"""
from __future__ import annotations

import calendar
from datetime import UTC, datetime, timedelta, tzinfo

from search_export.kernel.errors import InvalidDateMathError
from search_export.kernel.time.clock import Clock, SystemClock

__all__ = [
    "UNITS",
    "WEEKDAYS",
    "format_timestamp",
    "parse",
    "parse_or_none",
    "week_start_from_setting",
]

UNITS: tuple[str, ...] = ("y", "M", "w", "d", "h", "H", "m", "s", "ms")

# Python weekday numbers (Monday == 0).
WEEKDAYS: dict[str, int] = {
    "monday": 0,
    "tuesday": 1,
    "wednesday": 2,
    "thursday": 3,
    "friday": 4,
    "saturday": 5,
    "sunday": 6,
}

_ROUND, _ADD, _SUBTRACT = 0, 1, 2
_OPERATORS = {"/": _ROUND, "+": _ADD, "-": _SUBTRACT}


def week_start_from_setting(value: str | None) -> int:
    """Map a ``dateFormat:dow`` value (``"Sunday"``) to a Python weekday number."""
    if not value:
        return WEEKDAYS["sunday"]
    return WEEKDAYS.get(value.strip().lower(), WEEKDAYS["sunday"])


def parse(
    text: str,
    *,
    round_up: bool = False,
    tz: tzinfo = UTC,
    clock: Clock | None = None,
    week_start: int = WEEKDAYS["sunday"],
) -> datetime:
    """Resolve *text* to an aware datetime expressed in *tz*.

    Raises :class:`InvalidDateMathError` when the expression is empty,
    the anchor is not a valid timestamp, the math suffix is malformed, or
    the result falls outside the representable datetime range.
    """
    if not isinstance(text, str) or not text.strip():
        raise InvalidDateMathError(str(text), "empty expression")

    text = text.strip()
    try:
        if text.startswith("now"):
            anchor = (clock or SystemClock()).now(tz)
            math = text[len("now"):]
        else:
            anchor_text, sep, math = text.partition("||")
            if not sep:
                math = ""
            anchor = _parse_absolute(anchor_text, tz, original=text)

        if not math:
            return anchor
        return _apply_math(math, anchor, round_up=round_up, week_start=week_start, original=text)
    except (ValueError, OverflowError) as exc:
        raise InvalidDateMathError(text, "out of range", cause=exc) from exc


def parse_or_none(text: str, **kwargs) -> datetime | None:
    """Like :func:`parse` but returns ``None`` for unparseable input."""
    try:
        return parse(text, **kwargs)
    except InvalidDateMathError:
        return None


def format_timestamp(value: datetime) -> str:
    """ISO-8601 with offset and second precision, e.g. ``2024-03-01T00:00:00+01:00``."""
    return value.isoformat(timespec="seconds")


# ---------------------------------------------------------------------------
# internals
# ---------------------------------------------------------------------------


def _parse_absolute(value: str, tz: tzinfo, *, original: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise InvalidDateMathError(original, "not an ISO-8601 timestamp", cause=exc) from exc
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=tz)
    return parsed.astimezone(tz)


def _apply_math(
    math: str,
    value: datetime,
    *,
    round_up: bool,
    week_start: int,
    original: str,
) -> datetime:
    i = 0
    length = len(math)
    while i < length:
        op = _OPERATORS.get(math[i])
        if op is None:
            raise InvalidDateMathError(original, f"unexpected character {math[i]!r}")
        i += 1

        start = i
        while i < length and math[i].isdigit():
            i += 1
        num = int(math[start:i]) if i > start else 1
        if op == _ROUND and num != 1:
            raise InvalidDateMathError(original, "rounding is only supported by a single unit")

        start = i
        while i < length and math[i].isalpha():
            i += 1
        unit = math[start:i]
        if unit not in UNITS:
            raise InvalidDateMathError(original, f"unknown unit {unit!r}")

        if op == _ROUND:
            value = _end_of(value, unit, week_start) if round_up else _start_of(value, unit, week_start)
        elif op == _ADD:
            value = _add(value, unit, num)
        else:
            value = _add(value, unit, -num)
    return value


def _add(value: datetime, unit: str, amount: int) -> datetime:
    if unit in ("y", "M"):
        return _add_months(value, amount * 12 if unit == "y" else amount)
    if unit in ("w", "d"):
        # calendar units follow wall-clock time across DST changes
        days = amount * 7 if unit == "w" else amount
        return _normalise(value + timedelta(days=days))
    delta = {
        "h": timedelta(hours=amount),
        "H": timedelta(hours=amount),
        "m": timedelta(minutes=amount),
        "s": timedelta(seconds=amount),
        "ms": timedelta(milliseconds=amount),
    }[unit]
    return (value.astimezone(UTC) + delta).astimezone(value.tzinfo)


def _add_months(value: datetime, months: int) -> datetime:
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return _normalise(value.replace(year=year, month=month, day=day))


def _start_of(value: datetime, unit: str, week_start: int) -> datetime:
    if unit == "ms":
        return value.replace(microsecond=value.microsecond - value.microsecond % 1000)
    if unit == "s":
        return value.replace(microsecond=0)
    if unit == "m":
        return value.replace(second=0, microsecond=0)
    if unit in ("h", "H"):
        return _normalise(value.replace(minute=0, second=0, microsecond=0))
    midnight = value.replace(hour=0, minute=0, second=0, microsecond=0)
    if unit == "d":
        return _normalise(midnight)
    if unit == "w":
        offset = (midnight.weekday() - week_start) % 7
        return _normalise(midnight - timedelta(days=offset))
    if unit == "M":
        return _normalise(midnight.replace(day=1))
    return _normalise(midnight.replace(month=1, day=1))


def _end_of(value: datetime, unit: str, week_start: int) -> datetime:
    start = _start_of(value, unit, week_start)
    return _add(_add(start, unit, 1), "ms", -1)


def _normalise(value: datetime) -> datetime:
    """Re-derive the UTC offset after wall-clock arithmetic."""
    return value.astimezone(UTC).astimezone(value.tzinfo)
