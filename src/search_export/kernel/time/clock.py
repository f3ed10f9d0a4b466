"""Kernel time – the "now" that relative date math is anchored to."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta, tzinfo
from typing import Protocol


class Clock(Protocol):
    """Port: current instant, expressed in the requested zone."""

    def now(self, tz: tzinfo = UTC) -> datetime: ...


class SystemClock:
    def now(self, tz: tzinfo = UTC) -> datetime:
        return datetime.now(tz)


class FrozenClock:
    """Clock pinned to one instant; accepts an aware datetime or an ISO-8601 string.

    Naive values are taken as UTC.
    """

    def __init__(self, at: datetime | str) -> None:
        self._at = _to_instant(at)

    def now(self, tz: tzinfo = UTC) -> datetime:
        return self._at.astimezone(tz)

    def set(self, at: datetime | str) -> None:
        self._at = _to_instant(at)

    def advance(self, **delta: float) -> None:
        """Move the frozen instant by ``timedelta(**delta)``."""
        self._at += timedelta(**delta)


def _to_instant(at: datetime | str) -> datetime:
    if isinstance(at, str):
        at = datetime.fromisoformat(at)
    if at.tzinfo is None:
        at = at.replace(tzinfo=UTC)
    return at


__all__ = ["Clock", "FrozenClock", "SystemClock"]
