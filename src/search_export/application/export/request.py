"""Application export – TimeWindow and the generate-request body."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from search_export.application.embeddables import SavedSearchPanel, TimeRange
from search_export.kernel.errors import InvalidTimeRangeError
from search_export.kernel.time import Clock, datemath, to_zoneinfo

__all__ = [
    "STATE_KEYS",
    "TimeWindow",
    "build_request_body",
    "get_search_request_body",
    "pick_state",
    "resolve_time_window",
]

STATE_KEYS: tuple[str, ...] = ("sort", "docvalue_fields", "query")


@dataclass(frozen=True)
class TimeWindow:
    """Absolute export window; ``min``/``max`` are ISO-8601 strings with offset."""

    min: str
    max: str
    timezone: str

    def to_dict(self) -> dict[str, str]:
        return {"min": self.min, "max": self.max, "timezone": self.timezone}


def resolve_time_window(
    time_range: TimeRange,
    *,
    timezone: str,
    clock: Clock | None = None,
    week_start: int = datemath.WEEKDAYS["sunday"],
) -> TimeWindow:
    """Resolve a relative range; ``from`` rounds down and ``to`` rounds up."""
    tz = to_zoneinfo(timezone)
    options: dict[str, Any] = {"tz": tz, "clock": clock, "week_start": week_start}
    from_time = datemath.parse_or_none(time_range.from_, **options)
    to_time = datemath.parse_or_none(time_range.to, round_up=True, **options)
    if from_time is None or to_time is None:
        raise InvalidTimeRangeError(
            time_range.from_ if from_time is None else datemath.format_timestamp(from_time),
            time_range.to if to_time is None else datemath.format_timestamp(to_time),
        )
    return TimeWindow(
        min=datemath.format_timestamp(from_time),
        max=datemath.format_timestamp(to_time),
        timezone=timezone,
    )


def get_search_request_body(panel: SavedSearchPanel) -> dict[str, Any]:
    """The panel's search request body, or ``{}`` until the panel has searched."""
    adapters = panel.get_inspector_adapters()
    if not adapters:
        return {}
    if not adapters.requests.requests:
        return {}
    return panel.get_saved_search().search_source.get_search_request_body()


def pick_state(search_request_body: dict[str, Any]) -> dict[str, Any]:
    return {key: search_request_body[key] for key in STATE_KEYS if key in search_request_body}


def build_request_body(window: TimeWindow, state: dict[str, Any]) -> dict[str, Any]:
    return {"timerange": window.to_dict(), "state": state}
