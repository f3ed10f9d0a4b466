"""Kernel time – Clock port, date math and timezone resolution."""
from search_export.kernel.time.clock import Clock, FrozenClock, SystemClock
from search_export.kernel.time.datemath import format_timestamp, parse, parse_or_none, week_start_from_setting
from search_export.kernel.time.timezone import BROWSER_TIMEZONE, detect_timezone, resolve_timezone, to_zoneinfo

__all__ = [
    "BROWSER_TIMEZONE",
    "Clock",
    "FrozenClock",
    "SystemClock",
    "detect_timezone",
    "format_timestamp",
    "parse",
    "parse_or_none",
    "resolve_timezone",
    "to_zoneinfo",
    "week_start_from_setting",
]
