"""Kernel time – resolve the ``dateFormat:tz`` UI setting to an IANA zone."""
from __future__ import annotations

from typing import Callable
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import tzlocal

from search_export.observability.logging import get_logger

__all__ = ["BROWSER_TIMEZONE", "detect_timezone", "resolve_timezone", "to_zoneinfo"]

logger = get_logger(__name__)

BROWSER_TIMEZONE = "Browser"


def detect_timezone() -> str:
    """Return the IANA name of the machine's local timezone (``UTC`` if unknown)."""
    try:
        name = tzlocal.get_localzone_name()
    except ZoneInfoNotFoundError:
        logger.warning("timezone.detect_failed", fallback="UTC")
        return "UTC"
    return name or "UTC"


def resolve_timezone(
    setting: str | None,
    *,
    detect: Callable[[], str] = detect_timezone,
) -> str:
    """``"Browser"`` (or unset) means "use the detected zone"; unknown names fall back to it too."""
    if not setting or setting == BROWSER_TIMEZONE:
        return detect()
    try:
        ZoneInfo(setting)
    except (ZoneInfoNotFoundError, ValueError):
        fallback = detect()
        logger.warning("timezone.unknown", setting=setting, fallback=fallback)
        return fallback
    return setting


def to_zoneinfo(name: str) -> ZoneInfo:
    return ZoneInfo(name)
