"""Application UI settings – read-only view of the user's advanced settings."""
from __future__ import annotations

from typing import Any, Mapping, Protocol, runtime_checkable

__all__ = [
    "DATE_FORMAT_DOW",
    "DATE_FORMAT_TZ",
    "DEFAULT_UI_SETTINGS",
    "InMemoryUiSettings",
    "UiSettings",
]

DATE_FORMAT_TZ = "dateFormat:tz"
DATE_FORMAT_DOW = "dateFormat:dow"

DEFAULT_UI_SETTINGS: dict[str, Any] = {
    DATE_FORMAT_TZ: "Browser",
    DATE_FORMAT_DOW: "Sunday",
}


@runtime_checkable
class UiSettings(Protocol):
    """Port: look up a UI setting by key."""

    def get(self, key: str, default: Any = None) -> Any: ...


class InMemoryUiSettings:
    """UiSettings backed by a dict, pre-populated with the dashboard defaults."""

    def __init__(self, values: Mapping[str, Any] | None = None) -> None:
        self._values: dict[str, Any] = dict(DEFAULT_UI_SETTINGS)
        self._values.update(values or {})

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value
