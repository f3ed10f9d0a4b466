"""Application UI settings – port and dict-backed implementation."""
from search_export.application.ui_settings.settings import (
    DATE_FORMAT_DOW,
    DATE_FORMAT_TZ,
    DEFAULT_UI_SETTINGS,
    InMemoryUiSettings,
    UiSettings,
)

__all__ = ["DATE_FORMAT_DOW", "DATE_FORMAT_TZ", "DEFAULT_UI_SETTINGS", "InMemoryUiSettings", "UiSettings"]
