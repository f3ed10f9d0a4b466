"""Config – ExportSettings for the saved-search export action."""
from __future__ import annotations

import dataclasses
from typing import ClassVar

from search_export.config.settings.base import Settings
from search_export.config.validation import InvalidSettingValueError

__all__ = [
    "BLOB_SAVERS",
    "DEFAULT_GENERATE_ENDPOINT",
    "EXPORT_FORMATS",
    "ExportSettings",
]

DEFAULT_GENERATE_ENDPOINT = "/api/reporting/v1/generate/immediate/csv/saved-object"
EXPORT_FORMATS: frozenset[str] = frozenset({"csv", "xlsx"})
BLOB_SAVERS: frozenset[str] = frozenset({"directory", "memory"})


@dataclasses.dataclass
class ExportSettings(Settings):
    """Settings read from ``SEARCH_EXPORT_*`` environment variables.

    ``date_format_tz`` / ``date_format_dow`` seed the ``dateFormat:tz`` and
    ``dateFormat:dow`` UI settings when no host settings service is injected.
    """

    _prefix: ClassVar[str] = "SEARCH_EXPORT"

    base_url: str = "http://localhost:5601"
    generate_endpoint: str = DEFAULT_GENERATE_ENDPOINT
    timeout_seconds: float = 120.0
    download_dir: str = "."
    blob_saver: str = "directory"
    export_formats: list[str] = dataclasses.field(default_factory=lambda: ["csv"])
    enabled: bool = True
    date_format_tz: str = "Browser"
    date_format_dow: str = "Sunday"

    def _validate(self) -> None:
        if self.timeout_seconds <= 0:
            self._invalid("timeout_seconds", "must be positive")
        if self.blob_saver not in BLOB_SAVERS:
            self._invalid("blob_saver", f"expected one of {sorted(BLOB_SAVERS)}")
        unknown = set(self.export_formats) - EXPORT_FORMATS
        if unknown:
            self._invalid("export_formats", f"unsupported formats {sorted(unknown)}")
        if "csv" not in self.export_formats:
            self._invalid("export_formats", "csv is always exported")
        if not self.generate_endpoint.startswith("/"):
            self._invalid("generate_endpoint", "must be an absolute path")

    def _invalid(self, name: str, reason: str) -> None:
        raise InvalidSettingValueError(name, getattr(self, name), reason, env_key=self.env_key(name))
