"""Observability – SensitiveFieldsFilter."""
from __future__ import annotations

from typing import Any

# Matched case-insensitively against keys and as substrings of header-style
# keys, so ``Proxy-Authorization`` and ``x-api-key`` are covered too.
DEFAULT_SENSITIVE_FIELDS: frozenset[str] = frozenset(
    {"authorization", "cookie", "password", "api_key", "api-key", "apikey", "token", "secret"}
)

REDACTED = "[REDACTED]"


class SensitiveFieldsFilter:
    """structlog processor that masks credentials in event dicts.

    Request headers and settings get logged while debugging an export; this
    keeps API keys and session cookies out of the output.
    """

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        return self.redact(event_dict)

    def is_sensitive(self, key: str) -> bool:
        lowered = key.lower()
        return any(field in lowered for field in self._fields)

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: REDACTED if self.is_sensitive(str(k)) else self._redact_value(v) for k, v in data.items()}

    def _redact_value(self, value: Any) -> Any:
        if isinstance(value, dict):
            return self.redact(value)
        if isinstance(value, (list, tuple)):
            return type(value)(self._redact_value(item) for item in value)
        return value


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "REDACTED", "SensitiveFieldsFilter"]
