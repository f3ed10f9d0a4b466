"""Observability – structured logging helpers."""
from search_export.observability.logging.factory import RENDERERS, JsonLoggerFactory
from search_export.observability.logging.filters import DEFAULT_SENSITIVE_FIELDS, REDACTED, SensitiveFieldsFilter
from search_export.observability.logging.processors import get_logger

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "REDACTED",
    "RENDERERS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
