"""Observability – get_logger helper."""
from __future__ import annotations

from typing import Any

import structlog


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """structlog logger named *name* (usually ``__name__``), with *initial_values* bound.

    Per-export fields such as ``saved_search_id`` are bound with
    ``structlog.contextvars.bound_contextvars`` for the duration of one
    :meth:`ExcelReportPanelAction.execute`, so every module's events carry them.
    """
    logger = structlog.get_logger(name)
    return logger.bind(**initial_values) if initial_values else logger


__all__ = ["get_logger"]
