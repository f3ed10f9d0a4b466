"""Observability – JsonLoggerFactory."""
from __future__ import annotations

import logging
import sys
from typing import Any, TextIO

import structlog

from search_export.observability.logging.filters import SensitiveFieldsFilter

RENDERERS = ("json", "console")


class JsonLoggerFactory:
    """Route structlog events through the stdlib root logger.

    ``renderer="json"`` emits one JSON object per line (the default, for log
    shippers); ``"console"`` emits aligned, human-readable lines for a
    terminal.  Credentials are redacted before either renderer sees them.
    """

    @staticmethod
    def configure(
        level: int = logging.INFO,
        sensitive_fields: frozenset[str] | None = None,
        stream: TextIO | None = None,
        renderer: str = "json",
    ) -> None:
        if renderer not in RENDERERS:
            raise ValueError(f"unknown renderer {renderer!r}, expected one of {RENDERERS}")

        shared_processors: list[Any] = [
            structlog.contextvars.merge_contextvars,
            SensitiveFieldsFilter(sensitive_fields),
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
        ]
        structlog.configure(
            processors=[structlog.stdlib.filter_by_level, *shared_processors,
                        structlog.stdlib.ProcessorFormatter.wrap_for_formatter],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )

        final: Any
        if renderer == "console":
            final = structlog.dev.ConsoleRenderer(colors=False)
        else:
            final = structlog.processors.JSONRenderer()
        formatter = structlog.stdlib.ProcessorFormatter(
            # records from plain ``logging`` users (httpx, asyncio) get the same treatment
            foreign_pre_chain=shared_processors,
            processors=[
                structlog.stdlib.ProcessorFormatter.remove_processors_meta,
                structlog.processors.format_exc_info,
                final,
            ],
        )
        handler = logging.StreamHandler(stream or sys.stderr)
        handler.setFormatter(formatter)
        root = logging.getLogger()
        root.handlers.clear()
        root.addHandler(handler)
        root.setLevel(level)


__all__ = ["RENDERERS", "JsonLoggerFactory"]
