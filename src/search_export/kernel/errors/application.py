"""Application-layer errors – raised at the action / use-case level."""

from __future__ import annotations

from typing import Any

from search_export.kernel.errors.base import BaseError


class ApplicationError(BaseError):
    """Cross-cutting application-layer concern."""

    default_code = "application_error"


class IncompatibleActionError(ApplicationError):
    """An action was executed against a context it does not support."""

    default_code = "incompatible_action"

    def __init__(
        self,
        message: str = "Action is incompatible",
        *,
        action_id: str | None = None,
        embeddable_type: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.action_id = action_id
        self.embeddable_type = embeddable_type


class ReportGenerationError(ApplicationError):
    """The reporting backend could not produce (or we could not save) an export."""

    default_code = "report_generation_failed"

    def __init__(
        self,
        message: str = "Report generation failed",
        *,
        saved_search_id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.saved_search_id = saved_search_id


__all__ = [
    "ApplicationError",
    "IncompatibleActionError",
    "ReportGenerationError",
]
