"""Infrastructure errors – the dashboard's HTTP API and the local filesystem."""

from __future__ import annotations

from typing import Any

from search_export.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    default_code = "infrastructure_error"


class TimeoutError(InfrastructureError):  # noqa: A001
    """A request to the dashboard did not complete within the client timeout."""

    default_code = "infrastructure_timeout"

    def __init__(self, message: str, *, timeout_seconds: float | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.timeout_seconds = timeout_seconds
        if timeout_seconds is not None:
            self.detail.setdefault("timeout_seconds", timeout_seconds)


class ExternalServiceError(InfrastructureError):
    """The dashboard answered with an error status, or could not be reached.

    ``status_code`` is ``None`` for transport failures (refused, reset, DNS).
    """

    default_code = "external_service_error"

    def __init__(
        self,
        service: str,
        message: str | None = None,
        *,
        status_code: int | None = None,
        url: str | None = None,
        **kwargs: Any,
    ) -> None:
        if message is None:
            message = (
                f"{service} responded with HTTP {status_code}"
                if status_code is not None
                else f"{service} request failed"
            )
        super().__init__(message, **kwargs)
        self.service = service
        self.status_code = status_code
        self.url = url
        if status_code is not None:
            self.detail.setdefault("status_code", status_code)
        if url is not None:
            self.detail.setdefault("url", url)


__all__ = [
    "ExternalServiceError",
    "InfrastructureError",
    "TimeoutError",
]
