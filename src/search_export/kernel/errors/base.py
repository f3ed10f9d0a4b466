"""Root error class for the search-export error hierarchy."""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy.

    Every error carries a stable ``code`` slug so log pipelines and the CLI
    can branch on it without parsing messages.

    Args:
        message: Human-readable description; also what ``str()`` returns.
        code: Machine-readable slug (defaults to the class's ``default_code``).
        detail: Extra JSON-serialisable context.
        cause: The exception this one translates; chained as ``__cause__``.
    """

    default_code: str = "base_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})
        if cause is not None:
            self.__cause__ = cause

    @property
    def cause(self) -> BaseException | None:
        return self.__cause__

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"

    def to_dict(self) -> dict[str, Any]:
        """``code``/``message``/``detail`` plus ``cause`` (as its repr) when chained."""
        payload: dict[str, Any] = {"code": self.code, "message": self.message, "detail": self.detail}
        if self.cause is not None:
            payload["cause"] = repr(self.cause)
        return payload

    def log_fields(self) -> dict[str, Any]:
        """Flat key/values for a structlog event: ``error_code``, ``error``, ``error_<detail>``."""
        fields: dict[str, Any] = {"error_code": self.code, "error": self.message}
        fields.update({f"error_{key}": value for key, value in self.detail.items()})
        if self.cause is not None:
            fields["error_cause"] = type(self.cause).__name__
        return fields


__all__ = ["BaseError"]
