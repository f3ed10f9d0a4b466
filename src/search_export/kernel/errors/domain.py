"""Domain errors – unparseable time ranges and action-registry violations."""

from __future__ import annotations

from typing import Any

from search_export.kernel.errors.base import BaseError


class DomainError(BaseError):
    """Bad input or state, as opposed to an I/O failure."""

    default_code = "domain_error"


class InvalidDateMathError(DomainError):
    """A date math expression (``now-15m``, ``2024-01-01||/d``) could not be parsed."""

    default_code = "invalid_date_math"

    def __init__(self, expression: str, reason: str | None = None, **kwargs: Any) -> None:
        msg = f"Invalid date math expression {expression!r}"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg, **kwargs)
        self.expression = expression
        self.reason = reason


class InvalidTimeRangeError(DomainError):
    """One or both bounds of a panel time range could not be resolved."""

    default_code = "invalid_time_range"

    def __init__(self, from_: str, to: str, **kwargs: Any) -> None:
        super().__init__(f"Invalid time range: From: {from_}, To: {to}", **kwargs)
        self.from_ = from_
        self.to = to


class NotFoundError(DomainError):
    """A registry lookup found nothing under the given id."""

    default_code = "not_found"

    def __init__(self, kind: str, identifier: str, **kwargs: Any) -> None:
        super().__init__(f"{kind} [{kind.lower()}.id = {identifier}] does not exist.", **kwargs)
        self.kind = kind
        self.identifier = identifier


class ConflictError(DomainError):
    """An id is already taken in a registry."""

    default_code = "conflict"

    def __init__(self, kind: str, identifier: str, **kwargs: Any) -> None:
        super().__init__(f"{kind} [{kind.lower()}.id = {identifier}] already registered.", **kwargs)
        self.kind = kind
        self.identifier = identifier


__all__ = [
    "ConflictError",
    "DomainError",
    "InvalidDateMathError",
    "InvalidTimeRangeError",
    "NotFoundError",
]
