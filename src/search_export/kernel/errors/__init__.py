"""Kernel error hierarchy.

::

    BaseError
    ├── DomainError                  bad input / registry state
    │   ├── InvalidDateMathError
    │   ├── InvalidTimeRangeError    -> failure toast
    │   ├── NotFoundError
    │   └── ConflictError            -> duplicate action registration
    ├── ApplicationError
    │   ├── IncompatibleActionError  -> raised out of execute()
    │   ├── ReportGenerationError    -> failure toast
    │   └── ConfigError              (search_export.config)
    └── InfrastructureError
        ├── ExternalServiceError     -> failure toast
        └── TimeoutError             -> failure toast (exported as InfrastructureTimeoutError)
"""

from search_export.kernel.errors.application import (
    ApplicationError,
    IncompatibleActionError,
    ReportGenerationError,
)
from search_export.kernel.errors.base import BaseError
from search_export.kernel.errors.domain import (
    ConflictError,
    DomainError,
    InvalidDateMathError,
    InvalidTimeRangeError,
    NotFoundError,
)
from search_export.kernel.errors.infrastructure import (
    ExternalServiceError,
    InfrastructureError,
)
from search_export.kernel.errors.infrastructure import TimeoutError as InfrastructureTimeoutError

__all__ = [
    "ApplicationError",
    "BaseError",
    "ConflictError",
    "DomainError",
    "ExternalServiceError",
    "IncompatibleActionError",
    "InfrastructureError",
    "InfrastructureTimeoutError",
    "InvalidDateMathError",
    "InvalidTimeRangeError",
    "NotFoundError",
    "ReportGenerationError",
]
