"""Application notifications – toast port + logging and in-memory implementations."""
from search_export.application.notifications.toasts import (
    InMemoryNotifier,
    LoggingNotifier,
    Notifier,
    Toast,
    ToastColor,
)

__all__ = ["InMemoryNotifier", "LoggingNotifier", "Notifier", "Toast", "ToastColor"]
