"""Application notifications – toast model, Notifier port and implementations."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Protocol, runtime_checkable

from search_export.observability.logging import get_logger

__all__ = [
    "InMemoryNotifier",
    "LoggingNotifier",
    "Notifier",
    "Toast",
    "ToastColor",
]

logger = get_logger(__name__)


class ToastColor(str, Enum):
    SUCCESS = "success"
    DANGER = "danger"


@dataclass(frozen=True)
class Toast:
    """A user-facing notification. ``test_subj`` is a stable identifier for UI tests."""

    title: str
    text: str
    test_subj: str
    color: ToastColor = ToastColor.SUCCESS


@runtime_checkable
class Notifier(Protocol):
    """Port: the host's toast service."""

    def add_success(self, toast: Toast) -> None: ...

    def add_danger(self, toast: Toast) -> None: ...


class LoggingNotifier:
    """Renders toasts as structured log events (headless / CLI hosts)."""

    def add_success(self, toast: Toast) -> None:
        logger.info("toast", title=toast.title, text=toast.text, test_subj=toast.test_subj, color="success")

    def add_danger(self, toast: Toast) -> None:
        logger.error("toast", title=toast.title, text=toast.text, test_subj=toast.test_subj, color="danger")


class InMemoryNotifier:
    """Fake Notifier that captures raised toasts."""

    def __init__(self) -> None:
        self.toasts: list[Toast] = []

    def add_success(self, toast: Toast) -> None:
        self.toasts.append(_with_color(toast, ToastColor.SUCCESS))

    def add_danger(self, toast: Toast) -> None:
        self.toasts.append(_with_color(toast, ToastColor.DANGER))

    @property
    def successes(self) -> list[Toast]:
        return [t for t in self.toasts if t.color is ToastColor.SUCCESS]

    @property
    def dangers(self) -> list[Toast]:
        return [t for t in self.toasts if t.color is ToastColor.DANGER]

    def by_test_subj(self, test_subj: str) -> list[Toast]:
        return [t for t in self.toasts if t.test_subj == test_subj]

    def reset(self) -> None:
        self.toasts.clear()


def _with_color(toast: Toast, color: ToastColor) -> Toast:
    if toast.color is color:
        return toast
    return Toast(title=toast.title, text=toast.text, test_subj=toast.test_subj, color=color)
