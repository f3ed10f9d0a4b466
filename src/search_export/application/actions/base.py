"""Application actions – ActionDefinition protocol, ActionContext, RequestState."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Protocol, runtime_checkable

__all__ = ["ActionContext", "ActionDefinition", "RequestState"]


@dataclass(frozen=True)
class ActionContext:
    """What a trigger hands to an action: the panel it was invoked on."""

    embeddable: Any


class RequestState(str, Enum):
    IDLE = "idle"
    IN_FLIGHT = "in_flight"


@runtime_checkable
class ActionDefinition(Protocol):
    """Port: an action the host can show on a trigger (e.g. a panel menu)."""

    id: str
    type: str

    def get_icon_type(self) -> str: ...
    def get_display_name(self) -> str: ...
    async def is_compatible(self, context: ActionContext) -> bool: ...
    async def execute(self, context: ActionContext) -> None: ...
