"""Application actions – UiActions registry port and in-memory implementation."""
from __future__ import annotations

from typing import Protocol, runtime_checkable

from search_export.application.actions.base import ActionContext, ActionDefinition
from search_export.kernel.errors import ConflictError, NotFoundError
from search_export.observability.logging import get_logger

__all__ = ["CONTEXT_MENU_TRIGGER", "InMemoryUiActions", "UiActions"]

logger = get_logger(__name__)

CONTEXT_MENU_TRIGGER = "CONTEXT_MENU_TRIGGER"


@runtime_checkable
class UiActions(Protocol):
    """Port: the host's action / trigger registry."""

    def register_action(self, action: ActionDefinition) -> None: ...
    def attach_action(self, trigger_id: str, action_id: str) -> None: ...
    def add_trigger_action(self, trigger_id: str, action: ActionDefinition) -> None: ...


class InMemoryUiActions:
    """Action registry with the dashboard's semantics.

    * registering the same action id twice is a :class:`ConflictError`;
    * attaching an unregistered action is a :class:`NotFoundError`;
    * attaching is idempotent per trigger;
    * :meth:`add_trigger_action` registers the action if needed, then attaches it.
    """

    def __init__(self) -> None:
        self._actions: dict[str, ActionDefinition] = {}
        self._triggers: dict[str, list[str]] = {}

    def register_action(self, action: ActionDefinition) -> None:
        if action.id in self._actions:
            raise ConflictError("Action", action.id)
        self._actions[action.id] = action
        logger.debug("ui_actions.registered", action_id=action.id)

    def attach_action(self, trigger_id: str, action_id: str) -> None:
        if action_id not in self._actions:
            raise NotFoundError("Action", action_id)
        action_ids = self._triggers.setdefault(trigger_id, [])
        if action_id not in action_ids:
            action_ids.append(action_id)
            logger.debug("ui_actions.attached", trigger_id=trigger_id, action_id=action_id)

    def add_trigger_action(self, trigger_id: str, action: ActionDefinition) -> None:
        if action.id not in self._actions:
            self.register_action(action)
        self.attach_action(trigger_id, action.id)

    def detach_action(self, trigger_id: str, action_id: str) -> None:
        action_ids = self._triggers.get(trigger_id, [])
        if action_id in action_ids:
            action_ids.remove(action_id)

    def has_action(self, action_id: str) -> bool:
        return action_id in self._actions

    def get_action(self, action_id: str) -> ActionDefinition:
        try:
            return self._actions[action_id]
        except KeyError:
            raise NotFoundError("Action", action_id) from None

    def get_trigger_actions(self, trigger_id: str) -> list[ActionDefinition]:
        return [self._actions[action_id] for action_id in self._triggers.get(trigger_id, [])]

    async def get_trigger_compatible_actions(
        self, trigger_id: str, context: ActionContext
    ) -> list[ActionDefinition]:
        return [
            action
            for action in self.get_trigger_actions(trigger_id)
            if await action.is_compatible(context)
        ]
