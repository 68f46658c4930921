"""Hook registry binding callbacks to named host events."""

from dataclasses import dataclass, field
from itertools import count
from typing import Any, Callable, Optional

from github_actions_hooks.core.exceptions import HookException
from github_actions_hooks.core.logging import get_logger
from github_actions_hooks.hooks.base import HookEvent, SaveContext

logger = get_logger(__name__)

HookCallback = Callable[[SaveContext], Any]

DEFAULT_PRIORITY = 10


@dataclass(order=True)
class _Action:
    priority: int
    sequence: int
    callback: HookCallback = field(compare=False)


class HookRegistry:
    """Manages callback registration and synchronous event execution."""

    def __init__(self) -> None:
        """Initialize hook registry."""
        self._actions: dict[HookEvent, list[_Action]] = {event: [] for event in HookEvent}
        self._sequence = count()

    def add_action(
        self,
        event: HookEvent,
        callback: HookCallback,
        priority: int = DEFAULT_PRIORITY,
    ) -> None:
        """Subscribe a callback to an event.

        Callbacks with a lower priority run first; equal priorities run in
        registration order.

        Args:
            event: Event to subscribe to
            callback: Callable receiving the event payload
            priority: Execution priority

        Raises:
            HookException: If the callback is not callable
        """
        if not callable(callback):
            raise HookException(
                "Hook callback must be callable",
                details={"event": event.value, "callback": repr(callback)},
            )

        self._actions[event].append(_Action(priority, next(self._sequence), callback))
        self._actions[event].sort()

        logger.debug(
            "hook_action_added",
            hook=event.value,
            callback=getattr(callback, "__qualname__", repr(callback)),
            priority=priority,
        )

    def has_action(self, event: HookEvent) -> bool:
        """Check if any callback is subscribed to an event.

        Args:
            event: Event type

        Returns:
            True if at least one callback is registered
        """
        return bool(self._actions[event])

    def do_action(self, event: HookEvent, context: SaveContext) -> list[Any]:
        """Run every callback subscribed to an event.

        A failing callback is logged and never stops the remaining ones.

        Args:
            event: Event type
            context: Event payload

        Returns:
            Return values of the callbacks that completed without error
        """
        results: list[Any] = []

        for action in list(self._actions[event]):
            try:
                results.append(action.callback(context))
            except Exception as e:
                logger.error(
                    "hook_action_error",
                    hook=event.value,
                    item_id=context.item_id,
                    error=str(e),
                    exc_info=True,
                )

        return results

    def list_actions(self) -> list[dict[str, Any]]:
        """List all registered callbacks.

        Returns:
            List of action info dictionaries
        """
        return [
            {
                "hook": event.value,
                "callback": getattr(action.callback, "__qualname__", repr(action.callback)),
                "priority": action.priority,
            }
            for event, actions in self._actions.items()
            for action in actions
        ]

    def remove_all(self, event: Optional[HookEvent] = None) -> None:
        """Remove callbacks for one event, or for every event.

        Args:
            event: Event to clear (all events when omitted)
        """
        if event is None:
            self._actions = {hook: [] for hook in HookEvent}
        else:
            self._actions[event] = []

        logger.debug("hook_actions_removed", hook=event.value if event else "all")
