"""Property change notifications scoped by command key."""

from __future__ import annotations

import inspect
import logging
from collections import defaultdict
from collections.abc import Awaitable, Callable
from typing import Any, Final, Union

logger: Final = logging.getLogger(__name__)

ChangeCallback = Callable[[str, Any], Union[None, Awaitable[None]]]


class ChangeNotifier:
    """Publish/subscribe hub owned by a single settings store.

    Subscriptions are keyed by command and last for the lifetime of the
    notifier; there is no unsubscribe.
    """

    def __init__(self) -> None:
        self._subscribers: defaultdict[str, list[ChangeCallback]] = defaultdict(list)

    def subscribe(self, command: str, callback: ChangeCallback) -> None:
        """Add *callback* to the subscribers of *command*.

        Args:
            command: Canonical command key
            callback: Called with ``(property, value)``; may be a coroutine function
        """
        self._subscribers[command].append(callback)
        logger.debug("Subscribed %r to changes of %s", callback, command)

    def subscribers(self, command: str) -> list[ChangeCallback]:
        """Return the callbacks registered for *command*."""
        return list(self._subscribers.get(command, []))

    async def publish(self, command: str, property: str, value: Any) -> None:
        """Deliver a change to every subscriber of *command* in order.

        Exceptions raised by a subscriber propagate to the caller.
        """
        for callback in self.subscribers(command):
            result = callback(property, value)
            if inspect.isawaitable(result):
                await result
