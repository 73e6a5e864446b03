"""Self-registration of commands with the settings store.

Commands loaded independently of each other call ``register`` once at
load time to declare the properties they use, with their defaults, and to
subscribe to changes of their own settings. Calling it again on every
process start is safe: properties the user has already set are kept.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any, Final, Optional, Union

from shellsettings.errors import SettingsUsageError
from shellsettings.store.events import ChangeCallback

if TYPE_CHECKING:
    from shellsettings.store.tree import SettingsStore

logger: Final = logging.getLogger(__name__)

PropertyNames = Optional[Union[str, Sequence[str]]]


async def register(
    store: SettingsStore,
    command: str,
    properties: PropertyNames = None,
    values: Any = None,
    on_change: Optional[ChangeCallback] = None,
) -> None:
    """Register *command* with *store*.

    Args:
        store: The store the command joins
        command: Command name, case-insensitive
        properties: A property name or a sequence of names to initialize
        values: Default for a single property, or defaults parallel to *properties*
        on_change: Called with ``(property, value)`` whenever a property of
            *command* is set. When *values* is a callable and *on_change* is
            omitted, *values* is used as the callback.

    Raises:
        SettingsUsageError: If *command* is missing
    """
    if not command:
        raise SettingsUsageError("The command argument cannot be empty.")
    command = command.lower()

    if on_change is None and callable(values):
        on_change, values = values, None

    await store.initialize(command, properties, values)

    if on_change is None:
        return
    if not callable(on_change):
        logger.warning("Ignoring non-callable change handler for %s", command)
        return
    store.on_change(command, on_change)
    logger.debug("Registered %s", command)
