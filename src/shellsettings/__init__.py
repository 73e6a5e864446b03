"""Persisted, hierarchical settings for interactive command-line tools.

Commands join the store by self-registering their properties and a change
callback; users read and change the values through the ``get``, ``set``,
``delete`` and ``settings`` commands.
"""

from shellsettings.autocomplete import Completion, autocomplete, resolve_completions
from shellsettings.errors import (
    SettingsError,
    SettingsIOError,
    SettingsNotFoundError,
    SettingsParseError,
    SettingsUsageError,
)
from shellsettings.parsing import canonicalize, split_input
from shellsettings.store import SettingsStore, StoreState, initialize_settings, register

__all__ = [
    "Completion",
    "SettingsError",
    "SettingsIOError",
    "SettingsNotFoundError",
    "SettingsParseError",
    "SettingsStore",
    "SettingsUsageError",
    "StoreState",
    "autocomplete",
    "canonicalize",
    "initialize_settings",
    "register",
    "resolve_completions",
    "split_input",
]
