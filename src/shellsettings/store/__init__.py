"""Settings tree storage.

This package provides:
- SettingsStore: the in-memory tree with get/set/delete/initialize
- register: the self-registration entry point for consuming commands
- ChangeNotifier: per-command change subscriptions
- load_settings / save_settings: whole-file persistence
"""

from shellsettings.store.events import ChangeCallback, ChangeNotifier
from shellsettings.store.persistence import load_settings, save_settings
from shellsettings.store.protocols import FileBackend, LocalFileBackend
from shellsettings.store.registry import register
from shellsettings.store.tree import SettingsStore, StoreState

initialize_settings = SettingsStore.open

__all__ = [
    "ChangeCallback",
    "ChangeNotifier",
    "FileBackend",
    "LocalFileBackend",
    "SettingsStore",
    "StoreState",
    "initialize_settings",
    "load_settings",
    "register",
    "save_settings",
]
