"""The settings store: an in-memory tree persisted on every mutation."""

from __future__ import annotations

import asyncio
import copy
import logging
from collections.abc import Sequence
from enum import Enum
from pathlib import Path
from typing import Any, Final

from shellsettings.config import resolve_settings_path
from shellsettings.constants import PATH_PROPERTY, SETTINGS_COMMAND
from shellsettings.errors import SettingsNotFoundError, SettingsUsageError
from shellsettings.store.events import ChangeCallback, ChangeNotifier
from shellsettings.store.persistence import load_settings, save_settings
from shellsettings.store.protocols import FileBackend, LocalFileBackend
from shellsettings.store.registry import PropertyNames, register

logger: Final = logging.getLogger(__name__)


class StoreState(Enum):
    """Lifecycle of a settings store.

    ``LOADED`` and ``CREATED`` both converge to ``READY`` once the store
    has its notifier and persistence target hooked up.
    """

    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    CREATED = "created"
    READY = "ready"


def _key(name: str) -> str:
    return name.lower()


class SettingsStore:
    """Hierarchical command → property → value store.

    The tree data is kept apart from the store's behaviour: the change
    notifier and the registration entry point are attributes of the store,
    and ``snapshot()`` is the only view that ever reaches the settings file.

    Examples:
        store = await SettingsStore.open()
        await store.set("build", "target", ["release"])
        await store.get("BUILD", "Target")  # ["release"]
    """

    def __init__(self, path: Path, backend: FileBackend | None = None):
        """Create an uninitialized store for *path*.

        Use ``SettingsStore.open`` to get a ready store.
        """
        self.backend: FileBackend = backend or LocalFileBackend()
        self.events = ChangeNotifier()
        self.state = StoreState.UNINITIALIZED
        self._initial_path = path
        self._tree: dict[str, Any] = {}
        self._write_lock = asyncio.Lock()

    # ---- lifecycle ----
    @classmethod
    async def open(
        cls, path: Path | str | None = None, backend: FileBackend | None = None
    ) -> SettingsStore:
        """Load the settings file, creating it when it does not exist.

        Args:
            path: Explicit settings file; falls back to the environment or home default
            backend: File access implementation (default: local disk)

        Returns:
            A store in the READY state
        """
        store = cls(resolve_settings_path(path), backend)
        await store._load()
        store._hookup()
        return store

    async def _load(self) -> None:
        path = self._initial_path
        try:
            tree = await load_settings(path, self.backend)
        except SettingsNotFoundError:
            logger.info("No settings file at %s, creating one", path)
            await self._create()
            return

        if SETTINGS_COMMAND not in tree:
            logger.warning("Settings file %s has no settings entry, starting fresh", path)
            await self._create()
            return

        self._tree = tree
        self.state = StoreState.LOADED

    async def _create(self) -> None:
        self._tree = {}
        self.state = StoreState.CREATED
        await self._set_value(SETTINGS_COMMAND, PATH_PROPERTY, str(self._initial_path))

    def _hookup(self) -> None:
        self.state = StoreState.READY
        logger.debug("Settings store ready at %s", self.path)

    # ---- tree views ----
    @property
    def path(self) -> Path:
        """File the tree is persisted to."""
        reserved = self._tree.get(SETTINGS_COMMAND)
        if isinstance(reserved, dict) and isinstance(reserved.get(PATH_PROPERTY), str):
            return Path(reserved[PATH_PROPERTY])
        return self._initial_path

    def snapshot(self) -> dict[str, Any]:
        """Return a deep copy of the tree data."""
        return copy.deepcopy(self._tree)

    def commands(self) -> list[str]:
        """Return the top-level command keys."""
        return list(self._tree)

    def properties(self, command: str) -> list[str]:
        """Return the property keys of *command*, or an empty list."""
        entry = self._tree.get(_key(command))
        if isinstance(entry, dict):
            return list(entry)
        return []

    def has_command(self, command: str) -> bool:
        return _key(command) in self._tree

    # ---- operations ----
    async def get(self, command: str, property: str | None = None) -> Any:
        """Return a property value, a command's property map or ``{}``.

        Never fails: unknown commands and properties yield an empty map.
        """
        entry = self._tree.get(_key(command))
        if entry is None:
            return {}
        if property is None:
            return copy.deepcopy(entry)
        if isinstance(entry, dict) and _key(property) in entry:
            return copy.deepcopy(entry[_key(property)])
        return {}

    async def set(self, command: str, property: str, value: Any) -> None:
        """Create or overwrite ``command.property`` and persist the tree.

        Subscribers of *command* are notified with ``(property, value)``
        before the write.
        """
        self._require_ready()
        await self._set_value(_key(command), _key(property), value)

    async def _set_value(self, command: str, property: str, value: Any) -> None:
        if command == SETTINGS_COMMAND and property == PATH_PROPERTY:
            value = _path_text(value)

        self._tree.setdefault(command, {})[property] = value
        await self.events.publish(command, property, value)
        await self._save()

    async def delete(self, command: str, property: str | None = None) -> None:
        """Remove a property, or the whole command when *property* is omitted.

        Unknown commands and unknown properties are silent no-ops that do
        not touch the settings file.
        """
        self._require_ready()
        command = _key(command)
        entry = self._tree.get(command)
        if entry is None:
            return

        if property is None:
            del self._tree[command]
            logger.debug("Deleted command %s", command)
        elif isinstance(entry, dict) and _key(property) in entry:
            del entry[_key(property)]
            logger.debug("Deleted property %s.%s", command, _key(property))
        else:
            return

        await self._save()

    async def initialize(
        self,
        command: str,
        properties: PropertyNames = None,
        values: Any = None,
    ) -> bool:
        """Create missing properties of *command* with their default values.

        Existing values are never overwritten. *properties* is a single name
        or a sequence of names; *values* is the matching default or a
        parallel sequence of defaults, padded with empty lists.

        Returns:
            True if anything was created and the tree was persisted

        Raises:
            SettingsUsageError: If *command* is missing
        """
        if not command:
            raise SettingsUsageError("The command argument cannot be empty.")
        self._require_ready()

        command = _key(command)
        changed = False

        if command not in self._tree:
            self._tree[command] = {}
            changed = True
        entry = self._tree[command]

        for name, default in _pair_defaults(properties, values):
            name = _key(name)
            if name not in entry:
                entry[name] = default
                changed = True

        if changed:
            logger.debug("Initialized settings for %s", command)
            await self._save()
        return changed

    async def register(
        self,
        command: str,
        properties: PropertyNames = None,
        values: Any = None,
        on_change: ChangeCallback | None = None,
    ) -> None:
        """Self-register *command* with this store. See ``registry.register``."""
        await register(self, command, properties, values, on_change)

    def on_change(self, command: str, callback: ChangeCallback) -> None:
        """Subscribe *callback* to property changes of *command*."""
        self.events.subscribe(_key(command), callback)

    # ---- persistence ----
    async def _save(self) -> None:
        reserved = self._tree.setdefault(SETTINGS_COMMAND, {})
        if not isinstance(reserved.get(PATH_PROPERTY), str):
            reserved[PATH_PROPERTY] = str(self._initial_path)
        tree = self.snapshot()
        # Writes land one at a time, in call order
        async with self._write_lock:
            await save_settings(tree, self.backend)

    def _require_ready(self) -> None:
        if self.state is not StoreState.READY:
            raise SettingsUsageError(f"Settings store is {self.state.value}, not ready.")


def _path_text(value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, Sequence):
        return " ".join(str(part) for part in value)
    return str(value)


def _pair_defaults(properties: PropertyNames, values: Any) -> list[tuple[str, Any]]:
    if properties is None:
        return []
    if isinstance(properties, str):
        return [(properties, values if values is not None else [])]

    defaults = list(values) if values is not None else []
    return [
        (name, defaults[i] if i < len(defaults) and defaults[i] is not None else [])
        for i, name in enumerate(properties)
    ]
