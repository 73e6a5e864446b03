"""Loading and saving the settings tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Final

from pydantic import ValidationError

from shellsettings.constants import PATH_PROPERTY, SETTINGS_COMMAND
from shellsettings.errors import (
    SettingsIOError,
    SettingsNotFoundError,
    SettingsParseError,
)
from shellsettings.store.models import SettingsDocument
from shellsettings.store.protocols import FileBackend

logger: Final = logging.getLogger(__name__)


async def load_settings(path: Path, backend: FileBackend) -> dict[str, Any]:
    """Load the settings tree from *path*.

    Args:
        path: Settings file to read
        backend: File access implementation

    Returns:
        The parsed tree; an empty file yields an empty tree

    Raises:
        SettingsNotFoundError: If the file does not exist
        SettingsParseError: If the content is not a settings document
        SettingsIOError: For any other read failure
    """
    try:
        data = await backend.read_bytes(path)
    except FileNotFoundError as exc:
        raise SettingsNotFoundError(f"Settings file not found: {path}", path) from exc
    except OSError as exc:
        raise SettingsIOError(
            f"Unable to read settings file {path}: {exc}", path, original_error=exc
        ) from exc

    if not data:
        logger.debug("Settings file %s is empty", path)
        return {}

    try:
        document = SettingsDocument.model_validate_json(data)
    except ValidationError as err:
        raise SettingsParseError(
            f"Invalid settings file {path}:\n{err}", path, original_error=err
        ) from err

    logger.debug("Loaded %d entries from %s", len(document.root), path)
    return document.root


def settings_path(tree: dict[str, Any]) -> Path:
    """Return the persistence target recorded in the tree.

    Raises:
        SettingsIOError: If ``settings.path`` is missing
    """
    try:
        return Path(tree[SETTINGS_COMMAND][PATH_PROPERTY])
    except (KeyError, TypeError) as exc:
        raise SettingsIOError("settings.path is not set", original_error=exc) from exc


async def save_settings(tree: dict[str, Any], backend: FileBackend) -> Path:
    """Overwrite the settings file with the complete tree.

    Args:
        tree: Tree data only, never the store object
        backend: File access implementation

    Returns:
        The path that was written

    Raises:
        SettingsIOError: If the file cannot be written
    """
    path = settings_path(tree)
    try:
        payload = SettingsDocument(tree).to_bytes()
    except ValidationError as err:
        raise SettingsParseError(
            f"Settings tree cannot be serialized:\n{err}", path, original_error=err
        ) from err

    try:
        await backend.write_bytes(path, payload)
    except OSError as exc:
        raise SettingsIOError(
            f"Unable to write settings file {path}: {exc}", path, original_error=exc
        ) from exc

    logger.debug("Saved settings to %s", path)
    return path
