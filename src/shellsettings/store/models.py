"""Serialized form of the settings tree."""

from __future__ import annotations

from typing import Any

from pydantic import RootModel, model_validator

from shellsettings.constants import PATH_PROPERTY, SETTINGS_COMMAND


class SettingsDocument(RootModel[dict[str, dict[str, Any]]]):
    """JSON document persisted to the settings file.

    The top level maps command keys to property maps. Property values are
    kept as-is (usually a list of strings or a nested map); only the shape
    of the document and the reserved ``settings.path`` entry are checked.
    """

    @model_validator(mode="after")
    def check_settings_path(self) -> SettingsDocument:
        reserved = self.root.get(SETTINGS_COMMAND)
        if reserved is not None and PATH_PROPERTY in reserved:
            if not isinstance(reserved[PATH_PROPERTY], str):
                raise ValueError("settings.path must be a string")
        return self

    @property
    def has_settings(self) -> bool:
        """Whether the reserved ``settings`` entry is present."""
        return SETTINGS_COMMAND in self.root

    def to_bytes(self) -> bytes:
        """Render the document as UTF-8 encoded JSON."""
        return self.model_dump_json(indent=2).encode("utf-8")
