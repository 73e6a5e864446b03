"""Runtime configuration for the settings tool."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Final

from dotenv import load_dotenv
from pydantic import BaseModel, Field

from shellsettings.constants import (
    DEFAULT_PROMPT,
    DEFAULT_SETTINGS_PATH,
    HISTORY_FILENAME,
    SETTINGS_PATH_ENV,
)

# Load environment variables from .env file(s)
load_dotenv()

logger: Final = logging.getLogger(__name__)


def resolve_settings_path(path: Path | str | None = None) -> Path:
    """Pick the settings file location.

    Args:
        path: Explicit path (optional; checks SHELLSETTINGS_FILE, then the home default)

    Returns:
        Absolute path to the settings file
    """
    if path is None:
        env_path = os.environ.get(SETTINGS_PATH_ENV)
        if env_path:
            logger.debug("Using settings path from %s", SETTINGS_PATH_ENV)
            path = env_path
        else:
            path = DEFAULT_SETTINGS_PATH
    return Path(path).expanduser().absolute()


class ShellConfig(BaseModel):
    """Options for the command-line front ends.

    Values come from the CLI flags; anything left unset falls back to the
    environment or the defaults in ``constants``.
    """

    settings_file: Path = Field(
        default_factory=lambda: resolve_settings_path(), description="Settings file location"
    )
    history_file: str = Field(
        HISTORY_FILENAME, description="Readline history file, kept next to the settings file"
    )
    prompt: str = Field(DEFAULT_PROMPT, description="Interactive shell prompt")
    debug: bool = Field(False, description="Enable debug logging")

    @classmethod
    def from_options(cls, file: Path | None = None, debug: bool = False) -> ShellConfig:
        """Build the configuration from CLI options."""
        return cls(settings_file=resolve_settings_path(file), debug=debug)

    @property
    def history_path(self) -> Path:
        """Full path of the readline history file."""
        return self.settings_file.parent / self.history_file


def configure_logging(debug: bool = False) -> None:
    """Configure root logging for the CLI."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
