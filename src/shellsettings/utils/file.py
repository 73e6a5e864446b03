"""File utility functions."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Final

logger: Final = logging.getLogger(__name__)


def ensure_directory_exists(directory: Path) -> None:
    """Create directory if it doesn't exist.

    Args:
        directory: Path to create
    """
    if not directory.exists():
        directory.mkdir(parents=True, exist_ok=True)
        logger.debug("Created directory: %s", directory)


def read_file_bytes(file_path: Path) -> bytes:
    """Read the whole file.

    Args:
        file_path: Path to read

    Returns:
        File content, raising FileNotFoundError when absent
    """
    return file_path.read_bytes()


def write_file_bytes(file_path: Path, data: bytes) -> None:
    """Overwrite a file in full, creating its directory first.

    Args:
        file_path: Path to write
        data: Complete new content
    """
    ensure_directory_exists(file_path.parent)
    file_path.write_bytes(data)
    logger.debug("Wrote %d bytes to %s", len(data), file_path)
