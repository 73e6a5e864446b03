# src/shellsettings/store/protocols.py
from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Protocol, runtime_checkable

from shellsettings.utils.file import read_file_bytes, write_file_bytes


@runtime_checkable
class FileBackend(Protocol):
    """Protocol defining whole-file access for settings persistence.

    The store only ever reads a complete file or overwrites one in full.
    Atomicity and durability are left to the implementation.
    """

    async def read_bytes(self, path: Path) -> bytes:
        """Read the file at *path*.

        Args:
            path: File to read

        Returns:
            Complete file content

        Raises:
            FileNotFoundError: If the file does not exist
            OSError: For any other read failure
        """
        ...

    async def write_bytes(self, path: Path, data: bytes) -> None:
        """Replace the content of the file at *path*.

        Args:
            path: File to write
            data: Complete new content
        """
        ...


class LocalFileBackend:
    """Local disk backend running blocking I/O in a worker thread."""

    async def read_bytes(self, path: Path) -> bytes:
        return await asyncio.to_thread(read_file_bytes, path)

    async def write_bytes(self, path: Path, data: bytes) -> None:
        await asyncio.to_thread(write_file_bytes, path, data)


class MemoryFileBackend:
    """In-memory implementation of FileBackend for testing."""

    def __init__(self, files: dict[Path, bytes] | None = None):
        self.files: dict[Path, bytes] = dict(files or {})
        self.read_calls: list[Path] = []
        self.write_calls: list[dict[str, object]] = []

    async def read_bytes(self, path: Path) -> bytes:
        """Return stored content or raise FileNotFoundError."""
        self.read_calls.append(path)
        try:
            return self.files[path]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", str(path)) from None

    async def write_bytes(self, path: Path, data: bytes) -> None:
        """Record the write and keep the content."""
        self.write_calls.append({"path": path, "data": data})
        self.files[path] = data

    def reset_call_history(self) -> None:
        """Reset the call history for testing."""
        self.read_calls = []
        self.write_calls = []


class ErrorSimulatingBackend(MemoryFileBackend):
    """Backend mock that can simulate I/O errors."""

    def __init__(
        self,
        files: dict[Path, bytes] | None = None,
        fail_on_methods: list[str] | None = None,
    ):
        """Initialize with optional methods that should fail.

        Args:
            files: Initial file contents
            fail_on_methods: List of method names that should raise OSError
        """
        super().__init__(files)
        self.fail_on_methods = fail_on_methods or []

    async def read_bytes(self, path: Path) -> bytes:
        """Either read the file or raise based on configuration."""
        if "read_bytes" in self.fail_on_methods:
            raise PermissionError(13, "Simulated read failure", str(path))
        return await super().read_bytes(path)

    async def write_bytes(self, path: Path, data: bytes) -> None:
        """Either record the write or raise based on configuration."""
        if "write_bytes" in self.fail_on_methods:
            raise OSError(28, "Simulated write failure", str(path))
        await super().write_bytes(path, data)


def create_memory_backend(files: dict[Path, bytes] | None = None) -> MemoryFileBackend:
    """Create and return an in-memory backend for testing."""
    return MemoryFileBackend(files)


def create_error_simulating_backend(
    files: dict[Path, bytes] | None = None,
    fail_on_methods: list[str] | None = None,
) -> ErrorSimulatingBackend:
    """Create a backend that will fail on specified methods."""
    return ErrorSimulatingBackend(files, fail_on_methods)
