from pathlib import Path

import pytest
import pytest_asyncio

from shellsettings.store.protocols import MemoryFileBackend
from shellsettings.store.tree import SettingsStore


@pytest.fixture
def settings_file(tmp_path: Path) -> Path:
    return tmp_path / ".4252settings"


@pytest.fixture
def backend() -> MemoryFileBackend:
    return MemoryFileBackend()


@pytest_asyncio.fixture
async def store(settings_file: Path, backend: MemoryFileBackend) -> SettingsStore:
    """A ready store backed by memory, created from a missing file."""
    opened = await SettingsStore.open(settings_file, backend)
    backend.reset_call_history()
    return opened
