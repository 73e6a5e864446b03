from pathlib import Path

import pytest

from shellsettings.store.protocols import (
    ErrorSimulatingBackend,
    FileBackend,
    LocalFileBackend,
    MemoryFileBackend,
    create_error_simulating_backend,
    create_memory_backend,
)


class TestMemoryFileBackend:
    @pytest.mark.asyncio
    async def test_write_and_read_tracking(self) -> None:
        backend = MemoryFileBackend()
        path = Path("/settings.json")

        await backend.write_bytes(path, b"{}")
        data = await backend.read_bytes(path)

        assert data == b"{}"
        assert backend.write_calls == [{"path": path, "data": b"{}"}]
        assert backend.read_calls == [path]

    @pytest.mark.asyncio
    async def test_missing_file(self) -> None:
        with pytest.raises(FileNotFoundError):
            await MemoryFileBackend().read_bytes(Path("/missing"))

    @pytest.mark.asyncio
    async def test_reset_call_history(self) -> None:
        backend = create_memory_backend()
        await backend.write_bytes(Path("/a"), b"x")

        backend.reset_call_history()

        assert backend.write_calls == []
        assert backend.files == {Path("/a"): b"x"}


class TestErrorSimulatingBackend:
    @pytest.mark.asyncio
    async def test_read_failure(self) -> None:
        backend = ErrorSimulatingBackend(fail_on_methods=["read_bytes"])
        with pytest.raises(PermissionError):
            await backend.read_bytes(Path("/a"))

    @pytest.mark.asyncio
    async def test_write_failure(self) -> None:
        backend = create_error_simulating_backend(fail_on_methods=["write_bytes"])
        with pytest.raises(OSError):
            await backend.write_bytes(Path("/a"), b"x")
        assert backend.write_calls == []

    @pytest.mark.asyncio
    async def test_no_failures_configured(self) -> None:
        backend = ErrorSimulatingBackend()
        await backend.write_bytes(Path("/a"), b"x")
        assert await backend.read_bytes(Path("/a")) == b"x"


class TestLocalFileBackend:
    @pytest.mark.asyncio
    async def test_creates_parent_directory(self, tmp_path: Path) -> None:
        backend = LocalFileBackend()
        path = tmp_path / "nested" / "dir" / "settings.json"

        await backend.write_bytes(path, b'{"a": {}}')

        assert await backend.read_bytes(path) == b'{"a": {}}'

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            await LocalFileBackend().read_bytes(tmp_path / "missing")


def test_backends_satisfy_protocol() -> None:
    assert isinstance(LocalFileBackend(), FileBackend)
    assert isinstance(MemoryFileBackend(), FileBackend)
