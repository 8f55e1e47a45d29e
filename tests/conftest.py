"""
Shared pytest configuration and fixtures for routed-io tests.
"""

import os
import subprocess
import sys
from pathlib import Path

import pytest

# Add src to path for testing
parent_dir = Path(__file__).parent.parent
sys.path.insert(0, str(parent_dir / "src"))

from routedio.exceptions import ChannelError  # noqa: E402
from routedio.router import PathRouter  # noqa: E402


class FakeChannel:
    """In-memory stand-in for a paired device."""

    PROTOCOL_VERSION: str = "1.0"

    def __init__(self) -> None:
        self.files: dict[str, bytes] = {}
        self.directories: set[str] = set()
        self.calls: list[tuple[str, str]] = []
        self.disconnected = False

    def _check(self, path: str) -> None:
        if self.disconnected:
            raise ChannelError(path, "device disconnected")

    def read(self, path: str) -> bytes:
        self.calls.append(("read", path))
        self._check(path)
        if path not in self.files:
            raise ChannelError(path, "file not found on device")
        return self.files[path]

    def directory_create(self, path: str) -> None:
        self.calls.append(("directory_create", path))
        self._check(path)
        self.directories.add(path)

    def file_exists(self, path: str) -> bool:
        self.calls.append(("file_exists", path))
        return not self.disconnected and path in self.files


@pytest.fixture
def fake_channel():
    """Create an empty in-memory device channel."""
    return FakeChannel()


@pytest.fixture
def router(fake_channel):
    """Create a PathRouter wired to the fake device channel."""
    return PathRouter(channel=fake_channel)


@pytest.fixture
def restore_cwd():
    """Restore the working directory after tests that change it."""
    previous = os.getcwd()
    yield previous
    os.chdir(previous)


@pytest.fixture
def adb_result():
    """Build CompletedProcess objects the way subprocess.run returns them."""

    def _make(returncode: int = 0, stdout: bytes = b"", stderr: bytes = b""):
        return subprocess.CompletedProcess(
            args=[], returncode=returncode, stdout=stdout, stderr=stderr
        )

    return _make


@pytest.fixture
def sample_tree(tmp_path):
    """Create a small local file tree for read and existence tests."""
    data_dir = tmp_path / "data" / "cfg"
    data_dir.mkdir(parents=True)
    (data_dir / "file.txt").write_bytes(b"line one\r\nline two\n")
    (data_dir / "binary.dat").write_bytes(bytes(range(256)))
    return {"tmp": tmp_path, "data": tmp_path / "data", "cfg": data_dir}
