"""Common types, protocols, and constants for routed-io."""

from __future__ import annotations

import dataclasses
import subprocess
from enum import StrEnum
from typing import Protocol


class Backend(StrEnum):
    LOCAL = "local"
    REMOTE_DEVICE = "remote-device"
    NETWORK_SHARE = "network-share"


# Type aliases for better readability
StreamBuffer = bytes
ProcessResult = subprocess.CompletedProcess[bytes]
FileNameSplit = tuple[str, str]  # (directory, file name)
PrefixList = list[str]


@dataclasses.dataclass(frozen=True)
class Classification:
    backend: Backend
    root_skip_segments: int = 0  # leading segments never passed to create-directory


class RemoteChannelProtocol(Protocol):
    """Protocol for the device-sync channel.

    The channel resolves device paths itself, so every method receives the
    full, unsplit path. Connection management is the implementation's concern;
    callers only borrow the handle and must serialize access to it.

    Attributes:
        PROTOCOL_VERSION: Version identifier for protocol compatibility
    """

    PROTOCOL_VERSION: str = "1.0"

    def read(self, path: str) -> bytes:
        """Read the full contents of a file on the device.

        Args:
            path: Device path (e.g. ``\\Storage\\logs\\out.txt``)

        Returns:
            Byte contents of the file, untransformed

        Raises:
            ChannelError: If the channel is disconnected or the device refuses
        """
        ...

    def directory_create(self, path: str) -> None:
        """Create a single directory on the device.

        An already existing directory is not an error.

        Args:
            path: Device directory path

        Raises:
            ChannelError: If the directory cannot be created
        """
        ...

    def file_exists(self, path: str) -> bool:
        """Check whether a file exists on the device.

        Args:
            path: Device path to check

        Returns:
            True if the device reports the file, False otherwise
        """
        ...


class StorageBackendProtocol(Protocol):
    """Protocol for one storage backend (local filesystem or remote device).

    Attributes:
        PROTOCOL_VERSION: Version identifier for protocol compatibility
    """

    PROTOCOL_VERSION: str = "1.0"

    def read(self, path: str) -> bytes:
        """Read all bytes of the file at ``path``.

        Raises:
            FileReadError: If a local open or read fails
            ChannelError: If a remote read fails
        """
        ...

    def exists(self, path: str) -> bool:
        """Report whether ``path`` can be opened. Never raises."""
        ...

    def create_directory(self, path: str) -> None:
        """Create one directory level, tolerating an existing one.

        Raises:
            DirectoryCreateError: If the directory cannot be created
        """
        ...


BackendMap = dict[Backend, StorageBackendProtocol]


# Constants
DEFAULT_SEPARATOR = "\\"
ALTERNATE_SEPARATOR = "/"
NETWORK_SHARE_ROOT_SEGMENTS = 2  # machine name + share name
DEFAULT_TIMEOUT = 30
DEFAULT_ADB_EXECUTABLE = "adb"
