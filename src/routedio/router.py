"""Path router implementation for routed-io."""

import logging
from typing import Optional

from .classifier import classify
from .common import (
    DEFAULT_SEPARATOR,
    DEFAULT_TIMEOUT,
    Backend,
    BackendMap,
    Classification,
    RemoteChannelProtocol,
    StorageBackendProtocol,
    StreamBuffer,
)
from .device import AdbChannel, DeviceBackend
from .directory_ensurer import DirectoryEnsurer
from .existence_checker import ExistenceChecker
from .filesystem import LocalBackend
from .stream_source import StreamSource
from .utils import validate_protocol_instance

logger = logging.getLogger(__name__)


class PathRouter:
    """Routes path-addressed file operations to the local or device backend.

    Build one instance at the entry point and pass it to whatever needs file
    access. The instance owns the only device channel handle; that channel
    connects on first use and is not safe for concurrent calls.
    """

    def __init__(
        self,
        channel: Optional[RemoteChannelProtocol] = None,
        local_backend: Optional[StorageBackendProtocol] = None,
        separator: str = DEFAULT_SEPARATOR,
        timeout: int = DEFAULT_TIMEOUT,
        backends: Optional[BackendMap] = None,
    ) -> None:
        if channel is not None and not validate_protocol_instance(
            channel, RemoteChannelProtocol
        ):
            raise TypeError(f"{type(channel).__name__} is not a RemoteChannelProtocol")
        if local_backend is not None and not validate_protocol_instance(
            local_backend, StorageBackendProtocol
        ):
            raise TypeError(
                f"{type(local_backend).__name__} is not a StorageBackendProtocol"
            )

        self.separator = separator
        self.channel = channel or AdbChannel(timeout=timeout, separator=separator)
        self.local_backend = local_backend or LocalBackend(separator)

        if backends is None:
            backends = {
                Backend.LOCAL: self.local_backend,
                Backend.NETWORK_SHARE: self.local_backend,
                Backend.REMOTE_DEVICE: DeviceBackend(self.channel),
            }
        self.backends = backends

        # Initialize the smaller, focused classes
        self.stream_source = StreamSource(self.backends, separator)
        self.directory_ensurer = DirectoryEnsurer(self.backends, separator)
        self.existence_checker = ExistenceChecker(self.backends, separator)

    def classify(self, path: str) -> Classification:
        """Classify a path without touching any backend."""
        return classify(path, self.separator)

    def open_for_read(self, path: str) -> StreamBuffer:
        """Read the full contents of a local or device file."""
        return self.stream_source.open_for_read(path)

    def exists(self, path: str) -> bool:
        """Check whether a local or device file exists."""
        return self.existence_checker.exists(path)

    def ensure_directory(self, path: str) -> None:
        """Create a local or device directory with all its parents."""
        self.directory_ensurer.ensure_directory(path)
