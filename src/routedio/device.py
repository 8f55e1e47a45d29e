"""Remote device channel and backend for routed-io."""

import logging
import shlex
import subprocess
from typing import Optional

from .common import (
    ALTERNATE_SEPARATOR,
    DEFAULT_ADB_EXECUTABLE,
    DEFAULT_SEPARATOR,
    DEFAULT_TIMEOUT,
    ProcessResult,
    RemoteChannelProtocol,
    StreamBuffer,
)
from .exceptions import ChannelError, DirectoryCreateError

logger = logging.getLogger(__name__)


class AdbChannel:
    """Concrete implementation of RemoteChannelProtocol using the adb tool.

    The device is contacted lazily: the first operation checks that a device
    is attached and every later call reuses that result. Instances are not
    thread-safe; a single translation pipeline owns one instance.
    """

    PROTOCOL_VERSION: str = "1.0"

    def __init__(
        self,
        serial: Optional[str] = None,
        executable: str = DEFAULT_ADB_EXECUTABLE,
        timeout: int = DEFAULT_TIMEOUT,
        separator: str = DEFAULT_SEPARATOR,
    ) -> None:
        self.serial = serial
        self.executable = executable
        self.timeout = timeout
        self.separator = separator
        self.connected = False

    def _build_adb_cmd(self, base_cmd: list[str]) -> list[str]:
        """Build an adb command targeting the configured device."""
        cmd = [self.executable]
        if self.serial:
            cmd.extend(["-s", self.serial])
        cmd.extend(base_cmd)
        return cmd

    def _run(self, base_cmd: list[str], path: str) -> ProcessResult:
        cmd = self._build_adb_cmd(base_cmd)
        logger.debug(f"Running: {' '.join(cmd)}")
        try:
            return subprocess.run(cmd, capture_output=True, timeout=self.timeout)
        except subprocess.TimeoutExpired as e:
            raise ChannelError(path, f"timed out after {self.timeout}s") from e
        except OSError as e:
            raise ChannelError(path, f"cannot run {self.executable}: {e}") from e

    def _ensure_connection(self, path: str) -> None:
        """Check once that a device is attached.

        Raises:
            ChannelError: If no device answers
        """
        if self.connected:
            return
        result = self._run(["get-state"], path)
        state = result.stdout.decode(errors="replace").strip()
        if result.returncode != 0 or state != "device":
            reason = result.stderr.decode(errors="replace").strip() or state
            raise ChannelError(path, f"no device connected ({reason})")
        self.connected = True

    def _device_path(self, path: str) -> str:
        return path.replace(self.separator, ALTERNATE_SEPARATOR)

    def read(self, path: str) -> StreamBuffer:
        self._ensure_connection(path)
        result = self._run(["exec-out", "cat", shlex.quote(self._device_path(path))], path)
        if result.returncode != 0:
            raise ChannelError(path, result.stderr.decode(errors="replace").strip())
        return result.stdout

    def directory_create(self, path: str) -> None:
        self._ensure_connection(path)
        result = self._run(["shell", "mkdir", shlex.quote(self._device_path(path))], path)
        if result.returncode == 0:
            return
        output = (result.stderr + result.stdout).decode(errors="replace").strip()
        if "File exists" in output:
            logger.debug(f"Device directory already exists: {path}")
            return
        raise ChannelError(path, output)

    def file_exists(self, path: str) -> bool:
        try:
            self._ensure_connection(path)
            result = self._run(
                ["shell", f"test -e {shlex.quote(self._device_path(path))} && echo exists"],
                path,
            )
        except ChannelError as e:
            logger.debug(f"Existence check failed: {e}")
            return False
        return result.returncode == 0 and b"exists" in result.stdout


class DeviceBackend:
    """Concrete implementation of StorageBackendProtocol over a device channel.

    Paths are passed to the channel unsplit; the channel resolves them.
    """

    PROTOCOL_VERSION: str = "1.0"

    def __init__(self, channel: RemoteChannelProtocol) -> None:
        self.channel = channel

    def read(self, path: str) -> StreamBuffer:
        return self.channel.read(path)

    def exists(self, path: str) -> bool:
        try:
            return self.channel.file_exists(path)
        except ChannelError as e:
            logger.debug(f"Existence check failed: {e}")
            return False

    def create_directory(self, path: str) -> None:
        try:
            self.channel.directory_create(path)
        except ChannelError as e:
            raise DirectoryCreateError(path, e.reason) from e
