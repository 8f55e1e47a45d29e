"""Exception classes for routed-io."""


class RoutedIOError(Exception):
    """Base exception for routed-io operations.

    Every error carries the path it failed on and the backend-reported reason.
    """

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(self._format(path, reason))

    def _format(self, path: str, reason: str) -> str:
        return f"'{path}': {reason}"


class FileReadError(RoutedIOError):
    """Raised when a local file cannot be opened or read."""

    def _format(self, path: str, reason: str) -> str:
        return f"Couldn't open file '{path}' for reading: {reason}"


class ChannelError(RoutedIOError):
    """Raised when a remote device channel operation fails."""

    def _format(self, path: str, reason: str) -> str:
        return f"Device channel failed on '{path}': {reason}"


class UnknownBackendError(RoutedIOError):
    """Raised when no backend is registered for a path's classification."""

    def _format(self, path: str, reason: str) -> str:
        return f"Unknown backend for '{path}': {reason}"


class DirectoryCreateError(RoutedIOError):
    """Raised when one segment of a directory walk cannot be created."""

    def _format(self, path: str, reason: str) -> str:
        return f"Cannot create directory '{path}' ({reason})"
