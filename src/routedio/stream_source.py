"""Stream source implementation for routed-io."""

import logging

from .classifier import classify
from .common import DEFAULT_SEPARATOR, BackendMap, StreamBuffer
from .utils import select_backend

logger = logging.getLogger(__name__)


class StreamSource:
    """Produces the full contents of a file from whichever backend owns it."""

    def __init__(self, backends: BackendMap, separator: str = DEFAULT_SEPARATOR) -> None:
        self.backends = backends
        self.separator = separator

    def open_for_read(self, path: str) -> StreamBuffer:
        """
        Read a whole file into a buffer.

        Local reads run inside the file's own directory; device reads hand the
        whole path to the channel.

        Args:
            path: File path in the host's separator convention

        Returns:
            Exact byte contents of the file

        Raises:
            FileReadError: If the local open or read fails
            ChannelError: If the device read fails
            UnknownBackendError: If no backend handles the path
        """
        classification = classify(path, self.separator)
        backend = select_backend(self.backends, classification, path, "read")
        logger.debug(f"Reading '{path}' via {classification.backend} backend")
        return backend.read(path)
