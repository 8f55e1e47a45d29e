"""Directory ensurer implementation for routed-io."""

import logging

from .classifier import classify, directory_prefixes
from .common import DEFAULT_SEPARATOR, BackendMap
from .utils import select_backend

logger = logging.getLogger(__name__)


class DirectoryEnsurer:
    """Creates every level of a directory path on the backend that owns it."""

    def __init__(self, backends: BackendMap, separator: str = DEFAULT_SEPARATOR) -> None:
        self.backends = backends
        self.separator = separator

    def ensure_directory(self, path: str) -> None:
        """
        Create a directory and all of its parents, left to right.

        Existing levels are accepted, so calling this twice is harmless. The
        machine and share segments of a network path are never created on
        their own.

        Args:
            path: Directory path; an empty path does nothing

        Raises:
            DirectoryCreateError: On the first level that cannot be created
            UnknownBackendError: If no backend handles the path
        """
        if not path:
            return

        classification = classify(path, self.separator)
        backend = select_backend(self.backends, classification, path, "create directory")
        for prefix in directory_prefixes(path, classification, self.separator):
            logger.debug(f"Creating directory '{prefix}' ({classification.backend})")
            backend.create_directory(prefix)
