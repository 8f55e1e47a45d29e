"""Existence checker implementation for routed-io."""

import logging

from .classifier import classify
from .common import DEFAULT_SEPARATOR, BackendMap
from .exceptions import UnknownBackendError
from .utils import select_backend

logger = logging.getLogger(__name__)


class ExistenceChecker:
    """Asks the owning backend whether a file exists. Never raises."""

    def __init__(self, backends: BackendMap, separator: str = DEFAULT_SEPARATOR) -> None:
        self.backends = backends
        self.separator = separator

    def exists(self, path: str) -> bool:
        classification = classify(path, self.separator)
        try:
            backend = select_backend(self.backends, classification, path, "exists")
        except UnknownBackendError as e:
            logger.debug(str(e))
            return False
        return backend.exists(path)
