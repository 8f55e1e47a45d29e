"""Utility functions for routed-io."""

import inspect
from typing import Any

from .common import BackendMap, Classification, StorageBackendProtocol
from .exceptions import UnknownBackendError


def select_backend(
    backends: BackendMap, classification: Classification, path: str, operation: str
) -> StorageBackendProtocol:
    """
    Pick the backend registered for a classification.

    Args:
        backends: Routing table from backend kind to implementation
        classification: Result of classify() for path
        path: The path being operated on, for error reporting
        operation: Operation name, for error reporting (e.g. 'read')

    Returns:
        The backend implementation

    Raises:
        UnknownBackendError: If no backend handles this classification
    """
    try:
        return backends[classification.backend]
    except KeyError:
        raise UnknownBackendError(
            path, f"{operation} is not supported for {classification.backend} paths"
        ) from None


def validate_protocol_instance(obj: Any, protocol: type) -> bool:
    """
    Check that obj provides every public method and attribute of a protocol.

    Args:
        obj: Object to check
        protocol: Protocol class to check against

    Returns:
        True if all protocol members are present (methods must be callable)
    """
    for name, member in inspect.getmembers(protocol):
        if name.startswith("_"):
            continue
        if not hasattr(obj, name):
            return False
        if inspect.isfunction(member) and not callable(getattr(obj, name)):
            return False
    return True
