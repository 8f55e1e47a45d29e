"""Local filesystem backend for routed-io."""

import logging
import os
from contextlib import contextmanager
from typing import Iterator

from .classifier import split_file_path
from .common import DEFAULT_SEPARATOR, StreamBuffer
from .exceptions import DirectoryCreateError, FileReadError

logger = logging.getLogger(__name__)


@contextmanager
def working_directory(directory: str) -> Iterator[None]:
    """Change into directory for the duration of the block.

    The previous working directory is restored on every exit path. An empty
    directory leaves the working directory untouched.
    """
    if not directory:
        yield
        return

    previous = os.getcwd()
    os.chdir(directory)
    try:
        yield
    finally:
        os.chdir(previous)


class LocalBackend:
    """Concrete implementation of StorageBackendProtocol for the local filesystem.

    Network share paths are handed to the host's native file APIs as well, so
    this backend also serves the NETWORK_SHARE classification.
    """

    PROTOCOL_VERSION: str = "1.0"

    def __init__(self, separator: str = DEFAULT_SEPARATOR) -> None:
        self.separator = separator

    def read(self, path: str) -> StreamBuffer:
        directory, file_name = split_file_path(path, self.separator)
        logger.debug(f"Reading local file '{file_name}' from '{directory or '.'}'")
        try:
            with working_directory(directory):
                with open(file_name, "rb") as f:
                    return f.read()
        except OSError as e:
            raise FileReadError(path, e.strerror or str(e)) from e

    def exists(self, path: str) -> bool:
        try:
            fd = os.open(path, os.O_RDONLY)
        except (OSError, ValueError):
            return False
        os.close(fd)
        return True

    def create_directory(self, path: str) -> None:
        try:
            os.mkdir(path)
        except FileExistsError:
            logger.debug(f"Directory already exists: {path}")
        except OSError as e:
            raise DirectoryCreateError(path, e.strerror or str(e)) from e
