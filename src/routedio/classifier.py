"""Path classification and segment walking for routed-io."""

from .common import (
    ALTERNATE_SEPARATOR,
    DEFAULT_SEPARATOR,
    NETWORK_SHARE_ROOT_SEGMENTS,
    Backend,
    Classification,
    FileNameSplit,
    PrefixList,
)


def classify(path: str, separator: str = DEFAULT_SEPARATOR) -> Classification:
    """
    Decide which backend owns a path from its prefix alone.

    Two leading separators of either kind (``\\`` or ``/``) mark a network
    share. A device path needs exactly one leading primary separator, so POSIX
    absolute paths (``/tmp/file``) stay local when the separator is a backslash.

    Args:
        path: Path string in the host's separator convention
        separator: Primary segment separator (default: backslash)

    Returns:
        The backend classification and the number of root segments to skip
    """
    separators = separator + ALTERNATE_SEPARATOR
    if len(path) >= 2 and path[0] in separators and path[1] in separators:
        return Classification(Backend.NETWORK_SHARE, NETWORK_SHARE_ROOT_SEGMENTS)
    if len(path) > 2 and path[0] == separator:
        return Classification(Backend.REMOTE_DEVICE)
    return Classification(Backend.LOCAL)


def _find_separator(path: str, start: int, separators: str) -> int:
    """Return the index of the next separator at or after start, or -1."""
    for index in range(start, len(path)):
        if path[index] in separators:
            return index
    return -1


def directory_prefixes(
    path: str,
    classification: Classification,
    separator: str = DEFAULT_SEPARATOR,
) -> PrefixList:
    """
    List the growing prefixes a directory walk has to create, shortest first.

    Every prefix ends with the separator that closed it, except the last one,
    which is the full path when it has no trailing separator. The leading
    separators and the root-skip segments form one prefix that is never
    returned.

    Args:
        path: Directory path to walk
        classification: Result of classify() for the same path
        separator: Primary segment separator; ``/`` is always accepted too

    Returns:
        Prefixes to pass to create-directory, in order
    """
    separators = separator + ALTERNATE_SEPARATOR
    pos = 0
    while pos < len(path) and path[pos] in separators:
        pos += 1

    for _ in range(classification.root_skip_segments):
        found = _find_separator(path, pos, separators)
        if found == -1:
            # Nothing beyond the unsplittable root
            return []
        pos = found + 1

    prefixes: PrefixList = []
    while pos < len(path):
        found = _find_separator(path, pos, separators)
        if found == -1:
            prefixes.append(path)
            break
        if found > pos:
            prefixes.append(path[: found + 1])
        pos = found + 1
    return prefixes


def split_file_path(path: str, separator: str = DEFAULT_SEPARATOR) -> FileNameSplit:
    """
    Split a file path into its directory part and file name.

    The directory part keeps its trailing separator. A path without any
    separator has an empty directory part.
    """
    pos = max(path.rfind(separator), path.rfind(ALTERNATE_SEPARATOR))
    if pos == -1:
        return "", path
    return path[: pos + 1], path[pos + 1 :]
