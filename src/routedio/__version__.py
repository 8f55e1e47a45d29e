"""Version information for routed-io."""

from importlib.metadata import PackageNotFoundError, version


def _get_version() -> str:
    """Get version from installed package metadata."""
    try:
        return version("routed-io")
    except PackageNotFoundError:
        return "unknown"


__version__ = _get_version()
