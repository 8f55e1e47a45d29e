"""CLI implementation for routed-io."""

import argparse
import logging
import sys
from pathlib import Path

from .__version__ import __version__
from .common import DEFAULT_ADB_EXECUTABLE, DEFAULT_TIMEOUT
from .device import AdbChannel
from .exceptions import RoutedIOError
from .router import PathRouter

logger = logging.getLogger(__name__)

OPERATION_FLAGS = ("read", "exists", "mkdir", "classify")


def _validate_mutually_exclusive_args(args: argparse.Namespace) -> None:
    """Validate that exactly one operation was requested."""
    selected = [name for name in OPERATION_FLAGS if getattr(args, name) is not None]
    if not selected:
        print("Error: one of --read, --exists, --mkdir or --classify is required")
        raise SystemExit(1)
    if len(selected) > 1:
        flags = ", ".join(f"--{name}" for name in selected)
        print(f"Error: {flags} cannot be used together")
        raise SystemExit(1)
    if args.output and args.read is None:
        print("Error: --output can only be used with --read")
        raise SystemExit(1)


def parse_arguments() -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Read, check or create files on the local filesystem or a paired device."
    )
    parser.add_argument(
        "--read",
        "-r",
        metavar="PATH",
        help="Read a file and write its bytes to stdout (or --output)",
    )
    parser.add_argument(
        "--exists",
        "-e",
        metavar="PATH",
        help="Check whether a file exists",
    )
    parser.add_argument(
        "--mkdir",
        "-m",
        metavar="PATH",
        help="Create a directory and all of its parents",
    )
    parser.add_argument(
        "--classify",
        "-c",
        metavar="PATH",
        help="Show which backend a path is routed to",
    )
    parser.add_argument(
        "--output",
        "-o",
        help="Local file to write --read contents to (default: stdout)",
    )
    parser.add_argument(
        "--serial",
        "-s",
        help="Serial number of the device to use when several are attached",
    )
    parser.add_argument(
        "--adb",
        default=DEFAULT_ADB_EXECUTABLE,
        help=f"adb executable to use for device paths (default: {DEFAULT_ADB_EXECUTABLE})",
    )
    parser.add_argument(
        "--timeout",
        type=int,
        default=DEFAULT_TIMEOUT,
        help=f"Device command timeout in seconds (default: {DEFAULT_TIMEOUT})",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args()
    _validate_mutually_exclusive_args(args)
    return args


def setup_logging(debug: bool) -> None:
    """Set up logging based on debug flag."""
    log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        format="%(message)s",
    )

    # For pytest compatibility, also ensure the root logger has the right level
    logging.getLogger().setLevel(log_level)

    if debug:
        logger.debug("Debug logging enabled")


def _handle_read_operation(router: PathRouter, path: str, output: str | None) -> None:
    """Handle the --read operation."""
    data = router.open_for_read(path)
    if output:
        Path(output).expanduser().write_bytes(data)
        logger.info(f"Wrote {len(data)} bytes to {output}")
        print("Success")
    else:
        sys.stdout.buffer.write(data)
        sys.stdout.flush()


def _handle_exists_operation(router: PathRouter, path: str) -> None:
    """Handle the --exists operation."""
    if router.exists(path):
        print(f"{path}: exists")
    else:
        print(f"{path}: not found")
    print("Success")


def _handle_mkdir_operation(router: PathRouter, path: str) -> None:
    """Handle the --mkdir operation."""
    logger.info(f"Creating directory: {path}")
    router.ensure_directory(path)
    print("Success")


def _handle_classify_operation(router: PathRouter, path: str) -> None:
    """Handle the --classify operation."""
    classification = router.classify(path)
    print(f"{path}: {classification.backend} (root skip: {classification.root_skip_segments})")
    print("Success")


def main() -> None:
    """CLI entry point."""
    args = parse_arguments()
    setup_logging(args.debug)

    channel = AdbChannel(serial=args.serial, executable=args.adb, timeout=args.timeout)
    router = PathRouter(channel=channel)

    try:
        if args.read is not None:
            _handle_read_operation(router, args.read, args.output)
        elif args.exists is not None:
            _handle_exists_operation(router, args.exists)
        elif args.mkdir is not None:
            _handle_mkdir_operation(router, args.mkdir)
        else:
            _handle_classify_operation(router, args.classify)
    except RoutedIOError as e:
        print(f"Error: {e}")
        raise SystemExit(1) from e
    except OSError as e:
        print(f"Error: {e}")
        raise SystemExit(1) from e
