"""
Tests for the routed-io exception hierarchy.
"""

import pytest

from routedio.exceptions import (
    ChannelError,
    DirectoryCreateError,
    FileReadError,
    RoutedIOError,
    UnknownBackendError,
)


class TestExceptionHierarchy:
    """Tests for exception attributes and messages."""

    @pytest.mark.parametrize(
        "exception_type,expected_message",
        [
            (FileReadError, "Couldn't open file 'C:\\a.txt' for reading: denied"),
            (ChannelError, "Device channel failed on 'C:\\a.txt': denied"),
            (UnknownBackendError, "Unknown backend for 'C:\\a.txt': denied"),
            (DirectoryCreateError, "Cannot create directory 'C:\\a.txt' (denied)"),
        ],
    )
    def test_message_and_attributes(self, exception_type, expected_message):
        error = exception_type("C:\\a.txt", "denied")
        assert isinstance(error, RoutedIOError)
        assert error.path == "C:\\a.txt"
        assert error.reason == "denied"
        assert str(error) == expected_message

    def test_base_message(self):
        assert str(RoutedIOError("x", "y")) == "'x': y"

    def test_catchable_as_base(self):
        with pytest.raises(RoutedIOError):
            raise ChannelError("\\Storage", "lost")
