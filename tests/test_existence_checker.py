"""
Tests for ExistenceChecker.
"""

from pytest_mock import MockerFixture

from routedio.common import Backend
from routedio.device import DeviceBackend
from routedio.existence_checker import ExistenceChecker
from routedio.filesystem import LocalBackend


class TestExistenceChecker:
    """Tests for ExistenceChecker.exists()."""

    def test_local_file(self, sample_tree):
        checker = ExistenceChecker({Backend.LOCAL: LocalBackend()})
        assert checker.exists(str(sample_tree["cfg"] / "file.txt")) is True
        assert checker.exists(str(sample_tree["cfg"] / "nope.txt")) is False

    def test_device_file(self, fake_channel):
        fake_channel.files["\\Storage\\out.txt"] = b"x"
        checker = ExistenceChecker({Backend.REMOTE_DEVICE: DeviceBackend(fake_channel)})
        assert checker.exists("\\Storage\\out.txt") is True
        assert checker.exists("\\Storage\\other.txt") is False
        assert fake_channel.calls == [
            ("file_exists", "\\Storage\\out.txt"),
            ("file_exists", "\\Storage\\other.txt"),
        ]

    def test_disconnected_device_is_false(self, fake_channel):
        fake_channel.disconnected = True
        fake_channel.files["\\Storage\\out.txt"] = b"x"
        checker = ExistenceChecker({Backend.REMOTE_DEVICE: DeviceBackend(fake_channel)})
        assert checker.exists("\\Storage\\out.txt") is False

    def test_network_share_uses_its_backend(self, mocker: MockerFixture):
        share = mocker.Mock()
        share.exists.return_value = True
        checker = ExistenceChecker({Backend.NETWORK_SHARE: share})
        assert checker.exists("\\\\PC1\\share\\file.txt") is True
        share.exists.assert_called_once_with("\\\\PC1\\share\\file.txt")

    def test_unknown_backend_is_false(self, mocker: MockerFixture):
        checker = ExistenceChecker({Backend.LOCAL: mocker.Mock()})
        assert checker.exists("\\Storage\\out.txt") is False

    def test_empty_path_is_false(self):
        checker = ExistenceChecker({Backend.LOCAL: LocalBackend()})
        assert checker.exists("") is False
