"""Tests for installation root and script path resolution."""

import os

import pytest

from constants import Constants
from installer.paths import resolve_install_root, script_path
from platforms import Platform, detect_platform


class TestResolveInstallRoot:
    """Tests for resolve_install_root."""

    def test_override_wins(self):
        env = {"DOTNET_INSTALL_DIR": "/custom/dotnet", "PROGRAMFILES": "C:\\Program Files"}
        for platform in Platform:
            assert resolve_install_root(platform, env) == "/custom/dotnet"

    def test_windows(self):
        assert resolve_install_root(Platform.WINDOWS, {"PROGRAMFILES": "C:\\Program Files"}) == "C:\\Program Files\\dotnet"

    def test_linux(self):
        assert resolve_install_root(Platform.LINUX, {"HOME": "/home/u"}) == "/usr/share/dotnet"

    def test_macos_uses_home(self):
        assert resolve_install_root(Platform.MACOS, {"HOME": "/Users/u"}) == "/Users/u/.dotnet"


class TestScriptPath:
    """Tests for script selection."""

    def test_windows_script(self):
        assert script_path(Platform.WINDOWS, "/s") == os.path.join("/s", "install-dotnet.ps1")

    @pytest.mark.parametrize("platform", [Platform.LINUX, Platform.MACOS])
    def test_posix_script(self, platform):
        assert script_path(platform, "/s") == os.path.join("/s", "install-dotnet.sh")

    def test_default_dir_follows_constants(self):
        Constants.SCRIPT_DIR = "/configured"
        assert script_path(Platform.LINUX) == os.path.join("/configured", "install-dotnet.sh")


class TestDetectPlatform:
    """Tests for host classification."""

    @pytest.mark.parametrize(
        "system,expected",
        [("Windows", Platform.WINDOWS), ("Linux", Platform.LINUX), ("Darwin", Platform.MACOS), ("FreeBSD", Platform.MACOS)],
    )
    def test_mapping(self, system, expected):
        assert detect_platform(system) is expected
