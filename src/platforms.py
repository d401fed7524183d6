"""Host platform classification used to pick installer conventions."""

import platform as _platform
from enum import Enum
from typing import Optional


class Platform(Enum):
    """Operating-system families with distinct installer conventions."""

    WINDOWS = "windows"
    LINUX = "linux"
    MACOS = "macos"

    @property
    def is_windows(self) -> bool:
        return self is Platform.WINDOWS

    @property
    def is_linux(self) -> bool:
        return self is Platform.LINUX

    @property
    def channel_flag(self) -> str:
        return "-Channel" if self.is_windows else "--channel"

    @property
    def version_flag(self) -> str:
        return "-Version" if self.is_windows else "--version"

    @property
    def quality_flag(self) -> str:
        return "-Quality" if self.is_windows else "--quality"


_SYSTEM_MAPPINGS = {
    "Windows": Platform.WINDOWS,
    "Linux": Platform.LINUX,
    "Darwin": Platform.MACOS,
}


def detect_platform(system: Optional[str] = None) -> Platform:
    """Map platform.system() output to a Platform.

    Unknown POSIX systems are treated like macOS: POSIX flags and the
    script's own per-user install directory.
    """
    if system is None:
        system = _platform.system()
    return _SYSTEM_MAPPINGS.get(system, Platform.MACOS)
