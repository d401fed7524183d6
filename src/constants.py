"""Constants used in the project."""

import os
from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    INSTALL_ERROR = 1
    CONNECTION_ERROR = 2
    INVALID_INPUT = 3
    EXECUTABLE_NOT_FOUND = 4
    INSTALLER_FAILED = 5


class QualityLevels(Enum):
    """Build quality tiers recognized by the dotnet-install scripts.

    Args:
        Enum (string): Quality tier passed through to the installer.
    """

    DAILY = "daily"
    SIGNED = "signed"
    VALIDATED = "validated"
    PREVIEW = "preview"
    GA = "ga"


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    RELEASES_INDEX_URL = (
        "https://dotnetcli.blob.core.windows.net/dotnet/release-metadata/releases-index.json"
    )
    SUPPORTED_QUALITIES = [q.value for q in QualityLevels]
    SUPPORTED_SYNTAX = "A.B.C, A.B, A.B.x, A, A.x"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_FILE_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
    ENV_LOG_LEVEL = "SETUP_DOTNET_LOG_LEVEL"
    USER_AGENT = "setup-dotnet-cli"

    # HTTP tunables
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests
    HTTP_RETRY_MAX = 3
    HTTP_RETRY_BASE_DELAY_SEC = 0.3
    HTTP_RETRY_STATUS_CODES = (502, 503, 504)
    HTTP_CACHE_TTL_SEC = 300
    ENV_INDEX_URL = "SETUP_DOTNET_INDEX_URL"

    # Quality flags only apply to channel installs from this major onwards
    QUALITY_MIN_MAJOR = 6

    # Installer scripts
    SCRIPT_NAME_WINDOWS = "install-dotnet.ps1"
    SCRIPT_NAME_POSIX = "install-dotnet.sh"
    SCRIPT_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "externals")
    ENV_SCRIPT_DIR = "SETUP_DOTNET_SCRIPT_DIR"
    SCRIPT_DIR_HINT = (
        "Pass --script-dir or set SETUP_DOTNET_SCRIPT_DIR to the directory "
        "holding the install-dotnet scripts"
    )
    SCRIPT_MODE = 0o777

    # Windows script host
    WINDOWS_SHELLS = ["pwsh", "powershell"]
    WINDOWS_SHELL_OPTIONS = [
        "-NoLogo",
        "-Sta",
        "-NoProfile",
        "-NonInteractive",
        "-ExecutionPolicy",
        "Unrestricted",
        "-Command",
    ]

    # Installation roots
    INSTALL_DIR_LINUX = "/usr/share/dotnet"
    INSTALL_DIR_NAME = "dotnet"
    USER_INSTALL_DIR_NAME = ".dotnet"
    ENV_INSTALL_DIR = "DOTNET_INSTALL_DIR"
    ENV_PROGRAM_FILES = "PROGRAMFILES"
    ENV_HOME = "HOME"
    ENV_HTTPS_PROXY = "https_proxy"
    ENV_NO_PROXY = "no_proxy"
