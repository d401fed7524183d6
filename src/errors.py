"""Error types raised while resolving and installing .NET SDKs."""

from __future__ import annotations

from typing import Any, Dict, Optional

from constants import Constants, ExitCodes


class SetupDotnetError(Exception):
    """Base error class for setup-dotnet."""

    exit_code = ExitCodes.INSTALL_ERROR

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.details = details or {}


class InvalidSpecifierError(SetupDotnetError):
    """Version specifier does not follow the supported range grammar."""

    exit_code = ExitCodes.INVALID_INPUT

    def __init__(self, specifier: str):
        super().__init__(
            f"'dotnet-version' was supplied in invalid format: {specifier}! "
            f"Supported syntax: {Constants.SUPPORTED_SYNTAX}",
            details={"specifier": specifier},
        )
        self.specifier = specifier


class ChannelNotFoundError(SetupDotnetError):
    """Release index has no channel for the requested major version."""

    def __init__(self, version: str, index_url: str):
        super().__init__(
            f"Could not find info for version {version} at {index_url}",
            details={"version": version, "index_url": index_url},
        )
        self.version = version
        self.index_url = index_url


class TransportError(SetupDotnetError):
    """Release index could not be fetched or decoded."""

    exit_code = ExitCodes.CONNECTION_ERROR

    def __init__(self, message: str, url: str, attempts: int = 0):
        super().__init__(message, details={"url": url, "attempts": attempts})
        self.url = url
        self.attempts = attempts


class ExecutableNotFoundError(SetupDotnetError):
    """Script interpreter or installer script missing from the search path."""

    exit_code = ExitCodes.EXECUTABLE_NOT_FOUND

    def __init__(self, name: str, hint: Optional[str] = None):
        message = f"Unable to locate executable file: {name}"
        if hint:
            message = f"{message}. {hint}"
        super().__init__(message, details={"executable": name})
        self.name = name


class InstallerExecutionError(SetupDotnetError):
    """Installer process exited with a non-zero status."""

    exit_code = ExitCodes.INSTALLER_FAILED

    def __init__(self, exit_code: int, stdout: str):
        super().__init__(
            f"Failed to install dotnet {exit_code}. {stdout}",
            details={"exit_code": exit_code},
        )
        self.returncode = exit_code
        self.stdout = stdout


class QualityUnsupportedWarning(UserWarning):
    """Requested quality was dropped because the specifier cannot carry it."""

    def __init__(self, specifier: str, quality: str):
        super().__init__(
            "'dotnet-quality' input can be used only with .NET SDK version in "
            "A.B, A.B.x, A and A.x formats where the major tag is higher than "
            f"{Constants.QUALITY_MIN_MAJOR - 1}. You specified: {specifier}. "
            "'dotnet-quality' input is ignored."
        )
        self.specifier = specifier
        self.quality = quality
