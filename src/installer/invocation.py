"""Assembly of install-dotnet script invocations.

Windows runs install-dotnet.ps1 through PowerShell with the whole script
call passed as a single -Command string. POSIX runs install-dotnet.sh
directly with one argv entry per token.
"""

from __future__ import annotations

import logging
import os
import shutil
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Mapping, Optional, Tuple, Union

from constants import Constants, QualityLevels
from errors import ExecutableNotFoundError, QualityUnsupportedWarning
from platforms import Platform
from versioning.models import ResolvedArgument
from .paths import script_path as default_script_path
from .paths import windows_install_dir

logger = logging.getLogger(__name__)

WhichFunc = Callable[[str], Optional[str]]


@dataclass(frozen=True)
class ProxySettings:
    """Proxy values forwarded to the Windows installer."""

    https_proxy: Optional[str] = None
    no_proxy: Optional[str] = None

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "ProxySettings":
        env = os.environ if env is None else env
        return cls(
            https_proxy=env.get(Constants.ENV_HTTPS_PROXY),
            no_proxy=env.get(Constants.ENV_NO_PROXY),
        )


@dataclass(frozen=True)
class InstallerInvocation:
    """A fully built installer call, ready to hand to the process runner."""

    executable: str
    arguments: Tuple[str, ...]
    platform: Platform
    script: str
    warnings: Tuple[str, ...] = field(default_factory=tuple)

    @property
    def command(self) -> List[str]:
        return [self.executable, *self.arguments]

    def to_dict(self) -> Dict[str, object]:
        return {
            "executable": self.executable,
            "arguments": list(self.arguments),
            "platform": self.platform.value,
            "script": self.script,
            "warnings": list(self.warnings),
        }


def powershell_quote(value: str) -> str:
    """Wrap value in single quotes, doubling embedded single quotes."""
    return "'" + value.replace("'", "''") + "'"


def _quality_value(quality: Union[QualityLevels, str, None]) -> Optional[str]:
    if isinstance(quality, QualityLevels):
        return quality.value
    return quality or None


def _version_arguments(
    resolved: ResolvedArgument,
    quality: Optional[str],
    platform: Platform,
    specifier: str,
    warnings: List[str],
) -> List[str]:
    """Version/channel flag plus the quality flag when it applies."""
    arguments: List[str] = []
    if resolved.is_resolved:
        arguments += [resolved.for_platform(platform).flag, resolved.value]

    if quality:
        if resolved.supports_quality:
            arguments += [platform.quality_flag, quality]
        else:
            warning = QualityUnsupportedWarning(specifier, quality)
            logger.warning("%s", warning)
            warnings.append(str(warning))
    return arguments


def _build_windows(
    script: str,
    version_args: List[str],
    proxy: ProxySettings,
    env: Mapping[str, str],
    which: WhichFunc,
) -> Tuple[str, List[str]]:
    script_arguments = ["&", powershell_quote(script)]
    script_arguments += version_args

    if proxy.https_proxy is not None:
        script_arguments.append(f"-ProxyAddress {powershell_quote(proxy.https_proxy)}")
    # Not currently an option of the action, only forwarded from the environment
    if proxy.no_proxy is not None:
        script_arguments.append(f"-ProxyBypassList {powershell_quote(proxy.no_proxy)}")

    script_arguments.append(f"-InstallDir {powershell_quote(windows_install_dir(env))}")

    executable = None
    for shell in Constants.WINDOWS_SHELLS:
        executable = which(shell)
        if executable:
            break
    if not executable:
        raise ExecutableNotFoundError(Constants.WINDOWS_SHELLS[-1])

    return executable, [*Constants.WINDOWS_SHELL_OPTIONS, " ".join(script_arguments)]


def _build_posix(
    script: str,
    version_args: List[str],
    platform: Platform,
    which: WhichFunc,
) -> Tuple[str, List[str]]:
    try:
        os.chmod(script, Constants.SCRIPT_MODE)
    except FileNotFoundError as exc:
        raise ExecutableNotFoundError(script, Constants.SCRIPT_DIR_HINT) from exc
    except OSError as exc:
        # Another user's script may already be executable; which() decides
        logger.warning("Could not mark %s executable: %s", script, exc)

    executable = which(script)
    if not executable:
        raise ExecutableNotFoundError(script, Constants.SCRIPT_DIR_HINT)

    arguments = list(version_args)
    if platform.is_linux:
        arguments += ["--install-dir", Constants.INSTALL_DIR_LINUX]
    return executable, arguments


def build_invocation(
    resolved: ResolvedArgument,
    quality: Union[QualityLevels, str, None] = None,
    proxy: Optional[ProxySettings] = None,
    platform: Platform = Platform.LINUX,
    *,
    specifier: Optional[str] = None,
    script_dir: Optional[str] = None,
    env: Optional[Mapping[str, str]] = None,
    which: WhichFunc = shutil.which,
) -> InstallerInvocation:
    """Build the installer invocation for a resolved specifier.

    Args:
        resolved: Output of DotnetVersionResolver; UNRESOLVED adds no flag.
        quality: Requested quality tier, dropped with a warning when the
            resolved argument does not support it.
        proxy: Proxy settings for Windows; read from env when omitted.
        platform: Target platform conventions.
        specifier: Original user input, used in the warning text.
        script_dir: Directory holding install-dotnet.ps1/.sh.
        env: Environment mapping consulted for proxy and install paths.
        which: Executable lookup, shutil.which by default.

    Raises:
        ExecutableNotFoundError: no PowerShell on Windows, or the POSIX
            script is missing or not executable.
    """
    env = os.environ if env is None else env
    script = default_script_path(platform, script_dir)
    warnings: List[str] = []
    version_args = _version_arguments(
        resolved,
        _quality_value(quality),
        platform,
        specifier if specifier is not None else resolved.value,
        warnings,
    )

    if platform.is_windows:
        executable, arguments = _build_windows(
            script, version_args, proxy or ProxySettings.from_env(env), env, which
        )
    else:
        executable, arguments = _build_posix(script, version_args, platform, which)

    invocation = InstallerInvocation(
        executable=executable,
        arguments=tuple(arguments),
        platform=platform,
        script=script,
        warnings=tuple(warnings),
    )
    logger.debug("Installer invocation: %s", invocation.command)
    return invocation
