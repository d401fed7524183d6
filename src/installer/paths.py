"""Installation directories and installer script locations per platform.

Windows paths are built with ntpath and POSIX paths with posixpath so the
result does not depend on the host the CLI runs on.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from typing import Mapping, Optional

from constants import Constants
from platforms import Platform


def windows_install_dir(env: Optional[Mapping[str, str]] = None) -> str:
    """Return <PROGRAMFILES>\\dotnet."""
    env = os.environ if env is None else env
    return ntpath.join(env.get(Constants.ENV_PROGRAM_FILES, ""), Constants.INSTALL_DIR_NAME)


def user_install_dir(env: Optional[Mapping[str, str]] = None) -> str:
    """Return <HOME>/.dotnet, the default of install-dotnet.sh."""
    env = os.environ if env is None else env
    return posixpath.join(env.get(Constants.ENV_HOME, ""), Constants.USER_INSTALL_DIR_NAME)


def resolve_install_root(platform: Platform, env: Optional[Mapping[str, str]] = None) -> str:
    """Return the directory the SDK ends up in.

    DOTNET_INSTALL_DIR wins when set; otherwise Windows installs under
    Program Files, Linux under /usr/share/dotnet and everything else in the
    per-user default.
    """
    env = os.environ if env is None else env
    override = env.get(Constants.ENV_INSTALL_DIR)
    if override:
        return override
    if platform.is_windows:
        return windows_install_dir(env)
    if platform.is_linux:
        return Constants.INSTALL_DIR_LINUX
    return user_install_dir(env)


def script_name(platform: Platform) -> str:
    return Constants.SCRIPT_NAME_WINDOWS if platform.is_windows else Constants.SCRIPT_NAME_POSIX


def script_path(platform: Platform, script_dir: Optional[str] = None) -> str:
    """Return the installer script for platform inside script_dir."""
    return os.path.join(script_dir or Constants.SCRIPT_DIR, script_name(platform))
