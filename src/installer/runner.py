"""Execution of a built installer invocation."""

from __future__ import annotations

import logging
import os
import subprocess
from dataclasses import dataclass
from typing import Mapping, Optional

from errors import ExecutableNotFoundError, InstallerExecutionError
from .invocation import InstallerInvocation

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InstallResult:
    """Captured outcome of a successful installer run."""

    exit_code: int
    stdout: str
    stderr: str


def run_installer(
    invocation: InstallerInvocation,
    env: Optional[Mapping[str, str]] = None,
) -> InstallResult:
    """Run the installer and wait for it to finish.

    The environment is passed through explicitly so that DOTNET_INSTALL_DIR
    and proxy variables reach the script.

    Raises:
        ExecutableNotFoundError: the executable disappeared before launch.
        InstallerExecutionError: the installer exited non-zero.
    """
    run_env = dict(os.environ if env is None else env)
    logger.info("Running: %s", " ".join(invocation.command))
    try:
        result = subprocess.run(  # noqa: S603
            invocation.command,
            env=run_env,
            capture_output=True,
            text=True,
            check=False,
        )
    except FileNotFoundError as exc:
        raise ExecutableNotFoundError(invocation.executable) from exc

    if result.stdout:
        logger.debug("Installer output:\n%s", result.stdout)
    if result.stderr:
        logger.debug("Installer stderr:\n%s", result.stderr)

    if result.returncode:
        raise InstallerExecutionError(result.returncode, result.stdout)

    return InstallResult(exit_code=result.returncode, stdout=result.stdout, stderr=result.stderr)
