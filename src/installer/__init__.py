"""Building and running install-dotnet script invocations."""

from .invocation import InstallerInvocation, ProxySettings, build_invocation
from .paths import resolve_install_root
from .runner import InstallResult, run_installer

__all__ = [
    "InstallerInvocation",
    "ProxySettings",
    "build_invocation",
    "resolve_install_root",
    "InstallResult",
    "run_installer",
]
