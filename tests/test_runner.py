"""Tests for running the installer process."""

import subprocess
from unittest.mock import patch

import pytest

from errors import ExecutableNotFoundError, InstallerExecutionError
from installer.invocation import InstallerInvocation
from installer.runner import run_installer
from platforms import Platform


@pytest.fixture
def invocation():
    return InstallerInvocation(
        executable="/opt/externals/install-dotnet.sh",
        arguments=("--channel", "8.0", "--install-dir", "/usr/share/dotnet"),
        platform=Platform.LINUX,
        script="/opt/externals/install-dotnet.sh",
    )


class TestRunInstaller:
    """Tests for run_installer."""

    @patch("installer.runner.subprocess.run")
    def test_success(self, mock_run, invocation):
        mock_run.return_value = subprocess.CompletedProcess(invocation.command, 0, "installed\n", "")

        result = run_installer(invocation, env={"DOTNET_INSTALL_DIR": "/x"})

        assert result.exit_code == 0
        assert result.stdout == "installed\n"
        args, kwargs = mock_run.call_args
        assert args[0] == [
            "/opt/externals/install-dotnet.sh", "--channel", "8.0", "--install-dir", "/usr/share/dotnet",
        ]
        assert kwargs["env"] == {"DOTNET_INSTALL_DIR": "/x"}
        assert kwargs["check"] is False

    @patch("installer.runner.subprocess.run")
    def test_non_zero_exit(self, mock_run, invocation):
        mock_run.return_value = subprocess.CompletedProcess(invocation.command, 1, "dotnet-install: Could not find", "")

        with pytest.raises(InstallerExecutionError) as exc_info:
            run_installer(invocation, env={})

        assert exc_info.value.returncode == 1
        assert str(exc_info.value) == "Failed to install dotnet 1. dotnet-install: Could not find"

    @patch("installer.runner.subprocess.run")
    def test_executable_vanished(self, mock_run, invocation):
        mock_run.side_effect = FileNotFoundError(invocation.executable)
        with pytest.raises(ExecutableNotFoundError):
            run_installer(invocation, env={})

    def test_real_process(self, tmp_path):
        script = tmp_path / "fake-install.sh"
        script.write_text("#!/bin/sh\necho \"args: $*\"\nexit 3\n", encoding="utf-8")
        script.chmod(0o755)
        invocation = InstallerInvocation(
            executable=str(script),
            arguments=("--version", "6.0.100"),
            platform=Platform.LINUX,
            script=str(script),
        )

        with pytest.raises(InstallerExecutionError) as exc_info:
            run_installer(invocation)

        assert exc_info.value.returncode == 3
        assert "args: --version 6.0.100" in exc_info.value.stdout
