"""
Runs the external download tool as a child process.

The child inherits stdout/stderr, so its output reaches the user as it is
produced and is never parsed here. Platform differences in exit status
reporting are kept inside the runner classes; callers only ever see an
InvocationResult.
"""

import os
import shutil
import subprocess
import logging
from typing import List, Optional

from models.core import ExternalInvocation, InvocationResult
from services.interfaces import ProcessRunnerInterface

logger = logging.getLogger(__name__)


class SubprocessRunner(ProcessRunnerInterface):
    """Blocking runner built on subprocess.run."""

    def __init__(self, tool_name: str = "yt-dlp"):
        self._tool_name = tool_name
        self.last_invocation: Optional[ExternalInvocation] = None

    @property
    def tool_name(self) -> str:
        return self._tool_name

    def resolve_executable(self) -> Optional[str]:
        """Full path of the tool on the search path, or None."""
        return shutil.which(self._tool_name)

    def is_available(self) -> bool:
        return self.resolve_executable() is not None

    def run(self, tokens: List[str]) -> InvocationResult:
        """
        Run the tool and block until it exits.

        There is no timeout: a hung child hangs the caller.

        Args:
            tokens: Arguments passed after the executable

        Returns:
            InvocationResult; exit_code is None when the process could not be started
        """
        invocation = ExternalInvocation(tokens=list(tokens))
        self.last_invocation = invocation

        executable = self.resolve_executable() or self._tool_name
        command = [executable, *invocation.tokens]
        logger.info(f"Running: {' '.join(command)}")

        try:
            completed = subprocess.run(command)
        except FileNotFoundError as e:
            logger.error(f"Executable not found: {executable}")
            return InvocationResult(
                success=False,
                launch_error=f"{self._tool_name} was not found: {e}"
            )
        except PermissionError as e:
            logger.error(f"Permission denied launching {executable}")
            return InvocationResult(
                success=False,
                launch_error=f"Permission denied running {self._tool_name}: {e}"
            )
        except OSError as e:
            logger.error(f"Could not launch {executable}: {e}")
            return InvocationResult(
                success=False,
                launch_error=f"Could not start {self._tool_name}: {e}"
            )

        exit_code = self._normalize_exit_code(completed.returncode)
        invocation.exit_code = exit_code

        if exit_code == 0:
            logger.info(f"{self._tool_name} finished successfully")
        else:
            logger.warning(f"{self._tool_name} exited with code {exit_code}")

        return InvocationResult(success=exit_code == 0, exit_code=exit_code)

    def _normalize_exit_code(self, returncode: int) -> int:
        return returncode


class PosixProcessRunner(SubprocessRunner):
    """Runner for POSIX systems."""

    def _normalize_exit_code(self, returncode: int) -> int:
        # Killed by signal N is reported as -N; use the shell's 128 + N
        if returncode < 0:
            return 128 - returncode
        return returncode


class WindowsProcessRunner(SubprocessRunner):
    """Runner for Windows."""

    def _normalize_exit_code(self, returncode: int) -> int:
        # NTSTATUS codes such as 0xC000013A come back unsigned
        if returncode > 0x7FFFFFFF:
            return returncode - 0x100000000
        return returncode


def create_process_runner(tool_name: str = "yt-dlp", platform_name: Optional[str] = None) -> SubprocessRunner:
    """
    Pick the runner implementation for the current platform.

    Args:
        tool_name: Name of the external executable
        platform_name: Value of os.name to select for; defaults to the running platform

    Returns:
        Runner instance
    """
    platform_name = platform_name or os.name
    if platform_name == "nt":
        return WindowsProcessRunner(tool_name)
    return PosixProcessRunner(tool_name)
