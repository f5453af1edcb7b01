"""Running shell commands quietly and reporting their outcome briefly."""

from __future__ import annotations

import shutil
import subprocess
from dataclasses import dataclass

from .ui import TerminalUI


@dataclass(frozen=True)
class CommandResult:
    """Exit code and captured output of a finished command."""

    exit_code: int
    stdout: str
    stderr: str


def execute_command_silent(command: str) -> CommandResult:
    """Run ``command`` through the shell, capturing stdout and stderr apart.

    Raises ``OSError`` if the shell cannot be started.
    """
    completed = subprocess.run(
        command,
        shell=True,
        stdout=subprocess.PIPE,
        stderr=subprocess.PIPE,
        text=True,
        errors="replace",
        check=False,
    )
    return CommandResult(
        exit_code=completed.returncode,
        stdout=completed.stdout or "",
        stderr=completed.stderr or "",
    )


def _summarise_stderr(stderr: str) -> str | None:
    if "Permission denied" in stderr:
        return "Permission denied - try running with sudo"
    if "not found" in stderr:
        return "Package not found in repositories"
    if "lock" in stderr:
        return "Package manager is locked - another process may be running"
    return next((line for line in stderr.split("\n") if line), None)


def execute_with_custom_log(
    command: str, operation: str, package: str, ui: TerminalUI | None = None
) -> int:
    """Run ``command`` silently, print a one-line verdict and return its exit code.

    Returns -1 when the command could not be started at all.
    """
    if ui is None:
        ui = TerminalUI()
    out = ui.stream
    print(f"🔧 Executing: {operation} {package}", file=out)

    try:
        result = execute_command_silent(command)
    except OSError:
        ui.show_error("Failed to execute command")
        return -1

    if result.exit_code == 0:
        print(f"✅ {operation} completed successfully for package: {package}", file=out)
    else:
        print(
            f"❌ {operation} failed for package: {package} "
            f"(exit code: {result.exit_code})",
            file=out,
        )
        if result.stderr:
            summary = _summarise_stderr(result.stderr)
            if summary is not None:
                ui.show_error(summary)
    return result.exit_code


def command_exists(command: str) -> bool:
    """Return whether ``command`` can be found on the search path."""
    return shutil.which(command) is not None