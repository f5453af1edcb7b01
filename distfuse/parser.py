"""Command-line entry point: parsing arguments and running package operations."""

from __future__ import annotations

import shlex
import subprocess
import sys
from collections.abc import Sequence

from .detector import detect_available_managers
from .optimizer import find_best_manager
from .ui import TerminalUI

VERSION = "1.0.0"
VALID_COMMANDS = "install, remove"

_DEFAULT_FAILURE = "Package operation failed - check your internet connection"

_TEMPLATES: dict[str, dict[str, str]] = {
    "install": {
        "apt": "DEBIAN_FRONTEND=noninteractive apt-get install -y {package}",
        "dnf": "dnf install -y {package}",
        "pacman": "pacman -S --noconfirm {package}",
        "flatpak": "flatpak install -y flathub {package}",
    },
    "remove": {
        "apt": "DEBIAN_FRONTEND=noninteractive apt-get remove -y {package}",
        "dnf": "dnf remove -y {package}",
        "pacman": "pacman -R --noconfirm {package}",
        "flatpak": "flatpak uninstall -y {package}",
    },
}


def build_command(manager: str, action: str, package: str) -> str:
    """Return the shell command that performs ``action`` on ``package``.

    Raises ``ValueError`` for an action other than install or remove.
    """
    templates = _TEMPLATES.get(action)
    if templates is None:
        raise ValueError(f"unknown action: {action!r}")
    quoted = shlex.quote(package)
    template = templates.get(manager)
    if template is not None:
        return template.format(package=quoted)
    return f"{shlex.quote(manager)} {action} -y {quoted}"


def diagnose_failure(output: str) -> str:
    """Return a short explanation of a failed run from its combined output."""
    for line in output.splitlines():
        if "Permission denied" in line or "permission denied" in line:
            return "Permission denied - please run with sudo"
        if "Unable to locate package" in line or "not found" in line:
            return "Package not found in repositories"
        if "dpkg: error" in line or "lock" in line:
            return "Package manager is busy - please wait and try again"
    return _DEFAULT_FAILURE


def execute_package_command(
    manager: str, action: str, package: str, ui: TerminalUI | None = None
) -> int:
    """Run the package operation, report the outcome and return the exit status."""
    if ui is None:
        ui = TerminalUI()
    command = build_command(manager, action, package)
    try:
        completed = subprocess.run(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.STDOUT,
            text=True,
            errors="replace",
            check=False,
        )
    except OSError:
        ui.show_error("Failed to run the package manager")
        return -1

    if completed.returncode != 0:
        ui.show_error(diagnose_failure(completed.stdout or ""))
    else:
        ui.show_success("Package operation completed successfully!")
    return completed.returncode


def _run_operation(action: str, package_name: str, ui: TerminalUI) -> int:
    out = ui.stream
    ui.set_package_status(package_name, "Detecting...")
    ui.draw_ui()

    managers = detect_available_managers()
    if not managers:
        ui.show_error("No available package managers found!")
        return 1

    best = find_best_manager(package_name, managers)
    if best is None:
        ui.show_error("Package not found in any available manager")
        return 1

    ui.set_package_status(package_name, best.manager_name)
    ui.draw_ui()

    if action == "install":
        print(
            f"🚀 Installing '{package_name}' using {best.manager_name} "
            f"(latency: {best.latency_ms:.2f}ms)",
            file=out,
        )
        ui.update_download_progress()
        ui.update_install_progress()
    else:
        print(f"🗑️  Removing '{package_name}' using {best.manager_name}", file=out)
        ui.update_remove_progress()

    result = execute_package_command(best.manager_name, action, package_name, ui)
    ui.finish()
    return 0 if result == 0 else 1


def subcommand_check(
    subcommand: str, package_name: str | None, ui: TerminalUI | None = None
) -> int:
    """Carry out a subcommand; return 0 on success and 1 otherwise."""
    if subcommand not in ("install", "remove"):
        return 1
    if ui is None:
        ui = TerminalUI()
    if package_name is None:
        print(f"❌ Package name required for '{subcommand}' command.", file=ui.stream)
        return 1
    return _run_operation(subcommand, package_name, ui)


def parse_arguments(argv: Sequence[str], ui: TerminalUI | None = None) -> int:
    """Dispatch the arguments (program name excluded) and return an exit status."""
    if ui is None:
        ui = TerminalUI()
    out = ui.stream
    if not argv:
        print("❌ Not enough parameters entered.", file=out)
        print("💡 Usage: distfuse <command> [args...]", file=out)
        return 1

    subcommand = argv[0]
    package_name = argv[1] if len(argv) > 1 else None

    if subcommand_check(subcommand, package_name, ui) != 0:
        print(
            f"❌ Unidentified subcommand or incomplete argument: {subcommand}",
            file=out,
        )
        print(f"💡 Valid subcommands: {VALID_COMMANDS}", file=out)
        return 1
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry point."""
    args = list(sys.argv[1:] if argv is None else argv)
    if args == ["--version"]:
        print(VERSION)
        return 0
    return parse_arguments(args, TerminalUI())


if __name__ == "__main__":
    sys.exit(main())