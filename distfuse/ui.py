"""Full-screen terminal progress display."""

from __future__ import annotations

import os
import sys
import time
from collections.abc import Callable
from typing import TextIO

RESET = "\033[0m"
BOLD = "\033[1m"
DIM = "\033[2m"
CYAN = "\033[96m"
GREEN = "\033[92m"
YELLOW = "\033[93m"
BLUE = "\033[94m"
MAGENTA = "\033[95m"
RED = "\033[91m"
WHITE = "\033[97m"

CLEAR_SCREEN = "\033[2J\033[H"
HIDE_CURSOR = "\033[?25l"
SHOW_CURSOR = "\033[?25h"

SPINNER = ("⠋", "⠙", "⠹", "⠸", "⠼", "⠴", "⠦", "⠧", "⠇", "⠏")
PROGRESS_CHARS = ("▁", "▂", "▃", "▄", "▅", "▆", "▇", "█")

TITLE = "🚀 DISTFUSE - Universal Package Manager"
MIN_WIDTH = 60
_FIELD_LIMIT = 255


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


class TerminalUI:
    """Terminal screen showing a package, its manager, progress and status."""

    def __init__(
        self,
        stream: TextIO | None = None,
        sleep: Callable[[float], None] | None = None,
    ) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.sleep = sleep if sleep is not None else time.sleep
        self.width = 80
        self.height = 24
        self.progress = 0
        self.package = ""
        self.manager = ""
        self.status = "Ready"
        self.frame = 0

    def _write(self, text: str) -> None:
        self.stream.write(text)

    def _flush(self) -> None:
        self.stream.flush()

    def get_terminal_size(self) -> tuple[int, int]:
        """Refresh the stored terminal size and return ``(width, height)``."""
        try:
            size = os.get_terminal_size(self.stream.fileno())
        except (OSError, ValueError, AttributeError):
            pass
        else:
            self.width, self.height = size.columns, size.lines
        self.width = max(self.width, MIN_WIDTH)
        return self.width, self.height

    def clean_terminal(self) -> None:
        self._write(CLEAR_SCREEN)
        self._flush()

    def hide_cursor(self) -> None:
        self._write(HIDE_CURSOR)
        self._flush()

    def show_cursor(self) -> None:
        self._write(SHOW_CURSOR)
        self._flush()

    def render_header(self) -> str:
        inner = self.width - 2
        title_len = _byte_len(TITLE)
        padding = (inner - title_len) // 2
        trailing = max(inner - padding - title_len, 0)
        return (
            BOLD + CYAN + "╭" + "─" * inner + "╮\n"
            + "│" + " " * max(padding, 0)
            + BOLD + WHITE + "🚀 DISTFUSE" + CYAN + " - Universal Package Manager"
            + " " * trailing + "│\n"
            + "╰" + "─" * inner + "╯" + RESET + "\n"
        )

    def render_package_card(self) -> str:
        if not self.package:
            return ""
        rule = "─" * (self.width - 2)
        return (
            DIM + "┌" + rule + "┐" + RESET + "\n"
            + DIM + "│" + RESET + " " + BOLD + GREEN + "📦 Package: " + RESET + WHITE
            + self.package + "\n"
            + DIM + "│" + RESET + " " + BOLD + BLUE + "⚡ Manager: " + RESET + WHITE
            + self.manager + "\n"
            + DIM + "└" + rule + "┘" + RESET + "\n"
        )

    def render_progress_bar(self) -> str:
        bar_width = max(self.width - 20, 20)
        scaled = self.progress * bar_width
        filled = scaled // 100
        partial = min((scaled % 100) // 12, len(PROGRESS_CHARS) - 1)

        parts = [BOLD + YELLOW + "Progress " + RESET + "["]
        parts.append((GREEN + "█" + RESET) * filled)
        if filled < bar_width and partial > 0:
            parts.append(YELLOW + PROGRESS_CHARS[partial] + RESET)
            filled += 1
        parts.append((DIM + "░" + RESET) * max(bar_width - filled, 0))
        parts.append("] " + BOLD + f"{self.progress:3d}%" + RESET + "\n")
        return "".join(parts)

    def render_status(self) -> str:
        used = _byte_len(self.status) + 9
        return (
            BOLD + MAGENTA + SPINNER[self.frame % len(SPINNER)] + " " + RESET
            + WHITE + "Status: " + RESET + self.status
            + " " * max(self.width - used, 0) + "\n"
        )

    def render(self) -> str:
        """Return the whole screen body as text."""
        return (
            self.render_header() + "\n"
            + self.render_package_card() + "\n"
            + self.render_progress_bar() + "\n"
            + self.render_status() + "\n"
        )

    def draw_ui(self) -> None:
        self.clean_terminal()
        self.hide_cursor()
        self.get_terminal_size()
        self.clean_terminal()
        self._write(self.render())
        self._flush()

    def _refresh(self) -> None:
        self.clean_terminal()
        self.hide_cursor()
        self.get_terminal_size()
        self._write(self.render())
        self._flush()

    def set_package_status(self, package: str, manager: str) -> None:
        self.package = package[:_FIELD_LIMIT]
        self.manager = manager[:_FIELD_LIMIT]
        self.progress = 0
        self.status = "Initializing..."

    def update_status(self, status: str) -> None:
        self.status = status[:_FIELD_LIMIT]

    def _step(self, progress: int, status: str, pause: float) -> None:
        self.progress = progress
        self.frame += 1
        self.update_status(status)
        self._refresh()
        self.sleep(pause)

    def update_download_progress(self) -> None:
        self.update_status("🔍 Searching package repositories...")
        self.draw_ui()
        self.sleep(0.5)
        for value in range(5, 41, 3):
            if value < 15:
                status = "🔍 Locating package..."
            elif value < 30:
                status = "📥 Preparing download..."
            else:
                status = "⬇️  Downloading package..."
            self._step(value, status, 0.2)

    def update_install_progress(self) -> None:
        for value in range(41, 101, 4):
            if value < 60:
                status = "📦 Extracting package..."
            elif value < 85:
                status = "⚙️  Installing components..."
            elif value < 95:
                status = "🔗 Setting up dependencies..."
            else:
                status = "✅ Finalizing installation..."
            self._step(value, status, 0.15)

    def update_remove_progress(self) -> None:
        self.update_status("🔍 Locating installed package...")
        self.draw_ui()
        self.sleep(0.3)
        for value in range(5, 101, 5):
            if value < 20:
                status = "🔍 Checking dependencies..."
            elif value < 50:
                status = "🗑️  Removing files..."
            elif value < 80:
                status = "🧹 Cleaning up..."
            else:
                status = "✅ Package removed successfully!"
            self._step(value, status, 0.1)

    def show_error(self, message: str) -> None:
        self._write("\n" + BOLD + RED + "❌ Error: " + RESET + RED + message + RESET + "\n")
        self.show_cursor()

    def show_success(self, message: str) -> None:
        self._write(
            "\n" + BOLD + GREEN + "✅ Success: " + RESET + GREEN + message + RESET + "\n"
        )
        self.show_cursor()

    def finish(self) -> None:
        self.progress = 100
        self.update_status("✅ Operation completed successfully!")
        self._refresh()
        self._write(
            BOLD + GREEN + "🎉 All done! Package operation completed successfully."
            + RESET + "\n"
        )
        self.show_cursor()