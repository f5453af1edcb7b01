import io

import pytest

from distfuse.silent_exec import (
    CommandResult,
    command_exists,
    execute_command_silent,
    execute_with_custom_log,
)
from distfuse.ui import TerminalUI


@pytest.fixture
def ui():
    return TerminalUI(stream=io.StringIO(), sleep=lambda _seconds: None)


def test_captures_stdout():
    result = execute_command_silent("echo hello")
    assert result == CommandResult(exit_code=0, stdout="hello\n", stderr="")


def test_captures_stderr_and_exit_code():
    result = execute_command_silent("echo oops 1>&2; exit 3")
    assert result.exit_code == 3
    assert result.stderr == "oops\n"
    assert result.stdout == ""


def test_custom_log_success(ui):
    code = execute_with_custom_log("exit 0", "install", "vim", ui)
    text = ui.stream.getvalue()
    assert code == 0
    assert "🔧 Executing: install vim" in text
    assert "✅ install completed successfully for package: vim" in text


def test_custom_log_permission_denied(ui):
    code = execute_with_custom_log(
        "echo 'Permission denied' 1>&2; exit 1", "remove", "vim", ui
    )
    text = ui.stream.getvalue()
    assert code == 1
    assert "❌ remove failed for package: vim (exit code: 1)" in text
    assert "Permission denied - try running with sudo" in text


def test_custom_log_not_found(ui):
    code = execute_with_custom_log("echo 'thing not found' 1>&2; exit 2", "install", "x", ui)
    assert code == 2
    assert "Package not found in repositories" in ui.stream.getvalue()


def test_custom_log_lock(ui):
    execute_with_custom_log("echo 'could not get lock' 1>&2; exit 1", "install", "x", ui)
    assert "Package manager is locked - another process may be running" in ui.stream.getvalue()


def test_custom_log_shows_first_nonempty_line(ui):
    execute_with_custom_log("printf '\\nboom\\nmore\\n' 1>&2; exit 2", "install", "x", ui)
    text = ui.stream.getvalue()
    assert "boom" in text
    assert "more" not in text


def test_custom_log_silent_failure_shows_no_error(ui):
    code = execute_with_custom_log("exit 4", "install", "x", ui)
    text = ui.stream.getvalue()
    assert code == 4
    assert "Error:" not in text


def test_command_exists():
    assert command_exists("sh") is True
    assert command_exists("definitely-not-a-real-command-xyz") is False