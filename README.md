# distfuse

One command to install or remove software, whatever Linux distribution you are on.

distfuse checks which of these package managers are installed under
`/usr/bin`: snap, flatpak, dnf, apt, pacman, zypper, apk, yum and rpm. It
runs `<manager> search <package>` with each one to see whether it offers the
package, and times `<manager> --version` to see how fast it responds. The
request then goes to the fastest manager that offers the package. While it
works, distfuse shows a full-screen progress display in the terminal.

## Installation

```
pip install .
```

## Usage

Install a package:

```
sudo distfuse install htop
```

Remove a package:

```
sudo distfuse remove htop
```

Print the version:

```
distfuse --version
```

The valid subcommands are `install` and `remove`. Both need a package name.
Installing and removing usually need root privileges.

When an operation fails, distfuse reads the package manager's output and
prints a short reason:

- "Permission denied - please run with sudo"
- "Package not found in repositories"
- "Package manager is busy - please wait and try again", when the package
  manager is locked or dpkg reports an error

If none of these applies, it suggests checking the internet connection.

The exit status is 0 when the operation succeeded and 1 otherwise.

## Using it from Python

You can also use the pieces behind the command on their own:

- `distfuse.detector.detect_available_managers()` returns the installed
  managers as `PackageManager` entries. You can pass it your own
  `(name, path)` pairs to check instead of the default list.
- `distfuse.optimizer.find_best_manager(package_name, managers)` returns a
  `ManagerPerformance` for the quickest manager that offers the package. It
  returns `None` if no manager offers it.
- `distfuse.parser.build_command(manager, action, package)` returns the
  shell command that would be run for `install` or `remove`.
- `distfuse.parser.diagnose_failure(output)` turns a failed run's output into
  the short explanation shown to the user.
- `distfuse.silent_exec.execute_command_silent(command)` runs a shell command
  and returns its exit code, stdout and stderr as a `CommandResult`.
- `distfuse.silent_exec.command_exists(command)` tells whether a command is
  on the search path.
- `distfuse.ui.TerminalUI` draws the progress display on any text stream. It
  accepts a replaceable `sleep` function.

## What it does not do

Only `install` and `remove` are supported. distfuse has no subcommands for
searching, updating, upgrading or listing packages.

The progress display is paced by fixed timings. It does not follow the package
manager's real progress.

## Running the tests

```
pip install .[test]
pytest
```