"""Discovery of the package managers installed on this system."""

from __future__ import annotations

import os
from collections.abc import Iterable
from dataclasses import dataclass

MAX_MANAGERS = 10
MANAGER_NAME_LEN = 20

DEFAULT_CANDIDATES: tuple[tuple[str, str], ...] = (
    ("snap", "/usr/bin/snap"),
    ("flatpak", "/usr/bin/flatpak"),
    ("dnf", "/usr/bin/dnf"),
    ("apt", "/usr/bin/apt"),
    ("pacman", "/usr/bin/pacman"),
    ("zypper", "/usr/bin/zypper"),
    ("apk", "/usr/bin/apk"),
    ("yum", "/usr/bin/yum"),
    ("rpm", "/usr/bin/rpm"),
)


@dataclass(frozen=True)
class PackageManager:
    """A package manager found on the system."""

    name: str
    command: str
    available: bool = True


def _clip(name: str) -> str:
    return name[: MANAGER_NAME_LEN - 1]


def detect_available_managers(
    candidates: Iterable[tuple[str, str]] | None = None,
) -> list[PackageManager]:
    """Return the managers whose executable exists, in candidate order.

    ``candidates`` is a sequence of ``(name, path)`` pairs; the well-known
    system locations are used when it is omitted. At most ``MAX_MANAGERS``
    managers are returned.
    """
    if candidates is None:
        candidates = DEFAULT_CANDIDATES

    found: list[PackageManager] = []
    for name, path in candidates:
        if not os.path.exists(path):
            continue
        found.append(PackageManager(name=_clip(name), command=_clip(name)))
        if len(found) >= MAX_MANAGERS:
            break
    return found