"""Choosing the fastest package manager that offers a package."""

from __future__ import annotations

import subprocess
from collections.abc import Iterable
from dataclasses import dataclass
from time import perf_counter

from .detector import MANAGER_NAME_LEN, PackageManager

_LATENCY_CEILING_MS = 999999.9


@dataclass
class ManagerPerformance:
    """Measured figures for one package manager."""

    manager_name: str
    latency_ms: float
    download_speed_mbps: float
    package_available: bool


def measure_latency(command: str) -> float:
    """Return how long ``<command> --version`` takes, in milliseconds."""
    start = perf_counter()
    try:
        subprocess.run([command, "--version"], check=False)
    except OSError:
        pass
    end = perf_counter()
    return (end - start) * 1000.0


def check_package_available(manager: str, package: str) -> bool:
    """Return whether ``<manager> search <package>`` succeeds."""
    try:
        completed = subprocess.run(
            [manager, "search", package],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except OSError:
        return False
    return completed.returncode == 0


def find_best_manager(
    package_name: str, managers: Iterable[PackageManager]
) -> ManagerPerformance | None:
    """Return the lowest-latency manager offering the package, or None."""
    best: ManagerPerformance | None = None
    best_latency = _LATENCY_CEILING_MS

    for manager in managers:
        if not manager.available:
            continue
        if not check_package_available(manager.command, package_name):
            continue
        latency = measure_latency(manager.command)
        if latency < best_latency:
            best_latency = latency
            best = ManagerPerformance(
                manager_name=manager.name[: MANAGER_NAME_LEN - 1],
                latency_ms=latency,
                download_speed_mbps=100.0 - latency,
                package_available=True,
            )
    return best