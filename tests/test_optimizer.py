import subprocess

import pytest

from distfuse import optimizer
from distfuse.detector import PackageManager
from distfuse.optimizer import (
    ManagerPerformance,
    check_package_available,
    find_best_manager,
    measure_latency,
)


class FakeSystem:
    """Stands in for subprocess.run and the clock together."""

    def __init__(self, has_package=(), delays=None, missing=()):
        self.now = 0.0
        self.has_package = set(has_package)
        self.delays = delays or {}
        self.missing = set(missing)
        self.calls = []

    def clock(self):
        return self.now

    def run(self, args, **kwargs):
        self.calls.append(list(args))
        program, verb = args[0], args[1]
        if program in self.missing:
            raise FileNotFoundError(program)
        if verb == "--version":
            self.now += self.delays.get(program, 0.0)
            return subprocess.CompletedProcess(args, 0)
        rc = 0 if program in self.has_package else 1
        return subprocess.CompletedProcess(args, rc)


@pytest.fixture
def fake(monkeypatch):
    system = FakeSystem()
    monkeypatch.setattr(optimizer.subprocess, "run", system.run)
    monkeypatch.setattr(optimizer, "perf_counter", system.clock)
    return system


def test_check_package_available_success(fake):
    fake.has_package = {"apt"}
    assert check_package_available("apt", "vim") is True
    assert fake.calls == [["apt", "search", "vim"]]


def test_check_package_available_failure(fake):
    assert check_package_available("dnf", "vim") is False


def test_check_package_available_missing_program(fake):
    fake.missing = {"ghost"}
    assert check_package_available("ghost", "vim") is False


def test_measure_latency_in_milliseconds(fake):
    fake.delays = {"apt": 0.5}
    assert measure_latency("apt") == pytest.approx(500.0)
    assert fake.calls == [["apt", "--version"]]


def test_best_manager_is_fastest(fake):
    fake.has_package = {"apt", "snap", "dnf"}
    fake.delays = {"apt": 0.5, "snap": 0.25, "dnf": 0.75}
    managers = [PackageManager(n, n) for n in ("apt", "snap", "dnf")]
    best = find_best_manager("vim", managers)
    assert best.manager_name == "snap"
    assert best.latency_ms == pytest.approx(250.0)
    assert best.download_speed_mbps == pytest.approx(100.0 - best.latency_ms)
    assert best.package_available is True


def test_managers_without_package_are_skipped(fake):
    fake.has_package = {"dnf"}
    fake.delays = {"apt": 0.25, "dnf": 0.5}
    managers = [PackageManager("apt", "apt"), PackageManager("dnf", "dnf")]
    best = find_best_manager("vim", managers)
    assert best.manager_name == "dnf"
    assert ["apt", "--version"] not in fake.calls


def test_unavailable_managers_are_not_queried(fake):
    fake.has_package = {"apt", "snap"}
    managers = [PackageManager("apt", "apt", available=False), PackageManager("snap", "snap")]
    best = find_best_manager("vim", managers)
    assert best.manager_name == "snap"
    assert all(call[0] != "apt" for call in fake.calls)


def test_no_manager_has_package(fake):
    managers = [PackageManager("apt", "apt"), PackageManager("dnf", "dnf")]
    assert find_best_manager("vim", managers) is None


def test_no_managers():
    assert find_best_manager("vim", []) is None


def test_tie_keeps_first(fake):
    fake.has_package = {"apt", "dnf"}
    fake.delays = {"apt": 0.25, "dnf": 0.25}
    managers = [PackageManager("apt", "apt"), PackageManager("dnf", "dnf")]
    assert find_best_manager("vim", managers).manager_name == "apt"


def test_performance_record_fields():
    perf = ManagerPerformance("apt", 1.5, 98.5, True)
    assert (perf.manager_name, perf.latency_ms) == ("apt", 1.5)