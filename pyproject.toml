[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "distfuse"
version = "1.0.0"
description = "Universal package manager front end that picks the fastest available system package manager"
requires-python = ">=3.10"
dependencies = []
keywords = ["package-manager", "apt", "dnf", "pacman", "flatpak", "snap", "cli"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: System Administrators",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: POSIX :: Linux",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: System :: Software Distribution",
    "Topic :: System :: Systems Administration",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
distfuse = "distfuse.parser:main"

[tool.hatch.build.targets.wheel]
packages = ["distfuse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
