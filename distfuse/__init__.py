"""Front end that installs or removes packages through the fastest available system package manager."""

__version__ = "1.0.0"

__all__ = ["__version__"]