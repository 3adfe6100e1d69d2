"""n - forward commands to the project's JavaScript package manager."""

__version__ = "0.1.0"
