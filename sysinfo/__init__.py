"""Report CPU, memory and disk usage in the terminal."""

__version__ = "0.1.0"
