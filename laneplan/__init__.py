"""Straight-lane motion planning scenes for a simulated car."""

__version__ = "0.1.0"
__all__ = ["__version__"]