"""Coupling metrics for Go packages."""

__version__ = "0.1.0"
