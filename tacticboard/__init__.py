"""Tactical board relay and advice server."""

__version__ = "1.0.0"
