"""Outlay: local expense tracking with partner attribution."""

__version__ = "0.1.0"
