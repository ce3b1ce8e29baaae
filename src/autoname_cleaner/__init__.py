"""Autoname Cleaner: remove containers that still carry a runtime-generated name."""

__version__ = "0.1.0"
