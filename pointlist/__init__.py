"""Pointlist - a point-sorted task list with inline editing."""

__version__ = "0.1.0"
