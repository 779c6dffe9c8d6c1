"""Capabilities package - capability verification."""

from .checker import has_all_methods_called, missing_methods

__all__ = [
    "has_all_methods_called",
    "missing_methods",
]
