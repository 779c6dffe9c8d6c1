"""Extensions package - capability synthesis."""

from .extender import add_extensions, is_extension_level

__all__ = [
    "add_extensions",
    "is_extension_level",
]
