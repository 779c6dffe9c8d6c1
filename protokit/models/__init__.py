"""Data models for protokit."""

from .member import Accessor, MemberDescriptor, MemberKind, StoredValue, is_capability
from .chain import AncestorChain, Level

__all__ = [
    "Accessor",
    "MemberDescriptor",
    "MemberKind",
    "StoredValue",
    "is_capability",
    "AncestorChain",
    "Level",
]
