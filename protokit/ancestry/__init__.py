"""Ancestry package - ancestor chain traversal."""

from .walker import build_ancestor_chain, describe_member, own_members, walk_ancestors

__all__ = [
    "build_ancestor_chain",
    "describe_member",
    "own_members",
    "walk_ancestors",
]
