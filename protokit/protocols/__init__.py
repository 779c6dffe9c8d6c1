"""Protocols package - protocol definition extraction."""

from .builder import ProtocolDefinition, build_deep_protocol_definition, is_user_capability

__all__ = [
    "ProtocolDefinition",
    "build_deep_protocol_definition",
    "is_user_capability",
]
