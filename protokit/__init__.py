"""protokit - runtime structural typing for Python objects.

Three operations over an object's ancestor chain:

- ``build_deep_protocol_definition(subject)``: the methods and accessors
  ``subject`` exposes, inherited ones included
- ``has_all_methods_called(subject, names)``: whether every name is callable
  on ``subject`` right now
- ``add_extensions(target, *sources)``: copy the members of each source onto
  ``target``, later sources winning

Example::

    from protokit import add_extensions, has_all_methods_called

    add_extensions(target, PropCounter, PropCounter())
    if has_all_methods_called(target, ["count_props"]):
        target.count_props()

Synthesis registers no type. Use ``has_all_methods_called`` at the point of
use to assert that an object satisfies a protocol.
"""

__version__ = "1.0.0"

from .ancestry import build_ancestor_chain, describe_member, own_members, walk_ancestors
from .capabilities import has_all_methods_called, missing_methods
from .extensions import add_extensions, is_extension_level
from .models import Accessor, AncestorChain, Level, MemberDescriptor, MemberKind, StoredValue
from .protocols import ProtocolDefinition, build_deep_protocol_definition

__all__ = [
    "__version__",
    # Operations
    "add_extensions",
    "build_deep_protocol_definition",
    "has_all_methods_called",
    "missing_methods",
    # Ancestry
    "build_ancestor_chain",
    "describe_member",
    "is_extension_level",
    "own_members",
    "walk_ancestors",
    # Models
    "Accessor",
    "AncestorChain",
    "Level",
    "MemberDescriptor",
    "MemberKind",
    "ProtocolDefinition",
    "StoredValue",
]
