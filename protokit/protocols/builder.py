"""Protocol definition building.

A protocol definition is the ordered list of capability names an object
exposes: methods and computed accessors, gathered across its whole ancestor
chain.
"""

from typing import Any, Iterable, Iterator

from protokit.ancestry.walker import build_ancestor_chain
from protokit.core.logging import describe, get_logger
from protokit.models.chain import AncestorChain

ProtocolDefinition = list[str]

# Never part of a protocol, even when callable
CONSTRUCTOR_NAMES = frozenset({"__init__", "__new__"})
INTERNAL_PREFIX = "__"

logger = get_logger("protocols")


def _all_capabilities(chain: AncestorChain) -> Iterator[str]:
    for level in chain:
        yield from level.capability_names()


def _distinct(names: Iterable[str]) -> list[str]:
    # first occurrence wins, i.e. the most-derived declaration
    return list(dict.fromkeys(names))


def is_user_capability(name: str) -> bool:
    """Check whether a name may appear in a protocol definition."""
    return name not in CONSTRUCTOR_NAMES and not name.startswith(INTERNAL_PREFIX)


def build_deep_protocol_definition(subject: Any) -> ProtocolDefinition:
    """Build the protocol definition of ``subject``.

    Supports:

    - methods and accessors declared on the subject itself
    - methods and accessors inherited from every ancestor class

    A name declared on several levels is reported once, at the position of
    its most-derived declaration. Plain stored values are never included.
    """
    chain = build_ancestor_chain(subject)
    names = [name for name in _distinct(_all_capabilities(chain)) if is_user_capability(name)]

    logger.protocol_built(describe(subject), names)
    return names
