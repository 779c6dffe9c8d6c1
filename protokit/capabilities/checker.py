"""Capability verification.

Answers a single go/no-go question: can every requested name be called on
this object right now? Names are resolved with ordinary attribute access, so
inherited methods, bound class methods and accessors that return callables
all count.
"""

from typing import Any, Iterable

from protokit.core.logging import describe, get_logger

logger = get_logger("capabilities")


def _resolves_to_callable(subject: Any, name: str) -> bool:
    return callable(getattr(subject, name, None))


def has_all_methods_called(subject: Any, names: Iterable[str]) -> bool:
    """Check that every name in ``names`` is a callable member of ``subject``.

    Returns True for an empty ``names``.
    """
    requested = list(names)
    result = all(_resolves_to_callable(subject, name) for name in requested)

    logger.capabilities_checked(describe(subject), len(requested), result)
    return result


def missing_methods(subject: Any, names: Iterable[str]) -> list[str]:
    """Return the requested names that are not callable on ``subject``."""
    return [name for name in names if not _resolves_to_callable(subject, name)]
