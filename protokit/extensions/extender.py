"""Extension synthesis - merge members of several objects onto one target.

``add_extensions(target, Source)`` copies Source's methods and accessors.
``add_extensions(target, Source, Source())`` also copies the instance
attributes of a Source instance. The target keeps its identity and its
original type; it never becomes an instance of Source.

Members are copied as descriptors, never as resolved values. Special
(dunder) names are skipped because Python looks them up on the type, not
on the object.

When the target is an instance, methods and accessors only work from a
class, so they are placed on a private level class created for that one
instance and inserted as its immediate type. Stored values go into the
instance ``__dict__``. The original class and its other instances are not
touched.

A level class belongs to the instance it was made for. A copy of an
extended instance (``copy.copy``, ``copy.deepcopy``) starts out sharing
that class; the first ``add_extensions`` call on the copy gives it a level
class of its own, seeded with the members it already had.

Extended instances cannot be pickled. The level class carries the
original class's name and module, so pickle finds the original class under
that name and refuses the level class.
"""

import inspect
import types
import weakref
from typing import Any, TypeVar

from protokit.ancestry.walker import own_members
from protokit.core.logging import describe, get_logger
from protokit.models.member import MemberKind, StoredValue, Accessor

T = TypeVar("T")

# Marks a class created by add_extensions to hold one instance's members
LEVEL_MARKER = "__protokit_level__"
# Weak reference to the owning instance, or its id when it has no weakref slot
OWNER_MARKER = "__protokit_owner__"

logger = get_logger("extensions")


def _is_special(name: str) -> bool:
    return name.startswith("__") and name.endswith("__")


def is_extension_level(cls: type) -> bool:
    """Check whether ``cls`` is a per-instance level class."""
    return cls.__dict__.get(LEVEL_MARKER, False) is True


def _owner_token(target: Any) -> Any:
    try:
        return weakref.ref(target)
    except TypeError:
        return id(target)


def _owns(target: Any, level: type) -> bool:
    owner = level.__dict__.get(OWNER_MARKER)
    if isinstance(owner, weakref.ref):
        return owner() is target
    return owner == id(target)


def _instance_level(target: Any) -> type:
    """Return the target's own level class, creating it on first use.

    A level class inherited from another instance is replaced by a fresh one
    holding the same members.
    """
    cls = type(target)
    inherited = {}

    if is_extension_level(cls):
        if _owns(target, cls):
            return cls
        inherited = {name: raw for name, raw in cls.__dict__.items() if not _is_special(name)}
        cls = cls.__bases__[0]

    def body(namespace: dict) -> None:
        namespace["__slots__"] = ()
        namespace["__module__"] = cls.__module__
        namespace["__qualname__"] = cls.__qualname__
        namespace[LEVEL_MARKER] = True
        namespace[OWNER_MARKER] = _owner_token(target)
        namespace.update(inherited)

    level = types.new_class(cls.__name__, (cls,), exec_body=body)
    # bypass the target's __setattr__, which frozen dataclasses override
    object.__setattr__(target, "__class__", level)
    return level


def _has_data_descriptor(cls: type, name: str) -> bool:
    for klass in cls.__mro__:
        if name in klass.__dict__:
            return inspect.isdatadescriptor(klass.__dict__[name])
    return False


def _install_on_instance(target: Any, name: str, member: StoredValue | Accessor, from_class: bool) -> None:
    namespace = getattr(target, "__dict__", None)
    cls = type(target)

    if is_extension_level(cls):
        cls = _instance_level(target)
        # the name may have been placed on the level class by an earlier source
        if name in cls.__dict__:
            delattr(cls, name)

    # members read from an instance level were never bound, keep them unbound
    is_data = member.kind == MemberKind.STORED and (not from_class or not member.is_callable)
    if is_data and isinstance(namespace, dict) and not _has_data_descriptor(cls, name):
        namespace[name] = member.raw
        return

    setattr(_instance_level(target), name, member.raw)
    if isinstance(namespace, dict):
        namespace.pop(name, None)


def add_extensions(target: T, *sources: Any) -> T:
    """Copy every member declared directly on each source onto ``target``.

    Sources are processed in order; when two sources declare the same name,
    the later one wins. Returns ``target`` itself.
    """
    on_class = isinstance(target, type)

    for source in sources:
        from_class = isinstance(source, type)
        copied = 0
        for name, member in own_members(source).items():
            if _is_special(name):
                continue
            if on_class:
                setattr(target, name, member.raw)
            else:
                _install_on_instance(target, name, member, from_class)
            copied += 1

        logger.extension_copied(describe(target), describe(source), copied)

    return target
