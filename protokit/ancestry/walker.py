"""Ancestor walking - read-only access to an object's delegation levels.

A class is treated as a shared-behavior template: its chain is its MRO.
Any other object contributes its own level (instance attributes) first,
followed by its type's MRO. ``object`` is the universal root and is never
part of a chain.
"""

import functools
import inspect
from typing import Any, Iterator

from protokit.models.chain import AncestorChain, Level
from protokit.models.member import Accessor, StoredValue


def walk_ancestors(subject: Any) -> Iterator[Any]:
    """Yield the levels of ``subject``'s ancestor chain, most-derived first."""
    if isinstance(subject, type):
        mro = subject.__mro__
    else:
        yield subject
        mro = type(subject).__mro__

    for level in mro:
        if level is object:
            return
        yield level


def describe_member(name: str, raw: Any, on_class: bool = True) -> StoredValue | Accessor:
    """Build the tagged descriptor for one attribute.

    Descriptors only compute values when they live on a class, so members
    read from an instance level are always stored values.
    """
    public = not name.startswith("_")

    if on_class:
        if isinstance(raw, property):
            return Accessor(
                name=name,
                raw=raw,
                read=raw.fget,
                write=raw.fset,
                delete=raw.fdel,
                writable=raw.fset is not None,
                public=public,
            )

        if isinstance(raw, functools.cached_property):
            return Accessor(name=name, raw=raw, read=raw.func, writable=True, public=public)

        if inspect.isdatadescriptor(raw):
            descriptor_type = type(raw)
            return Accessor(
                name=name,
                raw=raw,
                read=getattr(descriptor_type, "__get__", None),
                write=getattr(descriptor_type, "__set__", None),
                delete=getattr(descriptor_type, "__delete__", None),
                writable=hasattr(descriptor_type, "__set__"),
                public=public,
            )

    return StoredValue(name=name, raw=raw, value=raw, public=public)


def _slot_values(instance: Any) -> Iterator[tuple[str, Any]]:
    """Yield the ``__slots__`` attributes that currently hold a value."""
    for cls in type(instance).__mro__:
        for name, raw in cls.__dict__.items():
            if not inspect.ismemberdescriptor(raw) or raw.__objclass__ is not cls:
                continue
            try:
                yield name, raw.__get__(instance, cls)
            except AttributeError:
                # declared but never assigned
                continue


def own_members(level: Any) -> dict[str, StoredValue | Accessor]:
    """Members declared directly on one level, in declaration order."""
    members: dict[str, StoredValue | Accessor] = {}

    if isinstance(level, type):
        for name, raw in level.__dict__.items():
            # slot storage belongs to instances, not to the class template
            if inspect.ismemberdescriptor(raw):
                continue
            members[name] = describe_member(name, raw)
        return members

    try:
        namespace = vars(level)
    except TypeError:
        namespace = {}

    for name, raw in namespace.items():
        members[name] = describe_member(name, raw, on_class=False)

    for name, raw in _slot_values(level):
        members.setdefault(name, describe_member(name, raw, on_class=False))

    return members


def level_name(level: Any) -> str:
    if isinstance(level, type):
        return level.__qualname__
    return f"{type(level).__qualname__} instance"


def build_ancestor_chain(subject: Any) -> AncestorChain:
    """Snapshot ``subject``'s ancestor chain as an arena of levels."""
    chain = AncestorChain()
    for level in walk_ancestors(subject):
        chain.append(Level(name=level_name(level), origin=level, members=own_members(level)))
    return chain
