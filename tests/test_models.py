"""Tests for member and chain models."""

import functools

import pytest
from pydantic import TypeAdapter, ValidationError

from protokit.models.chain import AncestorChain, Level
from protokit.models.member import Accessor, MemberDescriptor, MemberKind, StoredValue, is_capability


def test_stored_value_defaults():
    member = StoredValue(name="size", value=3)

    assert member.kind == MemberKind.STORED
    assert member.writable is True
    assert member.public is True
    assert not member.is_callable
    assert not is_capability(member)


def test_callable_stored_value_is_a_capability():
    member = StoredValue(name="run", value=lambda: None)

    assert member.is_callable
    assert is_capability(member)


def test_wrapped_methods_are_callable():
    assert StoredValue(name="make", value=classmethod(lambda cls: cls)).is_callable
    assert StoredValue(name="parse", value=staticmethod(len)).is_callable
    assert StoredValue(name="twice", value=functools.partialmethod(divmod, 2)).is_callable


def test_accessor_is_always_a_capability():
    member = Accessor(name="area", read=lambda self: 1)

    assert member.kind == MemberKind.ACCESSOR
    assert not member.is_callable
    assert is_capability(member)


def test_members_are_frozen():
    member = StoredValue(name="size", value=3)

    with pytest.raises(ValidationError):
        member.value = 4


def test_descriptor_union_dispatches_on_kind():
    adapter = TypeAdapter(MemberDescriptor)

    stored = adapter.validate_python({"kind": "stored", "name": "a", "value": 1})
    accessor = adapter.validate_python({"kind": "accessor", "name": "b"})

    assert isinstance(stored, StoredValue)
    assert isinstance(accessor, Accessor)


def test_descriptor_union_rejects_unknown_kind():
    adapter = TypeAdapter(MemberDescriptor)

    with pytest.raises(ValidationError):
        adapter.validate_python({"kind": "field", "name": "a"})


def test_level_capability_names_keep_declaration_order():
    level = Level(
        name="Shape",
        members={
            "sides": StoredValue(name="sides", value=4),
            "area": Accessor(name="area"),
            "scale": StoredValue(name="scale", value=lambda f: f),
        },
    )

    assert level.capability_names() == ["area", "scale"]


class TestAncestorChain:
    """Tests for the level arena."""

    def test_append_links_levels(self):
        chain = AncestorChain()

        first = chain.append(Level(name="A"))
        second = chain.append(Level(name="B"))

        assert (first, second) == (0, 1)
        assert chain.levels[0].parent == 1
        assert chain.levels[1].parent is None
        assert chain.names() == ["A", "B"]

    def test_iteration_follows_parent_pointers(self):
        chain = AncestorChain(levels=[
            Level(name="C", parent=None),
            Level(name="A", parent=2),
            Level(name="B", parent=0),
        ])

        # traversal always starts at index 0
        assert chain.names() == ["C"]

        chain.levels[0].parent = 1
        chain.levels[2].parent = None

        assert chain.names() == ["C", "A", "B"]

    def test_cyclic_parent_pointers_terminate(self):
        chain = AncestorChain(levels=[Level(name="A", parent=1), Level(name="B", parent=0)])

        assert chain.names() == ["A", "B"]

    def test_empty_chain(self):
        chain = AncestorChain()

        assert chain.names() == []
        assert len(chain) == 0
