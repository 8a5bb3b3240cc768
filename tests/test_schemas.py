"""Tests for outline tree serialization."""

from __future__ import annotations

import json

from md2json.schemas import Group, Leaf, Sequence


class TestOutlineSerialization:
    """Each tree variant serializes to its own JSON shape."""

    def test_leaf_is_string(self) -> None:
        assert Leaf(text="x").model_dump_json() == '"x"'
        assert Leaf().model_dump() == ""

    def test_sequence_is_array(self) -> None:
        node = Sequence(items=[Leaf(text="a"), Sequence(items=[]), Group(entries={})])

        assert node.model_dump() == ["a", [], {}]

    def test_group_is_object(self) -> None:
        node = Group(
            entries={
                "Work": Sequence(items=[Group(entries={"one": Sequence(items=[Leaf(text="1")])})]),
                "Home": Leaf(text=""),
            }
        )

        assert json.loads(node.model_dump_json()) == {"Work": [{"one": ["1"]}], "Home": ""}

    def test_json_is_compact_and_keeps_unicode(self) -> None:
        node = Group(entries={"Café": Sequence(items=[Leaf(text="naïve")])})

        assert node.model_dump_json() == '{"Café":["naïve"]}'

    def test_equality_ignores_key_order(self) -> None:
        first = Group(entries={"a": Leaf(text="1"), "b": Leaf(text="2")})
        second = Group(entries={"b": Leaf(text="2"), "a": Leaf(text="1")})

        assert first == second
