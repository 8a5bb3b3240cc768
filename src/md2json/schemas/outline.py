"""Outline tree models.

Each variant serializes itself to its JSON shape: ``Group`` to an object,
``Sequence`` to an array and ``Leaf`` to a string.
"""

from __future__ import annotations

from typing import Any, Union

from pydantic import BaseModel, Field, model_serializer


class Leaf(BaseModel):
    """A rendered text value, possibly empty."""

    text: str = ""

    @model_serializer
    def serialize_node(self) -> str:
        return self.text


class Sequence(BaseModel):
    """Ordered children in document order."""

    items: list[OutlineNode] = Field(default_factory=list)

    @model_serializer
    def serialize_node(self) -> list[Any]:
        return list(self.items)


class Group(BaseModel):
    """Rendered-text keys mapped to child nodes."""

    entries: dict[str, OutlineNode] = Field(default_factory=dict)

    @model_serializer
    def serialize_node(self) -> dict[str, Any]:
        return dict(self.entries)


OutlineNode = Union[Group, Sequence, Leaf]

Sequence.model_rebuild()
Group.model_rebuild()
