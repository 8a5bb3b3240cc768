"""Block models: the tokenizer's output and the outline builder's input."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field

from md2json.schemas.spans import Span


class Heading(BaseModel):
    """An ATX or setext heading."""

    kind: Literal["heading"] = "heading"
    content: list[Span] = Field(default_factory=list)
    level: int = Field(..., ge=1, le=6)


class Paragraph(BaseModel):
    kind: Literal["paragraph"] = "paragraph"
    content: list[Span] = Field(default_factory=list)


class SimpleItem(BaseModel):
    """A list item holding a single line of inline content."""

    kind: Literal["simple"] = "simple"
    content: list[Span] = Field(default_factory=list)


class NestedItem(BaseModel):
    """A list item holding its own sequence of blocks.

    The blocks are consumed as a private queue, independent of the document
    queue the enclosing list came from.
    """

    kind: Literal["nested"] = "nested"
    blocks: list[Block] = Field(default_factory=list)


ListItem = Annotated[Union[SimpleItem, NestedItem], Field(discriminator="kind")]


class UnorderedList(BaseModel):
    kind: Literal["unordered_list"] = "unordered_list"
    items: list[ListItem] = Field(default_factory=list)


class OtherBlock(BaseModel):
    """Any block kind the outline builder does not support.

    ``name`` is the Markdown construct, e.g. ``ordered_list`` or ``fence``.
    """

    kind: Literal["other"] = "other"
    name: str


Block = Annotated[
    Union[Heading, Paragraph, UnorderedList, OtherBlock],
    Field(discriminator="kind"),
]

NestedItem.model_rebuild()
UnorderedList.model_rebuild()
