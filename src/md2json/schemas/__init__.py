"""Shared schemas for md2json."""

from md2json.schemas.blocks import (
    Block,
    Heading,
    ListItem,
    NestedItem,
    OtherBlock,
    Paragraph,
    SimpleItem,
    UnorderedList,
)
from md2json.schemas.outline import Group, Leaf, OutlineNode, Sequence
from md2json.schemas.spans import (
    Code,
    Emphasis,
    HardBreak,
    Image,
    InlineHtml,
    Link,
    SoftBreak,
    Span,
    Strikethrough,
    Strong,
    Text,
)

__all__ = [
    "Block",
    "Code",
    "Emphasis",
    "Group",
    "HardBreak",
    "Heading",
    "Image",
    "InlineHtml",
    "Leaf",
    "Link",
    "ListItem",
    "NestedItem",
    "OtherBlock",
    "OutlineNode",
    "Paragraph",
    "Sequence",
    "SimpleItem",
    "SoftBreak",
    "Span",
    "Strikethrough",
    "Strong",
    "Text",
    "UnorderedList",
]
