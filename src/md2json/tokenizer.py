"""Tokenize Markdown text into outline blocks using markdown-it-py."""

from __future__ import annotations

import logging
from functools import lru_cache

from markdown_it import MarkdownIt
from markdown_it.token import Token
from markdown_it.tree import SyntaxTreeNode

from md2json.config import MARKDOWN_EXTRA_RULES, MARKDOWN_MAX_NESTING, MARKDOWN_PRESET
from md2json.exceptions import ParseError
from md2json.schemas import (
    Block,
    Code,
    Emphasis,
    HardBreak,
    Heading,
    Image,
    InlineHtml,
    Link,
    ListItem,
    NestedItem,
    OtherBlock,
    Paragraph,
    SimpleItem,
    SoftBreak,
    Span,
    Strikethrough,
    Strong,
    Text,
    UnorderedList,
)

logger = logging.getLogger(__name__)

_HEADING_TAGS = {f"h{level}": level for level in range(1, 7)}
# Opening tokens whose contents are tokenized one level deeper.
_CONTAINER_OPENERS = {"list_item_open", "blockquote_open"}


@lru_cache(maxsize=1)
def _parser() -> MarkdownIt:
    parser = MarkdownIt(MARKDOWN_PRESET, {"maxNesting": MARKDOWN_MAX_NESTING})
    return parser.enable(list(MARKDOWN_EXTRA_RULES))


def tokenize(text: str) -> list[Block]:
    """Split Markdown text into an ordered list of top-level blocks.

    Headings, paragraphs and bullet lists are mapped to their block models.
    Every other construct becomes an ``OtherBlock`` carrying the construct's
    name so that later stages can reject it explicitly.

    Raises:
        ParseError: If the text nests deeper than the parser tokenizes.
    """
    tokens = _parser().parse(text)
    _check_nesting(tokens)
    root = SyntaxTreeNode(tokens)
    blocks = [_convert_block(node) for node in root.children]
    logger.debug("Tokenized %d top-level blocks", len(blocks))
    return blocks


def _check_nesting(tokens: list[Token]) -> None:
    for token in tokens:
        if token.type in _CONTAINER_OPENERS and token.level + 1 >= MARKDOWN_MAX_NESTING:
            line = token.map[0] + 1 if token.map else "?"
            raise ParseError(
                f"Outline nests too deeply at line {line} (limit {MARKDOWN_MAX_NESTING} levels)"
            )


def _convert_block(node: SyntaxTreeNode) -> Block:
    if node.type == "heading":
        level = _HEADING_TAGS.get(node.tag)
        if level is None:
            raise ParseError(f"Unexpected heading tag: {node.tag!r}")
        return Heading(content=_inline_spans(node), level=level)

    if node.type == "paragraph":
        return Paragraph(content=_inline_spans(node))

    if node.type == "bullet_list":
        return UnorderedList(
            items=[_convert_item(child) for child in node.children if child.type == "list_item"]
        )

    return OtherBlock(name=node.type)


def _convert_item(node: SyntaxTreeNode) -> ListItem:
    children = node.children
    if not children:
        return SimpleItem(content=[])
    if len(children) == 1 and children[0].type == "paragraph":
        return SimpleItem(content=_inline_spans(children[0]))
    return NestedItem(blocks=[_convert_block(child) for child in children])


def _inline_spans(node: SyntaxTreeNode) -> list[Span]:
    spans: list[Span] = []
    for inline in node.children:
        if inline.type != "inline":
            raise ParseError(f"Expected inline content in {node.type}, found {inline.type}")
        spans.extend(_convert_inline(child) for child in inline.children)
    return spans


def _convert_inline(node: SyntaxTreeNode) -> Span:
    kind = node.type

    if kind == "text":
        return Text(text=node.content)

    if kind == "code_inline":
        return Code(text=node.content, markup=node.markup or "`")

    if kind == "em":
        return Emphasis(children=_inline_children(node), markup=node.markup or "*")

    if kind == "strong":
        return Strong(children=_inline_children(node), markup=node.markup or "**")

    if kind == "s":
        return Strikethrough(children=_inline_children(node), markup=node.markup or "~~")

    if kind == "link":
        return Link(
            children=_inline_children(node),
            autolink=node.markup == "autolink",
            href=str(node.attrs.get("href", "")),
            title=_optional_attr(node, "title"),
        )

    if kind == "image":
        return Image(
            alt=node.content,
            src=str(node.attrs.get("src", "")),
            title=_optional_attr(node, "title"),
        )

    if kind == "html_inline":
        return InlineHtml(text=node.content)

    if kind == "softbreak":
        return SoftBreak()

    if kind == "hardbreak":
        return HardBreak()

    # Rules outside the enabled preset; keep their source text.
    logger.debug("Keeping unknown inline token %r as text", kind)
    return Text(text=node.content)


def _inline_children(node: SyntaxTreeNode) -> list[Span]:
    return [_convert_inline(child) for child in node.children]


def _optional_attr(node: SyntaxTreeNode, name: str) -> str | None:
    value = node.attrs.get(name)
    if value is None or value == "":
        return None
    return str(value)
