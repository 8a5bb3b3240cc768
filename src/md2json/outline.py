"""Build an outline tree from a flat sequence of Markdown blocks.

Every function here consumes blocks from the front of one shared
``collections.deque``. A heading's content is whatever single construct
follows it, so a deeper heading is absorbed into the current entry before the
sibling check runs, and a shallower heading can only surface once everything
beneath the current heading has been consumed.
"""

from __future__ import annotations

import logging
from collections import deque
from typing import Iterable

from md2json.config import MAX_OUTLINE_DEPTH
from md2json.exceptions import (
    ConversionError,
    EmptyDocumentError,
    MalformedNestedItemError,
    OutlineTooDeepError,
    UnsupportedBlockError,
)
from md2json.markdown import render_spans
from md2json.schemas import (
    Block,
    Group,
    Heading,
    Leaf,
    ListItem,
    NestedItem,
    OtherBlock,
    OutlineNode,
    Paragraph,
    Sequence,
    SimpleItem,
    UnorderedList,
)

logger = logging.getLogger(__name__)

BlockQueue = deque[Block]


def build_outline(blocks: Iterable[Block]) -> OutlineNode:
    """Convert a document's blocks into a single outline node.

    A document made of one top-level construct is returned as that construct's
    node. Several top-level constructs are wrapped in a ``Sequence`` in
    document order.

    Raises:
        EmptyDocumentError: If there are no blocks.
        OutlineTooDeepError: If constructs nest more than ``MAX_OUTLINE_DEPTH``
            levels deep.
        ConversionError: If a block cannot be placed in the outline.
    """
    queue: BlockQueue = deque(blocks)
    if not queue:
        raise EmptyDocumentError("Document contains no headings or lists")

    try:
        first = consume_block(queue)
        if not queue:
            return first

        items = [first]
        while queue:
            items.append(consume_block(queue))
    except RecursionError as exc:
        raise ConversionError("Outline is nested too deeply to convert") from exc
    logger.debug("Document has %d top-level constructs", len(items))
    return Sequence(items=items)


def consume_block(queue: BlockQueue, *, depth: int = 0) -> OutlineNode:
    """Pop one block off ``queue`` and convert it into an outline node.

    Headings may pull further blocks off the same queue to build their content
    and siblings. ``depth`` counts the constructs enclosing this one.
    """
    if depth > MAX_OUTLINE_DEPTH:
        raise OutlineTooDeepError(
            f"Outline nests more than {MAX_OUTLINE_DEPTH} constructs deep"
        )
    block = queue.popleft()

    if isinstance(block, Heading):
        entries: dict[str, OutlineNode] = {}
        consume_heading_group(
            entries, queue, render_spans(block.content), block.level, depth=depth
        )
        return Group(entries=entries)

    if isinstance(block, UnorderedList):
        return Sequence(items=[_convert_item(item, depth) for item in block.items])

    raise UnsupportedBlockError(_block_kind(block))


def consume_heading_group(
    entries: dict[str, OutlineNode],
    queue: BlockQueue,
    key: str,
    level: int,
    *,
    depth: int = 0,
) -> None:
    """Add a heading and its following siblings to ``entries``.

    Each heading's value is the next construct on the queue, or an empty leaf
    at the end of the document. A following heading at the same or a deeper
    level than the one just added continues the group as a new key; anything
    else ends it. Duplicate keys keep the last value.
    """
    while True:
        content = consume_block(queue, depth=depth + 1) if queue else Leaf(text="")
        if key in entries:
            logger.debug("Heading %r repeated at level %d, replacing earlier value", key, level)
        entries[key] = content

        following = queue[0] if queue else None
        if not isinstance(following, Heading) or following.level < level:
            return

        queue.popleft()
        key = render_spans(following.content)
        level = following.level
        logger.debug("Continuing heading group with %r at level %d", key, level)


def _convert_item(item: ListItem, depth: int) -> OutlineNode:
    if isinstance(item, SimpleItem):
        return Leaf(text=render_spans(item.content))
    return _convert_nested_item(item, depth)


def _convert_nested_item(item: NestedItem, depth: int) -> Group:
    blocks: BlockQueue = deque(item.blocks)
    head = blocks.popleft() if blocks else None
    if not isinstance(head, Paragraph):
        found = _block_kind(head) if head is not None else "nothing"
        raise MalformedNestedItemError(
            f"Nested list item must start with text, found {found}"
        )
    if not blocks:
        raise MalformedNestedItemError("Nested list item has no content after its text")

    key = render_spans(head.content)
    value = consume_block(blocks, depth=depth + 1)
    if blocks:
        raise MalformedNestedItemError(
            f"List item {key!r} has unconsumed {_block_kind(blocks[0])} after its nested content"
        )
    return Group(entries={key: value})


def _block_kind(block: Block) -> str:
    if isinstance(block, OtherBlock):
        return block.name
    return block.kind
