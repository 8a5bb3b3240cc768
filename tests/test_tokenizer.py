"""Tests for the Markdown tokenizer."""

from __future__ import annotations

import pytest

from md2json.exceptions import ParseError
from md2json.schemas import (
    Code,
    Emphasis,
    Heading,
    Link,
    NestedItem,
    OtherBlock,
    Paragraph,
    SimpleItem,
    SoftBreak,
    Strikethrough,
    Strong,
    Text,
    UnorderedList,
)
from md2json.tokenizer import tokenize


class TestHeadings:
    """Tests for heading tokenization."""

    @pytest.mark.parametrize(
        ("markdown", "level"),
        [
            ("# Title\n", 1),
            ("### Title\n", 3),
            ("###### Title\n", 6),
            ("Title\n=====\n", 1),
            ("Title\n-----\n", 2),
        ],
    )
    def test_heading_level(self, markdown: str, level: int) -> None:
        assert tokenize(markdown) == [Heading(content=[Text(text="Title")], level=level)]

    def test_heading_with_inline_markup(self) -> None:
        """Heading content keeps its inline structure."""
        (block,) = tokenize("# A **bold** plan\n")

        assert block == Heading(
            content=[
                Text(text="A "),
                Strong(children=[Text(text="bold")], markup="**"),
                Text(text=" plan"),
            ],
            level=1,
        )

    def test_empty_heading(self) -> None:
        assert tokenize("#\n") == [Heading(content=[], level=1)]


class TestLists:
    """Tests for bullet list tokenization."""

    def test_simple_items(self) -> None:
        assert tokenize("- one\n- two\n") == [
            UnorderedList(
                items=[
                    SimpleItem(content=[Text(text="one")]),
                    SimpleItem(content=[Text(text="two")]),
                ]
            )
        ]

    def test_nested_item(self) -> None:
        """An item with a sublist carries its own blocks."""
        assert tokenize("- one\n    - one.1\n- two\n") == [
            UnorderedList(
                items=[
                    NestedItem(
                        blocks=[
                            Paragraph(content=[Text(text="one")]),
                            UnorderedList(items=[SimpleItem(content=[Text(text="one.1")])]),
                        ]
                    ),
                    SimpleItem(content=[Text(text="two")]),
                ]
            )
        ]

    def test_task_item_text_is_kept(self) -> None:
        """Task list checkboxes are ordinary text."""
        (block,) = tokenize("- [ ] ship it\n")

        assert isinstance(block, UnorderedList)
        (item,) = block.items
        assert isinstance(item, SimpleItem)
        assert "".join(span.text for span in item.content) == "[ ] ship it"

    def test_multiline_item(self) -> None:
        (block,) = tokenize("- first\n  second\n")

        assert block.items == [
            SimpleItem(content=[Text(text="first"), SoftBreak(), Text(text="second")])
        ]

    def test_different_markers_start_new_lists(self) -> None:
        blocks = tokenize("- a\n* b\n")

        assert len(blocks) == 2
        assert all(isinstance(block, UnorderedList) for block in blocks)


class TestInlineSpans:
    """Tests for inline span conversion."""

    def test_code_link_and_strikethrough(self) -> None:
        (block,) = tokenize('`x` [site](https://example.com "Home") ~~old~~\n')

        assert block == Paragraph(
            content=[
                Code(text="x", markup="`"),
                Text(text=" "),
                Link(
                    children=[Text(text="site")],
                    href="https://example.com",
                    title="Home",
                ),
                Text(text=" "),
                Strikethrough(children=[Text(text="old")], markup="~~"),
            ]
        )

    def test_underscore_emphasis_keeps_markup(self) -> None:
        (block,) = tokenize("_soft_\n")

        assert block == Paragraph(content=[Emphasis(children=[Text(text="soft")], markup="_")])


class TestOtherBlocks:
    """Unsupported constructs are tokenized with their name."""

    @pytest.mark.parametrize(
        ("markdown", "name"),
        [
            ("1. first\n", "ordered_list"),
            ("```\ncode\n```\n", "fence"),
            ("    indented code\n", "code_block"),
            ("> quoted\n", "blockquote"),
            ("***\n", "hr"),
            ("<div>\nraw\n</div>\n", "html_block"),
        ],
    )
    def test_other_block_name(self, markdown: str, name: str) -> None:
        assert tokenize(markdown) == [OtherBlock(name=name)]

    def test_empty_text_has_no_blocks(self) -> None:
        assert tokenize("") == []
        assert tokenize("\n   \n") == []


def _nested_list(depth: int) -> str:
    return "".join("  " * index + f"- l{index}\n" for index in range(depth))


class TestNesting:
    """Deeply nested lists are either tokenized in full or rejected."""

    def test_ten_levels_keep_innermost_item(self) -> None:
        """Items below the preset's default nesting limit are not dropped."""
        (block,) = tokenize(_nested_list(10))

        for index in range(9):
            (item,) = block.items
            assert isinstance(item, NestedItem)
            assert item.blocks[0] == Paragraph(content=[Text(text=f"l{index}")])
            block = item.blocks[1]

        assert block == UnorderedList(items=[SimpleItem(content=[Text(text="l9")])])

    def test_beyond_parser_limit_raises(self) -> None:
        with pytest.raises(ParseError, match="nests too deeply"):
            tokenize(_nested_list(60))
