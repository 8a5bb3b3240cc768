"""Custom exceptions for md2json."""

from __future__ import annotations


class Md2jsonError(Exception):
    """Base exception for md2json operations."""


class ParseError(Md2jsonError):
    """Error while adapting the Markdown syntax tree into blocks."""


class ConversionError(Md2jsonError):
    """Error while building the outline tree from blocks."""


class UnsupportedBlockError(ConversionError):
    """A block kind other than a heading or unordered list was found."""

    def __init__(self, block_kind: str) -> None:
        self.block_kind = block_kind
        super().__init__(f"Unsupported block: {block_kind}")


class MalformedNestedItemError(ConversionError):
    """A nested list item does not have the paragraph-then-block shape."""


class EmptyDocumentError(ConversionError):
    """The input contains no blocks to convert."""


class OutlineTooDeepError(ConversionError):
    """The outline nests deeper than the builder supports."""
