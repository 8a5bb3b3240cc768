"""md2json: convert Markdown outlines into nested JSON."""

from md2json.conversion import markdown_to_json, markdown_to_outline
from md2json.exceptions import (
    ConversionError,
    EmptyDocumentError,
    MalformedNestedItemError,
    Md2jsonError,
    OutlineTooDeepError,
    ParseError,
    UnsupportedBlockError,
)
from md2json.markdown import render_spans
from md2json.outline import build_outline, consume_block, consume_heading_group
from md2json.schemas import Group, Leaf, OutlineNode, Sequence
from md2json.tokenizer import tokenize

__all__ = [
    "ConversionError",
    "EmptyDocumentError",
    "Group",
    "Leaf",
    "MalformedNestedItemError",
    "Md2jsonError",
    "OutlineTooDeepError",
    "OutlineNode",
    "ParseError",
    "Sequence",
    "UnsupportedBlockError",
    "build_outline",
    "consume_block",
    "consume_heading_group",
    "markdown_to_json",
    "markdown_to_outline",
    "render_spans",
    "tokenize",
]
