"""Conversion pipeline for Markdown outline -> JSON."""

from __future__ import annotations

import logging

from pydantic_core import PydanticSerializationError

from md2json.exceptions import ConversionError
from md2json.outline import build_outline
from md2json.schemas import OutlineNode
from md2json.tokenizer import tokenize

logger = logging.getLogger(__name__)


def markdown_to_outline(text: str) -> OutlineNode:
    """Tokenize Markdown text and build its outline tree."""
    blocks = tokenize(text)
    return build_outline(blocks)


def markdown_to_json(text: str) -> str:
    """Convert Markdown text into a compact JSON document.

    Headings become objects, bullet lists become arrays and list items become
    strings. The output carries no trailing newline.
    """
    outline = markdown_to_outline(text)
    try:
        output = outline.model_dump_json()
    except PydanticSerializationError as exc:
        raise ConversionError(f"Could not serialize outline: {exc}") from exc
    logger.debug("Serialized outline to %d characters of JSON", len(output))
    return output
