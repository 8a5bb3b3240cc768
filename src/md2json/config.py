"""Local configuration for md2json."""

from __future__ import annotations

import os


DEFAULT_LOG_LEVEL = "WARNING"
DEFAULT_LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

# Parser preset is fixed so the JSON output depends on stdin alone.
MARKDOWN_PRESET = "commonmark"
MARKDOWN_EXTRA_RULES = ("strikethrough",)
# The commonmark preset stops emitting block tokens past 20 nested levels.
MARKDOWN_MAX_NESTING = 100

# Nested constructs allowed in one outline; deeper input is rejected.
MAX_OUTLINE_DEPTH = 100

MD2JSON_LOG_LEVEL = os.getenv("MD2JSON_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
MD2JSON_LOG_FORMAT = os.getenv("MD2JSON_LOG_FORMAT", DEFAULT_LOG_FORMAT)
