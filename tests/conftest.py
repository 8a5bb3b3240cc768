"""Test setup for md2json."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


@pytest.fixture
def todo_markdown() -> str:
    """Outline with two top-level headings, nested headings and a nested list."""
    return (
        "# Todo\n"
        "\n"
        "## Work\n"
        "- one\n"
        "    - one.1\n"
        "- two\n"
        "- three\n"
        "\n"
        "## Home\n"
        "- order shelving\n"
        "\n"
        "# SaaS\n"
        "- [ ] item\n"
    )
