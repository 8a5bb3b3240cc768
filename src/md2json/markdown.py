"""Render inline spans back into Markdown text.

The rendered text is used both as outline keys and as leaf values, so it keeps
the inline markup of the source (``*em*``, ``**strong**``, ``[text](url)``...)
rather than stripping it.
"""

from __future__ import annotations

from typing import Iterable

from md2json.schemas import (
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

_HARD_BREAK = "  \n"
_SOFT_BREAK = "\n"


def render_spans(spans: Iterable[Span]) -> str:
    """Render a sequence of inline spans as canonical Markdown text."""
    return "".join(_render_span(span) for span in spans)


def _render_span(span: Span) -> str:
    if isinstance(span, Text):
        return span.text

    if isinstance(span, Code):
        return f"{span.markup}{span.text}{span.markup}"

    if isinstance(span, (Emphasis, Strong, Strikethrough)):
        return f"{span.markup}{render_spans(span.children)}{span.markup}"

    if isinstance(span, Link):
        text = render_spans(span.children)
        if span.autolink:
            return f"<{text}>"
        return f"[{text}]({_destination(span.href, span.title)})"

    if isinstance(span, Image):
        return f"![{span.alt}]({_destination(span.src, span.title)})"

    if isinstance(span, InlineHtml):
        return span.text

    if isinstance(span, HardBreak):
        return _HARD_BREAK

    if isinstance(span, SoftBreak):
        return _SOFT_BREAK

    raise TypeError(f"Unknown inline span: {span!r}")


def _destination(url: str, title: str | None) -> str:
    if title:
        escaped = title.replace('"', '\\"')
        return f'{url} "{escaped}"'
    return url
