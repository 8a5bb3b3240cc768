"""Inline span models produced by the tokenizer."""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field


class Text(BaseModel):
    """Plain text run."""

    kind: Literal["text"] = "text"
    text: str


class Code(BaseModel):
    """Inline code; ``markup`` is the backtick fence used in the source."""

    kind: Literal["code"] = "code"
    text: str
    markup: str = "`"


class Emphasis(BaseModel):
    kind: Literal["emphasis"] = "emphasis"
    children: list[Span] = Field(default_factory=list)
    markup: str = "*"


class Strong(BaseModel):
    kind: Literal["strong"] = "strong"
    children: list[Span] = Field(default_factory=list)
    markup: str = "**"


class Strikethrough(BaseModel):
    kind: Literal["strikethrough"] = "strikethrough"
    children: list[Span] = Field(default_factory=list)
    markup: str = "~~"


class Link(BaseModel):
    """A link; ``autolink`` marks the angle-bracket form ``<url>``."""

    kind: Literal["link"] = "link"
    children: list[Span] = Field(default_factory=list)
    href: str
    title: str | None = None
    autolink: bool = False


class Image(BaseModel):
    kind: Literal["image"] = "image"
    alt: str = ""
    src: str
    title: str | None = None


class InlineHtml(BaseModel):
    kind: Literal["html"] = "html"
    text: str


class SoftBreak(BaseModel):
    kind: Literal["softbreak"] = "softbreak"


class HardBreak(BaseModel):
    kind: Literal["hardbreak"] = "hardbreak"


Span = Annotated[
    Union[
        Text,
        Code,
        Emphasis,
        Strong,
        Strikethrough,
        Link,
        Image,
        InlineHtml,
        SoftBreak,
        HardBreak,
    ],
    Field(discriminator="kind"),
]

for _model in (Emphasis, Strong, Strikethrough, Link):
    _model.model_rebuild()
