"""
Block tree and inline span value types.

Blocks are produced by an upstream markdown parser and consumed, read-only,
by the renderer. Every variant except the HTML passthrough blocks and id
definitions may carry a raw attribute annotation (``attrs``), e.g.
``.note #intro lang=en``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union

# ----------------------------- Inline spans ----------------------------------


@dataclass(frozen=True)
class Text:
    text: str


@dataclass(frozen=True)
class Emphasis:
    content: Tuple["InlineSpan", ...]


@dataclass(frozen=True)
class Strong:
    content: Tuple["InlineSpan", ...]


@dataclass(frozen=True)
class CodeSpan:
    text: str


@dataclass(frozen=True)
class Link:
    """A link. ``ref`` names an IdDefinition to resolve url/title from."""

    content: Tuple["InlineSpan", ...]
    url: Optional[str] = None
    title: Optional[str] = None
    ref: Optional[str] = None


@dataclass(frozen=True)
class Image:
    alt: str
    path: Optional[str] = None
    title: Optional[str] = None
    ref: Optional[str] = None


@dataclass(frozen=True)
class LineBreak:
    pass


InlineSpan = Union[Text, Emphasis, Strong, CodeSpan, Link, Image, LineBreak]

# Raw text, raw lines, or already segmented spans
InlineContent = Union[str, Sequence[Union[str, InlineSpan]]]

# ----------------------------- Blocks ----------------------------------------


@dataclass(frozen=True)
class Paragraph:
    lines: InlineContent
    attrs: Optional[str] = None


@dataclass(frozen=True)
class RawHtmlBlock:
    """Block-level HTML, emitted verbatim."""

    html: Tuple[str, ...]


@dataclass(frozen=True)
class ForeignHtmlBlock:
    """HTML the parser did not recognise as a block tag, emitted verbatim."""

    html: Tuple[str, ...]


@dataclass(frozen=True)
class Ruler:
    type: str  # "-" | "_" | "*"
    attrs: Optional[str] = None


@dataclass(frozen=True)
class Heading:
    level: int
    content: str  # already inline-converted
    attrs: Optional[str] = None


@dataclass(frozen=True)
class BlockQuote:
    blocks: Tuple["Block", ...]
    attrs: Optional[str] = None


@dataclass(frozen=True)
class Table:
    rows: Tuple[Tuple[InlineContent, ...], ...]
    alignments: Tuple[str, ...]
    header: Optional[Tuple[InlineContent, ...]] = None
    attrs: Optional[str] = None


@dataclass(frozen=True)
class CodeBlock:
    lines: Tuple[str, ...]
    language: Optional[str] = None
    attrs: Optional[str] = None


@dataclass(frozen=True)
class List:
    type: str  # "ul" | "ol"
    blocks: Tuple["ListItem", ...]
    attrs: Optional[str] = None


@dataclass(frozen=True)
class ListItem:
    blocks: Tuple["Block", ...]
    spaced: bool = False
    attrs: Optional[str] = None


@dataclass(frozen=True)
class IdDefinition:
    """Reference link target; contributes no output of its own."""

    id: str
    url: str
    title: Optional[str] = None


Block = Union[
    Paragraph,
    RawHtmlBlock,
    ForeignHtmlBlock,
    Ruler,
    Heading,
    BlockQuote,
    Table,
    CodeBlock,
    List,
    ListItem,
    IdDefinition,
]

BLOCK_TYPES: Tuple[type, ...] = (
    Paragraph,
    RawHtmlBlock,
    ForeignHtmlBlock,
    Ruler,
    Heading,
    BlockQuote,
    Table,
    CodeBlock,
    List,
    ListItem,
    IdDefinition,
)

__all__ = [
    "Block",
    "BLOCK_TYPES",
    "BlockQuote",
    "CodeBlock",
    "CodeSpan",
    "Emphasis",
    "ForeignHtmlBlock",
    "Heading",
    "IdDefinition",
    "Image",
    "InlineContent",
    "InlineSpan",
    "LineBreak",
    "Link",
    "List",
    "ListItem",
    "Paragraph",
    "RawHtmlBlock",
    "Ruler",
    "Strong",
    "Table",
    "Text",
]
