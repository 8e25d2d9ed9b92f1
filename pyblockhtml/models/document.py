"""
Pydantic models for block trees serialized as JSON.

Every block and span object carries a ``kind`` discriminator:

    blocks: para, html, html_other, ruler, heading, blockquote, table,
            code, list, list_item, id_def
    spans:  text, em, strong, code, link, image, br

Inline content is either a string, or a list mixing raw lines (strings) and
span objects. Models convert to the frozen `pyblockhtml.document` types via
``to_block()`` / ``to_span()``.
"""

from __future__ import annotations

import json
import logging
from typing import Annotated, Any, List, Literal, Optional, Tuple, Union

from pydantic import Field, ValidationError

from .. import document as doc
from ..exceptions import DocumentLoadError
from ._base import WireModel

LOGGER = logging.getLogger(__name__)

# ─── Inline spans ────────────────────────────────────────────────────────────


class TextModel(WireModel):
    kind: Literal["text"]
    text: str

    def to_span(self) -> doc.Text:
        return doc.Text(self.text)


class EmphasisModel(WireModel):
    kind: Literal["em"]
    content: "ContentModel"

    def to_span(self) -> doc.Emphasis:
        return doc.Emphasis(_spans(self.content))


class StrongModel(WireModel):
    kind: Literal["strong"]
    content: "ContentModel"

    def to_span(self) -> doc.Strong:
        return doc.Strong(_spans(self.content))


class CodeSpanModel(WireModel):
    kind: Literal["code"]
    text: str

    def to_span(self) -> doc.CodeSpan:
        return doc.CodeSpan(self.text)


class LinkModel(WireModel):
    kind: Literal["link"]
    content: "ContentModel"
    url: Optional[str] = None
    title: Optional[str] = None
    ref: Optional[str] = None

    def to_span(self) -> doc.Link:
        return doc.Link(
            content=_spans(self.content), url=self.url, title=self.title, ref=self.ref
        )


class ImageModel(WireModel):
    kind: Literal["image"]
    alt: str = ""
    path: Optional[str] = None
    title: Optional[str] = None
    ref: Optional[str] = None

    def to_span(self) -> doc.Image:
        return doc.Image(alt=self.alt, path=self.path, title=self.title, ref=self.ref)


class LineBreakModel(WireModel):
    kind: Literal["br"]

    def to_span(self) -> doc.LineBreak:
        return doc.LineBreak()


SpanModel = Annotated[
    Union[
        TextModel,
        EmphasisModel,
        StrongModel,
        CodeSpanModel,
        LinkModel,
        ImageModel,
        LineBreakModel,
    ],
    Field(discriminator="kind"),
]

ContentModel = Union[str, List[Union[str, SpanModel]]]


def _content(content: ContentModel) -> doc.InlineContent:
    if isinstance(content, str):
        return content
    return tuple(item if isinstance(item, str) else item.to_span() for item in content)


def _spans(content: ContentModel) -> Tuple[Any, ...]:
    if isinstance(content, str):
        return (doc.Text(content),)
    return tuple(
        doc.Text(item) if isinstance(item, str) else item.to_span() for item in content
    )


# ─── Blocks ──────────────────────────────────────────────────────────────────


class ParagraphModel(WireModel):
    kind: Literal["para"]
    lines: ContentModel
    attrs: Optional[str] = None

    def to_block(self) -> doc.Paragraph:
        return doc.Paragraph(lines=_content(self.lines), attrs=self.attrs)


class RawHtmlModel(WireModel):
    kind: Literal["html"]
    html: List[str]

    def to_block(self) -> doc.RawHtmlBlock:
        return doc.RawHtmlBlock(html=tuple(self.html))


class ForeignHtmlModel(WireModel):
    kind: Literal["html_other"]
    html: List[str]

    def to_block(self) -> doc.ForeignHtmlBlock:
        return doc.ForeignHtmlBlock(html=tuple(self.html))


class RulerModel(WireModel):
    kind: Literal["ruler"]
    type: Literal["-", "_", "*"]
    attrs: Optional[str] = None

    def to_block(self) -> doc.Ruler:
        return doc.Ruler(type=self.type, attrs=self.attrs)


class HeadingModel(WireModel):
    kind: Literal["heading"]
    level: int = Field(..., ge=1, le=6)
    content: str
    attrs: Optional[str] = None

    def to_block(self) -> doc.Heading:
        return doc.Heading(level=self.level, content=self.content, attrs=self.attrs)


class BlockQuoteModel(WireModel):
    kind: Literal["blockquote"]
    blocks: List["BlockModel"]
    attrs: Optional[str] = None

    def to_block(self) -> doc.BlockQuote:
        return doc.BlockQuote(blocks=_blocks(self.blocks), attrs=self.attrs)


class TableModel(WireModel):
    kind: Literal["table"]
    alignments: List[Literal["left", "center", "right"]]
    rows: List[List[ContentModel]] = Field(default_factory=list)
    header: Optional[List[ContentModel]] = None
    attrs: Optional[str] = None

    def to_block(self) -> doc.Table:
        header = None
        if self.header is not None:
            header = tuple(_content(cell) for cell in self.header)
        return doc.Table(
            rows=tuple(tuple(_content(cell) for cell in row) for row in self.rows),
            alignments=tuple(self.alignments),
            header=header,
            attrs=self.attrs,
        )


class CodeBlockModel(WireModel):
    kind: Literal["code"]
    lines: List[str]
    language: Optional[str] = None
    attrs: Optional[str] = None

    def to_block(self) -> doc.CodeBlock:
        return doc.CodeBlock(
            lines=tuple(self.lines), language=self.language, attrs=self.attrs
        )


class ListModel(WireModel):
    kind: Literal["list"]
    type: Literal["ul", "ol"] = "ul"
    blocks: List["BlockModel"]
    attrs: Optional[str] = None

    def to_block(self) -> doc.List:
        return doc.List(type=self.type, blocks=_blocks(self.blocks), attrs=self.attrs)


class ListItemModel(WireModel):
    kind: Literal["list_item"]
    blocks: List["BlockModel"]
    spaced: bool = False
    attrs: Optional[str] = None

    def to_block(self) -> doc.ListItem:
        return doc.ListItem(
            blocks=_blocks(self.blocks), spaced=self.spaced, attrs=self.attrs
        )


class IdDefinitionModel(WireModel):
    kind: Literal["id_def"]
    id: str
    url: str
    title: Optional[str] = None

    def to_block(self) -> doc.IdDefinition:
        return doc.IdDefinition(id=self.id, url=self.url, title=self.title)


BlockModel = Annotated[
    Union[
        ParagraphModel,
        RawHtmlModel,
        ForeignHtmlModel,
        RulerModel,
        HeadingModel,
        BlockQuoteModel,
        TableModel,
        CodeBlockModel,
        ListModel,
        ListItemModel,
        IdDefinitionModel,
    ],
    Field(discriminator="kind"),
]


def _blocks(blocks: List[Any]) -> Tuple[doc.Block, ...]:
    return tuple(b.to_block() for b in blocks)


class DocumentModel(WireModel):
    blocks: List[BlockModel]

    def to_blocks(self) -> Tuple[doc.Block, ...]:
        return _blocks(self.blocks)


for _model in (
    EmphasisModel,
    StrongModel,
    LinkModel,
    ParagraphModel,
    TableModel,
    BlockQuoteModel,
    ListModel,
    ListItemModel,
    DocumentModel,
):
    _model.model_rebuild()


# ─── Loading ─────────────────────────────────────────────────────────────────


def load_document(data: Any) -> Tuple[doc.Block, ...]:
    """Validate a decoded JSON document and return its blocks.

    Accepts either a list of block objects or ``{"blocks": [...]}``.
    """
    if isinstance(data, list):
        data = {"blocks": data}
    try:
        model = DocumentModel.model_validate(data)
    except ValidationError as e:
        raise DocumentLoadError(f"Invalid document: {e}") from e
    blocks = model.to_blocks()
    LOGGER.debug("document.load blocks=%d", len(blocks))
    return blocks


def load_document_json(text: Union[str, bytes]) -> Tuple[doc.Block, ...]:
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DocumentLoadError(f"Invalid JSON: {e}") from e
    return load_document(data)
