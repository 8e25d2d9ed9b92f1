"""
Pure block renderer.

Converts a sequence of parsed blocks into HTML. No I/O. Container blocks
(blockquotes, lists, list items) recurse through `render`; leaf text goes
through the context's inline converter.
"""

from __future__ import annotations

import html
import logging
import re
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from ..document import (
    BLOCK_TYPES,
    Block,
    BlockQuote,
    CodeBlock,
    ForeignHtmlBlock,
    Heading,
    IdDefinition,
    List as ListBlock,
    ListItem,
    Paragraph,
    RawHtmlBlock,
    Ruler,
    Table,
)
from ..exceptions import UnknownBlockVariant
from .attributes import start_tag
from .inline import EscapingInlineConverter
from .options import RenderConfig
from .renderer_iface import InlineConverter, RenderContext
from .table_builder import render_colgroup, render_rows

LOGGER = logging.getLogger(__name__)

# Bare paragraph markers, plus the newline a paragraph ends with
_TIGHT_MARKERS = re.compile(r"<p>|</p>\n?")


def _open(
    tag: str,
    attrs: Optional[str],
    ctx: RenderContext,
    defaults: Optional[Mapping[str, Sequence[str]]] = None,
    *,
    self_closing: bool = False,
) -> str:
    return start_tag(
        tag,
        attrs,
        defaults,
        self_closing=self_closing,
        order=ctx.config.attr_order,
    )


def _render_paragraph(block: Paragraph, ctx: RenderContext) -> str:
    return f"{_open('p', block.attrs, ctx)}{ctx.convert(block.lines)}</p>\n"


def _render_html(block, ctx: RenderContext) -> str:
    return "\n".join(block.html)


def _render_ruler(block: Ruler, ctx: RenderContext) -> str:
    defaults = {"class": [ctx.config.ruler_class(block.type)]}
    return _open("hr", block.attrs, ctx, defaults, self_closing=True) + "\n"


def _render_heading(block: Heading, ctx: RenderContext) -> str:
    tag = f"h{block.level}"
    return f"{_open(tag, block.attrs, ctx)}{block.content}</{tag}>\n"


def _render_blockquote(block: BlockQuote, ctx: RenderContext) -> str:
    body = render(block.blocks, ctx)
    return f"{_open('blockquote', block.attrs, ctx)}{body}</blockquote>\n"


def _render_table(block: Table, ctx: RenderContext) -> str:
    out = [_open("table", block.attrs, ctx), "\n", render_colgroup(block.alignments)]
    if block.header is not None:
        out += ["<thead>\n", render_rows(ctx, [block.header], "th"), "</thead>\n"]
    out += [render_rows(ctx, block.rows, "td"), "</table>\n"]
    return "".join(out)


def _render_code(block: CodeBlock, ctx: RenderContext) -> str:
    cls = f' class="{html.escape(block.language)}"' if block.language else ""
    lines = "".join(html.escape(line) + "\n" for line in block.lines)
    return f"{_open('pre', block.attrs, ctx)}<code{cls}>\n{lines}</code></pre>\n"


def _render_list(block: ListBlock, ctx: RenderContext) -> str:
    content = render(block.blocks, ctx)
    return f"{_open(block.type, block.attrs, ctx)}\n{content}</{block.type}>\n"


def _is_tight(block: ListItem, ctx: RenderContext) -> bool:
    return (
        ctx.config.strip_tight_paragraphs
        and not block.spaced
        and len(block.blocks) == 1
        and isinstance(block.blocks[0], Paragraph)
        # an annotated <p ...> has nowhere else to keep its attributes
        and not block.blocks[0].attrs
    )


def _render_list_item(block: ListItem, ctx: RenderContext) -> str:
    content = render(block.blocks, ctx)
    if _is_tight(block, ctx):
        content = _TIGHT_MARKERS.sub("", content)
    return f"{_open('li', block.attrs, ctx)}{content}</li>\n"


def _render_id_definition(block: IdDefinition, ctx: RenderContext) -> str:
    return ""


_HANDLERS: Dict[type, Callable[..., str]] = {
    Paragraph: _render_paragraph,
    RawHtmlBlock: _render_html,
    ForeignHtmlBlock: _render_html,
    Ruler: _render_ruler,
    Heading: _render_heading,
    BlockQuote: _render_blockquote,
    Table: _render_table,
    CodeBlock: _render_code,
    ListBlock: _render_list,
    ListItem: _render_list_item,
    IdDefinition: _render_id_definition,
}

_unhandled = [t.__name__ for t in BLOCK_TYPES if t not in _HANDLERS]
if _unhandled:
    raise RuntimeError(f"No renderer registered for block types: {_unhandled}")


def render_block(block: Block, ctx: RenderContext) -> str:
    """Render one block. Raises UnknownBlockVariant for anything else."""
    for cls in type(block).__mro__:
        handler = _HANDLERS.get(cls)
        if handler is not None:
            LOGGER.debug("render.block kind=%s", cls.__name__)
            return handler(block, ctx)
    raise UnknownBlockVariant(block)


def collect_links(blocks: Sequence[Block]) -> Dict[str, IdDefinition]:
    """Gather every IdDefinition in the tree, containers included.

    Definitions are document-global; the first one seen for an id wins.
    """
    links: Dict[str, IdDefinition] = {}
    for block in blocks:
        if isinstance(block, IdDefinition):
            links.setdefault(block.id, block)
        elif isinstance(block, (BlockQuote, ListBlock, ListItem)):
            for id_, definition in collect_links(block.blocks).items():
                links.setdefault(id_, definition)
    return links


def render(blocks: Sequence[Block], ctx: RenderContext) -> str:
    """Render ``blocks`` in order and concatenate the results."""
    if ctx.links is None:
        ctx = ctx.with_links(collect_links(blocks))
    fragments: List[str] = []
    for block in blocks:
        fragments.append(render_block(block, ctx))
    return "".join(fragments)


def render_page(title: str, html_fragment: str, extra_css: str = "") -> str:
    return (
        '<!doctype html><meta charset="utf-8">'
        '<meta name="color-scheme" content="light dark">'
        f"<title>{html.escape(title)}</title>"
        "<style>"
        "body{font-family:-apple-system,BlinkMacSystemFont,Segoe UI,Roboto,Helvetica,Arial,sans-serif;line-height:1.5;max-width:46rem;margin:2rem auto;padding:0 1rem}"
        "hr{border:0;border-top-style:solid;border-color:#ccc}"
        "hr.thin{border-top-width:1px}"
        "hr.medium{border-top-width:2px}"
        "hr.thick{border-top-width:4px}"
        "pre{white-space:pre-wrap;background:#f6f8fa;padding:.5rem .75rem}"
        "code.inline{background:#f6f8fa;padding:0 .2em}"
        "blockquote{margin:.5em 0 .5em 1em;padding-left:.8em;border-left:3px solid #ddd}"
        "table{border-collapse:collapse;margin:.5rem 0}"
        "td,th{border:1px solid #ccc;padding:.25rem .5rem;vertical-align:top}"
        "img{max-width:100%;height:auto}"
        "@media (prefers-color-scheme: dark){"
        "body{background:#111;color:#eee}"
        "a{color:#8ab4f8}"
        "hr{border-color:#555}"
        "blockquote{border-left-color:#444}"
        "td,th{border-color:#555}"
        "pre,code.inline{background:#1b1b1b;color:#eee}"
        "}"
        f'{extra_css}</style><div class="document">{html_fragment}</div>'
    )


class BlockRenderer:
    """Class-based interface for block rendering."""

    def __init__(
        self,
        config: Optional[RenderConfig] = None,
        converter: Optional[InlineConverter] = None,
    ):
        self.config = config or RenderConfig()
        self.converter = converter or EscapingInlineConverter()

    def context(self) -> RenderContext:
        return RenderContext(converter=self.converter, config=self.config)

    def render(self, blocks: Sequence[Block]) -> str:
        """Render the blocks to an HTML fragment string."""
        fragment = render(blocks, self.context())
        if self.config.debug:
            LOGGER.info(
                "render.document blocks=%d chars=%d", len(blocks), len(fragment)
            )
        return fragment

    def render_full_page(self, title: str, html_fragment: str) -> str:
        """Wrap an HTML fragment in a full page with CSS."""
        return render_page(title, html_fragment)
