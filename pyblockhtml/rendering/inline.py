"""
Inline HTML helpers and the default inline converter.

The block renderer treats inline conversion as an external collaborator
(see renderer_iface.InlineConverter). `EscapingInlineConverter` is the
stock implementation: it escapes raw text and renders already segmented
spans (emphasis, strong, code spans, links, images, line breaks) with the
helpers below. Markup parsing of raw text is left to the upstream parser.
"""

from __future__ import annotations

import html
import logging
from typing import List, Optional, Tuple

from tinyhtml import h, raw

from ..document import (
    CodeSpan,
    Emphasis,
    IdDefinition,
    Image,
    InlineContent,
    InlineSpan,
    LineBreak,
    Link,
    Strong,
    Text,
)
from .renderer_iface import RenderContext

LOGGER = logging.getLogger(__name__)


def _void(tag: h) -> str:
    # Void elements close the same way as the block-level <hr/>
    return tag.render()[:-1] + "/>"


def br() -> str:
    return _void(h("br"))


def codespan(text: str) -> str:
    return h("code", **{"class": "inline"})(raw(text)).render()


def em(text: str) -> str:
    return h("em")(raw(text)).render()


def strong(text: str) -> str:
    return h("strong")(raw(text)).render()


def link(url: str, text: str, title: Optional[str] = None) -> str:
    attrs = {"href": url}
    if title:
        attrs["title"] = title
    return h("a", **attrs)(raw(text)).render()


def image(path: str, alt: str, title: Optional[str] = None) -> str:
    attrs = {"src": path, "alt": alt}
    if title:
        attrs["title"] = title
    return _void(h("img", **attrs))


def _resolve(
    ctx: RenderContext, ref: Optional[str], url: Optional[str], title: Optional[str]
) -> Tuple[Optional[str], Optional[str]]:
    if url or not ref:
        return url, title
    target: Optional[IdDefinition] = (ctx.links or {}).get(ref)
    if target is None:
        LOGGER.debug("inline.unresolved_ref id=%s", ref)
        return None, title
    return target.url, title or target.title


class EscapingInlineConverter:
    """Escape raw text; render segmented spans with the inline helpers."""

    def convert(self, content: InlineContent, ctx: RenderContext) -> str:
        if isinstance(content, str):
            return html.escape(content)
        out: List[str] = []
        prev_was_line = False
        for item in content:
            if isinstance(item, str):
                # Consecutive raw strings are source lines
                if prev_was_line:
                    out.append("\n")
                out.append(html.escape(item))
                prev_was_line = True
            else:
                out.append(self.render_span(item, ctx))
                prev_was_line = False
        return "".join(out)

    def render_span(self, span: InlineSpan, ctx: RenderContext) -> str:
        if isinstance(span, Text):
            return html.escape(span.text)
        if isinstance(span, Emphasis):
            return em(self.convert(span.content, ctx))
        if isinstance(span, Strong):
            return strong(self.convert(span.content, ctx))
        if isinstance(span, CodeSpan):
            return codespan(html.escape(span.text))
        if isinstance(span, LineBreak):
            return br()
        if isinstance(span, Link):
            text = self.convert(span.content, ctx)
            url, title = _resolve(ctx, span.ref, span.url, span.title)
            if url is None:
                return text
            return link(url, text, title)
        if isinstance(span, Image):
            path, title = _resolve(ctx, span.ref, span.path, span.title)
            if path is None:
                return html.escape(span.alt)
            return image(path, span.alt, title)
        raise TypeError(f"Unknown inline span {type(span).__name__}")
