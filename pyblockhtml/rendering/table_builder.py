"""
Table row rendering.

Header and body rows share one shape: each row becomes ``<tr>\\n`` + cells
+ ``\\n</tr>\\n``, each cell wraps its inline-converted content in the
requested cell tag. Column alignments become a ``<colgroup>`` of ``<col>``
tags.
"""

from __future__ import annotations

from enum import Enum
from typing import List, Sequence

from tinyhtml import h, raw

from ..document import InlineContent
from .renderer_iface import RenderContext


class CellTag(str, Enum):
    HEADER = "th"
    DATA = "td"


def _cell_tag(tag: str) -> CellTag:
    try:
        return CellTag(tag)
    except ValueError:
        raise ValueError(f"cell_tag must be 'th' or 'td', got {tag!r}") from None


def render_cells(
    ctx: RenderContext, row: Sequence[InlineContent], cell_tag: str
) -> str:
    tag = _cell_tag(cell_tag).value
    return "".join(h(tag)(raw(ctx.convert(cell))).render() for cell in row)


def render_rows(
    ctx: RenderContext, rows: Sequence[Sequence[InlineContent]], cell_tag: str
) -> str:
    out: List[str] = []
    for row in rows:
        out.append(f"<tr>\n{render_cells(ctx, row, cell_tag)}\n</tr>\n")
    return "".join(out)


def render_colgroup(alignments: Sequence[str]) -> str:
    cols = "".join(h("col", align=align).render() + "\n" for align in alignments)
    return f"<colgroup>\n{cols}</colgroup>\n"
