"""
Attribute annotations for block-level HTML tags.

A block may carry a Pandoc-style annotation such as::

    .note .wide #intro lang=en title='A title' data-x="1 2"

`expand` tokenizes it into an AttributeMap (name → ordered values),
`serialize` renders the map as an HTML attribute fragment, and
`start_tag` / `add_attrs` put the result on a block's outer opening tag.

Accepted forms, tried in this order at each position:
  1. nothing but whitespace left → done
  2. ``.token``        → class
  3. ``#token``        → id
  4. ``name='value'``
  5. ``name="value"``
  6. ``name=value``
Anything else is a MalformedAttributeSyntax error.
"""

from __future__ import annotations

import logging
import re
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

from ..exceptions import MalformedAttributeSyntax
from .options import APPEND, PREPEND

LOGGER = logging.getLogger(__name__)

AttributeMap = Dict[str, List[str]]

_BLANK = re.compile(r"\s*\Z")
_CLASS = re.compile(r"\.(\S+)\s*")
_ID = re.compile(r"#(\S+)\s*")
_SINGLE_QUOTED = re.compile(r"(\S+)='([^']*)'\s*")
_DOUBLE_QUOTED = re.compile(r'(\S+)="([^"]*)"\s*')
_BAREWORD = re.compile(r"(\S+)=(\S+)\s*")

_NAMED_FORMS: Tuple[Tuple[re.Pattern, str], ...] = ((_CLASS, "class"), (_ID, "id"))
_PAIR_FORMS: Tuple[re.Pattern, ...] = (_SINGLE_QUOTED, _DOUBLE_QUOTED, _BAREWORD)


def _add_value(attrs: AttributeMap, name: str, value: str, order: str) -> None:
    values = attrs.setdefault(name, [])
    if order == PREPEND:
        values.insert(0, value)
    else:
        values.append(value)


def _next_attribute(raw: str, pos: int) -> Optional[Tuple[str, str, int]]:
    for pattern, name in _NAMED_FORMS:
        m = pattern.match(raw, pos)
        if m:
            return name, m.group(1), m.end()
    for pattern in _PAIR_FORMS:
        m = pattern.match(raw, pos)
        if m:
            return m.group(1), m.group(2), m.end()
    return None


def expand(
    base: Optional[Mapping[str, Sequence[str]]],
    raw: Optional[str],
    order: str = PREPEND,
) -> AttributeMap:
    """Return a new AttributeMap: ``base`` augmented with the attributes in ``raw``.

    With ``order="prepend"`` each parsed value goes in front of the values
    already recorded for its name, so ``.a .b`` yields ``class: [b, a]``.
    ``order="append"`` keeps source order.
    """
    if order not in (PREPEND, APPEND):
        raise ValueError(f"Unknown attribute order {order!r}")

    attrs: AttributeMap = {name: list(values) for name, values in (base or {}).items()}
    if not raw:
        return attrs

    pos = len(raw) - len(raw.lstrip())
    while not _BLANK.match(raw, pos):
        found = _next_attribute(raw, pos)
        if found is None:
            raise MalformedAttributeSyntax(raw[pos:], raw)
        name, value, pos = found
        LOGGER.debug("attrs.expand name=%s value=%r", name, value)
        _add_value(attrs, name, value, order)
    return attrs


def serialize(attrs: Mapping[str, Sequence[str]]) -> str:
    """Render ``name="v1 v2"`` pairs separated by single spaces."""
    return " ".join(f'{name}="{" ".join(values)}"' for name, values in attrs.items())


def start_tag(
    tag: str,
    raw_attrs: Optional[str] = None,
    defaults: Optional[Mapping[str, Sequence[str]]] = None,
    *,
    self_closing: bool = False,
    order: str = PREPEND,
) -> str:
    """Build an opening tag carrying the merged default and declared attributes."""
    attr_text = ""
    if raw_attrs or defaults:
        attr_text = serialize(expand(defaults, raw_attrs, order))
    parts = [tag, attr_text] if attr_text else [tag]
    close = "/>" if self_closing else ">"
    return f"<{' '.join(parts)}{close}"


def add_attrs(
    html: str,
    raw_attrs: Optional[str],
    defaults: Optional[Mapping[str, Sequence[str]]] = None,
    order: str = PREPEND,
) -> str:
    """Insert the merged attributes before the first ``>`` of ``html``.

    Only the first ``>`` is touched; ``html`` is expected to start with the
    opening tag the attributes belong to.
    """
    if not raw_attrs and not defaults:
        return html
    attr_text = serialize(expand(defaults, raw_attrs, order))
    if not attr_text:
        return html
    return html.replace(">", f" {attr_text}>", 1)


__all__ = ["AttributeMap", "add_attrs", "expand", "serialize", "start_tag"]
