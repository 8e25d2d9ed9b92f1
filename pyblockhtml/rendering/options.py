"""
Render configuration for block → HTML output.

Centralizes behavior flags so callers can tune defaults without touching
core logic. All fields have defaults; ``attr_order`` additionally honours an
environment fallback so a whole process can switch policy without code
changes.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Mapping

PREPEND = "prepend"
APPEND = "append"


def _env_attr_order(default: str = PREPEND) -> str:
    """
    Determine the attribute value order from the environment.

    PYBLOCKHTML_ATTR_ORDER: prepend|append
    Convenience aliases: "reverse/legacy" -> prepend, "natural/source" -> append
    """
    raw = (os.getenv("PYBLOCKHTML_ATTR_ORDER") or default).strip().lower()

    if raw in {PREPEND, APPEND}:
        return raw
    if raw in {"reverse", "legacy"}:
        return PREPEND
    if raw in {"natural", "source"}:
        return APPEND

    return default


def _default_ruler_classes() -> Mapping[str, str]:
    return {"-": "thin", "_": "medium", "*": "thick"}


@dataclass(frozen=True)
class RenderConfig:
    # Logging/debug
    debug: bool = False

    # Default CSS class per ruler marker; explicit attributes add to it.
    ruler_classes: Mapping[str, str] = field(default_factory=_default_ruler_classes)

    # How repeated attribute names accumulate: "prepend" keeps the last parsed
    # value first, "append" keeps source order.
    attr_order: str = field(default_factory=_env_attr_order)

    # Drop <p> markers from single-paragraph, unspaced list items.
    strip_tight_paragraphs: bool = True

    def __post_init__(self) -> None:
        if self.attr_order not in (PREPEND, APPEND):
            raise ValueError(
                f"attr_order must be {PREPEND!r} or {APPEND!r}, got {self.attr_order!r}"
            )

    def ruler_class(self, marker: str) -> str:
        try:
            return self.ruler_classes[marker]
        except KeyError:
            raise ValueError(f"Unknown ruler marker {marker!r}") from None
