"""
Renderer collaborator interface.

Defines the minimal inline-conversion seam (`InlineConverter`) the block
renderer requires, and the read-only `RenderContext` threaded through every
render call. The block renderer never converts inline content itself; it
only calls this interface.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Mapping, Optional, Protocol

from ..document import IdDefinition, InlineContent
from .options import RenderConfig


class InlineConverter(Protocol):
    """Turns inline content into HTML-safe inline markup."""

    def convert(self, content: InlineContent, ctx: "RenderContext") -> str: ...


@dataclass(frozen=True)
class RenderContext:
    """Opaque to the block renderer; consumed by the inline converter."""

    converter: InlineConverter
    config: RenderConfig = field(default_factory=RenderConfig)
    links: Optional[Mapping[str, IdDefinition]] = None

    def convert(self, content: InlineContent) -> str:
        return self.converter.convert(content, self)

    def with_links(self, links: Mapping[str, IdDefinition]) -> "RenderContext":
        return replace(self, links=dict(links))
