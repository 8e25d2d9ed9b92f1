"""Public API for pyblockhtml."""

from .document import BLOCK_TYPES, Block
from .exceptions import (
    DocumentLoadError,
    MalformedAttributeSyntax,
    PyBlockHtmlException,
    UnknownBlockVariant,
)
from .rendering.attributes import add_attrs, expand, serialize
from .rendering.inline import EscapingInlineConverter
from .rendering.options import RenderConfig
from .rendering.renderer import BlockRenderer, render, render_page
from .rendering.renderer_iface import InlineConverter, RenderContext

__all__ = [
    "BLOCK_TYPES",
    "Block",
    "BlockRenderer",
    "DocumentLoadError",
    "EscapingInlineConverter",
    "InlineConverter",
    "MalformedAttributeSyntax",
    "PyBlockHtmlException",
    "RenderConfig",
    "RenderContext",
    "UnknownBlockVariant",
    "add_attrs",
    "expand",
    "render",
    "render_page",
    "serialize",
]
