"""Library exceptions."""

from typing import Optional


class PyBlockHtmlException(Exception):
    """Generic pyblockhtml exception."""


class MalformedAttributeSyntax(PyBlockHtmlException, ValueError):
    """An attribute annotation contains text none of the known forms accept."""

    def __init__(self, remainder: str, source: Optional[str] = None):
        self.remainder = remainder
        self.source = source if source is not None else remainder
        self.offset = len(self.source) - len(remainder)
        message = f"Malformed attribute annotation at offset {self.offset}: {remainder!r}"
        super().__init__(message)


class UnknownBlockVariant(PyBlockHtmlException, TypeError):
    """The renderer was handed something that is not a known block."""

    def __init__(self, block: object):
        self.block = block
        super().__init__(f"Cannot render block of type {type(block).__name__}")


class DocumentLoadError(PyBlockHtmlException):
    """A JSON document could not be turned into blocks."""
