"""Wire models for JSON block documents."""

from .document import DocumentModel, load_document, load_document_json

__all__ = ["DocumentModel", "load_document", "load_document_json"]
