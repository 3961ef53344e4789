"""Folio: front-matter article store and listings."""

from folio.core.exceptions import (
    DocumentParseError,
    FolioError,
    InvalidMetadataError,
    MalformedDocumentError,
    TruncatedMetadataError,
    UnsupportedFieldShapeError,
)
from folio.core.frontmatter import dump_document, parse_document, parse_document_file
from folio.core.listing import order_documents, published_listing
from folio.core.store import DocumentStore, load_directory, parse_batch
from folio.core.types import BatchResult, Document, ParseFailure, PostStatus

__version__ = "0.1.0"
__all__ = [
    "BatchResult",
    "Document",
    "DocumentParseError",
    "DocumentStore",
    "FolioError",
    "InvalidMetadataError",
    "MalformedDocumentError",
    "ParseFailure",
    "PostStatus",
    "TruncatedMetadataError",
    "UnsupportedFieldShapeError",
    "dump_document",
    "load_directory",
    "order_documents",
    "parse_batch",
    "parse_document",
    "parse_document_file",
    "published_listing",
]
