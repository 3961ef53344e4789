"""Core exceptions for Folio."""

from __future__ import annotations


class FolioError(Exception):
    """Base exception for all Folio errors."""


class DocumentParseError(FolioError):
    """Base exception for per-document parse failures.

    Attributes:
        source: Identifier of the document that failed, when known.

    """

    def __init__(self, message: str, *, source: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.source = source

    def __str__(self) -> str:
        if self.source:
            return f"{self.source}: {self.message}"
        return self.message


class MalformedDocumentError(DocumentParseError):
    """Raised when the document does not start with a front-matter delimiter."""


class TruncatedMetadataError(DocumentParseError):
    """Raised when the front-matter block has no closing delimiter."""


class UnsupportedFieldShapeError(DocumentParseError):
    """Raised when a metadata value is nested deeper than the parser supports."""

    def __init__(self, message: str, *, path: str, source: str | None = None) -> None:
        super().__init__(f"{path}: {message}", source=source)
        self.path = path


class InvalidMetadataError(DocumentParseError):
    """Raised when the metadata block is not valid YAML or misses required fields."""
