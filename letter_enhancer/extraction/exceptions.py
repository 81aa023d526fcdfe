class ExtractionError(Exception):
    """Base exception for all text extraction errors."""


class DocumentParseError(ExtractionError):
    """Raised when a format library cannot read a document."""


class FileReadError(ExtractionError):
    """Raised when an uploaded file's bytes cannot be read."""
