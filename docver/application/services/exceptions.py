"""Custom exceptions for the document version store."""

from typing import Any, Optional


class DocumentStoreError(Exception):
    """Base class for every error raised by docver."""


class ValidationError(DocumentStoreError, ValueError):
    """Raised when a required input is missing, of the wrong type or out of range.

    Always raised before the store is touched.
    """

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.field = field


class StoreError(DocumentStoreError):
    """Raised when a store statement fails.

    The message is generic; the driver error is chained as ``__cause__``.
    """


class DocumentNotFoundError(DocumentStoreError, LookupError):
    """Raised when a write targets a document that does not exist."""

    def __init__(self, document_id: int):
        super().__init__(f"Document {document_id} does not exist")
        self.document_id = document_id


class PathRewriteError(DocumentStoreError, ValueError):
    """Raised when a version path cannot be split into folder and filename."""

    def __init__(self, file_path: str, reason: str):
        super().__init__(f"Cannot rewrite path {file_path!r}: {reason}")
        self.file_path = file_path


def require(value: Any, field: str, message: str) -> None:
    """Raise ValidationError if ``value`` is None or empty."""
    if value is None:
        raise ValidationError(message, field)
    if isinstance(value, str) and not value.strip():
        raise ValidationError(message, field)
