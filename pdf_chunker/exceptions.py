"""
Custom exceptions for PDF Chunker.

Every error is fatal to a split run: nothing is retried and chunks that were
already written stay on disk.
"""

from pathlib import Path
from typing import Optional, Union


class PDFChunkerException(Exception):
    """Base exception for all PDF Chunker errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF chunker error occurred."


class InvalidDirectiveError(PDFChunkerException):
    """Raised when a splitting directive cannot be parsed or resolves to zero."""

    @property
    def default_message(self) -> str:
        return "Invalid splitting directive."


class EmptyDocumentError(PDFChunkerException):
    """Raised when a document without pages is planned or split."""

    @property
    def default_message(self) -> str:
        return "Document has no pages to split."


class DocumentLoadError(PDFChunkerException):
    """Raised when the source document cannot be opened or parsed."""

    @property
    def default_message(self) -> str:
        return "Cannot load document."


class EncryptedPDFError(DocumentLoadError):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class OutputDirectoryError(PDFChunkerException):
    """Raised when the output directory cannot be created or written to."""

    @property
    def default_message(self) -> str:
        return "Cannot create output directory."


class ChunkWriteError(PDFChunkerException):
    """Raised when a single chunk cannot be serialized."""

    def __init__(
        self,
        message: str = "",
        *,
        index: Optional[int] = None,
        destination: Optional[Union[str, Path]] = None,
    ) -> None:
        self.index = index
        self.destination = str(destination) if destination is not None else None
        super().__init__(message)

    @property
    def default_message(self) -> str:
        if self.index is not None:
            return f"Cannot write chunk {self.index}."
        return "Cannot write chunk."
