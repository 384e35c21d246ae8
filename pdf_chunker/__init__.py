"""
PDF Chunker - split a PDF into contiguous, independently openable chunks.

A splitting directive is either a fixed number of pages per chunk or a target
number of chunks. The directive is planned into 1-based, inclusive page
ranges that cover every page exactly once, and each range is written to its
own ``chunk_<n>.pdf``.

Quick Start:
    >>> from pdf_chunker import split_pdf
    >>> result = split_pdf('input.pdf', 'output/', 'c5')
    >>> result.files_created

Planning without touching any file:
    >>> from pdf_chunker import plan, FixedSize
    >>> plan(10, FixedSize(3))
    [PageRange(start=1, end=3), PageRange(start=4, end=6), PageRange(start=7, end=9), PageRange(start=10, end=10)]

For CLI usage, use the 'pdf-chunker' command after installation.
"""

# Core classes
from pdf_chunker.splitter import PDFChunker, split_pdf
from pdf_chunker.extractor import ChunkExtractor, extract_chunk
from pdf_chunker.planner import plan, resolve_chunk_size, deletion_set, retention_set

# Directives
from pdf_chunker.directives import FixedSize, ChunkCount, parse_directive

# Data types
from pdf_chunker.types import PageRange, ChunkArtifact, SplitResult, PDFInfo

# Exceptions
from pdf_chunker.exceptions import (
    PDFChunkerException,
    InvalidDirectiveError,
    EmptyDocumentError,
    DocumentLoadError,
    EncryptedPDFError,
    OutputDirectoryError,
    ChunkWriteError,
)

# Utility functions
from pdf_chunker.utils import get_pdf_info, validate_pdf, format_file_size

__version__ = "1.0.0"
__author__ = "PDF Chunker Contributors"
__license__ = "MIT"

__all__ = [
    # Main classes
    "PDFChunker",
    "ChunkExtractor",
    "split_pdf",
    "extract_chunk",
    "plan",
    "resolve_chunk_size",
    "deletion_set",
    "retention_set",
    # Directives
    "FixedSize",
    "ChunkCount",
    "parse_directive",
    # Data types
    "PageRange",
    "ChunkArtifact",
    "SplitResult",
    "PDFInfo",
    # Exceptions
    "PDFChunkerException",
    "InvalidDirectiveError",
    "EmptyDocumentError",
    "DocumentLoadError",
    "EncryptedPDFError",
    "OutputDirectoryError",
    "ChunkWriteError",
    # Utility functions
    "get_pdf_info",
    "validate_pdf",
    "format_file_size",
    # Version info
    "__version__",
]
