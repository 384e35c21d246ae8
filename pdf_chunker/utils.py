"""Utility functions for PDF operations."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Optional, Tuple, Union

from .backends import PypdfBackend
from .backends.base import PDFBackend
from .exceptions import DocumentLoadError
from .types import PDFInfo

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> None:
    """Configure package-wide logging."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )
    logging.getLogger("pdf_chunker").setLevel(logging.DEBUG if verbose else logging.WARNING)


def get_pdf_info(
    pdf_path: Union[str, Path],
    password: Optional[str] = None,
    *,
    backend: Optional[PDFBackend] = None,
) -> PDFInfo:
    """Return basic information about a PDF document using :class:`PDFInfo`."""

    document = (backend or PypdfBackend()).load(pdf_path, password=password)
    return document.describe()


def validate_pdf(pdf_path: Union[str, Path], password: Optional[str] = None) -> Tuple[bool, str]:
    """Perform lightweight validation of a PDF file."""

    pdf_path = str(pdf_path)
    if not os.path.exists(pdf_path):
        return False, f"File not found: {pdf_path}"

    if not os.path.isfile(pdf_path):
        return False, f"Path is not a file: {pdf_path}"

    if not os.access(pdf_path, os.R_OK):
        return False, f"Cannot read file (permission denied): {pdf_path}"

    try:
        PypdfBackend().load(pdf_path, password=password)
    except DocumentLoadError as exc:
        return False, str(exc)
    return True, ""


def format_file_size(size_bytes: int) -> str:
    """
    Format file size in human-readable format.

    Args:
        size_bytes: File size in bytes

    Returns:
        Formatted string (e.g., "1.5 MB", "500 KB")
    """
    for unit in ['B', 'KB', 'MB', 'GB', 'TB']:
        if size_bytes < 1024.0:
            return f"{size_bytes:.1f} {unit}"
        size_bytes /= 1024.0
    return f"{size_bytes:.1f} PB"
