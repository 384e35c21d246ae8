"""Backend protocol for PDF operations."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol

from ..types import PDFInfo


@dataclass
class BackendDocument:
    """Represents a loaded PDF document with backend-specific helpers.

    Page numbers are 1-based throughout. ``clone`` must return a copy that
    can be mutated without affecting the original or any other copy.
    """

    file_size: int

    def page_count(self) -> int:
        raise NotImplementedError

    def clone(self) -> "BackendDocument":
        raise NotImplementedError

    def remove_pages(self, page_numbers: Iterable[int]) -> None:
        raise NotImplementedError

    def serialize(self, destination: str | Path) -> None:
        raise NotImplementedError

    def describe(self) -> PDFInfo:
        raise NotImplementedError


class PDFBackend(Protocol):
    """Protocol defining backend operations for PDF reading/writing."""

    def load(self, pdf_path: str | Path, password: str | None = None) -> BackendDocument:
        """Load a PDF file and return a backend document wrapper."""

    def ensure_directory(self, directory: str | Path) -> Path:
        """Create ``directory`` if needed and check that it is writable."""
