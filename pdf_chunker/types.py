"""
Type definitions and dataclasses for PDF Chunker.

This module defines data structures used throughout the library.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .directives import SplittingDirective


@dataclass(frozen=True)
class PageRange:
    """
    Contiguous, inclusive range of 1-based page numbers.

    Attributes:
        start: First page retained in the chunk
        end: Last page retained in the chunk (inclusive)
    """
    start: int
    end: int

    def __post_init__(self) -> None:
        if self.start < 1:
            raise ValueError(f"Page range must start at 1 or later, got {self.start}")
        if self.end < self.start:
            raise ValueError(
                f"Page range end ({self.end}) must be >= start ({self.start})"
            )

    @property
    def pages(self) -> range:
        return range(self.start, self.end + 1)

    @property
    def page_count(self) -> int:
        return self.end - self.start + 1

    @property
    def label(self) -> str:
        return f"{self.start}-{self.end}"

    def contains(self, page: int) -> bool:
        return self.start <= page <= self.end

    def __str__(self) -> str:
        return self.label


@dataclass(frozen=True)
class ChunkArtifact:
    """
    One written chunk.

    Attributes:
        index: 1-based position of the chunk in planning order
        page_range: Pages of the original document the chunk retains
        destination: Path the chunk was serialized to
    """
    index: int
    page_range: PageRange
    destination: Path

    def __str__(self) -> str:
        return (
            f"Saved chunk {self.index} (pages {self.page_range.start} to "
            f"{self.page_range.end}) to {self.destination}"
        )


@dataclass
class SplitResult:
    """
    Result of a PDF split operation.

    Attributes:
        source_file: Path to source PDF file
        directive: Directive the split was planned from
        chunk_size: Effective number of pages per chunk
        page_count: Number of pages in the source document
        artifacts: Written chunks in planning order
    """
    source_file: str
    directive: SplittingDirective
    chunk_size: int
    page_count: int
    artifacts: List[ChunkArtifact] = field(default_factory=list)

    @property
    def files_created(self) -> List[str]:
        return [str(artifact.destination) for artifact in self.artifacts]

    @property
    def total_files(self) -> int:
        return len(self.artifacts)

    def __str__(self) -> str:
        return f"SplitResult(directive={self.directive}, files={self.total_files})"


@dataclass
class PDFInfo:
    """
    PDF document information shown before splitting.

    Attributes:
        num_pages: Number of pages in the PDF
        file_size: File size in bytes
        title: PDF title metadata
        author: PDF author metadata
        is_encrypted: Whether the PDF is encrypted
    """
    num_pages: int
    file_size: int
    title: Optional[str] = None
    author: Optional[str] = None
    is_encrypted: bool = False
