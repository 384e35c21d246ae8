"""PDF chunking built around a pluggable :class:`PDFBackend`."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Union

from .backends import PypdfBackend
from .backends.base import PDFBackend
from .config import default_prefix
from .directives import SplittingDirective, coerce_directive
from .extractor import ChunkExtractor, ProgressCallback, check_prefix
from .planner import plan, resolve_chunk_size
from .types import PageRange, PDFInfo, SplitResult

LOGGER = logging.getLogger("pdf_chunker.split")

DirectiveLike = Union[str, int, SplittingDirective]


class PDFChunker:
    """Split one PDF into contiguous chunks."""

    def __init__(
        self,
        input_path: Union[str, Path],
        *,
        password: Optional[str] = None,
        backend: Optional[PDFBackend] = None,
    ) -> None:
        self.input_path = str(input_path)
        self.backend: PDFBackend = backend or PypdfBackend()
        self._document = self.backend.load(input_path, password=password)
        self.num_pages = self._document.page_count()

    @property
    def document(self):
        return self._document

    def info(self) -> PDFInfo:
        return self._document.describe()

    def plan(self, directive: DirectiveLike) -> List[PageRange]:
        return plan(self.num_pages, directive)

    def split(
        self,
        directive: DirectiveLike,
        output_dir: Union[str, Path],
        *,
        prefix: Optional[str] = None,
        progress_callback: Optional[ProgressCallback] = None,
    ) -> SplitResult:
        """Plan ``directive`` and write one file per chunk into ``output_dir``.

        The directive is planned and the prefix checked before the output
        directory is created. The first failure aborts the run; chunks
        written before it are left in place.

        Raises:
            ValueError: if ``prefix`` contains a path separator.
        """

        resolved = coerce_directive(directive)
        ranges = plan(self.num_pages, resolved)
        chunk_prefix = check_prefix(prefix or default_prefix())
        chunk_size = resolve_chunk_size(self.num_pages, resolved)
        output_path = self.backend.ensure_directory(output_dir)

        LOGGER.info(
            "Splitting %s (%s pages) into %s chunk(s) of up to %s page(s)",
            self.input_path,
            self.num_pages,
            len(ranges),
            chunk_size,
        )

        extractor = ChunkExtractor(
            self._document,
            output_path,
            prefix=chunk_prefix,
        )
        artifacts = extractor.extract_all(ranges, progress_callback=progress_callback)

        return SplitResult(
            source_file=self.input_path,
            directive=resolved,
            chunk_size=chunk_size,
            page_count=self.num_pages,
            artifacts=artifacts,
        )

    def get_page_count(self) -> int:
        return self.num_pages


def split_pdf(
    input_path: Union[str, Path],
    output_dir: Union[str, Path],
    directive: DirectiveLike,
    *,
    prefix: Optional[str] = None,
    password: Optional[str] = None,
    backend: Optional[PDFBackend] = None,
    progress_callback: Optional[ProgressCallback] = None,
) -> SplitResult:
    """Split ``input_path`` into chunks according to ``directive``.

    Args:
        input_path: Source PDF file.
        output_dir: Directory in which to write ``chunk_<n>.pdf`` files.
        directive: ``FixedSize``/``ChunkCount`` or a token such as ``"30"`` / ``"c5"``.

    Returns:
        A :class:`SplitResult` listing the written chunks in order.
    """

    resolved = coerce_directive(directive)
    resolved.validate()
    chunker = PDFChunker(input_path, password=password, backend=backend)
    return chunker.split(
        resolved,
        output_dir,
        prefix=prefix,
        progress_callback=progress_callback,
    )


__all__ = [
    "PDFChunker",
    "split_pdf",
]
