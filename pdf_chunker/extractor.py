"""Chunk extraction: derive one document per planned page range."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from .backends.base import BackendDocument
from .exceptions import ChunkWriteError
from .planner import deletion_set
from .types import ChunkArtifact, PageRange

LOGGER = logging.getLogger("pdf_chunker.extract")

ProgressCallback = Callable[[ChunkArtifact, int], None]


_SEPARATORS = {"/", "\\", os.sep} | ({os.altsep} if os.altsep else set())


def check_prefix(prefix: str) -> str:
    """Return ``prefix`` unchanged if chunk files built from it stay in the output directory."""

    if any(separator in prefix for separator in _SEPARATORS):
        raise ValueError(f"Chunk prefix must not contain a path separator, got {prefix!r}")
    return prefix


def build_chunk_filename(index: int, prefix: str = "chunk", extension: str = "pdf") -> str:
    """Return ``<prefix>_<index>.<extension>`` for a 1-based chunk index."""

    if index < 1:
        raise ValueError(f"Chunk index must be >= 1, got {index}")
    return f"{check_prefix(prefix)}_{index}.{extension}"


def extract_chunk(
    source: BackendDocument,
    page_range: PageRange,
    page_count: int,
    destination: Union[str, Path],
    *,
    index: int,
) -> ChunkArtifact:
    """Write the pages of ``page_range`` from ``source`` to ``destination``.

    ``source`` is never modified: pages are removed from a fresh clone that
    is discarded once it has been serialized.

    Raises:
        ChunkWriteError: if the chunk cannot be serialized.
    """

    destination = Path(destination)
    working = source.clone()
    working.remove_pages(deletion_set(page_range, page_count))

    try:
        working.serialize(destination)
    except ChunkWriteError as exc:
        raise ChunkWriteError(
            f"cannot write chunk {index} (pages {page_range.label}) to {destination}: {exc.message}",
            index=index,
            destination=destination,
        ) from exc

    artifact = ChunkArtifact(index=index, page_range=page_range, destination=destination)
    LOGGER.info(
        "Saved chunk %s (pages %s to %s) to %s",
        index,
        page_range.start,
        page_range.end,
        destination,
    )
    return artifact


class ChunkExtractor:
    """Extract planned ranges of a loaded document into an output directory."""

    def __init__(
        self,
        source: BackendDocument,
        output_dir: Union[str, Path],
        *,
        prefix: str = "chunk",
    ) -> None:
        self.source = source
        self.output_dir = Path(output_dir)
        self.prefix = check_prefix(prefix)
        self.page_count = source.page_count()

    def destination_for(self, index: int) -> Path:
        return self.output_dir / build_chunk_filename(index, self.prefix)

    def extract(self, index: int, page_range: PageRange) -> ChunkArtifact:
        return extract_chunk(
            self.source,
            page_range,
            self.page_count,
            self.destination_for(index),
            index=index,
        )

    def extract_all(
        self,
        ranges: Iterable[PageRange],
        progress_callback: Optional[ProgressCallback] = None,
    ) -> List[ChunkArtifact]:
        """Extract ``ranges`` one at a time, stopping at the first failure."""

        ranges = list(ranges)
        artifacts: List[ChunkArtifact] = []
        for index, page_range in enumerate(ranges, start=1):
            artifact = self.extract(index, page_range)
            artifacts.append(artifact)
            if progress_callback:
                progress_callback(artifact, len(ranges))
        return artifacts


__all__ = [
    "ChunkExtractor",
    "build_chunk_filename",
    "check_prefix",
    "extract_chunk",
]
