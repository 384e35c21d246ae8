"""Partition planning: turn a directive and a page count into page ranges."""

from __future__ import annotations

import logging
import math
from typing import List, Union

from .directives import ChunkCount, SplittingDirective, coerce_directive
from .exceptions import EmptyDocumentError, InvalidDirectiveError
from .types import PageRange

LOGGER = logging.getLogger("pdf_chunker.plan")


def _check_page_count(page_count: int) -> None:
    if isinstance(page_count, bool) or not isinstance(page_count, int):
        raise TypeError(f"Page count must be an integer, got {page_count!r}")
    if page_count < 0:
        raise ValueError(f"Page count must be >= 0, got {page_count}")


def resolve_chunk_size(
    page_count: int,
    directive: Union[str, int, SplittingDirective],
) -> int:
    """Resolve ``directive`` into the effective number of pages per chunk.

    Raises:
        InvalidDirectiveError: if the directive resolves to a chunk size of zero.
    """

    _check_page_count(page_count)
    resolved = coerce_directive(directive)
    chunk_size = resolved.resolve(page_count)
    if chunk_size < 1:
        raise InvalidDirectiveError(
            f"Directive '{resolved}' resolves to a chunk size of {chunk_size}"
        )
    return chunk_size


def plan(
    page_count: int,
    directive: Union[str, int, SplittingDirective],
) -> List[PageRange]:
    """Plan the contiguous page ranges for splitting ``page_count`` pages.

    Ranges are 1-based and inclusive, emitted in increasing order, and cover
    every page exactly once. The last range holds the remainder and may be
    shorter than the chunk size.

    Args:
        page_count: Number of pages in the source document.
        directive: ``FixedSize``/``ChunkCount`` or a token such as ``"30"`` / ``"c5"``.

    Raises:
        EmptyDocumentError: if ``page_count`` is zero.
        InvalidDirectiveError: if the directive is unparsable or resolves to zero.
    """

    _check_page_count(page_count)
    resolved = coerce_directive(directive)
    resolved.validate()
    if page_count == 0:
        raise EmptyDocumentError("Document has no pages; nothing to split.")

    chunk_size = resolve_chunk_size(page_count, resolved)

    ranges = [
        PageRange(start, min(start + chunk_size - 1, page_count))
        for start in range(1, page_count + 1, chunk_size)
    ]

    if isinstance(resolved, ChunkCount) and len(ranges) != resolved.chunks:
        LOGGER.info(
            "Requested %s chunks but %s pages split into %s chunk(s) of up to %s page(s)",
            resolved.chunks,
            page_count,
            len(ranges),
            chunk_size,
        )
    LOGGER.debug(
        "Planned %s chunk(s) for %s page(s) with chunk size %s",
        len(ranges),
        page_count,
        chunk_size,
    )
    return ranges


def retention_set(page_range: PageRange) -> List[int]:
    """Pages kept in the chunk for ``page_range``."""

    return list(page_range.pages)


def deletion_set(page_range: PageRange, page_count: int) -> List[int]:
    """Pages outside ``page_range``, ascending, within ``1..page_count``.

    Built from the two sub-ranges before and after the chunk rather than by
    filtering a full enumeration of the document.
    """

    _check_page_count(page_count)
    if page_range.end > page_count:
        raise ValueError(
            f"Range {page_range.label} exceeds document page count ({page_count} pages)."
        )
    return list(range(1, page_range.start)) + list(range(page_range.end + 1, page_count + 1))


def expected_chunk_count(page_count: int, directive: Union[str, int, SplittingDirective]) -> int:
    """Number of chunks :func:`plan` will produce, without building the ranges.

    Raises the same errors as :func:`plan`, including ``EmptyDocumentError``
    for a zero page count.
    """

    _check_page_count(page_count)
    coerce_directive(directive).validate()
    if page_count == 0:
        raise EmptyDocumentError("Document has no pages; nothing to split.")
    chunk_size = resolve_chunk_size(page_count, directive)
    return math.ceil(page_count / chunk_size)


__all__ = [
    "plan",
    "resolve_chunk_size",
    "retention_set",
    "deletion_set",
    "expected_chunk_count",
]
