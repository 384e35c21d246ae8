from __future__ import annotations

import math

import pytest

from pdf_chunker.directives import ChunkCount, FixedSize
from pdf_chunker.exceptions import EmptyDocumentError, InvalidDirectiveError
from pdf_chunker.planner import (
    deletion_set,
    expected_chunk_count,
    plan,
    resolve_chunk_size,
    retention_set,
)
from pdf_chunker.types import PageRange


def _as_tuples(ranges) -> list[tuple[int, int]]:
    return [(page_range.start, page_range.end) for page_range in ranges]


def test_fixed_size_with_remainder() -> None:
    ranges = plan(10, FixedSize(3))
    assert _as_tuples(ranges) == [(1, 3), (4, 6), (7, 9), (10, 10)]


def test_chunk_count_uses_ceiling_chunk_size() -> None:
    ranges = plan(10, ChunkCount(3))
    assert resolve_chunk_size(10, ChunkCount(3)) == 4
    assert _as_tuples(ranges) == [(1, 4), (5, 8), (9, 10)]


def test_chunk_size_larger_than_document_yields_one_chunk() -> None:
    assert _as_tuples(plan(5, FixedSize(10))) == [(1, 5)]


def test_chunk_count_above_page_count_gives_single_page_chunks() -> None:
    ranges = plan(3, ChunkCount(7))
    assert _as_tuples(ranges) == [(1, 1), (2, 2), (3, 3)]


def test_chunk_count_may_produce_fewer_chunks_than_requested() -> None:
    # ceil(10 / 4) = 3 pages per chunk -> 4 chunks, but ceil(10 / 6) = 2 -> 5 chunks
    assert len(plan(10, ChunkCount(4))) == 4
    assert len(plan(10, ChunkCount(6))) == 5


def test_token_directives_are_accepted() -> None:
    assert plan(10, "3") == plan(10, FixedSize(3))
    assert plan(10, "c3") == plan(10, ChunkCount(3))


def test_empty_document_policy() -> None:
    with pytest.raises(EmptyDocumentError):
        plan(0, FixedSize(3))
    with pytest.raises(EmptyDocumentError):
        plan(0, ChunkCount(2))
    with pytest.raises(EmptyDocumentError):
        expected_chunk_count(0, FixedSize(3))
    with pytest.raises(InvalidDirectiveError):
        expected_chunk_count(0, ChunkCount(0))


def test_zero_divisor_is_invalid() -> None:
    with pytest.raises(InvalidDirectiveError):
        plan(10, ChunkCount(0))
    with pytest.raises(InvalidDirectiveError):
        plan(10, FixedSize(0))
    # The directive is rejected before the empty-document check.
    with pytest.raises(InvalidDirectiveError):
        plan(0, ChunkCount(0))


def test_unparsable_directive_is_invalid() -> None:
    with pytest.raises(InvalidDirectiveError):
        plan(10, "ten")


def test_negative_or_non_integer_page_count() -> None:
    with pytest.raises(ValueError):
        plan(-1, FixedSize(2))
    with pytest.raises(TypeError):
        plan(2.0, FixedSize(2))  # type: ignore[arg-type]


@pytest.mark.parametrize("page_count", [1, 2, 7, 10, 31, 100])
@pytest.mark.parametrize("size", [1, 2, 3, 7, 10, 150])
def test_fixed_size_partition_properties(page_count: int, size: int) -> None:
    ranges = plan(page_count, FixedSize(size))

    chunks = math.ceil(page_count / size)
    assert len(ranges) == chunks == expected_chunk_count(page_count, FixedSize(size))
    for page_range in ranges[:-1]:
        assert page_range.page_count == size
    assert ranges[-1].page_count == page_count - size * (chunks - 1)

    covered = [page for page_range in ranges for page in page_range.pages]
    assert covered == list(range(1, page_count + 1))


@pytest.mark.parametrize("page_count", [1, 5, 10, 17, 64])
@pytest.mark.parametrize("target", [1, 2, 3, 4, 9, 80])
def test_chunk_count_partition_properties(page_count: int, target: int) -> None:
    ranges = plan(page_count, ChunkCount(target))

    chunk_size = math.ceil(page_count / target)
    assert len(ranges) == math.ceil(page_count / chunk_size)
    assert len(ranges) <= target
    covered = [page for page_range in ranges for page in page_range.pages]
    assert covered == list(range(1, page_count + 1))


def test_replanning_is_idempotent() -> None:
    assert plan(37, ChunkCount(5)) == plan(37, ChunkCount(5))
    assert plan(37, FixedSize(4)) == plan(37, FixedSize(4))


def test_deletion_set_is_complement_of_range() -> None:
    page_range = PageRange(4, 6)
    assert retention_set(page_range) == [4, 5, 6]
    assert deletion_set(page_range, 10) == [1, 2, 3, 7, 8, 9, 10]
    assert deletion_set(PageRange(1, 10), 10) == []
    assert deletion_set(PageRange(1, 3), 5) == [4, 5]
    assert deletion_set(PageRange(5, 5), 5) == [1, 2, 3, 4]

    for candidate in plan(12, FixedSize(5)):
        kept = set(retention_set(candidate))
        dropped = set(deletion_set(candidate, 12))
        assert kept.isdisjoint(dropped)
        assert kept | dropped == set(range(1, 13))


def test_deletion_set_rejects_range_outside_document() -> None:
    with pytest.raises(ValueError):
        deletion_set(PageRange(3, 8), 5)


def test_page_range_validation_and_helpers() -> None:
    page_range = PageRange(2, 4)
    assert page_range.label == "2-4"
    assert str(page_range) == "2-4"
    assert page_range.page_count == 3
    assert page_range.contains(2) and page_range.contains(4)
    assert not page_range.contains(5)

    with pytest.raises(ValueError):
        PageRange(0, 3)
    with pytest.raises(ValueError):
        PageRange(5, 4)
