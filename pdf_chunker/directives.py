"""Splitting directives and the ``N`` / ``cN`` token syntax."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import Union

from .exceptions import InvalidDirectiveError

_FIXED_SIZE_RE = re.compile(r"^(\d+)$")
_CHUNK_COUNT_RE = re.compile(r"^[cC](\d+)$")


@dataclass(frozen=True)
class FixedSize:
    """Put ``pages`` pages in every chunk; the last one takes the remainder."""

    pages: int

    def validate(self) -> None:
        if self.pages < 1:
            raise InvalidDirectiveError(
                f"Chunk size must be >= 1, got {self.pages}"
            )

    def resolve(self, page_count: int) -> int:
        self.validate()
        return self.pages

    def __str__(self) -> str:
        return str(self.pages)


@dataclass(frozen=True)
class ChunkCount:
    """Aim for ``chunks`` evenly sized chunks.

    The chunk size is ``ceil(page_count / chunks)``, so fewer chunks than
    requested are produced when the pages do not divide evenly enough.
    """

    chunks: int

    def validate(self) -> None:
        if self.chunks < 1:
            raise InvalidDirectiveError("Number of chunks cannot be zero.")

    def resolve(self, page_count: int) -> int:
        self.validate()
        return math.ceil(page_count / self.chunks)

    def __str__(self) -> str:
        return f"c{self.chunks}"


SplittingDirective = Union[FixedSize, ChunkCount]


def parse_directive(token: str) -> SplittingDirective:
    """Parse ``"30"`` into ``FixedSize(30)`` and ``"c5"`` into ``ChunkCount(5)``."""

    if token is None or not str(token).strip():
        raise InvalidDirectiveError("cannot parse directive: value is empty")

    text = str(token).strip()
    match = _FIXED_SIZE_RE.match(text)
    if match:
        return FixedSize(int(match.group(1)))

    match = _CHUNK_COUNT_RE.match(text)
    if match:
        return ChunkCount(int(match.group(1)))

    raise InvalidDirectiveError(
        f"cannot parse directive: '{text}'. Expected a page count such as '30' "
        "or a chunk count such as 'c5'."
    )


def coerce_directive(value: Union[str, int, SplittingDirective]) -> SplittingDirective:
    """Accept a directive object, a token string or a bare page count."""

    if isinstance(value, (FixedSize, ChunkCount)):
        return value
    if isinstance(value, bool):
        raise InvalidDirectiveError(f"cannot parse directive: {value!r}")
    if isinstance(value, int):
        return FixedSize(value)
    if isinstance(value, str):
        return parse_directive(value)
    raise InvalidDirectiveError(f"cannot parse directive: {value!r}")


__all__ = [
    "FixedSize",
    "ChunkCount",
    "SplittingDirective",
    "parse_directive",
    "coerce_directive",
]
