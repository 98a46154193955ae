"""
Splitting ordered sequences into fixed-size pages.

Pages are lightweight views over the underlying sequence (begin/end bounds),
not copies, and a Paginator can be iterated any number of times.
"""

from __future__ import annotations

from collections.abc import Iterator, Sequence
from typing import Generic, TypeVar

from tfidf_search.errors import InvalidInputError

T = TypeVar("T")


class IteratorRange(Generic[T]):
    """Read-only view of ``sequence[begin:end]``."""

    __slots__ = ("_sequence", "begin", "end")

    def __init__(self, sequence: Sequence[T], begin: int, end: int):
        self._sequence = sequence
        self.begin = begin
        self.end = end

    def __len__(self) -> int:
        return self.end - self.begin

    def __iter__(self) -> Iterator[T]:
        for position in range(self.begin, self.end):
            yield self._sequence[position]

    def __getitem__(self, offset: int) -> T:
        if offset < 0:
            offset += len(self)
        if not 0 <= offset < len(self):
            raise IndexError(f"page offset {offset} out of range")
        return self._sequence[self.begin + offset]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, IteratorRange):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"IteratorRange(begin={self.begin}, end={self.end})"

    def __str__(self) -> str:
        return "".join(str(item) for item in self)

    def size(self) -> int:
        return len(self)


class Paginator(Generic[T]):
    """
    Contiguous pages of ``page_size`` items; the last page holds the remainder.

    Args:
        sequence (Sequence[T]): Items to paginate, in display order.
        page_size (int): Items per page, must be positive.
    """

    def __init__(self, sequence: Sequence[T], page_size: int):
        if page_size <= 0:
            raise InvalidInputError(f"page_size must be positive, got {page_size}")
        self._sequence = sequence
        self.page_size = page_size

    def __len__(self) -> int:
        return -(-len(self._sequence) // self.page_size)

    def __iter__(self) -> Iterator[IteratorRange[T]]:
        total = len(self._sequence)
        for begin in range(0, total, self.page_size):
            yield IteratorRange(self._sequence, begin, min(begin + self.page_size, total))


def paginate(sequence: Sequence[T], page_size: int) -> Paginator[T]:
    return Paginator(sequence, page_size)
