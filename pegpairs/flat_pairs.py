"""Iteration over every pair of a token queue, nested ones included."""

from __future__ import annotations

from typing import Iterator, Sequence

from .line_index import LineIndex
from .pair import Pair
from .tokens import QueueableToken, QueueStart, Tokens

__all__ = ["FlatPairs"]


class FlatPairs:
    """Double-ended iterator over all pairs in ``queue[start:end]`` in pre-order."""

    __slots__ = ("_queue", "_input", "_line_index", "_start", "_end")

    def __init__(
        self,
        queue: Sequence[QueueableToken],
        input: str,
        line_index: LineIndex,
        start: int,
        end: int,
    ) -> None:
        self._queue = queue
        self._input = input
        self._line_index = line_index
        self._start = start
        self._end = end

    def tokens(self) -> Tokens:
        """Return the tokens covered by the remaining pairs."""
        return Tokens(self._queue, self._input, self._start, self._end)

    def _is_start(self, index: int) -> bool:
        return isinstance(self._queue[index], QueueStart)

    def _next_start(self) -> None:
        self._start += 1
        while self._start < self._end and not self._is_start(self._start):
            self._start += 1

    def _next_start_from_end(self) -> None:
        self._end -= 1
        while self._end >= self._start and self._end >= 0 and not self._is_start(self._end):
            self._end -= 1

    def _pair_at(self, index: int) -> Pair:
        return Pair(self._queue, self._input, self._line_index, index)

    def __iter__(self) -> FlatPairs:
        return self

    def __next__(self) -> Pair:
        if self._start >= self._end:
            raise StopIteration
        pair = self._pair_at(self._start)
        self._next_start()
        return pair

    def next_back(self) -> Pair:
        """Take the last remaining pair; raise ``StopIteration`` when empty."""
        if self._end <= self._start:
            raise StopIteration
        self._next_start_from_end()
        return self._pair_at(self._end)

    def __reversed__(self) -> Iterator[Pair]:
        while self._end > self._start:
            yield self.next_back()

    def __len__(self) -> int:
        # Every remaining pair contributes exactly two tokens to the range.
        return max(self._end - self._start, 0) >> 1

    def copy(self) -> FlatPairs:
        """Return an independent iterator over the remaining pairs."""
        return FlatPairs(self._queue, self._input, self._line_index, self._start, self._end)

    def __repr__(self) -> str:
        pairs = ", ".join(repr(pair) for pair in self.copy())
        return f"FlatPairs {{ pairs: [{pairs}] }}"