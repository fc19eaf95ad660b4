"""Iteration over sibling pairs of a token queue."""

from __future__ import annotations

from typing import Iterator, Sequence

from .flat_pairs import FlatPairs
from .line_index import LineIndex
from .pair import Pair
from .tokens import QueueableToken, QueueStart, Tokens

__all__ = ["Pairs"]


class Pairs:
    """Double-ended iterator over the top-level pairs in ``queue[start:end]``."""

    __slots__ = ("_queue", "_input", "_line_index", "_start", "_end", "_pairs_count")

    def __init__(
        self,
        queue: Sequence[QueueableToken],
        input: str,
        line_index: LineIndex | None,
        start: int,
        end: int,
    ) -> None:
        if line_index is None:
            last_input_pos = queue[-1].input_pos if queue else 0
            line_index = LineIndex(input.encode("utf-8")[:last_input_pos].decode("utf-8"))

        pairs_count = 0
        cursor = start
        while cursor < end:
            entry = queue[cursor]
            if not isinstance(entry, QueueStart):
                raise ValueError(f"queue entry {cursor} is not the start of a rule")
            cursor = entry.end_token_index + 1
            pairs_count += 1

        self._queue = queue
        self._input = input
        self._line_index = line_index
        self._start = start
        self._end = end
        self._pairs_count = pairs_count

    @classmethod
    def single(cls, pair: Pair) -> Pairs:
        """Create pairs holding just ``pair``."""
        return cls(
            pair._queue, pair._input, pair._line_index, pair._start, pair._pair()
        )

    def _pos(self, index: int) -> int:
        return self._queue[index].input_pos

    def as_str(self) -> str:
        """Return the input from the start of the first pair to the end of the last."""
        if self._start >= self._end:
            return ""
        data = self._line_index._encoded(self._input)
        return data[self._pos(self._start) : self._pos(self._end - 1)].decode("utf-8")

    def get_input(self) -> str:
        """Return the whole input string the pairs were parsed from."""
        return self._input

    def concat(self) -> str:
        """Join the text of each remaining pair, skipping the input between them."""
        return "".join(pair.as_str() for pair in self.copy())

    def flatten(self) -> FlatPairs:
        """Return an iterator over every remaining pair, nested ones included."""
        return FlatPairs(self._queue, self._input, self._line_index, self._start, self._end)

    def find_first_tagged(self, tag: str) -> Pair | None:
        """Return the first pair, searched flattened, tagged with ``tag``."""
        return next(self.copy().find_tagged(tag), None)

    def find_tagged(self, tag: str) -> Iterator[Pair]:
        """Yield every pair, searched flattened, tagged with ``tag``."""
        return (pair for pair in self.flatten() if pair.as_node_tag() == tag)

    def tokens(self) -> Tokens:
        """Return the tokens of the remaining pairs."""
        return Tokens(self._queue, self._input, self._start, self._end)

    def peek(self) -> Pair | None:
        """Return the next pair without advancing, or ``None`` when empty."""
        if self._start < self._end:
            return Pair(self._queue, self._input, self._line_index, self._start)
        return None

    def __iter__(self) -> Pairs:
        return self

    def __next__(self) -> Pair:
        pair = self.peek()
        if pair is None:
            raise StopIteration
        self._start = self._queue[self._start].end_token_index + 1
        self._pairs_count -= 1
        return pair

    def next_back(self) -> Pair:
        """Take the last remaining pair; raise ``StopIteration`` when empty."""
        if self._end <= self._start:
            raise StopIteration
        self._end = self._queue[self._end - 1].start_token_index
        self._pairs_count -= 1
        return Pair(self._queue, self._input, self._line_index, self._end)

    def __reversed__(self) -> Iterator[Pair]:
        while self._end > self._start:
            yield self.next_back()

    def __len__(self) -> int:
        return self._pairs_count

    def copy(self) -> Pairs:
        """Return an independent iterator over the remaining pairs."""
        duplicate = Pairs.__new__(Pairs)
        duplicate._queue = self._queue
        duplicate._input = self._input
        duplicate._line_index = self._line_index
        duplicate._start = self._start
        duplicate._end = self._end
        duplicate._pairs_count = self._pairs_count
        return duplicate

    def __str__(self) -> str:
        return "[" + ", ".join(str(pair) for pair in self.copy()) + "]"

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(pair) for pair in self.copy()) + "]"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pairs):
            return NotImplemented
        return (
            self._queue is other._queue
            and self._input is other._input
            and self._start == other._start
            and self._end == other._end
        )

    def __hash__(self) -> int:
        return hash((id(self._queue), id(self._input), self._start, self._end))