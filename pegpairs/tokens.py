"""Queue entries recorded during a parse and the tokens built from them."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator, Sequence, Union

from .position import Position, _is_boundary

__all__ = ["QueueStart", "QueueEnd", "QueueableToken", "TokenKind", "Token", "Tokens"]


@dataclass(frozen=True, slots=True)
class QueueStart:
    """Start of a rule in the token queue.

    ``end_token_index`` is the queue index of the matching :class:`QueueEnd`;
    ``input_pos`` is the byte offset where the rule started.
    """

    end_token_index: int
    input_pos: int


@dataclass(frozen=True, slots=True)
class QueueEnd:
    """End of a rule in the token queue.

    ``start_token_index`` is the queue index of the matching :class:`QueueStart`;
    ``input_pos`` is the byte offset where the rule finished.
    """

    start_token_index: int
    rule: Any
    tag: str | None
    input_pos: int


QueueableToken = Union[QueueStart, QueueEnd]


def _rule_name(rule: Any) -> str:
    """Return the display name of a rule: an enum member's name, else ``str``."""
    name = getattr(rule, "name", None)
    return name if isinstance(name, str) else str(rule)


class TokenKind(Enum):
    """Whether a token opens or closes a rule."""

    START = "start"
    END = "end"


@dataclass(frozen=True)
class Token:
    """A start or end marker of a rule at a position in the input."""

    kind: TokenKind
    rule: Any
    pos: Position

    def __repr__(self) -> str:
        label = "Start" if self.kind is TokenKind.START else "End"
        return f"{label} {{ rule: {_rule_name(self.rule)}, pos: {self.pos!r} }}"


class Tokens:
    """Double-ended iterator over the tokens in ``queue[start:end]``."""

    __slots__ = ("_queue", "_input", "_data", "_start", "_end")

    def __init__(
        self, queue: Sequence[QueueableToken], input: str, start: int, end: int
    ) -> None:
        data = input.encode("utf-8")
        for entry in queue:
            if not _is_boundary(data, entry.input_pos):
                raise ValueError(
                    f"token position {entry.input_pos} is not a character boundary of the input"
                )
        self._queue = queue
        self._input = input
        self._data = data
        self._start = start
        self._end = end

    def _create_token(self, index: int) -> Token:
        entry = self._queue[index]
        position = Position._make(self._input, self._data, entry.input_pos)
        if isinstance(entry, QueueStart):
            rule = self._queue[entry.end_token_index].rule
            return Token(TokenKind.START, rule, position)
        return Token(TokenKind.END, entry.rule, position)

    def __iter__(self) -> Tokens:
        return self

    def __next__(self) -> Token:
        if self._start >= self._end:
            raise StopIteration
        token = self._create_token(self._start)
        self._start += 1
        return token

    def next_back(self) -> Token:
        """Take the last remaining token; raise ``StopIteration`` when empty."""
        if self._end <= self._start:
            raise StopIteration
        token = self._create_token(self._end - 1)
        self._end -= 1
        return token

    def __reversed__(self) -> Iterator[Token]:
        while self._start < self._end:
            yield self.next_back()

    def __len__(self) -> int:
        return max(self._end - self._start, 0)

    def copy(self) -> Tokens:
        """Return an independent iterator over the remaining tokens."""
        duplicate = Tokens.__new__(Tokens)
        duplicate._queue = self._queue
        duplicate._input = self._input
        duplicate._data = self._data
        duplicate._start = self._start
        duplicate._end = self._end
        return duplicate

    def __repr__(self) -> str:
        return "[" + ", ".join(repr(token) for token in self.copy()) + "]"