"""A matched rule: a start token, its end token and everything between."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator, Sequence

from .line_index import LineIndex
from .position import Position
from .tokens import QueueableToken, QueueStart, Tokens, _rule_name

if TYPE_CHECKING:
    from .pairs import Pairs

__all__ = ["Pair"]


def _debug_str(text: str) -> str:
    escaped = (
        text.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\r", "\\r")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class Pair:
    """A matching pair of start and end tokens and the tokens nested inside."""

    __slots__ = ("_queue", "_input", "_line_index", "_start")

    def __init__(
        self,
        queue: Sequence[QueueableToken],
        input: str,
        line_index: LineIndex,
        start: int,
    ) -> None:
        if not isinstance(queue[start], QueueStart):
            raise ValueError(f"queue entry {start} is not the start of a rule")
        self._queue = queue
        self._input = input
        self._line_index = line_index
        self._start = start

    def _pair(self) -> int:
        return self._queue[self._start].end_token_index

    def _pos(self, index: int) -> int:
        return self._queue[index].input_pos

    def _data(self) -> bytes:
        return self._line_index._encoded(self._input)

    def _children(self) -> Iterator[Pair]:
        cursor = self._start + 1
        end = self._pair()
        while cursor < end:
            yield Pair(self._queue, self._input, self._line_index, cursor)
            cursor = self._queue[cursor].end_token_index + 1

    def as_rule(self) -> Any:
        """Return the rule this pair matched."""
        return self._queue[self._pair()].rule

    def as_str(self) -> str:
        """Return the slice of the input covered by this pair."""
        return self._data()[self._pos(self._start) : self._pos(self._pair())].decode("utf-8")

    def get_input(self) -> str:
        """Return the whole input string the pair was parsed from."""
        return self._input

    def start_pos(self) -> Position:
        """Return the position where this pair starts."""
        return Position._make(self._input, self._data(), self._pos(self._start))

    def end_pos(self) -> Position:
        """Return the position where this pair ends."""
        return Position._make(self._input, self._data(), self._pos(self._pair()))

    def as_node_tag(self) -> str | None:
        """Return the tag attached to this node, if any."""
        return self._queue[self._pair()].tag

    def into_inner(self) -> Pairs:
        """Return the pairs nested directly inside this one."""
        from .pairs import Pairs

        return Pairs(self._queue, self._input, self._line_index, self._start + 1, self._pair())

    def tokens(self) -> Tokens:
        """Return the tokens of this pair, its own start and end included."""
        return Tokens(self._queue, self._input, self._start, self._pair() + 1)

    def line_col(self) -> tuple[int, int]:
        """Return the 1-based line and column where this pair starts."""
        return self._line_index.line_col(self._input, self._pos(self._start))

    def __str__(self) -> str:
        rule = _rule_name(self.as_rule())
        start = self._pos(self._start)
        end = self._pos(self._pair())
        inner = [str(child) for child in self._children()]
        if not inner:
            return f"{rule}({start}, {end})"
        return f"{rule}({start}, {end}, [{', '.join(inner)}])"

    def __repr__(self) -> str:
        start = self._pos(self._start)
        end = self._pos(self._pair())
        fields = [f"rule: {_rule_name(self.as_rule())}"]
        tag = self.as_node_tag()
        if tag is not None:
            fields.append(f"node_tag: {_debug_str(tag)}")
        fields.append(
            f"span: Span {{ str: {_debug_str(self.as_str())}, start: {start}, end: {end} }}"
        )
        fields.append("inner: [" + ", ".join(repr(child) for child in self._children()) + "]")
        return "Pair { " + ", ".join(fields) + " }"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pair):
            return NotImplemented
        return (
            self._queue is other._queue
            and self._input is other._input
            and self._start == other._start
        )

    def __hash__(self) -> int:
        return hash((id(self._queue), id(self._input), self._start))