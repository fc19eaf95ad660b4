"""Cursor positions inside an input string, measured in UTF-8 byte offsets."""

from __future__ import annotations

from typing import Callable, Iterable

__all__ = ["Position"]


def _char_width(lead: int) -> int:
    """Return the UTF-8 length of the character starting with byte ``lead``."""
    if lead < 0x80:
        return 1
    if lead < 0xE0:
        return 2
    if lead < 0xF0:
        return 3
    return 4


def _is_boundary(data: bytes, pos: int) -> bool:
    if pos < 0 or pos > len(data):
        return False
    return pos == len(data) or (data[pos] & 0xC0) != 0x80


class Position:
    """A cursor in a string that can be moved by matching parts of it.

    The position is a byte offset into the UTF-8 encoding of the input and
    always lies on a character boundary.
    """

    __slots__ = ("_input", "_data", "_pos")

    def __init__(self, input: str, pos: int) -> None:
        data = input.encode("utf-8")
        if not _is_boundary(data, pos):
            raise ValueError(f"position {pos} is not a character boundary of the input")
        self._input = input
        self._data = data
        self._pos = pos

    @classmethod
    def _make(cls, input: str, data: bytes, pos: int) -> Position:
        position = cls.__new__(cls)
        position._input = input
        position._data = data
        position._pos = pos
        return position

    @classmethod
    def from_start(cls, input: str) -> Position:
        """Create a position at the start of ``input``."""
        return cls._make(input, input.encode("utf-8"), 0)

    @property
    def pos(self) -> int:
        """The byte offset of this position."""
        return self._pos

    @property
    def input(self) -> str:
        """The string this position points into."""
        return self._input

    def copy(self) -> Position:
        """Return an independent position at the same place."""
        return self._make(self._input, self._data, self._pos)

    def line_col(self) -> tuple[int, int]:
        """Return the 1-based line and column of this position.

        ``\\r\\n`` and ``\\n`` end a line; a lone ``\\r`` counts as a column.
        """
        prefix = self._data[: self._pos].decode("utf-8")
        line = prefix.count("\n") + 1
        col = len(prefix) - (prefix.rfind("\n") + 1) + 1
        return line, col

    def line_of(self) -> str:
        """Return the whole line of the input containing this position."""
        return self._data[self._line_start() : self._line_end()].decode("utf-8")

    def _line_start(self) -> int:
        if not self._data:
            return 0
        return self._data.rfind(b"\n", 0, self._pos) + 1

    def _line_end(self) -> int:
        size = len(self._data)
        if size == 0:
            return 0
        if self._pos == size - 1:
            return size
        found = self._data.find(b"\n", self._pos)
        return size if found < 0 else found + 1

    def at_start(self) -> bool:
        """Whether this position is at the start of the input."""
        return self._pos == 0

    def at_end(self) -> bool:
        """Whether this position is at the end of the input."""
        return self._pos == len(self._data)

    def skip(self, n: int) -> bool:
        """Move forward ``n`` characters; leave the position unchanged on failure."""
        data = self._data
        cursor = self._pos
        for _ in range(n):
            if cursor >= len(data):
                return False
            cursor += _char_width(data[cursor])
        self._pos = cursor
        return True

    def skip_back(self, n: int) -> bool:
        """Move back ``n`` characters; leave the position unchanged on failure."""
        data = self._data
        cursor = self._pos
        for _ in range(n):
            if cursor == 0:
                return False
            cursor -= 1
            while (data[cursor] & 0xC0) == 0x80:
                cursor -= 1
        self._pos = cursor
        return True

    def skip_until(self, strings: Iterable[str]) -> bool:
        """Advance to the first place where one of ``strings`` starts.

        If none is found, the position moves to the end of the input and
        ``False`` is returned.
        """
        needles = [s.encode("utf-8") for s in strings]
        data = self._data
        for start in range(self._pos, len(data)):
            if not _is_boundary(data, start):
                continue
            if any(data.startswith(needle, start) for needle in needles):
                self._pos = start
                return True
        self._pos = len(data)
        return False

    def _next_char(self) -> str | None:
        data = self._data
        if self._pos >= len(data):
            return None
        width = _char_width(data[self._pos])
        return data[self._pos : self._pos + width].decode("utf-8")

    def match_char(self, c: str) -> bool:
        """Whether the character at this position is ``c``; never moves."""
        return self._next_char() == c

    def match_char_by(self, predicate: Callable[[str], bool]) -> bool:
        """Consume the next character if ``predicate`` accepts it."""
        c = self._next_char()
        if c is not None and predicate(c):
            self._pos += len(c.encode("utf-8"))
            return True
        return False

    def match_string(self, string: str) -> bool:
        """Consume ``string`` if the input continues with it."""
        needle = string.encode("utf-8")
        if self._data.startswith(needle, self._pos):
            self._pos += len(needle)
            return True
        return False

    def match_insensitive(self, string: str) -> bool:
        """Consume ``string`` compared ASCII case-insensitively."""
        needle = string.encode("utf-8")
        end = self._pos + len(needle)
        if end > len(self._data) or not _is_boundary(self._data, end):
            return False
        if self._data[self._pos : end].lower() == needle.lower():
            self._pos = end
            return True
        return False

    def match_range(self, start: str, end: str) -> bool:
        """Consume the next character if it lies in ``start..=end``."""
        c = self._next_char()
        if c is not None and start <= c <= end:
            self._pos += len(c.encode("utf-8"))
            return True
        return False

    def _check_same_input(self, other: Position) -> None:
        if self._input is not other._input:
            raise ValueError("cannot compare positions from different inputs")

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self._input is other._input and self._pos == other._pos

    def __lt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._check_same_input(other)
        return self._pos < other._pos

    def __le__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._check_same_input(other)
        return self._pos <= other._pos

    def __gt__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._check_same_input(other)
        return self._pos > other._pos

    def __ge__(self, other: Position) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        self._check_same_input(other)
        return self._pos >= other._pos

    def __hash__(self) -> int:
        return hash((id(self._input), self._pos))

    def __repr__(self) -> str:
        return f"Position(pos={self._pos})"