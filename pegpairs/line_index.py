"""Byte offsets of line starts, for fast line and column lookups."""

from __future__ import annotations

from bisect import bisect_right

__all__ = ["LineIndex"]


class LineIndex:
    """Index of the byte offset at which each line of a text begins."""

    __slots__ = ("_line_offsets", "_cached_input", "_cached_data")

    def __init__(self, text: str) -> None:
        data = text.encode("utf-8")
        offsets = [0]
        found = data.find(b"\n")
        while found >= 0:
            offsets.append(found + 1)
            found = data.find(b"\n", found + 1)
        self._line_offsets = offsets
        self._cached_input: str | None = None
        self._cached_data = b""

    def _encoded(self, input: str) -> bytes:
        if self._cached_input is not input:
            self._cached_input = input
            self._cached_data = input.encode("utf-8")
        return self._cached_data

    def line_col(self, input: str, pos: int) -> tuple[int, int]:
        """Return the 1-based line and column of byte offset ``pos`` in ``input``."""
        line = bisect_right(self._line_offsets, pos) - 1
        first_offset = self._line_offsets[line]
        data = self._encoded(input)
        col = len(data[first_offset:pos].decode("utf-8"))
        return line + 1, col + 1