from enum import Enum

import pytest

from pegpairs.flat_pairs import FlatPairs
from pegpairs.line_index import LineIndex
from pegpairs.tokens import QueueEnd, QueueStart, TokenKind


class Rule(Enum):
    a = 0
    b = 1
    c = 2
    d = 3


def _abc_queue(a_end, b_span, c_span, d_span=None):
    """Queue for a(0, a_end, [b(...)]), c(...) and optionally d(...)."""
    queue = [
        QueueStart(3, 0),
        QueueStart(2, b_span[0]),
        QueueEnd(1, Rule.b, None, b_span[1]),
        QueueEnd(0, Rule.a, None, a_end),
        QueueStart(5, c_span[0]),
        QueueEnd(4, Rule.c, None, c_span[1]),
    ]
    if d_span is not None:
        queue += [QueueStart(7, d_span[0]), QueueEnd(6, Rule.d, None, d_span[1])]
    return queue


def _flat(input, queue):
    return FlatPairs(queue, input, LineIndex(input), 0, len(queue))


def abcde():
    return _flat("abcde", _abc_queue(3, (1, 2), (4, 5)))


def abc_newline():
    return _flat("abc\nefgh", _abc_queue(3, (1, 2), (4, 5), (5, 8)))


def wide_chars():
    return _flat("我很漂亮efgh", _abc_queue(9, (3, 6), (12, 13), (13, 16)))


def test_iter_for_flat_pairs():
    assert [p.as_rule() for p in abcde()] == [Rule.a, Rule.b, Rule.c]


def test_double_ended_iter_for_flat_pairs():
    assert [p.as_rule() for p in reversed(abcde())] == [Rule.c, Rule.b, Rule.a]


def test_line_col():
    pairs = _flat("abcNe\nabcde", _abc_queue(3, (1, 2), (4, 5)))

    pair = next(pairs)
    assert pair.as_str() == "abc"
    assert pair.line_col() == (1, 1)
    assert pair.line_col() == pair.start_pos().line_col()

    pair = next(pairs)
    assert pair.as_str() == "b"
    assert pair.line_col() == (1, 2)
    assert pair.line_col() == pair.start_pos().line_col()

    pair = next(pairs)
    assert pair.as_str() == "e"
    assert pair.line_col() == (1, 5)
    assert pair.line_col() == pair.start_pos().line_col()


def test_exact_size_iter_for_pairs():
    pairs = abc_newline()
    assert len(pairs) == 4
    assert len(pairs) == len(list(pairs))

    pairs = wide_chars()
    assert len(pairs) == len(list(pairs))

    pairs = abc_newline()
    expected = len(pairs)
    assert len(list(reversed(pairs))) == expected

    pairs = abc_newline()
    pairs_len = len(pairs)
    next(pairs)
    assert len(pairs) == pairs_len - 1
    assert len(list(pairs)) + 1 == pairs_len


def test_len_after_next_back():
    pairs = abc_newline()
    pairs.next_back()
    assert len(pairs) == 3
    assert [p.as_rule() for p in pairs] == [Rule.a, Rule.b, Rule.c]


def test_front_and_back_meet():
    pairs = abcde()
    assert pairs.next_back().as_rule() == Rule.c
    assert next(pairs).as_rule() == Rule.a
    assert next(pairs).as_rule() == Rule.b
    with pytest.raises(StopIteration):
        next(pairs)
    with pytest.raises(StopIteration):
        pairs.next_back()


def test_wide_chars_strings():
    assert [p.as_str() for p in wide_chars()] == ["我很漂", "很", "e", "fgh"]


def test_tokens_of_flat_pairs():
    tokens = list(abcde().tokens())
    assert len(tokens) == 6
    assert [(t.kind, t.rule, t.pos.pos) for t in tokens] == [
        (TokenKind.START, Rule.a, 0),
        (TokenKind.START, Rule.b, 1),
        (TokenKind.END, Rule.b, 2),
        (TokenKind.END, Rule.a, 3),
        (TokenKind.START, Rule.c, 4),
        (TokenKind.END, Rule.c, 5),
    ]


def test_tokens_of_empty_rule():
    queue = [QueueStart(1, 0), QueueEnd(0, Rule.a, None, 0)]
    assert len(list(_flat("", queue).tokens())) == 2


def test_copy_is_independent():
    pairs = abcde()
    duplicate = pairs.copy()
    next(pairs)
    assert len(duplicate) == 3
    assert [p.as_rule() for p in duplicate] == [Rule.a, Rule.b, Rule.c]
    assert [p.as_rule() for p in pairs] == [Rule.b, Rule.c]


def test_repr():
    text = repr(abcde())
    assert text == (
        "FlatPairs { pairs: ["
        'Pair { rule: a, span: Span { str: "abc", start: 0, end: 3 }, inner: ['
        'Pair { rule: b, span: Span { str: "b", start: 1, end: 2 }, inner: [] }'
        "] }, "
        'Pair { rule: b, span: Span { str: "b", start: 1, end: 2 }, inner: [] }, '
        'Pair { rule: c, span: Span { str: "e", start: 4, end: 5 }, inner: [] }'
        "] }"
    )


def test_repr_does_not_consume():
    pairs = abcde()
    repr(pairs)
    assert len(list(pairs)) == 3


def test_empty_range():
    pairs = _flat("abcde", _abc_queue(3, (1, 2), (4, 5)))
    empty = FlatPairs(pairs._queue, "abcde", LineIndex("abcde"), 2, 2)
    assert len(empty) == 0
    assert list(empty) == []
    with pytest.raises(StopIteration):
        empty.next_back()