# pegpairs

Building blocks for the output side of a parsing-expression-grammar parser:
a cursor over the input text, a flat queue of start/end tokens, and the
iterators that turn that queue into a tree of matched rules.

## Installing

```
pip install pegpairs
```

For running the test suite:

```
pip install "pegpairs[test]"
pytest
```

## What is in it

- `pegpairs.position.Position` — a cursor into a string with matching
  helpers (`match_string`, `match_insensitive`, `match_range`, `match_char`,
  `match_char_by`, `skip`, `skip_back`, `skip_until`), checks `at_start` and
  `at_end`, and line information (`line_col`, `line_of`). Positions are byte
  offsets into the UTF-8 encoding of the input; creating one at an offset
  that is not a character boundary raises `ValueError`. Positions from the
  same input compare by offset; ordering positions from different inputs
  raises `ValueError`.
- `pegpairs.line_index.LineIndex` — precomputed line starts, so that
  `line_col` lookups are a binary search rather than a scan.
- `pegpairs.tokens` — the queue entries `QueueStart` and `QueueEnd`, the
  public `Token` (with its `TokenKind`, `START` or `END`), and the `Tokens`
  iterator, which can be walked from the front, from the back with
  `next_back`, or with `reversed()`, and reports its remaining length.
- `pegpairs.pair.Pair` — one matched rule: `as_rule`, `as_str`,
  `start_pos`, `end_pos`, `line_col`, the optional `as_node_tag`, its
  inner pairs (`into_inner`) and its `tokens`. `str()` gives the compact
  form `rule(start, end, [children])`.
- `pegpairs.pairs.Pairs` — a sequence of sibling pairs. It can be iterated
  forwards or backwards, peeked at, joined with `concat`, flattened into
  `pegpairs.flat_pairs.FlatPairs` (every pair, nested ones included, in
  pre-order), and searched for tagged nodes with `find_tagged` and
  `find_first_tagged`. `Pairs.single(pair)` wraps one pair.

The iterators are consumed as they are walked; call `copy()` for an
independent iterator over what remains.

## Example

```python
from pegpairs.tokens import QueueStart, QueueEnd
from pegpairs.pairs import Pairs

text = "abcde"
# a(0, 3, [b(1, 2)]), c(4, 5)
queue = [
    QueueStart(end_token_index=3, input_pos=0),
    QueueStart(end_token_index=2, input_pos=1),
    QueueEnd(start_token_index=1, rule="b", tag=None, input_pos=2),
    QueueEnd(start_token_index=0, rule="a", tag=None, input_pos=3),
    QueueStart(end_token_index=5, input_pos=4),
    QueueEnd(start_token_index=4, rule="c", tag=None, input_pos=5),
]

pairs = Pairs(queue, text, None, 0, len(queue))
print(pairs)            # [a(0, 3, [b(1, 2)]), c(4, 5)]
print(pairs.concat())   # abce
print([p.as_rule() for p in pairs.copy().flatten()])  # ['a', 'b', 'c']
```

Any hashable value can serve as a rule: strings, or members of an
`enum.Enum` you define for your grammar (members are shown by name).

## What it does not do

There is no grammar language and no parsing engine here: nothing reads a
grammar or runs rules over input to fill the token queue. You build the
queue of `QueueStart` and `QueueEnd` entries yourself (for instance from
your own parser, using `Position` to move through the input), and the
package gives you the tree views over it. There are no helpers for
asserting on parser output in tests, and no command-line tool.