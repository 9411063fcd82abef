# puzzlekit

A small library of solutions to classic algorithm puzzles, written as plain
Python with no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Names | Purpose |
| --- | --- | --- |
| `puzzlekit.trees` | `TreeNode`, `count_nodes` | Count the nodes of a binary tree |
| `puzzlekit.expressions` | `diff_ways_to_compute` | Every value an expression takes under all parenthesisations |
| `puzzlekit.arrays` | `reconstruct_queue`, `reverse_pairs` | Queue reconstruction by height; count pairs `i < j` with `nums[i] > 2 * nums[j]` |
| `puzzlekit.range_freq` | `RangeFreqQuery` | Segment tree answering "how often does a value occur between two indices" |
| `puzzlekit.strings` | `longest_diverse_string`, `longest_prefix` | Longest string of `a`/`b`/`c` with no letter three times in a row; longest proper prefix that is also a suffix |
| `puzzlekit.tries` | `Trie`, `replace_words`, `MagicDictionary`, `MapSum`, `camel_match`, `min_valid_strings` | Prefix-tree puzzles |

## Examples

```python
from puzzlekit.expressions import diff_ways_to_compute
from puzzlekit.arrays import reverse_pairs
from puzzlekit.range_freq import RangeFreqQuery
from puzzlekit.strings import longest_prefix
from puzzlekit.tries import replace_words, MapSum

sorted(diff_ways_to_compute("2-1-1"))        # [0, 2]
reverse_pairs([1, 3, 2, 3, 1])                # 2

rfq = RangeFreqQuery([12, 33, 4, 56, 22, 2, 34, 33, 22, 12, 34, 56])
rfq.query(1, 2, 4)                            # 1
rfq.query(0, 11, 33)                          # 2

longest_prefix("level")                       # "l"

replace_words(["cat", "bat", "rat"], "the cattle was rattled by the battery")
# "the cat was rat by the bat"

ms = MapSum()
ms.insert("apple", 3)
ms.insert("app", 2)
ms.sum("ap")                                  # 5
```

## Notes on behaviour

- `diff_ways_to_compute` treats every non-digit character as an operator;
  `+`, `-` and `*` combine their operands, any other operator yields 0. An
  expression with a missing operand (for example `"1+"`) raises `ValueError`.
- `RangeFreqQuery` raises `ValueError` when given an empty array.
  `query(left, right, value)` counts over the inclusive range `left..right`.
- `longest_diverse_string` raises `ValueError` for a negative letter count.
- `MagicDictionary.search` tries replacing each letter with another of the
  letters `a` to `z`, so stored words are expected to use those letters.
- `camel_match` reports a query as matching when the pattern can be turned
  into it by inserting only lowercase letters `a` to `z`.
- `min_valid_strings` returns `-1` when the target cannot be built from
  prefixes of the given words.

## What it does not do

puzzlekit is a library only: it has no command-line tool, and every function
works on values held in memory.