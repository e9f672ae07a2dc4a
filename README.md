# rangestab

`rangestab` provides a self-balancing interval tree and a mapping that is keyed by
half-open ranges. It answers the question "which stored ranges contain this
point?" in O(log N + K) time, where K is the number of matches.

## Installation

```
pip install rangestab
```

## RangeDict

`RangeDict` (in `rangestab.range_dict`) maps half-open ranges `[low, high)` to
arbitrary values. Assigning to a `(low, high)` tuple adds a range. Indexing with
a single number gives a list of every value whose range contains that number.
Both bounds and the queried point are converted to `float`.

```python
from rangestab.range_dict import RangeDict

schedule = RangeDict()
schedule[0.0, 5.0] = "warm-up"
schedule[2.0, 8.0] = "main"
schedule[5.0, 10.0] = "cool-down"

sorted(schedule[3.0])   # ['main', 'warm-up']
sorted(schedule[5.0])   # ['cool-down', 'main']  (5.0 is outside [0.0, 5.0))
len(schedule)           # 3
```

Ranges can overlap, and a range can be stored more than once. Each assignment
adds a new entry. It never replaces an earlier one.

Errors when storing a range:

- `TypeError` when the key is not a tuple.
- `IndexError("Invalid Range: must be a (low, high) tuple")` when the tuple does
  not hold exactly two numbers.
- `IndexError("Invalid Range.")` when `low` is not strictly less than `high`.
  A NaN bound fails this check, because `low < high` is never true for NaN.

Errors when looking up a point:

- `TypeError` when the key is not a number.
- `FloatingPointError("Invalid key value.")` when the key is NaN.
- `IndexError("Not found.")` when no stored range contains the point.

## IntervalTree

`IntervalTree` (in `rangestab.interval_tree`) is the AVL-balanced structure
underneath `RangeDict`. Its bounds can be any mutually ordered values, such as
integers, floats or dates. Starts are inclusive and ends are exclusive.

```python
from rangestab.interval_tree import IntervalTree

tree = IntervalTree()
tree.insert(0, 5, "a")
tree.insert(2, 8, "b")
tree.insert(5, 10, "c")

sorted(tree.find_point(3))   # ['a', 'b']
tree.find_point(10)          # []
tree.height()                # height of the balanced tree, 0 when empty
len(tree)                    # 3
list(tree)                   # [(0, 5, 'a'), (2, 8, 'b'), (5, 10, 'c')]
```

`find_point` returns an empty list when nothing matches. `IntervalTree` does not
check its bounds: an interval whose start is not below its end is stored but
never matches any point. Iterating the tree yields `(start, end, value)` triples
in order of start.

## What it does not do

Entries can only be added. Neither `RangeDict` nor `IntervalTree` can remove or
replace a stored range, and neither saves its contents anywhere; everything lives
in memory.

## Running the tests

```
pip install -e ".[test]"
pytest
```