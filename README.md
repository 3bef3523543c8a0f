# algokit

A small collection of classic algorithms as plain, importable Python
functions, plus an interactive menu for a bounded stack.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Sorting — `algokit.sorting`

Every sort takes an iterable and returns a new list; the input is left alone.

```python
from algokit.sorting import bubble_sort, selection_sort, merge_sort, radix_sort, bucket_sort

bubble_sort([64, 34, 25, 12, 22, 11, 90])   # [11, 12, 22, 25, 34, 64, 90]
selection_sort([64, 25, 12, 22, 11])        # [11, 12, 22, 25, 64]
merge_sort([38, 27, 43, 3, 9, 82, 10])      # [3, 9, 10, 27, 38, 43, 82]
radix_sort([170, 45, 75, 90, 802, 24, 2])   # [2, 24, 45, 75, 90, 170, 802]
bucket_sort([0.897, 0.565, 0.656, 0.1234])  # [0.1234, 0.565, 0.656, 0.897]
```

- `merge_sort` is stable.
- `radix_sort` handles non-negative integers only and raises `ValueError` for
  negative ones. `radix_sort_passes(items)` is a generator that yields the list
  as it stands after each least-significant-digit pass; the number of passes is
  the number of decimal digits of the largest value.
- `bucket_sort` accepts numbers in the half-open range `[0, 1)` and raises
  `ValueError` for anything outside it.

## Searching — `algokit.searching`

- `linear_search(items, target)` returns the 1-based position of the first
  match, or `None` when the target is absent.
- `rabin_karp(text, pattern, prime)` returns a list of every 0-based index at
  which `pattern` occurs in `text` (both `str` or both `bytes`). It raises
  `ValueError` for an empty pattern or a `prime` below 1.

```python
from algokit.searching import rabin_karp

rabin_karp("abracadabra", "abra", 101)   # [0, 7]
```

## Matrices — `algokit.matrix`

`column_sums(matrix)` returns the sum of each column, and `matrix_norm(matrix)`
returns the largest of those sums. Both raise `ValueError` for an empty matrix
or rows of different lengths.

## Graphs — `algokit.graph`

`kruskal(cost)` takes a square cost adjacency matrix, with vertices numbered
from 1, and returns a `SpanningTree`. A zero entry, or one of `NO_EDGE` (999)
or more, means the two vertices are not joined. The tree holds its `Edge`
objects (`u`, `v`, `weight`) in the order they were chosen, can be iterated
and measured with `len`, and reports its total weight as `cost`. A graph that
is not connected raises `ValueError`.

```python
from algokit.graph import kruskal

tree = kruskal([[0, 2, 3], [2, 0, 1], [3, 1, 0]])
tree.cost        # 3
list(tree)       # [Edge(u=2, v=3, weight=1), Edge(u=1, v=2, weight=2)]
```

## Patterns — `algokit.patterns`

- `star_pyramid(rows)` — a left-aligned triangle with `i` stars on row `i`.
- `hosoya(n, m)` — entry `m` of row `n` of Hosoya's triangle (0 when `m > n`).
- `hosoya_triangle(height)` — the first `height` rows as lists of integers.
- `format_hosoya_triangle(height)` — the same rows as text.
- `map_of_india()` — an ASCII-art map of India drawn with `!` marks.

## Stack — `algokit.stack`

`ArrayStack(capacity=10)` is a last-in first-out stack with a fixed capacity.
`push` raises `StackFullError` when it is full; `pop` and `peek` raise
`StackEmptyError` when it is empty. `is_empty()` and `is_full()` report its
state, `len()` gives the number of items, and iterating runs from the top down.

```python
from algokit.stack import ArrayStack

stack = ArrayStack(10)
stack.push(5)
stack.push(7)
stack.peek()    # 7
list(stack)     # [7, 5]
```

## Interactive stack menu

```
algokit-stack
```

Reads choices from standard input and shows a numbered menu: 1 creates a stack
of capacity 10, 2 pushes a number, 3 pops, 4 shows the top element, 5 and 6
say whether the stack is empty or full, 7 displays its contents from the top
down, and 8 exits. The menu also ends when input runs out. The same loop can be
driven from code with `algokit.cli.run_stack_menu(lines, out)`, which returns
the stack as it stands at the end.

## What it does not do

The stack menu is the only command. Sorting, searching, matrix norms, spanning
trees and the patterns are library functions only; there is no command that
reads their input from the terminal.