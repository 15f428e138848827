# algokit

Classic algorithms and data structures in plain Python, with no
dependencies outside the standard library.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## Modules

- `algokit.sorting` – `bubble_sort`, `heap_sort`, `insertion_sort`,
  `selection_sort`, `merge_sort`, `merge_sorted` (sorts two collections and
  merges them), `pancake_sort` and `pancake_flips` (the prefix lengths
  flipped). Every function returns a new list and leaves its input alone.
- `algokit.searching` – `linear_search` and `binary_search` (index or
  `None`), `find_pages` (book allocation; `ValueError` when there are fewer
  books than students), `max_window_sum` (sliding window),
  `max_subarray_sum` (Kadane) and `max_subarray_sum_brute`.
- `algokit.numtheory` – `nth_prime`, `is_armstrong`, `power_mod`
  (defaulting to the modulus `MOD = 1_000_000_007`), `fibonacci` (with
  `fibonacci(0) == fibonacci(1) == 1`), `gcd_weighted_sum` and
  `digit_removal`.
- `algokit.text` – `are_anagrams` and `char_frequency`.
- `algokit.puzzles` – `knapsack` (0/1), `hanoi_moves` yielding frozen `Move`
  records, and `n_queens` yielding every solution as a 0/1 board.
- `algokit.matrix` – `transpose`.
- `algokit.calculator` – `add`, `subtract`, `multiply`, `divide` (integer
  quotient truncated toward zero), `square`, `square_root`, and `main`, an
  interactive menu.
- `algokit.linkedlist` – `DoublyLinkedList` (`push_front`, `remove_inner`),
  `CircularDoublyLinkedList` (`append`, `reverse`, `backward`) and
  `CircularLinkedList` (`push`, `remove`). All are iterable and sized.
- `algokit.hashtable` – `LinearProbingTable`, an integer table hashed by
  `value % size` using linear probing with replacement; `insert`, `search`,
  `slots`, `in`, iteration and `len`. Inserting into a full table raises
  `TableFullError`.
- `algokit.stacks` – `BoundedStack` and `BoundedQueue`, which raise
  `CapacityError` when full and `EmptyError` when empty, and `is_balanced`
  for `()`, `[]` and `{}`.
- `algokit.trees` – a `Node` dataclass, `inorder_recursive`,
  `inorder_iterative`, `preorder_recursive`, `preorder_iterative` and
  `leaf_sums_by_level`.
- `algokit.graphs` – vertices numbered from 0: `dijkstra` (distances and
  predecessors), `manhattan_graph`, `max_spanning_tree_weight` (Prim),
  `adjacency_matrix`, `adjacency_list`, `bfs_order` and `dfs_order`.
- `algokit.codeforces` – answers to a set of introductory contest problems,
  each a function that takes the problem's input as Python values and returns
  the answer.

## Examples

    >>> from algokit.sorting import merge_sort
    >>> merge_sort([12, 11, 13, 5, 6, 7])
    [5, 6, 7, 11, 12, 13]
    >>> from algokit.puzzles import knapsack, hanoi_moves
    >>> knapsack(50, [10, 20, 30], [60, 100, 120])
    220
    >>> [str(move) for move in hanoi_moves(2)]
    ['Move the disc 1 from A to B', 'Move the disc 2 from A to C', 'Move the disc 1 from B to C']
    >>> from algokit.searching import find_pages
    >>> find_pages([12, 34, 67, 90], 2)
    113
    >>> from algokit.stacks import is_balanced
    >>> is_balanced("{[()]}")
    True

## Command line

An interactive menu-driven integer calculator reads choices from standard
input until you pick Exit or the input ends:

    algokit-calc

## What it does not do

Apart from the calculator, the package has no command-line programs: the
algorithms and data structures are used from Python code. Nothing is read
from or stored to files.