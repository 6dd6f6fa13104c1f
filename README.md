# dsakit

Compact, dependency-free Python implementations of classic data structures and
algorithms. Functions return plain Python values (lists, tuples, booleans,
strings) and raise a specific exception when they are used incorrectly.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dsakit.numbers` | `digit_count`, `factorial`, `factors`, `fibonacci_sequence`, `gcd`, `lcm`, `is_palindrome_number`, `is_power_of_two`, `is_prime`, `prime_factors`, `count_down`, `count_up`, `is_bit_set`, `count_set_bits`, `sum_of_digits`, `sum_natural`, `hanoi_moves` (returns `HanoiMove` tuples), `max_rope_pieces`, `trailing_zeros` |
| `dsakit.arrays` | `largest`, `second_largest`, `odd_occurring`, `two_odd_occurring` |
| `dsakit.strings` | `build_lps`, `kmp_search`, `is_anagram`, `leftmost_non_repeating`, `leftmost_repeating`, `is_palindrome`, `reverse_words` |
| `dsakit.hashing` | `first_wins`, `render_table` |
| `dsakit.stacks` | `BoundedStack`, `LinkedStack`, `stock_span`, `StackOverflowError`, `StackUnderflowError` |
| `dsakit.queues` | `BoundedQueue`, `LinkedQueue`, `QueueFullError`, `QueueEmptyError` |
| `dsakit.tree` | `Node`, `max_width`, `height`, `is_balanced`, `has_children_sum_property`, `nodes_at_distance`, `inorder`, `preorder`, `postorder`, `level_order`, `level_order_by_line`, `size`, `maximum` |
| `dsakit.linked_lists` | `SinglyLinkedList`, `DoublyLinkedList`, `CircularLinkedList`, `InvalidPositionError`, `render` |
| `dsakit.menu` | `order`, `InvalidOptionError`, `main`, `MENU` |

## Examples

```python
from dsakit.numbers import gcd, prime_factors, hanoi_moves, max_rope_pieces
from dsakit.strings import kmp_search
from dsakit.stacks import BoundedStack, stock_span
from dsakit.tree import Node, level_order

gcd(12, 18)                        # 6
prime_factors(60)                  # [2, 2, 3, 5]
hanoi_moves(2)                     # [HanoiMove(1, 'A', 'B'), HanoiMove(2, 'A', 'C'), HanoiMove(1, 'B', 'C')]
max_rope_pieces(5, 2, 4, 6)        # None: the rope cannot be cut exactly
kmp_search("ababcab", "ab")        # [0, 2, 5]
stock_span([100, 80, 60, 70, 60, 75, 85])  # [1, 1, 1, 2, 1, 4, 6]

stack = BoundedStack(2)
stack.push(1)
stack.push(2)
stack.pop()                        # 2

root = Node(20)
root.left = Node(8)
root.right = Node(12)
level_order(root)                  # [20, 8, 12]
```

A few behaviours worth knowing:

- `gcd` and `lcm` take positive integers and raise `ValueError` otherwise.
- `factorial`, `sum_of_digits`, `sum_natural` and `trailing_zeros` raise
  `ValueError` for negative input.
- `is_power_of_two` is true only for powers of two greater than one.
- `second_largest` counts duplicates: `second_largest([5, 5, 1])` is `5`.
- `kmp_search` reports overlapping matches and raises `ValueError` for an
  empty pattern.
- `first_wins` keeps the first value given for a repeated key;
  `render_table` draws a mapping as a small two-column text table.
- Popping or peeking an empty stack raises `StackUnderflowError`; pushing
  onto a full `BoundedStack` raises `StackOverflowError`. The queues behave
  the same way with `QueueEmptyError` and `QueueFullError`.

### Linked lists

Each linked list can be built from an iterable and supports `push_front`,
`push_back`, `pop_front`, `pop_back`, `insert_at` and `delete_at` with 1-based
positions. An out-of-range position raises `InvalidPositionError`; popping an
empty list raises `IndexError`. `SinglyLinkedList` also has `index_of` and
`insert_sorted`, and `DoublyLinkedList` has `reversed_values`, which walks the
back links. `str()` of a list and `render()` both draw it as a chain.

```python
from dsakit.linked_lists import SinglyLinkedList, render

items = SinglyLinkedList([10, 30])
items.insert_sorted(20)
print(render(items))               # 10-->20-->30-->
items.index_of(30)                 # 3
```

## Command line

The package installs a small café ordering menu:

```
dsakit-menu c 2
```

prints

```
Welcome to CCD!
Enjoy your Cappuccino coffee!
```

The first argument is the category letter (`c` coffee, `t` tea, `s` soup,
`b` drinks, in either case) and the second is the item number. With no
arguments the same two values are read from standard input, for example
`echo "t 8" | dsakit-menu`. An unknown combination prints `INVALID OPTION!`.
From Python, `order("c", 2)` returns the item line and raises
`InvalidOptionError` for an unknown choice.

## What it does not do

Apart from the menu, the routines are library functions only: there is no
interactive command that prompts for numbers, strings or list contents. Input
is passed in as arguments and results come back as values to print or use as
you like.