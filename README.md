# algodrills

Plain-Python implementations of classic algorithm exercises. They cover
string puzzles, bracket matching and infix-to-postfix conversion, integer
arithmetic, array tricks, singly linked lists, binary search trees, and
containers built from other containers. The package has no dependencies.

## Installation

```
pip install .
```

To install the test extra and run the suite:

```
pip install ".[test]"
pytest
```

## Modules

### `algodrills.strings`

- `are_anagrams(first, second)`: ignores spaces and keeps case significant.
- `are_anagrams_counting(first, second)`: compares exact character counts.
- `are_anagrams_ignoring_case(first, second)`: ignores both case and spaces.
- `can_form(source, target)`: tells whether `target` can be built from the characters of `source`, using each one at most once.
- `is_palindrome(text)`
- `first_non_repeating_char(text)`: returns the character, or `None`.
- `permutations(text)`: a generator in swap-and-backtrack order. An empty string yields nothing.

### `algodrills.expressions`

- `is_balanced(expr)`: checks the nesting of `()`, `{}` and `[]`. Any character other than a bracket makes the expression unbalanced.
- `precedence(op)`: returns 1 for `+` and `-`, 2 for `*` and `/`, and 0 for anything else.
- `infix_to_postfix(infix)`: takes single-character alphanumeric operands. It raises `ValueError` on an unmatched `)`.

### `algodrills.arithmetic`

- `factorial(n)`: iterative. Values below 1 give 1.
- `factorial_recursive(n)`: raises `ValueError` for a negative `n`.
- `fibonacci_sequence(n)`: returns the first `n` numbers, and always at least `[0, 1]`.
- `fibonacci(n)`: returns the n-th Fibonacci number.
- `digital_root(num)`
- `power(base, exponent)`: raises `ValueError` for a negative exponent.
- `parity(num)`: returns `"Odd"` or `"Even"`.
- `is_strong_number(num)` and `strong_numbers(start, end)`. The range for `strong_numbers` is inclusive.

### `algodrills.arrays`

Every function returns a new list and leaves its input unchanged.

- `diagonal_difference(matrix)`
- `kth_largest(values, k)` and `kth_smallest(values, k)`: raise `ValueError` on empty input or when `k < 1`.
- `left_shift(values)`
- `move_zeros(values)`
- `missing_values(values)`: returns the integers skipped in a sorted sequence.
- `second_highest(values)`: returns `None` when there is no second distinct value.
- `second_largest(values)` and `second_smallest(values)`: return `-1` when there is no second distinct value.
- `shift_larger_to_left(values, threshold)`
- `max_profit(prices)`
- `two_sum(nums, target)`: returns a tuple of indices, or `None`.

### `algodrills.linked_list`

- `ListNode`: a node with `val` and `next`.
- `build_list(values)`
- `list_values(head)`: raises `ValueError` if the list contains a cycle.
- `has_cycle(head)`
- `find_middle(head)`: for an even length, returns the second of the two middle nodes.
- `merge_two_lists(first, second)` and `merge_two_lists_recursive(first, second)`: splice two sorted lists together. On equal values, the node from `second` comes first.
- `reverse_values(head)`

### `algodrills.trees`

- `TreeNode`: a node with `val`, `left` and `right`.
- `is_bst(root)`: duplicate values make the tree invalid.
- `kth_largest_in_bst(root, k)`: returns `None` when `k` is out of range.

### `algodrills.containers`

- `QueueFromStacks`: has `enqueue`, `dequeue` and `len()`.
- `StackFromQueue`: has `push`, `pop`, `top` and `len()`.

Removing or reading from an empty container raises `IndexError`.

## Examples

```python
from algodrills.strings import are_anagrams
from algodrills.expressions import is_balanced, infix_to_postfix
from algodrills.arithmetic import strong_numbers, digital_root
from algodrills.arrays import kth_largest, max_profit
from algodrills.linked_list import build_list, find_middle, merge_two_lists, list_values
from algodrills.containers import QueueFromStacks

are_anagrams("spar", "rasp")             # True
is_balanced("{[()]}")                    # True
infix_to_postfix("a+b*(c-d)")            # "abcd-*+"
strong_numbers(1, 500)                   # [1, 2, 145]
digital_root(9876)                       # 3
kth_largest([7, 4, 6, 3, 9, 1], 4)       # 4
max_profit([7, 1, 5, 3, 6, 4])           # 5

merged = merge_two_lists(build_list([1, 3, 5]), build_list([2, 4]))
list_values(merged)                      # [1, 2, 3, 4, 5]
find_middle(merged).val                  # 3

queue = QueueFromStacks()
queue.enqueue(1)
queue.enqueue(2)
queue.dequeue()                          # 1
```

## What it does not do

This is a library only. It has no command-line tool, and it does not read input or print results. Call the functions from your own code.