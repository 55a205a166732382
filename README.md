# dsakit

A small collection of classic data structures and algorithms in plain Python.
It has no runtime dependencies.

## Contents

- `dsakit.bits`: bit tricks on integers, mostly with 32-bit word semantics. Covers
  single and odd-occurring numbers, the missing number, powers of two, four and
  eight, set-bit counting, single bits and bit ranges, sign extension, bit
  reversal, XOR over ranges, ASCII case tricks and branchless min/max.
- `dsakit.strings`: anagram and palindrome checks, longest common prefix, word
  reversal, run-length compression (`compress`) and the shortest run-length
  encoding after at most `k` deletions (`optimal_compression_length`).
- `dsakit.linked_list`: `Node`, a singly linked `LinkedList`, and the helpers
  `merge_sorted`, `has_loop` and `circular_chain`.
- `dsakit.linked_variants`: `DoublyLinkedList` and `CircularLinkedList`.
- `dsakit.queues`: an unbounded `LinkedQueue` and a fixed-size `CircularBuffer`.
- `dsakit.stacks`: a bounded `ArrayStack`, an unbounded `LinkedStack`, and
  `is_balanced` for parentheses.
- `dsakit.binary_tree`: `BinarySearchTree`, which ignores duplicates and iterates
  in ascending order.
- `dsakit.matrix`: rotations and flips of nested-list matrices (new or in place)
  and of flat row-major lists.
- `dsakit.bayer`: `bayer_to_rgb`, turning an RGGB mosaic into RGB bytes.
- `dsakit.problems`: `min_swaps`, `min_groups`, `maximum_coins` and `max_width_ramp`.

## Installation

```
pip install .
```

## Examples

```python
from dsakit.bits import count_set_bits, reverse_bits, xor_range
from dsakit.strings import compress, longest_common_prefix
from dsakit.linked_list import LinkedList
from dsakit.queues import CircularBuffer, QueueFull
from dsakit.stacks import is_balanced
from dsakit.matrix import rotate_clockwise

count_set_bits(11)                   # 3
reverse_bits(1)                      # 0x80000000
xor_range(2, 4)                      # 5
compress("aabbccc")                  # "a2b2c3"
longest_common_prefix(["geeksforgeeks", "geeks", "geek", "geezer"])  # "gee"
is_balanced("((a+b))")               # True

items = LinkedList([3, 5, 15])
items.insert(2, 10)                  # insert positions count from 0
list(items)                          # [3, 5, 10, 15]
items.delete(1)                      # delete positions count from 1; returns 3

buffer = CircularBuffer(4)
for value in range(3):
    buffer.enqueue(value)
try:
    buffer.enqueue(99)
except QueueFull:
    pass                             # one slot stays free to tell full from empty
buffer.dequeue()                     # 0

rotate_clockwise([[1, 2, 3], [4, 5, 6]])  # [[4, 1], [5, 2], [6, 3]]
```

Operations that cannot go ahead raise an exception rather than returning a
sentinel value: `StackFull` and `StackEmpty` for stacks, `QueueFull` and
`QueueEmpty` for queues, `IndexError` for list positions out of range, and
`ValueError` for searches that find nothing or arguments out of range.

## What it does not include

The package has no sorting routines and no fixed-capacity array type with set
operations; use Python's `sorted` and `list` for those. It is a library only and
installs no command.

## Running the tests

```
pip install ".[test]"
pytest
```