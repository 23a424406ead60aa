# crusty

A collection of small, self-contained building blocks: in-place sorting
algorithms, string splitting, linked lists, stacks and queues, an unbounded
multi-producer channel, iterator adapters, comprehension and container
builders, and a few ownership-style primitives. It has no dependencies
beyond the standard library.

## Installation

    pip install .

To run the test suite:

    pip install ".[test]"
    pytest

## Sorting (`crusty.sorting`)

Every sorter derives from the abstract `Sorter` and sorts a mutable
sequence in place with `sort(items)`.

```python
from crusty.sorting import (
    BubbleSort, HeapSort, InsertionSort, MergeSort, QuickSort, SelectionSort, StdSort,
)

values = [3, 4, 2, 1, 5]
QuickSort().sort(values)
assert values == [1, 2, 3, 4, 5]

InsertionSort(smart=True).sort(values)    # binary search for each insertion point
InsertionSort(smart=False).sort(values)   # adjacent swaps
```

`StdSort` calls the sequence's own `sort()` method; the others only index,
swap and (for `InsertionSort(smart=True)` and `MergeSort`) `insert`/`pop`.

## Strings

```python
from crusty.delimiter import find_next
from crusty.strsplit import StrSplit, until_char
from crusty.strtok import strtok

find_next(" ", "a b")              # (1, 2)
list(StrSplit("a b c d ", " "))    # ['a', 'b', 'c', 'd', '']
until_char("hello world", "o")     # 'hell'
strtok("hello world", " ")         # ('hello', 'world')
```

A delimiter is either a string or any object with a
`find_next(haystack)` method returning a `(start, end)` span or `None`
(see the `Delimiter` protocol). `strtok` returns the token and the rest; with
no match the whole string is the token and the rest is `""`.

## Linked structures

- `crusty.bad_stack.BadStackList`: a stack with `push` and `pop`.
- `crusty.stack.StackList`: a stack with `push`, `pop`, `peek`,
  `map_peek(func)`, `update_all(func)`, `drain()` and iteration from the top.
- `crusty.persistent_stack.ImmutableList`: a persistent list; `prepend`
  and `tail` return new lists sharing nodes, `head()` reads the first element.
- `crusty.safe_deque.SafeDequeList`: a doubly linked deque with
  `push_front`/`push_back`, `pop_front`/`pop_back`, `peek_front`/`peek_back`,
  and `drain()` returning a `DequeDrain` that pops from the front with `next()`
  and from the back with `next_back()`.
- `crusty.queue.UnsafeQueue`: a FIFO queue with `push`, `pop`, `peek`,
  `map_peek(func)`, `update_all(func)`, `drain()` and iteration from the front.
- `crusty.linked_list.LinkedList`: a doubly linked list with length,
  `front`/`back`, `replace_front`/`replace_back`, `clear`, `extend`, `copy`,
  `drain`, forward, reversed and double-ended iteration (`iter()` returns a
  `LinkedListIter` with `next_back()` and `len()`), equality, lexicographic
  ordering and hashing.

Pops and peeks on an empty container return `None`.

```python
from crusty.linked_list import LinkedList

items = LinkedList([1, 2, 3])
items.push_front(0)
list(reversed(items))     # [3, 2, 1, 0]
repr(items)               # '[0, 1, 2, 3]'

it = items.iter()
next(it), it.next_back()  # (0, 3)
```

When any compared pair of elements is unordered (for example NaN), every
ordering comparison between two `LinkedList`s is false.

## Channels (`crusty.channels`)

```python
from crusty.channels import channel

tx, rx = channel()
tx2 = tx.clone()
with tx, tx2:
    tx.send(1)
    tx2.send(2)
assert list(rx) == [1, 2]
```

`send` never blocks. `recv()` blocks until a value arrives and returns `None`
once every sender is closed and nothing is queued; iterating a `Receiver`
stops at that point. Sending on or cloning a closed sender raises
`ValueError`.

## Iterator adapters

```python
from crusty.flatten import flatten
from crusty.flat_map import flat_map

list(flatten([["a", "b"], ["c"]]))         # ['a', 'b', 'c']
list(reversed(flatten([["a"], ["b"]])))    # ['b', 'a']
"".join(flat_map(["abc", "def"], iter))    # 'abcdef'

f = flatten([["a", "b"], ["c", "d"]])
next(f), f.next_back()                     # ('a', 'd')
```

## Comprehensions (`crusty.comprehension`)

`comp(mapping, clause, *more)` lazily yields `mapping(*bound)` for every
binding produced by nested `ForIf` clauses, outermost first.

```python
from crusty.comprehension import comp, ForIf

list(comp(lambda x: x + 1, ForIf([-1, 0, 1, 2], lambda x: x > 0)))   # [2, 3]

vecs = [[1, 2, 3], [4, 5, 6]]
list(comp(lambda v, x: x, ForIf(vecs), ForIf(lambda v: v)))         # [1, 2, 3, 4, 5, 6]

list(comp(lambda i, x: x,
          ForIf(enumerate([0, 1, 2, 3]), lambda i, x: i % 2 == 0, unpack=True)))  # [0, 2]
```

A clause's sequence may be an iterable or a callable taking the values bound
by the enclosing clauses.

## Container builders (`crusty.builders`)

```python
from crusty.builders import hashmap, hashset, avec, avec_repeat

hashmap((42, "test"), (43, "mock"))   # {42: 'test', 43: 'mock'}
hashset(42, 34, 42)                   # {34, 42}
avec(42, 43)                          # [42, 43]
avec_repeat(42, 3)                    # [42, 42, 42]
```

`avec_repeat` fills all but the last slot with shallow copies of the element
and raises `ValueError` for a negative count.

## Ownership primitives

- `crusty.cell.Cell`: `get()` and `set(value)` on a single stored value; no
  locking.
- `crusty.refcell.RefCell`: `borrow()` returns a shared `Ref`, `borrow_mut()`
  an exclusive `RefMut`, or `None` when the borrow would conflict. Both guards
  expose `value` (writable on `RefMut`), have `release()` and work as context
  managers.
- `crusty.rc.Rc`: a counted handle with `value`, `clone()`, `drop()` and
  `strong_count()`; the value is let go with the last handle.
- `crusty.cow.Cow`: `Cow.borrowed(value)` / `Cow.owned(value)`, with
  `is_borrowed()`, `is_owned()`, `to_mut()` (copies a borrowed value first),
  `into_owned()`, `clone()` and `value`.
- `crusty.spin_mutex.SpinMutex`: `with_lock(func)` calls `func` with a slot
  whose `value` attribute holds the guarded value and may be reassigned;
  waiters spin until the lock is free.

```python
from crusty.refcell import RefCell
from crusty.spin_mutex import SpinMutex

cell = RefCell(1)
with cell.borrow_mut() as guard:
    guard.value = 2
assert cell.borrow().value == 2

counter = SpinMutex(0)
counter.with_lock(lambda slot: setattr(slot, "value", slot.value + 1))
assert counter.with_lock(lambda slot: slot.value) == 1
```

## What it does not do

This is a library only: it installs no command-line program, and none of its
structures persist anything to disk.