# chainlist

A small singly linked list that holds unsigned 32-bit integers. It keeps a
reference to both the head and the tail, so appending and prepending take
constant time. You can insert at any position, find a value, remove by
position, and create iterators that start at any index.

## Installation

```
pip install .
```

## Usage

```python
from chainlist.linkedlist import LinkedList

ll = LinkedList([1, 2, 4])
ll.insert(2, 3)        # insert 3 at index 2
ll.insert_front(0)
ll.insert_end(5)

len(ll)                # 6
list(ll)               # [0, 1, 2, 3, 4, 5]
ll.find(3)             # 3, the index of the first occurrence

ll.remove(0)
list(ll)               # [1, 2, 3, 4, 5]
```

`LinkedList()` with no argument creates an empty list. When you pass an
iterable, its items are appended in order.

### Errors

- An inserted value that is not an `int` raises `TypeError`. This includes
  `bool` values.
- An inserted value outside `0 .. 0xFFFFFFFF` raises `ValueError`.
- `insert(index, data)` accepts an `index` from `0` to `len(ll)` inclusive.
  Any other index raises `IndexError`.
- `remove(index)` and `iterator(index)` accept an `index` from `0` to
  `len(ll) - 1`. Any other index raises `IndexError`. This means you cannot
  create an iterator over an empty list.
- `find(data)` raises `ValueError` when the value is not in the list.

### Iterators

`LinkedList.iterator(index=0)` returns a `ListIterator` placed on the element
at `index`. You can also create one directly with `ListIterator(ll, index)`.

The iterator has three attributes:

- `data` is the current value.
- `index` is the current position.
- `linked_list` is the list it walks.

`advance()` moves the iterator one step forward and returns `True`. When the
iterator is already on the last element, `advance()` returns `False` and the
iterator does not move.

```python
it = ll.iterator(1)
it.data, it.index      # (2, 1)
it.advance()           # True
it.data, it.index      # (3, 2)
```

A `ListIterator` is also an ordinary Python iterator. It yields values starting
with the one at its current position and continuing to the end of the list:

```python
list(ll.iterator(2))   # [3, 4, 5]
```

Iterators are not protected against changes to the list. Do not insert into or
remove from a list while an iterator over it is in use. The list has no locking
and is not meant to be shared between threads.

## Running the tests

```
pip install .[test]
pytest
```