"""A singly linked list of unsigned 32-bit integers with a positional iterator."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Optional

_UINT_MAX = 0xFFFFFFFF


class _Node:
    __slots__ = ("data", "next")

    def __init__(self, data: int, next: Optional[_Node] = None) -> None:
        self.data = data
        self.next = next


def _check_data(data: int) -> int:
    if isinstance(data, bool) or not isinstance(data, int):
        raise TypeError(f"data must be an int, not {type(data).__name__}")
    if not 0 <= data <= _UINT_MAX:
        raise ValueError(f"data {data} is outside the unsigned 32-bit range")
    return data


class LinkedList:
    """Singly linked list with head and tail references."""

    def __init__(self, items: Optional[Iterable[int]] = None) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items or ():
            self.insert_end(item)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def _node_at(self, index: int) -> _Node:
        if index == self._size - 1:
            assert self._tail is not None
            return self._tail
        node = self._head
        for _ in range(index):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_end(self, data: int) -> None:
        """Append data at the end of the list."""
        node = _Node(_check_data(data))
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def insert_front(self, data: int) -> None:
        """Insert data at the front of the list."""
        node = _Node(_check_data(data), self._head)
        if self._tail is None:
            self._tail = node
        self._head = node
        self._size += 1

    def insert(self, index: int, data: int) -> None:
        """Insert data so that it ends up at position index (0..len)."""
        if not 0 <= index <= self._size:
            raise IndexError(f"insert index {index} out of range")
        if index == 0:
            self.insert_front(data)
        elif index == self._size:
            self.insert_end(data)
        else:
            prev = self._node_at(index - 1)
            prev.next = _Node(_check_data(data), prev.next)
            self._size += 1

    def find(self, data: int) -> int:
        """Return the index of the first occurrence of data."""
        for index, value in enumerate(self):
            if value == data:
                return index
        raise ValueError(f"{data!r} is not in list")

    def remove(self, index: int) -> None:
        """Remove the element at position index."""
        if not 0 <= index < self._size:
            raise IndexError(f"remove index {index} out of range")
        assert self._head is not None
        if self._size == 1:
            self._head = None
            self._tail = None
        elif index == 0:
            self._head = self._head.next
        else:
            prev = self._node_at(index - 1)
            assert prev.next is not None
            prev.next = prev.next.next
            if index == self._size - 1:
                self._tail = prev
        self._size -= 1

    def iterator(self, index: int = 0) -> ListIterator:
        """Return an iterator positioned at index."""
        return ListIterator(self, index)


class ListIterator:
    """Cursor over a LinkedList, exposing the current data and index.

    Not safe against modification of the list while in use.
    """

    def __init__(self, linked_list: LinkedList, index: int = 0) -> None:
        if not 0 <= index < len(linked_list):
            raise IndexError(f"iterator index {index} out of range")
        self.linked_list = linked_list
        self._node = linked_list._node_at(index)
        self.index = index
        self.data = self._node.data
        self._pending = True

    def advance(self) -> bool:
        """Move to the next node; return False if already at the last one."""
        if self._node.next is None:
            return False
        self._node = self._node.next
        self.index += 1
        self.data = self._node.data
        self._pending = True
        return True

    def __iter__(self) -> ListIterator:
        return self

    def __next__(self) -> int:
        if self._pending:
            self._pending = False
            return self.data
        if self.advance():
            self._pending = False
            return self.data
        raise StopIteration