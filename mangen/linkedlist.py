"""A doubly linked list with a sentinel end node."""

from __future__ import annotations

import operator
from typing import Any, Callable, Iterable, Iterator, Optional

__all__ = ["ListNode", "LinkedList"]


class ListNode:
    """A node of a :class:`LinkedList`."""

    __slots__ = ("prev", "next", "value")

    def __init__(
        self,
        value: Any = None,
        prev: Optional["ListNode"] = None,
        next: Optional["ListNode"] = None,
    ) -> None:
        self.value = value
        self.prev = prev
        self.next = next

    def advance(self, count: int) -> "ListNode":
        """Return the node ``count`` steps away; negative counts move backwards."""
        node = self
        step = "next" if count > 0 else "prev"
        for _ in range(abs(count)):
            following = getattr(node, step)
            if following is None:
                raise IndexError("advance moved outside the list")
            node = following
        return node

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList:
    """Doubly linked list; ``end`` is a sentinel that follows the last node."""

    def __init__(self, iterable: Iterable[Any] = ()) -> None:
        self._end = ListNode()
        self._head = self._end
        self._size = 0
        for value in iterable:
            self.append(value)

    @property
    def begin(self) -> ListNode:
        """The first node, or ``end`` when the list is empty."""
        return self._head

    @property
    def end(self) -> ListNode:
        """The sentinel node that follows the last element."""
        return self._end

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __iter__(self) -> Iterator[Any]:
        for node in self.nodes():
            yield node.value

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def nodes(self) -> Iterator[ListNode]:
        """Yield every element node from first to last."""
        node = self._head
        while node is not self._end:
            following = node.next
            yield node
            node = following

    def append(self, value: Any) -> ListNode:
        """Add ``value`` at the end and return its node."""
        last = self._end.prev
        node = ListNode(value, prev=last, next=self._end)
        if last is None:
            self._head = node
        else:
            last.next = node
        self._end.prev = node
        self._size += 1
        return node

    def appendleft(self, value: Any) -> ListNode:
        """Add ``value`` at the front and return its node."""
        if not self._size:
            return self.append(value)
        node = ListNode(value, prev=None, next=self._head)
        self._head.prev = node
        self._head = node
        self._size += 1
        return node

    def insert_before(self, node: ListNode, value: Any) -> ListNode:
        """Insert ``value`` before ``node`` (which may be ``end``)."""
        if node is self._head:
            return self.appendleft(value)
        if node is self._end:
            return self.append(value)
        new = ListNode(value, prev=node.prev, next=node)
        node.prev.next = new
        node.prev = new
        self._size += 1
        return new

    def _unlink(self, node: ListNode) -> Any:
        before, after = node.prev, node.next
        if before is None:
            self._head = after
        else:
            before.next = after
        after.prev = before
        node.prev = node.next = None
        self._size -= 1
        return node.value

    def pop(self) -> Any:
        """Remove and return the last element."""
        if not self._size:
            raise IndexError("pop from an empty list")
        return self._unlink(self._end.prev)

    def popleft(self) -> Any:
        """Remove and return the first element."""
        if not self._size:
            raise IndexError("popleft from an empty list")
        return self._unlink(self._head)

    def remove_node(self, node: ListNode) -> Any:
        """Remove ``node`` from the list and return its value."""
        if node is self._end:
            raise ValueError("cannot remove the end sentinel")
        if not self._size:
            raise IndexError("remove from an empty list")
        return self._unlink(node)

    def resize(self, size: int, fill: Any = None) -> None:
        """Grow with ``fill`` or shrink from the back to ``size`` elements."""
        if size < 0:
            raise ValueError("size must not be negative")
        while self._size > size:
            self.pop()
        while self._size < size:
            self.append(fill)

    def clear(self) -> None:
        """Remove every element."""
        for node in list(self.nodes()):
            node.prev = node.next = None
        self._end.prev = None
        self._head = self._end
        self._size = 0

    def first(self) -> Any:
        """Return the first element."""
        if not self._size:
            raise IndexError("first of an empty list")
        return self._head.value

    def last(self) -> Any:
        """Return the last element."""
        if not self._size:
            raise IndexError("last of an empty list")
        return self._end.prev.value

    def swap(self, other: "LinkedList") -> None:
        """Exchange contents with ``other``."""
        self._head, other._head = other._head, self._head
        self._end, other._end = other._end, self._end
        self._size, other._size = other._size, self._size

    def find(
        self,
        value: Any,
        eq: Callable[[Any, Any], bool] = operator.eq,
    ) -> Optional[ListNode]:
        """Return the first node whose value matches ``value``, or None."""
        for node in self.nodes():
            if eq(node.value, value):
                return node
        return None