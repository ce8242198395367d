"""
Singly-linked container with head and tail references.

Appending is O(1) because the tail is kept. Positional access walks
from the head, so get and remove_at are O(index). Nodes are only
ever created by add(). Everything else relinks or drops them.
"""

from typing import Any, Generic, Iterator
from .container_defs import *
from .schema_defs import *

class Node:
    __slots__ = ("value", "next")

    def __init__(self, value):
        self.value = value
        self.next = None


class LinkedListContainer(Generic[T]):
    def __init__(self):
        self.head = None
        self.tail = None
        self.count = 0

    def add(self, element: T):
        """Append element to the end. None is rejected."""
        if element is None:
            raise InvalidArgument("Element cannot be null")

        node = Node(element)
        if self.head is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node

        self.count += 1

    def get(self, index: int) -> T:
        self._check_index(index)
        return self._node_at(index).value

    def remove_at(self, index: int) -> T:
        """Remove and return the element at index."""
        self._check_index(index)
        if index == 0:
            return self._remove_first()

        prev = self._node_at(index - 1)
        node = prev.next
        prev.next = node.next

        # Removed the tail.
        if prev.next is None:
            self.tail = prev

        node.next = None
        self.count -= 1
        return node.value

    def remove(self, element: Any) -> bool:
        """
        Remove the first element equal to element.
        Returns False rather than raising for None or no match.
        """
        if element is None or self.head is None:
            return False

        if self.head.value == element:
            self._remove_first()
            return True

        prev = self.head
        while prev.next is not None and prev.next.value != element:
            prev = prev.next

        if prev.next is None:
            return False

        node = prev.next
        prev.next = node.next
        if prev.next is None:
            self.tail = prev

        node.next = None
        self.count -= 1
        return True

    def size(self) -> int:
        return self.count

    def is_empty(self) -> bool:
        return self.count == 0

    def clear(self):
        # Dropping the head releases the whole chain.
        self.head = None
        self.tail = None
        self.count = 0

    def contains(self, element: Any) -> bool:
        return self.index_of(element) != NOT_FOUND

    def index_of(self, element: Any) -> int:
        if element is None:
            return NOT_FOUND

        for index, node in enumerate(self._nodes()):
            if node.value == element:
                return index

        return NOT_FOUND

    def render(self) -> str:
        if self.head is None:
            return EMPTY_RENDER

        parts = [str(node.value) for node in self._nodes()]
        return RENDER_OPEN + RENDER_SEPARATOR.join(parts) + RENDER_CLOSE

    def snapshot(self) -> ContainerSnapshot:
        """Validated copy of the current items, size and emptiness."""
        return ContainerSnapshot(
            items=[node.value for node in self._nodes()],
            size=self.count,
            is_empty=self.is_empty()
        )

    def _remove_first(self):
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None

        node.next = None
        self.count -= 1
        return node.value

    def _node_at(self, index):
        cur = self.head
        for _ in range(index):
            cur = cur.next
        return cur

    def _check_index(self, index):
        ensure_index_type(index)
        if index < 0 or index >= self.count:
            raise IndexOutOfRange(index, self.count)

    def _nodes(self) -> Iterator[Node]:
        cur = self.head
        while cur is not None:
            yield cur
            cur = cur.next

    def __len__(self):
        return self.count

    def __bool__(self):
        return self.head is not None

    def __contains__(self, element):
        return self.contains(element)

    def __str__(self):
        return self.render()

    def __repr__(self):
        values = [node.value for node in self._nodes()]
        return f"LinkedListContainer({values!r})"
