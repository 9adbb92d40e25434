"""Doubly-linked list of key/value nodes used as the storage chain of OrderedMap."""

from collections.abc import Iterator
from typing import Generic, TypeVar

K = TypeVar("K")
V = TypeVar("V")


class Node(Generic[K, V]):
    """A node in the doubly-linked list."""

    __slots__ = ("key", "value", "prev", "next")

    def __init__(self, key: K, value: V) -> None:
        self.key = key
        self.value = value
        self.prev: Node[K, V] | None = None
        self.next: Node[K, V] | None = None


class DoublyLinkedList(Generic[K, V]):
    """
    Doubly-linked list with sentinel nodes.

    The list itself does not order its nodes; callers choose the splice
    position. Splicing and unlinking are O(1), positional access is O(index).
    """

    def __init__(self) -> None:
        # Sentinel nodes simplify edge cases
        self._head: Node[K, V] = Node(None, None)  # type: ignore[arg-type]
        self._tail: Node[K, V] = Node(None, None)  # type: ignore[arg-type]
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    @property
    def first(self) -> Node[K, V] | None:
        """First real node, or None if the list is empty."""
        return self._head.next if self._size else None

    @property
    def last(self) -> Node[K, V] | None:
        """Last real node, or None if the list is empty."""
        return self._tail.prev if self._size else None

    def append(self, node: Node[K, V]) -> None:
        """Append node to the end of the list (before tail sentinel). O(1)."""
        self.insert_before(node, None)

    def insert_before(self, node: Node[K, V], successor: Node[K, V] | None) -> None:
        """
        Splice node in immediately before successor. O(1).

        A successor of None means the end of the list.
        """
        if successor is None:
            successor = self._tail
        predecessor = successor.prev
        node.prev = predecessor
        node.next = successor
        if predecessor is not None:
            predecessor.next = node
        successor.prev = node
        self._size += 1

    def remove(self, node: Node[K, V]) -> None:
        """Remove a node from the list. O(1)."""
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        node.prev = None
        node.next = None
        self._size -= 1

    def node_at(self, index: int) -> Node[K, V] | None:
        """Return the node at a zero-based position, or None if out of range."""
        if index < 0 or index >= self._size:
            return None
        # Walk from whichever end is closer
        if index < self._size // 2:
            node = self._head.next
            for _ in range(index):
                node = node.next  # type: ignore[union-attr]
        else:
            node = self._tail.prev
            for _ in range(self._size - 1 - index):
                node = node.prev  # type: ignore[union-attr]
        return node

    def clear(self) -> None:
        """Unlink every node. O(n)."""
        node = self._head.next
        while node is not None and node is not self._tail:
            following = node.next
            node.prev = None
            node.next = None
            node = following
        self._head.next = self._tail
        self._tail.prev = self._head
        self._size = 0

    def swap(self, other: "DoublyLinkedList[K, V]") -> None:
        """Exchange the whole chain with another list. O(1)."""
        self._head, other._head = other._head, self._head
        self._tail, other._tail = other._tail, self._tail
        self._size, other._size = other._size, self._size

    def __iter__(self) -> Iterator[Node[K, V]]:
        """Iterate over nodes from first to last."""
        node = self._head.next
        while node is not None and node is not self._tail:
            yield node
            node = node.next

    def __reversed__(self) -> Iterator[Node[K, V]]:
        """Iterate over nodes from last to first."""
        node = self._tail.prev
        while node is not None and node is not self._head:
            yield node
            node = node.prev

    def __len__(self) -> int:
        """Return the number of nodes in the list."""
        return self._size

    def __bool__(self) -> bool:
        """Return True if the list is non-empty."""
        return self._size > 0
