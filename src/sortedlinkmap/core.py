"""Main OrderedMap implementation."""

import logging
import math
from collections.abc import Iterable, Iterator, Mapping
from numbers import Real

from sortedlinkmap.errors import InvalidKeyError, InvalidValueError
from sortedlinkmap.linkedlist import DoublyLinkedList, Node
from sortedlinkmap.types import Entry, KeyType, ValueType

logger = logging.getLogger(__name__)


def _check_key(key: object) -> KeyType:
    if not isinstance(key, str):
        raise InvalidKeyError(f"Key must be str, got {type(key).__name__}")
    return key


def _check_value(value: object) -> ValueType:
    # bool is a Real subclass but never a meaningful value here
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidValueError(f"Value must be a real number, got {type(value).__name__}")
    value = float(value)
    # NaN never compares equal, not even to itself
    if math.isnan(value):
        raise InvalidValueError("Value must not be NaN")
    return value


def _check_rank(rank: object) -> int:
    if isinstance(rank, bool) or not isinstance(rank, int):
        raise TypeError(f"Rank must be int, got {type(rank).__name__}")
    return rank


class OrderedMap:
    """
    Map from string keys to float values, kept sorted by key.

    Entries live in a doubly-linked list ordered by ascending key. Key-based
    operations are O(n), positional lookup is O(rank), and swap/size/empty
    are O(1). Expected failures (duplicate key, missing key, rank out of
    range, full map) are reported through the return value, never raised.

    The container is not synchronized; callers sharing an instance between
    threads must provide their own locking.
    """

    def __init__(
        self,
        items: Mapping[KeyType, ValueType] | Iterable[tuple[KeyType, ValueType]] | None = None,
        *,
        max_size: int | None = None,
    ) -> None:
        """
        Initialize the map.

        Args:
            items: Optional mapping or iterable of (key, value) pairs. Pairs
                are added with insert() semantics, so a repeated key keeps
                its first value.
            max_size: Maximum number of entries. None means unbounded.

        Raises:
            ValueError: If max_size is negative
        """
        if max_size is not None and max_size < 0:
            raise ValueError(f"max_size must be non-negative, got {max_size}")
        self._list = DoublyLinkedList[KeyType, ValueType]()
        self._max_size = max_size

        if items is not None:
            pairs = items.items() if isinstance(items, Mapping) else items
            for key, value in pairs:
                self.insert(key, value)

    @property
    def max_size(self) -> int | None:
        """Capacity ceiling, or None if unbounded."""
        return self._max_size

    def size(self) -> int:
        """Return the number of key/value pairs in the map."""
        return len(self._list)

    def empty(self) -> bool:
        """Return True if the map holds no pairs."""
        return self.size() == 0

    def full(self) -> bool:
        """Return True if a capacity ceiling is set and has been reached."""
        return self._max_size is not None and self.size() >= self._max_size

    def insert(self, key: KeyType, value: ValueType) -> bool:
        """
        Add a new key/value pair.

        Returns:
            True if added, False if the key is already present or the map is full
        """
        return self._do_insert_or_update(key, value, may_insert=True, may_update=False)

    def update(self, key: KeyType, value: ValueType) -> bool:
        """
        Replace the value stored for an existing key.

        Returns:
            True if the key was present, False otherwise
        """
        return self._do_insert_or_update(key, value, may_insert=False, may_update=True)

    def insert_or_update(self, key: KeyType, value: ValueType) -> bool:
        """
        Update the key if present, otherwise insert it.

        Returns:
            False only if the key is new and the map is full
        """
        return self._do_insert_or_update(key, value, may_insert=True, may_update=True)

    def erase(self, key: KeyType) -> bool:
        """
        Remove the pair with the given key.

        Returns:
            True if a pair was removed, False if the key was not present
        """
        node, _ = self._locate(_check_key(key))
        if node is None:
            return False
        self._list.remove(node)
        return True

    def contains(self, key: KeyType) -> bool:
        """Return True if the key is present."""
        node, _ = self._locate(_check_key(key))
        return node is not None

    def get(self, key: KeyType | int) -> ValueType | Entry | None:
        """
        Look up a value by key, or a pair by rank.

        An int argument is treated as a rank and delegated to get_at().

        Returns:
            The stored value (or Entry for a rank), None if not found
        """
        if isinstance(key, int) and not isinstance(key, bool):
            return self.get_at(key)
        node, _ = self._locate(_check_key(key))
        return node.value if node is not None else None

    def get_at(self, rank: int) -> Entry | None:
        """
        Return the pair whose key is greater than exactly `rank` other keys.

        Returns:
            Entry(key, value), or None unless 0 <= rank < size()
        """
        node = self._list.node_at(_check_rank(rank))
        return Entry(node.key, node.value) if node is not None else None

    def swap(self, other: "OrderedMap") -> None:
        """Exchange contents and capacity with another map in O(1)."""
        if not isinstance(other, OrderedMap):
            raise TypeError(f"Cannot swap with {type(other).__name__}")
        self._list.swap(other._list)
        self._max_size, other._max_size = other._max_size, self._max_size

    def copy(self) -> "OrderedMap":
        """Return an independent copy with the same pairs and capacity."""
        duplicate = OrderedMap(max_size=self._max_size)
        for node in self._list:
            duplicate._list.append(Node(node.key, node.value))
        return duplicate

    def assign(self, src: "OrderedMap") -> "OrderedMap":
        """
        Replace the contents of this map with a copy of src.

        Capacity is copied along with the pairs, so the result never
        exceeds its own max_size. Self-assignment leaves the map unchanged.

        Returns:
            self
        """
        if src is self:
            return self
        replacement = src.copy()
        self.swap(replacement)
        replacement.clear()
        return self

    def clear(self) -> None:
        """Remove every pair."""
        self._list.clear()

    def items(self) -> Iterator[Entry]:
        """
        Iterate over (key, value) pairs in ascending key order.

        Iterates over a snapshot taken at the first step, so the map may be
        changed while iterating.
        """
        yield from [Entry(node.key, node.value) for node in self._list]

    def keys(self) -> Iterator[KeyType]:
        """Iterate over a snapshot of the keys in ascending order."""
        for key, _ in self.items():
            yield key

    def values(self) -> Iterator[ValueType]:
        """Iterate over a snapshot of the values in ascending key order."""
        for _, value in self.items():
            yield value

    def __copy__(self) -> "OrderedMap":
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> "OrderedMap":
        return self.copy()

    def __len__(self) -> int:
        return self.size()

    def __bool__(self) -> bool:
        return not self.empty()

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, str):
            return False
        return self.contains(key)

    def __iter__(self) -> Iterator[KeyType]:
        return self.keys()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, OrderedMap):
            return NotImplemented
        return self.size() == other.size() and list(self.items()) == list(other.items())

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        pairs = ", ".join(f"{key!r}: {value!r}" for key, value in self.items())
        return f"{type(self).__name__}({{{pairs}}})"

    def _locate(self, key: KeyType) -> tuple[Node[KeyType, ValueType] | None, Node[KeyType, ValueType] | None]:
        """
        Scan for key.

        Returns:
            (matching node or None, first node with a greater key or None)
        """
        for node in self._list:
            if node.key == key:
                return node, None
            if node.key > key:
                return None, node
        return None, None

    def _do_insert_or_update(
        self,
        key: KeyType,
        value: ValueType,
        *,
        may_insert: bool,
        may_update: bool,
    ) -> bool:
        """Shared body of insert(), update() and insert_or_update()."""
        key = _check_key(key)
        value = _check_value(value)
        node, successor = self._locate(key)

        if node is not None:
            if not may_update:
                return False
            node.value = value
            return True

        if not may_insert:
            return False
        if self.full():
            logger.debug("Rejected insert of %r: map is full (max_size=%d)", key, self._max_size)
            return False

        self._list.insert_before(Node(key, value), successor)
        return True
