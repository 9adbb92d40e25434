"""sortedlinkmap - Ordered string-to-float map backed by a sorted doubly-linked list."""

from sortedlinkmap.combine import merge, reassign
from sortedlinkmap.core import OrderedMap
from sortedlinkmap.errors import (
    InvalidKeyError,
    InvalidValueError,
    SortedLinkMapError,
)
from sortedlinkmap.types import Entry, KeyType, MergePolicy, ValueType

__version__ = "0.0.1"

__all__ = [
    "OrderedMap",
    "merge",
    "reassign",
    "Entry",
    "KeyType",
    "ValueType",
    "MergePolicy",
    "SortedLinkMapError",
    "InvalidKeyError",
    "InvalidValueError",
]
