"""Type definitions for sortedlinkmap."""

from typing import Literal, NamedTuple, TypeAlias

# Keys are always text, values are always a single numeric kind
KeyType: TypeAlias = str
ValueType: TypeAlias = float

# How merge() resolves a key present in both maps with different values
MergePolicy: TypeAlias = Literal["omit", "first", "second"]


class Entry(NamedTuple):
    """A key/value pair returned by positional lookup."""

    key: KeyType
    value: ValueType
