"""Functions that build one OrderedMap from others using only the public interface."""

import logging

from sortedlinkmap.core import OrderedMap
from sortedlinkmap.types import MergePolicy

logger = logging.getLogger(__name__)

_MERGE_POLICIES = ("omit", "first", "second")


def merge(
    map_a: OrderedMap,
    map_b: OrderedMap,
    result: OrderedMap,
    *,
    policy: MergePolicy = "omit",
) -> bool:
    """
    Overwrite result with the union of map_a and map_b.

    A key found in only one map keeps that map's value. A key found in both
    with equal values appears once. A key found in both with different values
    is a conflict, resolved by policy:
        - "omit": leave the key out of result (default)
        - "first": keep map_a's value
        - "second": keep map_b's value

    map_a and map_b are not modified. result may be the same object as either
    input. If result has a max_size, pairs beyond it are dropped.

    Returns:
        True if there were no conflicts and every pair fit, False otherwise

    Raises:
        ValueError: If policy is not recognised
    """
    if policy not in _MERGE_POLICIES:
        raise ValueError(f"Unknown merge policy: {policy!r}")

    merged = OrderedMap(max_size=result.max_size)
    ok = True

    # Both inputs iterate in ascending key order, so walk them together
    iter_a, iter_b = map_a.items(), map_b.items()
    entry_a, entry_b = next(iter_a, None), next(iter_b, None)
    while entry_a is not None or entry_b is not None:
        if entry_b is None or (entry_a is not None and entry_a.key < entry_b.key):
            chosen = entry_a
            entry_a = next(iter_a, None)
        elif entry_a is None or entry_b.key < entry_a.key:
            chosen = entry_b
            entry_b = next(iter_b, None)
        else:
            if entry_a.value == entry_b.value:
                chosen = entry_a
            else:
                ok = False
                logger.debug(
                    "Merge conflict on %r: %r vs %r (policy=%s)",
                    entry_a.key,
                    entry_a.value,
                    entry_b.value,
                    policy,
                )
                chosen = {"omit": None, "first": entry_a, "second": entry_b}[policy]
            entry_a, entry_b = next(iter_a, None), next(iter_b, None)

        if chosen is not None and not merged.insert(chosen.key, chosen.value):
            ok = False

    result.swap(merged)
    merged.clear()
    return ok


def reassign(source: OrderedMap, result: OrderedMap) -> None:
    """
    Overwrite result with source's keys, each given another key's value.

    Values are rotated down by one rank: the key at rank i receives the value
    of the key at rank (i + 1) % size. With fewer than two pairs result is a
    plain copy of source. source is not modified and may be the same object
    as result. If result has a max_size, keys beyond it are dropped.
    """
    entries = list(source.items())
    rotated = OrderedMap(max_size=result.max_size)
    for rank, entry in enumerate(entries):
        rotated.insert(entry.key, entries[(rank + 1) % len(entries)].value)

    if rotated.size() < len(entries):
        logger.debug("Reassign dropped %d keys over max_size", len(entries) - rotated.size())
    result.swap(rotated)
    rotated.clear()
