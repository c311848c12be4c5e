from __future__ import annotations
import typing
from itertools import chain
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def _is_nan(item: Any) -> bool:
    # nan is the only value not equal to itself
    return isinstance(item, float) and item != item


def _collapse_nan(items: List[T]) -> List[T]:
    """keep only the first nan; distinct nan objects would otherwise all survive hashing."""
    result, seen_nan = [], False
    for item in items:
        if _is_nan(item):
            if seen_nan: continue
            seen_nan = True
        result.append(item)
    return result


def _first_occurrences(items: Iterable[T]) -> List[T]:
    """order-preserving dedup by equality, tolerant of unhashable elements. all nans count as one value."""
    items = list(items)
    try:
        # python 3.7+ dicts are ordered, making dict.fromkeys an order-preserving unique filter.
        return _collapse_nan(list(dict.fromkeys(items)))
    except TypeError:
        pass

    # at least one element is unhashable (a dict, a list...), so equality scans take over for those
    seen, seen_unhashable, result = set(), [], []
    for item in items:
        try:
            if item in seen: continue
            seen.add(item)
        except TypeError:
            if item in seen_unhashable: continue
            seen_unhashable.append(item)
        result.append(item)
    return _collapse_nan(result)


class SetAccessor(Generic[T]):
    """
    deduplication and set-like combination of sequences.
    every result keeps the order in which elements first appear.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def unique(self) -> 'Enumerable[T]':
        """return distinct elements. preserves order of first appearance, every nan counts as one value."""
        from ..enumerable import Enumerable
        return Enumerable(lambda: _first_occurrences(self._enumerable._get_data()))

    def is_unique(self) -> bool:
        """true when no two elements compare equal."""
        data = self._enumerable._get_data()
        return len(_first_occurrences(data)) == len(data)

    def distinct_by(self, key_selector: KeySelector[T, K]) -> 'Enumerable[T]':
        """
        one element per key. when several elements share a key the last one wins,
        but it takes the position where that key was first seen.
        ex: [{'k': 1, 'v': 'a'}, {'k': 2}, {'k': 1, 'v': 'b'}] -> [{'k': 1, 'v': 'b'}, {'k': 2}]
        """
        from ..enumerable import Enumerable
        def distinct_by_data():
            # re-assigning an existing dict key keeps its original slot
            by_key: Dict[K, T] = {}
            for item in self._enumerable._get_data():
                by_key[key_selector(item)] = item
            return list(by_key.values())
        return Enumerable(distinct_by_data)

    def union(self, other: Iterable[T]) -> 'Enumerable[T]':
        """return the order-preserving union of two sequences (distinct elements)."""
        from ..enumerable import Enumerable
        # snapshot now so later changes to `other` are not observed
        other_items = list(other)
        return Enumerable(lambda: _first_occurrences(chain(self._enumerable._get_data(), other_items)))
