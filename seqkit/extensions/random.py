from __future__ import annotations
import typing
import math
from ..types import *
from ..random_source import resolve

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


class RandomAccessor(Generic[T]):
    """
    randomised selection. each method takes an optional RandomSource;
    without one the process-wide default source is used.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def random(self, source: Optional[RandomSource] = None) -> Optional[T]:
        """one element picked uniformly, None for an empty sequence"""
        data = self._enumerable._get_data()
        if not data: return None
        return data[resolve(source).next_index(len(data))]

    def random_int_in_range(self, source: Optional[RandomSource] = None) -> Optional[int]:
        """
        uniform integer between the smallest and largest value, both inclusive.
        this samples the numeric span, so the result need not be an element:
        [1, 10] can give 5. non-integral bounds are narrowed to ceil(min)..floor(max),
        and None is returned when no integer fits (or the sequence is empty).
        """
        data = self._enumerable._get_data()
        if not data: return None
        low, high = math.ceil(min(data)), math.floor(max(data))
        if low > high: return None
        return resolve(source).next_int(low, high)

    def shuffle(self, source: Optional[RandomSource] = None) -> 'Enumerable[T]':
        """uniform random permutation of a copy (fisher-yates)"""
        from ..enumerable import Enumerable
        rng = resolve(source)
        def shuffle_data():
            items = list(self._enumerable._get_data())
            for i in range(len(items) - 1, 0, -1):
                j = rng.next_index(i + 1)
                items[i], items[j] = items[j], items[i]
            return items
        return Enumerable(shuffle_data)
