from __future__ import annotations
import typing
import numpy as np
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class StatsAccessor(Generic[T]):
    """
    arithmetic over numeric sequences.
    an empty sequence is never an error: sum and average give 0,
    median, min and max give None.
    """
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def _running_mean(self) -> Tuple[int, Number]:
        """count and mean in a single pass. returns (count, mean)."""
        count, mean = 0, 0
        for x in self._enumerable._get_data():
            count += 1
            mean += (x - mean) / count
        return count, mean

    def sum(self) -> Number:
        """calc sum, 0 for an empty sequence"""
        values = self._enumerable._get_data()
        if not values: return 0
        # numpy only for floats: int64 wraps on overflow, exact types must stay exact
        if all(isinstance(x, float) for x in values):
            return np.sum(values).item()
        return sum(values)

    def average(self) -> Number:
        """calc average, 0 for an empty sequence"""
        count, mean = self._running_mean()
        if count == 0: return 0
        return mean

    def min(self) -> Optional[Number]:
        """find minimum"""
        data = self._enumerable._get_data()
        return min(data) if data else None

    def max(self) -> Optional[Number]:
        """find maximum"""
        data = self._enumerable._get_data()
        return max(data) if data else None

    def median(self) -> Optional[Number]:
        """calculate median value on a sorted copy"""
        sorted_values = sorted(self._enumerable._get_data())
        n = len(sorted_values)
        if n == 0: return None
        mid = n // 2
        return (sorted_values[mid - 1] + sorted_values[mid]) / 2 if n % 2 == 0 else sorted_values[mid]
