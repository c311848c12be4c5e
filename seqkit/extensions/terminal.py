from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def detach(item: T) -> T:
    """fresh copy of a nested list (a chunk, say) so callers never edit cached results"""
    return list(item) if isinstance(item, list) else item


class TerminalAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def list(self) -> List[T]:
        """convert to a new list the caller owns, nested lists included"""
        return [detach(x) for x in self._enumerable._get_data()]

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._enumerable._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._enumerable._get_data())

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._enumerable._get_data())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._enumerable._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._enumerable._get_data())
        return sum(1 for x in self._enumerable._get_data() if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """check if any element satisfies condition"""
        data = self._enumerable._get_data()
        if predicate is None: return len(data) > 0
        return any(predicate(x) for x in data)

    def first(self) -> Optional[T]:
        """get first element, None when empty"""
        data = self._enumerable._get_data()
        return detach(data[0]) if data else None

    def last(self) -> Optional[T]:
        """get last element, None when empty"""
        data = self._enumerable._get_data()
        return detach(data[-1]) if data else None

    def first_and_last(self) -> FirstAndLast[T]:
        """both ends at once. a single element is both first and last"""
        return FirstAndLast(self.first(), self.last())
