from __future__ import annotations
import typing
import numpy as np
from collections.abc import Sequence
from numbers import Number as _Number
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable


def is_empty_like(item: Any) -> bool:
    """
    the default check used by compact(): None, False (python or numpy), numeric zero, nan,
    and empty strings or bytes. empty containers are kept.
    """
    if item is None or item is False:
        return True
    if isinstance(item, np.bool_):
        # numpy booleans are not registered as numbers.Number
        return not item
    if isinstance(item, (str, bytes, bytearray)):
        return len(item) == 0
    if isinstance(item, _Number):
        if item == 0: return True
        # nan is the only value not equal to itself
        return item != item
    return False


def _is_nested(item: Any) -> bool:
    from ..enumerable import Enumerable
    if isinstance(item, Enumerable):
        return True
    return isinstance(item, Sequence) and not isinstance(item, (str, bytes, bytearray))


class UtilityAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def flatten(self) -> 'Enumerable[Any]':
        """
        flatten exactly one level of nesting.
        nested sequences are spliced in, strings and everything else pass through.
        ex: [1, [2, [3]], (4,)] -> [1, 2, [3], 4]
        """
        from ..enumerable import Enumerable
        def flatten_data():
            result = []
            for item in self._enumerable._get_data():
                if _is_nested(item):
                    result.extend(item)
                else:
                    result.append(item)
            return result
        return Enumerable(flatten_data)

    def compact(self, is_empty: Optional[Predicate[T]] = None) -> 'Enumerable[T]':
        """drop the elements is_empty flags, by default the empty-like ones"""
        check = is_empty or is_empty_like
        return self._enumerable.where(lambda item: not check(item))
