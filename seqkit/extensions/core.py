from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class _CoreOperations(Generic[T]):
    def where(self: 'Enumerable[T]', predicate: Predicate[T]) -> 'Enumerable[T]':
        """filter elements based on a predicate"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [x for x in self._get_data() if predicate(x)])

    def select(self: 'Enumerable[T]', selector: Selector[T, U]) -> 'Enumerable[U]':
        """project each element to a new form"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: [selector(x) for x in self._get_data()])

    def take(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """
        take the first 'count' elements.
        a count of zero or less yields an empty sequence.
        """
        from ..enumerable import Enumerable
        # a negative stop would count from the end, so clamp it
        return Enumerable(lambda: self._get_data()[:max(count, 0)])

    def skip(self: 'Enumerable[T]', count: int) -> 'Enumerable[T]':
        """
        skip the first 'count' elements.
        a count of zero or less keeps everything, a count past the end keeps nothing.
        """
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._get_data()[max(count, 0):])

    def reversed(self: 'Enumerable[T]') -> 'Enumerable[T]':
        """inverts the order of the elements in a sequence"""
        from ..enumerable import Enumerable
        return Enumerable(lambda: self._get_data()[::-1])

    def remove(self: 'Enumerable[T]', value: T) -> 'Enumerable[T]':
        """drop every element equal to value"""
        return self.where(lambda item: item != value)
