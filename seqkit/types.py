from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Protocol, runtime_checkable
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Number = Union[int, float]

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]


@runtime_checkable
class RandomSource(Protocol):
    """anything that can hand out uniform integers"""

    def next_index(self, n: int) -> int:
        """uniform integer in [0, n)"""
        ...

    def next_int(self, low: int, high: int) -> int:
        """uniform integer in [low, high], both ends inclusive"""
        ...


class FirstAndLast(Generic[T]):
    """first and last element of a sequence, both None when it is empty"""

    def __init__(self, first: Optional[T], last: Optional[T]):
        self.first = first
        self.last = last

    def __iter__(self) -> Iterator[Optional[T]]:
        # allows `first, last = seq.to.first_and_last()`
        yield self.first
        yield self.last

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FirstAndLast):
            return self.first == other.first and self.last == other.last
        if isinstance(other, dict):
            return other == {'first': self.first, 'last': self.last}
        return NotImplemented

    def __hash__(self) -> int:
        return hash((self.first, self.last))

    def __repr__(self) -> str:
        return f"FirstAndLast(first={self.first!r}, last={self.last!r})"
