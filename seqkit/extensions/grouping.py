from __future__ import annotations
import typing
from collections import Counter, defaultdict
from itertools import batched
from ..types import *
from ..errors import InvalidArgument
from ..logger import logger

if typing.TYPE_CHECKING:
    from ..enumerable import Enumerable

class GroupingAccessor(Generic[T]):
    def __init__(self, enumerable_instance: 'Enumerable[T]'):
        self._enumerable = enumerable_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, List[T]]:
        """group elements by a key"""
        groups = defaultdict(list)
        for item in self._enumerable._get_data():
            groups[key_selector(item)].append(item)
        return dict(groups)

    def count_by(self, key_selector: KeySelector[T, K]) -> Dict[K, int]:
        """count elements per key, keys in order of first appearance"""
        return dict(Counter(key_selector(item) for item in self._enumerable._get_data()))

    def chunk(self, size: int) -> 'Enumerable[List[T]]':
        """
        split into consecutive chunks of at most `size` elements.
        the last chunk may be smaller. raises InvalidArgument right away when size <= 0.
        """
        from ..enumerable import Enumerable
        if size <= 0:
            logger.debug("rejected chunk size %r", size)
            raise InvalidArgument("size", size, f"chunk size must be greater than 0, got {size}")
        def chunk_data():
            # batched yields tuples, keep the list-of-lists shape
            return [list(batch) for batch in batched(self._enumerable._get_data(), size)]
        return Enumerable(chunk_data)
