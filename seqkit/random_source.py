"""
random sources used by the randomised operations.

every random operation takes an optional `source`; when it is omitted the
process-wide default source is used. the default wraps a numpy generator
behind a lock so it can be shared between threads.
"""
import threading
import numpy as np
from typing import Optional
from .types import RandomSource
from .logger import logger

__all__ = ["NumpyRandomSource", "default_source", "set_default_source", "seed"]


class NumpyRandomSource:
    """random source backed by `numpy.random.default_rng`"""

    def __init__(self, seed: Optional[int] = None):
        self._rng = np.random.default_rng(seed)
        self._lock = threading.Lock()

    def reseed(self, seed: Optional[int]) -> None:
        with self._lock:
            self._rng = np.random.default_rng(seed)

    def next_index(self, n: int) -> int:
        if n <= 0: raise ValueError("cannot draw an index from an empty range")
        with self._lock:
            return int(self._rng.integers(0, n))

    def next_int(self, low: int, high: int) -> int:
        if low > high: raise ValueError(f"empty range [{low}, {high}]")
        with self._lock:
            # integers() excludes the upper bound unless endpoint=True
            return int(self._rng.integers(low, high, endpoint=True))

    def __repr__(self) -> str:
        return f"NumpyRandomSource(bit_generator={type(self._rng.bit_generator).__name__})"


_default_source: RandomSource = NumpyRandomSource()


def default_source() -> RandomSource:
    """the source used when an operation is not handed one explicitly"""
    return _default_source


def set_default_source(source: RandomSource) -> None:
    """replace the process-wide source, e.g. with a scripted one in tests"""
    global _default_source
    if not isinstance(source, RandomSource):
        raise TypeError("source must provide next_index() and next_int()")
    logger.debug("default random source replaced with %r", source)
    _default_source = source


def seed(value: Optional[int]) -> None:
    """reseed the default source; a fresh numpy source is installed if needed"""
    global _default_source
    if isinstance(_default_source, NumpyRandomSource):
        _default_source.reseed(value)
    else:
        _default_source = NumpyRandomSource(value)
    logger.debug("default random source seeded with %r", value)


def resolve(source: Optional[RandomSource]) -> RandomSource:
    return source if source is not None else _default_source
