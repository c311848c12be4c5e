r"""
'      ____  ____  ____  __ __ __ ______
'     / ___\/ __ \/ __ \/ //_// //_  __/
'     \__ \/  ___/ /_/ / ,<  / /  / /
'    ___/ /\___/\__, /_/|_|/_/  /_/
'   /____/        /_/
"""

# expose the main class
from .enumerable import Enumerable

# expose the factory functions
from .factories import (
    from_iterable,
    from_range,
    repeat,
    empty,
    seq,
    S
)

# expose supporting types
from .types import (
    FirstAndLast,
    RandomSource
)
from .errors import InvalidArgument

# expose the random source controls
from .random_source import (
    NumpyRandomSource,
    default_source,
    set_default_source,
    seed
)

# define what `import *` does
__all__ = [
    "Enumerable",
    "from_iterable",
    "from_range",
    "repeat",
    "empty",
    "seq",
    "S",
    "FirstAndLast",
    "RandomSource",
    "InvalidArgument",
    "NumpyRandomSource",
    "default_source",
    "set_default_source",
    "seed"
]
