from __future__ import annotations

import warnings

import numpy as np

from .types import *
from .errors import InvalidSparrayDataError

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.query import _QueryOperations
from .extensions.ordering import _OrderingOperations
from .extensions.grouping import _GroupingOperations
from .extensions.zip import _ZipOperations
from .extensions.sampling import _SamplingOperations
from .extensions.stats import _NumericOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor


def _to_list(data: Any) -> List[Any]:
    """validate and copy constructor input"""
    if isinstance(data, np.ndarray) and data.ndim == 1:
        return data.tolist()
    if not is_sequence(data):
        raise InvalidSparrayDataError(
            f"sparray data must be an ordered sequence, got {type(data).__name__}")
    return list(data)


def specialize(data: Iterable[Any]) -> 'Sparray':
    """build the right sparray for data: numeric when non-empty and all numeric"""
    items = data if isinstance(data, list) else list(data)
    if items and all(is_numeric(x) for x in items):
        return NumericSparray(items)
    return Sparray(items)


# --- base sparray ---

class Sparray(
    _CoreOperations[T],
    _QueryOperations[T],
    _OrderingOperations[T],
    _GroupingOperations[T],
    _ZipOperations[T],
    _SamplingOperations[T],
):
    """an immutable, chainable array. every operation returns a new sparray."""

    def __init__(self, data: Sequence[T]):
        self._data: List[T] = _to_list(data)
        self.to = TerminalAccessor(self)

    def _get_data(self) -> List[T]:
        """the backing list. callers inside the package must not mutate it."""
        return self._data

    def _new(self, data: Iterable[Any]) -> 'Sparray':
        return specialize(data)

    # --- access ---

    @property
    def length(self) -> int:
        return len(self._data)

    def size(self) -> int:
        return len(self._data)

    def is_empty(self) -> bool:
        return len(self._data) == 0

    def is_not_empty(self) -> bool:
        return len(self._data) != 0

    def at(self, index: int) -> Optional[T]:
        """element at index, negative indexes count from the end. None when out of range."""
        resolved = len(self._data) + index if index < 0 else index
        if 0 <= resolved < len(self._data):
            return self._data[resolved]
        return None

    def get(self, index: int) -> Optional[T]:
        """deprecated: use at()"""
        warnings.warn("get() is deprecated, use at()", DeprecationWarning, stacklevel=2)
        return self.at(index)

    def keys(self) -> Iterator[int]:
        return iter(range(len(self._data)))

    def values(self) -> Iterator[T]:
        return iter(list(self._data))

    def entries(self) -> Iterator[Tuple[int, T]]:
        return iter(list(enumerate(self._data)))

    def to_array(self) -> List[T]:
        """copy of the elements as a list"""
        return self.to.list()

    def to_set(self) -> Set[T]:
        return self.to.set()

    # --- python protocols ---

    def __iter__(self) -> Iterator[T]:
        return iter(list(self._data))

    def __len__(self) -> int:
        return len(self._data)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._new(self._data[index])
        return self._data[index]

    def __contains__(self, value: object) -> bool:
        return value in self._data

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Sparray):
            return self._data == other._data
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._data))

    def __str__(self) -> str:
        if not self._data:
            return "[ ]"
        return f"[ {self.join(', ')} ]"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._data!r})"


# --- numeric sparray ---

class NumericSparray(Sparray[T], _NumericOperations[T]):
    """a sparray whose elements are all real numbers. adds sum, avg and histogram."""

    def __init__(self, data: Sequence[T]):
        super().__init__(data)
        for item in self._data:
            if not is_numeric(item):
                raise InvalidSparrayDataError(
                    f"numeric sparray cannot hold non-numeric value {item!r}")
