from __future__ import annotations

import numbers
import typing
from collections.abc import Mapping, Sequence
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, NamedTuple
)

import numpy as np

if typing.TYPE_CHECKING:
    from .sparray import Sparray

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Number = Union[int, float]

# callbacks may declare any prefix of (element, index, sparray)
Predicate = Callable[..., bool]
Selector = Callable[..., U]
KeySelector = Callable[..., K]
Comparer = Callable[[T, T], int]
Accumulator = Callable[..., U]


def is_sequence(value: Any) -> bool:
    """true for ordered sequences a sparray can be built from. strings are scalars."""
    if isinstance(value, (str, bytes, bytearray)):
        return False
    return isinstance(value, Sequence)


def is_numeric(value: Any) -> bool:
    """true for real numbers, booleans excluded"""
    return isinstance(value, numbers.Real) and not isinstance(value, (bool, np.bool_))


class IndexedValue(NamedTuple):
    """an element paired with its position, produced by enumerate()"""
    index: int
    value: Any


class KeyValue(NamedTuple):
    key: str
    value: Any


class KeyValues(NamedTuple):
    key: str
    values: Any


class Bucket(NamedTuple):
    """one histogram bucket covering [start, end)"""
    start: float
    end: float
    count: int


class _KeyedMapping(Mapping, Generic[V]):
    """read-only mapping with stringified keys kept in first-seen order"""

    _pair_type: type = KeyValue

    def __init__(self, entries: Dict[str, V]):
        self._entries = dict(entries)

    def __getitem__(self, key: Any) -> V:
        return self._entries[str(key)]

    def __contains__(self, key: object) -> bool:
        return str(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def to_sparray(self) -> 'Sparray':
        """rebuild a sparray of key/value pairs in first-seen key order"""
        from .sparray import specialize
        return specialize([self._pair_type(key, value) for key, value in self._entries.items()])

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._entries!r})"


class IndexedMapping(_KeyedMapping[V]):
    """result of index_by: one value per key, the last one written wins"""
    _pair_type = KeyValue


class GroupedMapping(_KeyedMapping[V]):
    """result of group_by: one group (or aggregate of a group) per key"""
    _pair_type = KeyValues
