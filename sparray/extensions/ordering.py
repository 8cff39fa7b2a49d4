from __future__ import annotations
import typing
from functools import cmp_to_key
from ..types import *
from ..callbacks import bind

if typing.TYPE_CHECKING:
    from ..sparray import Sparray


def _as_key_tuple(key: Any) -> Tuple:
    """a sort key is either a single value or a tuple/list of values"""
    return tuple(key) if isinstance(key, (tuple, list)) else (key,)


def _compare_keys(keys_a: Tuple, keys_b: Tuple) -> int:
    """lexicographic compare over the shorter tuple, the first unequal key decides"""
    for a, b in zip(keys_a, keys_b):
        if a < b:
            return -1
        if a > b:
            return 1
    return 0


class _OrderingOperations(Generic[T]):
    def sort(self: 'Sparray[T]', comparer: Optional[Comparer[T]] = None) -> 'Sparray[T]':
        """
        sorted copy. natural ordering by default, or a comparer(a, b) returning
        a negative number, zero or a positive number. the sort is stable.
        """
        data = self._get_data()
        if comparer is None:
            return self._new(sorted(data))
        return self._new(sorted(data, key=cmp_to_key(comparer)))

    def sort_by(self: 'Sparray[T]', key_selector: KeySelector[T, Any], reverse: bool = False) -> 'Sparray[T]':
        """
        sort by a derived key. the selector may return a tuple (or list) of keys
        for a multi-level sort, e.g. sort_by(lambda p: (p['dept'], p['age'])).
        reverse flips the overall result; ties keep their source order either way.
        """
        fn = bind(key_selector, 3)
        decorated = [(_as_key_tuple(fn(x, i, self)), x) for i, x in enumerate(self._get_data())]

        def compare(a, b):
            result = _compare_keys(a[0], b[0])
            return -result if reverse else result

        return self._new([x for _, x in sorted(decorated, key=cmp_to_key(compare))])

    def min(self: 'Sparray[T]') -> Optional[T]:
        data = self._get_data()
        return min(data) if data else None

    def max(self: 'Sparray[T]') -> Optional[T]:
        data = self._get_data()
        return max(data) if data else None

    def min_by(self: 'Sparray[T]', key_selector: KeySelector[T, Any]) -> Optional[T]:
        """element with the smallest key, the first one on ties. None when empty."""
        return self._extreme_by(key_selector, min)

    def max_by(self: 'Sparray[T]', key_selector: KeySelector[T, Any]) -> Optional[T]:
        """element with the largest key, the first one on ties. None when empty."""
        return self._extreme_by(key_selector, max)

    def _extreme_by(self: 'Sparray[T]', key_selector: KeySelector[T, Any], pick: Callable) -> Optional[T]:
        data = self._get_data()
        if not data:
            return None
        fn = bind(key_selector, 3)
        keys = [fn(x, i, self) for i, x in enumerate(data)]
        return data[pick(range(len(data)), key=keys.__getitem__)]
