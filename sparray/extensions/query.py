from __future__ import annotations
import typing
from ..types import *
from ..callbacks import bind

if typing.TYPE_CHECKING:
    from ..sparray import Sparray


class _QueryOperations(Generic[T]):
    def count(self: 'Sparray[T]', predicate: Optional[Predicate[T]] = None) -> int:
        """count elements, or only those matching predicate"""
        data = self._get_data()
        if predicate is None:
            return len(data)
        fn = bind(predicate, 3)
        return sum(1 for i, x in enumerate(data) if fn(x, i, self))

    def some(self: 'Sparray[T]', predicate: Predicate[T]) -> bool:
        """true if any element matches. stops at the first match."""
        fn = bind(predicate, 3)
        return any(fn(x, i, self) for i, x in enumerate(self._get_data()))

    def every(self: 'Sparray[T]', predicate: Predicate[T]) -> bool:
        """true if all elements match. stops at the first miss."""
        fn = bind(predicate, 3)
        return all(fn(x, i, self) for i, x in enumerate(self._get_data()))

    def find(self: 'Sparray[T]', predicate: Predicate[T]) -> Optional[T]:
        fn = bind(predicate, 3)
        for i, x in enumerate(self._get_data()):
            if fn(x, i, self):
                return x
        return None

    def find_index(self: 'Sparray[T]', predicate: Predicate[T]) -> int:
        fn = bind(predicate, 3)
        for i, x in enumerate(self._get_data()):
            if fn(x, i, self):
                return i
        return -1

    def index_of(self: 'Sparray[T]', value: T) -> int:
        """first position equal to value, -1 if missing"""
        for i, x in enumerate(self._get_data()):
            if x == value:
                return i
        return -1

    def last_index_of(self: 'Sparray[T]', value: T) -> int:
        """last position equal to value, -1 if missing"""
        data = self._get_data()
        for i in range(len(data) - 1, -1, -1):
            if data[i] == value:
                return i
        return -1

    def includes(self: 'Sparray[T]', value: T) -> bool:
        return value in self._get_data()

    def includes_all(self: 'Sparray[T]', *values: T) -> bool:
        data = self._get_data()
        return all(v in data for v in values)

    def includes_any(self: 'Sparray[T]', *values: T) -> bool:
        data = self._get_data()
        return any(v in data for v in values)
