from __future__ import annotations
import typing
from itertools import chain
from ..types import *
from ..callbacks import bind
from ..errors import EmptyReduceError

if typing.TYPE_CHECKING:
    from ..sparray import Sparray

DEFAULT_SEPARATOR = ","

# marks a missing reduce seed, None is a valid seed
_MISSING = object()


def _unwrap(item: Any) -> Optional[List[Any]]:
    """elements of a nested sparray or ordered sequence, None for anything else"""
    from ..sparray import Sparray
    if isinstance(item, Sparray):
        return item._get_data()
    if is_sequence(item):
        return list(item)
    return None


class _CoreOperations(Generic[T]):
    def map(self: 'Sparray[T]', selector: Selector[T, U]) -> 'Sparray[U]':
        """project each element to a new form"""
        fn = bind(selector, 3)
        return self._new([fn(x, i, self) for i, x in enumerate(self._get_data())])

    def flat_map(self: 'Sparray[T]', selector: Selector[T, Any]) -> 'Sparray[Any]':
        """map, then flatten exactly one level"""
        fn = bind(selector, 3)
        result = []
        for i, x in enumerate(self._get_data()):
            mapped = fn(x, i, self)
            inner = _unwrap(mapped)
            if inner is None:
                result.append(mapped)
            else:
                result.extend(inner)
        return self._new(result)

    def flat(self: 'Sparray[T]', depth: int = 1) -> 'Sparray[Any]':
        """flatten nested sparrays and sequences up to depth levels"""
        def flatten_recursive(items, current_depth):
            if current_depth <= 0:
                return list(items)
            result = []
            for item in items:
                inner = _unwrap(item)
                if inner is None:
                    result.append(item)
                else:
                    result.extend(flatten_recursive(inner, current_depth - 1))
            return result

        return self._new(flatten_recursive(self._get_data(), depth))

    def filter(self: 'Sparray[T]', predicate: Predicate[T]) -> 'Sparray[T]':
        """keep elements matching predicate"""
        fn = bind(predicate, 3)
        return self._new([x for i, x in enumerate(self._get_data()) if fn(x, i, self)])

    def for_each(self: 'Sparray[T]', action: Callable[..., Any]) -> 'Sparray[T]':
        """
        runs action on every element for its side effects.
        returns this same sparray so the chain can continue.
        """
        fn = bind(action, 3)
        for i, x in enumerate(self._get_data()):
            fn(x, i, self)
        return self

    def distinct(self: 'Sparray[T]') -> 'Sparray[T]':
        """remove duplicates, keeping the first occurrence"""
        seen_hashable = set()
        seen_unhashable = []
        result = []
        for item in self._get_data():
            try:
                if item in seen_hashable:
                    continue
                seen_hashable.add(item)
            except TypeError:
                # unhashable values (dicts, lists) fall back to equality scans
                if item in seen_unhashable:
                    continue
                seen_unhashable.append(item)
            result.append(item)
        return self._new(result)

    def concat(self: 'Sparray[T]', *items: Any) -> 'Sparray[Any]':
        """append items in order. sparrays and sequences are spliced, other values appended."""
        parts = []
        for item in items:
            inner = _unwrap(item)
            parts.append([item] if inner is None else inner)
        return self._new(list(chain(self._get_data(), *parts)))

    def reverse(self: 'Sparray[T]') -> 'Sparray[T]':
        return self._new(list(reversed(self._get_data())))

    def slice(self: 'Sparray[T]', start: Optional[int] = None, end: Optional[int] = None) -> 'Sparray[T]':
        """half-open [start, end) with negative index support"""
        return self._new(self._get_data()[start:end])

    def first(self: 'Sparray[T]', n: Optional[int] = None) -> Union[Optional[T], 'Sparray[T]']:
        """first element (None when empty), or a sparray of up to n leading elements"""
        data = self._get_data()
        if n is None:
            return data[0] if data else None
        return self._new(data[:max(n, 0)])

    def last(self: 'Sparray[T]', n: Optional[int] = None) -> Union[Optional[T], 'Sparray[T]']:
        """last element (None when empty), or a sparray of up to n trailing elements"""
        data = self._get_data()
        if n is None:
            return data[-1] if data else None
        if n <= 0:
            return self._new([])
        return self._new(data[-n:])

    def enumerate(self: 'Sparray[T]') -> 'Sparray[IndexedValue]':
        """pair every element with its position"""
        return self._new([IndexedValue(i, x) for i, x in enumerate(self._get_data())])

    def reduce(self: 'Sparray[T]', accumulator: Accumulator[U, T], initial: Any = _MISSING) -> U:
        """
        left fold. without an initial value the first element seeds the fold,
        so a single element is returned as is and the accumulator never runs.
        """
        data = self._get_data()
        fn = bind(accumulator, 4, default=2)
        if initial is _MISSING:
            if not data:
                raise EmptyReduceError("reduce of empty sparray with no initial value")
            result, start = data[0], 1
        else:
            result, start = initial, 0
        for i in range(start, len(data)):
            result = fn(result, data[i], i, self)
        return result

    def reduce_right(self: 'Sparray[T]', accumulator: Accumulator[U, T], initial: Any = _MISSING) -> U:
        """right fold, same seeding rules as reduce"""
        data = self._get_data()
        fn = bind(accumulator, 4, default=2)
        if initial is _MISSING:
            if not data:
                raise EmptyReduceError("reduce_right of empty sparray with no initial value")
            result, start = data[-1], len(data) - 2
        else:
            result, start = initial, len(data) - 1
        for i in range(start, -1, -1):
            result = fn(result, data[i], i, self)
        return result

    def join(self: 'Sparray[T]', separator: str = DEFAULT_SEPARATOR, last_separator: Optional[str] = None) -> str:
        """
        join elements as strings. last_separator (defaults to separator) goes between
        the final pair, e.g. join(', ', ' and ') -> 'a, b and c'. None becomes ''.
        """
        if last_separator is None:
            last_separator = separator
        texts = ['' if x is None else str(x) for x in self._get_data()]
        if len(texts) < 2:
            return ''.join(texts)
        return separator.join(texts[:-1]) + last_separator + texts[-1]
