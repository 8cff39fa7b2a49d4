from __future__ import annotations
import typing
from collections import defaultdict
from ..types import *
from ..callbacks import bind
from ..errors import InvalidWindowError

if typing.TYPE_CHECKING:
    from ..sparray import Sparray


class _GroupingOperations(Generic[T]):
    def index_by(self: 'Sparray[T]', key_selector: KeySelector[T, K],
                 value_selector: Optional[Selector[T, V]] = None) -> IndexedMapping[V]:
        """
        map str(key) -> value for every element. when two elements share a key the
        later one wins, while the key keeps the position where it was first seen.
        """
        key_fn = bind(key_selector, 3)
        value_fn = bind(value_selector, 3) if value_selector else None
        index = {}
        for i, item in enumerate(self._get_data()):
            index[str(key_fn(item, i, self))] = value_fn(item, i, self) if value_fn else item
        return IndexedMapping(index)

    def group_by(self: 'Sparray[T]', key_selector: KeySelector[T, K],
                 values_selector: Optional[Callable[..., V]] = None) -> GroupedMapping[V]:
        """
        group elements by str(key). each group is a sparray in source order.
        values_selector(group, key) turns a group into its final value and runs once
        per key, in the order keys were first seen.
        """
        key_fn = bind(key_selector, 3)
        groups = defaultdict(list)
        for i, item in enumerate(self._get_data()):
            groups[str(key_fn(item, i, self))].append(item)

        values_fn = bind(values_selector, 2) if values_selector else None
        result = {}
        for key, items in groups.items():
            group = self._new(items)
            result[key] = values_fn(group, key) if values_fn else group
        return GroupedMapping(result)

    def sliding(self: 'Sparray[T]', size: int, step: Optional[int] = None) -> 'Sparray[Sparray[T]]':
        """
        windows of `size` elements starting every `step` elements (step defaults to size).
        step < size overlaps windows, step > size skips elements, and windows at the
        tail are truncated rather than padded.
        """
        if step is None:
            step = size
        if step < 1:
            raise InvalidWindowError(f"invalid sliding step: {step}")
        if size < 1:
            raise InvalidWindowError(f"invalid sliding size: {size}")
        data = self._get_data()
        return self._new([self._new(data[i:i + size]) for i in range(0, len(data), step)])
