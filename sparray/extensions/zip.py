from __future__ import annotations
import typing
from ..types import *
from ..callbacks import bind

if typing.TYPE_CHECKING:
    from ..sparray import Sparray


def _as_list(other: Any) -> List[Any]:
    from ..sparray import Sparray
    if isinstance(other, Sparray):
        return other._get_data()
    return list(other)


class _ZipOperations(Generic[T]):
    def zip(self: 'Sparray[T]', *others: Iterable[Any]) -> 'Sparray[Tuple]':
        """
        tuples of (self[i], other1[i], ...). the result is as long as this sparray,
        shorter others contribute None once they run out.
        """
        columns = [_as_list(other) for other in others]
        return self._new([
            (item,) + tuple(column[i] if i < len(column) else None for column in columns)
            for i, item in enumerate(self._get_data())
        ])

    def cross(self: 'Sparray[T]', other: Iterable[U],
              combiner: Optional[Callable[[T, U], V]] = None) -> 'Sparray[V]':
        """cartesian product, this sparray in the outer loop. pairs are tuples by default."""
        combine = bind(combiner, 2, default=2) if combiner else lambda a, b: (a, b)
        right = _as_list(other)
        return self._new([combine(a, b) for a in self._get_data() for b in right])
