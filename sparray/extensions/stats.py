from __future__ import annotations
import typing
import logging
import math
import numbers
import numpy as np
from ..types import *
from ..errors import InvalidBinsError, InvalidHistogramRangeError

if typing.TYPE_CHECKING:
    from ..sparray import NumericSparray, Sparray

logger = logging.getLogger(__name__)

DEFAULT_BAR_WIDTH = 40
DEFAULT_BAR_CHAR = "#"


class _NumericOperations(Generic[T]):
    def sum(self: 'NumericSparray[T]') -> Number:
        """sum of all elements, 0 when empty"""
        return sum(self._get_data(), 0)

    def avg(self: 'NumericSparray[T]') -> float:
        """arithmetic mean, nan when empty"""
        data = self._get_data()
        if not data:
            return math.nan
        return self.sum() / len(data)

    def histogram(self: 'NumericSparray[T]', bins: int,
                  range: Optional[Tuple[Optional[Number], Optional[Number]]] = None) -> 'Sparray[Bucket]':
        """
        count values in `bins` equal-width buckets over [min, max].

        bounds default to the data's own extrema; `range=(low, high)` overrides them,
        and either side may be None to keep the data bound. values outside the bounds
        are dropped and a value equal to the upper bound counts in the last bucket.
        returns a sparray of Bucket(start, end, count) in ascending order.
        """
        if isinstance(bins, bool) or not isinstance(bins, numbers.Integral) or bins < 1:
            raise InvalidBinsError(f"bins must be a positive integer, got {bins!r}")

        data = self._get_data()
        low, high = range if range is not None else (None, None)
        if low is None:
            low = min(data) if data else 0
        if high is None:
            high = max(data) if data else 0
        if low > high:
            raise InvalidHistogramRangeError(f"histogram range is inverted: {low} > {high}")

        logger.debug(f"histogram of {len(data)} values over [{low}, {high}] in {bins} bins")

        if low == high:
            # zero-width range: every bucket collapses onto the single bound
            counts = [0] * bins
            counts[-1] = sum(1 for x in data if x == low)
            edges = [low] * (bins + 1)
        else:
            counts, edges = np.histogram(np.asarray(data, dtype=float), bins=int(bins), range=(low, high))

        return self._new([
            Bucket(float(start), float(end), int(count))
            for start, end, count in zip(edges[:-1], edges[1:], counts)
        ])


def render_histogram(buckets: Iterable[Bucket], width: int = DEFAULT_BAR_WIDTH,
                     char: str = DEFAULT_BAR_CHAR) -> str:
    """
    text bar chart for histogram buckets, one line per bucket:

        0 - 2.5   | ######## 2
        2.5 - 5   | #################### 5

    bars scale so the fullest bucket is `width` characters long.
    """
    rows = list(buckets)
    if not rows:
        return ""
    labels = [f"{b.start:g} - {b.end:g}" for b in rows]
    label_width = max(len(label) for label in labels)
    max_count = max(b.count for b in rows)

    lines = []
    for label, bucket in zip(labels, rows):
        bar_length = round(bucket.count / max_count * width) if max_count else 0
        lines.append(f"{label.ljust(label_width)} | {char * bar_length} {bucket.count}")
    return "\n".join(lines)
