import logging
import warnings
from collections.abc import Set as AbstractSet

import numpy as np

from .types import *
from .errors import InvalidStepError, InvalidTimesError
from .sparray import Sparray, specialize

logger = logging.getLogger(__name__)


def from_(*data: Any) -> Sparray:
    """
    build a sparray from whatever was passed:

        from_()             -> empty
        from_(sparray)      -> copy of that sparray
        from_({1, 2})       -> the set's elements in iteration order
        from_([1, 2])       -> copy of the sequence
        from_(1)            -> singleton
        from_(1, 2, 3)      -> the arguments themselves
    """
    if len(data) == 0:
        return specialize([])

    if len(data) == 1:
        single = data[0]
        if isinstance(single, Sparray):
            logger.debug("from_: copying an existing sparray")
            return specialize(single._get_data())
        if isinstance(single, AbstractSet):
            logger.debug("from_: materializing a set")
            return specialize(list(single))
        if is_sequence(single) or (isinstance(single, np.ndarray) and single.ndim == 1):
            logger.debug("from_: copying an ordered sequence")
            return specialize(single.tolist() if isinstance(single, np.ndarray) else list(single))
        return specialize([single])

    return specialize(list(data))


def from_range(start: Number, end: Optional[Number] = None, step: Optional[Number] = None) -> Sparray:
    """
    consecutive numbers in the half-open interval [start, end).
    from_range(5) counts 0..4; with no step it counts up when start < end, down otherwise.
    a zero step or one pointing away from end raises InvalidStepError.
    """
    if end is None:
        start, end = 0, start
    if step is None:
        step = 1 if start < end else -1
    if (start < end and step < 0) or (start > end and step > 0) or step == 0:
        raise InvalidStepError(f"invalid step value: {step}")

    data = []
    current = start
    if start < end:
        while current < end:
            data.append(current)
            current += step
    else:
        while current > end:
            data.append(current)
            current += step
    return specialize(data)


def repeat(value: T, times: int) -> Sparray:
    """sparray holding `times` copies of value"""
    if times < 0:
        raise InvalidTimesError(f"invalid times value: {times}")
    return specialize([value] * times)


def fill_of(times: int, value: T) -> Sparray:
    """deprecated: use repeat(value, times)"""
    warnings.warn("fill_of() is deprecated, use repeat(value, times)", DeprecationWarning, stacklevel=2)
    return repeat(value, times)


def empty() -> Sparray:
    """create empty sparray"""
    return specialize([])


def is_sparray(value: Any) -> bool:
    """true only for sparray instances, not for plain lists"""
    return isinstance(value, Sparray)


# --- aliases ---
S = from_
