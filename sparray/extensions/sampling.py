from __future__ import annotations
import typing
import logging
import random
from ..types import *
from ..errors import InvalidSampleSizeError, OversampleError

if typing.TYPE_CHECKING:
    from ..sparray import Sparray

logger = logging.getLogger(__name__)

RandomState = Union[None, int, random.Random]


def _resolve_rng(random_state: RandomState) -> Union[random.Random, Any]:
    """a seeded generator for ints, the given generator, or the module-level one"""
    if isinstance(random_state, random.Random):
        return random_state
    if random_state is not None:
        return random.Random(random_state)
    return random


class _SamplingOperations(Generic[T]):
    def sample(self: 'Sparray[T]', size: Optional[int] = None, with_replacement: bool = False,
               random_state: RandomState = None) -> Union[Optional[T], 'Sparray[T]']:
        """
        random sampling.
        sample() returns one element (None when empty).
        sample(size) draws size elements without replacement: each pick leaves the pool,
        so size may not exceed the length. with_replacement=True draws independently.
        random_state takes a seed or a random.Random for reproducible draws.
        """
        rng = _resolve_rng(random_state)
        data = self._get_data()

        if size is None:
            return data[rng.randrange(len(data))] if data else None

        if size < 0:
            raise InvalidSampleSizeError(f"invalid sample size: {size}")

        if with_replacement:
            logger.debug(f"sampling {size} of {len(data)} elements with replacement")
            if size and not data:
                raise OversampleError(f"cannot sample {size} elements from an empty sparray")
            return self._new([data[rng.randrange(len(data))] for _ in range(size)])

        if size > len(data):
            raise OversampleError(
                f"cannot sample {size} elements without replacement from {len(data)}")

        logger.debug(f"sampling {size} of {len(data)} elements without replacement")
        pool = list(data)
        picked = []
        for _ in range(size):
            picked.append(pool.pop(rng.randrange(len(pool))))
        return self._new(picked)
