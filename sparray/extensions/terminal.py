from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..callbacks import bind

if typing.TYPE_CHECKING:
    from ..sparray import Sparray


class TerminalAccessor(Generic[T]):
    """exports leaving the sparray world. every call returns a fresh object."""

    def __init__(self, sparray_instance: 'Sparray[T]'):
        self._sparray = sparray_instance

    def list(self) -> List[T]:
        """convert to list"""
        return list(self._sparray._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._sparray._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary, later keys overwrite earlier ones"""
        key_fn = bind(key_selector, 3)
        val_fn = bind(value_selector, 3) if value_selector else lambda item, i, s: item
        s = self._sparray
        return {key_fn(item, i, s): val_fn(item, i, s) for i, item in enumerate(s._get_data())}

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._sparray._get_data())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self._sparray._get_data())
