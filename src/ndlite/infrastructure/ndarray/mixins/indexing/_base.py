"""
Python indexing protocol (``a[key]`` / ``a[key] = value``) for NDArray.

Keys are translated onto the explicit operations:

- integers, ``slice`` objects, ``"start:stop:step"`` strings and ``None``
  (alone or in a tuple) -> :meth:`slice`; a full tuple of integers reads or
  writes one element;
- integer lists / integer NumPy arrays (alone or in a tuple) ->
  :meth:`fancy_index`;
- boolean lists / boolean NumPy arrays / arrays (non-zero = selected) ->
  :meth:`boolean_index`.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .....domain._errors import DimensionMismatchError, InvalidParameterError
from .....domain._ndarray import INDArray
from .....domain._validation import check_scalar, is_number
from .....domain.layout._layout import is_integer

_BASIC = (slice, str, type(None))
_SELECTION = (list, np.ndarray)


def _is_mask(key: Any) -> bool:
    if isinstance(key, INDArray):
        return True
    return len(key) > 0 and np.asarray(key).dtype.kind == "b"


class NDArrayMixinIndexing:
    """
    Mixin mapping Python subscripts onto views, selections and element access.
    """

    __slots__ = ()

    def __getitem__(self: INDArray, key: Any) -> Any:
        if isinstance(key, tuple):
            if any(isinstance(k, _SELECTION) or isinstance(k, INDArray) for k in key):
                return self.fancy_index(*key)
            if len(key) == self.ndim and all(is_integer(k) for k in key):
                return self.get(*key)
            return self.slice(*key)
        if is_integer(key):
            return self.get(key) if self.ndim == 1 else self.slice(key)
        if isinstance(key, _BASIC):
            return self.slice(key)
        if isinstance(key, _SELECTION) or isinstance(key, INDArray):
            if _is_mask(key):
                return self.boolean_index(key)
            return self.fancy_index(key)
        raise InvalidParameterError(
            "key", "integer, slice, string slice, index list or mask", key
        )

    def __setitem__(self: INDArray, key: Any, value: Any) -> None:
        self._check_writable("setitem")

        if isinstance(key, tuple) and any(
            isinstance(k, _SELECTION) or isinstance(k, INDArray) for k in key
        ):
            self._scatter(self._fancy_offsets(key), value)
            return
        if isinstance(key, _SELECTION) or isinstance(key, INDArray):
            if _is_mask(key):
                self._scatter(self._mask_offsets(key), value)
            else:
                self._scatter(self._fancy_offsets((key,)), value)
            return

        indices = key if isinstance(key, tuple) else (key,)
        if len(indices) == self.ndim and all(is_integer(k) for k in indices):
            self.set(*indices, value)
            return
        self[key].assign(value)

    def _scatter(self: INDArray, offsets: np.ndarray, value: Any) -> None:
        """Write a scalar or a matching 1-D sequence to ``offsets``."""
        if is_number(value):
            self._buffer.write(offsets, check_scalar(value))
            return
        source = value if isinstance(value, INDArray) else type(self)(value)
        values = source._values()
        if values.shape[0] not in (1, offsets.shape[0]):
            raise DimensionMismatchError(
                "Value count does not match the number of selected elements",
                expected=(offsets.shape[0],),
                actual=source.shape,
                operation="setitem",
            )
        self._buffer.write(offsets, values)
