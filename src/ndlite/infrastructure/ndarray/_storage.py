"""
Fixed-width storage buffers (NumPy CPU backend).

This module defines :class:`StorageBuffer`, the flat element store behind every
ndlite array, and :func:`coerce`, which converts arbitrary numeric values into
a given fixed-width kind.

Ownership model
---------------
- A buffer is allocated exactly once, by the array that first needs it
  (construction, factories, arithmetic results, copies).
- View operations never allocate; they hand the *same* ``StorageBuffer``
  object to the new array. The buffer object is therefore the explicit
  sharing handle: two arrays alias each other iff they reference one buffer.
- Lifetime is ordinary Python reference counting; the buffer lives as long as
  its longest-lived alias.
- There is no copy-on-write: a write through any alias is visible through all
  of them.
"""

from __future__ import annotations

from typing import Any, Union

import numpy as np

from ...domain._errors import InvalidParameterError
from ...domain.dtype._dtype import DType

Number = Union[int, float]

NUMPY_DTYPES: dict[DType, np.dtype] = {
    DType.FLOAT64: np.dtype(np.float64),
    DType.FLOAT32: np.dtype(np.float32),
    DType.INT32: np.dtype(np.int32),
    DType.INT16: np.dtype(np.int16),
    DType.INT8: np.dtype(np.int8),
    DType.UINT32: np.dtype(np.uint32),
    DType.UINT16: np.dtype(np.uint16),
    DType.UINT8: np.dtype(np.uint8),
}
"""Concrete NumPy dtype backing each element kind."""


def coerce(values: Any, dtype: DType) -> np.ndarray:
    """
    Convert finite numeric values into ``dtype`` with fixed-width semantics.

    Parameters
    ----------
    values : Any
        Array-like of finite numbers.
    dtype : DType
        Target element kind.

    Returns
    -------
    np.ndarray
        A new array of ``NUMPY_DTYPES[dtype]`` with the same shape as
        ``values``.

    Notes
    -----
    - Floating kinds round to their width.
    - Integer kinds truncate toward zero, then wrap modulo ``2**bits``
      (two's complement for signed kinds), e.g. ``300 -> 44`` for uint8 and
      ``-1 -> 255`` for uint8.
    - Floating values whose magnitude rounds past the largest finite value
      of ``dtype`` are rejected rather than stored as infinity.
    - Callers are responsible for rejecting NaN/Infinity beforehand.

    Raises
    ------
    InvalidParameterError
        If a value overflows a floating kind.
    """
    arr = np.asarray(values, dtype=np.float64)
    target = NUMPY_DTYPES[dtype]
    if not dtype.is_integer:
        with np.errstate(over="ignore"):
            out = arr.astype(target)
        overflow = np.isinf(out) & np.isfinite(arr)
        if overflow.any():
            flat = np.flatnonzero(overflow.reshape(-1))[0]
            name = "value" if arr.ndim == 0 else f"value[{flat}]"
            raise InvalidParameterError(
                name, f"number within {dtype} range", float(arr.reshape(-1)[flat])
            )
        return out

    # fmod keeps |x| < 2**bits, so the int64 hop is exact and the final cast
    # only drops high bits.
    wrapped = np.fmod(np.trunc(arr), float(2**dtype.bits))
    return wrapped.astype(np.int64).astype(target)


class StorageBuffer:
    """
    Flat, fixed-width element store shared by an array and its views.

    Parameters
    ----------
    size : int
        Number of elements to allocate (zero-initialized).
    dtype : DType
        Element kind, fixed for the buffer's whole lifetime.

    Notes
    -----
    - ``__slots__`` prevents attaching ad-hoc state to a shared buffer.
    - Reads return Python scalars (``int`` for integer kinds, ``float``
      otherwise) or NumPy arrays for vectorized gathers.
    """

    __slots__ = ("_data", "_dtype")

    def __init__(self, size: int, dtype: DType) -> None:
        self._dtype = dtype
        self._data = np.zeros(int(size), dtype=NUMPY_DTYPES[dtype])

    @classmethod
    def from_values(cls, values: Any, dtype: DType) -> "StorageBuffer":
        """
        Allocate a buffer holding a deep copy of ``values`` (flattened in C order).

        The caller's memory is never aliased, even when ``values`` already is a
        NumPy array of the right dtype.
        """
        buf = cls.__new__(cls)
        buf._dtype = dtype
        buf._data = coerce(values, dtype).reshape(-1)
        return buf

    @property
    def dtype(self) -> DType:
        return self._dtype

    @property
    def nbytes(self) -> int:
        return int(self._data.nbytes)

    def __len__(self) -> int:
        return int(self._data.shape[0])

    def __repr__(self) -> str:
        return f"StorageBuffer(length={len(self)}, dtype={self._dtype})"

    def read_one(self, offset: int) -> Number:
        """Return the element at ``offset`` as a Python scalar."""
        return self._dtype.python_type(self._data[offset])

    def write_one(self, offset: int, value: Number) -> None:
        """Store one finite value at ``offset`` after dtype coercion."""
        self._data[offset] = coerce(value, self._dtype)

    def read(self, offsets: np.ndarray) -> np.ndarray:
        """Gather the elements at ``offsets`` into a new array (buffer dtype)."""
        return self._data[offsets]

    def write(self, offsets: np.ndarray, values: Any) -> None:
        """Scatter ``values`` (broadcast against ``offsets``) after dtype coercion."""
        self._data[offsets] = coerce(values, self._dtype)
