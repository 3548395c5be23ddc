"""
Axis reduction engine.

Reductions collapse either one axis of an array or the whole array:

- :func:`reduce_axis` folds every 1-D lane along ``axis`` and returns an array
  whose shape is ``a.shape`` with that axis removed (``(1,)`` if nothing is
  left).
- :func:`reduce_all` folds every element into one Python ``float``.

Lanes are gathered without copying metadata around: the reduced axis is moved
last purely in ``(shape, strides)`` space, so one gather returns a
``(lanes, axis_length)`` matrix regardless of how the source is strided.

A fold function is either a NumPy ufunc (vectorized via ``ufunc.reduce``) or a
plain Python callable ``f(accumulator, value) -> accumulator``.
"""

from __future__ import annotations

import functools
from typing import Any, Callable, Optional, Tuple, Union

import numpy as np

from ...domain._errors import EmptyArrayError, InvalidParameterError
from ...domain._ndarray import INDArray
from ...domain.dtype._dtype import DType
from ...domain.layout._layout import (
    Shape,
    is_integer,
    normalize_axis,
    remove_axis,
    size_of,
)
from ..broadcasting._broadcast import finalize
from .._strided import strided_offsets

Fold = Union[np.ufunc, Callable[[Any, Any], Any]]


def axis_values(a: INDArray, axis: Any) -> Tuple[np.ndarray, Shape]:
    """
    Gather the lanes of ``a`` along ``axis``.

    Returns
    -------
    tuple[np.ndarray, tuple[int, ...]]
        A float64 matrix of shape ``(lanes, a.shape[axis])`` (lanes in
        row-major order of the remaining axes) and the reduced result shape.

    Raises
    ------
    InvalidParameterError
        If ``axis`` is not a valid (possibly negative) axis of ``a``.
    """
    ndim = a.ndim
    if ndim == 0:
        raise InvalidParameterError("axis", "None for a 0-d array", axis)
    axis = normalize_axis(axis, ndim)

    shape, strides = a.shape, a.strides
    moved_shape = shape[:axis] + shape[axis + 1 :] + (shape[axis],)
    moved_strides = strides[:axis] + strides[axis + 1 :] + (strides[axis],)
    offsets = strided_offsets(moved_shape, moved_strides, a.offset)

    n = shape[axis]
    lanes = size_of(moved_shape[:-1])
    values = a.buffer.read(offsets).astype(np.float64).reshape(lanes, n)
    return values, remove_axis(shape, axis)


def fold_lanes(values: np.ndarray, f: Fold, initial: Any, operation: str) -> np.ndarray:
    """Fold each row of ``values`` with ``f``, starting from ``initial``."""
    lanes, n = values.shape
    if n == 0 and initial is None:
        raise EmptyArrayError(operation)

    if isinstance(f, np.ufunc):
        with np.errstate(all="ignore"):
            if initial is None:
                return f.reduce(values, axis=1)
            return f.reduce(values, axis=1, initial=initial)

    out = np.empty(lanes, dtype=np.float64)
    for i in range(lanes):
        row = values[i].tolist()
        if initial is None:
            out[i] = functools.reduce(f, row)
        else:
            out[i] = functools.reduce(f, row, initial)
    return out


def reduce_axis(
    a: INDArray,
    axis: Any,
    f: Fold,
    initial: Any = None,
    *,
    dtype: Optional[DType] = None,
    operation: str = "reduce",
) -> INDArray:
    """
    Fold ``f`` over ``axis`` of ``a``.

    Parameters
    ----------
    a : INDArray
        Source array (any strides).
    axis : int
        Axis to collapse; negative values count from the end.
    f : Fold
        NumPy ufunc or ``f(acc, value)`` callable.
    initial : Any, optional
        Starting accumulator. When None the first lane element is used, and a
        zero-length axis fails with :class:`EmptyArrayError`.
    dtype : Optional[DType], optional
        Result dtype; defaults to ``a.dtype``.
    operation : str, optional
        Name reported in errors.

    Returns
    -------
    INDArray
        A fresh array of shape ``a.shape`` without ``axis``.
    """
    values, result_shape = axis_values(a, axis)
    result = fold_lanes(values, f, initial, operation)
    return finalize(a, result, result_shape, dtype or a.dtype, operation)


def reduce_all(
    a: INDArray, f: Fold, initial: Any = None, operation: str = "reduce"
) -> float:
    """
    Fold ``f`` over every element of ``a`` in row-major order.

    Raises
    ------
    EmptyArrayError
        If ``a`` is empty and no ``initial`` is given.
    """
    values = a._values().astype(np.float64).reshape(1, -1)
    return float(fold_lanes(values, f, initial, operation)[0])


def check_ddof(ddof: Any, n: int) -> int:
    """
    Validate a delta-degrees-of-freedom argument against a lane length.

    Raises
    ------
    InvalidParameterError
        If ``ddof`` is not a non-negative integer smaller than ``n``.
    """
    if not is_integer(ddof) or ddof < 0:
        raise InvalidParameterError("ddof", "non-negative integer", ddof)
    if ddof >= n:
        raise InvalidParameterError(
            "ddof",
            f"integer smaller than the reduced length ({n})",
            ddof,
            "Degrees of freedom must leave a positive denominator",
        )
    return int(ddof)


def lane_variance(values: np.ndarray, ddof: int) -> np.ndarray:
    """
    Two-pass variance of each row: mean first, then squared deviations.
    """
    n = values.shape[1]
    mean = values.sum(axis=1) / n
    deviations = values - mean[:, np.newaxis]
    return (deviations * deviations).sum(axis=1) / (n - ddof)
