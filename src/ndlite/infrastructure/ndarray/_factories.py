"""
Array factory functions.

Every factory validates its parameters eagerly, builds the element values
with NumPy and hands them to :class:`~._ndarray.NDArray` with the resolved
:class:`~ndlite.domain._options.NDArrayOptions`, so dtype coercion and
``readonly`` handling are identical to direct construction.
"""

from __future__ import annotations

import math
from typing import Any, Optional, Sequence

import numpy as np

from ...domain._errors import InvalidParameterError
from ...domain._options import NDArrayOptions
from ...domain._validation import check_scalar
from ...domain.layout._layout import is_integer, size_of, validate_shape
from ._ndarray import NDArray


def _build(
    values: np.ndarray,
    shape: Sequence[int],
    options: Optional[NDArrayOptions],
    dtype: Any,
    readonly: Optional[bool],
) -> NDArray:
    return NDArray(values, shape, options, dtype=dtype, readonly=readonly)


def zeros(
    shape: Any,
    options: Optional[NDArrayOptions] = None,
    *,
    dtype: Any = None,
    readonly: Optional[bool] = None,
) -> NDArray:
    """Array of ``shape`` filled with 0."""
    shape = validate_shape(shape)
    return _build(np.zeros(size_of(shape)), shape, options, dtype, readonly)


def ones(
    shape: Any,
    options: Optional[NDArrayOptions] = None,
    *,
    dtype: Any = None,
    readonly: Optional[bool] = None,
) -> NDArray:
    """Array of ``shape`` filled with 1."""
    shape = validate_shape(shape)
    return _build(np.ones(size_of(shape)), shape, options, dtype, readonly)


def full(
    shape: Any,
    fill_value: float,
    options: Optional[NDArrayOptions] = None,
    *,
    dtype: Any = None,
    readonly: Optional[bool] = None,
) -> NDArray:
    """
    Array of ``shape`` filled with ``fill_value``.

    Raises
    ------
    InvalidParameterError
        If ``fill_value`` is not a finite number.
    """
    shape = validate_shape(shape)
    fill_value = check_scalar(fill_value, "fill_value")
    return _build(
        np.full(size_of(shape), float(fill_value)), shape, options, dtype, readonly
    )


def eye(
    n: int,
    options: Optional[NDArrayOptions] = None,
    *,
    dtype: Any = None,
    readonly: Optional[bool] = None,
) -> NDArray:
    """
    ``n x n`` identity matrix.

    Raises
    ------
    InvalidParameterError
        If ``n`` is not a positive integer.
    """
    if not is_integer(n) or n <= 0:
        raise InvalidParameterError("n", "positive integer", n)
    return _build(np.eye(int(n)).reshape(-1), (n, n), options, dtype, readonly)


def arange(
    start: float,
    stop: Optional[float] = None,
    step: float = 1,
    options: Optional[NDArrayOptions] = None,
    *,
    dtype: Any = None,
    readonly: Optional[bool] = None,
) -> NDArray:
    """
    Evenly spaced values in ``[start, stop)``.

    ``arange(stop)`` counts from 0. The length is
    ``max(0, ceil((stop - start) / step))`` and element ``i`` is
    ``start + i * step``.

    Raises
    ------
    InvalidParameterError
        If a bound or the step is not finite, or ``step`` is zero.
    """
    if stop is None:
        start, stop = 0, start
    start = check_scalar(start, "start")
    stop = check_scalar(stop, "stop")
    step = check_scalar(step, "step")
    if step == 0:
        raise InvalidParameterError("step", "non-zero number", step)

    count = max(0, math.ceil((stop - start) / step))
    values = start + np.arange(count, dtype=np.float64) * step
    return _build(values, (count,), options, dtype, readonly)


def linspace(
    start: float,
    stop: float,
    num: int = 50,
    options: Optional[NDArrayOptions] = None,
    *,
    dtype: Any = None,
    readonly: Optional[bool] = None,
) -> NDArray:
    """
    ``num`` evenly spaced values over ``[start, stop]`` (both ends included).

    The last element is exactly ``stop``; ``num == 1`` yields ``[start]``.

    Raises
    ------
    InvalidParameterError
        If a bound is not finite or ``num`` is not a positive integer.
    """
    start = check_scalar(start, "start")
    stop = check_scalar(stop, "stop")
    if not is_integer(num) or num <= 0:
        raise InvalidParameterError("num", "positive integer", num)

    if num == 1:
        values = np.array([float(start)])
    else:
        step = (stop - start) / (num - 1)
        values = start + np.arange(num, dtype=np.float64) * step
        values[-1] = stop
    return _build(values, (num,), options, dtype, readonly)


def from_nested(
    data: Any,
    options: Optional[NDArrayOptions] = None,
    *,
    dtype: Any = None,
    readonly: Optional[bool] = None,
) -> NDArray:
    """
    Array from nested lists/tuples (or a single number), shape inferred.

    ``from_nested(5)`` is a 0-d array; ``from_nested([[1, 2], [3, 4]])`` has
    shape ``(2, 2)``.
    """
    return NDArray(data, None, options, dtype=dtype, readonly=readonly)


def random(
    shape: Any,
    options: Optional[NDArrayOptions] = None,
    *,
    seed: Optional[int] = None,
    dtype: Any = None,
    readonly: Optional[bool] = None,
) -> NDArray:
    """
    Array of ``shape`` with uniform samples from ``[0, 1)``.

    ``seed`` makes the draw reproducible.
    """
    shape = validate_shape(shape)
    rng = np.random.default_rng(seed)
    return _build(rng.random(size_of(shape)), shape, options, dtype, readonly)
