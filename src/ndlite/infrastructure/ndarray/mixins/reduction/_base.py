"""
Reduction mixin for NDArray.

This module declares :class:`NDArrayMixinReduction`, which provides ``sum``,
``mean``, ``min``, ``max``, ``var`` and ``std``. Each accepts ``axis``:

- ``axis=None`` reduces every element and returns a Python scalar;
- an integer axis (negative values count from the end) returns an array with
  that axis removed (``(1,)`` when nothing is left).

Result dtypes
-------------
- ``sum``, ``min``, ``max``: the source dtype (``int`` scalars for integer
  kinds when ``axis=None``).
- ``mean``, ``var``, ``std``: ``dtype.floating_result()``.

Accumulation happens in float64, except integer ``sum``, which accumulates in
int64.
"""

from __future__ import annotations

from typing import Any, Optional, Union

import numpy as np

from .....domain._errors import EmptyArrayError
from .....domain._ndarray import INDArray
from ....broadcasting._broadcast import finalize
from ....reduction._axis_reduce import (
    axis_values,
    check_ddof,
    lane_variance,
    reduce_all,
    reduce_axis,
)

Number = Union[int, float]


class NDArrayMixinReduction:
    """
    Mixin implementing axis and whole-array reductions.

    Raises
    ------
    InvalidParameterError
        If ``axis`` is not None or a valid axis, or ``ddof`` is invalid.
    EmptyArrayError
        ``min``/``max`` over zero elements; ``mean``/``var``/``std`` over an
        empty array or a zero-length axis.
    """

    __slots__ = ()

    def sum(self: INDArray, axis: Optional[int] = None) -> Union["INDArray", Number]:
        """
        Sum of elements; an empty reduction sums to 0.

        Integer kinds accumulate in int64, so the whole-array sum is the exact
        Python ``int`` and axis sums wrap to the dtype exactly as a sequence
        of integer additions would. Floating kinds accumulate in float64.
        """
        if not self.dtype.is_integer:
            if axis is None:
                return float(reduce_all(self, np.add, 0.0, "sum"))
            return reduce_axis(self, axis, np.add, 0.0, operation="sum")

        if axis is None:
            return int(self._values().astype(np.int64).sum())
        values, shape = axis_values(self, axis)
        # Reducing modulo 2**bits keeps the totals exact in float64.
        totals = values.astype(np.int64).sum(axis=1) % (2**self.dtype.bits)
        return finalize(self, totals, shape, self.dtype, "sum")

    def min(self: INDArray, axis: Optional[int] = None) -> Union["INDArray", Number]:
        """Smallest element."""
        if axis is None:
            return self.dtype.python_type(reduce_all(self, np.minimum, None, "min"))
        return reduce_axis(self, axis, np.minimum, operation="min")

    def max(self: INDArray, axis: Optional[int] = None) -> Union["INDArray", Number]:
        """Largest element."""
        if axis is None:
            return self.dtype.python_type(reduce_all(self, np.maximum, None, "max"))
        return reduce_axis(self, axis, np.maximum, operation="max")

    def mean(self: INDArray, axis: Optional[int] = None) -> Union["INDArray", float]:
        """Arithmetic mean (sum divided by the reduced length)."""
        if axis is None:
            if self.size == 0:
                raise EmptyArrayError("mean")
            return reduce_all(self, np.add, 0.0, "mean") / self.size

        values, shape = axis_values(self, axis)
        if values.shape[1] == 0:
            raise EmptyArrayError("mean")
        return finalize(
            self,
            values.sum(axis=1) / values.shape[1],
            shape,
            self.dtype.floating_result(),
            "mean",
        )

    def var(
        self: INDArray, axis: Optional[int] = None, ddof: Any = 0
    ) -> Union["INDArray", float]:
        """
        Variance with ``ddof`` delta degrees of freedom (two-pass).

        ``ddof`` must be a non-negative integer smaller than the reduced
        length.
        """
        if axis is None:
            if self.size == 0:
                raise EmptyArrayError("var")
            values = self._values().astype(np.float64).reshape(1, -1)
            ddof = check_ddof(ddof, self.size)
            return float(lane_variance(values, ddof)[0])

        values, shape = axis_values(self, axis)
        if values.shape[1] == 0:
            raise EmptyArrayError("var")
        ddof = check_ddof(ddof, values.shape[1])
        return finalize(
            self,
            lane_variance(values, ddof),
            shape,
            self.dtype.floating_result(),
            "var",
        )

    def std(
        self: INDArray, axis: Optional[int] = None, ddof: Any = 0
    ) -> Union["INDArray", float]:
        """Standard deviation: square root of :meth:`var`."""
        variance = self.var(axis=axis, ddof=ddof)
        if axis is None:
            return float(np.sqrt(variance))
        return variance.sqrt()
