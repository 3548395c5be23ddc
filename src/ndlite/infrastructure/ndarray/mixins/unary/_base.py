"""
Unary element-wise math for NDArray.

Operations fall into two groups by result dtype:

- ``negative``, ``absolute``, ``square``, ``sign`` and the rounding family
  (``floor``, ``ceil``, ``round``, ``trunc``) keep the source dtype. Unsigned
  kinds wrap on negation, and rounding is a no-op on integer kinds.
- Roots, exponentials, logarithms, trigonometric and hyperbolic functions
  produce the dtype's floating result kind (``float64`` for integer sources).

Inputs outside a function's real domain fail before anything is computed;
results that overflow the result dtype fail afterwards. Both raise
``MathematicalError`` naming the first offending element.
"""

from __future__ import annotations

from typing import Callable, Optional

import numpy as np

from .....domain._ndarray import INDArray
from .....domain.dtype._dtype import DType
from ....broadcasting._broadcast import finalize, raise_first_failure


def _non_positive(v):
    return v <= 0


def _outside_unit(v):
    return np.abs(v) > 1


_NON_POSITIVE_LOG = "Logarithm of a non-positive number"


class NDArrayMixinUnary:
    """
    Mixin implementing unary element-wise operations.

    Raises
    ------
    MathematicalError
        For domain violations (``sqrt`` of a negative element, ``log`` of a
        non-positive element, ``arcsin`` outside ``[-1, 1]``, ...) and for
        results that overflow; the error context names the flat index of the
        first offending element.
    """

    __slots__ = ()

    def _unary(
        self: INDArray,
        name: str,
        fn: Callable[[np.ndarray], np.ndarray],
        dtype: DType,
        invalid: Optional[Callable[[np.ndarray], np.ndarray]] = None,
        message: str = "",
    ) -> "INDArray":
        values = self._values().astype(np.float64)
        if invalid is not None:
            raise_first_failure(invalid(values), self.shape, name, message)
        with np.errstate(all="ignore"):
            result = fn(values)
        return finalize(self, result, self.shape, dtype, name)

    def _floating(self, name, fn, invalid=None, message=""):
        return self._unary(name, fn, self.dtype.floating_result(), invalid, message)

    # ----------------------------
    # Dtype-preserving
    # ----------------------------
    def negative(self) -> "INDArray":
        return self._unary("negative", np.negative, self.dtype)

    def absolute(self) -> "INDArray":
        return self._unary("absolute", np.absolute, self.dtype)

    def square(self) -> "INDArray":
        return self._unary("square", np.square, self.dtype)

    def sign(self) -> "INDArray":
        """-1, 0 or 1 per element, in the source dtype."""
        return self._unary("sign", np.sign, self.dtype)

    def floor(self) -> "INDArray":
        return self._unary("floor", np.floor, self.dtype)

    def ceil(self) -> "INDArray":
        return self._unary("ceil", np.ceil, self.dtype)

    def round(self) -> "INDArray":
        """Round to the nearest integer; halves go to the even neighbour."""
        return self._unary("round", np.round, self.dtype)

    def trunc(self) -> "INDArray":
        return self._unary("trunc", np.trunc, self.dtype)

    # ----------------------------
    # Roots, exponentials, logarithms
    # ----------------------------
    def sqrt(self) -> "INDArray":
        return self._floating(
            "sqrt", np.sqrt, lambda v: v < 0, "Square root of a negative number"
        )

    def cbrt(self) -> "INDArray":
        return self._floating("cbrt", np.cbrt)

    def exp(self) -> "INDArray":
        return self._floating("exp", np.exp)

    def exp2(self) -> "INDArray":
        return self._floating("exp2", np.exp2)

    def expm1(self) -> "INDArray":
        """``exp(x) - 1``, accurate for small ``x``."""
        return self._floating("expm1", np.expm1)

    def log(self) -> "INDArray":
        return self._floating("log", np.log, _non_positive, _NON_POSITIVE_LOG)

    def log2(self) -> "INDArray":
        return self._floating("log2", np.log2, _non_positive, _NON_POSITIVE_LOG)

    def log10(self) -> "INDArray":
        return self._floating("log10", np.log10, _non_positive, _NON_POSITIVE_LOG)

    def log1p(self) -> "INDArray":
        """``log(1 + x)``, accurate for small ``x``; requires ``x > -1``."""
        return self._floating(
            "log1p", np.log1p, lambda v: v <= -1, _NON_POSITIVE_LOG
        )

    # ----------------------------
    # Trigonometric
    # ----------------------------
    def sin(self) -> "INDArray":
        return self._floating("sin", np.sin)

    def cos(self) -> "INDArray":
        return self._floating("cos", np.cos)

    def tan(self) -> "INDArray":
        return self._floating("tan", np.tan)

    def arcsin(self) -> "INDArray":
        return self._floating(
            "arcsin", np.arcsin, _outside_unit, "Arcsine input must be between -1 and 1"
        )

    def arccos(self) -> "INDArray":
        return self._floating(
            "arccos",
            np.arccos,
            _outside_unit,
            "Arccosine input must be between -1 and 1",
        )

    def arctan(self) -> "INDArray":
        return self._floating("arctan", np.arctan)

    # ----------------------------
    # Hyperbolic
    # ----------------------------
    def sinh(self) -> "INDArray":
        return self._floating("sinh", np.sinh)

    def cosh(self) -> "INDArray":
        return self._floating("cosh", np.cosh)

    def tanh(self) -> "INDArray":
        return self._floating("tanh", np.tanh)

    def arcsinh(self) -> "INDArray":
        return self._floating("arcsinh", np.arcsinh)

    def arccosh(self) -> "INDArray":
        return self._floating(
            "arccosh",
            np.arccosh,
            lambda v: v < 1,
            "Inverse hyperbolic cosine input must be >= 1",
        )

    def arctanh(self) -> "INDArray":
        return self._floating(
            "arctanh",
            np.arctanh,
            lambda v: np.abs(v) >= 1,
            "Inverse hyperbolic tangent input must be between -1 and 1",
        )

    def __neg__(self) -> "INDArray":
        """Element-wise negation, ``-self``."""
        return self.negative()

    def __abs__(self) -> "INDArray":
        """Element-wise absolute value, ``abs(self)``."""
        return self.absolute()
