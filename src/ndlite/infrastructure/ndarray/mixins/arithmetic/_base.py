"""
Arithmetic mixin defining element-wise NDArray operators.

This module declares :class:`NDArrayMixinArithmetic`, which exposes the named
operations (``add``, ``subtract``, ``multiply``, ``divide``, ``floor_divide``,
``power``, ``mod``, ``minimum``, ``maximum``, ``arctan2``) and the matching
Python operators, including the reflected forms used for ``scalar <op> array``.

Every operation goes through ``binary_op``: the right
operand is resolved once as a scalar or an array, shapes are broadcast, and
the result is a new writable array in the left-hand array's dtype.
``arctan2`` is the exception on dtype and produces the floating result kind.
"""

from __future__ import annotations

from typing import Union

from .....domain._ndarray import INDArray
from ....broadcasting._broadcast import binary_op
from ._kernels import (
    ADD,
    ARCTAN2,
    DIVIDE,
    FLOOR_DIVIDE,
    MAXIMUM,
    MINIMUM,
    MOD,
    MULTIPLY,
    POWER,
    SUBTRACT,
)

Number = Union[int, float]


class NDArrayMixinArithmetic:
    """
    Mixin implementing element-wise arithmetic.

    Notes
    -----
    - Scalars must be finite numbers; ``bool`` is rejected.
    - Integer dtypes truncate and wrap results to their width.
    - ``divide``, ``floor_divide`` and ``mod`` fail with ``MathematicalError``
      on a zero divisor; the error context names the flat index of the first
      failing element.
    - ``mod`` follows the sign of the dividend (``-7 mod 3 == -1``), while
      ``floor_divide`` rounds toward negative infinity (``-7 // 2 == -4``).
    """

    __slots__ = ()

    # ----------------------------
    # Named operations
    # ----------------------------
    def add(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """Element-wise ``self + other`` with broadcasting."""
        return binary_op(self, other, ADD)

    def subtract(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """Element-wise ``self - other`` with broadcasting."""
        return binary_op(self, other, SUBTRACT)

    def multiply(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """Element-wise ``self * other`` with broadcasting."""
        return binary_op(self, other, MULTIPLY)

    def divide(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """
        Element-wise true division with broadcasting.

        Raises
        ------
        MathematicalError
            If any divisor element is zero.
        """
        return binary_op(self, other, DIVIDE)

    def floor_divide(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """
        Element-wise floored division with broadcasting.

        Raises
        ------
        MathematicalError
            If any divisor element is zero.
        """
        return binary_op(self, other, FLOOR_DIVIDE)

    def power(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """
        Element-wise ``self ** other`` with broadcasting.

        Raises
        ------
        MathematicalError
            If a negative base meets a fractional exponent, or a result
            overflows the dtype.
        """
        return binary_op(self, other, POWER)

    def mod(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """
        Element-wise truncated remainder with broadcasting.

        Raises
        ------
        MathematicalError
            If any divisor element is zero.
        """
        return binary_op(self, other, MOD)

    def minimum(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """Element-wise smaller of ``self`` and ``other``."""
        return binary_op(self, other, MINIMUM)

    def maximum(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """Element-wise larger of ``self`` and ``other``."""
        return binary_op(self, other, MAXIMUM)

    def arctan2(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """
        Element-wise angle of the point ``(other, self)`` in radians.

        ``self`` is the y coordinate and ``other`` the x coordinate. The
        result has the dtype's floating result kind (``float64`` for integer
        sources).
        """
        return binary_op(self, other, ARCTAN2, dtype=self.dtype.floating_result())

    # ----------------------------
    # Operators
    # ----------------------------
    def __add__(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """
        Elementwise addition, ``self + other``.

        Parameters
        ----------
        other : Union[INDArray, Number]
            Right-hand operand; arrays are broadcast against ``self``.

        Returns
        -------
        INDArray
            New array in ``self.dtype``.
        """
        return self.add(other)

    def __radd__(self: INDArray, other: Number) -> "INDArray":
        """Right-hand addition to support ``scalar + array``."""
        return binary_op(self, other, ADD, reflected=True)

    def __sub__(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """Elementwise subtraction, ``self - other``."""
        return self.subtract(other)

    def __rsub__(self: INDArray, other: Number) -> "INDArray":
        """
        Right-hand subtraction to support ``scalar - array``.

        The scalar stays on the left of the kernel, so ``5 - a`` computes
        ``5 - a[i]`` for every element. The dtype is still ``self.dtype``.
        """
        return binary_op(self, other, SUBTRACT, reflected=True)

    def __mul__(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """Elementwise multiplication, ``self * other``."""
        return self.multiply(other)

    def __rmul__(self: INDArray, other: Number) -> "INDArray":
        """Right-hand multiplication to support ``scalar * array``."""
        return binary_op(self, other, MULTIPLY, reflected=True)

    def __truediv__(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """
        Elementwise true division, ``self / other``.

        Raises
        ------
        MathematicalError
            If any divisor element is zero.
        """
        return self.divide(other)

    def __rtruediv__(self: INDArray, other: Number) -> "INDArray":
        """
        Right-hand division to support ``scalar / array``.

        Raises
        ------
        MathematicalError
            If any element of ``self`` (the divisor) is zero.
        """
        return binary_op(self, other, DIVIDE, reflected=True)

    def __floordiv__(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """Elementwise floored division, ``self // other``."""
        return self.floor_divide(other)

    def __rfloordiv__(self: INDArray, other: Number) -> "INDArray":
        """Right-hand floored division to support ``scalar // array``."""
        return binary_op(self, other, FLOOR_DIVIDE, reflected=True)

    def __pow__(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """Elementwise power, ``self ** other``."""
        return self.power(other)

    def __rpow__(self: INDArray, other: Number) -> "INDArray":
        """Right-hand power to support ``scalar ** array``."""
        return binary_op(self, other, POWER, reflected=True)

    def __mod__(self: INDArray, other: Union["INDArray", Number]) -> "INDArray":
        """Elementwise truncated remainder, ``self % other``."""
        return self.mod(other)

    def __rmod__(self: INDArray, other: Number) -> "INDArray":
        """Right-hand remainder to support ``scalar % array``."""
        return binary_op(self, other, MOD, reflected=True)
