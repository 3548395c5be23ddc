"""
Comparison and logical mixin for NDArray.

Comparisons and logical connectives run through the broadcasting engine like
arithmetic does, but always produce ``uint8`` masks: ``1`` where the relation
holds, ``0`` elsewhere. Masks can be fed straight into :meth:`boolean_index`.
Logical operations treat any non-zero element as true.

``==`` and ``!=`` keep identity semantics; use :meth:`equal` /
:meth:`not_equal` for element-wise equality.
"""

from __future__ import annotations

from typing import Union

import numpy as np

from .....domain._ndarray import INDArray
from .....domain.dtype._dtype import DType
from ....broadcasting._broadcast import Kernel, binary_op, finalize

Number = Union[int, float]

GREATER = Kernel("greater", np.greater)
GREATER_EQUAL = Kernel("greater_equal", np.greater_equal)
LESS = Kernel("less", np.less)
LESS_EQUAL = Kernel("less_equal", np.less_equal)
EQUAL = Kernel("equal", np.equal)
NOT_EQUAL = Kernel("not_equal", np.not_equal)
LOGICAL_AND = Kernel("logical_and", np.logical_and)
LOGICAL_OR = Kernel("logical_or", np.logical_or)
LOGICAL_XOR = Kernel("logical_xor", np.logical_xor)


class NDArrayMixinComparison:
    """Mixin implementing element-wise comparisons and logical operations."""

    __slots__ = ()

    def _compare(self: INDArray, other, kernel: Kernel) -> "INDArray":
        return binary_op(self, other, kernel, dtype=DType.UINT8)

    # ----------------------------
    # Comparisons
    # ----------------------------
    def greater(self, other: Union["INDArray", Number]) -> "INDArray":
        """Mask of elements where ``self > other``."""
        return self._compare(other, GREATER)

    def greater_equal(self, other: Union["INDArray", Number]) -> "INDArray":
        """Mask of elements where ``self >= other``."""
        return self._compare(other, GREATER_EQUAL)

    def less(self, other: Union["INDArray", Number]) -> "INDArray":
        """Mask of elements where ``self < other``."""
        return self._compare(other, LESS)

    def less_equal(self, other: Union["INDArray", Number]) -> "INDArray":
        """Mask of elements where ``self <= other``."""
        return self._compare(other, LESS_EQUAL)

    def equal(self, other: Union["INDArray", Number]) -> "INDArray":
        """
        Mask of elements where ``self == other``.

        Parameters
        ----------
        other : Union[INDArray, Number]
            Right-hand operand; arrays are broadcast against ``self``.

        Returns
        -------
        INDArray
            ``uint8`` array of the broadcast shape holding 0/1.

        Notes
        -----
        Values are compared after reading them as float64, so an ``int32``
        element equals the same value stored as ``float32``.
        """
        return self._compare(other, EQUAL)

    def not_equal(self, other: Union["INDArray", Number]) -> "INDArray":
        """Mask of elements where ``self != other``."""
        return self._compare(other, NOT_EQUAL)

    # ----------------------------
    # Logical connectives
    # ----------------------------
    def logical_and(self, other: Union["INDArray", Number]) -> "INDArray":
        """Mask of elements where both operands are non-zero."""
        return self._compare(other, LOGICAL_AND)

    def logical_or(self, other: Union["INDArray", Number]) -> "INDArray":
        """Mask of elements where at least one operand is non-zero."""
        return self._compare(other, LOGICAL_OR)

    def logical_xor(self, other: Union["INDArray", Number]) -> "INDArray":
        """Mask of elements where exactly one operand is non-zero."""
        return self._compare(other, LOGICAL_XOR)

    def logical_not(self: INDArray) -> "INDArray":
        """Mask of elements equal to zero."""
        mask = np.equal(self._values(), 0)
        return finalize(self, mask, self.shape, DType.UINT8, "logical_not")

    # ----------------------------
    # Operators
    # ----------------------------
    def __gt__(self, other: Union["INDArray", Number]) -> "INDArray":
        """Element-wise ``self > other`` as a ``uint8`` mask."""
        return self.greater(other)

    def __ge__(self, other: Union["INDArray", Number]) -> "INDArray":
        """Element-wise ``self >= other`` as a ``uint8`` mask."""
        return self.greater_equal(other)

    def __lt__(self, other: Union["INDArray", Number]) -> "INDArray":
        """Element-wise ``self < other`` as a ``uint8`` mask."""
        return self.less(other)

    def __le__(self, other: Union["INDArray", Number]) -> "INDArray":
        """Element-wise ``self <= other`` as a ``uint8`` mask."""
        return self.less_equal(other)
