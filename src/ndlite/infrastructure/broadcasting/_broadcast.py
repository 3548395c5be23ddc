"""
Broadcasting engine for element-wise binary operations.

This module owns the single code path every element-wise binary operation goes
through (arithmetic and comparisons alike):

1. The right-hand operand is resolved **once** into an :class:`Operand`
   (a scalar or an array). No other module inspects operand types.
2. The result shape is computed with :func:`broadcast_shape`; incompatible
   shapes fail before anything is allocated.
3. Both operands are gathered through their own strides into result order
   (size-1 source dimensions are pinned to coordinate 0), the kernel runs
   once over the whole result, and domain failures are reported with the flat
   index of the first failing element.

Kernels are plain :class:`Kernel` records; the set of operations is closed and
fixed at import time.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Optional, Sequence

import numpy as np

from ...domain._errors import (
    DimensionMismatchError,
    InvalidParameterError,
    MathematicalError,
)
from ...domain._ndarray import INDArray
from ...domain._validation import check_scalar, is_number
from ...domain.dtype._dtype import DType
from ...domain.layout._layout import Shape, flat_to_indices, size_of


def can_broadcast(shape_a: Sequence[int], shape_b: Sequence[int]) -> bool:
    """
    Return True if two shapes are broadcast-compatible.

    Shapes are right-aligned (the shorter one is padded with leading 1s); every
    aligned pair must be equal or contain a 1.
    """
    for a, b in zip(reversed(tuple(shape_a)), reversed(tuple(shape_b))):
        if a != b and a != 1 and b != 1:
            return False
    return True


def broadcast_shape(
    shape_a: Sequence[int], shape_b: Sequence[int], operation: str = "broadcast"
) -> Shape:
    """
    Compute the broadcast result shape of two shapes.

    Parameters
    ----------
    shape_a, shape_b : Sequence[int]
        Operand shapes.
    operation : str, optional
        Operation name reported on failure.

    Returns
    -------
    tuple[int, ...]
        The left-padded shapes merged per dimension; a size-1 dimension takes
        the other operand's size.

    Raises
    ------
    DimensionMismatchError
        If the shapes are not broadcast-compatible.
    """
    a, b = tuple(shape_a), tuple(shape_b)
    if not can_broadcast(a, b):
        raise DimensionMismatchError(
            "Shapes cannot be broadcast together",
            expected=a,
            actual=b,
            operation=operation,
        )
    ndim = max(len(a), len(b))
    padded_a = (1,) * (ndim - len(a)) + a
    padded_b = (1,) * (ndim - len(b)) + b
    return tuple(y if x == 1 else x for x, y in zip(padded_a, padded_b))


class OperandKind(Enum):
    """The two operand variants accepted by binary operations."""

    SCALAR = "scalar"
    ARRAY = "array"


@dataclass(frozen=True)
class Operand:
    """
    A right-hand operand resolved at the API boundary.

    Attributes
    ----------
    kind : OperandKind
        Which variant ``value`` holds.
    value : Any
        A finite Python ``float`` for scalars, an array for arrays.
    """

    kind: OperandKind
    value: Any

    @classmethod
    def resolve(cls, other: Any, name: str = "other") -> "Operand":
        """
        Classify ``other`` as a scalar or an array.

        Raises
        ------
        InvalidParameterError
            If ``other`` is neither an array nor a finite real number
            (``bool`` is rejected).
        """
        if isinstance(other, INDArray):
            return cls(OperandKind.ARRAY, other)
        if not is_number(other):
            raise InvalidParameterError(name, "NDArray or finite number", other)
        return cls(OperandKind.SCALAR, float(check_scalar(other, name)))

    def shape(self) -> Shape:
        return self.value.shape if self.kind is OperandKind.ARRAY else ()

    def values(self, out_shape: Sequence[int]) -> Any:
        """Float64 values laid out in ``out_shape`` order (scalars stay scalar)."""
        if self.kind is OperandKind.SCALAR:
            return self.value
        return self.value._values(out_shape).astype(np.float64)


@dataclass(frozen=True)
class Kernel:
    """
    A vectorized element-wise operation.

    Attributes
    ----------
    name : str
        Operation name used in error messages (``"add"``, ``"divide"``, ...).
    apply : Callable
        NumPy function evaluated over float64 operands.
    invalid : Optional[Callable]
        Optional predicate ``(left, right, result) -> bool mask`` flagging
        domain violations.
    message : str
        Error text reported for flagged elements.
    """

    name: str
    apply: Callable[..., np.ndarray]
    invalid: Optional[Callable[..., np.ndarray]] = None
    message: str = "Domain error"


def raise_first_failure(
    mask: np.ndarray, out_shape: Sequence[int], operation: str, message: str
) -> None:
    """
    Raise :class:`MathematicalError` for the first True entry of ``mask``.

    The error context carries the flat result ``index`` and its ``indices``.
    Does nothing when ``mask`` has no True entry.
    """
    size = size_of(out_shape)
    if size == 0 or not np.any(mask):
        return
    index = int(np.argmax(np.broadcast_to(mask, (size,))))
    raise MathematicalError(
        message,
        operation,
        {"index": index, "indices": flat_to_indices(index, out_shape)},
    )


def finalize(
    a: INDArray,
    result: np.ndarray,
    out_shape: Sequence[int],
    dtype: DType,
    operation: str,
) -> INDArray:
    """
    Store kernel output in a fresh array of ``dtype``.

    Results that are NaN or infinite, or that overflow a floating ``dtype``
    when rounded to its width, cannot be stored and are reported as
    :class:`MathematicalError`.
    """
    result = np.asarray(result, dtype=np.float64).reshape(-1)
    failed = ~np.isfinite(result)
    if not dtype.is_integer:
        # NumPy dtype names match DType values.
        with np.errstate(over="ignore"):
            failed |= np.isinf(result.astype(dtype.value))
    raise_first_failure(
        failed,
        out_shape,
        operation,
        f"Result is not representable as {dtype}",
    )
    return type(a)._from_values(result, tuple(out_shape), dtype)


def binary_op(
    a: INDArray,
    other: Any,
    kernel: Kernel,
    *,
    reflected: bool = False,
    dtype: Optional[DType] = None,
) -> INDArray:
    """
    Apply ``kernel`` element-wise to ``a`` and ``other`` with broadcasting.

    Parameters
    ----------
    a : INDArray
        Left-hand array; supplies the result dtype unless ``dtype`` is given.
    other : Union[INDArray, Number]
        Right-hand operand, resolved once via :meth:`Operand.resolve`.
    kernel : Kernel
        Operation to apply.
    reflected : bool, optional
        Evaluate ``kernel(other, a)`` instead (``scalar - array`` etc.).
    dtype : Optional[DType], optional
        Result dtype override (comparisons produce ``uint8``).

    Returns
    -------
    INDArray
        A freshly allocated, writable array of the broadcast shape.

    Raises
    ------
    InvalidParameterError
        If ``other`` is not an array or a finite number.
    DimensionMismatchError
        If the shapes cannot be broadcast.
    MathematicalError
        If the kernel flags a domain violation, or a result is not
        representable in the result dtype.
    """
    operand = Operand.resolve(other)
    if operand.kind is OperandKind.SCALAR:
        out_shape = a.shape
    else:
        out_shape = broadcast_shape(a.shape, operand.shape(), operation=kernel.name)

    left = a._values(out_shape).astype(np.float64)
    right = operand.values(out_shape)
    if reflected:
        left, right = right, left

    with np.errstate(all="ignore"):
        result = kernel.apply(left, right)
        if kernel.invalid is not None:
            raise_first_failure(
                kernel.invalid(left, right, result),
                out_shape,
                kernel.name,
                kernel.message,
            )

    return finalize(a, result, out_shape, dtype or a.dtype, kernel.name)
