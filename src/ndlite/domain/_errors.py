"""
Array-related exceptions for ndlite.

This module defines the error taxonomy raised by the array core. Every
exception derives from :class:`NDArrayError` and, additionally, from the
closest builtin exception so callers that only know the standard library
(``ValueError``, ``IndexError``, ...) can still catch them.

Kinds
-----
- :class:`DimensionMismatchError`: shape/size/rank incompatibility between
  operands, or between data and a declared shape.
- :class:`IndexOutOfBoundsError`: a resolved index falls outside its dimension.
- :class:`InvalidParameterError`: a scalar argument violates a precondition.
- :class:`EmptyArrayError`: an operation without identity was requested over
  zero elements.
- :class:`InvalidStateError`: the operation is forbidden by the object's state
  (e.g., writing to a readonly array).
- :class:`MathematicalError`: a domain violation during element-wise
  application (division by zero, ``sqrt`` of a negative value, ...).

All validation in the core happens before any buffer is allocated or mutated,
so raising one of these never leaves partially written results behind.
"""

from __future__ import annotations

from typing import Any, Mapping, Optional, Sequence


def _fmt_shape(shape: Optional[Sequence[Any]]) -> str:
    if shape is None:
        return "?"
    return "(" + ", ".join(str(d) for d in shape) + ")"


class NDArrayError(Exception):
    """Base class of every error raised by the ndlite array core."""


class DimensionMismatchError(NDArrayError, ValueError):
    """
    Raised when shapes, sizes or ranks are incompatible.

    Attributes
    ----------
    expected : Optional[Sequence[int]]
        The shape (or size, wrapped in a 1-tuple) the operation required.
    actual : Optional[Sequence[int]]
        The shape (or size) that was supplied.
    operation : Optional[str]
        Name of the operation that detected the mismatch.
    """

    def __init__(
        self,
        message: str,
        expected: Optional[Sequence[int]] = None,
        actual: Optional[Sequence[int]] = None,
        operation: Optional[str] = None,
    ) -> None:
        """
        Initialize the DimensionMismatchError.

        Parameters
        ----------
        message : str
            Human-readable description of the mismatch.
        expected : Optional[Sequence[int]], optional
            Required shape or size.
        actual : Optional[Sequence[int]], optional
            Supplied shape or size.
        operation : Optional[str], optional
            Operation name used as a message prefix.
        """
        text = f"{operation}: {message}" if operation else message
        if expected is not None or actual is not None:
            text += f". Expected: {_fmt_shape(expected)}, got: {_fmt_shape(actual)}"
        super().__init__(text)
        self.expected = tuple(expected) if expected is not None else None
        self.actual = tuple(actual) if actual is not None else None
        self.operation = operation


class IndexOutOfBoundsError(NDArrayError, IndexError):
    """
    Raised when an index (after negative-index resolution) is out of range.

    Attributes
    ----------
    index : int
        The index exactly as supplied by the caller.
    dim_size : int
        Length of the dimension that was indexed.
    dimension : Optional[int]
        Position of the offending dimension, when known.
    """

    def __init__(
        self, index: int, dim_size: int, dimension: Optional[int] = None
    ) -> None:
        where = f" in dimension {dimension}" if dimension is not None else ""
        super().__init__(
            f"Index {index} is out of bounds for axis of length {dim_size}{where}"
        )
        self.index = index
        self.dim_size = dim_size
        self.dimension = dimension


class InvalidParameterError(NDArrayError, ValueError):
    """
    Raised when an argument violates a precondition.

    Attributes
    ----------
    name : str
        Parameter name (e.g., ``"step"``, ``"axis"``, ``"index[1]"``).
    expected : str
        Description of what the parameter should have been.
    actual : Any
        The offending value.
    """

    def __init__(
        self,
        name: str,
        expected: str,
        actual: Any,
        info: Optional[str] = None,
    ) -> None:
        message = f"Parameter '{name}' expected {expected}, got {actual!r}"
        if info:
            message += f". {info}"
        super().__init__(message)
        self.name = name
        self.expected = expected
        self.actual = actual

    @classmethod
    def non_finite(cls, name: str, value: Any) -> "InvalidParameterError":
        """Build the error raised for NaN/Infinity (or non-numeric) inputs."""
        return cls(
            name,
            "finite number",
            value,
            "Array elements and scalar operands must be finite numbers",
        )


class EmptyArrayError(InvalidParameterError):
    """Raised when an operation without identity is applied to zero elements."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            "array",
            "non-empty array",
            "size 0",
            f"Operation '{operation}' cannot be performed on an empty array",
        )
        self.operation = operation


class InvalidStateError(NDArrayError, RuntimeError):
    """
    Raised when an operation is forbidden by the current object state.

    Attributes
    ----------
    operation : str
        Name of the rejected operation.
    """

    def __init__(self, message: str, operation: str) -> None:
        super().__init__(f"{operation}: {message}")
        self.operation = operation


class MathematicalError(NDArrayError, ArithmeticError):
    """
    Raised when an element-wise operation hits a domain violation.

    Attributes
    ----------
    operation : str
        Name of the element-wise operation (e.g., ``"divide"``).
    context : dict
        Diagnostic details; element-wise failures carry the flat result
        ``index`` and its multi-dimensional ``indices``.
    """

    def __init__(
        self,
        message: str,
        operation: str,
        context: Optional[Mapping[str, Any]] = None,
    ) -> None:
        self.operation = operation
        self.context = dict(context or {})
        text = f"{operation}: {message}"
        if self.context:
            details = ", ".join(f"{k}={v!r}" for k, v in self.context.items())
            text += f" ({details})"
        super().__init__(text)
