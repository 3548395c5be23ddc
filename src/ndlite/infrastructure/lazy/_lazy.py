"""
Deferred operation chains with simple fusion.

:class:`LazyNDArray` records arithmetic and view operations against a source
array and runs them on :meth:`LazyNDArray.evaluate`. Before running, adjacent
scalar additions are merged into one addition and adjacent scalar
multiplications into one multiplication, saving one full pass over the data
per merge.

A merge is only made when it cannot change the result, so evaluation always
matches running the same operations eagerly:

- Floating sources are never fused. Each eager step rounds to the element
  width, and reassociating ``(a + x) + y`` as ``a + (x + y)`` rounds
  differently in float32 and float64 alike.
- Integer sources are fused when both scalars are integers small enough that
  every float64 intermediate stays exact. Element values are below ``2**32``
  in magnitude, so additions need ``|x| + |y| <= 2**52`` and multiplications
  need ``|x|``, ``|y|`` and ``|x * y|`` all at most ``2**21``. Wrap-around is
  modular, so wrapping once at the end equals wrapping after every step.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from ...domain._errors import InvalidParameterError
from ...domain._ndarray import INDArray
from ...domain._validation import is_number
from ...domain.dtype._dtype import DType
from ...domain.layout._layout import is_integer

_ARITHMETIC = ("add", "subtract", "multiply", "divide", "power")
_ADD_LIMIT = 2**52
_MULTIPLY_LIMIT = 2**21


@dataclass(frozen=True)
class LazyOp:
    """One recorded operation: a method name and its positional arguments."""

    name: str
    args: Tuple[Any, ...] = ()

    @property
    def scalar(self) -> Any:
        """The scalar operand of an arithmetic op, or None."""
        if self.name in _ARITHMETIC and len(self.args) == 1 and is_number(self.args[0]):
            return self.args[0]
        return None


def _fusable(first: LazyOp, second: LazyOp) -> bool:
    if first.name != second.name or first.name not in ("add", "multiply"):
        return False
    a, b = first.scalar, second.scalar
    if not (is_integer(a) and is_integer(b)):
        return False
    a, b = int(a), int(b)
    if first.name == "add":
        return abs(a) + abs(b) <= _ADD_LIMIT
    return max(abs(a), abs(b), abs(a * b)) <= _MULTIPLY_LIMIT


def fuse(ops: Tuple[LazyOp, ...], dtype: DType) -> Tuple[LazyOp, ...]:
    """
    Merge adjacent scalar ``add``/``add`` and ``multiply``/``multiply`` pairs.

    Parameters
    ----------
    ops : tuple[LazyOp, ...]
        Recorded operations in order.
    dtype : DType
        Element kind of the source array; only integer kinds are fused.

    Returns
    -------
    tuple[LazyOp, ...]
        The fused plan.
    """
    if not dtype.is_integer:
        return tuple(ops)
    plan = []
    for op in ops:
        if plan and _fusable(plan[-1], op):
            prev = plan.pop()
            if op.name == "add":
                merged = int(prev.scalar) + int(op.scalar)
            else:
                merged = int(prev.scalar) * int(op.scalar)
            plan.append(LazyOp(op.name, (merged,)))
        else:
            plan.append(op)
    return tuple(plan)


class LazyNDArray:
    """
    Deferred chain of operations rooted at an array.

    Every recording method returns a *new* ``LazyNDArray``; the source array
    is not touched until :meth:`evaluate`.

    Parameters
    ----------
    source : INDArray
        The array the chain starts from.
    ops : tuple[LazyOp, ...], optional
        Already recorded operations.
    """

    __slots__ = ("_source", "_ops")

    def __init__(self, source: INDArray, ops: Tuple[LazyOp, ...] = ()) -> None:
        if not isinstance(source, INDArray):
            raise InvalidParameterError("source", "NDArray", source)
        self._source = source
        self._ops = tuple(ops)

    def __repr__(self) -> str:
        names = ", ".join(op.name for op in self._ops)
        return f"LazyNDArray(shape={self._source.shape}, ops=[{names}])"

    @property
    def source(self) -> INDArray:
        return self._source

    @property
    def operations(self) -> Tuple[LazyOp, ...]:
        """Recorded operations, unfused."""
        return self._ops

    def plan(self) -> Tuple[LazyOp, ...]:
        """Operations as they will run after fusion."""
        return fuse(self._ops, self._source.dtype)

    def _record(self, name: str, *args: Any) -> "LazyNDArray":
        return LazyNDArray(self._source, self._ops + (LazyOp(name, args),))

    def add(self, other: Any) -> "LazyNDArray":
        return self._record("add", other)

    def subtract(self, other: Any) -> "LazyNDArray":
        return self._record("subtract", other)

    def multiply(self, other: Any) -> "LazyNDArray":
        return self._record("multiply", other)

    def divide(self, other: Any) -> "LazyNDArray":
        return self._record("divide", other)

    def power(self, other: Any) -> "LazyNDArray":
        return self._record("power", other)

    def transpose(self, *axes: Any) -> "LazyNDArray":
        return self._record("transpose", *axes)

    def reshape(self, *shape: Any) -> "LazyNDArray":
        return self._record("reshape", *shape)

    def evaluate(self) -> INDArray:
        """
        Run the fused plan and return the resulting array.

        With no recorded operations the source array itself is returned.
        Errors surface exactly as from the eager operations.
        """
        result = self._source
        for op in self.plan():
            result = getattr(result, op.name)(*op.args)
        return result
