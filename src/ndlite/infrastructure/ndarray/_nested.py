"""
Iterative flattening of nested numeric input.

Nested lists/tuples are walked with an explicit stack, so pathological nesting
depth never hits the interpreter recursion limit. The shape is taken from the
first-seen sub-lengths at every level, and every other branch is validated
against it (uniform depth *and* uniform length).
"""

from __future__ import annotations

import math
from typing import Any, List, Sequence, Tuple

from ...domain._errors import DimensionMismatchError
from ...domain._validation import check_scalar

_NESTED_TYPES = (list, tuple)


def _check_leaf(value: Any, position: Sequence[int]) -> float:
    if isinstance(value, float) and math.isfinite(value):
        return value
    return check_scalar(value, "data" + "".join(f"[{i}]" for i in position))


def infer_shape(data: Any) -> Tuple[int, ...]:
    """
    Infer a shape from the first element at every nesting level.

    A bare number has shape ``()``; an empty list stops the descent.
    """
    shape: List[int] = []
    current = data
    while isinstance(current, _NESTED_TYPES):
        shape.append(len(current))
        if not current:
            break
        current = current[0]
    return tuple(shape)


def flatten_nested(data: Any) -> Tuple[List[float], Tuple[int, ...]]:
    """
    Flatten nested lists/tuples of numbers depth-first (row-major order).

    Parameters
    ----------
    data : Any
        A number, or arbitrarily nested lists/tuples of numbers.

    Returns
    -------
    tuple[list, tuple[int, ...]]
        The flat leaf values and the validated shape.

    Raises
    ------
    DimensionMismatchError
        If the nesting is ragged (depth or length differs between branches).
    InvalidParameterError
        If a leaf is not a finite real number (``bool`` is rejected).
    """
    shape = infer_shape(data)
    depth = len(shape)
    values: List[float] = []

    # (node, level, position) triples; children are pushed in reverse so
    # leaves pop in row-major order.
    stack: List[Tuple[Any, int, Tuple[int, ...]]] = [(data, 0, ())]
    while stack:
        node, level, position = stack.pop()
        if level == depth:
            if isinstance(node, _NESTED_TYPES):
                raise DimensionMismatchError(
                    f"Inconsistent nesting depth at position {position}",
                    expected=shape,
                    actual=shape[:level] + (len(node),),
                    operation="flatten",
                )
            values.append(_check_leaf(node, position))
            continue

        if not isinstance(node, _NESTED_TYPES):
            raise DimensionMismatchError(
                f"Inconsistent nesting depth at position {position}",
                expected=shape,
                actual=shape[:level],
                operation="flatten",
            )
        if len(node) != shape[level]:
            raise DimensionMismatchError(
                f"Inconsistent array dimensions at level {level}",
                expected=(shape[level],),
                actual=(len(node),),
                operation="flatten",
            )
        for i in range(len(node) - 1, -1, -1):
            stack.append((node[i], level + 1, position + (i,)))

    return values, shape
