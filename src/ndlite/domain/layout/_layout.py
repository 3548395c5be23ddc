"""
Shape and stride arithmetic for strided N-dimensional arrays.

This module is the leaf of the array core: pure functions over shapes,
strides and indices, with no state and no NumPy dependency. Everything that
addresses a flat buffer through ``(shape, strides, offset)`` metadata goes
through these helpers.

Layout model
------------
An element at multi-index ``(i0, ..., ik)`` lives at buffer position::

    offset + i0 * strides[0] + ... + ik * strides[k]

Freshly allocated arrays use row-major (C order) strides as computed by
:func:`strides_for`; views derived by transposition or stepped slicing may
carry arbitrary (including negative) strides.
"""

from __future__ import annotations

from numbers import Integral
from typing import Any, Optional, Sequence

from .._errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidParameterError,
)

Shape = tuple[int, ...]
Strides = tuple[int, ...]


def is_integer(value: Any) -> bool:
    """Return True for Python/NumPy integers, excluding ``bool``."""
    return isinstance(value, Integral) and not isinstance(value, bool)


def validate_shape(shape: Any, name: str = "shape") -> Shape:
    """
    Normalize and validate a shape specification.

    Parameters
    ----------
    shape : Any
        A non-negative integer (1-D shape) or a sequence of non-negative
        integers. An empty sequence denotes a 0-d (scalar) shape.
    name : str, optional
        Parameter name used in error messages.

    Returns
    -------
    tuple[int, ...]
        The shape as a tuple of Python ints.

    Raises
    ------
    InvalidParameterError
        If the shape is not a sequence of non-negative integers.
    """
    if is_integer(shape):
        shape = (shape,)
    if isinstance(shape, (str, bytes)) or not isinstance(shape, Sequence):
        try:
            shape = tuple(shape)
        except TypeError:
            raise InvalidParameterError(
                name, "sequence of non-negative integers", shape
            ) from None

    dims = []
    for i, dim in enumerate(shape):
        if not is_integer(dim) or dim < 0:
            raise InvalidParameterError(
                f"{name}[{i}]",
                "non-negative integer",
                dim,
                "All shape dimensions must be non-negative integers",
            )
        dims.append(int(dim))
    return tuple(dims)


def size_of(shape: Sequence[int]) -> int:
    """Return the number of elements of ``shape`` (1 for the empty shape)."""
    size = 1
    for dim in shape:
        size *= dim
    return size


def strides_for(shape: Sequence[int]) -> Strides:
    """
    Compute canonical row-major strides for ``shape``.

    ``strides[-1] == 1`` and ``strides[i] == strides[i + 1] * shape[i + 1]``.

    Parameters
    ----------
    shape : Sequence[int]
        A validated shape.

    Returns
    -------
    tuple[int, ...]
        Element (not byte) strides, same length as ``shape``.
    """
    strides = [0] * len(shape)
    stride = 1
    for i in range(len(shape) - 1, -1, -1):
        strides[i] = stride
        stride *= shape[i]
    return tuple(strides)


def offset_of(indices: Sequence[int], strides: Sequence[int]) -> int:
    """
    Return ``sum(indices[i] * strides[i])``.

    Raises
    ------
    DimensionMismatchError
        If ``indices`` and ``strides`` have different lengths.
    """
    if len(indices) != len(strides):
        raise DimensionMismatchError(
            f"Index dimensions ({len(indices)}) don't match array dimensions "
            f"({len(strides)})",
            expected=(len(strides),),
            actual=(len(indices),),
        )
    offset = 0
    for index, stride in zip(indices, strides):
        offset += index * stride
    return offset


def flat_to_indices(
    flat_index: int, shape: Sequence[int], strides: Optional[Sequence[int]] = None
) -> Shape:
    """
    Convert a flat position back into a multi-index.

    Parameters
    ----------
    flat_index : int
        Position in ``[0, size_of(shape))``.
    shape : Sequence[int]
        Array shape.
    strides : Optional[Sequence[int]]
        If given, decode by successive divide-and-mod with each stride (left
        to right). Otherwise decode by the trailing dimension products, which
        assumes a canonical row-major layout. Both agree for canonical
        strides.

    Returns
    -------
    tuple[int, ...]
        The multi-index.

    Raises
    ------
    IndexOutOfBoundsError
        If ``flat_index`` is outside the array.
    InvalidParameterError
        If ``strides`` contains a zero or has the wrong length.
    """
    size = size_of(shape)
    if not is_integer(flat_index):
        raise InvalidParameterError("flat_index", "integer", flat_index)
    if flat_index < 0 or flat_index >= size:
        raise IndexOutOfBoundsError(flat_index, size)

    if strides is not None:
        if len(strides) != len(shape):
            raise InvalidParameterError(
                "strides", f"sequence of length {len(shape)}", tuple(strides)
            )
        indices = []
        remaining = flat_index
        for stride in strides:
            if stride == 0:
                raise InvalidParameterError("strides", "non-zero strides", tuple(strides))
            indices.append(remaining // stride)
            remaining %= stride
        return tuple(indices)

    indices = [0] * len(shape)
    remaining = flat_index
    for i in range(len(shape) - 1, -1, -1):
        indices[i] = remaining % shape[i]
        remaining //= shape[i]
    return tuple(indices)


def is_canonical(shape: Sequence[int], strides: Sequence[int]) -> bool:
    """
    Return True when ``strides`` address ``shape`` in row-major order.

    Strides of length-1 dimensions never affect addressing and are ignored;
    zero-size shapes are trivially canonical.
    """
    if size_of(shape) == 0:
        return True
    expected = strides_for(shape)
    return all(
        dim == 1 or stride == want
        for dim, stride, want in zip(shape, strides, expected)
    )


def normalize_index(index: Any, dim_size: int, dimension: Optional[int] = None) -> int:
    """
    Resolve a possibly negative index against a dimension.

    Raises
    ------
    InvalidParameterError
        If ``index`` is not an integer.
    IndexOutOfBoundsError
        If the resolved index is outside ``[0, dim_size)``.
    """
    if not is_integer(index):
        name = "index" if dimension is None else f"index[{dimension}]"
        raise InvalidParameterError(name, "integer", index)
    resolved = index + dim_size if index < 0 else index
    if resolved < 0 or resolved >= dim_size:
        raise IndexOutOfBoundsError(int(index), dim_size, dimension)
    return int(resolved)


def normalize_axis(axis: Any, ndim: int, name: str = "axis") -> int:
    """
    Resolve a possibly negative axis against ``ndim``.

    Raises
    ------
    InvalidParameterError
        If ``axis`` is not an integer in ``[-ndim, ndim)``.
    """
    if not is_integer(axis) or not -ndim <= axis < ndim:
        raise InvalidParameterError(
            name, f"integer in [{-ndim}, {ndim})", axis
        )
    return int(axis) + ndim if axis < 0 else int(axis)


def resolve_range(
    start: Any, stop: Any, step: Any, dim_size: int
) -> tuple[int, int, int]:
    """
    Resolve a ``[start, stop, step]`` range against a dimension.

    Follows Python slice semantics: ``None`` selects the open end, negative
    bounds count from the end, and out-of-range bounds are clamped.

    Returns
    -------
    tuple[int, int, int]
        ``(start, length, step)`` where ``start`` is the first selected index
        and ``length`` the number of selected elements (possibly 0).

    Raises
    ------
    InvalidParameterError
        If a bound is not an integer/None, or ``step`` is zero.
    """
    for name, value in (("start", start), ("end", stop), ("step", step)):
        if value is not None and not is_integer(value):
            raise InvalidParameterError(name, "integer or None", value)
    if step == 0:
        raise InvalidParameterError("step", "non-zero integer", step)

    first, last, stride = slice(start, stop, step).indices(dim_size)
    length = len(range(first, last, stride))
    return first, length, stride


def resolve_reshape(new_shape: Any, size: int) -> Shape:
    """
    Validate a reshape target against an element count.

    A single ``-1`` entry is inferred from the remaining dimensions.

    Raises
    ------
    InvalidParameterError
        If more than one ``-1`` is present or an entry is not an integer >= -1.
    DimensionMismatchError
        If the target size differs from ``size``.
    """
    if is_integer(new_shape):
        new_shape = (new_shape,)
    try:
        dims = list(new_shape)
    except TypeError:
        raise InvalidParameterError("shape", "sequence of integers", new_shape) from None
    unknown = [i for i, d in enumerate(dims) if is_integer(d) and d == -1]
    if len(unknown) > 1:
        raise InvalidParameterError("shape", "at most one -1 entry", tuple(dims))
    if unknown:
        known = size_of(
            validate_shape([d for i, d in enumerate(dims) if i != unknown[0]])
        )
        if known == 0 or size % known != 0:
            raise DimensionMismatchError(
                f"Cannot reshape array of size {size} into shape {tuple(dims)}",
                expected=(size,),
                actual=tuple(dims),
                operation="reshape",
            )
        dims[unknown[0]] = size // known

    shape = validate_shape(dims)
    if size_of(shape) != size:
        raise DimensionMismatchError(
            f"Cannot reshape array of size {size} into shape {shape} "
            f"(size {size_of(shape)})",
            expected=(size,),
            actual=(size_of(shape),),
            operation="reshape",
        )
    return shape


def remove_axis(shape: Sequence[int], axis: int) -> Shape:
    """Drop ``axis`` from ``shape``; an emptied shape becomes ``(1,)``."""
    reduced = tuple(shape[:axis]) + tuple(shape[axis + 1 :])
    return reduced if reduced else (1,)
