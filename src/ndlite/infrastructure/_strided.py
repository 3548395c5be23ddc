"""
Vectorized stride arithmetic over whole arrays.

The domain layout helpers decode one index at a time. Engines that touch every
element (broadcasting, reductions, copies) instead need the buffer offset of
*every* logical element at once; this module computes those offsets with NumPy
using the same divide-and-mod decoding, one dimension at a time.
"""

from __future__ import annotations

from typing import Sequence

import numpy as np

from ..domain.layout._layout import is_canonical, size_of, strides_for


def broadcast_offsets(
    shape: Sequence[int],
    strides: Sequence[int],
    offset: int,
    out_shape: Sequence[int],
) -> np.ndarray:
    """
    Buffer offsets of a source array read through a broadcast result shape.

    For every flat position ``i`` of ``out_shape`` (row-major), the result
    holds the buffer offset of the source element that position maps to:

    - the source shape is right-aligned against ``out_shape``;
    - dimensions where the source has size 1 are pinned to coordinate 0;
    - other dimensions pass the result coordinate through.

    Parameters
    ----------
    shape, strides, offset
        Source layout.
    out_shape : Sequence[int]
        Result shape; must be a valid broadcast target for ``shape``.

    Returns
    -------
    np.ndarray
        ``int64`` array of length ``size_of(out_shape)``.
    """
    n = size_of(out_shape)
    if n == 0:
        return np.zeros(0, dtype=np.int64)

    out_strides = strides_for(out_shape)
    flat = np.arange(n, dtype=np.int64)
    result = np.full(n, offset, dtype=np.int64)
    lead = len(out_shape) - len(shape)
    for i, (dim, stride) in enumerate(zip(shape, strides)):
        if dim == 1:
            continue
        axis = i + lead
        coord = (flat // out_strides[axis]) % out_shape[axis]
        result += coord * stride
    return result


def strided_offsets(
    shape: Sequence[int], strides: Sequence[int], offset: int
) -> np.ndarray:
    """
    Buffer offsets of every element of a strided array, in row-major order.

    Canonical layouts take the linear path ``offset .. offset + size``.
    """
    if is_canonical(shape, strides):
        return np.arange(offset, offset + size_of(shape), dtype=np.int64)
    return broadcast_offsets(shape, strides, offset, shape)
