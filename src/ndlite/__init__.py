"""
ndlite: strided N-dimensional numeric arrays.

The package exposes a flat buffer + shape/strides/offset array type with
zero-copy views, broadcasting element-wise operations and axis reductions.

Example
-------
>>> from ndlite import NDArray
>>> a = NDArray([[1, 2, 3], [4, 5, 6]])
>>> a.transpose().get(2, 1)
6.0
>>> a.sum(axis=0).tolist()
[5.0, 7.0, 9.0]
"""

from .domain._errors import (
    DimensionMismatchError,
    EmptyArrayError,
    IndexOutOfBoundsError,
    InvalidParameterError,
    InvalidStateError,
    MathematicalError,
    NDArrayError,
)
from .domain._ndarray import INDArray
from .domain._options import NDArrayOptions
from .domain.dtype._dtype import DType
from .domain.layout._layout import (
    flat_to_indices,
    offset_of,
    size_of,
    strides_for,
)
from .infrastructure.broadcasting import binary_op, broadcast_shape, can_broadcast
from .infrastructure.lazy import LazyNDArray
from .infrastructure.ndarray import (
    NDArray,
    StorageBuffer,
    arange,
    eye,
    from_nested,
    full,
    linspace,
    ones,
    random,
    zeros,
)
from .infrastructure.ndarray.mixins.indexing import (
    full_slice,
    range_slice,
    reverse_slice,
    step_slice,
)
from .infrastructure.reduction import reduce_axis

__version__ = "0.1.0"

__all__ = [
    "DType",
    "DimensionMismatchError",
    "EmptyArrayError",
    "INDArray",
    "IndexOutOfBoundsError",
    "InvalidParameterError",
    "InvalidStateError",
    "LazyNDArray",
    "MathematicalError",
    "NDArray",
    "NDArrayError",
    "NDArrayOptions",
    "StorageBuffer",
    "arange",
    "binary_op",
    "broadcast_shape",
    "can_broadcast",
    "eye",
    "flat_to_indices",
    "from_nested",
    "full",
    "full_slice",
    "linspace",
    "offset_of",
    "ones",
    "random",
    "range_slice",
    "reduce_axis",
    "reverse_slice",
    "size_of",
    "step_slice",
    "strides_for",
    "zeros",
]
