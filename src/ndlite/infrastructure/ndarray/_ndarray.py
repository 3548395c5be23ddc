"""
Concrete strided N-dimensional array (NumPy CPU backend).

:class:`NDArray` stores layout metadata (shape, strides, offset) next to a
reference to a shared :class:`~._storage.StorageBuffer`. The class body here
covers construction, metadata, element access and copies; views, indexing,
arithmetic, comparisons, unary math and reductions come from the mixins
aggregated in :mod:`.mixins`.

Construction
------------
``NDArray(data, shape=None, options=None, *, dtype=None, readonly=None)``
accepts:

- nested lists/tuples of finite numbers (flattened depth-first; the shape is
  inferred when not given);
- a single finite number (0-d array, shape ``()``);
- a fixed-width buffer (``numpy.ndarray``, ``array.array``, ``memoryview``)
  or another ``NDArray``; the values are copied, never aliased.

When ``shape`` is given, its size must match the number of supplied values
exactly.
"""

from __future__ import annotations

import array as _array
from numbers import Real
from typing import Any, Optional, Sequence, Tuple, Union

import numpy as np
from typing_extensions import Self

from ...domain._errors import (
    DimensionMismatchError,
    InvalidParameterError,
    InvalidStateError,
)
from ...domain._options import NDArrayOptions
from ...domain._validation import check_scalar, is_number
from ...domain.dtype._dtype import DType
from ...domain.layout._layout import (
    Shape,
    Strides,
    is_canonical,
    normalize_index,
    size_of,
    strides_for,
    validate_shape,
)
from .._strided import broadcast_offsets, strided_offsets
from ..broadcasting._broadcast import broadcast_shape
from ..lazy._lazy import LazyNDArray
from ._nested import flatten_nested
from ._storage import StorageBuffer
from .mixins import _NDArrayAllMixin

Number = Union[int, float]

_BUFFER_TYPES = (np.ndarray, _array.array, memoryview)


def _buffer_values(data: Any) -> Tuple[np.ndarray, Shape]:
    arr = np.asarray(data)
    if arr.dtype.kind not in "iuf":
        raise InvalidParameterError(
            "data", "buffer of integers or floats", str(arr.dtype)
        )
    finite = np.isfinite(arr.reshape(-1))
    if not finite.all():
        i = int(np.argmin(finite))
        raise InvalidParameterError.non_finite(
            f"data[{i}]", arr.reshape(-1)[i].item()
        )
    return arr.reshape(-1), tuple(int(d) for d in arr.shape)


class NDArray(_NDArrayAllMixin):
    """
    Strided view over a flat fixed-width buffer.

    Parameters
    ----------
    data : Any
        Nested numbers, a single number, a numeric buffer, or another array.
    shape : Optional[Sequence[int]], optional
        Declared shape. Inferred from ``data`` when omitted.
    options : Optional[NDArrayOptions], optional
        Construction options; ``dtype``/``readonly`` keywords override them.

    Raises
    ------
    DimensionMismatchError
        If nested input is ragged, or the value count differs from the size
        of ``shape``.
    InvalidParameterError
        If a value is not a finite number, or an option/shape is invalid.

    Notes
    -----
    Several arrays may share one buffer (see :meth:`view`, :meth:`reshape`,
    :meth:`transpose`, :meth:`slice`). A write through any of them is visible
    through all; use :meth:`copy` for isolation.
    """

    __slots__ = ("_buffer", "_shape", "_strides", "_offset", "_readonly")

    # NumPy scalars on the left defer to the reflected operators.
    __array_ufunc__ = None

    def __init__(
        self,
        data: Any,
        shape: Optional[Sequence[int]] = None,
        options: Optional[NDArrayOptions] = None,
        *,
        dtype: Any = None,
        readonly: Optional[bool] = None,
    ) -> None:
        opts = NDArrayOptions.resolve(options, dtype=dtype, readonly=readonly)

        if isinstance(data, NDArray):
            values, source_shape = data._values(), data.shape
        elif isinstance(data, _BUFFER_TYPES):
            values, source_shape = _buffer_values(data)
        elif isinstance(data, (list, tuple, Real)):
            values, source_shape = flatten_nested(data)
        else:
            raise InvalidParameterError(
                "data", "nested sequence, number or numeric buffer", type(data).__name__
            )

        if shape is None:
            shape = source_shape
        else:
            shape = validate_shape(shape)
            if size_of(shape) != len(values):
                raise DimensionMismatchError(
                    f"Data size {len(values)} does not match shape size "
                    f"{size_of(shape)}",
                    expected=(size_of(shape),),
                    actual=(len(values),),
                    operation="NDArray",
                )

        self._buffer = StorageBuffer.from_values(values, opts.dtype)
        self._shape = tuple(shape)
        self._strides = strides_for(shape)
        self._offset = 0
        self._readonly = opts.readonly

    # ---------------------------------------------------------------------
    # Internal constructors
    # ---------------------------------------------------------------------
    @classmethod
    def _from_parts(
        cls,
        buffer: StorageBuffer,
        shape: Shape,
        strides: Strides,
        offset: int,
        readonly: bool,
    ) -> Self:
        """Build an array over an existing buffer without touching its contents."""
        obj = cls.__new__(cls)
        obj._buffer = buffer
        obj._shape = tuple(shape)
        obj._strides = tuple(strides)
        obj._offset = int(offset)
        obj._readonly = bool(readonly)
        return obj

    @classmethod
    def _from_values(
        cls, values: Any, shape: Shape, dtype: DType, readonly: bool = False
    ) -> Self:
        """Allocate a canonical array holding ``values`` (already validated)."""
        buffer = StorageBuffer.from_values(values, dtype)
        return cls._from_parts(buffer, shape, strides_for(shape), 0, readonly)

    # ---------------------------------------------------------------------
    # Metadata
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> Shape:
        return self._shape

    @property
    def strides(self) -> Strides:
        return self._strides

    @property
    def offset(self) -> int:
        return self._offset

    @property
    def dtype(self) -> DType:
        return self._buffer.dtype

    @property
    def ndim(self) -> int:
        return len(self._shape)

    @property
    def size(self) -> int:
        return size_of(self._shape)

    @property
    def readonly(self) -> bool:
        return self._readonly

    @property
    def buffer(self) -> StorageBuffer:
        """The storage shared by this array and all of its views."""
        return self._buffer

    @property
    def itemsize(self) -> int:
        return self.dtype.itemsize

    @property
    def nbytes(self) -> int:
        """Bytes spanned by the logical elements (not the whole buffer)."""
        return self.size * self.itemsize

    def is_canonical(self) -> bool:
        """Return True if the strides are row-major for the current shape."""
        return is_canonical(self._shape, self._strides)

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def _locate(self, indices: Sequence[Any]) -> int:
        if len(indices) != self.ndim:
            raise DimensionMismatchError(
                f"Expected {self.ndim} indices, got {len(indices)}",
                expected=(self.ndim,),
                actual=(len(indices),),
                operation="index",
            )
        position = self._offset
        for dim, (index, size, stride) in enumerate(
            zip(indices, self._shape, self._strides)
        ):
            position += normalize_index(index, size, dim) * stride
        return position

    def get(self, *indices: int) -> Number:
        """
        Read one element.

        Parameters
        ----------
        *indices : int
            Exactly ``ndim`` indices; negative values count from the end.

        Returns
        -------
        Number
            ``int`` for integer dtypes, ``float`` otherwise.

        Raises
        ------
        DimensionMismatchError
            If the number of indices differs from ``ndim``.
        IndexOutOfBoundsError
            If an index is outside its dimension.
        """
        return self._buffer.read_one(self._locate(indices))

    def set(self, *args: Number) -> None:
        """
        Write one element: ``a.set(i, j, value)``.

        Raises
        ------
        InvalidStateError
            If the array is readonly (checked first; nothing is written).
        InvalidParameterError
            If the value is not a finite number.
        DimensionMismatchError, IndexOutOfBoundsError
            On invalid indices, as for :meth:`get`.
        """
        if not args:
            raise InvalidParameterError("value", "indices followed by a value", args)
        self._check_writable("set")
        value = check_scalar(args[-1])
        self._buffer.write_one(self._locate(args[:-1]), value)

    def _check_writable(self, operation: str) -> None:
        if self._readonly:
            raise InvalidStateError("Cannot modify a readonly array", operation)

    # ---------------------------------------------------------------------
    # Bulk access
    # ---------------------------------------------------------------------
    def _offsets(self) -> np.ndarray:
        """Buffer offsets of the logical elements in row-major order."""
        return strided_offsets(self._shape, self._strides, self._offset)

    def _values(self, out_shape: Optional[Sequence[int]] = None) -> np.ndarray:
        """
        Gather the logical elements in row-major order (buffer dtype).

        With ``out_shape``, the elements are read through the broadcast of
        this array onto that shape.
        """
        if out_shape is None or tuple(out_shape) == self._shape:
            offsets = self._offsets()
        else:
            offsets = broadcast_offsets(
                self._shape, self._strides, self._offset, out_shape
            )
        return self._buffer.read(offsets)

    @property
    def data(self) -> np.ndarray:
        """Fresh flat NumPy copy of the logical elements (row-major)."""
        return self._values()

    def to_numpy(self) -> np.ndarray:
        """Return a shaped NumPy copy of the elements."""
        return self._values().reshape(self._shape)

    def __array__(self, dtype: Any = None, copy: Any = None) -> np.ndarray:
        arr = self.to_numpy()
        return arr if dtype is None else arr.astype(dtype)

    def tolist(self) -> Any:
        """Return the elements as (nested) Python lists of Python scalars."""
        return self.to_numpy().tolist()

    def item(self) -> Number:
        """Return the only element of a size-1 array as a Python scalar."""
        if self.size != 1:
            raise InvalidParameterError(
                "array", "exactly one element", f"size {self.size}"
            )
        return self.dtype.python_type(self._values()[0])

    def __len__(self) -> int:
        if not self._shape:
            raise TypeError("len() of a 0-d array")
        return self._shape[0]

    def __repr__(self) -> str:
        body = np.array2string(self.to_numpy(), separator=", ", threshold=64)
        flags = ", readonly=True" if self._readonly else ""
        return f"NDArray({body}, shape={self._shape}, dtype={self.dtype}{flags})"

    # ---------------------------------------------------------------------
    # Copies and bulk writes
    # ---------------------------------------------------------------------
    def copy(self) -> Self:
        """Return a writable, canonical array owning a copy of the elements."""
        return type(self)._from_values(self._values(), self._shape, self.dtype)

    def compact(self) -> Self:
        """Return ``self`` when canonical, otherwise a canonical copy."""
        return self if self.is_canonical() else self.copy()

    def flatten(self) -> Self:
        """Return a 1-D copy of the elements in row-major order."""
        return type(self)._from_values(self._values(), (self.size,), self.dtype)

    def fill(self, value: Number) -> Self:
        """Write ``value`` to every element through this view; returns ``self``."""
        self._check_writable("fill")
        value = check_scalar(value)
        self._buffer.write(self._offsets(), value)
        return self

    def assign(self, value: Any) -> Self:
        """
        Write a scalar or a broadcast-compatible array through this view.

        Source values are gathered before anything is written, so assigning
        from an overlapping view is safe. Returns ``self``.

        Raises
        ------
        InvalidStateError
            If the array is readonly.
        DimensionMismatchError
            If ``value`` does not broadcast to this array's shape.
        """
        self._check_writable("assign")
        if is_number(value):
            return self.fill(value)
        if not isinstance(value, NDArray):
            value = type(self)(value, dtype=self.dtype)

        if broadcast_shape(self._shape, value.shape, "assign") != self._shape:
            raise DimensionMismatchError(
                "Value cannot be broadcast to the target shape",
                expected=self._shape,
                actual=value.shape,
                operation="assign",
            )
        self._buffer.write(
            self._offsets(),
            value._values(self._shape),
        )
        return self

    # ---------------------------------------------------------------------
    # Deferred evaluation
    # ---------------------------------------------------------------------
    def lazy(self) -> LazyNDArray:
        """Start a deferred operation chain rooted at this array."""
        return LazyNDArray(self)
