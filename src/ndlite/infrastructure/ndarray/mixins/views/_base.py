"""
View and selection operations for NDArray.

This module declares :class:`NDArrayMixinViews`, which provides the
zero-copy view operations (``view``, ``reshape``, ``transpose``, ``slice``)
and the copying selections (``fancy_index``, ``boolean_index``).

View operations compute a new ``(shape, strides, offset)`` triple and hand the
*same* storage buffer to the result; they never read or write elements. The
only exception is ``reshape`` of a non-canonical array, which cannot be
expressed as a single stride pattern and therefore materializes a canonical
copy (with a ``UserWarning``).
"""

from __future__ import annotations

import warnings
from typing import Any, List, Sequence, Tuple

import numpy as np

from .....domain._errors import (
    DimensionMismatchError,
    InvalidParameterError,
)
from .....domain._ndarray import INDArray
from .....domain.layout._layout import (
    is_integer,
    normalize_axis,
    normalize_index,
    resolve_range,
    resolve_reshape,
    strides_for,
)
from ..indexing._slices import parse_slice_string


def _unpack(args: Tuple[Any, ...]) -> Any:
    """Accept both ``f(2, 3)`` and ``f((2, 3))`` call styles."""
    if len(args) == 1 and not is_integer(args[0]):
        return args[0]
    return args


def _range_spec(spec: Any, dim: int) -> Tuple[Any, Any, Any]:
    if isinstance(spec, slice):
        return spec.start, spec.stop, spec.step
    if isinstance(spec, str):
        return parse_slice_string(spec)
    if isinstance(spec, (list, tuple)) and len(spec) in (2, 3):
        return tuple(spec) + (None,) * (3 - len(spec))
    raise InvalidParameterError(
        f"specs[{dim}]",
        "index, slice, 'start:stop:step' string or [start, end(, step)]",
        spec,
    )


class NDArrayMixinViews:
    """
    Mixin implementing views and selections.

    Notes
    -----
    - ``view``/``reshape``/``transpose``/``slice`` share the source buffer and
      inherit its ``readonly`` flag.
    - ``fancy_index``/``boolean_index`` return fresh 1-D arrays (their results
      are not one affine stride pattern); they also inherit ``readonly``.
    """

    __slots__ = ()

    def view(self: INDArray) -> "INDArray":
        """Return a new array object aliasing the same buffer and layout."""
        return type(self)._from_parts(
            self._buffer, self._shape, self._strides, self._offset, self._readonly
        )

    def shares_data_with(self: INDArray, other: Any) -> bool:
        """Return True if ``other`` aliases this array's buffer."""
        return getattr(other, "buffer", None) is self._buffer

    # ----------------------------
    # Reshape
    # ----------------------------
    def reshape(self: INDArray, *shape: Any) -> "INDArray":
        """
        Return an array with a new shape and the same elements.

        Parameters
        ----------
        *shape : int or Sequence[int]
            Target shape, as separate integers or one sequence. At most one
            entry may be ``-1`` (inferred).

        Returns
        -------
        INDArray
            A view sharing this buffer when the current layout is canonical;
            otherwise a canonical copy (a ``UserWarning`` reports that the
            result no longer aliases the source).

        Raises
        ------
        DimensionMismatchError
            If the target size differs from ``self.size``.
        InvalidParameterError
            If the target is malformed.
        """
        new_shape = resolve_reshape(_unpack(shape), self.size)
        source = self
        if not self.is_canonical():
            warnings.warn(
                f"reshape of a non-canonical view (shape={self._shape}, "
                f"strides={self._strides}) returns a copy that does not share "
                "data with its source",
                UserWarning,
                stacklevel=2,
            )
            source = self.copy()
        return type(self)._from_parts(
            source._buffer,
            new_shape,
            strides_for(new_shape),
            source._offset,
            self._readonly,
        )

    # ----------------------------
    # Transpose
    # ----------------------------
    def transpose(self: INDArray, *axes: Any) -> "INDArray":
        """
        Return a view with permuted axes.

        With no ``axes`` the axis order is reversed. Otherwise ``axes`` must be
        a permutation of ``0..ndim-1`` (negative entries allowed).

        Raises
        ------
        DimensionMismatchError
            If ``len(axes) != ndim``.
        InvalidParameterError
            If an axis is invalid or repeated.
        """
        if len(axes) == 1 and (axes[0] is None or not is_integer(axes[0])):
            axes = () if axes[0] is None else tuple(axes[0])

        if not axes:
            order = tuple(range(self.ndim - 1, -1, -1))
        else:
            if len(axes) != self.ndim:
                raise DimensionMismatchError(
                    f"Expected {self.ndim} axes, got {len(axes)}",
                    expected=(self.ndim,),
                    actual=(len(axes),),
                    operation="transpose",
                )
            order = tuple(
                normalize_axis(ax, self.ndim, f"axes[{i}]")
                for i, ax in enumerate(axes)
            )
            if len(set(order)) != len(order):
                raise InvalidParameterError(
                    "axes", f"permutation of 0..{self.ndim - 1}", tuple(axes)
                )

        return type(self)._from_parts(
            self._buffer,
            tuple(self._shape[i] for i in order),
            tuple(self._strides[i] for i in order),
            self._offset,
            self._readonly,
        )

    @property
    def T(self: INDArray) -> "INDArray":
        """Alias of ``transpose()``."""
        return self.transpose()

    # ----------------------------
    # Slice
    # ----------------------------
    def slice(self: INDArray, *specs: Any) -> "INDArray":
        """
        Return a view selecting an index or a range per leading dimension.

        Each spec is one of:

        - an integer: selects that index and removes the dimension;
        - a ``slice`` object, a ``"start:stop:step"`` string, or a
          ``[start, end]`` / ``[start, end, step]`` pair/triple: keeps the
          dimension with Python slice semantics (negative bounds count from
          the end, out-of-range bounds are clamped, ``None`` is open);
        - ``None``: keeps the whole dimension.

        Dimensions without a spec are kept whole.

        Raises
        ------
        DimensionMismatchError
            If more specs than dimensions are given.
        IndexOutOfBoundsError
            If an integer spec is out of range.
        InvalidParameterError
            If a spec is malformed or a step is zero.
        """
        if len(specs) > self.ndim:
            raise DimensionMismatchError(
                f"Too many indices for array: array is {self.ndim}-dimensional, "
                f"but {len(specs)} were indexed",
                expected=(self.ndim,),
                actual=(len(specs),),
                operation="slice",
            )

        offset = self._offset
        shape: List[int] = []
        strides: List[int] = []
        for dim, (size, stride) in enumerate(zip(self._shape, self._strides)):
            spec = specs[dim] if dim < len(specs) else None
            if spec is None:
                shape.append(size)
                strides.append(stride)
            elif is_integer(spec):
                offset += normalize_index(spec, size, dim) * stride
            else:
                start, length, step = resolve_range(*_range_spec(spec, dim), size)
                if length > 0:
                    offset += start * stride
                shape.append(length)
                strides.append(stride * step)

        return type(self)._from_parts(
            self._buffer, tuple(shape), tuple(strides), offset, self._readonly
        )

    # ----------------------------
    # Copying selections
    # ----------------------------
    def _fancy_offsets(self: INDArray, index_arrays: Sequence[Any]) -> np.ndarray:
        if not index_arrays:
            raise InvalidParameterError(
                "index_arrays", "at least one integer index array", ()
            )
        if len(index_arrays) > self.ndim:
            raise DimensionMismatchError(
                f"Too many index arrays for a {self.ndim}-dimensional array",
                expected=(self.ndim,),
                actual=(len(index_arrays),),
                operation="fancy_index",
            )

        columns = []
        scalars = {}
        for dim, indices in enumerate(index_arrays):
            if is_integer(indices):
                scalars[dim] = normalize_index(indices, self._shape[dim], dim)
                columns.append(None)
                continue
            if isinstance(indices, INDArray):
                indices = indices.tolist()
            if isinstance(indices, np.ndarray):
                indices = indices.reshape(-1).tolist()
            if not isinstance(indices, (list, tuple)):
                raise InvalidParameterError(
                    f"index_arrays[{dim}]", "integer or sequence of integers", indices
                )
            columns.append(
                [normalize_index(i, self._shape[dim], dim) for i in indices]
            )

        lengths = [len(column) for column in columns if column is not None]
        length = lengths[0] if lengths else 1
        for column in columns:
            if column is not None and len(column) != length:
                raise DimensionMismatchError(
                    "All index arrays must have the same length",
                    expected=(length,),
                    actual=(len(column),),
                    operation="fancy_index",
                )
        # Integer entries repeat for every position.
        for dim, index in scalars.items():
            columns[dim] = [index] * length
        # Missing trailing dimensions select index 0.
        for dim in range(len(columns), self.ndim):
            columns.append([normalize_index(0, self._shape[dim], dim)] * length)

        offsets = np.full(length, self._offset, dtype=np.int64)
        for column, stride in zip(columns, self._strides):
            offsets += np.asarray(column, dtype=np.int64) * stride
        return offsets

    def fancy_index(self: INDArray, *index_arrays: Any) -> "INDArray":
        """
        Gather elements addressed by per-dimension integer index arrays.

        ``a.fancy_index([0, 1], [2, 0])`` selects ``a[0, 2]`` and ``a[1, 0]``.
        A plain integer entry is repeated for every position, so
        ``a.fancy_index(0, [1, 2])`` (or ``a[0, [1, 2]]``) selects ``a[0, 1]``
        and ``a[0, 2]``. Dimensions without an index array use index 0.

        Returns
        -------
        INDArray
            A fresh 1-D array with one element per index position.

        Raises
        ------
        DimensionMismatchError
            If the index arrays differ in length or outnumber the dimensions.
        IndexOutOfBoundsError
            If an index is out of range for its dimension.
        """
        offsets = self._fancy_offsets(index_arrays)
        return type(self)._from_values(
            self._buffer.read(offsets), (len(offsets),), self.dtype, self._readonly
        )

    def _mask_offsets(self: INDArray, mask: Any) -> np.ndarray:
        if isinstance(mask, INDArray):
            flags = mask._values()
        else:
            flags = np.asarray(mask)
            if flags.dtype.kind not in "biu":
                raise InvalidParameterError(
                    "mask", "sequence of booleans", mask
                )
        flags = flags.reshape(-1) != 0
        if flags.shape[0] != self.size:
            raise DimensionMismatchError(
                "Boolean mask length must match array size",
                expected=(self.size,),
                actual=(flags.shape[0],),
                operation="boolean_index",
            )
        return self._offsets()[flags]

    def boolean_index(self: INDArray, mask: Any) -> "INDArray":
        """
        Select the elements where ``mask`` is true, in row-major order.

        ``mask`` may be a boolean sequence, a NumPy array, or an array whose
        non-zero elements mark the selection (as produced by comparisons).

        Returns
        -------
        INDArray
            A fresh 1-D array; zero matches give a valid zero-length array.

        Raises
        ------
        DimensionMismatchError
            If the mask length differs from ``self.size``.
        """
        offsets = self._mask_offsets(mask)
        return type(self)._from_values(
            self._buffer.read(offsets), (len(offsets),), self.dtype, self._readonly
        )

