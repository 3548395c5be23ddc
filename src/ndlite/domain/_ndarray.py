"""
N-dimensional array interface definitions.

This module defines the domain-level interface for strided array values using
structural typing. Engines (broadcasting, reductions) and mixins type against
:class:`INDArray` instead of the concrete NumPy-backed class, which keeps the
dependency direction infrastructure -> domain and avoids circular imports.

Notes
-----
The protocol mirrors the metadata every array carries (shape, strides,
offset, dtype, readonly) plus the element-access and view surface that the
engines and the lazy wrapper rely on.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Union, runtime_checkable

from .dtype._dtype import DType

Number = Union[int, float]


@runtime_checkable
class INDArray(Protocol):
    """
    Strided N-dimensional array interface.

    An ``INDArray`` is a view over a flat fixed-width buffer described by
    ``(shape, strides, offset)``. Several arrays may alias one buffer.
    """

    # ---------------------------------------------------------------------
    # Layout metadata
    # ---------------------------------------------------------------------
    @property
    def shape(self) -> tuple[int, ...]:
        """Per-dimension sizes."""
        ...

    @property
    def strides(self) -> tuple[int, ...]:
        """Per-dimension element skips in the underlying buffer."""
        ...

    @property
    def offset(self) -> int:
        """Buffer position of the element at index ``(0, ..., 0)``."""
        ...

    @property
    def dtype(self) -> DType:
        """Element kind of the underlying buffer."""
        ...

    @property
    def ndim(self) -> int:
        """Number of dimensions."""
        ...

    @property
    def size(self) -> int:
        """Total number of elements."""
        ...

    @property
    def readonly(self) -> bool:
        """Whether element writes are forbidden."""
        ...

    @property
    def buffer(self) -> Any:
        """Storage handle shared by every alias of the same data."""
        ...

    # ---------------------------------------------------------------------
    # Element access
    # ---------------------------------------------------------------------
    def get(self, *indices: int) -> Number:
        """Read one element; requires exactly ``ndim`` indices."""
        ...

    def set(self, *args: Number) -> None:
        """Write one element; the last positional argument is the value."""
        ...

    # ---------------------------------------------------------------------
    # Views
    # ---------------------------------------------------------------------
    def reshape(self, *shape: Any) -> "INDArray":
        """Return an array with a new shape and the same elements."""
        ...

    def transpose(self, *axes: Any) -> "INDArray":
        """Return a view with permuted axes."""
        ...

    def slice(self, *specs: Any) -> "INDArray":
        """Return a view selecting indices/ranges per dimension."""
        ...

    def view(self) -> "INDArray":
        """Return a new array object aliasing the same buffer and layout."""
        ...

    def shares_data_with(self, other: "INDArray") -> bool:
        """Return True if both arrays alias the same buffer."""
        ...

    # ---------------------------------------------------------------------
    # Host interop
    # ---------------------------------------------------------------------
    def to_numpy(self) -> Any:
        """Return a shaped NumPy copy of the elements."""
        ...

    def sum(self, axis: Optional[int] = None) -> Union["INDArray", Number]:
        """Sum over one axis, or over every element when ``axis`` is None."""
        ...

    def add(self, other: Union["INDArray", Number]) -> "INDArray":
        """Element-wise addition with broadcasting."""
        ...
