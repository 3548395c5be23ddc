"""
NumPy-backed NDArray implementation.

Public API
----------
- ``NDArray``: the concrete strided array
- ``StorageBuffer``: the shared element store behind arrays and their views
- factories: ``zeros``, ``ones``, ``full``, ``eye``, ``arange``,
  ``linspace``, ``from_nested``, ``random``
"""

from ._ndarray import NDArray
from ._storage import StorageBuffer
from ._factories import (
    arange,
    eye,
    from_nested,
    full,
    linspace,
    ones,
    random,
    zeros,
)

__all__ = [
    NDArray.__name__,
    StorageBuffer.__name__,
    "arange",
    "eye",
    "from_nested",
    "full",
    "linspace",
    "ones",
    "random",
    "zeros",
]
