"""
Comparison mixin for NDArray producing uint8 0/1 masks.

Public API
----------
Only the mixin class is exported:

- ``NDArrayMixinComparison``
"""

from ._base import NDArrayMixinComparison

__all__ = [
    NDArrayMixinComparison.__name__,
]
