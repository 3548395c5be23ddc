"""
Unary element-wise math mixin for NDArray.

Public API
----------
Only the mixin class is exported:

- ``NDArrayMixinUnary``
"""

from ._base import NDArrayMixinUnary

__all__ = [
    NDArrayMixinUnary.__name__,
]
