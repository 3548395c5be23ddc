"""
Reduction mixin for NDArray (sum, mean, min, max, var, std).

Public API
----------
Only the mixin class is exported:

- ``NDArrayMixinReduction``
"""

from ._base import NDArrayMixinReduction

__all__ = [
    NDArrayMixinReduction.__name__,
]
