"""
Deferred evaluation with operation fusion.

Public API
----------
- ``LazyNDArray``
- ``LazyOp``
- ``fuse``
"""

from ._lazy import LazyNDArray, LazyOp, fuse

__all__ = [LazyNDArray.__name__, LazyOp.__name__, "fuse"]
