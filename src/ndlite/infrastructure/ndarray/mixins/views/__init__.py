"""
View and selection mixin for NDArray (reshape, transpose, slice, fancy and
boolean indexing).

Public API
----------
Only the mixin class is exported:

- ``NDArrayMixinViews``
"""

from ._base import NDArrayMixinViews

__all__ = [
    NDArrayMixinViews.__name__,
]
