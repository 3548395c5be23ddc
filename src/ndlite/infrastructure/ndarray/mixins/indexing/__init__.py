"""
Indexing mixin for NDArray plus slice specification helpers.

Public API
----------
- ``NDArrayMixinIndexing``
- ``parse_slice_string``, ``full_slice``, ``reverse_slice``, ``step_slice``,
  ``range_slice``
"""

from ._base import NDArrayMixinIndexing
from ._slices import (
    full_slice,
    parse_slice_string,
    range_slice,
    reverse_slice,
    step_slice,
)

__all__ = [
    NDArrayMixinIndexing.__name__,
    "full_slice",
    "parse_slice_string",
    "range_slice",
    "reverse_slice",
    "step_slice",
]
