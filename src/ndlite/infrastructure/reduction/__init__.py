"""
Axis reduction engine.

Public API
----------
- ``reduce_axis``: fold one axis into a smaller array
- ``reduce_all``: fold every element into a Python scalar
- ``axis_values`` / ``fold_lanes`` / ``lane_variance`` / ``check_ddof``:
  building blocks used by the array reduction methods
"""

from ._axis_reduce import (
    axis_values,
    check_ddof,
    fold_lanes,
    lane_variance,
    reduce_all,
    reduce_axis,
)

__all__ = [
    "axis_values",
    "check_ddof",
    "fold_lanes",
    "lane_variance",
    "reduce_all",
    "reduce_axis",
]
