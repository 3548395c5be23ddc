"""
Scalar argument validation shared by construction, writes and operators.
"""

from __future__ import annotations

import math
from numbers import Real
from typing import Any, Union

from ._errors import InvalidParameterError

Number = Union[int, float]


def is_number(value: Any) -> bool:
    """Return True for real numbers other than ``bool``."""
    return isinstance(value, Real) and not isinstance(value, bool)


def check_scalar(value: Any, name: str = "value") -> Number:
    """
    Return ``value`` if it is a finite real number.

    Integers too large for a double count as non-finite.

    Raises
    ------
    InvalidParameterError
        If ``value`` is not a real number, is a ``bool``, or is NaN/Infinity.
    """
    if not is_number(value):
        raise InvalidParameterError(name, "finite number", value)
    try:
        as_float = float(value)
    except OverflowError:
        raise InvalidParameterError.non_finite(name, value) from None
    if not math.isfinite(as_float):
        raise InvalidParameterError.non_finite(name, value)
    return value
