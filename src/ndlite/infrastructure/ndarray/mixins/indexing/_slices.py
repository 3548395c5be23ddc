"""
Slice specification helpers.

Range specs are plain Python ``slice`` objects; the helpers below build the
common ones and parse the ``"start:stop:step"`` string form.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from .....domain._errors import InvalidParameterError
from .....domain.layout._layout import is_integer

_INT = re.compile(r"^[+-]?\d+$")


def parse_slice_string(text: str) -> Tuple[Optional[int], Optional[int], Optional[int]]:
    """
    Parse ``"start:stop"`` or ``"start:stop:step"`` (each part optional).

    Examples
    --------
    ``"1:5"`` -> ``(1, 5, None)``; ``"::2"`` -> ``(None, None, 2)``;
    ``"::-1"`` -> ``(None, None, -1)``.

    Raises
    ------
    InvalidParameterError
        If the string has no colon, more than two colons, a non-integer part,
        or a zero step.
    """
    parts = text.split(":")
    if len(parts) not in (2, 3):
        raise InvalidParameterError(
            "slice", "'start:stop' or 'start:stop:step'", text
        )

    bounds = []
    for part in parts:
        part = part.strip()
        if not part:
            bounds.append(None)
        elif _INT.match(part):
            bounds.append(int(part))
        else:
            raise InvalidParameterError("slice", "integer bounds", text)
    while len(bounds) < 3:
        bounds.append(None)

    if bounds[2] == 0:
        raise InvalidParameterError("step", "non-zero integer", 0)
    return bounds[0], bounds[1], bounds[2]


def full_slice() -> slice:
    """Select a whole dimension (``":"``)."""
    return slice(None)


def reverse_slice() -> slice:
    """Select a whole dimension in reverse (``"::-1"``)."""
    return slice(None, None, -1)


def step_slice(step: int) -> slice:
    """Select every ``step``-th element (``"::step"``)."""
    if not is_integer(step) or step == 0:
        raise InvalidParameterError("step", "non-zero integer", step)
    return slice(None, None, step)


def range_slice(start: int, stop: int, step: Optional[int] = None) -> slice:
    """Select ``[start, stop)`` with an optional step."""
    if step is not None and (not is_integer(step) or step == 0):
        raise InvalidParameterError("step", "non-zero integer", step)
    return slice(start, stop, step)
