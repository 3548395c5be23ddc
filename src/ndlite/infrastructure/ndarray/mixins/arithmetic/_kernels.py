"""
Element-wise arithmetic kernels.

Each kernel evaluates over float64 operands; the broadcasting engine stores
the result in the left-hand array's dtype. Domain predicates flag the
elements that must fail with ``MathematicalError``.
"""

from __future__ import annotations

import numpy as np

from ....broadcasting._broadcast import Kernel


def _zero_divisor(left, right, result):
    return np.equal(right, 0)


def _undefined_power(left, right, result):
    # Negative base with a fractional exponent.
    return np.isnan(result) & np.isfinite(left) & np.isfinite(right)


ADD = Kernel("add", np.add)
SUBTRACT = Kernel("subtract", np.subtract)
MULTIPLY = Kernel("multiply", np.multiply)
DIVIDE = Kernel("divide", np.divide, _zero_divisor, "Division by zero")
POWER = Kernel(
    "power",
    np.power,
    _undefined_power,
    "Power is undefined for a negative base and fractional exponent",
)
# Truncated remainder: the sign follows the dividend.
MOD = Kernel("mod", np.fmod, _zero_divisor, "Modulo by zero")
# Floored quotient: rounds toward negative infinity.
FLOOR_DIVIDE = Kernel("floor_divide", np.floor_divide, _zero_divisor, "Division by zero")
MINIMUM = Kernel("minimum", np.minimum)
MAXIMUM = Kernel("maximum", np.maximum)
ARCTAN2 = Kernel("arctan2", np.arctan2)
