"""
Broadcasting engine.

Shape compatibility rules and the single element-wise binary dispatch path
shared by arithmetic and comparison operations.

Public API
----------
- ``can_broadcast``
- ``broadcast_shape``
- ``binary_op``
- ``Kernel``
- ``Operand`` / ``OperandKind``
"""

from ._broadcast import (
    Kernel,
    Operand,
    OperandKind,
    binary_op,
    broadcast_shape,
    can_broadcast,
    finalize,
    raise_first_failure,
)

__all__ = [
    "Kernel",
    "Operand",
    "OperandKind",
    "binary_op",
    "broadcast_shape",
    "can_broadcast",
    "finalize",
    "raise_first_failure",
]
