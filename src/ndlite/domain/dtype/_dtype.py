"""
Element data type descriptors.

This module defines :class:`DType`, the closed set of fixed-width numeric kinds
an ndlite array can store. The descriptor is backend-agnostic: it knows the
width, signedness and value range of each kind, but does not import NumPy.
The infrastructure layer maps each kind onto a concrete NumPy dtype.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Type, Union

from .._errors import InvalidParameterError


class DType(Enum):
    """
    Enumeration of supported element kinds.

    Attributes
    ----------
    FLOAT64, FLOAT32 : DType
        IEEE-754 floating point, 64 and 32 bits.
    INT32, INT16, INT8 : DType
        Two's complement signed integers.
    UINT32, UINT16, UINT8 : DType
        Unsigned integers.

    Notes
    -----
    The enum value is the canonical lowercase name (``"float64"``), which is
    also the string accepted by :meth:`parse` and shown in ``repr(array)``.
    """

    FLOAT64 = "float64"
    FLOAT32 = "float32"
    INT32 = "int32"
    INT16 = "int16"
    INT8 = "int8"
    UINT32 = "uint32"
    UINT16 = "uint16"
    UINT8 = "uint8"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def parse(cls, value: Union["DType", str, Any]) -> "DType":
        """
        Normalize a user-facing dtype specification.

        Parameters
        ----------
        value : Union[DType, str, Any]
            A :class:`DType`, its string name (case-insensitive), or any object
            exposing a matching ``.name`` attribute (such as ``numpy.dtype``).

        Returns
        -------
        DType
            The matching descriptor.

        Raises
        ------
        InvalidParameterError
            If the specification does not name a supported kind.
        """
        if isinstance(value, cls):
            return value
        name = value if isinstance(value, str) else getattr(value, "name", None)
        if isinstance(name, str):
            try:
                return cls(name.strip().lower())
            except ValueError:
                pass
        raise InvalidParameterError(
            "dtype", "one of " + ", ".join(m.value for m in cls), value
        )

    @property
    def bits(self) -> int:
        return int(self.value.lstrip("uintfloat"))

    @property
    def itemsize(self) -> int:
        return self.bits // 8

    @property
    def is_integer(self) -> bool:
        return not self.value.startswith("float")

    @property
    def is_signed(self) -> bool:
        return not self.value.startswith("uint")

    @property
    def min_value(self) -> float:
        """Smallest representable value (finite lower bound for floats)."""
        if not self.is_integer:
            return -self.max_value
        return -(2 ** (self.bits - 1)) if self.is_signed else 0

    @property
    def max_value(self) -> float:
        """Largest representable value (finite upper bound for floats)."""
        if self is DType.FLOAT64:
            return 1.7976931348623157e308
        if self is DType.FLOAT32:
            return 3.4028234663852886e38
        return 2 ** (self.bits - 1) - 1 if self.is_signed else 2**self.bits - 1

    @property
    def python_type(self) -> Type[Union[int, float]]:
        """Python scalar type returned by element reads."""
        return int if self.is_integer else float

    def floating_result(self) -> "DType":
        """
        Return the dtype used for results that are inherently fractional.

        Integer kinds promote to ``float64``; floating kinds keep their width.
        Used by ``mean``/``var``/``std`` and by ``sqrt``/``exp``/``log``.
        """
        return DType.FLOAT64 if self.is_integer else self
