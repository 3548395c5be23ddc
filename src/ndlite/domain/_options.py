"""
Construction options for ndlite arrays.

:class:`NDArrayOptions` is the single configuration record consulted by every
construction path (constructor, factories, copies). It is immutable; callers
derive variants with :meth:`NDArrayOptions.resolve`.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional

from ._errors import InvalidParameterError
from .dtype._dtype import DType


@dataclass(frozen=True)
class NDArrayOptions:
    """
    Per-array configuration.

    Parameters
    ----------
    dtype : DType, optional
        Element kind of the allocated buffer. Defaults to ``DType.FLOAT64``.
    readonly : bool, optional
        Whether element writes are forbidden. Defaults to False.
    """

    dtype: DType = DType.FLOAT64
    readonly: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "dtype", DType.parse(self.dtype))
        if not isinstance(self.readonly, bool):
            raise InvalidParameterError("readonly", "bool", self.readonly)

    @classmethod
    def resolve(
        cls,
        options: Optional["NDArrayOptions"] = None,
        *,
        dtype: Optional[Any] = None,
        readonly: Optional[bool] = None,
    ) -> "NDArrayOptions":
        """
        Merge explicit keyword overrides over an options record.

        Parameters
        ----------
        options : Optional[NDArrayOptions]
            Base record. Defaults are used when None.
        dtype : Optional[Any]
            Overrides ``options.dtype`` when given (anything ``DType.parse``
            accepts).
        readonly : Optional[bool]
            Overrides ``options.readonly`` when given.

        Returns
        -------
        NDArrayOptions
            The effective options.

        Raises
        ------
        InvalidParameterError
            If ``options`` is not an ``NDArrayOptions`` or an override is invalid.
        """
        if options is None:
            options = cls()
        elif not isinstance(options, cls):
            raise InvalidParameterError("options", "NDArrayOptions", options)

        changes = {}
        if dtype is not None:
            changes["dtype"] = DType.parse(dtype)
        if readonly is not None:
            changes["readonly"] = readonly
        return replace(options, **changes) if changes else options
