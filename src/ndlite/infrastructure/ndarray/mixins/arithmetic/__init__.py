"""
Arithmetic mixin for NDArray.

Named operations and Python operators (``+ - * / ** %`` and their reflected
forms) dispatched through the broadcasting engine with the kernels defined in
``_kernels``.

Public API
----------
Only the mixin class is exported:

- ``NDArrayMixinArithmetic``
"""

from ._base import NDArrayMixinArithmetic

__all__ = [
    NDArrayMixinArithmetic.__name__,
]
