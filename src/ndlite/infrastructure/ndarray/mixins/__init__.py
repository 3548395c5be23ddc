from .views import NDArrayMixinViews
from .indexing import NDArrayMixinIndexing
from .arithmetic import NDArrayMixinArithmetic
from .comparison import NDArrayMixinComparison
from .unary import NDArrayMixinUnary
from .reduction import NDArrayMixinReduction


class _NDArrayAllMixin(
    NDArrayMixinViews,
    NDArrayMixinIndexing,
    NDArrayMixinArithmetic,
    NDArrayMixinComparison,
    NDArrayMixinUnary,
    NDArrayMixinReduction,
):
    __slots__ = ()


__all__ = [_NDArrayAllMixin.__name__]
