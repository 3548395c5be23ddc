"""
Unit tests for the element-wise function library on NDArray.

Covers the extra binary operations (``floor_divide``, ``minimum``,
``maximum``, ``arctan2``), the logical connectives and the unary
trigonometric, hyperbolic, logarithmic and rounding functions. Values are
checked against NumPy on each function's domain; domain violations are
checked for the index they report.
"""

import unittest

import numpy as np

from src.ndlite.domain._errors import DimensionMismatchError, MathematicalError
from src.ndlite.domain.dtype._dtype import DType
from src.ndlite.infrastructure.ndarray._ndarray import NDArray


class TestBinaryFunctions(unittest.TestCase):
    def setUp(self) -> None:
        self.x_np = np.array([[-7.0, 5.5, 3.0], [2.0, -0.5, 9.0]])
        self.y_np = np.array([[2.0, -2.0, 4.0], [2.0, 3.0, -1.5]])
        self.x = NDArray(self.x_np)
        self.y = NDArray(self.y_np)

    def test_named_functions_match_numpy(self) -> None:
        cases = [
            ("floor_divide", np.floor_divide),
            ("minimum", np.minimum),
            ("maximum", np.maximum),
            ("arctan2", np.arctan2),
        ]
        for name, ref in cases:
            with self.subTest(op=name):
                out = getattr(self.x, name)(self.y)
                np.testing.assert_allclose(out.to_numpy(), ref(self.x_np, self.y_np))

    def test_floor_divide_rounds_toward_negative_infinity(self) -> None:
        a = NDArray([-7, 7, -8], dtype="int32")
        out = a.floor_divide(2)
        self.assertIs(out.dtype, DType.INT32)
        self.assertEqual(out.tolist(), [-4, 3, -4])
        self.assertEqual((a // 3).tolist(), [-3, 2, -3])
        self.assertEqual((7 // NDArray([2.0, -2.0])).tolist(), [3.0, -4.0])

    def test_floor_divide_by_zero(self) -> None:
        with self.assertRaises(MathematicalError) as ctx:
            NDArray([1, 2, 3]).floor_divide(NDArray([1, 0, 1]))
        self.assertEqual(ctx.exception.operation, "floor_divide")
        self.assertEqual(ctx.exception.context["index"], 1)
        with self.assertRaises(MathematicalError):
            1 // NDArray([0.0])

    def test_minimum_maximum_broadcast(self) -> None:
        row = NDArray([0.0, 4.0, 5.0])
        np.testing.assert_array_equal(
            self.x.minimum(row).to_numpy(), np.minimum(self.x_np, [0.0, 4.0, 5.0])
        )
        np.testing.assert_array_equal(
            self.x.maximum(1).to_numpy(), np.maximum(self.x_np, 1)
        )
        with self.assertRaises(DimensionMismatchError):
            self.x.maximum(NDArray([1, 2]))

    def test_arctan2_promotes_integer_sources(self) -> None:
        out = NDArray([1, -1], dtype="int16").arctan2(NDArray([0, 0]))
        self.assertIs(out.dtype, DType.FLOAT64)
        np.testing.assert_allclose(out.to_numpy(), [np.pi / 2, -np.pi / 2])
        self.assertIs(
            NDArray([1.0], dtype="float32").arctan2(1).dtype, DType.FLOAT32
        )


class TestLogical(unittest.TestCase):
    def setUp(self) -> None:
        self.x = NDArray([0, 1, 2, 0], dtype="int32")
        self.y = NDArray([0.0, 0.0, -3.5, 5.0])

    def test_connectives(self) -> None:
        self.assertEqual(self.x.logical_and(self.y).tolist(), [0, 0, 1, 0])
        self.assertEqual(self.x.logical_or(self.y).tolist(), [0, 1, 1, 1])
        self.assertEqual(self.x.logical_xor(self.y).tolist(), [0, 1, 0, 1])
        self.assertIs(self.x.logical_and(1).dtype, DType.UINT8)

    def test_logical_not(self) -> None:
        out = self.x.logical_not()
        self.assertIs(out.dtype, DType.UINT8)
        self.assertEqual(out.tolist(), [1, 0, 0, 1])

    def test_masks_combine(self) -> None:
        a = NDArray([1.0, 4.0, 6.0, 9.0])
        mask = (a > 2).logical_and(a < 8)
        self.assertEqual(a.boolean_index(mask).tolist(), [4.0, 6.0])


class TestUnaryFunctions(unittest.TestCase):
    def test_floating_functions_match_numpy(self) -> None:
        values = np.array([[-0.9, -0.5, 0.0], [0.3, 0.8, 0.95]])
        a = NDArray(values)
        names = [
            "sin", "cos", "tan", "arcsin", "arccos", "arctan",
            "sinh", "cosh", "tanh", "arcsinh", "arctanh",
            "exp", "exp2", "expm1", "cbrt", "log1p",
        ]
        for name in names:
            with self.subTest(op=name):
                np.testing.assert_allclose(
                    getattr(a, name)().to_numpy(), getattr(np, name)(values)
                )

    def test_positive_domain_functions(self) -> None:
        values = np.array([1.0, 2.0, 10.0, 1024.0])
        a = NDArray(values)
        for name in ["log", "log2", "log10", "arccosh", "sqrt"]:
            with self.subTest(op=name):
                np.testing.assert_allclose(
                    getattr(a, name)().to_numpy(), getattr(np, name)(values)
                )

    def test_domain_violations_report_index(self) -> None:
        cases = [
            ("arcsin", [0.5, 1.5], 1),
            ("arccos", [-2.0, 0.0], 0),
            ("arccosh", [1.0, 0.5], 1),
            ("arctanh", [0.0, -0.5, 1.0], 2),
            ("log2", [1.0, 0.0], 1),
            ("log10", [-1.0], 0),
            ("log1p", [0.0, -1.0], 1),
        ]
        for name, data, index in cases:
            with self.subTest(op=name):
                with self.assertRaises(MathematicalError) as ctx:
                    getattr(NDArray(data), name)()
                self.assertEqual(ctx.exception.operation, name)
                self.assertEqual(ctx.exception.context["index"], index)

    def test_overflowing_results_raise(self) -> None:
        with self.assertRaises(MathematicalError):
            NDArray([1.0, 1000.0]).cosh()
        with self.assertRaises(MathematicalError):
            NDArray([200.0], dtype="float32").exp2()

    def test_rounding_family(self) -> None:
        values = np.array([-1.5, -0.5, 0.5, 1.5, 2.7, -2.2])
        a = NDArray(values)
        for name in ["floor", "ceil", "round", "trunc", "sign"]:
            with self.subTest(op=name):
                np.testing.assert_array_equal(
                    getattr(a, name)().to_numpy(), getattr(np, name)(values)
                )
        self.assertEqual(a.round().tolist()[:4], [-2.0, -0.0, 0.0, 2.0])

    def test_dtype_rules(self) -> None:
        ints = NDArray([-3, 0, 2], dtype="int8")
        self.assertIs(ints.sign().dtype, DType.INT8)
        self.assertEqual(ints.sign().tolist(), [-1, 0, 1])
        self.assertIs(ints.floor().dtype, DType.INT8)
        self.assertEqual(ints.floor().tolist(), [-3, 0, 2])
        self.assertIs(ints.sin().dtype, DType.FLOAT64)
        self.assertIs(NDArray([1.0], dtype="float32").tanh().dtype, DType.FLOAT32)

    def test_square_wraps_integer_kinds(self) -> None:
        self.assertEqual(NDArray([3, 16], dtype="uint8").square().tolist(), [9, 0])
        np.testing.assert_array_equal(
            NDArray([-1.5, 2.0]).square().to_numpy(), [2.25, 4.0]
        )

    def test_functions_on_views(self) -> None:
        base = NDArray([[0.0, 1.0], [2.0, 3.0]])
        np.testing.assert_allclose(
            base.transpose().sin().to_numpy(), np.sin([[0.0, 2.0], [1.0, 3.0]])
        )


if __name__ == "__main__":
    unittest.main()
