import unittest

import numpy as np

from src.ndlite.domain._errors import DimensionMismatchError, MathematicalError
from src.ndlite.domain.dtype._dtype import DType
from src.ndlite.infrastructure.ndarray._ndarray import NDArray


class TestComparisons(unittest.TestCase):
    def setUp(self) -> None:
        self.x_np = np.array([[1.0, 5.0, 3.0], [-2.0, 0.0, 7.0]])
        self.y_np = np.array([[1.0, 4.0, 6.0], [-2.0, 1.0, 7.0]])
        self.x = NDArray(self.x_np)
        self.y = NDArray(self.y_np)

    def test_named_comparisons_match_numpy(self) -> None:
        cases = [
            ("greater", np.greater),
            ("greater_equal", np.greater_equal),
            ("less", np.less),
            ("less_equal", np.less_equal),
            ("equal", np.equal),
            ("not_equal", np.not_equal),
        ]
        for name, ref in cases:
            with self.subTest(op=name):
                out = getattr(self.x, name)(self.y)
                self.assertIs(out.dtype, DType.UINT8)
                np.testing.assert_array_equal(
                    out.to_numpy(), ref(self.x_np, self.y_np).astype(np.uint8)
                )

    def test_operators(self) -> None:
        np.testing.assert_array_equal((self.x > 2).to_numpy(), self.x_np > 2)
        np.testing.assert_array_equal((self.x >= 3).to_numpy(), self.x_np >= 3)
        np.testing.assert_array_equal((self.x < self.y).to_numpy(), self.x_np < self.y_np)
        np.testing.assert_array_equal((self.x <= 0).to_numpy(), self.x_np <= 0)

    def test_equality_operator_is_identity(self) -> None:
        self.assertTrue(self.x == self.x)
        self.assertFalse(self.x == NDArray(self.x_np))

    def test_broadcast_comparison(self) -> None:
        out = self.x.greater(NDArray([0, 4, 5]))
        np.testing.assert_array_equal(out.to_numpy(), self.x_np > np.array([0, 4, 5]))
        with self.assertRaises(DimensionMismatchError):
            self.x.less(NDArray([1, 2]))

    def test_mask_round_trip_through_boolean_index(self) -> None:
        picked = self.x.boolean_index(self.x.greater_equal(self.y))
        self.assertEqual(picked.tolist(), [1.0, 5.0, -2.0, 7.0])


class TestUnary(unittest.TestCase):
    def test_negative_and_absolute(self) -> None:
        a = NDArray([[-1.5, 2.0], [0.0, -3.0]])
        np.testing.assert_array_equal((-a).to_numpy(), [[1.5, -2.0], [0.0, 3.0]])
        np.testing.assert_array_equal(abs(a).to_numpy(), [[1.5, 2.0], [0.0, 3.0]])
        np.testing.assert_array_equal(a.negative().to_numpy(), -a.to_numpy())

    def test_negative_keeps_dtype(self) -> None:
        u = NDArray([1, 0], dtype="uint8").negative()
        self.assertIs(u.dtype, DType.UINT8)
        self.assertEqual(u.tolist(), [255, 0])
        i = NDArray([-128], dtype="int8").absolute()
        self.assertEqual(i.tolist(), [-128])

    def test_sqrt_exp_log(self) -> None:
        values = np.array([0.25, 1.0, 4.0])
        a = NDArray(values)
        np.testing.assert_allclose(a.sqrt().to_numpy(), np.sqrt(values))
        np.testing.assert_allclose(a.exp().to_numpy(), np.exp(values))
        np.testing.assert_allclose(a.log().to_numpy(), np.log(values))

    def test_floating_result_kinds(self) -> None:
        a = NDArray([1, 4, 9], dtype="int32")
        out = a.sqrt()
        self.assertIs(out.dtype, DType.FLOAT64)
        self.assertEqual(out.tolist(), [1.0, 2.0, 3.0])
        self.assertIs(NDArray([1.0], dtype="float32").exp().dtype, DType.FLOAT32)

    def test_domain_errors_report_index(self) -> None:
        with self.assertRaises(MathematicalError) as ctx:
            NDArray([[4, 1], [-1, 2]]).sqrt()
        self.assertEqual(ctx.exception.operation, "sqrt")
        self.assertEqual(ctx.exception.context["indices"], (1, 0))
        with self.assertRaises(MathematicalError):
            NDArray([1, 0]).log()
        with self.assertRaises(MathematicalError):
            NDArray([-1]).log()

    def test_unary_on_views(self) -> None:
        base = NDArray([[1, 4], [9, 16]])
        np.testing.assert_array_equal(
            base.transpose().sqrt().to_numpy(), [[1.0, 3.0], [2.0, 4.0]]
        )

    def test_exp_overflow_is_a_domain_error(self) -> None:
        with self.assertRaises(MathematicalError) as ctx:
            NDArray([1.0, 1000.0]).exp()
        self.assertEqual(ctx.exception.context["index"], 1)
        with self.assertRaises(MathematicalError):
            NDArray([1000], dtype="int32").exp()
        with self.assertRaises(MathematicalError):
            NDArray([100.0], dtype="float32").exp()


if __name__ == "__main__":
    unittest.main()
