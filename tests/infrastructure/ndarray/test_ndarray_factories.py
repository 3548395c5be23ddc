import unittest

import numpy as np

from src.ndlite.domain._errors import InvalidParameterError
from src.ndlite.domain._options import NDArrayOptions
from src.ndlite.domain.dtype._dtype import DType
from src.ndlite.infrastructure.ndarray._factories import (
    arange,
    eye,
    from_nested,
    full,
    linspace,
    ones,
    random,
    zeros,
)


class TestFilledFactories(unittest.TestCase):
    def test_zeros_ones_full(self) -> None:
        z = zeros((2, 3))
        self.assertEqual(z.shape, (2, 3))
        np.testing.assert_array_equal(z.to_numpy(), np.zeros((2, 3)))
        o = ones(4, dtype="int8")
        self.assertIs(o.dtype, DType.INT8)
        self.assertEqual(o.tolist(), [1, 1, 1, 1])
        f = full([2, 2], 2.5)
        np.testing.assert_array_equal(f.to_numpy(), np.full((2, 2), 2.5))

    def test_zero_size_and_scalar_shapes(self) -> None:
        self.assertEqual(zeros((0, 3)).size, 0)
        self.assertEqual(zeros(()).shape, ())
        self.assertEqual(ones(()).item(), 1.0)

    def test_full_validates_fill_value(self) -> None:
        for bad in [float("nan"), float("inf"), "1", None]:
            with self.subTest(value=bad):
                with self.assertRaises(InvalidParameterError):
                    full((2,), bad)

    def test_invalid_shapes(self) -> None:
        for bad in [(-1, 2), (2.0,), "ab"]:
            with self.subTest(shape=bad):
                with self.assertRaises(InvalidParameterError):
                    zeros(bad)

    def test_options_are_honored(self) -> None:
        opts = NDArrayOptions(dtype="uint16", readonly=True)
        z = zeros(3, opts)
        self.assertIs(z.dtype, DType.UINT16)
        self.assertTrue(z.readonly)
        self.assertFalse(ones(3, opts, readonly=False).readonly)


class TestEye(unittest.TestCase):
    def test_identity(self) -> None:
        np.testing.assert_array_equal(eye(3).to_numpy(), np.eye(3))
        self.assertEqual(eye(1).tolist(), [[1.0]])

    def test_invalid_n(self) -> None:
        for bad in [0, -2, 2.0, True]:
            with self.subTest(n=bad):
                with self.assertRaises(InvalidParameterError):
                    eye(bad)


class TestRanges(unittest.TestCase):
    def test_arange_forms(self) -> None:
        self.assertEqual(arange(4).tolist(), [0.0, 1.0, 2.0, 3.0])
        self.assertEqual(arange(2, 5).tolist(), [2.0, 3.0, 4.0])
        self.assertEqual(arange(5, 0, -2).tolist(), [5.0, 3.0, 1.0])
        np.testing.assert_allclose(arange(0, 1, 0.25).to_numpy(), [0, 0.25, 0.5, 0.75])

    def test_arange_empty_when_direction_disagrees(self) -> None:
        self.assertEqual(arange(5, 1).size, 0)
        self.assertEqual(arange(0, 5, -1).shape, (0,))

    def test_arange_errors(self) -> None:
        with self.assertRaises(InvalidParameterError):
            arange(0, 5, 0)
        with self.assertRaises(InvalidParameterError):
            arange(0, float("inf"))

    def test_arange_integer_dtype(self) -> None:
        self.assertEqual(arange(3, dtype="int32").tolist(), [0, 1, 2])

    def test_linspace(self) -> None:
        out = linspace(0, 1, 5)
        np.testing.assert_allclose(out.to_numpy(), [0, 0.25, 0.5, 0.75, 1.0])
        self.assertEqual(out.get(-1), 1.0)
        self.assertEqual(linspace(3, 7, 1).tolist(), [3.0])
        self.assertEqual(linspace(0.1, 0.7, 7).get(6), 0.7)
        self.assertEqual(linspace(0, 1).size, 50)

    def test_linspace_errors(self) -> None:
        for bad in [0, -1, 2.5]:
            with self.subTest(num=bad):
                with self.assertRaises(InvalidParameterError):
                    linspace(0, 1, bad)


class TestOtherFactories(unittest.TestCase):
    def test_from_nested(self) -> None:
        self.assertEqual(from_nested(5).shape, ())
        self.assertEqual(from_nested([[1, 2], [3, 4]]).shape, (2, 2))
        self.assertTrue(from_nested([1], readonly=True).readonly)

    def test_random_is_reproducible_and_in_range(self) -> None:
        a = random((3, 4), seed=7)
        b = random((3, 4), seed=7)
        np.testing.assert_array_equal(a.to_numpy(), b.to_numpy())
        values = a.to_numpy()
        self.assertTrue(np.all(values >= 0.0))
        self.assertTrue(np.all(values < 1.0))
        self.assertEqual(a.shape, (3, 4))


if __name__ == "__main__":
    unittest.main()
