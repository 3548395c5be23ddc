"""
Unit tests for zero-copy views (view, reshape, transpose, slice).

Each view is checked against a NumPy reference for element values, and for
buffer aliasing: writes through the view must be visible through the source.
"""

import unittest
import warnings

import numpy as np

from src.ndlite.domain._errors import (
    DimensionMismatchError,
    IndexOutOfBoundsError,
    InvalidParameterError,
)
from src.ndlite.domain.layout._layout import flat_to_indices, offset_of, strides_for
from src.ndlite.infrastructure.ndarray._ndarray import NDArray


def _arange(*shape: int) -> NDArray:
    n = int(np.prod(shape))
    return NDArray(np.arange(n, dtype=np.float64), shape)


class TestViewAndAliasing(unittest.TestCase):
    def test_view_shares_buffer(self) -> None:
        a = _arange(2, 3)
        b = a.view()
        self.assertIsNot(a, b)
        self.assertTrue(a.shares_data_with(b))
        b.set(1, 2, 100)
        self.assertEqual(a.get(1, 2), 100.0)

    def test_shares_data_with_foreign_objects(self) -> None:
        a = _arange(3)
        self.assertFalse(a.shares_data_with(_arange(3)))
        self.assertFalse(a.shares_data_with(np.arange(3)))


class TestReshape(unittest.TestCase):
    def test_reshape_preserves_flat_order(self) -> None:
        a = _arange(2, 3, 4)
        b = a.reshape(4, 6)
        self.assertEqual(b.shape, (4, 6))
        self.assertTrue(a.shares_data_with(b))
        new_strides = strides_for((4, 6))
        for i in range(4):
            for j in range(6):
                flat = offset_of((i, j), new_strides)
                self.assertEqual(b.get(i, j), a.get(*flat_to_indices(flat, a.shape)))

    def test_reshape_call_styles_and_inference(self) -> None:
        a = _arange(2, 3)
        self.assertEqual(a.reshape((3, 2)).shape, (3, 2))
        self.assertEqual(a.reshape([6]).shape, (6,))
        self.assertEqual(a.reshape(-1).shape, (6,))
        self.assertEqual(a.reshape(3, -1).shape, (3, 2))

    def test_reshape_writes_alias(self) -> None:
        a = _arange(2, 3)
        b = a.reshape(6)
        b.set(4, -1)
        self.assertEqual(a.get(1, 1), -1.0)

    def test_reshape_size_mismatch(self) -> None:
        with self.assertRaises(DimensionMismatchError):
            _arange(2, 3).reshape(4, 2)
        with self.assertRaises(InvalidParameterError):
            _arange(2, 3).reshape(-1, -1)

    def test_reshape_of_non_canonical_view_copies_with_warning(self) -> None:
        a = _arange(2, 3)
        t = a.transpose()
        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always")
            r = t.reshape(6)
        self.assertTrue(any(issubclass(w.category, UserWarning) for w in caught))
        self.assertFalse(r.shares_data_with(a))
        np.testing.assert_array_equal(
            r.to_numpy(), np.arange(6.0).reshape(2, 3).T.reshape(6)
        )

    def test_reshape_of_offset_canonical_view_stays_a_view(self) -> None:
        a = _arange(4, 3)
        rows = a.slice(slice(1, 3))
        self.assertTrue(rows.is_canonical())
        r = rows.reshape(6)
        self.assertTrue(r.shares_data_with(a))
        np.testing.assert_array_equal(r.to_numpy(), np.arange(3.0, 9.0))


class TestTranspose(unittest.TestCase):
    def test_transpose_involution_and_elements(self) -> None:
        a = _arange(2, 3)
        t = a.transpose()
        self.assertEqual(t.shape, (3, 2))
        self.assertEqual(t.strides, (1, 3))
        self.assertEqual(t.transpose().shape, a.shape)
        for i in range(2):
            for j in range(3):
                self.assertEqual(t.get(j, i), a.get(i, j))
        self.assertTrue(t.shares_data_with(a))

    def test_transpose_scenario(self) -> None:
        a = NDArray([[1, 2, 3], [4, 5, 6]], (2, 3))
        t = a.transpose()
        self.assertEqual(t.shape, (3, 2))
        self.assertEqual(t.get(2, 1), 6.0)

    def test_transpose_with_axes_matches_numpy(self) -> None:
        ref = np.arange(24.0).reshape(2, 3, 4)
        a = _arange(2, 3, 4)
        for axes in [(0, 1, 2), (2, 0, 1), (1, 2, 0), (-1, 0, 1)]:
            with self.subTest(axes=axes):
                np.testing.assert_array_equal(
                    a.transpose(*axes).to_numpy(), ref.transpose(axes)
                )
        np.testing.assert_array_equal(
            a.transpose([2, 1, 0]).to_numpy(), ref.transpose()
        )

    def test_transpose_invalid_axes(self) -> None:
        a = _arange(2, 3, 4)
        with self.assertRaises(InvalidParameterError):
            a.transpose(0, 0, 1)
        with self.assertRaises(InvalidParameterError):
            a.transpose(0, 1, 3)
        with self.assertRaises(DimensionMismatchError):
            a.transpose(0, 1)

    def test_t_property(self) -> None:
        a = _arange(2, 3)
        self.assertEqual(a.T.shape, (3, 2))


class TestSlice(unittest.TestCase):
    def setUp(self) -> None:
        self.ref = np.arange(20.0).reshape(4, 5)
        self.a = _arange(4, 5)

    def test_integer_spec_drops_dimension(self) -> None:
        row = self.a.slice(1)
        self.assertEqual(row.shape, (5,))
        np.testing.assert_array_equal(row.to_numpy(), self.ref[1])
        col = self.a.slice(None, -1)
        np.testing.assert_array_equal(col.to_numpy(), self.ref[:, -1])
        elem = self.a.slice(2, 3)
        self.assertEqual(elem.shape, ())
        self.assertEqual(elem.item(), self.ref[2, 3])

    def test_range_specs_match_python_slices(self) -> None:
        cases = [
            ((slice(1, 3),), (slice(1, 3),)),
            (([1, 3],), (slice(1, 3),)),
            (([0, 4, 2], [-3, None]), (slice(0, 4, 2), slice(-3, None))),
            (("::-1",), (slice(None, None, -1),)),
            (("1:", "::2"), (slice(1, None), slice(None, None, 2))),
            ((slice(-100, 100),), (slice(-100, 100),)),
            ((slice(3, 1),), (slice(3, 1),)),
            ((None, slice(None, None, -2)), (slice(None), slice(None, None, -2))),
        ]
        for specs, ref_key in cases:
            with self.subTest(specs=specs):
                np.testing.assert_array_equal(
                    self.a.slice(*specs).to_numpy(), self.ref[ref_key]
                )

    def test_slice_strides_and_offset(self) -> None:
        v = self.a.slice(slice(1, 4, 2), slice(4, 0, -2))
        self.assertEqual(v.shape, (2, 2))
        self.assertEqual(v.strides, (10, -2))
        self.assertEqual(v.offset, 5 + 4)

    def test_slice_aliases(self) -> None:
        v = self.a.slice(slice(1, 3), slice(None, None, 2))
        self.assertTrue(v.shares_data_with(self.a))
        v.set(1, 2, -7)
        self.assertEqual(self.a.get(2, 4), -7.0)

    def test_slice_of_slice(self) -> None:
        v = self.a.slice(slice(None, None, -1)).slice(None, slice(1, 4))
        np.testing.assert_array_equal(v.to_numpy(), self.ref[::-1][:, 1:4])

    def test_slice_errors(self) -> None:
        with self.assertRaises(DimensionMismatchError):
            self.a.slice(0, 0, 0)
        with self.assertRaises(InvalidParameterError):
            self.a.slice(slice(0, 3, 0))
        with self.assertRaises(InvalidParameterError):
            self.a.slice("::0")
        with self.assertRaises(InvalidParameterError):
            self.a.slice("3")
        with self.assertRaises(InvalidParameterError):
            self.a.slice({"start": 1})
        with self.assertRaises(IndexOutOfBoundsError):
            self.a.slice(4)

    def test_empty_slice_is_valid(self) -> None:
        v = self.a.slice(slice(2, 2))
        self.assertEqual(v.shape, (0, 5))
        self.assertEqual(v.size, 0)
        self.assertEqual(v.tolist(), [])

    def test_reshape_of_stepped_slice_copies(self) -> None:
        v = self.a.slice(None, slice(None, None, 2))
        with warnings.catch_warnings():
            warnings.simplefilter("ignore")
            r = v.reshape(-1)
        np.testing.assert_array_equal(r.to_numpy(), self.ref[:, ::2].reshape(-1))


if __name__ == "__main__":
    unittest.main()
