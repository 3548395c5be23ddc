import unittest
import warnings

import src.ndlite as nd


class TestPublicAPI(unittest.TestCase):
    def test_exports_resolve(self) -> None:
        for name in nd.__all__:
            with self.subTest(name=name):
                self.assertTrue(hasattr(nd, name))

    def test_ndarray_satisfies_interface(self) -> None:
        self.assertIsInstance(nd.zeros((2, 2)), nd.INDArray)
        self.assertNotIsInstance([1, 2], nd.INDArray)

    def test_end_to_end_workflow(self) -> None:
        a = nd.arange(6).reshape(2, 3)
        t = a.T
        self.assertEqual(t.get(2, 1), 5.0)

        centered = a.subtract(a.mean(axis=0))
        self.assertEqual(centered.sum(), 0.0)

        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            flat = t.reshape(-1)
        self.assertEqual(flat.tolist(), [0.0, 3.0, 1.0, 4.0, 2.0, 5.0])

        picked = flat[flat > 2]
        self.assertEqual(picked.tolist(), [3.0, 4.0, 5.0])

    def test_errors_share_a_base(self) -> None:
        with self.assertRaises(nd.NDArrayError):
            nd.zeros(3).add(nd.zeros(2))
        with self.assertRaises(nd.NDArrayError):
            nd.ones(2, readonly=True).set(0, 1)


if __name__ == "__main__":
    unittest.main()
