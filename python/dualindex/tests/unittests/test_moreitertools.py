import unittest

from dualindex.auxiliary.moreitertools import (as_keys, filter_not_equal,
                                               unique_everseen)


class TestMoreItertools(unittest.TestCase):
    def test_as_keys_single(self):
        self.assertEqual(as_keys("abc"), ("abc",))
        self.assertEqual(as_keys(b"abc"), (b"abc",))
        self.assertEqual(as_keys(1), (1,))
        self.assertEqual(as_keys(None), (None,))

    def test_as_keys_collection(self):
        self.assertEqual(as_keys(["a", "b"]), ("a", "b"))
        self.assertEqual(as_keys(("a", "b")), ("a", "b"))
        self.assertEqual(as_keys(iter(range(3))), (0, 1, 2))
        self.assertEqual(as_keys([]), ())

    def test_filter_not_equal(self):
        self.assertEqual(list(filter_not_equal([1, 2, 1, 3, 1], 1)), [2, 3])
        self.assertEqual(list(filter_not_equal([], 1)), [])

    def test_unique_everseen(self):
        self.assertEqual(list(unique_everseen("abcabd")), ["a", "b", "c", "d"])


if __name__ == "__main__":
    unittest.main()
