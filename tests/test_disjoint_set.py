import unittest

from maze4d.domain.disjoint_set import DisjointSet
from maze4d.domain.errors import UnknownKeyError


class TestDisjointSet(unittest.TestCase):

    def setUp(self):
        self.ds = DisjointSet()
        for key in range(6):
            self.ds.add(key)

    def test_new_keys_are_their_own_group(self):
        for key in range(6):
            self.assertEqual(self.ds.find(key), key)
        self.assertEqual(self.ds.group_count(), 6)

    def test_union_joins_groups(self):
        self.assertTrue(self.ds.union(0, 1))
        self.assertEqual(self.ds.find(0), self.ds.find(1))
        self.assertTrue(self.ds.same_group(0, 1))
        self.assertFalse(self.ds.same_group(0, 2))

    def test_union_is_directional(self):
        """a's top is grafted under b's top."""
        self.ds.union(0, 1)
        self.assertEqual(self.ds.find(0), 1)
        self.ds.union(2, 0)
        self.assertEqual(self.ds.find(2), 1)

    def test_union_same_group_returns_false(self):
        self.ds.union(0, 1)
        self.assertFalse(self.ds.union(1, 0))
        self.assertEqual(self.ds.group_count(), 5)

    def test_find_is_idempotent_with_compression(self):
        # Build a chain 0 -> 1 -> 2 -> 3 -> 4
        for a, b in [(0, 1), (1, 2), (2, 3), (3, 4)]:
            self.ds.union(a, b)
        first = self.ds.find(0)
        second = self.ds.find(0)
        self.assertEqual(first, second)
        self.assertEqual(first, 4)

    def test_compressed_and_uncompressed_find_agree(self):
        pairs = [(0, 1), (2, 3), (1, 3), (4, 5)]
        for a, b in pairs:
            self.ds.union(a, b)
        expected = {key: self.ds.find_uncompressed(key) for key in range(6)}
        for key in range(6):
            self.assertEqual(self.ds.find(key), expected[key])
        # Compression must not have moved anything between groups
        for key in range(6):
            self.assertEqual(self.ds.find_uncompressed(key), expected[key])

    def test_unknown_key_raises(self):
        with self.assertRaises(UnknownKeyError):
            self.ds.find(99)
        with self.assertRaises(KeyError):
            self.ds.union(0, 99)

    def test_re_adding_resets_to_singleton(self):
        self.ds.add(7)
        self.ds.add(7)
        self.assertEqual(self.ds.find(7), 7)
        self.assertIn(7, self.ds)
        self.assertEqual(len(self.ds), 7)

    def test_tuple_keys(self):
        ds = DisjointSet()
        a, b = (0, 0, 0, 0), (1, 0, 0, 0)
        ds.add(a)
        ds.add(b)
        ds.union(a, b)
        self.assertEqual(ds.find(a), b)


if __name__ == '__main__':
    unittest.main()
