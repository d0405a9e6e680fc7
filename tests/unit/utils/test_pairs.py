"""
Tests for `ordered_hash.utils.pairs`.
"""

import unittest

from ordered_hash.utils.pairs import (
    InvalidArgumentError, distinct_keys, split_pairs)


class TestPairsModule(unittest.TestCase):
    """
    Tests for the `ordered_hash.utils.pairs` module.
    """

    def test_distinct_keys(self):
        """
        Test that ``distinct_keys`` keeps the first position and the last value
        of a repeated key.
        """
        table, order = distinct_keys(
            [('a', 1), ('b', 2), ('a', 3), ('c', 4)])
        self.assertEqual({'a': 3, 'b': 2, 'c': 4}, table)
        self.assertEqual(['a', 'b', 'c'], order)
        table, order = distinct_keys([])
        self.assertEqual({}, table)
        self.assertEqual([], order)

    def test_split_pairs(self):
        """
        Test that ``split_pairs`` splits a flat sequence into pairs.
        """
        self.assertEqual([], split_pairs([]))
        self.assertEqual([('a', 1)], split_pairs(['a', 1]))
        self.assertEqual(
            [('a', 1), ('b', 2), ('a', 3)],
            split_pairs(('a', 1, 'b', 2, 'a', 3)))

    def test_split_pairs_odd(self):
        """
        Test that ``split_pairs`` rejects a sequence with an odd number of
        elements.
        """
        with self.assertRaises(InvalidArgumentError) as assertion:
            split_pairs(['a', 1, 'dangling'], 'push()')
        message = str(assertion.exception)
        self.assertIn('push()', message)
        self.assertIn("'dangling'", message)
        self.assertIsInstance(assertion.exception, ValueError)
