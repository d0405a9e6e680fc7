"""
Tests for `ordered_hash.utils.synchronized`.
"""

import threading
import unittest

from ordered_hash.ordered_map import OrderedMap
from ordered_hash.utils.pairs import InvalidArgumentError
from ordered_hash.utils.synchronized import SynchronizedOrderedMap


class TestSynchronizedOrderedMap(unittest.TestCase):
    """
    Tests for the `SynchronizedOrderedMap`.
    """

    def test_clone(self):
        """
        Test that a clone wraps an independent copy of the backing map.
        """
        d = SynchronizedOrderedMap(OrderedMap('a', 1))
        clone = d.clone()
        self.assertIsInstance(clone, SynchronizedOrderedMap)
        clone.set('b', 2)
        self.assertEqual(['a'], d.keys())
        self.assertEqual(['a', 'b'], clone.keys())

    def test_concurrent_push(self):
        """
        Test that pushing from several threads at the same time does not
        corrupt the map.
        """
        d = SynchronizedOrderedMap()
        thread_count = 8
        keys_per_thread = 200

        def worker(thread_index):
            for i in range(keys_per_thread):
                d.push((thread_index, i % 50), i)
                d.unshift(('shared', i % 10), thread_index)

        threads = [
            threading.Thread(target=worker, args=(index,))
            for index in range(thread_count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        keys = d.keys()
        self.assertEqual(len(keys), len(set(keys)))
        self.assertEqual(thread_count * 50 + 10, len(d))
        self.assertEqual(len(keys), len(d.values()))

    def test_delegation(self):
        """
        Test that the wrapper passes all operations on to the backing map.
        """
        backing_map = OrderedMap('a', 1, 'b', 2)
        d = SynchronizedOrderedMap(backing_map)
        self.assertEqual(['a', 'b'], d.keys())
        self.assertEqual([1, 2], d.values())
        self.assertEqual([('a', 1), ('b', 2)], d.as_list())
        self.assertTrue(d.exists('a'))
        self.assertIn('a', d)
        self.assertEqual(1, d.get('a'))
        self.assertEqual(1, d['a'])
        self.assertIsNone(d.get('x'))
        with self.assertRaises(KeyError):
            d['x']  # pylint: disable=pointless-statement
        self.assertEqual(3, d.set('c', 3))
        d['d'] = 4
        self.assertEqual(4, d.push('a', 10))
        self.assertEqual(['b', 'c', 'd', 'a'], backing_map.keys())
        self.assertEqual(5, d.unshift('e', 5))
        self.assertEqual(('e', 5), d.shift())
        self.assertEqual(('a', 10), d.pop())
        self.assertEqual(2, d.delete('b'))
        self.assertIsNone(d.delete('b'))
        del d['c']
        with self.assertRaises(KeyError):
            del d['c']
        self.assertEqual(['d'], list(d))
        self.assertEqual(1, len(d))
        self.assertTrue(d)
        self.assertFalse(d.is_empty())
        with self.assertRaises(InvalidArgumentError):
            d.push('only_key')
        d.clear()
        self.assertFalse(d)
        self.assertTrue(d.is_empty())
        self.assertIsNone(d.pop())
        self.assertIsNone(d.shift())
        self.assertEqual(
            "SynchronizedOrderedMap(OrderedMap([]))", repr(d))

    def test_default_backing_map(self):
        """
        Test that a new map is created if no backing map is specified.
        """
        d = SynchronizedOrderedMap()
        self.assertEqual([], d.keys())
        d.set('a', 1)
        self.assertEqual([('a', 1)], d.as_list())

    def test_iterator(self):
        """
        Test that the iterator works on a snapshot of the keys and looks up the
        values lazily.
        """
        d = SynchronizedOrderedMap(OrderedMap('a', 1, 'b', 2))
        iterator = d.iterator()
        d.set('c', 3)
        d.delete('a')
        self.assertEqual([('a', None), ('b', 2)], list(iterator))

    def test_reentrant_lock(self):
        """
        Test that a lock can be passed explicitly.
        """
        lock = threading.RLock()
        d = SynchronizedOrderedMap(lock=lock)
        with lock:
            d.set('a', 1)
            self.assertEqual(1, d.get('a'))
