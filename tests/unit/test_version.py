"""
Tests for `ordered_hash.version`.
"""

import unittest

import ordered_hash
from ordered_hash.version import VERSION, VERSION_STRING


class TestVersionModule(unittest.TestCase):
    """
    Tests for the `ordered_hash.version` module.
    """

    def test_version_string(self):
        """
        Test that the version string matches the version tuple.
        """
        self.assertEqual(
            '.'.join(str(component) for component in VERSION),
            VERSION_STRING)
        self.assertEqual(VERSION_STRING, ordered_hash.__version__)
