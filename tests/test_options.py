"""
Tests for setting/getting options from inside python
"""
# Standard library imports ...
import unittest

# Local imports ...
import exiftags


class TestSuite(unittest.TestCase):

    def setUp(self):
        exiftags.reset_option('all')

    def tearDown(self):
        exiftags.reset_option('all')

    def test_reset_single_option(self):
        """
        Verify a single option can be reset.
        """
        exiftags.set_option('parse.check_count', False)
        exiftags.reset_option('parse.check_count')
        self.assertTrue(exiftags.get_option('parse.check_count'))

    def test_reset_all(self):
        exiftags.set_option('parse.strict_ascii', True)
        exiftags.set_option('print.short', True)
        exiftags.reset_option('all')
        self.assertFalse(exiftags.get_option('parse.strict_ascii'))
        self.assertFalse(exiftags.get_option('print.short'))

    def test_bad_reset(self):
        """
        Verify exception when a bad option is given to reset
        """
        with self.assertRaises(KeyError):
            exiftags.reset_option('blah')

    def test_bad_set(self):
        with self.assertRaises(KeyError):
            exiftags.set_option('parse.blah', True)

    def test_bad_get(self):
        with self.assertRaises(KeyError):
            exiftags.get_option('parse.blah')

    def test_non_boolean_value(self):
        """
        SCENARIO:  Set an option to something other than a bool.

        EXPECTED RESULT:  ValueError, and the option keeps its value.
        """
        with self.assertRaises(ValueError):
            exiftags.set_option('parse.strict_ascii', 'yes')
        self.assertFalse(exiftags.get_option('parse.strict_ascii'))

    def test_strict_ascii_changes_decoding(self):
        """
        SCENARIO:  Decode a UTF-8 payload of an ASCII field with both text
        policies.

        EXPECTED RESULT:  Accepted when lenient, rejected when strict.
        """
        raw = 'Ångström'.encode('utf-8') + b'\x00'
        tag = exiftags.decode('Image', 0x013B, raw)
        self.assertEqual(tag.value, 'Ångström')

        exiftags.set_option('parse.strict_ascii', True)
        with self.assertRaises(exiftags.MalformedText):
            exiftags.decode('Image', 0x013B, raw)
