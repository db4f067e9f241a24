"""
Test fixtures common to more than one test point.
"""

# Standard library imports
import pathlib
import shutil
import tempfile
import unittest

# Local imports
import exiftags
from exiftags import Datatype, Rational, SRational


class TestCommon(unittest.TestCase):
    """
    Common setup for many if not all tests.
    """

    def setUp(self):
        exiftags.reset_option('all')

        # Create a temporary directory to be cleaned up following each test.
        self.test_dir = tempfile.mkdtemp()
        self.test_dir_path = pathlib.Path(self.test_dir)

    def tearDown(self):
        shutil.rmtree(self.test_dir)
        exiftags.reset_option('all')


def synthetic_value(definition):
    """
    Produce python data that fits the declared type and the documented count
    of a field definition.  Fields without a fixed count get two elements.
    """
    count = definition.count if definition.count is not None else 2
    datatype = definition.datatype

    if datatype in (Datatype.ASCII, Datatype.UTF8):
        # The count includes the terminating NUL.
        return 'x' * (count - 1)
    if datatype == Datatype.UNDEFINED:
        return bytes(range(count))
    if datatype == Datatype.RATIONAL:
        return tuple(Rational(j + 1, j + 2) for j in range(count))
    if datatype == Datatype.SRATIONAL:
        return tuple(SRational(-(j + 1), j + 2) for j in range(count))
    if datatype in (Datatype.FLOAT, Datatype.DOUBLE):
        return [0.5 * (j + 1) for j in range(count)]
    return [j + 1 for j in range(count)]
