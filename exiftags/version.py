"""
This file is part of exiftags, a typed registry of Exif fields.

License:  MIT
"""

# Standard library imports ...
import sys

# Third party library imports ...
from packaging.version import parse
import lxml.etree
import numpy as np

# Do not change the format of this next line!  Doing so risks breaking
# setup.py
version = "0.1.0"

version_tuple = parse(version).release

__doc__ = f"""\
This is exiftags **{version}**
"""

info = f"""\
Summary of exiftags configuration
---------------------------------

exiftags      {version}
Python        {sys.version}
sys.platform  {sys.platform}
sys.maxsize   {sys.maxsize}
numpy         {np.__version__}
lxml          {'.'.join(str(item) for item in lxml.etree.LXML_VERSION)}
"""
