# Standard library imports ...
import pathlib
import re

# Third party library imports ...
from setuptools import setup

kwargs = {
    'name': 'exiftags',
    'description': 'Typed registry and value model for Exif metadata fields',
    'long_description': open('README.md').read(),
    'long_description_content_type': 'text/markdown',
    'packages': ['exiftags', 'exiftags.tables'],
    'license': 'MIT',
    'python_requires': '>=3.8',
    'install_requires': ['lxml', 'numpy', 'packaging', 'setuptools'],
    'extras_require': {
        'test': ['pytest'],
    },
}

kwargs['classifiers'] = [
    "Programming Language :: Python",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: Implementation :: CPython",
    "License :: OSI Approved :: MIT License",
    "Operating System :: MacOS",
    "Operating System :: POSIX :: Linux",
    "Operating System :: Microsoft :: Windows",
    "Intended Audience :: Science/Research",
    "Intended Audience :: Information Technology",
    "Topic :: Multimedia :: Graphics",
    "Topic :: Software Development :: Libraries :: Python Modules"
]

# Get the version string.  Cannot do this by importing exiftags!
p = pathlib.Path('exiftags') / 'version.py'
contents = p.read_text()
pattern = r'''version\s=\s"(?P<version>\d*.\d*.\d*.*)"\s'''
match = re.search(pattern, contents)
kwargs['version'] = match.group('version')

setup(**kwargs)
