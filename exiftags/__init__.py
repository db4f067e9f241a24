"""exiftags - typed registry and value model for Exif fields."""

__all__ = [
    'get_option', 'set_option', 'reset_option',
    'Namespace', 'Datatype', 'Rational', 'SRational',
    'ExifTagError', 'DecodeError', 'TypeMismatch', 'Truncated',
    'MalformedText', 'EncodeError',
    'FieldDefinition', 'FieldValue', 'UnknownField', 'TagRegistry',
    'Tag', 'REGISTRIES', 'registry', 'lookup', 'decode', 'encode', 'make',
    'interpret',
]

# Local imports
from exiftags import version
from .options import get_option, set_option, reset_option
from .core import (
    Namespace, ExifTagError, DecodeError, TypeMismatch, Truncated,
    MalformedText, EncodeError
)
from .types import Datatype, Rational, SRational
from .registry import FieldDefinition, FieldValue, UnknownField, TagRegistry
from .tag import Tag, REGISTRIES, registry, lookup, decode, encode, make
from . import interpret

__version__ = version.version
