"""Core definitions to be shared amongst the modules.
"""
from enum import Enum


class Namespace(Enum):
    """The IFD roles that scope Exif tag codes.

    A tag code only has a meaning inside one of these namespaces; the same
    code may denote different fields in different namespaces.
    """
    IMAGE = 'Image'
    PHOTO = 'Photo'
    IOP = 'Iop'
    GPSINFO = 'GPSInfo'
    MPFINFO = 'MpfInfo'
    THUMBNAIL = 'Thumbnail'

    def __str__(self):
        return self.value


class ExifTagError(RuntimeError):
    """Base class for errors raised while decoding or encoding a field.

    Attributes
    ----------
    namespace : Namespace
        Namespace of the offending field.
    code : int
        Numeric tag code of the offending field.
    declared_type_code : int or None
        The type code declared for the field by the registry.
    expected, actual : object
        What the registry expected versus what it was given, e.g. byte
        lengths for Truncated or type codes for TypeMismatch.
    """

    def __init__(
        self, msg, namespace=None, code=None, declared_type_code=None,
        expected=None, actual=None
    ):
        super().__init__(msg)
        self.namespace = namespace
        self.code = code
        self.declared_type_code = declared_type_code
        self.expected = expected
        self.actual = actual


class DecodeError(ExifTagError):
    """Raw field bytes could not be turned into a typed value."""
    pass


class TypeMismatch(DecodeError):
    """The type code found on the wire disagrees with the declared type."""
    pass


class Truncated(DecodeError):
    """There are not enough bytes for the declared type and count."""
    pass


class MalformedText(DecodeError):
    """A text payload violates the text policy of its type."""
    pass


class EncodeError(ExifTagError):
    """A value cannot be represented by the declared type of its field."""
    pass
