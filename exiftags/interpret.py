"""
Field-specific interpretation of payloads.

The registry only knows the primitive type of a field.  Several BYTE and
UNDEFINED fields carry text, XML, or version numbers whose encoding is
documented per field; the functions here decode those.
"""
# Standard library imports ...
import sys

# Third party library imports ...
import lxml.etree as ET
import numpy as np

# Local imports ...
from .registry import FieldValue
from .types import Datatype

# 8-byte character code prefixes of UserComment and friends, Exif 2.3 table 9
_CHARACTER_CODES = {
    b'ASCII\x00\x00\x00': 'ascii',
    b'JIS\x00\x00\x00\x00\x00': 'iso2022_jp',
    b'UNICODE\x00': 'utf-16',
    b'\x00' * 8: 'utf-8',
}

_COMMENT_FIELDS = ('UserComment', 'GPSProcessingMethod', 'GPSAreaInformation')
_XP_FIELDS = ('XPTitle', 'XPComment', 'XPAuthor', 'XPKeywords', 'XPSubject')
_DIGIT_VERSION_FIELDS = (
    'ExifVersion', 'FlashpixVersion', 'InteroperabilityVersion', 'MPFVersion',
)
_BYTE_VERSION_FIELDS = ('DNGVersion', 'DNGBackwardVersion', 'GPSVersionID')


def _check(field, names):
    if field.name not in names:
        msg = (
            f"{field.namespace}.{field.name} cannot be interpreted this way, "
            f"only {', '.join(names)} can."
        )
        raise ValueError(msg)


def _as_bytes(field):
    """The payload of a BYTE or UNDEFINED field as bytes."""
    if field.datatype == Datatype.UNDEFINED:
        return field.value
    return np.atleast_1d(field.value).astype(np.uint8).tobytes()


def xmp(field):
    """Parse the XMLPacket field.

    Parameters
    ----------
    field : FieldValue
        Image.XMLPacket

    Returns
    -------
    lxml.etree.ElementTree
        XML conforming to the XMP specifications.
    """
    _check(field, ('XMLPacket',))

    # XMP writers may pad the packet with whitespace or NUL bytes.
    packet = _as_bytes(field).rstrip(b'\x00 \t\r\n')
    elt = ET.fromstring(packet)
    return ET.ElementTree(elt)


def xp_text(field):
    """Decode one of the Windows XP fields, stored as UCS-2 little endian."""
    _check(field, _XP_FIELDS)
    text = _as_bytes(field).decode('utf-16-le')
    return text.rstrip('\x00')


def version(field):
    """Render a version field as a string.

    The Exif, Flashpix, Interoperability, and MPF versions are four ASCII
    digits and are returned as such, e.g. '0232'.  The DNG and GPS versions
    are four bytes and are returned dotted, e.g. '1.4.0.0'.
    """
    _check(field, _DIGIT_VERSION_FIELDS + _BYTE_VERSION_FIELDS)
    if field.name in _DIGIT_VERSION_FIELDS:
        return _as_bytes(field).decode('ascii')
    return '.'.join(str(item) for item in np.atleast_1d(field.value))


def user_comment(field, endian='='):
    """Decode a comment that starts with an 8-byte character code.

    Parameters
    ----------
    field : FieldValue
        Photo.UserComment, GPSInfo.GPSProcessingMethod or
        GPSInfo.GPSAreaInformation
    endian : str, optional
        Byte order of a UNICODE comment, which follows the byte order of the
        TIFF stream.  One of '=' (native), '<' or '>'.

    Returns
    -------
    str
        The comment, with trailing NUL and space padding removed.
    """
    _check(field, _COMMENT_FIELDS)
    payload = field.value
    if len(payload) < 8:
        msg = (
            f"{field.namespace}.{field.name} is {len(payload)} bytes long, "
            f"which is too short for its character code."
        )
        raise ValueError(msg)

    prefix, body = payload[:8], payload[8:]
    try:
        encoding = _CHARACTER_CODES[prefix]
    except KeyError:
        msg = (
            f"{field.namespace}.{field.name} has an unrecognized character "
            f"code {prefix!r}."
        )
        raise ValueError(msg)

    if encoding == 'utf-16':
        if endian == '=':
            endian = '<' if sys.byteorder == 'little' else '>'
        encoding = 'utf-16-le' if endian == '<' else 'utf-16-be'

    text = body.decode(encoding, errors='replace')
    return text.rstrip('\x00 ')


def to_float(value):
    """Convert a numeric payload to floating point.

    Rationals with a zero denominator become inf or nan.

    Parameters
    ----------
    value : FieldValue or payload
        A single number or rational, or several of them.

    Returns
    -------
    float or numpy.ndarray
    """
    if isinstance(value, FieldValue):
        if value.datatype in (
            None, Datatype.ASCII, Datatype.UTF8, Datatype.UNDEFINED
        ):
            msg = f"{value.namespace} field 0x{value.code:04X} is not numeric."
            raise ValueError(msg)
        value = value.value

    if isinstance(value, tuple):
        return np.array([float(item) for item in value])
    if isinstance(value, np.ndarray):
        return value.astype(np.float64)
    return float(value)
