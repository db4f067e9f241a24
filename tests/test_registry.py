"""
Tests for decoding and encoding fields with a namespace registry.
"""
# Standard library imports ...
import struct
import unittest
import warnings

# Third party library imports ...
import numpy as np

# Local imports ...
import exiftags
from exiftags import (
    Datatype, EncodeError, MalformedText, Namespace, Rational, SRational,
    TagRegistry, Truncated, TypeMismatch, UnknownField
)
from . import fixtures

MAKE = 0x010F
IMAGEWIDTH = 0x0100
ORIENTATION = 0x0112
XRESOLUTION = 0x011A
SUBJECTDISTANCE = 0x9206
COLORMATRIX1 = 0xC621


class TestLookup(fixtures.TestCommon):
    """Finding field definitions."""

    def setUp(self):
        super().setUp()
        self.image = exiftags.registry(Namespace.IMAGE)

    def test_known_code(self):
        definition = self.image.lookup(MAKE)
        self.assertEqual(definition.name, 'Make')
        self.assertEqual(definition.datatype, Datatype.ASCII)
        self.assertEqual(definition.code, MAKE)
        self.assertFalse(definition.deprecated)

    def test_unknown_code(self):
        """
        SCENARIO:  Look up a private code that is not in the registry.

        EXPECTED RESULT:  None, not an exception.
        """
        self.assertIsNone(self.image.lookup(0xFFFE))

    def test_lookup_by_name_ignores_case(self):
        self.assertEqual(self.image.lookup_name('make').code, MAKE)
        self.assertEqual(self.image.lookup_name('XRESOLUTION').code,
                         XRESOLUTION)
        self.assertIsNone(self.image.lookup_name('NoSuchField'))

    def test_registry_by_name(self):
        self.assertIs(exiftags.registry('GPSInfo'),
                      exiftags.registry(Namespace.GPSINFO))
        with self.assertRaises(ValueError):
            exiftags.registry('Makernote')

    def test_container_protocol(self):
        self.assertEqual(len(self.image), 256)
        self.assertIn(MAKE, self.image)
        self.assertNotIn(0xFFFE, self.image)
        codes = [definition.code for definition in self.image]
        self.assertEqual(codes, sorted(codes))
        self.assertEqual(codes, self.image.codes())

    def test_deprecated_field(self):
        definition = self.image.lookup_name('SubfileType')
        self.assertTrue(definition.deprecated)
        self.assertEqual(definition.superseded_by, 'NewSubfileType')


class TestDecode(fixtures.TestCommon):
    """Turning raw bytes into typed values."""

    def setUp(self):
        super().setUp()
        self.image = exiftags.registry(Namespace.IMAGE)
        self.photo = exiftags.registry(Namespace.PHOTO)

    def test_ascii_terminator_is_stripped(self):
        """
        SCENARIO:  Decode the six bytes b'Nikon\\x00' as Image.Make.

        EXPECTED RESULT:  The five character string 'Nikon'.
        """
        field = self.image.decode(MAKE, b'Nikon\x00', type_code=2, count=6)
        self.assertEqual(field.value, 'Nikon')
        self.assertEqual(field.count, 6)

    def test_ascii_without_terminator(self):
        field = self.image.decode(MAKE, b'Nikon')
        self.assertEqual(field.value, 'Nikon')

    def test_ascii_only_one_terminator_is_stripped(self):
        field = self.image.decode(MAKE, b'ab\x00\x00')
        self.assertEqual(field.value, 'ab\x00')

    def test_ascii_empty(self):
        """
        SCENARIO:  Decode an empty payload and a zero count.

        EXPECTED RESULT:  The empty string, not an error.
        """
        self.assertEqual(self.image.decode(MAKE, b'').value, '')
        self.assertEqual(self.image.decode(MAKE, b'\x00').value, '')
        self.assertEqual(self.image.decode(MAKE, b'abc', count=0).value, '')

    def test_ascii_count_limits_the_payload(self):
        """
        SCENARIO:  Inline text is padded to four bytes.

        EXPECTED RESULT:  Only count bytes are interpreted.
        """
        field = self.image.decode(MAKE, b'ab\x00\x00', count=3)
        self.assertEqual(field.value, 'ab')

    def test_lenient_ascii(self):
        """
        SCENARIO:  An ASCII field holds UTF-8 bytes, the default policy.

        EXPECTED RESULT:  The bytes are interpreted as UTF-8.
        """
        field = self.image.decode(MAKE, 'Café'.encode('utf-8') + b'\x00')
        self.assertEqual(field.value, 'Café')

    def test_lenient_ascii_invalid_utf8(self):
        with self.assertRaises(MalformedText):
            self.image.decode(MAKE, b'\xff\xfe\x00')

    def test_strict_ascii(self):
        """
        SCENARIO:  An ASCII field holds UTF-8 bytes with the strict policy.

        EXPECTED RESULT:  MalformedText, with the field context attached.
        """
        exiftags.set_option('parse.strict_ascii', True)
        with self.assertRaises(MalformedText) as cm:
            self.image.decode(MAKE, 'Café'.encode('utf-8') + b'\x00')
        self.assertEqual(cm.exception.namespace, Namespace.IMAGE)
        self.assertEqual(cm.exception.code, MAKE)
        self.assertEqual(cm.exception.declared_type_code, 2)

    def test_undefined_is_an_identity_copy(self):
        raw = bytes(range(256))
        field = self.photo.decode(0x927C, raw)
        self.assertEqual(field.value, raw)
        self.assertIsInstance(field.value, bytes)

    def test_undefined_zero_length(self):
        field = self.photo.decode(0x927C, b'')
        self.assertEqual(field.value, b'')

    def test_single_long_truncation_boundary(self):
        """
        SCENARIO:  Decode Image.ImageWidth, a single LONG, from 3, 4 and 8
        bytes.

        EXPECTED RESULT:  3 bytes are truncated, 4 bytes give a scalar, and
        8 bytes with a count of 2 give a two element sequence (with a warning
        about the count).
        """
        with self.assertRaises(Truncated) as cm:
            self.image.decode(IMAGEWIDTH, b'\x01\x00\x00', endian='<')
        self.assertEqual(cm.exception.expected, 4)
        self.assertEqual(cm.exception.actual, 3)

        field = self.image.decode(IMAGEWIDTH, b'\x01\x00\x00\x00', endian='<')
        self.assertEqual(field.value, 1)
        self.assertIsInstance(field.value, int)

        raw = struct.pack('<II', 640, 480)
        with self.assertWarns(UserWarning):
            field = self.image.decode(IMAGEWIDTH, raw, count=2, endian='<')
        np.testing.assert_array_equal(field.value, [640, 480])
        self.assertEqual(field.value.dtype, np.uint32)

    def test_count_larger_than_payload(self):
        with self.assertRaises(Truncated) as cm:
            self.image.decode(0x0111, struct.pack('<I', 8), count=2,
                              endian='<')
        self.assertEqual(cm.exception.expected, 8)
        self.assertEqual(cm.exception.actual, 4)

    def test_zero_count_numeric(self):
        with self.assertRaises(Truncated):
            self.image.decode(0x0111, b'', count=0)

    def test_negative_count(self):
        """
        SCENARIO:  Decode two StripOffsets with a count of -1.

        EXPECTED RESULT:  ValueError, not a shortened payload.
        """
        raw = struct.pack('<II', 1, 2)
        with self.assertRaises(ValueError):
            self.image.decode(0x0111, raw, count=-1, endian='<')

    def test_remainder_is_truncated(self):
        """
        SCENARIO:  Image.ColorMatrix1 (SRATIONAL) with 20 bytes.

        EXPECTED RESULT:  Truncated, since 20 is not a multiple of 8.
        """
        with self.assertRaises(Truncated) as cm:
            self.image.decode(COLORMATRIX1, bytes(20))
        self.assertEqual(cm.exception.expected, 24)
        self.assertEqual(cm.exception.actual, 20)

    def test_color_matrix(self):
        """
        SCENARIO:  Image.ColorMatrix1 holding a 3x3 matrix.

        EXPECTED RESULT:  A tuple of nine SRationals.
        """
        terms = [(10000 - j, 10000) if j % 4 == 0 else (-j, 10000)
                 for j in range(9)]
        raw = b''.join(struct.pack('>ii', *pair) for pair in terms)
        field = self.image.decode(COLORMATRIX1, raw, type_code=10, count=9,
                                  endian='>')
        self.assertEqual(len(field.value), 9)
        self.assertTrue(all(isinstance(x, SRational) for x in field.value))
        self.assertEqual(field.value[1], SRational(-1, 10000))
        self.assertEqual(field.count, 9)

    def test_inline_short_is_padded(self):
        field = self.image.decode(ORIENTATION, b'\x00\x06\x00\x00',
                                  type_code=3, count=1, endian='>')
        self.assertEqual(field.value, 6)

    def test_byte_order(self):
        little = self.image.decode(XRESOLUTION, struct.pack('<II', 72, 1),
                                   endian='<')
        big = self.image.decode(XRESOLUTION, struct.pack('>II', 72, 1),
                                endian='>')
        self.assertEqual(little, big)
        self.assertEqual(little.value, Rational(72, 1))

    def test_invalid_byte_order(self):
        with self.assertRaises(ValueError):
            self.image.decode(XRESOLUTION, bytes(8), endian='!')

    def test_zero_denominator_passes_through(self):
        """
        SCENARIO:  Decode 0/0 for Image.XResolution.

        EXPECTED RESULT:  No error; the pair is kept as is and differs from
        any proper fraction.
        """
        field = self.image.decode(XRESOLUTION, bytes(8))
        self.assertEqual(field.value.numerator, 0)
        self.assertEqual(field.value.denominator, 0)
        self.assertNotEqual(field.value, Rational(0, 1))

    def test_floats(self):
        raw = struct.pack('<3f', 0.5, 1.5, float('nan'))
        field = self.image.decode(0xC6FC, raw, type_code=11, endian='<')
        self.assertEqual(field.value.dtype, np.float32)
        self.assertEqual(field, self.image.decode(0xC6FC, raw, endian='<'))

    def test_double(self):
        raw = struct.pack('<d', 0.25)
        field = self.image.decode(0xC7A8, raw, endian='<')
        self.assertEqual(field.value, 0.25)

    def test_signed_short(self):
        raw = struct.pack('<h', -2)
        field = self.image.decode(0x0158, raw, endian='<')
        self.assertEqual(field.value, -2)

    def test_type_mismatch(self):
        """
        SCENARIO:  The IFD entry says SHORT, the registry says ASCII.

        EXPECTED RESULT:  TypeMismatch with both type codes attached.
        """
        with self.assertRaises(TypeMismatch) as cm:
            self.image.decode(MAKE, b'Nikon\x00', type_code=3)
        self.assertEqual(cm.exception.namespace, Namespace.IMAGE)
        self.assertEqual(cm.exception.code, MAKE)
        self.assertEqual(cm.exception.declared_type_code, 2)
        self.assertEqual(cm.exception.expected, 2)
        self.assertEqual(cm.exception.actual, 3)

    def test_type_mismatch_unknown_type_code(self):
        with self.assertRaises(TypeMismatch):
            self.image.decode(MAKE, b'Nikon\x00', type_code=99)

    def test_unknown_code_is_not_an_error(self):
        """
        SCENARIO:  Decode a code that is not in the registry.

        EXPECTED RESULT:  An UnknownField holding the raw bytes, which
        encodes back to the same bytes.
        """
        raw = b'\x01\x02\x03'
        field = self.image.decode(0xFFFE, raw, type_code=7, count=3)
        self.assertIsInstance(field, UnknownField)
        self.assertEqual(field.value, raw)
        self.assertEqual(field.code, 0xFFFE)
        self.assertEqual(field.type_code, 7)
        self.assertEqual(field.count, 3)
        self.assertIsNone(field.name)
        self.assertIsNone(field.datatype)
        self.assertEqual(self.image.encode(field), raw)

    def test_unknown_fields_compare(self):
        a = self.image.decode(0xFFFE, b'ab')
        b = self.image.decode(0xFFFE, bytearray(b'ab'))
        c = self.photo.decode(0xFFFE, b'ab')
        self.assertEqual(a, b)
        self.assertNotEqual(a, c)
        self.assertNotEqual(a, self.image.decode(MAKE, b'ab'))

    def test_namespace_disambiguation(self):
        """
        SCENARIO:  Code 0x9206 is an SRATIONAL in IFD0 but a RATIONAL in the
        Exif IFD.  Decode the same bytes with both registries.

        EXPECTED RESULT:  -1/1 versus 4294967295/1.
        """
        raw = struct.pack('<ii', -1, 1)
        image = self.image.decode(SUBJECTDISTANCE, raw, endian='<')
        photo = self.photo.decode(SUBJECTDISTANCE, raw, endian='<')
        self.assertEqual(image.value, SRational(-1, 1))
        self.assertEqual(photo.value, Rational(2 ** 32 - 1, 1))
        self.assertNotEqual(image, photo)

    def test_gps_versus_iop(self):
        """
        SCENARIO:  Code 0x0002 is GPSLatitude in GPSInfo and
        InteroperabilityVersion in Iop.

        EXPECTED RESULT:  Different names and types.
        """
        gps = exiftags.lookup('GPSInfo', 0x0002)
        iop = exiftags.lookup('Iop', 0x0002)
        self.assertEqual(gps.name, 'GPSLatitude')
        self.assertEqual(gps.datatype, Datatype.RATIONAL)
        self.assertEqual(iop.name, 'InteroperabilityVersion')
        self.assertEqual(iop.datatype, Datatype.UNDEFINED)

    def test_deprecation_transparency(self):
        """
        SCENARIO:  Decode equivalent payloads for the deprecated SubfileType
        and its replacement NewSubfileType.

        EXPECTED RESULT:  Value-equal results under their respective types.
        """
        old = self.image.decode(0x00FF, struct.pack('<H', 1), type_code=3,
                                endian='<')
        new = self.image.decode(0x00FE, struct.pack('<I', 1), type_code=4,
                                endian='<')
        self.assertEqual(old.value, new.value)
        self.assertEqual(old.datatype, Datatype.SHORT)
        self.assertEqual(new.datatype, Datatype.LONG)
        self.assertTrue(old.definition.deprecated)

    def test_count_check_can_be_disabled(self):
        exiftags.set_option('parse.check_count', False)
        raw = struct.pack('<II', 640, 480)
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            field = self.image.decode(IMAGEWIDTH, raw, endian='<')
        self.assertEqual(field.count, 2)

    def test_value_owns_its_memory(self):
        raw = bytearray(struct.pack('<4H', 1, 2, 3, 4))
        field = self.image.decode(0x0102, raw, endian='<')
        raw[0] = 0xFF
        np.testing.assert_array_equal(field.value, [1, 2, 3, 4])


class TestEncode(fixtures.TestCommon):
    """Turning typed values into raw bytes."""

    def setUp(self):
        super().setUp()
        self.image = exiftags.registry(Namespace.IMAGE)
        self.photo = exiftags.registry(Namespace.PHOTO)

    def test_ascii_gets_a_terminator(self):
        """
        SCENARIO:  Encode 'Nikon' for Image.Make.

        EXPECTED RESULT:  Six bytes, the last being NUL.  Decoding them gives
        back 'Nikon'.
        """
        field = self.image.make('Make', 'Nikon')
        raw = self.image.encode(field)
        self.assertEqual(len(raw), 6)
        self.assertEqual(raw[-1], 0)
        self.assertEqual(self.image.decode(MAKE, raw).value, 'Nikon')

    def test_byte_order(self):
        field = self.image.make(XRESOLUTION, Rational(72, 1))
        self.assertEqual(self.image.encode(field, endian='>'),
                         struct.pack('>II', 72, 1))
        self.assertEqual(self.image.encode(field, endian='<'),
                         struct.pack('<II', 72, 1))

    def test_rational_pairs(self):
        field = self.image.make('XResolution', (300, 1))
        self.assertEqual(field.value, Rational(300, 1))

        field = self.image.make('WhitePoint', [(3127, 10000), (3290, 10000)])
        self.assertEqual(field.value, (Rational(3127, 10000),
                                       Rational(3290, 10000)))

    def test_srational_pair(self):
        field = self.image.make('ExposureBiasValue', (-1, 3))
        self.assertEqual(field.value, SRational(-1, 3))

    def test_negative_rational(self):
        with self.assertRaises(EncodeError):
            self.image.make('XResolution', (-1, 2))

    def test_integer_out_of_range(self):
        with self.assertRaises(EncodeError):
            self.image.make('Orientation', 70000)
        with self.assertRaises(EncodeError):
            self.image.make('Orientation', -1)
        with self.assertRaises(EncodeError):
            self.image.make('XClipPathUnits', 40000)

    def test_float_out_of_range(self):
        """
        SCENARIO:  Encode a double too large for a FLOAT field.

        EXPECTED RESULT:  EncodeError rather than an infinity.  NaN and the
        infinities themselves are still accepted.
        """
        with self.assertRaises(EncodeError):
            self.image.make('ProfileToneCurve', [1e300, 0.5])
        with self.assertRaises(EncodeError):
            self.image.make('ProfileToneCurve', -1e39)

        field = self.image.make(
            'ProfileToneCurve', [float('nan'), float('inf'), -float('inf')]
        )
        self.assertEqual(field.count, 3)

        field = self.image.make('RawToPreviewGain', 1e300)
        self.assertEqual(field.value, 1e300)

    def test_whole_number_rational(self):
        """
        SCENARIO:  Give a bare integer to a RATIONAL field.

        EXPECTED RESULT:  The integer is taken as n/1.
        """
        field = self.image.make('XResolution', 72)
        self.assertEqual(field.value, Rational(72, 1))
        self.assertEqual(field.value.denominator, 1)

        field = self.image.make('ExposureBiasValue', -2)
        self.assertEqual(field.value, SRational(-2, 1))

    def test_not_a_rational(self):
        with self.assertRaises(EncodeError) as cm:
            self.image.make('XResolution', 'seventy-two')
        self.assertIn('(numerator, denominator)', str(cm.exception))

        with self.assertRaises(EncodeError):
            self.image.make('XResolution', [(1, 2, 3)])
        with self.assertRaises(EncodeError):
            self.image.make('XResolution', 72.5)

    def test_wrong_python_types(self):
        with self.assertRaises(EncodeError):
            self.image.make('Orientation', 1.5)
        with self.assertRaises(EncodeError):
            self.image.make('Orientation', 'one')
        with self.assertRaises(EncodeError):
            self.image.make('Make', 5)
        with self.assertRaises(EncodeError):
            self.photo.make('MakerNote', 'text')
        with self.assertRaises(EncodeError):
            self.image.make('StripOffsets', [])

    def test_integers_for_float_fields(self):
        field = self.image.make('RawToPreviewGain', 2)
        self.assertEqual(field.value, 2.0)

    def test_unknown_name(self):
        with self.assertRaises(KeyError):
            self.image.make('NoSuchField', 1)

    def test_strict_ascii(self):
        exiftags.set_option('parse.strict_ascii', True)
        with self.assertRaises(EncodeError):
            self.image.make('Make', 'Café')

    def test_lenient_ascii(self):
        field = self.image.make('Make', 'Café')
        self.assertEqual(self.image.encode(field), b'Caf\xc3\xa9\x00')
        self.assertEqual(field.count, 6)

    def test_wrong_registry(self):
        field = self.photo.make('ExposureTime', (1, 250))
        with self.assertRaises(EncodeError):
            self.image.encode(field)

    def test_array_values(self):
        field = self.image.make('BitsPerSample', (8, 8, 8))
        self.assertEqual(self.image.encode(field, endian='<'),
                         struct.pack('<3H', 8, 8, 8))
        np.testing.assert_array_equal(field.value, [8, 8, 8])

    def test_round_trip_array(self):
        field = self.image.make('StripOffsets', np.arange(1, 11))
        raw = self.image.encode(field, endian='>')
        self.assertEqual(
            self.image.decode(0x0111, raw, type_code=4, count=10, endian='>'),
            field
        )


class TestDefaults(fixtures.TestCommon):
    """Documented default values."""

    def test_defaults(self):
        image = exiftags.registry('Image')
        self.assertEqual(image.default('ResolutionUnit').value, 2)
        self.assertEqual(image.default('XResolution').value, Rational(72, 1))
        np.testing.assert_array_equal(
            image.default('YCbCrSubSampling').value, [2, 2]
        )
        self.assertIsNone(image.default('Make'))

        gps = exiftags.registry('GPSInfo')
        self.assertEqual(gps.default('GPSSpeedRef').value, 'K')
        self.assertEqual(gps.default(0x0000).count, 4)

    def test_unknown_field(self):
        with self.assertRaises(KeyError):
            exiftags.registry('Image').default('NoSuchField')


class TestCustomRegistry(unittest.TestCase):
    """Registries built from tables other than the compiled-in ones."""

    def setUp(self):
        exiftags.reset_option('all')

    def tearDown(self):
        exiftags.reset_option('all')

    def test_utf8(self):
        """
        SCENARIO:  A UTF8 field round trips and rejects a byte order mark.

        EXPECTED RESULT:  The text decodes, a BOM or invalid UTF-8 raises
        MalformedText.
        """
        tags = {
            'Title': {
                'number': 1,
                'type': Datatype.UTF8,
                'description': 'A title.',
            },
        }
        registry = TagRegistry(Namespace.PHOTO, tags)
        field = registry.make('Title', 'Grüße')
        raw = registry.encode(field)
        self.assertEqual(raw, 'Grüße'.encode('utf-8') + b'\x00')
        self.assertEqual(registry.decode(1, raw, type_code=129), field)

        with self.assertRaises(MalformedText):
            registry.decode(1, b'\xef\xbb\xbfabc\x00')
        with self.assertRaises(MalformedText):
            registry.decode(1, b'\xff\x00')

    def test_duplicate_codes(self):
        tags = {
            'A': {'number': 1, 'type': Datatype.SHORT, 'description': 'a'},
            'B': {'number': 1, 'type': Datatype.LONG, 'description': 'b'},
        }
        with self.assertRaises(ValueError):
            TagRegistry(Namespace.IMAGE, tags)

    def test_code_out_of_range(self):
        tags = {
            'A': {'number': 0x10000, 'type': 3, 'description': 'a'},
        }
        with self.assertRaises(ValueError):
            TagRegistry(Namespace.IMAGE, tags)

    def test_dangling_superseded_by(self):
        tags = {
            'A': {
                'number': 1, 'type': 3, 'description': 'a',
                'superseded_by': 'B',
            },
        }
        with self.assertRaises(ValueError):
            TagRegistry(Namespace.IMAGE, tags)
