"""
Tests for the compiled-in field tables of every namespace.
"""
# Standard library imports ...
import warnings

# Local imports ...
import exiftags
from exiftags import (
    Datatype, DecodeError, FieldValue, Namespace, UnknownField
)
from exiftags.tables import image, thumbnail
from . import fixtures


class TestTables(fixtures.TestCommon):
    """Properties that every registry must have."""

    def test_sizes(self):
        expected = {
            Namespace.IMAGE: 256,
            Namespace.PHOTO: 89,
            Namespace.IOP: 5,
            Namespace.GPSINFO: 32,
            Namespace.MPFINFO: 19,
            Namespace.THUMBNAIL: 31,
        }
        for namespace, size in expected.items():
            with self.subTest(namespace=namespace):
                self.assertEqual(len(exiftags.registry(namespace)), size)

    def test_every_namespace_has_a_registry(self):
        self.assertEqual(set(exiftags.REGISTRIES), set(Namespace))

    def test_definitions_are_well_formed(self):
        """
        SCENARIO:  Inspect every definition of every namespace.

        EXPECTED RESULT:  Codes fit in 16 bits, datatypes are known, names
        resolve back to the same definition, and fixed counts are positive.
        """
        for namespace, registry in exiftags.REGISTRIES.items():
            for definition in registry:
                with self.subTest(namespace=namespace, name=definition.name):
                    self.assertTrue(0 <= definition.code <= 0xFFFF)
                    self.assertIsInstance(definition.datatype, Datatype)
                    self.assertTrue(definition.description)
                    self.assertIs(
                        registry.lookup_name(definition.name), definition
                    )
                    if definition.count is not None:
                        self.assertGreater(definition.count, 0)

    def test_thumbnail_is_a_subset_of_image(self):
        """
        SCENARIO:  IFD1 reuses the codes of IFD0.

        EXPECTED RESULT:  Every thumbnail field has the same code and type
        as the image field of the same name.
        """
        for name, entry in thumbnail.TAGS.items():
            with self.subTest(name=name):
                self.assertEqual(entry["number"], image.TAGS[name]["number"])
                self.assertEqual(entry["type"], image.TAGS[name]["type"])

    def test_only_subfile_type_is_deprecated(self):
        deprecated = [
            (namespace, definition.name)
            for namespace, registry in exiftags.REGISTRIES.items()
            for definition in registry
            if definition.deprecated
        ]
        self.assertEqual(deprecated, [(Namespace.IMAGE, 'SubfileType')])

    def test_pointer_fields(self):
        image_registry = exiftags.registry(Namespace.IMAGE)
        self.assertEqual(image_registry.lookup(0x8769).name, 'ExifTag')
        self.assertEqual(image_registry.lookup(0x8825).name, 'GPSTag')
        self.assertEqual(
            exiftags.lookup(Namespace.PHOTO, 0xA005).name,
            'InteroperabilityTag'
        )


class TestRoundTrip(fixtures.TestCommon):
    """Encode followed by decode reproduces the value."""

    def test_every_field(self):
        """
        SCENARIO:  Build a value for every field of every namespace, encode
        it in both byte orders, and decode the bytes with the type code and
        count that an IFD entry would carry.

        EXPECTED RESULT:  The decoded field equals the original and no
        warnings are issued.
        """
        for namespace, registry in exiftags.REGISTRIES.items():
            for definition in registry:
                value = fixtures.synthetic_value(definition)
                for endian in ('<', '>'):
                    with self.subTest(
                        namespace=namespace, name=definition.name,
                        endian=endian
                    ):
                        with warnings.catch_warnings():
                            warnings.simplefilter('error')
                            field = registry.make(definition.code, value)
                            raw = registry.encode(field, endian=endian)
                            actual = registry.decode(
                                definition.code, raw,
                                type_code=int(definition.datatype),
                                count=field.count, endian=endian
                            )
                        self.assertEqual(actual, field)
                        self.assertEqual(actual.count, field.count)
                        self.assertEqual(
                            len(raw), field.count * definition.width
                        )

    def test_defaults(self):
        """
        SCENARIO:  Construct the documented default of every field that has
        one.

        EXPECTED RESULT:  Each default is a valid value of its field, with
        the documented count.
        """
        for namespace, registry in exiftags.REGISTRIES.items():
            for definition in registry:
                if definition.default is None:
                    continue
                with self.subTest(namespace=namespace, name=definition.name):
                    with warnings.catch_warnings():
                        warnings.simplefilter('error')
                        field = registry.default(definition.code)
                    self.assertIsInstance(field, FieldValue)
                    if definition.count is not None:
                        self.assertEqual(field.count, definition.count)


class TestUnknownCodes(fixtures.TestCommon):
    """No code in the 16-bit range can crash a registry."""

    def test_full_code_range(self):
        """
        SCENARIO:  Decode eight bytes under every possible code of every
        namespace.

        EXPECTED RESULT:  Unknown codes yield an UnknownField holding the
        bytes, known codes yield a FieldValue or a DecodeError.
        """
        raw = b'\x00\x01\x00\x01\x00\x01\x00\x01'
        with warnings.catch_warnings():
            warnings.simplefilter('ignore')
            for namespace, registry in exiftags.REGISTRIES.items():
                unknown = 0
                for code in range(0x10000):
                    if code not in registry:
                        field = registry.decode(code, raw)
                        self.assertIsInstance(field, UnknownField)
                        self.assertEqual(field.value, raw)
                        unknown += 1
                        continue
                    try:
                        field = registry.decode(code, raw)
                    except DecodeError:
                        continue
                    self.assertIsInstance(field, FieldValue)
                    self.assertEqual(field.code, code)
                self.assertEqual(unknown, 0x10000 - len(registry))
