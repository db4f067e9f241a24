"""Namespace-agnostic view of Exif fields.

A Tag wraps a FieldValue decoded by the registry of one namespace.  There is
exactly one Tag subclass per namespace, so callers may hold tags from any IFD
uniformly, ask for the namespace, or narrow to the namespace they care about:

    >>> import exiftags
    >>> tag = exiftags.decode('GPSInfo', 0x0005, b'\\x01')
    >>> tag.namespace
    <Namespace.GPSINFO: 'GPSInfo'>
    >>> tag.as_image() is None
    True
    >>> tag.as_gpsinfo().name
    'GPSAltitudeRef'
"""
# local imports
from .core import Namespace
from .registry import TagRegistry
from .tables import gpsinfo, image, iop, mpfinfo, photo, thumbnail

REGISTRIES = {
    Namespace.IMAGE: TagRegistry(Namespace.IMAGE, image.TAGS),
    Namespace.PHOTO: TagRegistry(Namespace.PHOTO, photo.TAGS),
    Namespace.IOP: TagRegistry(Namespace.IOP, iop.TAGS),
    Namespace.GPSINFO: TagRegistry(Namespace.GPSINFO, gpsinfo.TAGS),
    Namespace.MPFINFO: TagRegistry(Namespace.MPFINFO, mpfinfo.TAGS),
    Namespace.THUMBNAIL: TagRegistry(Namespace.THUMBNAIL, thumbnail.TAGS),
}


def registry(namespace):
    """Return the TagRegistry of a namespace.

    Parameters
    ----------
    namespace : Namespace or str
        Either a Namespace or its name, e.g. 'GPSInfo'.
    """
    return REGISTRIES[Namespace(namespace)]


def lookup(namespace, code):
    """Return the FieldDefinition of a code in a namespace, or None."""
    return registry(namespace).lookup(code)


def decode(namespace, code, raw, type_code=None, count=None, endian='='):
    """Decode the raw bytes of a field into a Tag.

    See TagRegistry.decode for the parameters and the exceptions raised.
    Unknown codes produce a Tag wrapping an UnknownField.
    """
    field = registry(namespace).decode(
        code, raw, type_code=type_code, count=count, endian=endian
    )
    return Tag.wrap(field)


def encode(tag, endian='='):
    """Serialize a Tag or a FieldValue back into raw bytes."""
    field = tag.field if isinstance(tag, Tag) else tag
    return registry(field.namespace).encode(field, endian=endian)


def make(namespace, code_or_name, value):
    """Construct a Tag from python data, see TagRegistry.make."""
    return Tag.wrap(registry(namespace).make(code_or_name, value))


class Tag(object):
    """A field from any namespace.

    Attributes
    ----------
    field : FieldValue
        The wrapped namespace-specific field.
    """
    namespace = None

    def __init__(self, field):
        if field.namespace != self.namespace:
            msg = (
                f"A {field.namespace} field cannot be held by a "
                f"{self.__class__.__name__}."
            )
            raise ValueError(msg)
        self.field = field

    @staticmethod
    def wrap(field):
        """Wrap a FieldValue in the Tag subclass of its namespace."""
        return _VARIANTS[field.namespace](field)

    @property
    def code(self):
        return self.field.code

    @property
    def name(self):
        return self.field.name

    @property
    def value(self):
        return self.field.value

    def as_image(self):
        return None

    def as_photo(self):
        return None

    def as_iop(self):
        return None

    def as_gpsinfo(self):
        return None

    def as_mpfinfo(self):
        return None

    def as_thumbnail(self):
        return None

    def __eq__(self, other):
        if not isinstance(other, Tag):
            return NotImplemented
        return type(self) is type(other) and self.field == other.field

    __hash__ = None

    def __repr__(self):
        return f"exiftags.tag.{self.__class__.__name__}({self.field!r})"

    def __str__(self):
        return str(self.field)


class ImageTag(Tag):
    """A field of the primary image IFD."""
    namespace = Namespace.IMAGE

    def as_image(self):
        return self.field


class PhotoTag(Tag):
    """A field of the Exif IFD."""
    namespace = Namespace.PHOTO

    def as_photo(self):
        return self.field


class IopTag(Tag):
    """A field of the Interoperability IFD."""
    namespace = Namespace.IOP

    def as_iop(self):
        return self.field


class GPSInfoTag(Tag):
    """A field of the GPS Info IFD."""
    namespace = Namespace.GPSINFO

    def as_gpsinfo(self):
        return self.field


class MpfInfoTag(Tag):
    """A field of a Multi-Picture Format IFD."""
    namespace = Namespace.MPFINFO

    def as_mpfinfo(self):
        return self.field


class ThumbnailTag(Tag):
    """A field of the thumbnail IFD."""
    namespace = Namespace.THUMBNAIL

    def as_thumbnail(self):
        return self.field


_VARIANTS = {
    Namespace.IMAGE: ImageTag,
    Namespace.PHOTO: PhotoTag,
    Namespace.IOP: IopTag,
    Namespace.GPSINFO: GPSInfoTag,
    Namespace.MPFINFO: MpfInfoTag,
    Namespace.THUMBNAIL: ThumbnailTag,
}
