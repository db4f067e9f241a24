"""Per-namespace tag registries.

A TagRegistry is built once from a compiled-in table of field definitions.
It maps a numeric tag code to its FieldDefinition and turns the raw bytes of
a field into a typed FieldValue (and back again).

The registry never reads files and never resolves the byte order of a TIFF
stream; the caller hands over the bytes of one field together with the byte
order they are in.
"""
# standard library imports
import collections
import logging
import numbers
import warnings

# 3rd party library imports
import numpy as np

# local imports
from .core import (
    Namespace, TypeMismatch, Truncated, MalformedText, EncodeError
)
from .options import get_option
from .types import (
    Datatype, DATATYPE2FMT, FLOAT_TYPES, RATIONAL_TYPES, TEXT_TYPES
)

logger = logging.getLogger('exiftags')

_ENDIANS = ('=', '<', '>')


class FieldDefinition(collections.namedtuple(
    'FieldDefinition',
    [
        'code', 'name', 'datatype', 'description', 'count', 'default',
        'superseded_by',
    ]
)):
    """Compiled-in description of one field.

    Attributes
    ----------
    code : int
        16-bit tag code, unique inside the namespace.
    name : str
        Symbolic name of the field.
    datatype : Datatype
        The declared primitive type of every element of the field.
    description : str
        Human readable meaning of the field.
    count : int or None
        Fixed number of elements, if the standards fix one.
    default : object or None
        Value to assume when the field is absent, if one is documented.
    superseded_by : str or None
        Name of the field that replaces this deprecated field.
    """
    __slots__ = ()

    @property
    def deprecated(self):
        return self.superseded_by is not None

    @property
    def width(self):
        """Number of bytes of a single element."""
        return DATATYPE2FMT[self.datatype]["nbytes"]


class FieldValue(object):
    """A typed field decoded according to its registry definition.

    Attributes
    ----------
    namespace : Namespace
        The namespace that the field was decoded in.
    definition : FieldDefinition
        Registry definition of the field.
    value : object
        The decoded payload.  Text fields hold a str, UNDEFINED fields hold
        bytes, a single numeric element is a python scalar (or a Rational /
        SRational), several numeric elements are a numpy array (a tuple for
        the rational types).
    """

    def __init__(self, namespace, definition, value):
        self.namespace = namespace
        self.definition = definition
        self.value = value

    @property
    def code(self):
        return self.definition.code

    @property
    def name(self):
        return self.definition.name

    @property
    def datatype(self):
        return self.definition.datatype

    @property
    def count(self):
        """The count of the field as it would be written in a TIFF IFD."""
        if self.datatype in TEXT_TYPES:
            return len(self._text_bytes()) + 1
        if self.datatype == Datatype.UNDEFINED:
            return len(self.value)
        if self.datatype in RATIONAL_TYPES:
            return len(self.value) if isinstance(self.value, tuple) else 1
        return np.size(self.value)

    def _text_bytes(self):
        # Lenient ASCII fields may hold text that is not pure ASCII.
        return self.value.encode('utf-8')

    def __eq__(self, other):
        if not isinstance(other, FieldValue):
            return NotImplemented
        if isinstance(other, UnknownField):
            return False
        return (
            self.namespace == other.namespace
            and self.code == other.code
            and _payload_equal(self.datatype, self.value, other.value)
        )

    __hash__ = None

    def __repr__(self):
        msg = (
            f"exiftags.registry.FieldValue(namespace={self.namespace}, "
            f"name='{self.name}', code=0x{self.code:04X}, "
            f"datatype={self.datatype.name}, value={self.value!r})"
        )
        return msg

    def __str__(self):
        title = (
            f"{self.namespace}.{self.name} (0x{self.code:04X}, "
            f"{self.datatype.name})"
        )
        if get_option('print.short'):
            return title

        text = f"{title}:  {_format_payload(self.datatype, self.value)}"
        if self.definition.deprecated:
            text += f"  [deprecated, use {self.definition.superseded_by}]"
        if get_option('print.description'):
            text += f"\n    {self.definition.description}"
        return text


class UnknownField(FieldValue):
    """A field whose code is not in the registry of its namespace.

    The raw bytes are retained so that the field can be written back
    unchanged.

    Attributes
    ----------
    namespace : Namespace
        The namespace that the field was found in.
    value : bytes
        The raw, undecoded bytes of the field.
    type_code : int or None
        The type code found on the wire, if the caller supplied it.
    wire_count : int or None
        The count found on the wire, if the caller supplied it.
    """

    def __init__(self, namespace, code, value, type_code=None, count=None):
        super().__init__(namespace, None, bytes(value))
        self._code = code
        self.type_code = type_code
        self.wire_count = count

    @property
    def code(self):
        return self._code

    @property
    def name(self):
        return None

    @property
    def datatype(self):
        return None

    @property
    def count(self):
        if self.wire_count is not None:
            return self.wire_count
        return len(self.value)

    def __eq__(self, other):
        if not isinstance(other, FieldValue):
            return NotImplemented
        if not isinstance(other, UnknownField):
            return False
        return (
            self.namespace == other.namespace
            and self.code == other.code
            and self.type_code == other.type_code
            and self.value == other.value
        )

    def __repr__(self):
        msg = (
            f"exiftags.registry.UnknownField(namespace={self.namespace}, "
            f"code=0x{self.code:04X}, type_code={self.type_code}, "
            f"value=<byte array {len(self.value)} elements>)"
        )
        return msg

    def __str__(self):
        title = f"{self.namespace}.0x{self.code:04X} (unknown)"
        if get_option('print.short'):
            return title
        return f"{title}:  {len(self.value)} bytes"


class TagRegistry(object):
    """Registry of the fields of one namespace.

    Attributes
    ----------
    namespace : Namespace
        The namespace served by this registry.
    """

    def __init__(self, namespace, tags):
        """
        Parameters
        ----------
        namespace : Namespace
            The namespace served by this registry.
        tags : dict
            Maps field names to dictionaries with keys "number", "type",
            "description" and optionally "count", "default" and
            "superseded_by".
        """
        self.namespace = Namespace(namespace)
        self._by_code = {}
        self._by_name = {}

        for name, entry in tags.items():
            definition = FieldDefinition(
                code=entry["number"],
                name=name,
                datatype=Datatype(entry["type"]),
                description=entry["description"],
                count=entry.get("count"),
                default=entry.get("default"),
                superseded_by=entry.get("superseded_by"),
            )
            if not 0 <= definition.code <= 0xFFFF:
                msg = f"{self.namespace}.{name} has an invalid tag code."
                raise ValueError(msg)
            if definition.code in self._by_code:
                other = self._by_code[definition.code].name
                msg = (
                    f"{self.namespace}.{name} and {self.namespace}.{other} "
                    f"share the tag code 0x{definition.code:04X}."
                )
                raise ValueError(msg)
            self._by_code[definition.code] = definition
            self._by_name[name.lower()] = definition

        for definition in self._by_code.values():
            superseded_by = definition.superseded_by
            if (
                superseded_by is not None
                and superseded_by.lower() not in self._by_name
            ):
                msg = (
                    f"{self.namespace}.{definition.name} is superseded by an "
                    f"unknown field ({superseded_by})."
                )
                raise ValueError(msg)

    def __repr__(self):
        return f"exiftags.registry.TagRegistry(namespace={self.namespace})"

    def __len__(self):
        return len(self._by_code)

    def __iter__(self):
        return iter(sorted(self._by_code.values()))

    def __contains__(self, code):
        return code in self._by_code

    def codes(self):
        """Sorted list of the known tag codes."""
        return sorted(self._by_code)

    def lookup(self, code):
        """Return the definition of a tag code, or None if it is unknown."""
        return self._by_code.get(code)

    def lookup_name(self, name):
        """Return the definition of a field by name, ignoring case.

        None is returned if the name is unknown.
        """
        return self._by_name.get(name.lower())

    def _resolve(self, code_or_name):
        if isinstance(code_or_name, str):
            definition = self.lookup_name(code_or_name)
        else:
            definition = self.lookup(code_or_name)
        if definition is None:
            msg = f"{code_or_name} is not a recognized {self.namespace} field."
            raise KeyError(msg)
        return definition

    def default(self, code_or_name):
        """Return the documented default of a field as a FieldValue.

        None is returned if no default is documented.  A KeyError is raised
        if the field is unknown.
        """
        definition = self._resolve(code_or_name)
        if definition.default is None:
            return None
        return self.make(definition.code, definition.default)

    def decode(self, code, raw, type_code=None, count=None, endian='='):
        """Interpret the raw bytes of a field.

        Parameters
        ----------
        code : int
            Tag code of the field.
        raw : bytes-like
            The bytes of the field payload.
        type_code : int, optional
            The type code read from the IFD entry.  If given, it must agree
            with the declared type of the field.
        count : int, optional
            The count read from the IFD entry.  If given, exactly
            count * width bytes are interpreted and any further bytes, such
            as the padding of an inline value, are ignored.
        endian : str, optional
            Byte order of the raw bytes, one of '=' (native), '<' or '>'.

        Returns
        -------
        FieldValue
            An UnknownField holding the raw bytes if the code is not known.

        Raises
        ------
        TypeMismatch
            The type code disagrees with the declared type.
        Truncated
            There are fewer bytes than required by the type and count, or
            the bytes do not divide evenly into elements.
        MalformedText
            A text payload violates the text policy.
        """
        if endian not in _ENDIANS:
            raise ValueError(f"Invalid byte order {endian!r}.")
        if count is not None and count < 0:
            raise ValueError(f"Invalid count {count}.")

        raw = bytes(raw)
        definition = self.lookup(code)
        if definition is None:
            logger.debug(
                f"tag #: {code} is not a known {self.namespace} tag, keeping "
                f"{len(raw)} raw bytes"
            )
            return UnknownField(
                self.namespace, code, raw, type_code=type_code, count=count
            )

        datatype = definition.datatype
        if type_code is not None and type_code != datatype:
            try:
                wire_name = Datatype(type_code).name
            except ValueError:
                wire_name = 'unknown'
            msg = (
                f"{self.namespace}.{definition.name} is declared as "
                f"{datatype.name} ({int(datatype)}), but the field type code "
                f"is {type_code} ({wire_name})."
            )
            raise TypeMismatch(
                msg, namespace=self.namespace, code=code,
                declared_type_code=int(datatype), expected=int(datatype),
                actual=type_code
            )

        width = definition.width
        if count is not None:
            nbytes = count * width
            if len(raw) < nbytes:
                msg = (
                    f"{self.namespace}.{definition.name} needs {nbytes} bytes "
                    f"for {count} {datatype.name} element(s), but only "
                    f"{len(raw)} bytes were given."
                )
                raise Truncated(
                    msg, namespace=self.namespace, code=code,
                    declared_type_code=int(datatype), expected=nbytes,
                    actual=len(raw)
                )
            raw = raw[:nbytes]

        if datatype in TEXT_TYPES:
            field = FieldValue(
                self.namespace, definition, self._decode_text(definition, raw)
            )
            self._check_count(field)
            return field

        if datatype == Datatype.UNDEFINED:
            field = FieldValue(self.namespace, definition, raw)
            self._check_count(field)
            return field

        if len(raw) < width or len(raw) % width != 0:
            if len(raw) < width:
                expected = width
            else:
                expected = (len(raw) // width + 1) * width
            msg = (
                f"{self.namespace}.{definition.name} holds {datatype.name} "
                f"elements of {width} bytes each, but {len(raw)} bytes were "
                f"given."
            )
            raise Truncated(
                msg, namespace=self.namespace, code=code,
                declared_type_code=int(datatype), expected=expected,
                actual=len(raw)
            )

        payload = _decode_numeric(datatype, raw, endian)
        field = FieldValue(self.namespace, definition, payload)
        self._check_count(field)
        return field

    def _check_count(self, field):
        expected = field.definition.count
        if expected is None or not get_option('parse.check_count'):
            return
        if field.count != expected:
            msg = (
                f"{self.namespace}.{field.name} should have {expected} "
                f"element(s), but {field.count} were decoded."
            )
            warnings.warn(msg, UserWarning)

    def _decode_text(self, definition, raw):
        """Strip a single terminating NUL and decode the text."""
        if raw.endswith(b'\x00'):
            raw = raw[:-1]

        if definition.datatype == Datatype.UTF8:
            if raw.startswith(b'\xef\xbb\xbf'):
                self._malformed(definition, raw, "starts with a BOM")
            try:
                return raw.decode('utf-8')
            except UnicodeDecodeError:
                self._malformed(definition, raw, "is not valid UTF-8")

        try:
            return raw.decode('ascii')
        except UnicodeDecodeError:
            if get_option('parse.strict_ascii'):
                self._malformed(definition, raw, "is not 7-bit ASCII")

        logger.debug(
            f"{self.namespace}.{definition.name} is not 7-bit ASCII, "
            f"interpreting as UTF-8"
        )
        try:
            return raw.decode('utf-8')
        except UnicodeDecodeError:
            self._malformed(definition, raw, "is neither ASCII nor UTF-8")

    def _malformed(self, definition, raw, reason):
        msg = f"The text of {self.namespace}.{definition.name} {reason}."
        raise MalformedText(
            msg, namespace=self.namespace, code=definition.code,
            declared_type_code=int(definition.datatype), actual=len(raw)
        )

    def encode(self, field, endian='='):
        """Serialize a FieldValue back into raw bytes.

        Text fields are terminated with a single NUL.  An UnknownField is
        returned unchanged.

        Parameters
        ----------
        field : FieldValue
            A value produced by this registry.
        endian : str, optional
            Byte order of the produced bytes, one of '=' (native), '<' or '>'.

        Returns
        -------
        bytes
        """
        if endian not in _ENDIANS:
            raise ValueError(f"Invalid byte order {endian!r}.")

        if field.namespace != self.namespace:
            msg = (
                f"A {field.namespace} field cannot be encoded by the "
                f"{self.namespace} registry."
            )
            raise EncodeError(msg, namespace=field.namespace, code=field.code)

        if isinstance(field, UnknownField):
            return field.value

        definition = self.lookup(field.code)
        if definition is None:
            msg = f"{field.code} is not a known {self.namespace} tag."
            raise EncodeError(msg, namespace=self.namespace, code=field.code)

        return self._pack(definition, field.value, endian)

    def make(self, code_or_name, value):
        """Construct a FieldValue from python data.

        The value is validated against the declared type of the field and
        normalized the same way decode normalizes it, so that
        registry.decode(code, registry.encode(field)) == field.

        Parameters
        ----------
        code_or_name : int or str
            Tag code or field name.
        value : object
            A str for text fields, bytes for UNDEFINED fields, a number or a
            sequence of numbers for numeric fields.  Rational fields take
            Rational / SRational instances, (numerator, denominator) pairs,
            or whole numbers (n/1).  A tuple of exactly two integers is read
            as a single pair.

        Raises
        ------
        KeyError
            If the field is not known.
        EncodeError
            If the value cannot be represented by the declared type.
        """
        definition = self._resolve(code_or_name)
        raw = self._pack(definition, value, '=')
        return self.decode(definition.code, raw)

    def _pack(self, definition, value, endian):
        datatype = definition.datatype

        if datatype in TEXT_TYPES:
            return self._pack_text(definition, value) + b'\x00'

        if datatype == Datatype.UNDEFINED:
            if not isinstance(value, (bytes, bytearray, memoryview)):
                self._unencodable(definition, value, "bytes are required")
            return bytes(value)

        if datatype in RATIONAL_TYPES:
            values = self._rational_components(definition, value)
        else:
            values = value

        try:
            data = np.asarray(values)
        except (TypeError, ValueError):
            self._unencodable(definition, value, "not a numeric value")

        if data.size == 0:
            self._unencodable(definition, value, "at least one element")

        nptype = DATATYPE2FMT[datatype]["nptype"]
        if datatype in FLOAT_TYPES:
            if data.dtype.kind not in 'iuf':
                self._unencodable(definition, value, "not a real number")
            if datatype == Datatype.FLOAT:
                # nan and inf are representable, large finite values are not
                finite = np.abs(data[np.isfinite(data)])
                if finite.size and finite.max() > np.finfo(np.float32).max:
                    self._unencodable(
                        definition, value, "outside of the FLOAT range"
                    )
        else:
            if data.dtype.kind not in 'iu':
                self._unencodable(definition, value, "not an integer")
            info = np.iinfo(nptype)
            if data.min() < info.min or data.max() > info.max:
                self._unencodable(
                    definition, value,
                    f"outside of [{info.min}, {info.max}]"
                )

        dtype = np.dtype(nptype).newbyteorder(endian)
        return data.ravel().astype(dtype).tobytes()

    def _rational_components(self, definition, value):
        """Flatten rationals into numerator, denominator, ... integers."""
        cls = RATIONAL_TYPES[definition.datatype]
        if isinstance(value, tuple) and len(value) == 2 and all(
            isinstance(item, (int, np.integer)) for item in value
        ):
            # A single (numerator, denominator) pair.
            value = [value]
        elif not isinstance(value, (tuple, list, np.ndarray)):
            value = [value]

        components = []
        for item in value:
            if isinstance(item, (numbers.Integral, np.integer)):
                # A whole number is n/1.
                item = (item, 1)
            if not isinstance(item, cls):
                try:
                    numerator, denominator = item
                except (TypeError, ValueError):
                    self._unencodable(
                        definition, item,
                        f"a {cls.__name__} or a (numerator, denominator) "
                        f"pair is required"
                    )
                try:
                    item = cls(numerator, denominator)
                except (TypeError, ValueError) as error:
                    self._unencodable(definition, item, str(error))
            components.extend([item.numerator, item.denominator])
        return components

    def _pack_text(self, definition, value):
        if not isinstance(value, str):
            self._unencodable(definition, value, "a str is required")

        if definition.datatype == Datatype.ASCII:
            try:
                return value.encode('ascii')
            except UnicodeEncodeError:
                if get_option('parse.strict_ascii'):
                    self._unencodable(definition, value, "not 7-bit ASCII")

        return value.encode('utf-8')

    def _unencodable(self, definition, value, reason):
        msg = (
            f"{value!r} cannot be encoded as {self.namespace}."
            f"{definition.name} ({definition.datatype.name}):  {reason}."
        )
        raise EncodeError(
            msg, namespace=self.namespace, code=definition.code,
            declared_type_code=int(definition.datatype)
        )


def _decode_numeric(datatype, raw, endian):
    """Interpret bytes as one or more numeric elements.

    If just a single value, then return a scalar instead of an array.
    """
    nptype = DATATYPE2FMT[datatype]["nptype"]
    dtype = np.dtype(nptype).newbyteorder(endian)

    # astype copies into native order so the payload owns its memory
    data = np.frombuffer(raw, dtype=dtype).astype(nptype)

    if datatype in RATIONAL_TYPES:
        cls = RATIONAL_TYPES[datatype]
        payload = tuple(
            cls(int(numerator), int(denominator))
            for numerator, denominator in data.reshape(-1, 2)
        )
        if len(payload) == 1:
            return payload[0]
        return payload

    if data.size == 1:
        return data[0].item()
    return data


def _payload_equal(datatype, a, b):
    if datatype in TEXT_TYPES or datatype == Datatype.UNDEFINED:
        return a == b

    if datatype in RATIONAL_TYPES:
        a = a if isinstance(a, tuple) else (a,)
        b = b if isinstance(b, tuple) else (b,)
        return len(a) == len(b) and all(x == y for x, y in zip(a, b))

    a = np.asarray(a)
    b = np.asarray(b)
    return np.array_equal(a, b, equal_nan=datatype in FLOAT_TYPES)


def _format_payload(datatype, value):
    if datatype in TEXT_TYPES:
        return repr(value)
    if datatype == Datatype.UNDEFINED:
        if len(value) > 16:
            return f"{len(value)} bytes"
        return repr(value)
    if datatype in RATIONAL_TYPES:
        if isinstance(value, tuple):
            return '[' + ', '.join(str(item) for item in value) + ']'
        return str(value)
    return str(value)
