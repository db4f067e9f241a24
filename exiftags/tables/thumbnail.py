"""Fields of the thumbnail IFD (IFD1).

IFD1 uses the TIFF field codes of IFD0, restricted to the fields that the
Exif standard allows for describing a thumbnail image.
"""
from .image import TAGS as _IMAGE_TAGS

_THUMBNAIL_FIELDS = (
    "NewSubfileType",
    "ImageWidth",
    "ImageLength",
    "BitsPerSample",
    "Compression",
    "PhotometricInterpretation",
    "ImageDescription",
    "Make",
    "Model",
    "StripOffsets",
    "Orientation",
    "SamplesPerPixel",
    "RowsPerStrip",
    "StripByteCounts",
    "XResolution",
    "YResolution",
    "PlanarConfiguration",
    "ResolutionUnit",
    "TransferFunction",
    "Software",
    "DateTime",
    "Artist",
    "WhitePoint",
    "PrimaryChromaticities",
    "JPEGInterchangeFormat",
    "JPEGInterchangeFormatLength",
    "YCbCrCoefficients",
    "YCbCrSubSampling",
    "YCbCrPositioning",
    "ReferenceBlackWhite",
    "Copyright",
)

TAGS = {name: _IMAGE_TAGS[name] for name in _THUMBNAIL_FIELDS}
