"""Fields of the primary image IFD (IFD0).

Covers the baseline and extension fields of TIFF 6.0, the TIFF/EP and Exif
fields that some writers place in IFD0, the Windows XP fields, the Sony lens
correction fields, and the DNG 1.7 fields.
"""
from ..types import Datatype, Rational, SRational

TAGS = {
    "ProcessingSoftware": {
        "number": 0x000B,
        "type": Datatype.ASCII,
        "description": (
            "The name and version of the software used to post-process the "
            "picture."
        ),
    },
    "NewSubfileType": {
        "number": 0x00FE,
        "type": Datatype.LONG,
        "description": (
            "A general indication of the kind of data contained in this "
            "subfile."
        ),
        "count": 1,
        "default": 0,
    },
    "SubfileType": {
        "number": 0x00FF,
        "type": Datatype.SHORT,
        "description": (
            "A general indication of the kind of data contained in this "
            "subfile."
        ),
        "count": 1,
        "superseded_by": "NewSubfileType",
    },
    "ImageWidth": {
        "number": 0x0100,
        "type": Datatype.LONG,
        "description": (
            "The number of columns of image data, equal to the number of "
            "pixels per row."
        ),
        "count": 1,
    },
    "ImageLength": {
        "number": 0x0101,
        "type": Datatype.LONG,
        "description": "The number of rows of image data.",
        "count": 1,
    },
    "BitsPerSample": {
        "number": 0x0102,
        "type": Datatype.SHORT,
        "description": "The number of bits per image component.",
    },
    "Compression": {
        "number": 0x0103,
        "type": Datatype.SHORT,
        "description": "The compression scheme used for the image data.",
        "count": 1,
    },
    "PhotometricInterpretation": {
        "number": 0x0106,
        "type": Datatype.SHORT,
        "description": "The pixel composition.",
        "count": 1,
    },
    "Thresholding": {
        "number": 0x0107,
        "type": Datatype.SHORT,
        "description": (
            "For black and white TIFF files that represent shades of gray, "
            "the technique used to convert from gray to black and white "
            "pixels."
        ),
        "count": 1,
        "default": 1,
    },
    "CellWidth": {
        "number": 0x0108,
        "type": Datatype.SHORT,
        "description": (
            "The width of the dithering or halftoning matrix used to create "
            "a dithered or halftoned bilevel file."
        ),
        "count": 1,
    },
    "CellLength": {
        "number": 0x0109,
        "type": Datatype.SHORT,
        "description": (
            "The length of the dithering or halftoning matrix used to create "
            "a dithered or halftoned bilevel file."
        ),
        "count": 1,
    },
    "FillOrder": {
        "number": 0x010A,
        "type": Datatype.SHORT,
        "description": "The logical order of bits within a byte.",
        "count": 1,
        "default": 1,
    },
    "DocumentName": {
        "number": 0x010D,
        "type": Datatype.ASCII,
        "description": (
            "The name of the document from which this image was scanned."
        ),
    },
    "ImageDescription": {
        "number": 0x010E,
        "type": Datatype.ASCII,
        "description": "A character string giving the title of the image.",
    },
    "Make": {
        "number": 0x010F,
        "type": Datatype.ASCII,
        "description": "The manufacturer of the recording equipment.",
    },
    "Model": {
        "number": 0x0110,
        "type": Datatype.ASCII,
        "description": "The model name or model number of the equipment.",
    },
    "StripOffsets": {
        "number": 0x0111,
        "type": Datatype.LONG,
        "description": "For each strip, the byte offset of that strip.",
    },
    "Orientation": {
        "number": 0x0112,
        "type": Datatype.SHORT,
        "description": (
            "The image orientation viewed in terms of rows and columns."
        ),
        "count": 1,
        "default": 1,
    },
    "SamplesPerPixel": {
        "number": 0x0115,
        "type": Datatype.SHORT,
        "description": "The number of components per pixel.",
        "count": 1,
        "default": 1,
    },
    "RowsPerStrip": {
        "number": 0x0116,
        "type": Datatype.LONG,
        "description": "The number of rows per strip.",
        "count": 1,
        "default": 4294967295,
    },
    "StripByteCounts": {
        "number": 0x0117,
        "type": Datatype.LONG,
        "description": "The total number of bytes in each strip.",
    },
    "XResolution": {
        "number": 0x011A,
        "type": Datatype.RATIONAL,
        "description": (
            "The number of pixels per ResolutionUnit in the ImageWidth "
            "direction."
        ),
        "count": 1,
        "default": Rational(72, 1),
    },
    "YResolution": {
        "number": 0x011B,
        "type": Datatype.RATIONAL,
        "description": (
            "The number of pixels per ResolutionUnit in the ImageLength "
            "direction."
        ),
        "count": 1,
        "default": Rational(72, 1),
    },
    "PlanarConfiguration": {
        "number": 0x011C,
        "type": Datatype.SHORT,
        "description": (
            "Indicates whether pixel components are recorded in a chunky or "
            "planar format."
        ),
        "count": 1,
        "default": 1,
    },
    "PageName": {
        "number": 0x011D,
        "type": Datatype.ASCII,
        "description": (
            "The name of the page from which this image was scanned."
        ),
    },
    "XPosition": {
        "number": 0x011E,
        "type": Datatype.RATIONAL,
        "description": "X position of the image.",
        "count": 1,
    },
    "YPosition": {
        "number": 0x011F,
        "type": Datatype.RATIONAL,
        "description": "Y position of the image.",
        "count": 1,
    },
    "GrayResponseUnit": {
        "number": 0x0122,
        "type": Datatype.SHORT,
        "description": (
            "The precision of the information contained in the "
            "GrayResponseCurve."
        ),
        "count": 1,
        "default": 2,
    },
    "GrayResponseCurve": {
        "number": 0x0123,
        "type": Datatype.SHORT,
        "description": (
            "For grayscale data, the optical density of each possible pixel "
            "value."
        ),
    },
    "T4Options": {
        "number": 0x0124,
        "type": Datatype.LONG,
        "description": "T.4-encoding options.",
        "count": 1,
        "default": 0,
    },
    "T6Options": {
        "number": 0x0125,
        "type": Datatype.LONG,
        "description": "T.6-encoding options.",
        "count": 1,
        "default": 0,
    },
    "ResolutionUnit": {
        "number": 0x0128,
        "type": Datatype.SHORT,
        "description": "The unit for measuring XResolution and YResolution.",
        "count": 1,
        "default": 2,
    },
    "PageNumber": {
        "number": 0x0129,
        "type": Datatype.SHORT,
        "description": (
            "The page number of the page from which this image was scanned."
        ),
        "count": 2,
    },
    "TransferFunction": {
        "number": 0x012D,
        "type": Datatype.SHORT,
        "description": (
            "A transfer function for the image, described in tabular style."
        ),
    },
    "Software": {
        "number": 0x0131,
        "type": Datatype.ASCII,
        "description": (
            "This tag records the name and version of the software or "
            "firmware of the camera or image input device used to generate "
            "the image."
        ),
    },
    "DateTime": {
        "number": 0x0132,
        "type": Datatype.ASCII,
        "description": "The date and time of image creation.",
    },
    "Artist": {
        "number": 0x013B,
        "type": Datatype.ASCII,
        "description": (
            "This tag records the name of the camera owner, photographer or "
            "image creator."
        ),
    },
    "HostComputer": {
        "number": 0x013C,
        "type": Datatype.ASCII,
        "description": (
            "This tag records information about the host computer used to "
            "generate the image."
        ),
    },
    "Predictor": {
        "number": 0x013D,
        "type": Datatype.SHORT,
        "description": (
            "A predictor is a mathematical operator that is applied to the "
            "image data before an encoding scheme is applied."
        ),
        "count": 1,
        "default": 1,
    },
    "WhitePoint": {
        "number": 0x013E,
        "type": Datatype.RATIONAL,
        "description": "The chromaticity of the white point of the image.",
        "count": 2,
    },
    "PrimaryChromaticities": {
        "number": 0x013F,
        "type": Datatype.RATIONAL,
        "description": (
            "The chromaticity of the three primary colors of the image."
        ),
        "count": 6,
    },
    "ColorMap": {
        "number": 0x0140,
        "type": Datatype.SHORT,
        "description": "A color map for palette color images.",
    },
    "HalftoneHints": {
        "number": 0x0141,
        "type": Datatype.SHORT,
        "description": (
            "The purpose of the HalftoneHints field is to convey to the "
            "halftone function the range of gray levels within a "
            "colorimetrically-specified image that should retain tonal "
            "detail."
        ),
        "count": 2,
    },
    "TileWidth": {
        "number": 0x0142,
        "type": Datatype.LONG,
        "description": "The tile width in pixels.",
        "count": 1,
    },
    "TileLength": {
        "number": 0x0143,
        "type": Datatype.LONG,
        "description": "The tile length (height) in pixels.",
        "count": 1,
    },
    "TileOffsets": {
        "number": 0x0144,
        "type": Datatype.SHORT,
        "description": (
            "For each tile, the byte offset of that tile, as compressed and "
            "stored on disk."
        ),
    },
    "TileByteCounts": {
        "number": 0x0145,
        "type": Datatype.LONG,
        "description": (
            "For each tile, the number of (compressed) bytes in that tile."
        ),
    },
    "SubIFDs": {
        "number": 0x014A,
        "type": Datatype.LONG,
        "description": (
            "Defined by Adobe Corporation to enable TIFF Trees within a TIFF "
            "file."
        ),
    },
    "InkSet": {
        "number": 0x014C,
        "type": Datatype.SHORT,
        "description": (
            "The set of inks used in a separated "
            "(PhotometricInterpretation=5) image."
        ),
        "count": 1,
        "default": 1,
    },
    "InkNames": {
        "number": 0x014D,
        "type": Datatype.ASCII,
        "description": (
            "The name of each ink used in a separated "
            "(PhotometricInterpretation=5) image."
        ),
    },
    "NumberOfInks": {
        "number": 0x014E,
        "type": Datatype.SHORT,
        "description": "The number of inks.",
        "count": 1,
        "default": 4,
    },
    "DotRange": {
        "number": 0x0150,
        "type": Datatype.BYTE,
        "description": (
            "The component values that correspond to a 0% dot and 100% dot."
        ),
    },
    "TargetPrinter": {
        "number": 0x0151,
        "type": Datatype.ASCII,
        "description": (
            "A description of the printing environment for which this "
            "separation is intended."
        ),
    },
    "ExtraSamples": {
        "number": 0x0152,
        "type": Datatype.SHORT,
        "description": (
            "Specifies that each pixel has m extra components whose "
            "interpretation is defined by one of the values listed below."
        ),
    },
    "SampleFormat": {
        "number": 0x0153,
        "type": Datatype.SHORT,
        "description": (
            "This field specifies how to interpret each data sample in a "
            "pixel."
        ),
        "default": 1,
    },
    "SMinSampleValue": {
        "number": 0x0154,
        "type": Datatype.SHORT,
        "description": "This field specifies the minimum sample value.",
    },
    "SMaxSampleValue": {
        "number": 0x0155,
        "type": Datatype.SHORT,
        "description": "This field specifies the maximum sample value.",
    },
    "TransferRange": {
        "number": 0x0156,
        "type": Datatype.SHORT,
        "description": "Expands the range of the TransferFunction.",
        "count": 6,
    },
    "ClipPath": {
        "number": 0x0157,
        "type": Datatype.BYTE,
        "description": (
            "A TIFF ClipPath is intended to mirror the essentials of "
            "PostScript's path creation functionality."
        ),
    },
    "XClipPathUnits": {
        "number": 0x0158,
        "type": Datatype.SSHORT,
        "description": (
            "The number of units that span the width of the image, in terms "
            "of integer ClipPath coordinates."
        ),
        "count": 1,
    },
    "YClipPathUnits": {
        "number": 0x0159,
        "type": Datatype.SSHORT,
        "description": (
            "The number of units that span the height of the image, in terms "
            "of integer ClipPath coordinates."
        ),
        "count": 1,
    },
    "Indexed": {
        "number": 0x015A,
        "type": Datatype.SHORT,
        "description": (
            "Indexed images are images where the 'pixels' do not represent "
            "color values, but rather an index (usually 8-bit) into a "
            "separate color table, the ColorMap."
        ),
        "count": 1,
        "default": 0,
    },
    "JPEGTables": {
        "number": 0x015B,
        "type": Datatype.UNDEFINED,
        "description": (
            "This optional tag may be used to encode the JPEG quantization "
            "and Huffman tables for subsequent use by the JPEG decompression "
            "process."
        ),
    },
    "OPIProxy": {
        "number": 0x015F,
        "type": Datatype.SHORT,
        "description": (
            "OPIProxy gives information concerning whether this image is a "
            "low-resolution proxy of a high-resolution image (Adobe OPI)."
        ),
        "count": 1,
        "default": 0,
    },
    "JPEGProc": {
        "number": 0x0200,
        "type": Datatype.LONG,
        "description": (
            "This field indicates the process used to produce the compressed "
            "data."
        ),
        "count": 1,
    },
    "JPEGInterchangeFormat": {
        "number": 0x0201,
        "type": Datatype.LONG,
        "description": (
            "The offset to the start byte (SOI) of JPEG compressed thumbnail "
            "data."
        ),
        "count": 1,
    },
    "JPEGInterchangeFormatLength": {
        "number": 0x0202,
        "type": Datatype.LONG,
        "description": (
            "The number of bytes of JPEG compressed thumbnail data."
        ),
        "count": 1,
    },
    "JPEGRestartInterval": {
        "number": 0x0203,
        "type": Datatype.SHORT,
        "description": (
            "This Field indicates the length of the restart interval used in "
            "the compressed image data."
        ),
        "count": 1,
    },
    "JPEGLosslessPredictors": {
        "number": 0x0205,
        "type": Datatype.SHORT,
        "description": (
            "This Field points to a list of lossless predictor-selection "
            "values, one per component."
        ),
    },
    "JPEGPointTransforms": {
        "number": 0x0206,
        "type": Datatype.SHORT,
        "description": (
            "This Field points to a list of point transform values, one per "
            "component."
        ),
    },
    "JPEGQTables": {
        "number": 0x0207,
        "type": Datatype.LONG,
        "description": (
            "This Field points to a list of offsets to the quantization "
            "tables, one per component."
        ),
    },
    "JPEGDCTables": {
        "number": 0x0208,
        "type": Datatype.LONG,
        "description": (
            "This Field points to a list of offsets to the DC Huffman tables "
            "or the lossless Huffman tables, one per component."
        ),
    },
    "JPEGACTables": {
        "number": 0x0209,
        "type": Datatype.LONG,
        "description": (
            "This Field points to a list of offsets to the Huffman AC "
            "tables, one per component."
        ),
    },
    "YCbCrCoefficients": {
        "number": 0x0211,
        "type": Datatype.RATIONAL,
        "description": (
            "The matrix coefficients for transformation from RGB to YCbCr "
            "image data."
        ),
        "count": 3,
        "default": (
            Rational(299, 1000), Rational(587, 1000), Rational(114, 1000)
        ),
    },
    "YCbCrSubSampling": {
        "number": 0x0212,
        "type": Datatype.SHORT,
        "description": (
            "The sampling ratio of chrominance components in relation to the "
            "luminance component."
        ),
        "count": 2,
        "default": (2, 2),
    },
    "YCbCrPositioning": {
        "number": 0x0213,
        "type": Datatype.SHORT,
        "description": (
            "The position of chrominance components in relation to the "
            "luminance component."
        ),
        "count": 1,
        "default": 1,
    },
    "ReferenceBlackWhite": {
        "number": 0x0214,
        "type": Datatype.RATIONAL,
        "description": (
            "The reference black point value and reference white point "
            "value."
        ),
        "count": 6,
    },
    "XMLPacket": {
        "number": 0x02BC,
        "type": Datatype.BYTE,
        "description": "XMP Metadata (Adobe technote 9-14-02).",
    },
    "Rating": {
        "number": 0x4746,
        "type": Datatype.SHORT,
        "description": "Rating tag used by Windows.",
        "count": 1,
    },
    "RatingPercent": {
        "number": 0x4749,
        "type": Datatype.SHORT,
        "description": "Rating tag used by Windows, value in percent.",
        "count": 1,
    },
    "VignettingCorrParams": {
        "number": 0x7032,
        "type": Datatype.SSHORT,
        "description": "Sony vignetting correction parameters.",
    },
    "ChromaticAberrationCorrParams": {
        "number": 0x7035,
        "type": Datatype.SSHORT,
        "description": "Sony chromatic aberration correction parameters.",
    },
    "DistortionCorrParams": {
        "number": 0x7037,
        "type": Datatype.SSHORT,
        "description": "Sony distortion correction parameters.",
    },
    "ImageID": {
        "number": 0x800D,
        "type": Datatype.ASCII,
        "description": (
            "ImageID is the full pathname of the original, high-resolution "
            "image, or any other identifying string that uniquely identifies "
            "the original image (Adobe OPI)."
        ),
    },
    "CFARepeatPatternDim": {
        "number": 0x828D,
        "type": Datatype.SHORT,
        "description": (
            "Contains two values representing the minimum rows and columns "
            "to define the repeating patterns of the color filter array."
        ),
        "count": 2,
    },
    "CFAPattern": {
        "number": 0x828E,
        "type": Datatype.BYTE,
        "description": (
            "Indicates the color filter array (CFA) geometric pattern of the "
            "image sensor when a one-chip color area sensor is used."
        ),
    },
    "BatteryLevel": {
        "number": 0x828F,
        "type": Datatype.RATIONAL,
        "description": "Contains a value of the battery level as a fraction.",
        "count": 1,
    },
    "Copyright": {
        "number": 0x8298,
        "type": Datatype.ASCII,
        "description": "Copyright information.",
    },
    "ExposureTime": {
        "number": 0x829A,
        "type": Datatype.RATIONAL,
        "description": "Exposure time, given in seconds.",
        "count": 1,
    },
    "FNumber": {
        "number": 0x829D,
        "type": Datatype.RATIONAL,
        "description": "The F number.",
        "count": 1,
    },
    "IPTCNAA": {
        "number": 0x83BB,
        "type": Datatype.LONG,
        "description": "Contains an IPTC/NAA record.",
    },
    "ImageResources": {
        "number": 0x8649,
        "type": Datatype.BYTE,
        "description": (
            "Contains information embedded by the Adobe Photoshop "
            "application."
        ),
    },
    "ExifTag": {
        "number": 0x8769,
        "type": Datatype.LONG,
        "description": "A pointer to the Exif IFD.",
        "count": 1,
    },
    "InterColorProfile": {
        "number": 0x8773,
        "type": Datatype.UNDEFINED,
        "description": (
            "Contains an InterColor Consortium (ICC) format color space "
            "characterization/profile."
        ),
    },
    "ExposureProgram": {
        "number": 0x8822,
        "type": Datatype.SHORT,
        "description": (
            "The class of the program used by the camera to set exposure "
            "when the picture is taken."
        ),
        "count": 1,
        "default": 0,
    },
    "SpectralSensitivity": {
        "number": 0x8824,
        "type": Datatype.ASCII,
        "description": (
            "Indicates the spectral sensitivity of each channel of the "
            "camera used."
        ),
    },
    "GPSTag": {
        "number": 0x8825,
        "type": Datatype.LONG,
        "description": "A pointer to the GPS Info IFD.",
        "count": 1,
    },
    "ISOSpeedRatings": {
        "number": 0x8827,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the ISO Speed and ISO Latitude of the camera or input "
            "device as specified in ISO 12232."
        ),
    },
    "OECF": {
        "number": 0x8828,
        "type": Datatype.UNDEFINED,
        "description": (
            "Indicates the Opto-Electric Conversion Function (OECF) "
            "specified in ISO 14524."
        ),
    },
    "Interlace": {
        "number": 0x8829,
        "type": Datatype.SHORT,
        "description": "Indicates the field number of multifield images.",
        "count": 1,
    },
    "TimeZoneOffset": {
        "number": 0x882A,
        "type": Datatype.SSHORT,
        "description": (
            "This optional tag encodes the time zone of the camera clock "
            "(relative to Greenwich Mean Time) used to create the "
            "DateTimeOriginal tag-value when the picture was taken."
        ),
    },
    "SelfTimerMode": {
        "number": 0x882B,
        "type": Datatype.SHORT,
        "description": (
            "Number of seconds image capture was delayed from button press."
        ),
        "count": 1,
    },
    "DateTimeOriginal": {
        "number": 0x9003,
        "type": Datatype.ASCII,
        "description": (
            "The date and time when the original image data was generated."
        ),
    },
    "CompressedBitsPerPixel": {
        "number": 0x9102,
        "type": Datatype.RATIONAL,
        "description": (
            "Specific to compressed data; states the compressed bits per "
            "pixel."
        ),
        "count": 1,
    },
    "ShutterSpeedValue": {
        "number": 0x9201,
        "type": Datatype.SRATIONAL,
        "description": "Shutter speed.",
        "count": 1,
    },
    "ApertureValue": {
        "number": 0x9202,
        "type": Datatype.RATIONAL,
        "description": "The lens aperture.",
        "count": 1,
    },
    "BrightnessValue": {
        "number": 0x9203,
        "type": Datatype.SRATIONAL,
        "description": "The value of brightness.",
        "count": 1,
    },
    "ExposureBiasValue": {
        "number": 0x9204,
        "type": Datatype.SRATIONAL,
        "description": "The exposure bias.",
        "count": 1,
    },
    "MaxApertureValue": {
        "number": 0x9205,
        "type": Datatype.RATIONAL,
        "description": "The smallest F number of the lens.",
        "count": 1,
    },
    "SubjectDistance": {
        "number": 0x9206,
        "type": Datatype.SRATIONAL,
        "description": "The distance to the subject, given in meters.",
        "count": 1,
    },
    "MeteringMode": {
        "number": 0x9207,
        "type": Datatype.SHORT,
        "description": "The metering mode.",
        "count": 1,
        "default": 0,
    },
    "LightSource": {
        "number": 0x9208,
        "type": Datatype.SHORT,
        "description": "The kind of light source.",
        "count": 1,
        "default": 0,
    },
    "Flash": {
        "number": 0x9209,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the status of flash when the image was shot."
        ),
        "count": 1,
    },
    "FocalLength": {
        "number": 0x920A,
        "type": Datatype.RATIONAL,
        "description": "The actual focal length of the lens, in mm.",
        "count": 1,
    },
    "FlashEnergy": {
        "number": 0x920B,
        "type": Datatype.RATIONAL,
        "description": "Amount of flash energy (BCPS).",
        "count": 1,
    },
    "SpatialFrequencyResponse": {
        "number": 0x920C,
        "type": Datatype.UNDEFINED,
        "description": "SFR of the camera.",
    },
    "Noise": {
        "number": 0x920D,
        "type": Datatype.UNDEFINED,
        "description": "Noise measurement values.",
    },
    "FocalPlaneXResolution": {
        "number": 0x920E,
        "type": Datatype.RATIONAL,
        "description": (
            "Number of pixels per FocalPlaneResolutionUnit in ImageWidth "
            "direction for main image."
        ),
        "count": 1,
    },
    "FocalPlaneYResolution": {
        "number": 0x920F,
        "type": Datatype.RATIONAL,
        "description": (
            "Number of pixels per FocalPlaneResolutionUnit in ImageLength "
            "direction for main image."
        ),
        "count": 1,
    },
    "FocalPlaneResolutionUnit": {
        "number": 0x9210,
        "type": Datatype.SHORT,
        "description": (
            "Unit of measurement for FocalPlaneXResolution and "
            "FocalPlaneYResolution."
        ),
        "count": 1,
        "default": 2,
    },
    "ImageNumber": {
        "number": 0x9211,
        "type": Datatype.LONG,
        "description": (
            "Number assigned to an image, e.g., in a chained image burst."
        ),
        "count": 1,
    },
    "SecurityClassification": {
        "number": 0x9212,
        "type": Datatype.ASCII,
        "description": "Security classification assigned to the image.",
    },
    "ImageHistory": {
        "number": 0x9213,
        "type": Datatype.ASCII,
        "description": "Record of what has been done to the image.",
    },
    "SubjectLocation": {
        "number": 0x9214,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the location and area of the main subject in the "
            "overall scene."
        ),
        "count": 2,
    },
    "ExposureIndex": {
        "number": 0x9215,
        "type": Datatype.RATIONAL,
        "description": (
            "Encodes the camera exposure index setting when image was "
            "captured."
        ),
        "count": 1,
    },
    "TIFFEPStandardID": {
        "number": 0x9216,
        "type": Datatype.BYTE,
        "description": (
            "Contains four ASCII characters representing the TIFF/EP "
            "standard version of a TIFF/EP file."
        ),
        "count": 4,
    },
    "SensingMethod": {
        "number": 0x9217,
        "type": Datatype.SHORT,
        "description": "Type of image sensor.",
        "count": 1,
    },
    "XPTitle": {
        "number": 0x9C9B,
        "type": Datatype.BYTE,
        "description": "Title tag used by Windows, encoded in UCS2.",
    },
    "XPComment": {
        "number": 0x9C9C,
        "type": Datatype.BYTE,
        "description": "Comment tag used by Windows, encoded in UCS2.",
    },
    "XPAuthor": {
        "number": 0x9C9D,
        "type": Datatype.BYTE,
        "description": "Author tag used by Windows, encoded in UCS2.",
    },
    "XPKeywords": {
        "number": 0x9C9E,
        "type": Datatype.BYTE,
        "description": "Keywords tag used by Windows, encoded in UCS2.",
    },
    "XPSubject": {
        "number": 0x9C9F,
        "type": Datatype.BYTE,
        "description": "Subject tag used by Windows, encoded in UCS2.",
    },
    "PrintImageMatching": {
        "number": 0xC4A5,
        "type": Datatype.UNDEFINED,
        "description": "Print Image Matching, description needed.",
    },
    "DNGVersion": {
        "number": 0xC612,
        "type": Datatype.BYTE,
        "description": "This tag encodes the DNG four-tier version number.",
        "count": 4,
    },
    "DNGBackwardVersion": {
        "number": 0xC613,
        "type": Datatype.BYTE,
        "description": (
            "This tag specifies the oldest version of the Digital Negative "
            "specification for which a file is compatible."
        ),
        "count": 4,
    },
    "UniqueCameraModel": {
        "number": 0xC614,
        "type": Datatype.ASCII,
        "description": (
            "Defines a unique, non-localized name for the camera model that "
            "created the image in the raw file."
        ),
    },
    "LocalizedCameraModel": {
        "number": 0xC615,
        "type": Datatype.BYTE,
        "description": (
            "Similar to the UniqueCameraModel field, except the name can be "
            "localized for different markets to match the localization of "
            "the camera name."
        ),
    },
    "CFAPlaneColor": {
        "number": 0xC616,
        "type": Datatype.BYTE,
        "description": (
            "Provides a mapping between the values in the CFAPattern tag and "
            "the plane numbers in LinearRaw space."
        ),
    },
    "CFALayout": {
        "number": 0xC617,
        "type": Datatype.SHORT,
        "description": "Describes the spatial layout of the CFA.",
        "count": 1,
        "default": 1,
    },
    "LinearizationTable": {
        "number": 0xC618,
        "type": Datatype.SHORT,
        "description": (
            "Describes a lookup table that maps stored values into linear "
            "values."
        ),
    },
    "BlackLevelRepeatDim": {
        "number": 0xC619,
        "type": Datatype.SHORT,
        "description": "Specifies repeat pattern size for the BlackLevel tag.",
        "count": 2,
        "default": (1, 1),
    },
    "BlackLevel": {
        "number": 0xC61A,
        "type": Datatype.RATIONAL,
        "description": (
            "Specifies the zero light (a.k.a. thermal black or black "
            "current) encoding level, as a repeating pattern."
        ),
        "default": Rational(0, 1),
    },
    "BlackLevelDeltaH": {
        "number": 0xC61B,
        "type": Datatype.SRATIONAL,
        "description": (
            "If the zero light encoding level is a function of the image "
            "column, BlackLevelDeltaH specifies the difference between the "
            "zero light encoding level for each column and the baseline zero "
            "light encoding level."
        ),
    },
    "BlackLevelDeltaV": {
        "number": 0xC61C,
        "type": Datatype.SRATIONAL,
        "description": (
            "If the zero light encoding level is a function of the image "
            "row, this tag specifies the difference between the zero light "
            "encoding level for each row and the baseline zero light "
            "encoding level."
        ),
    },
    "WhiteLevel": {
        "number": 0xC61D,
        "type": Datatype.LONG,
        "description": (
            "This tag specifies the fully saturated encoding level for the "
            "raw sample values."
        ),
    },
    "DefaultScale": {
        "number": 0xC61E,
        "type": Datatype.RATIONAL,
        "description": (
            "DefaultScale is required for cameras with non-square pixels."
        ),
        "count": 2,
        "default": (Rational(1, 1), Rational(1, 1)),
    },
    "DefaultCropOrigin": {
        "number": 0xC61F,
        "type": Datatype.LONG,
        "description": (
            "Raw images often store extra pixels around the edges of the "
            "final image."
        ),
        "count": 2,
    },
    "DefaultCropSize": {
        "number": 0xC620,
        "type": Datatype.LONG,
        "description": (
            "Raw images often store extra pixels around the edges of the "
            "final image."
        ),
        "count": 2,
    },
    "ColorMatrix1": {
        "number": 0xC621,
        "type": Datatype.SRATIONAL,
        "description": (
            "ColorMatrix1 defines a transformation matrix that converts XYZ "
            "values to reference camera native color space values, under the "
            "first calibration illuminant."
        ),
    },
    "ColorMatrix2": {
        "number": 0xC622,
        "type": Datatype.SRATIONAL,
        "description": (
            "ColorMatrix2 defines a transformation matrix that converts XYZ "
            "values to reference camera native color space values, under the "
            "second calibration illuminant."
        ),
    },
    "CameraCalibration1": {
        "number": 0xC623,
        "type": Datatype.SRATIONAL,
        "description": (
            "CameraCalibration1 defines a calibration matrix that transforms "
            "reference camera native space values to individual camera "
            "native space values under the first calibration illuminant."
        ),
    },
    "CameraCalibration2": {
        "number": 0xC624,
        "type": Datatype.SRATIONAL,
        "description": (
            "CameraCalibration2 defines a calibration matrix that transforms "
            "reference camera native space values to individual camera "
            "native space values under the second calibration illuminant."
        ),
    },
    "ReductionMatrix1": {
        "number": 0xC625,
        "type": Datatype.SRATIONAL,
        "description": (
            "ReductionMatrix1 defines a dimensionality reduction matrix for "
            "use as the first stage in converting color camera native space "
            "values to XYZ values, under the first calibration illuminant."
        ),
    },
    "ReductionMatrix2": {
        "number": 0xC626,
        "type": Datatype.SRATIONAL,
        "description": (
            "ReductionMatrix2 defines a dimensionality reduction matrix for "
            "use as the first stage in converting color camera native space "
            "values to XYZ values, under the second calibration illuminant."
        ),
    },
    "AnalogBalance": {
        "number": 0xC627,
        "type": Datatype.RATIONAL,
        "description": (
            "Normally the stored raw values are not white balanced, since "
            "any digital white balancing will reduce the dynamic range of "
            "the final image if the user decides to later adjust the white "
            "balance; however, if camera hardware is capable of white "
            "balancing the color channels before the signal is digitized, it "
            "can improve the dynamic range of the final image."
        ),
    },
    "AsShotNeutral": {
        "number": 0xC628,
        "type": Datatype.SHORT,
        "description": (
            "Specifies the selected white balance at time of capture, "
            "encoded as the coordinates of a perfectly neutral color in "
            "linear reference space values."
        ),
    },
    "AsShotWhiteXY": {
        "number": 0xC629,
        "type": Datatype.RATIONAL,
        "description": (
            "Specifies the selected white balance at time of capture, "
            "encoded as x-y chromaticity coordinates."
        ),
        "count": 2,
    },
    "BaselineExposure": {
        "number": 0xC62A,
        "type": Datatype.SRATIONAL,
        "description": (
            "Camera models vary in the trade-off they make between highlight "
            "headroom and shadow noise."
        ),
        "count": 1,
        "default": SRational(0, 1),
    },
    "BaselineNoise": {
        "number": 0xC62B,
        "type": Datatype.RATIONAL,
        "description": (
            "Specifies the relative noise level of the camera model at a "
            "baseline ISO value of 100, compared to a reference camera "
            "model."
        ),
        "count": 1,
        "default": Rational(1, 1),
    },
    "BaselineSharpness": {
        "number": 0xC62C,
        "type": Datatype.RATIONAL,
        "description": (
            "Specifies the relative amount of sharpening required for this "
            "camera model, compared to a reference camera model."
        ),
        "count": 1,
        "default": Rational(1, 1),
    },
    "BayerGreenSplit": {
        "number": 0xC62D,
        "type": Datatype.LONG,
        "description": (
            "Only applies to CFA images using a Bayer pattern filter array."
        ),
        "count": 1,
        "default": 0,
    },
    "LinearResponseLimit": {
        "number": 0xC62E,
        "type": Datatype.RATIONAL,
        "description": (
            "Some sensors have an unpredictable non-linearity in their "
            "response as they near the upper limit of their encoding range."
        ),
        "count": 1,
        "default": Rational(1, 1),
    },
    "CameraSerialNumber": {
        "number": 0xC62F,
        "type": Datatype.ASCII,
        "description": (
            "CameraSerialNumber contains the serial number of the camera or "
            "camera body that captured the image."
        ),
    },
    "LensInfo": {
        "number": 0xC630,
        "type": Datatype.RATIONAL,
        "description": (
            "Contains information about the lens that captured the image."
        ),
        "count": 4,
    },
    "ChromaBlurRadius": {
        "number": 0xC631,
        "type": Datatype.RATIONAL,
        "description": (
            "ChromaBlurRadius provides a hint to the DNG reader about how "
            "much chroma blur should be applied to the image."
        ),
        "count": 1,
    },
    "AntiAliasStrength": {
        "number": 0xC632,
        "type": Datatype.RATIONAL,
        "description": (
            "Provides a hint to the DNG reader about how strong the camera's "
            "anti-alias filter is."
        ),
        "count": 1,
        "default": Rational(1, 1),
    },
    "ShadowScale": {
        "number": 0xC633,
        "type": Datatype.SRATIONAL,
        "description": (
            "This tag is used by Adobe Camera Raw to control the sensitivity "
            "of its Shadows slider."
        ),
        "count": 1,
        "default": SRational(1, 1),
    },
    "DNGPrivateData": {
        "number": 0xC634,
        "type": Datatype.BYTE,
        "description": (
            "Provides a way for camera manufacturers to store private data "
            "in the DNG file for use by their own raw converters, and to "
            "have that data preserved by programs that edit DNG files."
        ),
    },
    "MakerNoteSafety": {
        "number": 0xC635,
        "type": Datatype.SHORT,
        "description": (
            "MakerNoteSafety lets the DNG reader know whether the EXIF "
            "MakerNote tag is safe to preserve along with the rest of the "
            "EXIF data."
        ),
        "count": 1,
        "default": 0,
    },
    "CalibrationIlluminant1": {
        "number": 0xC65A,
        "type": Datatype.SHORT,
        "description": (
            "The illuminant used for the first set of color calibration tags "
            "(ColorMatrix1, CameraCalibration1, ReductionMatrix1)."
        ),
        "count": 1,
        "default": 0,
    },
    "CalibrationIlluminant2": {
        "number": 0xC65B,
        "type": Datatype.SHORT,
        "description": (
            "The illuminant used for an optional second set of color "
            "calibration tags (ColorMatrix2, CameraCalibration2, "
            "ReductionMatrix2)."
        ),
        "count": 1,
        "default": 0,
    },
    "BestQualityScale": {
        "number": 0xC65C,
        "type": Datatype.RATIONAL,
        "description": (
            "For some cameras, the best possible image quality is not "
            "achieved by preserving the total pixel count during conversion."
        ),
        "count": 1,
        "default": Rational(1, 1),
    },
    "RawDataUniqueID": {
        "number": 0xC65D,
        "type": Datatype.BYTE,
        "description": (
            "This tag contains a 16-byte unique identifier for the raw image "
            "data in the DNG file."
        ),
        "count": 16,
    },
    "OriginalRawFileName": {
        "number": 0xC68B,
        "type": Datatype.BYTE,
        "description": (
            "If the DNG file was converted from a non-DNG raw file, then "
            "this tag contains the file name of that original raw file."
        ),
    },
    "OriginalRawFileData": {
        "number": 0xC68C,
        "type": Datatype.UNDEFINED,
        "description": (
            "If the DNG file was converted from a non-DNG raw file, then "
            "this tag contains the compressed contents of that original raw "
            "file."
        ),
    },
    "ActiveArea": {
        "number": 0xC68D,
        "type": Datatype.LONG,
        "description": (
            "This rectangle defines the active (non-masked) pixels of the "
            "sensor."
        ),
        "count": 4,
    },
    "MaskedAreas": {
        "number": 0xC68E,
        "type": Datatype.LONG,
        "description": (
            "This tag contains a list of non-overlapping rectangle "
            "coordinates of fully masked pixels, which can be optionally "
            "used by DNG readers to measure the black encoding level."
        ),
    },
    "AsShotICCProfile": {
        "number": 0xC68F,
        "type": Datatype.UNDEFINED,
        "description": (
            "This tag contains an ICC profile that, in conjunction with the "
            "AsShotPreProfileMatrix tag, provides the camera manufacturer "
            "with a way to specify a default color rendering from camera "
            "color space coordinates (linear reference values) into the ICC "
            "profile connection space."
        ),
    },
    "AsShotPreProfileMatrix": {
        "number": 0xC690,
        "type": Datatype.SRATIONAL,
        "description": (
            "This tag is used in conjunction with the AsShotICCProfile tag."
        ),
    },
    "CurrentICCProfile": {
        "number": 0xC691,
        "type": Datatype.UNDEFINED,
        "description": (
            "This tag is used in conjunction with the "
            "CurrentPreProfileMatrix tag."
        ),
    },
    "CurrentPreProfileMatrix": {
        "number": 0xC692,
        "type": Datatype.SRATIONAL,
        "description": (
            "This tag is used in conjunction with the CurrentICCProfile tag."
        ),
    },
    "ColorimetricReference": {
        "number": 0xC6BF,
        "type": Datatype.SHORT,
        "description": (
            "The DNG color model documents a transform between camera colors "
            "and CIE XYZ values."
        ),
        "count": 1,
        "default": 0,
    },
    "CameraCalibrationSignature": {
        "number": 0xC6F3,
        "type": Datatype.BYTE,
        "description": (
            "A UTF-8 encoded string associated with the CameraCalibration1 "
            "and CameraCalibration2 tags."
        ),
    },
    "ProfileCalibrationSignature": {
        "number": 0xC6F4,
        "type": Datatype.BYTE,
        "description": (
            "A UTF-8 encoded string associated with the camera profile tags."
        ),
    },
    "ExtraCameraProfiles": {
        "number": 0xC6F5,
        "type": Datatype.LONG,
        "description": "A list of file offsets to extra Camera Profile IFDs.",
    },
    "AsShotProfileName": {
        "number": 0xC6F6,
        "type": Datatype.BYTE,
        "description": (
            "A UTF-8 encoded string containing the name of the 'as shot' "
            "camera profile, if any."
        ),
    },
    "NoiseReductionApplied": {
        "number": 0xC6F7,
        "type": Datatype.RATIONAL,
        "description": (
            "This tag indicates how much noise reduction has been applied to "
            "the raw data on a scale of 0.0 to 1.0."
        ),
        "count": 1,
    },
    "ProfileName": {
        "number": 0xC6F8,
        "type": Datatype.BYTE,
        "description": (
            "A UTF-8 encoded string containing the name of the camera "
            "profile."
        ),
    },
    "ProfileHueSatMapDims": {
        "number": 0xC6F9,
        "type": Datatype.LONG,
        "description": (
            "This tag specifies the number of input samples in each "
            "dimension of the hue/saturation/value mapping tables."
        ),
        "count": 3,
    },
    "ProfileHueSatMapData1": {
        "number": 0xC6FA,
        "type": Datatype.FLOAT,
        "description": (
            "This tag contains the data for the first hue/saturation/value "
            "mapping table."
        ),
    },
    "ProfileHueSatMapData2": {
        "number": 0xC6FB,
        "type": Datatype.FLOAT,
        "description": (
            "This tag contains the data for the second hue/saturation/value "
            "mapping table."
        ),
    },
    "ProfileToneCurve": {
        "number": 0xC6FC,
        "type": Datatype.FLOAT,
        "description": (
            "This tag contains a default tone curve that can be applied "
            "while processing the image as a starting point for user "
            "adjustments."
        ),
    },
    "ProfileEmbedPolicy": {
        "number": 0xC6FD,
        "type": Datatype.LONG,
        "description": (
            "This tag contains information about the usage rules for the "
            "associated camera profile."
        ),
        "count": 1,
        "default": 0,
    },
    "ProfileCopyright": {
        "number": 0xC6FE,
        "type": Datatype.BYTE,
        "description": (
            "A UTF-8 encoded string containing the copyright information for "
            "the camera profile."
        ),
    },
    "ForwardMatrix1": {
        "number": 0xC714,
        "type": Datatype.SRATIONAL,
        "description": (
            "This tag defines a matrix that maps white balanced camera "
            "colors to XYZ D50 colors."
        ),
    },
    "ForwardMatrix2": {
        "number": 0xC715,
        "type": Datatype.SRATIONAL,
        "description": (
            "This tag defines a matrix that maps white balanced camera "
            "colors to XYZ D50 colors."
        ),
    },
    "PreviewApplicationName": {
        "number": 0xC716,
        "type": Datatype.BYTE,
        "description": (
            "A UTF-8 encoded string containing the name of the application "
            "that created the preview stored in the IFD."
        ),
    },
    "PreviewApplicationVersion": {
        "number": 0xC717,
        "type": Datatype.BYTE,
        "description": (
            "A UTF-8 encoded string containing the version number of the "
            "application that created the preview stored in the IFD."
        ),
    },
    "PreviewSettingsName": {
        "number": 0xC718,
        "type": Datatype.BYTE,
        "description": (
            "A UTF-8 encoded string containing the name of the conversion "
            "settings (for example, snapshot name) used for the preview "
            "stored in the IFD."
        ),
    },
    "PreviewSettingsDigest": {
        "number": 0xC719,
        "type": Datatype.BYTE,
        "description": (
            "A unique ID of the conversion settings (for example, MD5 "
            "digest) used to render the preview stored in the IFD."
        ),
        "count": 16,
    },
    "PreviewColorSpace": {
        "number": 0xC71A,
        "type": Datatype.LONG,
        "description": (
            "This tag specifies the color space in which the rendered "
            "preview in this IFD is stored."
        ),
        "count": 1,
    },
    "PreviewDateTime": {
        "number": 0xC71B,
        "type": Datatype.ASCII,
        "description": (
            "This tag is an ASCII string containing the date/time at which "
            "the preview stored in the IFD was rendered."
        ),
    },
    "RawImageDigest": {
        "number": 0xC71C,
        "type": Datatype.UNDEFINED,
        "description": "This tag is an MD5 digest of the raw image data.",
        "count": 16,
    },
    "OriginalRawFileDigest": {
        "number": 0xC71D,
        "type": Datatype.UNDEFINED,
        "description": (
            "This tag is an MD5 digest of the data stored in the "
            "OriginalRawFileData tag."
        ),
        "count": 16,
    },
    "SubTileBlockSize": {
        "number": 0xC71E,
        "type": Datatype.LONG,
        "description": (
            "Normally, the pixels within a tile are stored in simple "
            "row-scan order."
        ),
        "count": 2,
        "default": (1, 1),
    },
    "RowInterleaveFactor": {
        "number": 0xC71F,
        "type": Datatype.LONG,
        "description": (
            "This tag specifies that rows of the image are stored in "
            "interleaved order."
        ),
        "count": 1,
        "default": 1,
    },
    "ProfileLookTableDims": {
        "number": 0xC725,
        "type": Datatype.LONG,
        "description": (
            "This tag specifies the number of input samples in each "
            "dimension of a default 'look' table."
        ),
        "count": 3,
    },
    "ProfileLookTableData": {
        "number": 0xC726,
        "type": Datatype.FLOAT,
        "description": (
            "This tag contains a default 'look' table that can be applied "
            "while processing the image as a starting point for user "
            "adjustment."
        ),
    },
    "OpcodeList1": {
        "number": 0xC740,
        "type": Datatype.UNDEFINED,
        "description": (
            "Specifies the list of opcodes that should be applied to the raw "
            "image, as read directly from the file."
        ),
    },
    "OpcodeList2": {
        "number": 0xC741,
        "type": Datatype.UNDEFINED,
        "description": (
            "Specifies the list of opcodes that should be applied to the raw "
            "image, just after it has been mapped to linear reference "
            "values."
        ),
    },
    "OpcodeList3": {
        "number": 0xC74E,
        "type": Datatype.UNDEFINED,
        "description": (
            "Specifies the list of opcodes that should be applied to the raw "
            "image, just after it has been demosaiced."
        ),
    },
    "NoiseProfile": {
        "number": 0xC761,
        "type": Datatype.DOUBLE,
        "description": (
            "NoiseProfile describes the amount of noise in a raw image."
        ),
    },
    "TimeCodes": {
        "number": 0xC763,
        "type": Datatype.BYTE,
        "description": (
            "The optional TimeCodes tag shall contain an ordered array of "
            "time codes."
        ),
    },
    "FrameRate": {
        "number": 0xC764,
        "type": Datatype.SRATIONAL,
        "description": (
            "The optional FrameRate tag shall specify the video frame rate "
            "in number of image frames per second, expressed as a signed "
            "rational number."
        ),
        "count": 1,
    },
    "TStop": {
        "number": 0xC772,
        "type": Datatype.SRATIONAL,
        "description": (
            "The optional TStop tag shall specify the T-stop of the actual "
            "lens, expressed as a rational number."
        ),
    },
    "ReelName": {
        "number": 0xC789,
        "type": Datatype.ASCII,
        "description": (
            "The optional ReelName tag shall specify a name for a sequence "
            "of images, where each image in the sequence has a unique image "
            "identifier (including but not limited to file name, frame "
            "number, date time, time code)."
        ),
    },
    "CameraLabel": {
        "number": 0xC7A1,
        "type": Datatype.ASCII,
        "description": (
            "The optional CameraLabel tag shall specify a text label for how "
            "the camera is used or assigned in this clip."
        ),
    },
    "OriginalDefaultFinalSize": {
        "number": 0xC791,
        "type": Datatype.LONG,
        "description": (
            "If this file is a proxy for a larger original DNG file, this "
            "tag specifics the default final size of the larger original "
            "file from which this proxy was generated."
        ),
        "count": 2,
    },
    "OriginalBestQualityFinalSize": {
        "number": 0xC792,
        "type": Datatype.LONG,
        "description": (
            "If this file is a proxy for a larger original DNG file, this "
            "tag specifics the best quality final size of the larger "
            "original file from which this proxy was generated."
        ),
        "count": 2,
    },
    "OriginalDefaultCropSize": {
        "number": 0xC793,
        "type": Datatype.LONG,
        "description": (
            "If this file is a proxy for a larger original DNG file, this "
            "tag specifics the DefaultCropSize of the larger original file "
            "from which this proxy was generated."
        ),
        "count": 2,
    },
    "ProfileHueSatMapEncoding": {
        "number": 0xC7A3,
        "type": Datatype.LONG,
        "description": (
            "Provides a way for color profiles to specify how indexing into "
            "a 3D HueSatMap is performed during raw conversion."
        ),
        "count": 1,
        "default": 0,
    },
    "ProfileLookTableEncoding": {
        "number": 0xC7A4,
        "type": Datatype.LONG,
        "description": (
            "Provides a way for color profiles to specify how indexing into "
            "a 3D LookTable is performed during raw conversion."
        ),
        "count": 1,
        "default": 0,
    },
    "BaselineExposureOffset": {
        "number": 0xC7A5,
        "type": Datatype.SRATIONAL,
        "description": (
            "Provides a way for color profiles to increase or decrease "
            "exposure during raw conversion."
        ),
        "count": 1,
        "default": SRational(0, 1),
    },
    "DefaultBlackRender": {
        "number": 0xC7A6,
        "type": Datatype.LONG,
        "description": (
            "This optional tag in a color profile provides a hint to the raw "
            "converter regarding how to handle the black point (e.g., flare "
            "subtraction) during rendering."
        ),
        "count": 1,
        "default": 0,
    },
    "NewRawImageDigest": {
        "number": 0xC7A7,
        "type": Datatype.BYTE,
        "description": (
            "This tag is a modified MD5 digest of the raw image data."
        ),
        "count": 16,
    },
    "RawToPreviewGain": {
        "number": 0xC7A8,
        "type": Datatype.DOUBLE,
        "description": (
            "The gain (what number the sample values are multiplied by) "
            "between the main raw IFD and the preview IFD containing this "
            "tag."
        ),
        "count": 1,
    },
    "DefaultUserCrop": {
        "number": 0xC7B5,
        "type": Datatype.RATIONAL,
        "description": (
            "Specifies a default user crop rectangle in relative "
            "coordinates."
        ),
        "count": 4,
        "default": (
            Rational(0, 1), Rational(0, 1), Rational(1, 1), Rational(1, 1)
        ),
    },
    "DepthFormat": {
        "number": 0xC7E9,
        "type": Datatype.SHORT,
        "description": "Specifies the encoding of any depth data in the file.",
        "count": 1,
    },
    "DepthNear": {
        "number": 0xC7EA,
        "type": Datatype.RATIONAL,
        "description": (
            "Specifies distance from the camera represented by the zero "
            "value in the depth map."
        ),
        "count": 1,
    },
    "DepthFar": {
        "number": 0xC7EB,
        "type": Datatype.RATIONAL,
        "description": (
            "Specifies distance from the camera represented by the maximum "
            "value in the depth map."
        ),
        "count": 1,
    },
    "DepthUnits": {
        "number": 0xC7EC,
        "type": Datatype.SHORT,
        "description": (
            "Specifies the measurement units for the DepthNear and DepthFar "
            "tags."
        ),
        "count": 1,
    },
    "DepthMeasureType": {
        "number": 0xC7ED,
        "type": Datatype.SHORT,
        "description": "Specifies the measurement geometry for the depth map.",
        "count": 1,
    },
    "EnhanceParams": {
        "number": 0xC7EE,
        "type": Datatype.ASCII,
        "description": (
            "A string that documents how the enhanced image data was "
            "processed."
        ),
    },
    "ProfileGainTableMap": {
        "number": 0xCD2D,
        "type": Datatype.UNDEFINED,
        "description": (
            "Contains spatially varying gain tables that can be applied "
            "while processing the image as a starting point for user "
            "adjustments."
        ),
    },
    "SemanticName": {
        "number": 0xCD2E,
        "type": Datatype.ASCII,
        "description": "A string that identifies the semantic mask.",
    },
    "SemanticInstanceID": {
        "number": 0xCD30,
        "type": Datatype.ASCII,
        "description": (
            "A string that identifies a specific instance in a semantic "
            "mask."
        ),
    },
    "CalibrationIlluminant3": {
        "number": 0xCD31,
        "type": Datatype.SHORT,
        "description": (
            "The illuminant used for an optional third set of color "
            "calibration tags (ColorMatrix3, CameraCalibration3, "
            "ReductionMatrix3)."
        ),
        "count": 1,
        "default": 0,
    },
    "CameraCalibration3": {
        "number": 0xCD32,
        "type": Datatype.SRATIONAL,
        "description": (
            "CameraCalibration3 defines a calibration matrix that transforms "
            "reference camera native space values to individual camera "
            "native space values under the third calibration illuminant."
        ),
    },
    "ColorMatrix3": {
        "number": 0xCD33,
        "type": Datatype.SRATIONAL,
        "description": (
            "ColorMatrix3 defines a transformation matrix that converts XYZ "
            "values to reference camera native color space values, under the "
            "third calibration illuminant."
        ),
    },
    "ForwardMatrix3": {
        "number": 0xCD34,
        "type": Datatype.SRATIONAL,
        "description": (
            "This tag defines a matrix that maps white balanced camera "
            "colors to XYZ D50 colors."
        ),
    },
    "IlluminantData1": {
        "number": 0xCD35,
        "type": Datatype.UNDEFINED,
        "description": (
            "When the CalibrationIlluminant1 tag is set to 255 (Other), then "
            "the IlluminantData1 tag is required and specifies the data for "
            "the first illuminant."
        ),
    },
    "IlluminantData2": {
        "number": 0xCD36,
        "type": Datatype.UNDEFINED,
        "description": (
            "When the CalibrationIlluminant2 tag is set to 255 (Other), then "
            "the IlluminantData2 tag is required and specifies the data for "
            "the second illuminant."
        ),
    },
    "IlluminantData3": {
        "number": 0xCD37,
        "type": Datatype.UNDEFINED,
        "description": (
            "When the CalibrationIlluminant3 tag is set to 255 (Other), then "
            "the IlluminantData3 tag is required and specifies the data for "
            "the third illuminant."
        ),
    },
    "MaskSubArea": {
        "number": 0xCD38,
        "type": Datatype.LONG,
        "description": (
            "This tag identifies the crop rectangle of this IFD's mask, "
            "relative to the main image."
        ),
        "count": 4,
    },
    "ProfileHueSatMapData3": {
        "number": 0xCD39,
        "type": Datatype.FLOAT,
        "description": (
            "This tag contains the data for the third hue/saturation/value "
            "mapping table."
        ),
    },
    "ReductionMatrix3": {
        "number": 0xCD3A,
        "type": Datatype.SRATIONAL,
        "description": (
            "ReductionMatrix3 defines a dimensionality reduction matrix for "
            "use as the first stage in converting color camera native space "
            "values to XYZ values, under the third calibration illuminant."
        ),
    },
    "RGBTables": {
        "number": 0xCD3B,
        "type": Datatype.UNDEFINED,
        "description": (
            "This tag specifies color transforms that can be applied to "
            "masked image regions."
        ),
    },
    "ProfileGainTableMap2": {
        "number": 0xCD40,
        "type": Datatype.UNDEFINED,
        "description": (
            "This tag is an extended version of ProfileGainTableMap."
        ),
    },
    "ColumnInterleaveFactor": {
        "number": 0xCD43,
        "type": Datatype.LONG,
        "description": (
            "This tag specifies that columns of the image are stored in "
            "interleaved order."
        ),
        "count": 1,
        "default": 1,
    },
    "ImageSequenceInfo": {
        "number": 0xCD44,
        "type": Datatype.UNDEFINED,
        "description": (
            "This is an informative tag that describes how the image file "
            "relates to other image files captured in a sequence."
        ),
    },
    "ImageStats": {
        "number": 0xCD46,
        "type": Datatype.UNDEFINED,
        "description": (
            "This is an informative tag that provides basic statistical "
            "information about the pixel values of the image in this IFD."
        ),
    },
    "ProfileDynamicRange": {
        "number": 0xCD47,
        "type": Datatype.UNDEFINED,
        "description": (
            "This tag describes the intended rendering output dynamic range "
            "for a given camera profile."
        ),
    },
    "ProfileGroupName": {
        "number": 0xCD48,
        "type": Datatype.ASCII,
        "description": (
            "A UTF-8 encoded string containing the 'group name' of the "
            "camera profile."
        ),
    },
    "JXLDistance": {
        "number": 0xCD49,
        "type": Datatype.FLOAT,
        "description": (
            "This optional tag specifies the distance parameter used to "
            "encode the JPEG XL data in this IFD."
        ),
        "count": 1,
    },
    "JXLEffort": {
        "number": 0xCD4A,
        "type": Datatype.LONG,
        "description": (
            "This optional tag specifies the effort parameter used to encode "
            "the JPEG XL data in this IFD."
        ),
        "count": 1,
    },
    "JXLDecodeSpeed": {
        "number": 0xCD4B,
        "type": Datatype.LONG,
        "description": (
            "This optional tag specifies the decode speed parameter used to "
            "encode the JPEG XL data in this IFD."
        ),
        "count": 1,
    },
}
