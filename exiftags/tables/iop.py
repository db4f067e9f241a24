"""Fields of the Interoperability IFD, pointed to by Photo.InteroperabilityTag.
"""
from ..types import Datatype

TAGS = {
    "InteroperabilityIndex": {
        "number": 0x0001,
        "type": Datatype.ASCII,
        "description": (
            "Indicates the identification of the Interoperability rule, such "
            "as 'R98' or 'THM'."
        ),
        "count": 4,
    },
    "InteroperabilityVersion": {
        "number": 0x0002,
        "type": Datatype.UNDEFINED,
        "description": "Interoperability version.",
        "count": 4,
    },
    "RelatedImageFileFormat": {
        "number": 0x1000,
        "type": Datatype.ASCII,
        "description": "File format of the image file.",
    },
    "RelatedImageWidth": {
        "number": 0x1001,
        "type": Datatype.LONG,
        "description": "Image width.",
        "count": 1,
    },
    "RelatedImageLength": {
        "number": 0x1002,
        "type": Datatype.LONG,
        "description": "Image height.",
        "count": 1,
    },
}
