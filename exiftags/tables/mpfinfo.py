"""Fields of the Multi-Picture Format index and attribute IFDs (CIPA DC-007).
"""
from ..types import Datatype

TAGS = {
    "MPFVersion": {
        "number": 0xB000,
        "type": Datatype.UNDEFINED,
        "description": (
            "The version of the Multi-Picture Format, as four ASCII digits "
            "such as '0100'."
        ),
        "count": 4,
    },
    "MPFNumberOfImages": {
        "number": 0xB001,
        "type": Datatype.LONG,
        "description": (
            "The number of individual images recorded in the Multi-Picture "
            "file."
        ),
        "count": 1,
    },
    "MPFImageList": {
        "number": 0xB002,
        "type": Datatype.UNDEFINED,
        "description": (
            "The MP Entry of every individual image, 16 bytes each."
        ),
    },
    "MPFImageUIDList": {
        "number": 0xB003,
        "type": Datatype.UNDEFINED,
        "description": "A 33-byte unique ID for each individual image.",
    },
    "MPFTotalFrames": {
        "number": 0xB004,
        "type": Datatype.LONG,
        "description": (
            "The number of frames captured for the Multi-Picture file."
        ),
        "count": 1,
    },
    "MPFIndividualNum": {
        "number": 0xB101,
        "type": Datatype.LONG,
        "description": "The number assigned to the individual image.",
        "count": 1,
    },
    "MPFPanOrientation": {
        "number": 0xB201,
        "type": Datatype.LONG,
        "description": "The layout of a panorama image.",
        "count": 1,
    },
    "MPFPanOverlapH": {
        "number": 0xB202,
        "type": Datatype.RATIONAL,
        "description": (
            "The horizontal overlap of adjacent panorama images, in percent."
        ),
        "count": 1,
    },
    "MPFPanOverlapV": {
        "number": 0xB203,
        "type": Datatype.RATIONAL,
        "description": (
            "The vertical overlap of adjacent panorama images, in percent."
        ),
        "count": 1,
    },
    "MPFBaseViewpointNum": {
        "number": 0xB204,
        "type": Datatype.LONG,
        "description": (
            "The viewpoint number of the base viewpoint of a multi-view "
            "image."
        ),
        "count": 1,
    },
    "MPFConvergenceAngle": {
        "number": 0xB205,
        "type": Datatype.SRATIONAL,
        "description": (
            "The angle of convergence between adjacent viewpoints, in "
            "degrees."
        ),
        "count": 1,
    },
    "MPFBaselineLength": {
        "number": 0xB206,
        "type": Datatype.RATIONAL,
        "description": "The distance between adjacent viewpoints, in meters.",
        "count": 1,
    },
    "MPFVerticalDivergence": {
        "number": 0xB207,
        "type": Datatype.SRATIONAL,
        "description": (
            "The divergence angle in the vertical direction, in degrees."
        ),
        "count": 1,
    },
    "MPFAxisDistanceX": {
        "number": 0xB208,
        "type": Datatype.SRATIONAL,
        "description": (
            "The distance from the base viewpoint along the X axis, in "
            "meters."
        ),
        "count": 1,
    },
    "MPFAxisDistanceY": {
        "number": 0xB209,
        "type": Datatype.SRATIONAL,
        "description": (
            "The distance from the base viewpoint along the Y axis, in "
            "meters."
        ),
        "count": 1,
    },
    "MPFAxisDistanceZ": {
        "number": 0xB20A,
        "type": Datatype.SRATIONAL,
        "description": (
            "The distance from the base viewpoint along the Z axis, in "
            "meters."
        ),
        "count": 1,
    },
    "MPFYawAngle": {
        "number": 0xB20B,
        "type": Datatype.SRATIONAL,
        "description": "The yaw angle of the viewpoint, in degrees.",
        "count": 1,
    },
    "MPFPitchAngle": {
        "number": 0xB20C,
        "type": Datatype.SRATIONAL,
        "description": "The pitch angle of the viewpoint, in degrees.",
        "count": 1,
    },
    "MPFRollAngle": {
        "number": 0xB20D,
        "type": Datatype.SRATIONAL,
        "description": "The roll angle of the viewpoint, in degrees.",
        "count": 1,
    },
}
