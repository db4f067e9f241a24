"""Fields of the GPS Info IFD, pointed to by Image.GPSTag.
"""
from ..types import Datatype

TAGS = {
    "GPSVersionID": {
        "number": 0x0000,
        "type": Datatype.BYTE,
        "description": (
            "Indicates the version of the GPS Info IFD, as four bytes such "
            "as 2.3.0.0."
        ),
        "count": 4,
        "default": (2, 3, 0, 0),
    },
    "GPSLatitudeRef": {
        "number": 0x0001,
        "type": Datatype.ASCII,
        "description": (
            "Indicates whether the latitude is north ('N') or south "
            "('S') latitude."
        ),
        "count": 2,
    },
    "GPSLatitude": {
        "number": 0x0002,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the latitude as three values for degrees, minutes and "
            "seconds."
        ),
        "count": 3,
    },
    "GPSLongitudeRef": {
        "number": 0x0003,
        "type": Datatype.ASCII,
        "description": (
            "Indicates whether the longitude is east ('E') or west ('W') "
            "longitude."
        ),
        "count": 2,
    },
    "GPSLongitude": {
        "number": 0x0004,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the longitude as three values for degrees, minutes "
            "and seconds."
        ),
        "count": 3,
    },
    "GPSAltitudeRef": {
        "number": 0x0005,
        "type": Datatype.BYTE,
        "description": (
            "Indicates the altitude used as the reference altitude; 0 is "
            "above sea level, 1 is below sea level."
        ),
        "count": 1,
        "default": 0,
    },
    "GPSAltitude": {
        "number": 0x0006,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the altitude based on the reference in "
            "GPSAltitudeRef, in meters."
        ),
        "count": 1,
    },
    "GPSTimeStamp": {
        "number": 0x0007,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the time as UTC (Coordinated Universal Time), as "
            "hour, minute and second."
        ),
        "count": 3,
    },
    "GPSSatellites": {
        "number": 0x0008,
        "type": Datatype.ASCII,
        "description": "Indicates the GPS satellites used for measurements.",
    },
    "GPSStatus": {
        "number": 0x0009,
        "type": Datatype.ASCII,
        "description": (
            "Indicates the status of the GPS receiver when the image is "
            "recorded; 'A' means measurement in progress, 'V' means "
            "interrupted."
        ),
        "count": 2,
    },
    "GPSMeasureMode": {
        "number": 0x000A,
        "type": Datatype.ASCII,
        "description": (
            "Indicates the GPS measurement mode; '2' is two-dimensional "
            "and '3' is three-dimensional measurement."
        ),
        "count": 2,
    },
    "GPSDOP": {
        "number": 0x000B,
        "type": Datatype.RATIONAL,
        "description": "Indicates the GPS DOP (data degree of precision).",
        "count": 1,
    },
    "GPSSpeedRef": {
        "number": 0x000C,
        "type": Datatype.ASCII,
        "description": (
            "Indicates the unit used to express the GPS receiver speed of "
            "movement; 'K', 'M' and 'N' are km/h, mph and knots."
        ),
        "count": 2,
        "default": "K",
    },
    "GPSSpeed": {
        "number": 0x000D,
        "type": Datatype.RATIONAL,
        "description": "Indicates the speed of GPS receiver movement.",
        "count": 1,
    },
    "GPSTrackRef": {
        "number": 0x000E,
        "type": Datatype.ASCII,
        "description": (
            "Indicates the reference for giving the direction of GPS "
            "receiver movement; 'T' is true direction and 'M' is "
            "magnetic direction."
        ),
        "count": 2,
        "default": "T",
    },
    "GPSTrack": {
        "number": 0x000F,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the direction of GPS receiver movement, from 0.00 to "
            "359.99."
        ),
        "count": 1,
    },
    "GPSImgDirectionRef": {
        "number": 0x0010,
        "type": Datatype.ASCII,
        "description": (
            "Indicates the reference for giving the direction of the image "
            "when it is captured."
        ),
        "count": 2,
        "default": "T",
    },
    "GPSImgDirection": {
        "number": 0x0011,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the direction of the image when it was captured, from "
            "0.00 to 359.99."
        ),
        "count": 1,
    },
    "GPSMapDatum": {
        "number": 0x0012,
        "type": Datatype.ASCII,
        "description": (
            "Indicates the geodetic survey data used by the GPS receiver."
        ),
    },
    "GPSDestLatitudeRef": {
        "number": 0x0013,
        "type": Datatype.ASCII,
        "description": (
            "Indicates whether the latitude of the destination point is "
            "north or south latitude."
        ),
        "count": 2,
    },
    "GPSDestLatitude": {
        "number": 0x0014,
        "type": Datatype.RATIONAL,
        "description": "Indicates the latitude of the destination point.",
        "count": 3,
    },
    "GPSDestLongitudeRef": {
        "number": 0x0015,
        "type": Datatype.ASCII,
        "description": (
            "Indicates whether the longitude of the destination point is "
            "east or west longitude."
        ),
        "count": 2,
    },
    "GPSDestLongitude": {
        "number": 0x0016,
        "type": Datatype.RATIONAL,
        "description": "Indicates the longitude of the destination point.",
        "count": 3,
    },
    "GPSDestBearingRef": {
        "number": 0x0017,
        "type": Datatype.ASCII,
        "description": (
            "Indicates the reference used for giving the bearing to the "
            "destination point."
        ),
        "count": 2,
        "default": "T",
    },
    "GPSDestBearing": {
        "number": 0x0018,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the bearing to the destination point, from 0.00 to "
            "359.99."
        ),
        "count": 1,
    },
    "GPSDestDistanceRef": {
        "number": 0x0019,
        "type": Datatype.ASCII,
        "description": (
            "Indicates the unit used to express the distance to the "
            "destination point."
        ),
        "count": 2,
        "default": "K",
    },
    "GPSDestDistance": {
        "number": 0x001A,
        "type": Datatype.RATIONAL,
        "description": "Indicates the distance to the destination point.",
        "count": 1,
    },
    "GPSProcessingMethod": {
        "number": 0x001B,
        "type": Datatype.UNDEFINED,
        "description": (
            "A character string recording the name of the method used for "
            "location finding, prefixed by an 8-byte character code."
        ),
    },
    "GPSAreaInformation": {
        "number": 0x001C,
        "type": Datatype.UNDEFINED,
        "description": (
            "A character string recording the name of the GPS area, prefixed "
            "by an 8-byte character code."
        ),
    },
    "GPSDateStamp": {
        "number": 0x001D,
        "type": Datatype.ASCII,
        "description": (
            "A character string recording date and time information relative "
            "to UTC, in the format 'YYYY:MM:DD'."
        ),
        "count": 11,
    },
    "GPSDifferential": {
        "number": 0x001E,
        "type": Datatype.SHORT,
        "description": (
            "Indicates whether differential correction is applied to the GPS "
            "receiver."
        ),
        "count": 1,
    },
    "GPSHPositioningError": {
        "number": 0x001F,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the horizontal positioning errors in meters."
        ),
        "count": 1,
    },
}
