"""Fields of the Exif IFD, pointed to by Image.ExifTag.

Exif 2.32 and 3.0 field set.
"""
from ..types import Datatype

TAGS = {
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
    "ISOSpeedRatings": {
        "number": 0x8827,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the sensitivity of the camera or input device when "
            "the image was shot, named PhotographicSensitivity since Exif "
            "2.3."
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
    "SensitivityType": {
        "number": 0x8830,
        "type": Datatype.SHORT,
        "description": (
            "Indicates which one of the parameters of ISO 12232 is recorded "
            "in ISOSpeedRatings."
        ),
        "count": 1,
    },
    "StandardOutputSensitivity": {
        "number": 0x8831,
        "type": Datatype.LONG,
        "description": (
            "The standard output sensitivity value of the camera or input "
            "device defined in ISO 12232."
        ),
        "count": 1,
    },
    "RecommendedExposureIndex": {
        "number": 0x8832,
        "type": Datatype.LONG,
        "description": (
            "The recommended exposure index value of the camera or input "
            "device defined in ISO 12232."
        ),
        "count": 1,
    },
    "ISOSpeed": {
        "number": 0x8833,
        "type": Datatype.LONG,
        "description": (
            "The ISO speed value of the camera or input device that is "
            "defined in ISO 12232."
        ),
        "count": 1,
    },
    "ISOSpeedLatitudeyyy": {
        "number": 0x8834,
        "type": Datatype.LONG,
        "description": (
            "The ISO speed latitude yyy value of the camera or input device "
            "that is defined in ISO 12232."
        ),
        "count": 1,
    },
    "ISOSpeedLatitudezzz": {
        "number": 0x8835,
        "type": Datatype.LONG,
        "description": (
            "The ISO speed latitude zzz value of the camera or input device "
            "that is defined in ISO 12232."
        ),
        "count": 1,
    },
    "ExifVersion": {
        "number": 0x9000,
        "type": Datatype.UNDEFINED,
        "description": (
            "The version of the Exif standard supported, as four ASCII "
            "digits such as '0232'."
        ),
        "count": 4,
    },
    "DateTimeOriginal": {
        "number": 0x9003,
        "type": Datatype.ASCII,
        "description": (
            "The date and time when the original image data was generated."
        ),
        "count": 20,
    },
    "DateTimeDigitized": {
        "number": 0x9004,
        "type": Datatype.ASCII,
        "description": (
            "The date and time when the image was stored as digital data."
        ),
        "count": 20,
    },
    "OffsetTime": {
        "number": 0x9010,
        "type": Datatype.ASCII,
        "description": (
            "The time difference from UTC, including daylight saving time, "
            "of the time stamp in DateTime."
        ),
        "count": 7,
    },
    "OffsetTimeOriginal": {
        "number": 0x9011,
        "type": Datatype.ASCII,
        "description": (
            "The time difference from UTC, including daylight saving time, "
            "of the time stamp in DateTimeOriginal."
        ),
        "count": 7,
    },
    "OffsetTimeDigitized": {
        "number": 0x9012,
        "type": Datatype.ASCII,
        "description": (
            "The time difference from UTC, including daylight saving time, "
            "of the time stamp in DateTimeDigitized."
        ),
        "count": 7,
    },
    "ComponentsConfiguration": {
        "number": 0x9101,
        "type": Datatype.UNDEFINED,
        "description": (
            "Information specific to compressed data; the channels of each "
            "component are arranged in order from the 1st component to the "
            "4th."
        ),
        "count": 4,
    },
    "CompressedBitsPerPixel": {
        "number": 0x9102,
        "type": Datatype.RATIONAL,
        "description": (
            "Information specific to compressed data; the compression mode "
            "used for a compressed image is indicated in unit bits per "
            "pixel."
        ),
        "count": 1,
    },
    "ShutterSpeedValue": {
        "number": 0x9201,
        "type": Datatype.SRATIONAL,
        "description": (
            "Shutter speed, in APEX (Additive System of Photographic "
            "Exposure) units."
        ),
        "count": 1,
    },
    "ApertureValue": {
        "number": 0x9202,
        "type": Datatype.RATIONAL,
        "description": "The lens aperture, in APEX units.",
        "count": 1,
    },
    "BrightnessValue": {
        "number": 0x9203,
        "type": Datatype.SRATIONAL,
        "description": "The value of brightness, in APEX units.",
        "count": 1,
    },
    "ExposureBiasValue": {
        "number": 0x9204,
        "type": Datatype.SRATIONAL,
        "description": "The exposure bias, in APEX units.",
        "count": 1,
    },
    "MaxApertureValue": {
        "number": 0x9205,
        "type": Datatype.RATIONAL,
        "description": "The smallest F number of the lens, in APEX units.",
        "count": 1,
    },
    "SubjectDistance": {
        "number": 0x9206,
        "type": Datatype.RATIONAL,
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
    "SubjectArea": {
        "number": 0x9214,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the location and area of the main subject in the "
            "overall scene."
        ),
    },
    "MakerNote": {
        "number": 0x927C,
        "type": Datatype.UNDEFINED,
        "description": (
            "A tag for manufacturers of Exif writers to record any desired "
            "information."
        ),
    },
    "UserComment": {
        "number": 0x9286,
        "type": Datatype.UNDEFINED,
        "description": (
            "A tag for Exif users to write keywords or comments on the "
            "image, prefixed by an 8-byte character code."
        ),
    },
    "SubSecTime": {
        "number": 0x9290,
        "type": Datatype.ASCII,
        "description": (
            "A tag used to record fractions of seconds for the DateTime tag."
        ),
    },
    "SubSecTimeOriginal": {
        "number": 0x9291,
        "type": Datatype.ASCII,
        "description": (
            "A tag used to record fractions of seconds for the "
            "DateTimeOriginal tag."
        ),
    },
    "SubSecTimeDigitized": {
        "number": 0x9292,
        "type": Datatype.ASCII,
        "description": (
            "A tag used to record fractions of seconds for the "
            "DateTimeDigitized tag."
        ),
    },
    "Temperature": {
        "number": 0x9400,
        "type": Datatype.SRATIONAL,
        "description": (
            "Temperature as the ambient situation at the shot, in degrees "
            "Celsius."
        ),
        "count": 1,
    },
    "Humidity": {
        "number": 0x9401,
        "type": Datatype.RATIONAL,
        "description": (
            "Humidity as the ambient situation at the shot, in percent."
        ),
        "count": 1,
    },
    "Pressure": {
        "number": 0x9402,
        "type": Datatype.RATIONAL,
        "description": (
            "Pressure as the ambient situation at the shot, in hPa."
        ),
        "count": 1,
    },
    "WaterDepth": {
        "number": 0x9403,
        "type": Datatype.SRATIONAL,
        "description": (
            "Water depth as the ambient situation at the shot, in meters."
        ),
        "count": 1,
    },
    "Acceleration": {
        "number": 0x9404,
        "type": Datatype.RATIONAL,
        "description": (
            "Acceleration (a scalar regardless of direction) as the ambient "
            "situation at the shot, in mGal."
        ),
        "count": 1,
    },
    "CameraElevationAngle": {
        "number": 0x9405,
        "type": Datatype.SRATIONAL,
        "description": (
            "Elevation angle of the camera at the shot, in degrees."
        ),
        "count": 1,
    },
    "FlashpixVersion": {
        "number": 0xA000,
        "type": Datatype.UNDEFINED,
        "description": "The Flashpix format version supported by a FPXR file.",
        "count": 4,
    },
    "ColorSpace": {
        "number": 0xA001,
        "type": Datatype.SHORT,
        "description": (
            "The color space information tag; 1 is sRGB and 0xFFFF is "
            "uncalibrated."
        ),
        "count": 1,
    },
    "PixelXDimension": {
        "number": 0xA002,
        "type": Datatype.LONG,
        "description": (
            "Information specific to compressed data; the valid width of the "
            "meaningful image."
        ),
        "count": 1,
    },
    "PixelYDimension": {
        "number": 0xA003,
        "type": Datatype.LONG,
        "description": (
            "Information specific to compressed data; the valid height of "
            "the meaningful image."
        ),
        "count": 1,
    },
    "RelatedSoundFile": {
        "number": 0xA004,
        "type": Datatype.ASCII,
        "description": "The name of an audio file related to the image data.",
        "count": 13,
    },
    "InteroperabilityTag": {
        "number": 0xA005,
        "type": Datatype.LONG,
        "description": "A pointer to the Interoperability IFD.",
        "count": 1,
    },
    "FlashEnergy": {
        "number": 0xA20B,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the strobe energy at the time the image is captured, "
            "in BCPS."
        ),
        "count": 1,
    },
    "SpatialFrequencyResponse": {
        "number": 0xA20C,
        "type": Datatype.UNDEFINED,
        "description": (
            "The camera or input device spatial frequency table and SFR "
            "values as specified in ISO 12233."
        ),
    },
    "FocalPlaneXResolution": {
        "number": 0xA20E,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the number of pixels in the image width (X) direction "
            "per FocalPlaneResolutionUnit on the camera focal plane."
        ),
        "count": 1,
    },
    "FocalPlaneYResolution": {
        "number": 0xA20F,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the number of pixels in the image height (Y) "
            "direction per FocalPlaneResolutionUnit on the camera focal "
            "plane."
        ),
        "count": 1,
    },
    "FocalPlaneResolutionUnit": {
        "number": 0xA210,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the unit for measuring FocalPlaneXResolution and "
            "FocalPlaneYResolution."
        ),
        "count": 1,
        "default": 2,
    },
    "SubjectLocation": {
        "number": 0xA214,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the location of the main subject in the scene."
        ),
        "count": 2,
    },
    "ExposureIndex": {
        "number": 0xA215,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the exposure index selected on the camera or input "
            "device at the time the image is captured."
        ),
        "count": 1,
    },
    "SensingMethod": {
        "number": 0xA217,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the image sensor type on the camera or input device."
        ),
        "count": 1,
    },
    "FileSource": {
        "number": 0xA300,
        "type": Datatype.UNDEFINED,
        "description": (
            "Indicates the image source; 3 is a digital still camera."
        ),
        "count": 1,
        "default": b"\x03",
    },
    "SceneType": {
        "number": 0xA301,
        "type": Datatype.UNDEFINED,
        "description": (
            "Indicates the type of scene; 1 is a directly photographed "
            "image."
        ),
        "count": 1,
        "default": b"\x01",
    },
    "CFAPattern": {
        "number": 0xA302,
        "type": Datatype.UNDEFINED,
        "description": (
            "Indicates the color filter array (CFA) geometric pattern of the "
            "image sensor when a one-chip color area sensor is used."
        ),
    },
    "CustomRendered": {
        "number": 0xA401,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the use of special processing on image data, such as "
            "rendering geared to output."
        ),
        "count": 1,
        "default": 0,
    },
    "ExposureMode": {
        "number": 0xA402,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the exposure mode set when the image was shot."
        ),
        "count": 1,
    },
    "WhiteBalance": {
        "number": 0xA403,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the white balance mode set when the image was shot."
        ),
        "count": 1,
    },
    "DigitalZoomRatio": {
        "number": 0xA404,
        "type": Datatype.RATIONAL,
        "description": (
            "Indicates the digital zoom ratio when the image was shot; 0 "
            "means digital zoom was not used."
        ),
        "count": 1,
    },
    "FocalLengthIn35mmFilm": {
        "number": 0xA405,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the equivalent focal length assuming a 35mm film "
            "camera, in mm."
        ),
        "count": 1,
    },
    "SceneCaptureType": {
        "number": 0xA406,
        "type": Datatype.SHORT,
        "description": "Indicates the type of scene that was shot.",
        "count": 1,
        "default": 0,
    },
    "GainControl": {
        "number": 0xA407,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the degree of overall image gain adjustment."
        ),
        "count": 1,
    },
    "Contrast": {
        "number": 0xA408,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the direction of contrast processing applied by the "
            "camera when the image was shot."
        ),
        "count": 1,
        "default": 0,
    },
    "Saturation": {
        "number": 0xA409,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the direction of saturation processing applied by the "
            "camera when the image was shot."
        ),
        "count": 1,
        "default": 0,
    },
    "Sharpness": {
        "number": 0xA40A,
        "type": Datatype.SHORT,
        "description": (
            "Indicates the direction of sharpness processing applied by the "
            "camera when the image was shot."
        ),
        "count": 1,
        "default": 0,
    },
    "DeviceSettingDescription": {
        "number": 0xA40B,
        "type": Datatype.UNDEFINED,
        "description": (
            "Information on the picture-taking conditions of a particular "
            "camera model."
        ),
    },
    "SubjectDistanceRange": {
        "number": 0xA40C,
        "type": Datatype.SHORT,
        "description": "Indicates the distance to the subject.",
        "count": 1,
    },
    "ImageUniqueID": {
        "number": 0xA420,
        "type": Datatype.ASCII,
        "description": (
            "An identifier assigned uniquely to each image, recorded as a "
            "128-bit value in hexadecimal notation."
        ),
        "count": 33,
    },
    "CameraOwnerName": {
        "number": 0xA430,
        "type": Datatype.ASCII,
        "description": "The name of the camera owner.",
    },
    "BodySerialNumber": {
        "number": 0xA431,
        "type": Datatype.ASCII,
        "description": (
            "The serial number of the body of the camera that was used in "
            "photography."
        ),
    },
    "LensSpecification": {
        "number": 0xA432,
        "type": Datatype.RATIONAL,
        "description": (
            "The minimum focal length, maximum focal length, minimum F "
            "number in the minimum focal length, and minimum F number in the "
            "maximum focal length."
        ),
        "count": 4,
    },
    "LensMake": {
        "number": 0xA433,
        "type": Datatype.ASCII,
        "description": "The lens manufacturer.",
    },
    "LensModel": {
        "number": 0xA434,
        "type": Datatype.ASCII,
        "description": "The lens's model name and model number.",
    },
    "LensSerialNumber": {
        "number": 0xA435,
        "type": Datatype.ASCII,
        "description": (
            "The serial number of the interchangeable lens that was used in "
            "photography."
        ),
    },
    "ImageTitle": {
        "number": 0xA436,
        "type": Datatype.ASCII,
        "description": "The title of the image.",
    },
    "Photographer": {
        "number": 0xA437,
        "type": Datatype.ASCII,
        "description": "The name of the photographer.",
    },
    "ImageEditor": {
        "number": 0xA438,
        "type": Datatype.ASCII,
        "description": "The name of the main person who edited the image.",
    },
    "CameraFirmware": {
        "number": 0xA439,
        "type": Datatype.ASCII,
        "description": "The name and version of the firmware of the camera.",
    },
    "RAWDevelopingSoftware": {
        "number": 0xA43A,
        "type": Datatype.ASCII,
        "description": (
            "The name and version of the software used to develop the RAW "
            "image."
        ),
    },
    "ImageEditingSoftware": {
        "number": 0xA43B,
        "type": Datatype.ASCII,
        "description": (
            "The name and version of the main software used for processing "
            "and editing the image."
        ),
    },
    "MetadataEditingSoftware": {
        "number": 0xA43C,
        "type": Datatype.ASCII,
        "description": (
            "The name and version of the software used to edit the metadata "
            "without processing the image."
        ),
    },
    "CompositeImage": {
        "number": 0xA460,
        "type": Datatype.SHORT,
        "description": (
            "Indicates whether the recorded image is a composite image or "
            "not."
        ),
        "count": 1,
        "default": 0,
    },
    "SourceImageNumberOfCompositeImage": {
        "number": 0xA461,
        "type": Datatype.SHORT,
        "description": (
            "The number of source images captured for a composite image."
        ),
        "count": 2,
    },
    "SourceExposureTimesOfCompositeImage": {
        "number": 0xA462,
        "type": Datatype.UNDEFINED,
        "description": (
            "For a composite image, the exposure times of the source images."
        ),
    },
    "Gamma": {
        "number": 0xA500,
        "type": Datatype.RATIONAL,
        "description": "Indicates the value of coefficient gamma.",
        "count": 1,
    },
}
