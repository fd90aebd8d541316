"""Declarative mapping from XMP properties to typed directory tags.

Each ``TagDefinition`` names one property by schema namespace and local
name, the tag id it is stored under, and the format its text is coerced
into.  ``TAG_MAPPING`` is the ordered table the reader walks; adding a
new typed tag means adding a row here and a display name in
``TAG_NAMES``, nothing else.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from constants import (
    SCHEMA_EXIF_ADDITIONAL_PROPERTIES,
    SCHEMA_EXIF_SPECIFIC_PROPERTIES,
    SCHEMA_EXIF_TIFF_PROPERTIES,
)


class FormatKind(Enum):
    """Target type of a mapped property."""

    STRING = 1
    RATIONAL = 2
    INT = 3
    DOUBLE = 4
    DATE = 5


# Tag identifiers
TAG_MAKE = 0x0001
TAG_MODEL = 0x0002
TAG_EXPOSURE_TIME = 0x0003
TAG_SHUTTER_SPEED = 0x0004
TAG_F_NUMBER = 0x0005
TAG_LENS_INFO = 0x0006
TAG_LENS = 0x0007
TAG_SERIAL = 0x0008
TAG_FIRMWARE = 0x0009
TAG_FOCAL_LENGTH = 0x000A
TAG_APERTURE_VALUE = 0x000B
TAG_EXPOSURE_PROG = 0x000C
TAG_DATETIME_ORIGINAL = 0x000D
TAG_DATETIME_DIGITIZED = 0x000E

TAG_NAMES = {
    TAG_MAKE: "Make",
    TAG_MODEL: "Model",
    TAG_EXPOSURE_TIME: "Exposure Time",
    TAG_SHUTTER_SPEED: "Shutter Speed Value",
    TAG_F_NUMBER: "F-Number",
    TAG_LENS_INFO: "Lens Information",
    TAG_LENS: "Lens",
    TAG_SERIAL: "Serial Number",
    TAG_FIRMWARE: "Firmware",
    TAG_FOCAL_LENGTH: "Focal Length",
    TAG_APERTURE_VALUE: "Aperture Value",
    TAG_EXPOSURE_PROG: "Exposure Program",
    TAG_DATETIME_ORIGINAL: "Date/Time Original",
    TAG_DATETIME_DIGITIZED: "Date/Time Digitized",
}


@dataclass(frozen=True)
class TagDefinition:
    """One row of the mapping table."""

    namespace_uri: str
    local_name: str
    tag_id: int
    format: FormatKind


TAG_MAPPING: tuple[TagDefinition, ...] = (
    TagDefinition(SCHEMA_EXIF_ADDITIONAL_PROPERTIES, "LensInfo", TAG_LENS_INFO, FormatKind.STRING),
    TagDefinition(SCHEMA_EXIF_ADDITIONAL_PROPERTIES, "Lens", TAG_LENS, FormatKind.STRING),
    TagDefinition(SCHEMA_EXIF_ADDITIONAL_PROPERTIES, "SerialNumber", TAG_SERIAL, FormatKind.STRING),
    TagDefinition(SCHEMA_EXIF_ADDITIONAL_PROPERTIES, "Firmware", TAG_FIRMWARE, FormatKind.STRING),
    TagDefinition(SCHEMA_EXIF_TIFF_PROPERTIES, "Make", TAG_MAKE, FormatKind.STRING),
    TagDefinition(SCHEMA_EXIF_TIFF_PROPERTIES, "Model", TAG_MODEL, FormatKind.STRING),
    TagDefinition(SCHEMA_EXIF_SPECIFIC_PROPERTIES, "ExposureTime", TAG_EXPOSURE_TIME, FormatKind.STRING),
    TagDefinition(SCHEMA_EXIF_SPECIFIC_PROPERTIES, "ExposureProgram", TAG_EXPOSURE_PROG, FormatKind.INT),
    TagDefinition(SCHEMA_EXIF_SPECIFIC_PROPERTIES, "ApertureValue", TAG_APERTURE_VALUE, FormatKind.RATIONAL),
    TagDefinition(SCHEMA_EXIF_SPECIFIC_PROPERTIES, "FNumber", TAG_F_NUMBER, FormatKind.RATIONAL),
    TagDefinition(SCHEMA_EXIF_SPECIFIC_PROPERTIES, "FocalLength", TAG_FOCAL_LENGTH, FormatKind.RATIONAL),
    TagDefinition(SCHEMA_EXIF_SPECIFIC_PROPERTIES, "ShutterSpeedValue", TAG_SHUTTER_SPEED, FormatKind.RATIONAL),
    TagDefinition(SCHEMA_EXIF_SPECIFIC_PROPERTIES, "DateTimeOriginal", TAG_DATETIME_ORIGINAL, FormatKind.DATE),
    TagDefinition(SCHEMA_EXIF_SPECIFIC_PROPERTIES, "DateTimeDigitized", TAG_DATETIME_DIGITIZED, FormatKind.DATE),
)


def get_tag_name(tag_id: int) -> str:
    """
    Get the display name of a tag.

    Args:
        tag_id: Tag identifier.

    Returns:
        The registered name, or ``"Unknown tag (0x....)"``.
    """
    return TAG_NAMES.get(tag_id, f"Unknown tag (0x{tag_id:04x})")
