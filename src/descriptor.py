"""Human-readable descriptions of typed XMP tag values."""

from __future__ import annotations

import math
from datetime import datetime
from typing import Any

from rational import Rational
from tags import (
    TAG_APERTURE_VALUE,
    TAG_EXPOSURE_PROG,
    TAG_F_NUMBER,
    TAG_FOCAL_LENGTH,
    TAG_SHUTTER_SPEED,
)

EXPOSURE_PROGRAMS = {
    1: "Manual control",
    2: "Program normal",
    3: "Aperture priority",
    4: "Shutter priority",
    5: "Program creative (slow program)",
    6: "Program action (high-speed program)",
    7: "Portrait mode",
    8: "Landscape mode",
}


def describe(tag_id: int, value: Any) -> str:
    """
    Render a tag value for display.

    Args:
        tag_id: Tag identifier.
        value: Typed value as stored on the directory.

    Returns:
        Formatted description string.
    """
    if value is None:
        return ""
    if isinstance(value, datetime):
        return value.strftime("%Y:%m:%d %H:%M:%S")
    if tag_id == TAG_EXPOSURE_PROG and isinstance(value, int):
        return EXPOSURE_PROGRAMS.get(value, f"Unknown program ({value})")
    if isinstance(value, Rational) and value.denominator != 0:
        if tag_id == TAG_F_NUMBER:
            return f"f/{value.to_float():.1f}"
        if tag_id == TAG_FOCAL_LENGTH:
            return f"{value.to_float():.1f} mm"
        try:
            if tag_id == TAG_APERTURE_VALUE:
                return f"f/{apex_to_f_number(value.to_float()):.1f}"
            if tag_id == TAG_SHUTTER_SPEED:
                return format_shutter_speed(value.to_float())
        except (OverflowError, ZeroDivisionError):
            # APEX values far outside the photographic range
            pass
    return str(value)


def apex_to_f_number(aperture_apex: float) -> float:
    """Convert an APEX aperture value (Av) to an f-number."""
    return math.sqrt(2) ** aperture_apex


def format_shutter_speed(shutter_apex: float) -> str:
    """Convert an APEX shutter speed value (Tv) to an exposure time string."""
    if shutter_apex <= 1:
        seconds = 1 / math.exp(shutter_apex * math.log(2))
        return f"{round(seconds * 10) / 10:g} sec"
    denominator = int(round(math.exp(shutter_apex * math.log(2))))
    return f"1/{denominator} sec"
