"""XMP segment validation.

A JPEG APP1 segment carrying XMP starts with the XMP namespace URI and
a NUL byte; the serialized packet follows.  ``validate_segment`` checks
the framing and hands back the packet bytes.
"""

from __future__ import annotations

from constants import (
    XMP_SEGMENT_MIN_LENGTH,
    XMP_SEGMENT_PREAMBLE,
    XMP_SEGMENT_PREAMBLE_LENGTH,
)
from exceptions import SegmentError


def validate_segment(buffer: bytes) -> bytes:
    """
    Check the segment framing and strip the preamble.

    Buffers of 30 bytes or fewer are rejected outright, so the shortest
    accepted segment is the 29-byte preamble plus two payload bytes.

    Args:
        buffer: Raw segment bytes.

    Returns:
        The payload following the preamble, unmodified.

    Raises:
        SegmentError: If the buffer is too short or the preamble differs.
    """
    if len(buffer) <= XMP_SEGMENT_MIN_LENGTH:
        raise SegmentError(
            f"Xmp data segment must contain at least {XMP_SEGMENT_MIN_LENGTH} bytes"
        )

    if bytes(buffer[:XMP_SEGMENT_PREAMBLE_LENGTH]) != XMP_SEGMENT_PREAMBLE:
        raise SegmentError("Xmp data segment doesn't begin with 'http://ns.adobe.com/xap/1.0/'")

    return bytes(buffer[XMP_SEGMENT_PREAMBLE_LENGTH:])


def is_xmp_segment(buffer: bytes) -> bool:
    """Return True if *buffer* passes ``validate_segment``."""
    try:
        validate_segment(buffer)
    except SegmentError:
        return False
    return True
