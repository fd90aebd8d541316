"""Locate the XMP APP1 segment in a JPEG file and run the extraction on it.

Pillow already splits the JPEG header into application segments while
opening the image (``JpegImageFile.applist``), so no marker parsing
happens here.  JPEG files usually carry two APP1 segments, Exif first
and XMP second; the XMP one is recognised by its namespace preamble.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from PIL import Image

from constants import JPEG_XMP_MARKER, XMP_SEGMENT_PREAMBLE
from directory import XmpDirectory
from reader import XmpReader

logger = logging.getLogger(__name__)

# Namespace URI without the NUL terminator
_XMP_SEGMENT_PREFIX = XMP_SEGMENT_PREAMBLE.rstrip(b"\x00")


def read_xmp_segment(source: Path | str | BinaryIO) -> bytes | None:
    """
    Read the XMP APP1 segment from a JPEG image.

    Args:
        source: Path to the image file, or a binary stream positioned at
            its start.

    Returns:
        The first APP1 segment that starts with the XMP namespace URI,
        preamble included, or ``None`` if the image is not a JPEG or
        has no such segment.
    """
    with Image.open(source) as img:
        applist = getattr(img, "applist", None)
        if applist is None:
            logger.debug("%s image has no JPEG application segments", img.format)
            return None

        for marker, segment in applist:
            if marker == JPEG_XMP_MARKER and segment.startswith(_XMP_SEGMENT_PREFIX):
                return segment

    return None


def extract_xmp_from_file(source: Path | str | BinaryIO) -> XmpDirectory:
    """
    Extract XMP data from a JPEG image into a fresh directory.

    Args:
        source: Path to the image file, or a binary stream.

    Returns:
        The populated directory; empty when the image carries no XMP.
    """
    directory = XmpDirectory()
    XmpReader(read_xmp_segment(source)).extract(directory)
    return directory
