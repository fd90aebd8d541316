"""Public façade for the XMP extraction pipeline: re-exports every symbol.

Consumers should ``import metadata_handler`` rather than reaching into
the internal modules directly.  This file gathers all public names so
that the API surface stays stable even as the implementation is
reorganised.

Internal modules:

- ``constants``     — preamble, namespaces and format lists
- ``exceptions``    — error hierarchy
- ``rational``      — fraction value type
- ``tags``          — tag ids and the declarative mapping table
- ``segment``       — segment framing validation
- ``xmp_document``  — lxml-backed XMP property store
- ``coercion``      — raw text → typed value conversion
- ``directory``     — in-memory result sink
- ``reader``        — the extraction pipeline
- ``descriptor``    — display formatting of typed values
- ``jpeg_segments`` — reading the XMP segment from JPEG files
"""

from coercion import coerce, extract_date, parse_rational
from constants import (
    SCHEMA_EXIF_ADDITIONAL_PROPERTIES,
    SCHEMA_EXIF_SPECIFIC_PROPERTIES,
    SCHEMA_EXIF_TIFF_PROPERTIES,
    SUPPORTED_FORMATS,
    XMP_SEGMENT_PREAMBLE,
)
from descriptor import describe
from directory import XmpDirectory
from exceptions import (
    CoercionError,
    SegmentError,
    XmpDateError,
    XmpError,
    XmpParseError,
)
from jpeg_segments import extract_xmp_from_file, read_xmp_segment
from rational import Rational
from reader import XmpReader, extract_xmp
from segment import is_xmp_segment, validate_segment
from tags import TAG_MAPPING, FormatKind, TagDefinition, get_tag_name
from utils import is_supported_format
from xmp_document import XmpDocument, XmpProperty, parse_xmp

__all__ = [
    # Constants
    "XMP_SEGMENT_PREAMBLE",
    "SCHEMA_EXIF_SPECIFIC_PROPERTIES",
    "SCHEMA_EXIF_ADDITIONAL_PROPERTIES",
    "SCHEMA_EXIF_TIFF_PROPERTIES",
    "SUPPORTED_FORMATS",
    # Errors
    "XmpError",
    "SegmentError",
    "XmpParseError",
    "CoercionError",
    "XmpDateError",
    # Values and tags
    "Rational",
    "FormatKind",
    "TagDefinition",
    "TAG_MAPPING",
    "get_tag_name",
    # Pipeline
    "validate_segment",
    "is_xmp_segment",
    "parse_xmp",
    "XmpDocument",
    "XmpProperty",
    "coerce",
    "parse_rational",
    "extract_date",
    "XmpDirectory",
    "XmpReader",
    "extract_xmp",
    "describe",
    # Files
    "read_xmp_segment",
    "extract_xmp_from_file",
    "is_supported_format",
]
