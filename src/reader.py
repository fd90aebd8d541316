"""Extraction of XMP data from a JPEG header segment.

The pipeline for one segment:

1. Validate the segment framing and strip the preamble (``segment``).
2. Parse the packet into an ``XmpDocument`` (``xmp_document``).
3. Walk ``tags.TAG_MAPPING``: look up each property, coerce it
   (``coercion``) and store the typed value on the directory.
4. Walk every property the document reports and store each as a raw
   ``(path, value)`` pair, whether or not step 3 already mapped it.

Nothing is raised to the caller.  A framing or parse failure is
recorded once and stops the extraction; a failure on one tag is
recorded and the walk carries on with the next.
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Protocol

from coercion import coerce, extract_date
from directory import XmpDirectory
from exceptions import CoercionError, SegmentError, XmpParseError
from rational import Rational
from segment import validate_segment
from tags import TAG_MAPPING, FormatKind, TagDefinition
from xmp_document import XmpDocument, parse_xmp

logger = logging.getLogger(__name__)


class DirectorySink(Protocol):
    """Operations the reader performs on its output directory."""

    def set_string(self, tag_id: int, value: str) -> None: ...

    def set_rational(self, tag_id: int, value: Rational) -> None: ...

    def set_int(self, tag_id: int, value: int) -> None: ...

    def set_double(self, tag_id: int, value: float) -> None: ...

    def set_date(self, tag_id: int, value: datetime) -> None: ...

    def add_property(self, path: str, value: str) -> None: ...

    def add_error(self, message: str) -> None: ...


class XmpReader:
    """Reads XMP data from one JPEG header segment.

    Args:
        data: The segment bytes, preamble included.  ``None`` or empty
            means there is nothing to extract.
        parser: Builds an ``XmpDocument`` from the packet bytes.
            Defaults to the lxml binding.
        mapping: Tag definitions to apply, in order.
    """

    def __init__(
        self,
        data: bytes | None,
        parser: Callable[[bytes], XmpDocument] = parse_xmp,
        mapping: tuple[TagDefinition, ...] = TAG_MAPPING,
    ) -> None:
        self._data = data
        self._parser = parser
        self._mapping = mapping

    def extract(self, directory: DirectorySink) -> None:
        """
        Perform the extraction, adding found values to *directory*.

        Args:
            directory: Sink receiving typed values, raw properties and errors.
        """
        if not self._data:
            return

        try:
            payload = validate_segment(self._data)
        except SegmentError as e:
            logger.debug("Rejected XMP segment: %s", e)
            directory.add_error(str(e))
            return

        try:
            document = self._parser(payload)
        except XmpParseError as e:
            logger.debug("XMP packet could not be parsed: %s", e)
            directory.add_error(f"Error parsing XMP segment: {e}")
            return

        for definition in self._mapping:
            if definition.format is not FormatKind.DATE:
                self._process_tag(document, directory, definition)
        for definition in self._mapping:
            if definition.format is FormatKind.DATE:
                self._process_date_tag(document, directory, definition)

        count = 0
        for prop in document.iter_properties():
            if prop.path is not None and prop.value is not None:
                directory.add_property(prop.path, str(prop.value))
                count += 1
        logger.debug("Recorded %d raw XMP properties", count)

    def _process_tag(
        self, document: XmpDocument, directory: DirectorySink, definition: TagDefinition
    ) -> None:
        """Look up one property and store it under its tag, if present."""
        raw_value = document.get_property_string(definition.namespace_uri, definition.local_name)
        if raw_value is None:
            return

        try:
            value = coerce(raw_value, definition.format, definition.tag_id)
        except CoercionError as e:
            logger.debug("Skipping XMP tag %d: %s", definition.tag_id, e)
            directory.add_error(str(e))
            return

        if definition.format is FormatKind.RATIONAL:
            directory.set_rational(definition.tag_id, value)
        elif definition.format is FormatKind.INT:
            directory.set_int(definition.tag_id, value)
        elif definition.format is FormatKind.DOUBLE:
            directory.set_double(definition.tag_id, value)
        else:
            directory.set_string(definition.tag_id, value)

    def _process_date_tag(
        self, document: XmpDocument, directory: DirectorySink, definition: TagDefinition
    ) -> None:
        try:
            value = extract_date(document, definition.namespace_uri, definition.local_name)
        except CoercionError as e:
            logger.debug("Skipping XMP tag %d: %s", definition.tag_id, e)
            directory.add_error(f"Error in date format for tag {definition.tag_id}: {e}")
            return

        if value is not None:
            directory.set_date(definition.tag_id, value)


def extract_xmp(data: bytes | None) -> XmpDirectory:
    """
    Extract XMP data from a segment into a fresh directory.

    Args:
        data: The segment bytes, preamble included.

    Returns:
        The populated directory (possibly empty, possibly holding errors).
    """
    directory = XmpDirectory()
    XmpReader(data).extract(directory)
    return directory
