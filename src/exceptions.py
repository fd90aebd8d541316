"""Exception types raised inside the extraction pipeline.

None of these escape ``XmpReader.extract``; the reader turns each of
them into a message on the directory's error list.
"""


class XmpError(Exception):
    """Base class for every XMP extraction failure."""


class SegmentError(XmpError):
    """The segment buffer is too short or lacks the XMP preamble."""


class XmpParseError(XmpError):
    """The segment payload is not a parseable XMP document."""


class CoercionError(XmpError):
    """A single property value could not be converted to its tag's format."""


class XmpDateError(CoercionError):
    """A date property is present but does not hold a valid XMP date."""
