"""Shared constants for XMP segment validation, schema namespaces, and JPEG access.

All modules reference these constants rather than hard-coding values,
so adding a new schema or changing a segment rule requires updating
only this file.
"""

# XMP segment preamble: the XMP namespace URI followed by a single NUL byte
XMP_SEGMENT_PREAMBLE = b"http://ns.adobe.com/xap/1.0/\x00"
XMP_SEGMENT_PREAMBLE_LENGTH = len(XMP_SEGMENT_PREAMBLE)  # 29

# Segments of this length or shorter are rejected before the preamble check
XMP_SEGMENT_MIN_LENGTH = 30

# Schema namespaces for the tags mapped into typed fields
SCHEMA_EXIF_SPECIFIC_PROPERTIES = "http://ns.adobe.com/exif/1.0/"
SCHEMA_EXIF_ADDITIONAL_PROPERTIES = "http://ns.adobe.com/exif/1.0/aux/"
SCHEMA_EXIF_TIFF_PROPERTIES = "http://ns.adobe.com/tiff/1.0/"

# RDF / XMP packet namespaces
NS_RDF = "http://www.w3.org/1999/02/22-rdf-syntax-ns#"
NS_XML = "http://www.w3.org/XML/1998/namespace"
NS_X = "adobe:ns:meta/"

# Well-known prefixes, used when a document does not declare its own
NAMESPACE_PREFIXES = {
    SCHEMA_EXIF_SPECIFIC_PROPERTIES: "exif",
    SCHEMA_EXIF_ADDITIONAL_PROPERTIES: "aux",
    SCHEMA_EXIF_TIFF_PROPERTIES: "tiff",
    "http://purl.org/dc/elements/1.1/": "dc",
    "http://ns.adobe.com/xap/1.0/": "xmp",
    "http://ns.adobe.com/xap/1.0/mm/": "xmpMM",
    "http://ns.adobe.com/xap/1.0/rights/": "xmpRights",
    "http://ns.adobe.com/photoshop/1.0/": "photoshop",
    "http://ns.adobe.com/camera-raw-settings/1.0/": "crs",
    NS_XML: "xml",
}

# JPEG application segment carrying XMP
JPEG_XMP_MARKER = "APP1"

# Supported image formats for file-based extraction
SUPPORTED_FORMATS = {".jpg", ".jpeg"}
