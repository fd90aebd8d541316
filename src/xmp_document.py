"""XMP document binding: a queryable property store over an RDF/XML packet.

The reader never touches XML itself.  It talks to an ``XmpDocument``,
which offers three capabilities:

1. ``get_property_string(ns, name)`` — the text of a simple top-level
   property, or ``None`` when absent.
2. ``get_property_date(ns, name)`` — the same property read as an XMP
   date (ISO 8601 subset), or ``None`` when absent.
3. ``iter_properties()`` — every leaf property as a path/value pair, in
   document order.  Paths follow the XMP toolkit convention:
   ``exif:FNumber``, ``dc:subject[1]``, ``dc:title[1]/?xml:lang``,
   ``xmpMM:DerivedFrom/stRef:documentID``.

``parse_xmp`` builds the default lxml-backed implementation.  Anything
satisfying the protocol (a test double, another toolkit binding) can be
handed to the reader instead.
"""

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone
from typing import Iterator, NamedTuple, Protocol

from lxml import etree

from constants import NAMESPACE_PREFIXES, NS_RDF, NS_XML
from exceptions import XmpDateError, XmpParseError

_SECURE_XML_PARSER = etree.XMLParser(resolve_entities=False, no_network=True)

_RDF_RDF = f"{{{NS_RDF}}}RDF"
_RDF_DESCRIPTION = f"{{{NS_RDF}}}Description"
_RDF_LI = f"{{{NS_RDF}}}li"
_RDF_PARSE_TYPE = f"{{{NS_RDF}}}parseType"
_RDF_RESOURCE = f"{{{NS_RDF}}}resource"
_RDF_CONTAINERS = {f"{{{NS_RDF}}}Bag", f"{{{NS_RDF}}}Seq", f"{{{NS_RDF}}}Alt"}
_XML_LANG = f"{{{NS_XML}}}lang"

# XMP Date: YYYY[-MM[-DD[Thh:mm[:ss[.s+]][TZD]]]]
_XMP_DATE_RE = re.compile(
    r"^(?P<year>\d{4})"
    r"(?:-(?P<month>\d{2})"
    r"(?:-(?P<day>\d{2})"
    r"(?:T(?P<hour>\d{2}):(?P<minute>\d{2})"
    r"(?::(?P<second>\d{2})(?:\.(?P<fraction>\d+))?)?"
    r"(?P<tz>Z|[+-]\d{2}:\d{2})?"
    r")?"
    r")?"
    r")?$"
)


class XmpProperty(NamedTuple):
    """A single entry of the full property walk."""

    path: str | None
    value: object | None


class XmpDocument(Protocol):
    """Capabilities the reader needs from a parsed XMP packet."""

    def get_property_string(self, namespace_uri: str, name: str) -> str | None: ...

    def get_property_date(self, namespace_uri: str, name: str) -> datetime | None: ...

    def iter_properties(self) -> Iterator[XmpProperty]: ...


def parse_xmp(payload: bytes) -> LxmlXmpDocument:
    """
    Parse an XMP packet into a queryable document.

    Args:
        payload: Serialized XMP (RDF/XML), optionally wrapped in
            ``<?xpacket?>`` processing instructions.

    Returns:
        The parsed document.

    Raises:
        XmpParseError: If the payload is empty or not well-formed XML.
    """
    packet = payload.rstrip(b"\x00")
    if not packet.strip():
        raise XmpParseError("XMP packet is empty")

    try:
        root = etree.fromstring(packet, parser=_SECURE_XML_PARSER)
    except (etree.XMLSyntaxError, ValueError) as e:
        raise XmpParseError(str(e)) from e

    return LxmlXmpDocument(root)


class LxmlXmpDocument:
    """XMP property store built from an lxml element tree.

    A packet without an ``rdf:RDF`` element parses to an empty document.
    When the same property appears in more than one ``rdf:Description``,
    lookups return the first occurrence; the property walk reports all.
    """

    def __init__(self, root: etree._Element) -> None:
        self._simple: dict[tuple[str, str], str] = {}
        self._properties: list[XmpProperty] = []

        rdf = root if root.tag == _RDF_RDF else root.find(f".//{_RDF_RDF}")
        if rdf is None:
            return

        for description in rdf.iterchildren(_RDF_DESCRIPTION):
            self._read_description(description)

    def get_property_string(self, namespace_uri: str, name: str) -> str | None:
        """Return a simple property's text, or ``None`` if absent or not simple."""
        return self._simple.get((namespace_uri, name))

    def get_property_date(self, namespace_uri: str, name: str) -> datetime | None:
        """
        Return a simple property parsed as an XMP date.

        Args:
            namespace_uri: Schema namespace of the property.
            name: Local property name.

        Returns:
            A ``datetime`` (timezone-aware when the value carries a
            designator), or ``None`` if the property is absent.

        Raises:
            XmpDateError: If the property is present but not a valid date.
        """
        value = self.get_property_string(namespace_uri, name)
        if value is None:
            return None
        return parse_xmp_date(value)

    def iter_properties(self) -> Iterator[XmpProperty]:
        """Yield every leaf property in document order."""
        return iter(self._properties)

    # -- tree walk -------------------------------------------------------

    def _read_description(self, description: etree._Element) -> None:
        for key, value in _property_attributes(description):
            qname = etree.QName(key)
            self._simple.setdefault((qname.namespace, qname.localname), value)
            self._properties.append(XmpProperty(_qualified(key, description), value))

        for child in description:
            if not isinstance(child.tag, str):
                continue
            qname = etree.QName(child)
            path = _qualified(child.tag, child)
            if _is_simple(child):
                self._simple.setdefault((qname.namespace, qname.localname), _simple_value(child))
            self._read_node(child, path)

    def _read_node(self, element: etree._Element, path: str) -> None:
        """Record a property element at *path*, descending into arrays and structs."""
        if _is_simple(element):
            self._properties.append(XmpProperty(path, _simple_value(element)))
            lang = element.get(_XML_LANG)
            if lang is not None:
                self._properties.append(XmpProperty(f"{path}/?xml:lang", lang))
            return

        container = _container(element)
        if container is not None:
            items = [li for li in container if li.tag == _RDF_LI]
            for index, item in enumerate(items, start=1):
                self._read_node(item, f"{path}[{index}]")
            return

        # Struct: rdf:parseType="Resource", nested rdf:Description, or
        # shorthand field attributes.
        fields = element
        nested = element.find(_RDF_DESCRIPTION)
        if nested is not None:
            fields = nested
        for key, value in _property_attributes(fields):
            self._properties.append(XmpProperty(f"{path}/{_qualified(key, fields)}", value))
        for field in fields:
            if isinstance(field.tag, str) and field.tag != _RDF_DESCRIPTION:
                self._read_node(field, f"{path}/{_qualified(field.tag, field)}")


def parse_xmp_date(value: str) -> datetime:
    """
    Parse an XMP date string.

    Missing month/day default to 1, missing time fields to 0.  Fractional
    seconds beyond microsecond precision are truncated.

    Args:
        value: Date text such as ``2008-01-15T10:20:30+01:00``.

    Returns:
        The parsed ``datetime``.

    Raises:
        XmpDateError: If *value* is not a valid XMP date.
    """
    match = _XMP_DATE_RE.match(value.strip())
    if match is None:
        raise XmpDateError(f"Invalid date string '{value}'")

    parts = match.groupdict()
    fraction = parts["fraction"] or "0"
    try:
        tz = _parse_timezone(parts["tz"])
        return datetime(
            int(parts["year"]),
            int(parts["month"] or 1),
            int(parts["day"] or 1),
            int(parts["hour"] or 0),
            int(parts["minute"] or 0),
            int(parts["second"] or 0),
            int(fraction[:6].ljust(6, "0")),
            tzinfo=tz,
        )
    except ValueError as e:
        raise XmpDateError(f"Invalid date string '{value}': {e}") from e


def _parse_timezone(designator: str | None) -> timezone | None:
    """Turn ``Z`` or ``+hh:mm``/``-hh:mm`` into a fixed offset; ValueError past 24 hours."""
    if not designator:
        return None
    if designator == "Z":
        return timezone.utc
    sign = -1 if designator[0] == "-" else 1
    hours, minutes = designator[1:].split(":")
    return timezone(sign * timedelta(hours=int(hours), minutes=int(minutes)))


def _property_attributes(element: etree._Element) -> Iterator[tuple[str, str]]:
    """Yield namespaced attributes that encode properties (not RDF/xml syntax)."""
    for key, value in element.attrib.items():
        namespace = etree.QName(key).namespace
        if namespace is None or namespace in (NS_RDF, NS_XML):
            continue
        yield key, value


def _qualified(tag: str, element: etree._Element) -> str:
    """Render a Clark-notation name as ``prefix:local``."""
    qname = etree.QName(tag)
    prefix = NAMESPACE_PREFIXES.get(qname.namespace)
    if prefix is None:
        for candidate, uri in element.nsmap.items():
            if uri == qname.namespace and candidate:
                prefix = candidate
                break
    if prefix is None:
        return f"{{{qname.namespace}}}{qname.localname}"
    return f"{prefix}:{qname.localname}"


def _container(element: etree._Element) -> etree._Element | None:
    for child in element:
        if child.tag in _RDF_CONTAINERS:
            return child
    return None


def _is_simple(element: etree._Element) -> bool:
    """True for a text-valued (or resource-valued) property element."""
    if element.get(_RDF_PARSE_TYPE) == "Resource":
        return False
    if any(isinstance(child.tag, str) for child in element):
        return False
    return not any(True for _ in _property_attributes(element))


def _simple_value(element: etree._Element) -> str:
    resource = element.get(_RDF_RESOURCE)
    if resource is not None:
        return resource
    return element.text or ""
