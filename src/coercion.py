"""Conversion of raw XMP property text into typed tag values.

``coerce`` handles the textual formats (string, int, double, rational).
Dates are not coerced from text here: ``extract_date`` asks the
document for a structured date instead.

Every failure is a ``CoercionError`` scoped to one tag, so the caller
can record it and move on to the next definition.
"""

from __future__ import annotations

import re
from datetime import datetime

from exceptions import CoercionError
from rational import Rational
from tags import FormatKind
from xmp_document import XmpDocument

# ASCII decimal literals only; int() and float() also take underscores.
# Decimals may carry surrounding whitespace, integers may not.
_INTEGER_RE = re.compile(r"^[+-]?[0-9]+\Z")
_DECIMAL_RE = re.compile(r"^[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?\Z")
_INT_MIN = -(2**31)
_INT_MAX = 2**31 - 1


def coerce(raw_value: str, fmt: FormatKind, tag_id: int) -> str | int | float | Rational:
    """
    Convert a property's text to the value type of its tag.

    Args:
        raw_value: Property text as reported by the document.
        fmt: Target format of the tag.
        tag_id: Tag identifier, used in error messages.

    Returns:
        The coerced value.

    Raises:
        CoercionError: If the text does not match the format, or the
            format is not a textual one.
    """
    if fmt is FormatKind.STRING:
        return raw_value
    if fmt is FormatKind.INT:
        if not _INTEGER_RE.match(raw_value):
            raise CoercionError(f"Error in integer format for tag {tag_id}: invalid literal '{raw_value}'")
        value = int(raw_value)
        if not _INT_MIN <= value <= _INT_MAX:
            raise CoercionError(f"Error in integer format for tag {tag_id}: '{raw_value}' out of range")
        return value
    if fmt is FormatKind.DOUBLE:
        if not _DECIMAL_RE.match(raw_value.strip()):
            raise CoercionError(f"Error in double format for tag {tag_id}: invalid literal '{raw_value}'")
        return float(raw_value)
    if fmt is FormatKind.RATIONAL:
        return parse_rational(raw_value, tag_id)

    raise CoercionError(f"Unknown format code {_format_code(fmt)} for tag {tag_id}")


def parse_rational(raw_value: str, tag_id: int) -> Rational:
    """
    Parse ``"numerator/denominator"`` text into a ``Rational``.

    Each side is read as a float and truncated toward zero, so
    ``"4.9/1"`` yields ``Rational(4, 1)``.  A zero denominator is kept.

    Args:
        raw_value: Rational text.
        tag_id: Tag identifier, used in error messages.

    Returns:
        The parsed rational.

    Raises:
        CoercionError: If there is no ``/`` or either side is not a number.
    """
    parts = raw_value.split("/", 1)
    if len(parts) != 2:
        raise CoercionError(f"Error in rational format for tag {tag_id}")

    for part in parts:
        if not _DECIMAL_RE.match(part.strip()):
            raise CoercionError(f"Error in rational format for tag {tag_id}: invalid literal '{part}'")

    try:
        return Rational(int(float(parts[0])), int(float(parts[1])))
    except OverflowError as e:
        # exponents past the float range parse as inf
        raise CoercionError(f"Error in rational format for tag {tag_id}: {e}") from e


def extract_date(document: XmpDocument, namespace_uri: str, name: str) -> datetime | None:
    """
    Read a date property through the document's structured date lookup.

    Args:
        document: Parsed XMP document.
        namespace_uri: Schema namespace of the property.
        name: Local property name.

    Returns:
        The date, or ``None`` when the property is not present.

    Raises:
        XmpDateError: If the property is present but not a valid date.
    """
    return document.get_property_date(namespace_uri, name)


def _format_code(fmt: object) -> object:
    return fmt.value if isinstance(fmt, FormatKind) else fmt
