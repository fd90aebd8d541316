"""In-memory sink for one extraction: typed tags, raw properties, errors."""

from __future__ import annotations

from datetime import datetime
from typing import Any

from rational import Rational
from tags import get_tag_name


class XmpDirectory:
    """Accumulates the results of one XMP extraction.

    Typed values are keyed by tag id and keep insertion order.  Raw
    properties keep every ``(path, value)`` pair, duplicates included.
    Two directories compare equal when all three collections match.
    """

    name = "Xmp"

    def __init__(self) -> None:
        self._values: dict[int, Any] = {}
        self._properties: list[tuple[str, str]] = []
        self._errors: list[str] = []

    # -- sink operations -------------------------------------------------

    def set_string(self, tag_id: int, value: str) -> None:
        self._values[tag_id] = value

    def set_rational(self, tag_id: int, value: Rational) -> None:
        self._values[tag_id] = value

    def set_int(self, tag_id: int, value: int) -> None:
        self._values[tag_id] = value

    def set_double(self, tag_id: int, value: float) -> None:
        self._values[tag_id] = value

    def set_date(self, tag_id: int, value: datetime) -> None:
        self._values[tag_id] = value

    def add_property(self, path: str, value: str) -> None:
        self._properties.append((path, value))

    def add_error(self, message: str) -> None:
        self._errors.append(message)

    # -- accessors -------------------------------------------------------

    def contains(self, tag_id: int) -> bool:
        return tag_id in self._values

    def get(self, tag_id: int) -> Any:
        return self._values.get(tag_id)

    def get_string(self, tag_id: int) -> str | None:
        value = self._values.get(tag_id)
        return None if value is None else str(value)

    def get_int(self, tag_id: int) -> int | None:
        value = self._values.get(tag_id)
        return value if isinstance(value, int) else None

    def get_double(self, tag_id: int) -> float | None:
        value = self._values.get(tag_id)
        if isinstance(value, Rational):
            return value.to_float()
        if isinstance(value, (int, float)):
            return float(value)
        return None

    def get_rational(self, tag_id: int) -> Rational | None:
        value = self._values.get(tag_id)
        return value if isinstance(value, Rational) else None

    def get_date(self, tag_id: int) -> datetime | None:
        value = self._values.get(tag_id)
        return value if isinstance(value, datetime) else None

    def get_tag_name(self, tag_id: int) -> str:
        return get_tag_name(tag_id)

    @property
    def tags(self) -> dict[int, Any]:
        """Typed values keyed by tag id, in the order they were set."""
        return dict(self._values)

    @property
    def tag_count(self) -> int:
        return len(self._values)

    @property
    def raw_properties(self) -> list[tuple[str, str]]:
        """Every recorded ``(path, value)`` pair, in recording order."""
        return list(self._properties)

    @property
    def properties(self) -> dict[str, str]:
        """Raw properties as a path → value mapping (last occurrence wins)."""
        return dict(self._properties)

    @property
    def errors(self) -> list[str]:
        return list(self._errors)

    def has_errors(self) -> bool:
        return bool(self._errors)

    def is_empty(self) -> bool:
        return not (self._values or self._properties or self._errors)

    def to_dict(self) -> dict[str, Any]:
        """
        Export the directory contents.

        Returns:
            Dictionary with ``tags`` (name → value), ``properties``
            (path → value) and ``errors`` (list of messages).
        """
        return {
            "tags": {get_tag_name(tag_id): value for tag_id, value in self._values.items()},
            "properties": self.properties,
            "errors": self.errors,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, XmpDirectory):
            return NotImplemented
        return (
            self._values == other._values
            and self._properties == other._properties
            and self._errors == other._errors
        )

    def __repr__(self) -> str:
        return (
            f"XmpDirectory(tags={self.tag_count}, properties={len(self._properties)}, "
            f"errors={len(self._errors)})"
        )
