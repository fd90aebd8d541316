"""Fraction value type stored for rational-format tags."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Rational:
    """An integer numerator over an integer denominator.

    No reduction or validation happens on construction; ``Rational(8, 2)``
    and ``Rational(4, 1)`` are distinct values.
    """

    numerator: int
    denominator: int

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"

    def to_float(self) -> float:
        """Return the fraction as a float (``inf``/``nan`` for a zero denominator)."""
        if self.denominator == 0:
            if self.numerator == 0:
                return float("nan")
            return float("inf") if self.numerator > 0 else float("-inf")
        return self.numerator / self.denominator
