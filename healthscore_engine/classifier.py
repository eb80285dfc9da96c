"""
Range / Threshold Classifier
============================
Maps a scalar value onto an ordered table of breakpoints.

Every table is total over the real line: bands are evaluated in ascending
order, the first band whose upper bound admits the value wins, and the last
band is open-ended. Upper bounds are inclusive (value <= upper) unless a band
or its table says otherwise.

NaN is never bucketed: it raises InvalidInputError.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .errors import InvalidInputError

INF = math.inf


@dataclass(frozen=True)
class Band:
    """One row of a ThresholdTable."""
    upper: float
    category: str
    status: Optional[Enum] = None
    score: Optional[int] = None
    upper_inclusive: Optional[bool] = None  # None -> table default


@dataclass(frozen=True)
class ThresholdTable:
    """
    Ordered (upper, category, status) bands covering (-inf, +inf).

    Validated on construction:
    - at least one band
    - bounds non-decreasing; equal bounds only as an exclusive band followed
      by an inclusive one (a single-point band such as "== 0")
    - the last band is open-ended (upper == +inf)
    """
    name: str
    bands: Tuple[Band, ...]
    upper_inclusive: bool = True

    def __post_init__(self):
        if not self.bands:
            raise ValueError(f"ThresholdTable '{self.name}' has no bands")
        if self.bands[-1].upper != INF:
            raise ValueError(f"ThresholdTable '{self.name}': last band must be open-ended")
        for prev, band in zip(self.bands, self.bands[1:]):
            if math.isnan(prev.upper) or math.isnan(band.upper):
                raise ValueError(f"ThresholdTable '{self.name}': NaN bound")
            if band.upper < prev.upper:
                raise ValueError(
                    f"ThresholdTable '{self.name}': bounds out of order at {prev.upper} -> {band.upper}"
                )
            if band.upper == prev.upper and band.upper != INF:
                if self.is_inclusive(prev) or not self.is_inclusive(band):
                    raise ValueError(
                        f"ThresholdTable '{self.name}': overlapping bands at {band.upper}"
                    )

    def is_inclusive(self, band: Band) -> bool:
        if band.upper_inclusive is None:
            return self.upper_inclusive
        return band.upper_inclusive

    def admits(self, band: Band, value: float) -> bool:
        """True if value falls at or below this band's upper bound."""
        if self.is_inclusive(band):
            return value <= band.upper
        return value < band.upper

    def lookup(self, value: float) -> Band:
        """Return the band that applies to value."""
        if value is None or math.isnan(value):
            raise InvalidInputError(
                f"Cannot classify {value!r} against '{self.name}'",
                field=self.name,
                value=value,
            )
        for band in self.bands:
            if self.admits(band, value):
                return band
        return self.bands[-1]

    @property
    def breakpoints(self) -> Tuple[float, ...]:
        """Finite upper bounds, in order."""
        return tuple(b.upper for b in self.bands if b.upper != INF)

    @property
    def categories(self) -> Tuple[str, ...]:
        return tuple(b.category for b in self.bands)


def classify(value: float, table: ThresholdTable) -> Tuple[str, Optional[Enum]]:
    """Classify value against table. Returns (category, status)."""
    band = table.lookup(value)
    return band.category, band.status


def score(value: float, table: ThresholdTable) -> int:
    """Integer score of the band that applies to value."""
    band = table.lookup(value)
    if band.score is None:
        raise ValueError(f"ThresholdTable '{table.name}' does not carry scores")
    return band.score
