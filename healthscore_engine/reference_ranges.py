"""
Reference Range Indicators
==========================
Normal ranges per biomarker and the low/normal/high reading shown next to
each value. Display scale (min/max) and normal window (min_normal/max_normal)
are separate: a value may sit outside the display scale.

Panels:
- "bio_age": the biological age blood panel
- "metabolic": the metabolic health panel
"""

from dataclasses import dataclass
from typing import Dict, Mapping

from .models import RangePosition, RangeReading


@dataclass(frozen=True)
class ReferenceRange:
    min: float
    max: float
    min_normal: float
    max_normal: float
    unit: str
    label: str


BIO_AGE_RANGES: Dict[str, ReferenceRange] = {
    "glucose": ReferenceRange(70, 120, 70, 99, "mg/dL", "Fasting Glucose"),
    "crp": ReferenceRange(0, 10, 0, 1.0, "mg/L", "C-Reactive Protein"),
    "albumin": ReferenceRange(3.0, 6.0, 3.5, 5.2, "g/dL", "Albumin"),
    "creatinine": ReferenceRange(0.5, 2.0, 0.6, 1.2, "mg/dL", "Creatinine"),
    "bun": ReferenceRange(5, 30, 7, 20, "mg/dL", "Blood Urea Nitrogen"),
    "alt": ReferenceRange(0, 100, 0, 40, "U/L", "Alanine Aminotransferase"),
    "hdl": ReferenceRange(20, 100, 40, 100, "mg/dL", "HDL Cholesterol"),
    "ldl": ReferenceRange(40, 200, 40, 100, "mg/dL", "LDL Cholesterol"),
    "hba1c": ReferenceRange(4.0, 12.0, 4.0, 5.7, "%", "HbA1c"),
    "wbc": ReferenceRange(3.0, 11.0, 4.5, 11.0, "K/uL", "White Blood Cell Count"),
}

METABOLIC_RANGES: Dict[str, ReferenceRange] = {
    "fasting_glucose": ReferenceRange(60, 140, 70, 100, "mg/dL", "Fasting Glucose"),
    "hba1c": ReferenceRange(4, 8, 4, 5.7, "%", "HbA1c"),
    "fasting_insulin": ReferenceRange(2, 20, 2, 8, "uIU/mL", "Fasting Insulin"),
    "triglycerides": ReferenceRange(30, 200, 30, 150, "mg/dL", "Triglycerides"),
    "hdl": ReferenceRange(20, 80, 40, 80, "mg/dL", "HDL Cholesterol"),
    "waist_circumference": ReferenceRange(60, 120, 60, 94, "cm", "Waist Circumference"),
}

PANELS: Dict[str, Dict[str, ReferenceRange]] = {
    "bio_age": BIO_AGE_RANGES,
    "metabolic": METABOLIC_RANGES,
}


def _pct(value: float, ref: ReferenceRange) -> float:
    return (value - ref.min) / (ref.max - ref.min) * 100


def read_range(marker: str, value: float, ref: ReferenceRange) -> RangeReading:
    """Place value on the reference gauge."""
    position = RangePosition.NORMAL
    if value < ref.min_normal:
        position = RangePosition.LOW
    if value > ref.max_normal:
        position = RangePosition.HIGH

    return RangeReading(
        marker=marker,
        label=ref.label,
        value=value,
        unit=ref.unit,
        position=position,
        position_pct=_pct(value, ref),
        normal_start_pct=_pct(ref.min_normal, ref),
        normal_end_pct=_pct(ref.max_normal, ref),
    )


def assess_reference_range(panel: str, marker: str, value: float) -> RangeReading:
    """
    Reading for one marker of a panel.

    Raises:
        KeyError: unknown panel or marker
    """
    return read_range(marker, value, PANELS[panel][marker])


def assess_panel(panel: str, values: Mapping[str, float]) -> Dict[str, RangeReading]:
    """Readings for every marker of the panel present in values, in panel order."""
    ranges = PANELS[panel]
    return {
        marker: read_range(marker, values[marker], ref)
        for marker, ref in ranges.items()
        if marker in values
    }
