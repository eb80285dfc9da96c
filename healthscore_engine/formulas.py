"""
Formula Library
===============
Closed-form derivations used by the calculators.

Every function is pure. Inputs that make a formula undefined (a logarithm of
a non-positive number, division by a non-positive length) raise
InvalidInputError instead of returning a non-finite value.
"""

import logging
import math
from typing import Dict, Tuple

from . import tables
from .errors import InvalidInputError
from .models import Gender, Impact

logger = logging.getLogger(__name__)

HOMA_IR_DIVISOR = 405


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from zero for positive values (0.25 -> 0.3)."""
    factor = 10 ** digits
    return math.floor(value * factor + 0.5) / factor


def _require_positive(name: str, value: float) -> None:
    if not value > 0:
        logger.error(f"Domain violation: {name}={value} must be positive")
        raise InvalidInputError(f"{name} must be positive, got {value}", field=name, value=value)


# ============================================================
# ANTHROPOMETRICS
# ============================================================

def bmi(weight_kg: float, height_cm: float) -> float:
    """Body mass index, kg/m^2."""
    _require_positive("height_cm", height_cm)
    height_m = height_cm / 100
    return weight_kg / (height_m * height_m)


def clamp_body_fat(pct: float) -> float:
    """Clamp a body-fat percentage into the plausible [5, 60] window."""
    return max(tables.BODY_FAT_MIN, min(tables.BODY_FAT_MAX, pct))


def navy_body_fat(
    gender: Gender,
    waist_cm: float,
    neck_cm: float,
    hip_cm: float,
    height_cm: float,
) -> float:
    """
    U.S. Navy circumference estimate of body-fat percentage.

    Male:   495 / (1.0324 - 0.19077*log10(waist - neck) + 0.15456*log10(height)) - 450
    Female: 495 / (1.29579 - 0.35004*log10(waist + hip - neck) + 0.22100*log10(height)) - 450

    The raw estimate is clamped to [5, 60]. The clamp does not excuse a
    domain violation: a non-positive circumference term or height raises.
    """
    if gender == Gender.MALE:
        circumference = waist_cm - neck_cm
        term = "waist_cm - neck_cm"
    else:
        circumference = waist_cm + hip_cm - neck_cm
        term = "waist_cm + hip_cm - neck_cm"
    _require_positive(term, circumference)
    _require_positive("height_cm", height_cm)

    constant, circ_factor, height_factor = tables.NAVY_COEFFICIENTS[gender]
    density = constant - circ_factor * math.log10(circumference) + height_factor * math.log10(height_cm)
    if density == 0:
        logger.error(f"Domain violation: Navy formula denominator is zero ({term}={circumference})")
        raise InvalidInputError("Navy body-fat formula is undefined for these measurements", field=term,
                                value=circumference)

    return clamp_body_fat(495 / density - 450)


def fat_mass(weight_kg: float, body_fat_pct: float) -> float:
    return body_fat_pct / 100 * weight_kg


def lean_mass(weight_kg: float, body_fat_pct: float) -> float:
    return weight_kg - fat_mass(weight_kg, body_fat_pct)


def ffmi(lean_mass_kg: float, height_cm: float) -> float:
    """Fat-free mass index: lean mass over height squared."""
    _require_positive("height_cm", height_cm)
    height_m = height_cm / 100
    return lean_mass_kg / (height_m * height_m)


def waist_to_height_ratio(waist_cm: float, height_cm: float) -> float:
    _require_positive("height_cm", height_cm)
    return waist_cm / height_cm


def waist_to_hip_ratio(waist_cm: float, hip_cm: float) -> float:
    _require_positive("hip_cm", hip_cm)
    return waist_cm / hip_cm


# ============================================================
# METABOLIC
# ============================================================

def homa_ir(fasting_glucose: float, fasting_insulin: float) -> float:
    """HOMA-IR with glucose in mg/dL and insulin in uIU/mL."""
    return fasting_glucose * fasting_insulin / HOMA_IR_DIVISOR


# ============================================================
# CARDIOVASCULAR
# ============================================================

def framingham_points(
    gender: Gender,
    age: float,
    total_cholesterol: float,
    hdl: float,
    systolic_bp: float,
    on_blood_pressure_meds: bool,
    smoker: bool,
    diabetic: bool,
) -> Tuple[int, Dict[str, int]]:
    """
    Sum gender-branched point contributions.

    Returns (total, breakdown) where breakdown maps each component
    (base, age, cholesterol, hdl, blood_pressure, smoking, diabetes) to
    its points.
    """
    breakdown = {
        "base": tables.CARDIO_BASE_POINTS[gender],
        "age": tables.CARDIO_AGE_POINTS[gender].lookup(age).score,
        "cholesterol": tables.CARDIO_CHOLESTEROL_POINTS[gender].lookup(total_cholesterol).score,
        "hdl": tables.CARDIO_HDL_POINTS[gender].lookup(hdl).score,
        "blood_pressure": tables.CARDIO_SBP_POINTS[(gender, bool(on_blood_pressure_meds))].lookup(systolic_bp).score,
        "smoking": tables.CARDIO_SMOKER_POINTS[gender] if smoker else 0,
        "diabetes": tables.CARDIO_DIABETES_POINTS[gender] if diabetic else 0,
    }
    return sum(breakdown.values()), breakdown


def ten_year_risk(points: int, gender: Gender) -> int:
    """Map a point total to a 10-year risk percentage (lookup, not a formula)."""
    return tables.CARDIO_RISK_LOOKUP[gender].lookup(points).score


def heart_age(chronological_age: float, risk_pct: float) -> int:
    """
    Coarse heart age from 10-year risk.

    risk <= 2 -> age - 5 (never below 40); <= 5 -> age; <= 10 -> +5;
    <= 20 -> +10; else +15. Rounded to a whole year.
    """
    band = tables.HEART_AGE_ADJUSTMENT.lookup(risk_pct)
    adjusted = chronological_age + band.score
    if band is tables.HEART_AGE_ADJUSTMENT.bands[0]:
        adjusted = max(tables.HEART_AGE_FLOOR, adjusted)
    return int(round_half_up(adjusted))


# ============================================================
# BIOLOGICAL AGE
# ============================================================

def bio_age_term_delta(term: tables.BioAgeTerm, value: float) -> float:
    """Signed years one biomarker adds to (or removes from) chronological age."""
    if term.mode == "excess":
        return (value - term.threshold) * term.coefficient if value > term.threshold else 0.0
    if term.mode == "deficit":
        return (term.threshold - value) * term.coefficient if value < term.threshold else 0.0
    if term.mode == "absolute":
        return value * term.coefficient if value > term.threshold else 0.0
    raise ValueError(f"Unknown bio-age term mode '{term.mode}'")


def bio_age_deltas(values: Dict[str, float]) -> Dict[str, float]:
    """Per-biomarker deltas, in declaration order of BIO_AGE_TERMS."""
    return {term.marker: bio_age_term_delta(term, values[term.marker]) for term in tables.BIO_AGE_TERMS}


def bio_age(chronological_age: float, deltas: Dict[str, float]) -> float:
    """Chronological age plus the summed deltas, rounded to one decimal."""
    return round_half_up(chronological_age + sum(deltas.values()), 1)


def impact_for_delta(delta: float) -> Impact:
    """Age-adding deltas are negative impacts, age-reducing ones positive."""
    if delta > 0:
        return Impact.NEGATIVE
    if delta < 0:
        return Impact.POSITIVE
    return Impact.NEUTRAL
