"""
Body Composition Calculator
===========================
BMI, body fat, FFMI, waist ratios and visceral-fat risk from anthropometrics.

Body fat is the measured percentage when the method is "measured" and a value
was supplied, otherwise the U.S. Navy estimate. Either way it is clamped to
[5, 60] before lean mass, fat mass and FFMI are derived from it.
"""

import logging
from typing import Any, Mapping, Union

from .. import config, formulas, tables
from ..classifier import ThresholdTable
from ..models import (
    BodyCompInput,
    BodyCompResult,
    BodyFatMethod,
    MetricCategory,
    VisceralFatRisk,
)
from ..rules import Rule, RuleSet, evaluate_rules
from ._base import coerce_input, input_fingerprint

logger = logging.getLogger(__name__)


BODY_COMP_RULES = RuleSet(
    name="body_composition",
    rules=(
        Rule("underweight", lambda f: f["bmi"] < tables.BODY_COMP_UNDERWEIGHT_BMI, (
            "Consider increasing caloric intake with nutrient-dense foods to achieve a healthy weight.",
            "Focus on strength training to build lean muscle mass.",
        )),
        Rule("overweight", lambda f: f["bmi"] >= tables.BODY_COMP_OVERWEIGHT_BMI, (
            "Consider a moderate caloric deficit through a combination of diet and exercise.",
            "Aim for sustainable weight loss of 0.5-1kg per week.",
        )),
        Rule("high_body_fat",
             lambda f: f["body_fat_percentage"] > tables.BODY_COMP_HIGH_BODY_FAT[f["gender"]], (
                 "Focus on reducing body fat percentage through combined cardiovascular and resistance training.",
                 "Consider consulting a nutritionist for a personalized nutrition plan.",
             )),
        Rule("waist_to_height",
             lambda f: f["waist_to_height_ratio"] >= tables.BODY_COMP_HIGH_WAIST_TO_HEIGHT, (
                 "Your waist-to-height ratio indicates increased health risk. Focus on reducing abdominal fat.",
                 "Incorporate high-intensity interval training (HIIT) to target abdominal fat reduction.",
             )),
        Rule("visceral_fat", lambda f: f["visceral_fat_risk"] == VisceralFatRisk.HIGH, (
            "Your waist circumference indicates elevated visceral fat, which increases risk for "
            "metabolic diseases.",
            "Prioritize reducing abdominal obesity through diet, exercise, stress management, and "
            "improved sleep.",
        )),
        Rule("low_muscle_mass", lambda f: f["ffmi"] < tables.BODY_COMP_LOW_FFMI[f["gender"]], (
            "Consider a structured resistance training program to increase muscle mass.",
            "Ensure adequate protein intake (1.6-2.2g per kg of body weight) to support muscle growth.",
        )),
    ),
    fallback=(
        "Your body composition metrics are within healthy ranges. Continue your current fitness regimen.",
        "For optimal health, maintain a balanced diet and regular physical activity combining both "
        "strength and cardiovascular training.",
    ),
)


def _metric(value: float, table: ThresholdTable) -> MetricCategory:
    band = table.lookup(value)
    return MetricCategory(value=value, category=band.category, status=band.status)


def resolve_body_fat(data: BodyCompInput):
    """Return (clamped body-fat percent, method actually used)."""
    if data.body_fat_method == BodyFatMethod.MEASURED and data.body_fat_percentage is not None:
        return formulas.clamp_body_fat(data.body_fat_percentage), BodyFatMethod.MEASURED
    estimate = formulas.navy_body_fat(
        data.gender,
        data.waist_circumference,
        data.neck_circumference,
        data.hip_circumference,
        data.height,
    )
    return estimate, BodyFatMethod.ESTIMATE


def compute_body_composition(data: Union[BodyCompInput, Mapping[str, Any], None] = None) -> BodyCompResult:
    """
    Analyse body composition from anthropometric measurements.

    Args:
        data: BodyCompInput or a mapping of its fields (missing fields take defaults)

    Returns:
        BodyCompResult

    Raises:
        InvalidInputError: the Navy formula is undefined for the measurements
    """
    data = coerce_input(BodyCompInput, data)
    gender = data.gender

    bmi = formulas.bmi(data.weight, data.height)
    body_fat, method = resolve_body_fat(data)
    fat_mass = formulas.fat_mass(data.weight, body_fat)
    lean_mass = formulas.lean_mass(data.weight, body_fat)
    ffmi = formulas.ffmi(lean_mass, data.height)
    whtr = formulas.waist_to_height_ratio(data.waist_circumference, data.height)
    whr = formulas.waist_to_hip_ratio(data.waist_circumference, data.hip_circumference)

    metrics = {
        "bmi": _metric(bmi, tables.BMI_CATEGORY),
        "body_fat_percentage": _metric(body_fat, tables.BODY_FAT_CATEGORY[gender]),
        "ffmi": _metric(ffmi, tables.FFMI_CATEGORY[gender]),
        "waist_to_height_ratio": _metric(whtr, tables.WAIST_TO_HEIGHT_CATEGORY),
        "waist_to_hip_ratio": _metric(whr, tables.WAIST_TO_HIP_CATEGORY[gender]),
        "visceral_fat_risk": _metric(data.waist_circumference, tables.VISCERAL_FAT_RISK[gender]),
    }
    visceral_risk = VisceralFatRisk(metrics["visceral_fat_risk"].category)
    body_fat_metric = metrics["body_fat_percentage"]

    outcome = evaluate_rules(BODY_COMP_RULES, {
        "gender": gender,
        "bmi": bmi,
        "body_fat_percentage": body_fat,
        "ffmi": ffmi,
        "waist_to_height_ratio": whtr,
        "visceral_fat_risk": visceral_risk,
    })

    logger.info(
        f"Body composition: BMI {bmi:.1f}, body fat {body_fat:.1f}% ({method.value}), "
        f"FFMI {ffmi:.1f}, visceral risk {visceral_risk.value}"
    )

    return BodyCompResult(
        bmi=bmi,
        bmi_category=metrics["bmi"].category,
        bmi_status=metrics["bmi"].status,
        body_fat_percentage=body_fat,
        body_fat_category=body_fat_metric.category,
        body_fat_status=body_fat_metric.status,
        body_fat_method=method,
        ffmi=ffmi,
        ffmi_category=metrics["ffmi"].category,
        waist_to_height_ratio=whtr,
        waist_to_height_category=metrics["waist_to_height_ratio"].category,
        waist_to_hip_ratio=whr,
        waist_to_hip_category=metrics["waist_to_hip_ratio"].category,
        visceral_fat_risk=visceral_risk,
        lean_mass=lean_mass,
        fat_mass=fat_mass,
        status=body_fat_metric.status,
        interpretation=f"Category: {body_fat_metric.category}",
        metrics=metrics,
        recommendations=outcome.recommendations,
        triggered_rules=outcome.triggered,
        input_hash=input_fingerprint(data),
        engine_version=config.ENGINE_VERSION,
        ruleset_version=config.RULESET_VERSION,
    )
