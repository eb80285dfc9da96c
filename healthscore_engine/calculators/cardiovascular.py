"""
Cardiovascular Risk Calculator
==============================
Framingham-style point score -> 10-year risk percent -> heart age.

Pipeline:
1. Sum gender-branched points (age, cholesterol, HDL, systolic BP, smoking, diabetes)
2. Look up the 10-year risk percent for the point total
3. Derive heart age from the risk percent
4. Annotate the risk factors present, each with a description and a recommendation

Recommendations are the triggered risk factors' recommendations in factor
order. There is no fallback text.
"""

import logging
from typing import Any, Dict, Mapping, Union

from .. import config, formulas, tables
from ..classifier import classify
from ..models import CardioInput, CardioResult, RiskFactor, RiskImpact
from ..rules import Rule, RuleSet, evaluate_rules
from ._base import coerce_input, input_fingerprint

logger = logging.getLogger(__name__)


# factor id -> (description, recommendation)
RISK_FACTOR_TEXT: Dict[str, tuple] = {
    "age": (
        "Age is a non-modifiable risk factor for heart disease.",
        "Focus on modifiable risk factors like diet, exercise, and not smoking.",
    ),
    "cholesterol": (
        "Elevated total cholesterol increases cardiovascular risk.",
        "Consider dietary changes, increased physical activity, and possibly medication.",
    ),
    "hdl": (
        'Low HDL ("good") cholesterol is a risk factor for heart disease.',
        "Regular exercise, weight loss if needed, and avoiding trans fats can help raise HDL.",
    ),
    "blood_pressure": (
        "Elevated blood pressure increases strain on your heart and arteries.",
        "Reduce sodium intake, maintain healthy weight, exercise regularly, and manage stress.",
    ),
    "smoking": (
        "Smoking significantly increases cardiovascular risk.",
        "Quitting smoking is one of the most impactful changes you can make for heart health.",
    ),
    "diabetes": (
        "Diabetes significantly increases your risk of heart disease.",
        "Maintain good glucose control through diet, exercise, and medication as prescribed.",
    ),
}


def _present(factor_id: str):
    return lambda facts: facts[factor_id] != RiskImpact.NONE


CARDIO_RULES = RuleSet(
    name="cardiovascular",
    rules=tuple(
        Rule(factor_id, _present(factor_id), (recommendation,))
        for factor_id, (_, recommendation) in RISK_FACTOR_TEXT.items()
    ),
)


def risk_factor_impacts(data: CardioInput) -> Dict[str, RiskImpact]:
    """Impact of every factor, RiskImpact.NONE where it is absent."""
    age_impact = RiskImpact.NONE
    if data.age >= tables.CARDIO_AGE_FACTOR_MIN[data.gender]:
        age_impact = RiskImpact.MEDIUM

    _, cholesterol_impact = classify(data.total_cholesterol, tables.CARDIO_CHOLESTEROL_FACTOR)
    _, bp_impact = classify(data.systolic_bp, tables.CARDIO_BP_FACTOR)

    return {
        "age": age_impact,
        "cholesterol": cholesterol_impact,
        "hdl": RiskImpact.HIGH if data.hdl < tables.CARDIO_HDL_FACTOR_MAX else RiskImpact.NONE,
        "blood_pressure": bp_impact,
        "smoking": RiskImpact.HIGH if data.smoker else RiskImpact.NONE,
        "diabetes": RiskImpact.HIGH if data.diabetic else RiskImpact.NONE,
    }


def compute_cardiovascular_risk(data: Union[CardioInput, Mapping[str, Any], None] = None) -> CardioResult:
    """
    Estimate 10-year cardiovascular risk and heart age.

    Args:
        data: CardioInput or a mapping of its fields (missing fields take defaults)

    Returns:
        CardioResult
    """
    data = coerce_input(CardioInput, data)

    points, breakdown = formulas.framingham_points(
        data.gender,
        data.age,
        data.total_cholesterol,
        data.hdl,
        data.systolic_bp,
        data.on_blood_pressure_meds,
        data.smoker,
        data.diabetic,
    )
    risk = formulas.ten_year_risk(points, data.gender)
    heart_age = formulas.heart_age(data.age, risk)

    _, status = classify(risk, tables.CARDIO_STATUS)
    interpretation, _ = classify(risk, tables.CARDIO_INTERPRETATION)

    impacts = risk_factor_impacts(data)
    risk_factors = {
        factor_id: RiskFactor(
            impact=impact,
            description=RISK_FACTOR_TEXT[factor_id][0],
            recommendation=RISK_FACTOR_TEXT[factor_id][1],
        )
        for factor_id, impact in impacts.items()
        if impact != RiskImpact.NONE
    }
    outcome = evaluate_rules(CARDIO_RULES, impacts)

    logger.info(f"Cardiovascular risk {risk}% ({points} points), heart age {heart_age}")

    return CardioResult(
        ten_year_risk=risk,
        heart_age=heart_age,
        risk_points=points,
        point_breakdown=breakdown,
        status=status,
        interpretation=interpretation,
        risk_factors=risk_factors,
        recommendations=outcome.recommendations,
        triggered_rules=outcome.triggered,
        input_hash=input_fingerprint(data),
        engine_version=config.ENGINE_VERSION,
        ruleset_version=config.RULESET_VERSION,
    )
