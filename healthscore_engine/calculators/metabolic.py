"""
Metabolic Health Calculator
===========================
Six factors scored 0-10, averaged into one metabolic health score.

Factors:
- fasting_glucose
- hba1c
- insulin_sensitivity (HOMA-IR from fasting glucose and insulin)
- triglycerides
- hdl
- waist_circumference (not gender-adjusted)

Overall status: >= 8 optimal, >= 6 good, >= 4 fair, else poor.
"""

import logging
from typing import Any, Dict, Mapping, Union

from .. import config, formulas, tables
from ..classifier import ThresholdTable, classify, score
from ..models import FactorScore, MetabolicInput, MetabolicResult
from ..reference_ranges import assess_panel
from ..rules import Rule, RuleSet, evaluate_rules
from ._base import coerce_input, input_fingerprint

logger = logging.getLogger(__name__)

# factor -> (score table, interpretation table)
FACTOR_TABLES: Dict[str, tuple] = {
    "fasting_glucose": (tables.FASTING_GLUCOSE_SCORE, tables.FASTING_GLUCOSE_TEXT),
    "hba1c": (tables.HBA1C_SCORE, tables.HBA1C_TEXT),
    "insulin_sensitivity": (tables.HOMA_IR_SCORE, tables.HOMA_IR_TEXT),
    "triglycerides": (tables.TRIGLYCERIDES_SCORE, tables.TRIGLYCERIDES_TEXT),
    "hdl": (tables.HDL_SCORE, tables.HDL_TEXT),
    "waist_circumference": (tables.WAIST_SCORE, tables.WAIST_TEXT),
}


def _low(*factors: str):
    limit = tables.METABOLIC_RECOMMENDATION_SCORE
    return lambda facts: any(facts[f] < limit for f in factors)


METABOLIC_RULES = RuleSet(
    name="metabolic",
    rules=(
        Rule("glycemic_control", _low("fasting_glucose", "hba1c"), (
            "Consider reducing refined carbohydrates and added sugars in your diet.",
            "Aim for regular physical activity, especially after meals.",
        )),
        Rule("insulin_sensitivity", _low("insulin_sensitivity"), (
            "Focus on improving insulin sensitivity through weight management and resistance training.",
            "Consider time-restricted eating (intermittent fasting) after consulting with a healthcare provider.",
        )),
        Rule("triglycerides", _low("triglycerides"), (
            "Reduce intake of processed foods, refined carbs, and alcohol.",
            "Increase omega-3 fatty acids through fatty fish or supplements.",
        )),
        Rule("hdl", _low("hdl"), (
            "Include more healthy fats from sources like olive oil, avocados, and nuts.",
            "Consider regular cardiovascular exercise to boost HDL levels.",
        )),
        Rule("waist_circumference", _low("waist_circumference"), (
            "Focus on reducing abdominal fat through combined diet and exercise.",
            "Consider strength training to improve body composition.",
        )),
    ),
    fallback=(
        "Continue maintaining your current healthy lifestyle.",
        "Regular monitoring of metabolic markers is recommended even with optimal scores.",
    ),
)


def score_factor(value: float, score_table: ThresholdTable, text_table: ThresholdTable) -> FactorScore:
    points = score(value, score_table)
    _, status = classify(points, tables.METABOLIC_SCORE_STATUS)
    interpretation, _ = classify(value, text_table)
    return FactorScore(value=value, score=points, status=status, interpretation=interpretation)


def compute_metabolic_health(data: Union[MetabolicInput, Mapping[str, Any], None] = None) -> MetabolicResult:
    """
    Score metabolic health from a metabolic panel.

    Args:
        data: MetabolicInput or a mapping of its fields (missing fields take defaults)

    Returns:
        MetabolicResult
    """
    data = coerce_input(MetabolicInput, data)

    bmi = formulas.bmi(data.weight, data.height)
    bmi_category, _ = classify(bmi, tables.METABOLIC_BMI_CATEGORY)
    homa_ir = formulas.homa_ir(data.fasting_glucose, data.fasting_insulin)
    insulin_category, _ = classify(homa_ir, tables.INSULIN_SENSITIVITY_CATEGORY)

    values = {
        "fasting_glucose": data.fasting_glucose,
        "hba1c": data.hba1c,
        "insulin_sensitivity": homa_ir,
        "triglycerides": data.triglycerides,
        "hdl": data.hdl,
        "waist_circumference": data.waist_circumference,
    }
    factors = {
        name: score_factor(values[name], score_table, text_table)
        for name, (score_table, text_table) in FACTOR_TABLES.items()
    }

    total = sum(f.score for f in factors.values()) / len(factors)
    _, status = classify(total, tables.METABOLIC_OVERALL_STATUS)

    outcome = evaluate_rules(METABOLIC_RULES, {name: f.score for name, f in factors.items()})

    logger.info(f"Metabolic score {total:.2f} ({status.value}), HOMA-IR {homa_ir:.2f}")

    return MetabolicResult(
        total_score=total,
        status=status,
        display_status=status.display_status,
        interpretation=f"Your metabolic health is {status.value.upper()}.",
        bmi=bmi,
        bmi_category=bmi_category,
        insulin_sensitivity=homa_ir,
        insulin_sensitivity_category=insulin_category,
        metabolic_factors=factors,
        reference_ranges=assess_panel("metabolic", data.model_dump()),
        recommendations=outcome.recommendations,
        triggered_rules=outcome.triggered,
        input_hash=input_fingerprint(data),
        engine_version=config.ENGINE_VERSION,
        ruleset_version=config.RULESET_VERSION,
    )
