"""
Healthscore Engine v1.0
=======================
Deterministic health scores from user-entered biomarkers:
biological age, cardiovascular risk, metabolic health and body composition.

Usage:
    from healthscore_engine import compute_biological_age, BioAgeInput
    result = compute_biological_age(BioAgeInput(age=42, glucose=104))
    result.to_dict()
"""

from healthscore_engine.calculators import (
    CALCULATORS,
    compute_biological_age,
    compute_body_composition,
    compute_cardiovascular_risk,
    compute_metabolic_health,
)
from healthscore_engine.classifier import Band, ThresholdTable, classify
from healthscore_engine.config import ENGINE_VERSION, configure_logging
from healthscore_engine.errors import HealthscoreError, InvalidInputError
from healthscore_engine.models import (
    BioAgeInput,
    BioAgeResult,
    BodyCompInput,
    BodyCompResult,
    BodyFatMethod,
    CardioInput,
    CardioResult,
    Gender,
    MetabolicInput,
    MetabolicResult,
    MetabolicStatus,
    Status,
    find_out_of_range_fields,
)
from healthscore_engine.reference_ranges import assess_reference_range
from healthscore_engine.rules import Rule, RuleSet, evaluate_rules

__version__ = ENGINE_VERSION
__all__ = [
    "CALCULATORS",
    "compute_biological_age",
    "compute_body_composition",
    "compute_cardiovascular_risk",
    "compute_metabolic_health",
    "Band",
    "ThresholdTable",
    "classify",
    "configure_logging",
    "HealthscoreError",
    "InvalidInputError",
    "BioAgeInput",
    "BioAgeResult",
    "BodyCompInput",
    "BodyCompResult",
    "BodyFatMethod",
    "CardioInput",
    "CardioResult",
    "Gender",
    "MetabolicInput",
    "MetabolicResult",
    "MetabolicStatus",
    "Status",
    "find_out_of_range_fields",
    "assess_reference_range",
    "Rule",
    "RuleSet",
    "evaluate_rules",
]
