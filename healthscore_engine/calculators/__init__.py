"""The four calculator orchestrators."""

from healthscore_engine.calculators.bio_age import compute_biological_age
from healthscore_engine.calculators.body_composition import compute_body_composition
from healthscore_engine.calculators.cardiovascular import compute_cardiovascular_risk
from healthscore_engine.calculators.metabolic import compute_metabolic_health

CALCULATORS = {
    "bio_age": compute_biological_age,
    "cardiovascular": compute_cardiovascular_risk,
    "metabolic": compute_metabolic_health,
    "body_composition": compute_body_composition,
}

__all__ = [
    "CALCULATORS",
    "compute_biological_age",
    "compute_body_composition",
    "compute_cardiovascular_risk",
    "compute_metabolic_health",
]
