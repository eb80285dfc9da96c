"""
Biological Age Calculator
=========================
Chronological age adjusted by six blood biomarkers.

Each biomarker contributes a signed number of years (see tables.BIO_AGE_TERMS);
the sum is added to chronological age and rounded to one decimal. Status and
interpretation are bucketed independently on the resulting age difference.
"""

import logging
from typing import Any, Mapping, Union

from .. import config, formulas, tables
from ..classifier import classify
from ..models import BioAgeInput, BioAgeResult, BiomarkerImpact
from ..reference_ranges import assess_panel
from ._base import coerce_input, input_fingerprint

logger = logging.getLogger(__name__)


def compute_biological_age(data: Union[BioAgeInput, Mapping[str, Any], None] = None) -> BioAgeResult:
    """
    Estimate biological age from a blood panel.

    Args:
        data: BioAgeInput or a mapping of its fields (missing fields take defaults)

    Returns:
        BioAgeResult
    """
    data = coerce_input(BioAgeInput, data)
    values = data.model_dump()

    deltas = formulas.bio_age_deltas(values)
    bio_age = formulas.bio_age(data.age, deltas)
    # Unrounded: a fractional age must not be pulled onto a breakpoint
    age_difference = bio_age - data.age

    _, status = classify(age_difference, tables.BIO_AGE_STATUS)
    interpretation, _ = classify(age_difference, tables.BIO_AGE_INTERPRETATION)

    biomarker_scores = {}
    for term in tables.BIO_AGE_TERMS:
        delta = deltas[term.marker]
        biomarker_scores[term.marker] = BiomarkerImpact(
            value=values[term.marker],
            delta=delta,
            score=abs(delta),
            impact=formulas.impact_for_delta(delta),
            description=term.description,
        )

    logger.info(f"Biological age {bio_age} (chronological {data.age}, difference {age_difference:+})")

    return BioAgeResult(
        bio_age=bio_age,
        chronological_age=data.age,
        age_difference=age_difference,
        status=status,
        interpretation=interpretation,
        biomarker_scores=biomarker_scores,
        reference_ranges=assess_panel("bio_age", values),
        input_hash=input_fingerprint(data),
        engine_version=config.ENGINE_VERSION,
        ruleset_version=config.RULESET_VERSION,
    )
