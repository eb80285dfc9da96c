"""
Biological Age Calculator Tests
===============================

Test Categories:
1. Default and reference scenarios
2. Status and interpretation brackets
3. Monotonicity
4. Impacts, ranking and reference ranges
5. Input handling and determinism
"""

import logging
import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from healthscore_engine import config
from healthscore_engine.calculators import compute_biological_age
from healthscore_engine.errors import InvalidInputError
from healthscore_engine.hashing import verify_hash
from healthscore_engine.models import BioAgeInput, Gender, Impact, RangePosition, Status


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture
def defaults() -> BioAgeInput:
    return BioAgeInput()


# ============================================================
# TEST: SCENARIOS
# ============================================================

class TestScenarios:

    def test_defaults_match_chronological_age(self, defaults):
        result = compute_biological_age(defaults)
        assert result.bio_age == 35.0
        assert result.age_difference == 0
        assert result.status == Status.NEUTRAL
        assert "matches your chronological age" in result.interpretation
        assert all(b.delta == 0 for b in result.biomarker_scores.values())

    def test_high_glucose(self, defaults):
        result = compute_biological_age(defaults.model_copy(update={"glucose": 150}))
        assert result.biomarker_scores["glucose"].delta == pytest.approx(2.55)
        assert result.bio_age == 37.6
        assert result.age_difference == pytest.approx(2.6)
        assert result.status == Status.WARNING
        assert "slightly higher" in result.interpretation

    def test_none_uses_defaults(self):
        assert compute_biological_age().bio_age == 35.0


# ============================================================
# TEST: BRACKETS
# ============================================================

class TestBrackets:

    def test_much_older_is_danger(self, defaults):
        result = compute_biological_age(defaults.model_copy(update={"glucose": 200}))
        assert result.age_difference >= 5
        assert result.status == Status.DANGER
        assert "significantly higher" in result.interpretation

    def test_slightly_younger_is_neutral(self, defaults):
        result = compute_biological_age(defaults.model_copy(update={"hdl": 100}))
        assert result.age_difference == pytest.approx(-1.2)
        assert result.status == Status.NEUTRAL
        assert result.interpretation.startswith("Good!")

    def test_three_years_younger_is_good(self, defaults):
        result = compute_biological_age(defaults.model_copy(update={"hdl": 170}))
        assert result.age_difference == pytest.approx(-3.3)
        assert result.status == Status.GOOD
        assert result.interpretation.startswith("Good!")

    def test_five_years_younger_is_excellent(self, defaults):
        result = compute_biological_age(defaults.model_copy(update={"hdl": 230}))
        assert result.age_difference <= -5
        assert result.interpretation.startswith("Excellent!")

    def test_three_years_older_is_danger(self, defaults):
        # hba1c 9.45 -> (9.45 - 5.7) * 0.8 = 3.0
        result = compute_biological_age(defaults.model_copy(update={"hba1c": 9.45}))
        assert result.age_difference == pytest.approx(3.0)
        assert result.status == Status.DANGER
        assert "slightly higher" in result.interpretation

    def test_fractional_age_just_above_rounded_bio_age(self, defaults):
        # bio age rounds to 35.0, so the true difference is -0.04
        result = compute_biological_age(defaults.model_copy(update={"age": 35.04}))
        assert result.bio_age == 35.0
        assert result.age_difference == pytest.approx(-0.04)
        assert result.status == Status.NEUTRAL
        assert result.interpretation.startswith("Good!")

    def test_fractional_age_just_below_rounded_bio_age(self, defaults):
        result = compute_biological_age(defaults.model_copy(update={"age": 34.96}))
        assert result.bio_age == 35.0
        assert result.age_difference == pytest.approx(0.04)
        assert result.status == Status.WARNING
        assert "slightly higher" in result.interpretation


# ============================================================
# TEST: MONOTONICITY
# ============================================================

class TestMonotonicity:

    def test_glucose_above_threshold_never_lowers_age(self, defaults):
        ages = [
            compute_biological_age(defaults.model_copy(update={"glucose": g})).bio_age
            for g in range(99, 260, 7)
        ]
        assert ages == sorted(ages)

    def test_hdl_above_threshold_never_raises_age(self, defaults):
        ages = [
            compute_biological_age(defaults.model_copy(update={"hdl": h})).bio_age
            for h in range(60, 200, 9)
        ]
        assert ages == sorted(ages, reverse=True)


# ============================================================
# TEST: IMPACTS AND RANGES
# ============================================================

class TestImpacts:

    def test_impact_direction(self, defaults):
        result = compute_biological_age(defaults.model_copy(update={"glucose": 120, "hdl": 80}))
        assert result.biomarker_scores["glucose"].impact == Impact.NEGATIVE
        assert result.biomarker_scores["hdl"].impact == Impact.POSITIVE
        assert result.biomarker_scores["hdl"].score == pytest.approx(0.6)
        assert result.biomarker_scores["ldl"].impact == Impact.NEUTRAL

    def test_ranked_impacts(self, defaults):
        result = compute_biological_age(defaults.model_copy(update={"glucose": 150, "crp": 3.0}))
        ranked = [marker for marker, _ in result.ranked_impacts()]
        assert ranked == ["glucose", "crp"]

    def test_reference_ranges_cover_panel(self, defaults):
        result = compute_biological_age(defaults.model_copy(update={"glucose": 150}))
        assert len(result.reference_ranges) == 10
        glucose = result.reference_ranges["glucose"]
        assert glucose.position == RangePosition.HIGH
        assert glucose.position_pct == pytest.approx(160)
        assert result.reference_ranges["hdl"].position == RangePosition.NORMAL


# ============================================================
# TEST: INPUT HANDLING
# ============================================================

class TestInputHandling:

    def test_mapping_input_with_gender_alias(self):
        result = compute_biological_age({"gender": "F", "glucose": 150})
        assert result.bio_age == 37.6
        assert BioAgeInput(gender="f").gender == Gender.FEMALE

    def test_invalid_type_raises(self):
        with pytest.raises(InvalidInputError) as exc:
            compute_biological_age({"glucose": "high"})
        assert exc.value.field == "glucose"

    def test_unknown_field_raises(self):
        with pytest.raises(InvalidInputError):
            compute_biological_age({"cholesterol": 200})

    def test_nan_raises(self):
        with pytest.raises(InvalidInputError):
            compute_biological_age({"glucose": float("nan")})

    def test_input_is_immutable(self, defaults):
        with pytest.raises(Exception):
            defaults.glucose = 100

    def test_out_of_range_is_logged_not_rejected(self, defaults, caplog, monkeypatch):
        monkeypatch.setattr(config, "WARN_OUT_OF_RANGE", True)
        with caplog.at_level(logging.WARNING, logger="healthscore_engine"):
            result = compute_biological_age(defaults.model_copy(update={"age": 130}))
        assert result.chronological_age == 130
        assert "advisory range" in caplog.text

    def test_out_of_range_warning_can_be_disabled(self, defaults, caplog, monkeypatch):
        monkeypatch.setattr(config, "WARN_OUT_OF_RANGE", False)
        with caplog.at_level(logging.WARNING, logger="healthscore_engine"):
            compute_biological_age(defaults.model_copy(update={"age": 130}))
        assert "advisory range" not in caplog.text


class TestDeterminism:

    def test_idempotent(self, defaults):
        data = defaults.model_copy(update={"glucose": 131, "crp": 2.2, "albumin": 3.7})
        assert compute_biological_age(data) == compute_biological_age(data)

    def test_input_hash(self, defaults):
        result = compute_biological_age(defaults)
        assert result.input_hash.startswith("sha256:")
        assert verify_hash(defaults.model_dump(mode="json"), result.input_hash)
        other = compute_biological_age(defaults.model_copy(update={"ldl": 101}))
        assert other.input_hash != result.input_hash

    def test_mapping_and_model_hash_equal(self):
        assert (compute_biological_age({"glucose": 120}).input_hash
                == compute_biological_age(BioAgeInput(glucose=120)).input_hash)

    def test_versions_stamped(self, defaults):
        result = compute_biological_age(defaults)
        assert result.engine_version == config.ENGINE_VERSION
        assert result.ruleset_version == config.RULESET_VERSION

    def test_to_dict(self, defaults):
        out = compute_biological_age(defaults.model_copy(update={"glucose": 150})).to_dict()
        assert out["status"] == "warning"
        assert out["biomarker_scores"]["glucose"]["impact"] == "negative"
        assert out["reference_ranges"]["glucose"]["position"] == "high"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
