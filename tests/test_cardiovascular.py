"""
Cardiovascular Risk Calculator Tests
====================================

Test Categories:
1. Default scenarios
2. Status / interpretation brackets
3. Risk factor annotations and recommendation order
4. Determinism
"""

import pytest
from pathlib import Path

import sys
sys.path.insert(0, str(Path(__file__).parent.parent))

from healthscore_engine import tables
from healthscore_engine.calculators import compute_cardiovascular_risk
from healthscore_engine.calculators.cardiovascular import RISK_FACTOR_TEXT
from healthscore_engine.classifier import classify
from healthscore_engine.models import CardioInput, Gender, RiskImpact, Status


# ============================================================
# FIXTURES
# ============================================================

@pytest.fixture
def defaults() -> CardioInput:
    return CardioInput()


@pytest.fixture
def high_risk() -> CardioInput:
    return CardioInput(
        age=65,
        gender="male",
        total_cholesterol=250,
        hdl=35,
        systolic_bp=150,
        smoker=True,
        diabetic=True,
    )


# ============================================================
# TEST: SCENARIOS
# ============================================================

class TestScenarios:

    def test_male_defaults(self, defaults):
        result = compute_cardiovascular_risk(defaults)
        # 180 mg/dL falls in the 160-199 cholesterol bracket (1 point)
        assert result.risk_points == 7
        assert result.point_breakdown["age"] == 6
        assert result.point_breakdown["cholesterol"] == 1
        assert result.ten_year_risk == 4
        assert result.status == Status.GOOD
        assert result.heart_age == 50
        assert result.interpretation.startswith("Your 10-year risk of cardiovascular disease is low")

    def test_female_defaults(self, defaults):
        result = compute_cardiovascular_risk(defaults.model_copy(update={"gender": Gender.FEMALE}))
        assert result.point_breakdown["base"] == -3
        assert result.risk_points == 4
        assert result.ten_year_risk == 2
        assert result.heart_age == 45
        assert result.risk_factors == {}
        assert result.recommendations == ()

    def test_high_risk(self, high_risk):
        result = compute_cardiovascular_risk(high_risk)
        assert result.risk_points == 24
        assert result.ten_year_risk == 30
        assert result.status == Status.DANGER
        assert result.heart_age == 80
        assert "strongly recommended" in result.interpretation

    def test_smoker_moves_to_elevated(self, defaults):
        result = compute_cardiovascular_risk(defaults.model_copy(update={"age": 57, "smoker": True}))
        assert result.risk_points == 13
        assert result.ten_year_risk == 16
        assert result.status == Status.DANGER
        assert result.heart_age == 67
        assert "elevated" in result.interpretation


# ============================================================
# TEST: BRACKETS
# ============================================================

class TestBrackets:

    @pytest.mark.parametrize("risk,status", [(4, Status.GOOD), (5, Status.WARNING), (9, Status.WARNING),
                                             (10, Status.DANGER), (30, Status.DANGER)])
    def test_status(self, risk, status):
        assert classify(risk, tables.CARDIO_STATUS)[1] == status

    @pytest.mark.parametrize("risk,fragment", [(4, "low"), (5, "moderate"), (10, "elevated"), (20, "high")])
    def test_interpretation(self, risk, fragment):
        text, _ = classify(risk, tables.CARDIO_INTERPRETATION)
        assert f"is {fragment}" in text


# ============================================================
# TEST: RISK FACTORS
# ============================================================

class TestRiskFactors:

    def test_all_factors_in_order(self, high_risk):
        result = compute_cardiovascular_risk(high_risk)
        assert list(result.risk_factors) == [
            "age", "cholesterol", "hdl", "blood_pressure", "smoking", "diabetes",
        ]
        assert result.recommendations == tuple(rec for _, rec in RISK_FACTOR_TEXT.values())
        assert result.triggered_rules == tuple(result.risk_factors)

    def test_impacts(self, high_risk):
        factors = compute_cardiovascular_risk(high_risk).risk_factors
        assert factors["age"].impact == RiskImpact.MEDIUM
        assert factors["cholesterol"].impact == RiskImpact.HIGH
        assert factors["hdl"].impact == RiskImpact.HIGH
        assert factors["blood_pressure"].impact == RiskImpact.HIGH
        assert factors["smoking"].impact == RiskImpact.HIGH
        assert factors["diabetes"].impact == RiskImpact.HIGH

    @pytest.mark.parametrize("gender,age,present", [
        ("male", 44, False), ("male", 45, True), ("female", 54, False), ("female", 55, True),
    ])
    def test_age_factor_threshold(self, gender, age, present):
        result = compute_cardiovascular_risk({"gender": gender, "age": age})
        assert ("age" in result.risk_factors) is present

    @pytest.mark.parametrize("cholesterol,impact", [
        (200, None), (201, RiskImpact.MEDIUM), (240, RiskImpact.MEDIUM), (241, RiskImpact.HIGH),
    ])
    def test_cholesterol_factor(self, cholesterol, impact):
        factor = compute_cardiovascular_risk({"total_cholesterol": cholesterol}).risk_factors.get("cholesterol")
        assert (factor.impact if factor else None) == impact

    @pytest.mark.parametrize("sbp,impact", [
        (129, None), (130, RiskImpact.MEDIUM), (139, RiskImpact.MEDIUM), (140, RiskImpact.HIGH),
    ])
    def test_blood_pressure_factor(self, sbp, impact):
        factor = compute_cardiovascular_risk({"systolic_bp": sbp}).risk_factors.get("blood_pressure")
        assert (factor.impact if factor else None) == impact

    def test_hdl_factor_strictly_below_40(self):
        assert "hdl" not in compute_cardiovascular_risk({"hdl": 40}).risk_factors
        assert "hdl" in compute_cardiovascular_risk({"hdl": 39}).risk_factors

    def test_factor_carries_texts(self, high_risk):
        smoking = compute_cardiovascular_risk(high_risk).risk_factors["smoking"]
        assert smoking.description == "Smoking significantly increases cardiovascular risk."
        assert smoking.recommendation.startswith("Quitting smoking")

    def test_subset_keeps_declaration_order(self):
        result = compute_cardiovascular_risk({"age": 40, "diabetic": True, "systolic_bp": 135})
        assert result.triggered_rules == ("blood_pressure", "diabetes")


# ============================================================
# TEST: DETERMINISM
# ============================================================

class TestDeterminism:

    def test_idempotent(self, high_risk):
        assert compute_cardiovascular_risk(high_risk) == compute_cardiovascular_risk(high_risk)

    def test_to_dict(self, high_risk):
        out = compute_cardiovascular_risk(high_risk).to_dict()
        assert out["status"] == "danger"
        assert out["risk_factors"]["age"]["impact"] == "medium"
        assert isinstance(out["recommendations"], list)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
