"""
Healthscore Domain Constants v1
===============================
Breakpoints, coefficients and point tables used by the calculators.

Treated as given domain constants: they are not derived or optimised here,
and the calculators never hard-code them. Every table is a ThresholdTable,
validated when this module is imported.

Boundary conventions follow the source brackets exactly:
- upper_inclusive=True  -> "value <= upper"
- upper_inclusive=False -> "value < upper"
"""

from dataclasses import dataclass
from typing import Dict, Tuple

from .classifier import INF, Band, ThresholdTable
from .models import Gender, MetabolicStatus, RiskImpact, Status, VisceralFatRisk

TABLES_VERSION = "1.0.0"

MALE = Gender.MALE
FEMALE = Gender.FEMALE


# =============================================================================
# BIOLOGICAL AGE
# =============================================================================

@dataclass(frozen=True)
class BioAgeTerm:
    """
    One additive term of the biological age estimate.

    mode:
      "excess"   -> (value - threshold) * coefficient when value > threshold
      "deficit"  -> (threshold - value) * coefficient when value < threshold
      "absolute" -> value * coefficient when value > threshold
    A negative coefficient makes the term age-reducing.
    """
    marker: str
    threshold: float
    coefficient: float
    mode: str
    description: str


BIO_AGE_TERMS: Tuple[BioAgeTerm, ...] = (
    BioAgeTerm("glucose", 99, 0.05, "excess",
               "Higher fasting glucose levels are associated with accelerated aging."),
    BioAgeTerm("crp", 1.0, 0.3, "absolute",
               "Elevated CRP indicates chronic inflammation, which accelerates aging."),
    BioAgeTerm("albumin", 4.0, 0.5, "deficit",
               "Lower albumin levels may indicate reduced liver function and protein status."),
    BioAgeTerm("hdl", 60, -0.03, "excess",
               "Higher HDL cholesterol is associated with longevity and better cardiovascular health."),
    BioAgeTerm("ldl", 100, 0.02, "excess",
               "Elevated LDL cholesterol increases cardiovascular risk."),
    BioAgeTerm("hba1c", 5.7, 0.8, "excess",
               "Higher HbA1c indicates sustained elevated blood sugar over time."),
)

# Status on age difference: <= -3 good, (-3, 0] neutral, (0, 3) warning, >= 3 danger
BIO_AGE_STATUS = ThresholdTable("bio_age_status", (
    Band(-3, "younger", Status.GOOD),
    Band(0, "on par", Status.NEUTRAL),
    Band(3, "older", Status.WARNING, upper_inclusive=False),
    Band(INF, "much older", Status.DANGER),
))

# Interpretation on age difference: <= -5, < 0, == 0, < 5, else
BIO_AGE_INTERPRETATION = ThresholdTable("bio_age_interpretation", (
    Band(-5, "Excellent! Your biological age is significantly lower than your chronological age. "
             "Your biomarkers indicate excellent health and potential longevity."),
    Band(0, "Good! Your biological age is lower than your chronological age, suggesting your body "
            "is aging slower than average.", upper_inclusive=False),
    Band(0, "Your biological age matches your chronological age, suggesting normal aging patterns."),
    Band(5, "Your biological age is slightly higher than your chronological age. Consider lifestyle "
            "modifications to improve key biomarkers.", upper_inclusive=False),
    Band(INF, "Your biological age is significantly higher than your chronological age. It's "
              "recommended to consult with a healthcare provider to address the biomarkers that "
              "need improvement."),
))


# =============================================================================
# CARDIOVASCULAR RISK (Framingham-style points)
# =============================================================================

CARDIO_BASE_POINTS: Dict[Gender, int] = {MALE: 0, FEMALE: -3}


def _points(name: str, rows, gender_index: int) -> ThresholdTable:
    """Build an exclusive-upper points table from (upper, label, male, female) rows."""
    return ThresholdTable(
        name,
        tuple(Band(upper, label, score=row[gender_index]) for upper, label, *row in rows),
        upper_inclusive=False,
    )


# Ages outside 20-79 score no age points. Rows are contiguous on "value < upper",
# so a fractional 34.5 or 199.5 stays in the lower integer bracket.
_AGE_ROWS = (
    (20, "<20", 0, 0),
    (35, "20-34", -9, -7),
    (40, "35-39", -4, -3),
    (45, "40-44", 0, 0),
    (50, "45-49", 3, 3),
    (55, "50-54", 6, 6),
    (60, "55-59", 8, 8),
    (65, "60-64", 10, 10),
    (70, "65-69", 11, 12),
    (75, "70-74", 12, 14),
    (80, "75-79", 13, 16),
    (INF, "80+", 0, 0),
)

_CHOLESTEROL_ROWS = (
    (160, "<160", 0, 0),
    (200, "160-199", 1, 1),
    (240, "200-239", 2, 3),
    (280, "240-279", 3, 4),
    (INF, "280+", 4, 5),
)

_HDL_ROWS = (
    (40, "<40", 2, 2),
    (50, "40-49", 1, 1),
    (60, "50-59", 0, 0),
    (INF, "60+", -2, -2),
)

_SBP_UNTREATED_ROWS = (
    (120, "<120", 0, 0),
    (130, "120-129", 0, 0),
    (140, "130-139", 1, 2),
    (160, "140-159", 1, 3),
    (INF, "160+", 2, 4),
)

_SBP_TREATED_ROWS = (
    (120, "<120", 0, 0),
    (130, "120-129", 1, 3),
    (140, "130-139", 2, 4),
    (160, "140-159", 2, 5),
    (INF, "160+", 3, 6),
)

CARDIO_AGE_POINTS: Dict[Gender, ThresholdTable] = {
    MALE: _points("cardio_age_points_male", _AGE_ROWS, 0),
    FEMALE: _points("cardio_age_points_female", _AGE_ROWS, 1),
}
CARDIO_CHOLESTEROL_POINTS: Dict[Gender, ThresholdTable] = {
    MALE: _points("cardio_cholesterol_points_male", _CHOLESTEROL_ROWS, 0),
    FEMALE: _points("cardio_cholesterol_points_female", _CHOLESTEROL_ROWS, 1),
}
CARDIO_HDL_POINTS: Dict[Gender, ThresholdTable] = {
    MALE: _points("cardio_hdl_points_male", _HDL_ROWS, 0),
    FEMALE: _points("cardio_hdl_points_female", _HDL_ROWS, 1),
}
# Keyed by (gender, on_blood_pressure_meds)
CARDIO_SBP_POINTS: Dict[Tuple[Gender, bool], ThresholdTable] = {
    (MALE, False): _points("cardio_sbp_points_male_untreated", _SBP_UNTREATED_ROWS, 0),
    (FEMALE, False): _points("cardio_sbp_points_female_untreated", _SBP_UNTREATED_ROWS, 1),
    (MALE, True): _points("cardio_sbp_points_male_treated", _SBP_TREATED_ROWS, 0),
    (FEMALE, True): _points("cardio_sbp_points_female_treated", _SBP_TREATED_ROWS, 1),
}
CARDIO_SMOKER_POINTS: Dict[Gender, int] = {MALE: 4, FEMALE: 3}
CARDIO_DIABETES_POINTS: Dict[Gender, int] = {MALE: 3, FEMALE: 4}

# Point total -> 10-year risk percent (score holds the percent)
CARDIO_RISK_LOOKUP: Dict[Gender, ThresholdTable] = {
    MALE: ThresholdTable("cardio_risk_male", (
        Band(0, "<0", score=1, upper_inclusive=False),
        Band(4, "0-4", score=2),
        Band(6, "5-6", score=3),
        Band(8, "7-8", score=4),
        Band(10, "9-10", score=6),
        Band(12, "11-12", score=10),
        Band(14, "13-14", score=16),
        Band(16, "15-16", score=25),
        Band(INF, "17+", score=30),
    )),
    FEMALE: ThresholdTable("cardio_risk_female", (
        Band(0, "<0", score=1, upper_inclusive=False),
        Band(5, "0-5", score=2),
        Band(7, "6-7", score=3),
        Band(8, "8", score=4),
        Band(10, "9-10", score=5),
        Band(13, "11-13", score=8),
        Band(16, "14-16", score=11),
        Band(19, "17-19", score=15),
        Band(INF, "20+", score=24),
    )),
}

# Risk percent -> years added to chronological age
HEART_AGE_ADJUSTMENT = ThresholdTable("heart_age_adjustment", (
    Band(2, "very low", score=-5),
    Band(5, "low", score=0),
    Band(10, "moderate", score=5),
    Band(20, "elevated", score=10),
    Band(INF, "high", score=15),
))
HEART_AGE_FLOOR = 40  # applies to the "very low" band only

CARDIO_STATUS = ThresholdTable("cardio_status", (
    Band(5, "low", Status.GOOD),
    Band(10, "moderate", Status.WARNING),
    Band(INF, "high", Status.DANGER),
), upper_inclusive=False)

CARDIO_INTERPRETATION = ThresholdTable("cardio_interpretation", (
    Band(5, "Your 10-year risk of cardiovascular disease is low. Continue maintaining a healthy lifestyle."),
    Band(10, "Your risk is moderate. Addressing risk factors can help reduce your risk further."),
    Band(20, "Your risk is elevated. Consult with a healthcare provider to develop a risk reduction plan."),
    Band(INF, "Your risk is high. It's strongly recommended to consult with a healthcare provider "
              "to address risk factors."),
), upper_inclusive=False)

# Risk-factor annotation triggers
CARDIO_AGE_FACTOR_MIN: Dict[Gender, float] = {MALE: 45, FEMALE: 55}
CARDIO_CHOLESTEROL_FACTOR = ThresholdTable("cardio_cholesterol_factor", (
    Band(200, "normal", RiskImpact.NONE),
    Band(240, "elevated", RiskImpact.MEDIUM),
    Band(INF, "high", RiskImpact.HIGH),
))
CARDIO_HDL_FACTOR_MAX = 40  # strictly below triggers
CARDIO_BP_FACTOR = ThresholdTable("cardio_bp_factor", (
    Band(130, "normal", RiskImpact.NONE),
    Band(140, "elevated", RiskImpact.MEDIUM),
    Band(INF, "high", RiskImpact.HIGH),
), upper_inclusive=False)


# =============================================================================
# METABOLIC HEALTH
# =============================================================================

METABOLIC_SCORE_STATUS = ThresholdTable("metabolic_score_status", (
    Band(4, "low", Status.DANGER),
    Band(8, "mid", Status.WARNING),
    Band(INF, "high", Status.GOOD),
), upper_inclusive=False)

METABOLIC_OVERALL_STATUS = ThresholdTable("metabolic_overall_status", (
    Band(4, "poor", MetabolicStatus.POOR),
    Band(6, "fair", MetabolicStatus.FAIR),
    Band(8, "good", MetabolicStatus.GOOD),
    Band(INF, "optimal", MetabolicStatus.OPTIMAL),
), upper_inclusive=False)

FASTING_GLUCOSE_SCORE = ThresholdTable("fasting_glucose_score", (
    Band(70, "<=70", score=0),
    Band(85, "70-85", score=10),
    Band(95, "85-95", score=8),
    Band(100, "95-100", score=6),
    Band(110, "100-110", score=4),
    Band(125, "110-125", score=2),
    Band(INF, ">125", score=0),
))

HBA1C_SCORE = ThresholdTable("hba1c_score", (
    Band(5.2, "<=5.2", score=10),
    Band(5.5, "5.2-5.5", score=8),
    Band(5.7, "5.5-5.7", score=6),
    Band(6.0, "5.7-6.0", score=4),
    Band(6.4, "6.0-6.4", score=2),
    Band(INF, ">6.4", score=0),
))

HOMA_IR_SCORE = ThresholdTable("homa_ir_score", (
    Band(1, "<1", score=10),
    Band(1.5, "1-1.5", score=8),
    Band(2, "1.5-2", score=6),
    Band(2.5, "2-2.5", score=4),
    Band(3, "2.5-3", score=2),
    Band(INF, ">=3", score=0),
), upper_inclusive=False)

TRIGLYCERIDES_SCORE = ThresholdTable("triglycerides_score", (
    Band(70, "<70", score=10),
    Band(100, "70-100", score=8),
    Band(130, "100-130", score=6),
    Band(150, "130-150", score=4),
    Band(200, "150-200", score=2),
    Band(INF, ">=200", score=0),
), upper_inclusive=False)

HDL_SCORE = ThresholdTable("hdl_score", (
    Band(30, "<30", score=0),
    Band(35, "30-35", score=2),
    Band(40, "35-40", score=4),
    Band(50, "40-50", score=6),
    Band(60, "50-60", score=8),
    Band(INF, ">=60", score=10),
), upper_inclusive=False)

# Not gender-adjusted
WAIST_SCORE = ThresholdTable("waist_score", (
    Band(80, "<80", score=10),
    Band(90, "80-90", score=8),
    Band(100, "90-100", score=6),
    Band(110, "100-110", score=4),
    Band(120, "110-120", score=2),
    Band(INF, ">=120", score=0),
), upper_inclusive=False)

FASTING_GLUCOSE_TEXT = ThresholdTable("fasting_glucose_text", (
    Band(70, "Below optimal range - may indicate hypoglycemia.", upper_inclusive=False),
    Band(85, "Optimal range for metabolic health."),
    Band(100, "Normal range, but lower values are associated with better metabolic health."),
    Band(125, "Prediabetic range - indicates increased risk for diabetes."),
    Band(INF, "Diabetic range - consultation with a healthcare provider is recommended."),
))

HBA1C_TEXT = ThresholdTable("hba1c_text", (
    Band(5.2, "Optimal range for long-term metabolic health."),
    Band(5.7, "Normal range, with lower values generally indicating better glucose control."),
    Band(6.4, "Prediabetic range - indicates increased risk for diabetes."),
    Band(INF, "Diabetic range - consultation with a healthcare provider is recommended."),
))

HOMA_IR_TEXT = ThresholdTable("homa_ir_text", (
    Band(1, "Excellent insulin sensitivity."),
    Band(1.5, "Good insulin sensitivity."),
    Band(2, "Fair insulin sensitivity."),
    Band(2.5, "Reduced insulin sensitivity."),
    Band(3, "Poor insulin sensitivity - early insulin resistance."),
    Band(INF, "Significant insulin resistance - consultation with a healthcare provider is recommended."),
), upper_inclusive=False)

TRIGLYCERIDES_TEXT = ThresholdTable("triglycerides_text", (
    Band(70, "Optimal level for metabolic health."),
    Band(100, "Very good level."),
    Band(150, "Normal range, with lower values generally better for metabolic health."),
    Band(200, "Borderline high - consider lifestyle modifications."),
    Band(INF, "High - consultation with a healthcare provider is recommended."),
), upper_inclusive=False)

HDL_TEXT = ThresholdTable("hdl_text", (
    Band(40, "Low HDL - associated with increased cardiovascular risk."),
    Band(60, "Acceptable range, with higher values generally better."),
    Band(INF, "Optimal level - associated with reduced cardiovascular risk."),
), upper_inclusive=False)

WAIST_TEXT = ThresholdTable("waist_text", (
    Band(80, "Optimal range associated with lower metabolic risk."),
    Band(95, "Moderate risk range."),
    Band(INF, "Increased metabolic risk - abdominal obesity is associated with insulin resistance."),
), upper_inclusive=False)

INSULIN_SENSITIVITY_CATEGORY = ThresholdTable("insulin_sensitivity_category", (
    Band(1, "Excellent"),
    Band(1.5, "Good"),
    Band(2, "Fair"),
    Band(2.5, "Poor"),
    Band(INF, "Very Poor"),
), upper_inclusive=False)

METABOLIC_BMI_CATEGORY = ThresholdTable("metabolic_bmi_category", (
    Band(18.5, "Underweight", Status.WARNING),
    Band(25, "Normal weight", Status.GOOD),
    Band(30, "Overweight", Status.WARNING),
    Band(INF, "Obese", Status.DANGER),
), upper_inclusive=False)

METABOLIC_RECOMMENDATION_SCORE = 6  # a factor scoring below this triggers its group


# =============================================================================
# BODY COMPOSITION
# =============================================================================

NAVY_COEFFICIENTS: Dict[Gender, Tuple[float, float, float]] = {
    # (constant, log10(circumference) factor, log10(height) factor)
    MALE: (1.0324, 0.19077, 0.15456),
    FEMALE: (1.29579, 0.35004, 0.22100),
}
BODY_FAT_MIN = 5.0
BODY_FAT_MAX = 60.0

BMI_CATEGORY = ThresholdTable("bmi_category", (
    Band(18.5, "Underweight", Status.WARNING),
    Band(25, "Normal weight", Status.GOOD),
    Band(30, "Overweight", Status.WARNING),
    Band(35, "Obese Class I", Status.DANGER),
    Band(40, "Obese Class II", Status.DANGER),
    Band(INF, "Obese Class III", Status.DANGER),
), upper_inclusive=False)

BODY_FAT_CATEGORY: Dict[Gender, ThresholdTable] = {
    MALE: ThresholdTable("body_fat_category_male", (
        Band(6, "Essential fat", Status.WARNING),
        Band(14, "Athletic", Status.GOOD),
        Band(18, "Fitness", Status.GOOD),
        Band(25, "Average", Status.WARNING),
        Band(INF, "Obese", Status.DANGER),
    ), upper_inclusive=False),
    FEMALE: ThresholdTable("body_fat_category_female", (
        Band(14, "Essential fat", Status.WARNING),
        Band(21, "Athletic", Status.GOOD),
        Band(25, "Fitness", Status.GOOD),
        Band(32, "Average", Status.WARNING),
        Band(INF, "Obese", Status.DANGER),
    ), upper_inclusive=False),
}

FFMI_CATEGORY: Dict[Gender, ThresholdTable] = {
    MALE: ThresholdTable("ffmi_category_male", (
        Band(18, "Below average", Status.WARNING),
        Band(20, "Average", Status.NEUTRAL),
        Band(22, "Above average", Status.GOOD),
        Band(23, "Excellent", Status.GOOD),
        Band(26, "Superior", Status.GOOD),
        Band(INF, "Exceptional", Status.GOOD),
    ), upper_inclusive=False),
    FEMALE: ThresholdTable("ffmi_category_female", (
        Band(15, "Below average", Status.WARNING),
        Band(16, "Average", Status.NEUTRAL),
        Band(17.5, "Above average", Status.GOOD),
        Band(19, "Excellent", Status.GOOD),
        Band(21, "Superior", Status.GOOD),
        Band(INF, "Exceptional", Status.GOOD),
    ), upper_inclusive=False),
}

WAIST_TO_HEIGHT_CATEGORY = ThresholdTable("waist_to_height_category", (
    Band(0.4, "Extremely slim", Status.WARNING),
    Band(0.43, "Slender", Status.GOOD),
    Band(0.47, "Healthy slim", Status.GOOD),
    Band(0.53, "Healthy", Status.GOOD),
    Band(0.58, "Overweight", Status.WARNING),
    Band(0.63, "Very overweight", Status.DANGER),
    Band(INF, "Obese", Status.DANGER),
), upper_inclusive=False)

WAIST_TO_HIP_CATEGORY: Dict[Gender, ThresholdTable] = {
    MALE: ThresholdTable("waist_to_hip_category_male", (
        Band(0.9, "Low risk", Status.GOOD),
        Band(1.0, "Moderate risk", Status.WARNING),
        Band(INF, "High risk", Status.DANGER),
    ), upper_inclusive=False),
    FEMALE: ThresholdTable("waist_to_hip_category_female", (
        Band(0.8, "Low risk", Status.GOOD),
        Band(0.85, "Moderate risk", Status.WARNING),
        Band(INF, "High risk", Status.DANGER),
    ), upper_inclusive=False),
}

# Raw waist circumference (cm); category holds the VisceralFatRisk value
VISCERAL_FAT_RISK: Dict[Gender, ThresholdTable] = {
    MALE: ThresholdTable("visceral_fat_risk_male", (
        Band(94, VisceralFatRisk.LOW.value, Status.GOOD),
        Band(102, VisceralFatRisk.MODERATE.value, Status.WARNING),
        Band(INF, VisceralFatRisk.HIGH.value, Status.DANGER),
    ), upper_inclusive=False),
    FEMALE: ThresholdTable("visceral_fat_risk_female", (
        Band(80, VisceralFatRisk.LOW.value, Status.GOOD),
        Band(88, VisceralFatRisk.MODERATE.value, Status.WARNING),
        Band(INF, VisceralFatRisk.HIGH.value, Status.DANGER),
    ), upper_inclusive=False),
}

# Recommendation triggers
BODY_COMP_UNDERWEIGHT_BMI = 18.5   # bmi < this
BODY_COMP_OVERWEIGHT_BMI = 25      # bmi >= this
BODY_COMP_HIGH_BODY_FAT: Dict[Gender, float] = {MALE: 25, FEMALE: 32}  # strictly above
BODY_COMP_HIGH_WAIST_TO_HEIGHT = 0.5  # at or above
BODY_COMP_LOW_FFMI: Dict[Gender, float] = {MALE: 18, FEMALE: 15}  # strictly below

