"""
Healthscore Engine Models
=========================
Enums, input records and result records shared by the four calculators.

Inputs are frozen pydantic models. Each numeric field declares an advisory
range (the form widget's min/max) in its JSON schema metadata; the engine
never enforces it. Results are frozen dataclasses built once per call.

Usage:
    from healthscore_engine.models import BioAgeInput, Gender
    data = BioAgeInput(age=42, gender="f", glucose=104)
    changed = data.model_copy(update={"hdl": 72})
"""

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator


# ============================================================
# ENUMS
# ============================================================

class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Status(str, Enum):
    """Display tier shared by every calculator."""
    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"
    NEUTRAL = "neutral"


class MetabolicStatus(str, Enum):
    """Overall metabolic health band."""
    OPTIMAL = "optimal"
    GOOD = "good"
    FAIR = "fair"
    POOR = "poor"

    @property
    def display_status(self) -> Status:
        if self in (MetabolicStatus.OPTIMAL, MetabolicStatus.GOOD):
            return Status.GOOD
        if self == MetabolicStatus.FAIR:
            return Status.WARNING
        return Status.DANGER


class Impact(str, Enum):
    """Direction of a biomarker's effect on biological age."""
    POSITIVE = "positive"  # makes you younger
    NEGATIVE = "negative"  # makes you older
    NEUTRAL = "neutral"


class RiskImpact(str, Enum):
    """Weight of a cardiovascular risk factor."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"
    NONE = "none"


class VisceralFatRisk(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class RangePosition(str, Enum):
    """Where a value sits against its normal reference range."""
    LOW = "low"
    NORMAL = "normal"
    HIGH = "high"


class BodyFatMethod(str, Enum):
    ESTIMATE = "estimate"  # U.S. Navy circumference formula
    MEASURED = "measured"  # user-supplied percentage


# ============================================================
# INPUT MODELS
# ============================================================

def advisory(default: Any, lo: float, hi: float, description: str, unit: Optional[str] = None):
    """Field with an advisory (not enforced) min/max for input widgets."""
    extra: Dict[str, Any] = {"advisory_min": lo, "advisory_max": hi}
    if unit:
        extra["unit"] = unit
    return Field(default, description=description, json_schema_extra=extra)


class _CalculatorInput(BaseModel):
    """Common configuration for calculator inputs."""

    @field_validator('gender', mode='before', check_fields=False)
    @classmethod
    def normalize_gender(cls, v):
        if isinstance(v, str):
            v_lower = v.lower().strip()
            if v_lower in ('male', 'm'):
                return Gender.MALE
            elif v_lower in ('female', 'f'):
                return Gender.FEMALE
        return v

    class Config:
        frozen = True
        extra = "forbid"
        allow_inf_nan = False


class BioAgeInput(_CalculatorInput):
    """Blood panel for the biological age calculator."""
    age: float = advisory(35, 18, 120, "Chronological age in years", "years")
    gender: Gender = Field(Gender.MALE, description="Biological sex")
    glucose: float = advisory(85, 40, 300, "Fasting glucose", "mg/dL")
    crp: float = advisory(0.8, 0, 20, "C-reactive protein", "mg/L")
    albumin: float = advisory(4.5, 2, 6, "Serum albumin", "g/dL")
    creatinine: float = advisory(0.9, 0.2, 3, "Serum creatinine", "mg/dL")
    bun: float = advisory(15, 5, 50, "Blood urea nitrogen", "mg/dL")
    alt: float = advisory(20, 0, 200, "Alanine aminotransferase", "U/L")
    hdl: float = advisory(60, 20, 120, "HDL cholesterol", "mg/dL")
    ldl: float = advisory(100, 40, 250, "LDL cholesterol", "mg/dL")
    hba1c: float = advisory(5.2, 3, 15, "Glycated hemoglobin", "%")
    wbc: float = advisory(5.5, 2, 20, "White blood cell count", "K/uL")


class CardioInput(_CalculatorInput):
    """Framingham-style risk inputs."""
    age: float = advisory(50, 30, 79, "Age in years (model valid for 30-79)", "years")
    gender: Gender = Field(Gender.MALE, description="Biological sex")
    total_cholesterol: float = advisory(180, 100, 400, "Total cholesterol", "mg/dL")
    hdl: float = advisory(50, 20, 100, "HDL cholesterol", "mg/dL")
    systolic_bp: float = advisory(120, 90, 200, "Systolic blood pressure", "mmHg")
    on_blood_pressure_meds: bool = Field(False, description="Currently treated for hypertension")
    smoker: bool = Field(False, description="Current smoker")
    diabetic: bool = Field(False, description="Diagnosed diabetes")


class MetabolicInput(_CalculatorInput):
    """Metabolic panel plus anthropometrics."""
    fasting_glucose: float = advisory(85, 60, 200, "Fasting glucose", "mg/dL")
    postprandial_glucose: float = advisory(120, 70, 300, "2-hour post-meal glucose", "mg/dL")
    hba1c: float = advisory(5.2, 4, 10, "Glycated hemoglobin", "%")
    fasting_insulin: float = advisory(8, 2, 30, "Fasting insulin", "uIU/mL")
    triglycerides: float = advisory(100, 30, 300, "Triglycerides", "mg/dL")
    hdl: float = advisory(55, 20, 100, "HDL cholesterol", "mg/dL")
    weight: float = advisory(70, 40, 200, "Body weight", "kg")
    height: float = advisory(170, 140, 220, "Height", "cm")
    waist_circumference: float = advisory(80, 50, 150, "Waist circumference", "cm")


class BodyCompInput(_CalculatorInput):
    """Anthropometric measurements for body composition analysis."""
    age: float = advisory(35, 18, 100, "Age in years", "years")
    gender: Gender = Field(Gender.MALE, description="Biological sex")
    weight: float = advisory(75, 30, 250, "Body weight", "kg")
    height: float = advisory(175, 120, 220, "Height", "cm")
    waist_circumference: float = advisory(83, 40, 200, "Waist circumference", "cm")
    neck_circumference: float = advisory(38, 20, 60, "Neck circumference", "cm")
    hip_circumference: float = advisory(95, 60, 200, "Hip circumference", "cm")
    body_fat_percentage: Optional[float] = advisory(None, 3, 60, "Measured body fat, if known", "%")
    body_fat_method: BodyFatMethod = Field(BodyFatMethod.ESTIMATE, description="estimate or measured")


def find_out_of_range_fields(data: BaseModel) -> List[Tuple[str, float, float, float]]:
    """
    List (field, value, advisory_min, advisory_max) for every numeric field
    outside its declared range. Caller-side check; the engine never rejects.
    """
    out = []
    for name, info in type(data).model_fields.items():
        extra = info.json_schema_extra
        if not isinstance(extra, dict) or "advisory_min" not in extra:
            continue
        value = getattr(data, name)
        if value is None:
            continue
        lo, hi = extra["advisory_min"], extra["advisory_max"]
        if value < lo or value > hi:
            out.append((name, value, lo, hi))
    return out


# ============================================================
# RESULT RECORDS
# ============================================================
# Frozen per attribute only: mapping fields are plain dicts and stay mutable.
# to_dict() always returns a fresh deep copy.

def _jsonable(obj: Any) -> Any:
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, dict):
        return {k: _jsonable(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_jsonable(v) for v in obj]
    return obj


class _Serializable:
    def to_dict(self) -> Dict[str, Any]:
        """Flat JSON-ready dict (enums as their string values)."""
        return _jsonable(asdict(self))


@dataclass(frozen=True)
class FactorScore(_Serializable):
    """Score of a single biomarker on the 0-10 scale."""
    value: float
    score: int
    status: Status
    interpretation: str


@dataclass(frozen=True)
class MetricCategory(_Serializable):
    """A derived metric with its category and display tier."""
    value: float
    category: str
    status: Status


@dataclass(frozen=True)
class BiomarkerImpact(_Serializable):
    """Contribution of one biomarker to biological age."""
    value: float
    delta: float  # signed years added to chronological age
    score: float  # magnitude of delta
    impact: Impact
    description: str


@dataclass(frozen=True)
class RiskFactor(_Serializable):
    """A triggered cardiovascular risk factor."""
    impact: RiskImpact
    description: str
    recommendation: Optional[str] = None


@dataclass(frozen=True)
class RangeReading(_Serializable):
    """A value placed on its reference-range gauge."""
    marker: str
    label: str
    value: float
    unit: str
    position: RangePosition
    position_pct: float
    normal_start_pct: float
    normal_end_pct: float


@dataclass(frozen=True)
class BioAgeResult(_Serializable):
    bio_age: float
    chronological_age: float
    age_difference: float
    status: Status
    interpretation: str
    biomarker_scores: Dict[str, BiomarkerImpact]
    reference_ranges: Dict[str, RangeReading]
    input_hash: str
    engine_version: str
    ruleset_version: str

    def ranked_impacts(self) -> List[Tuple[str, BiomarkerImpact]]:
        """Biomarkers with a non-zero impact, largest first."""
        nonzero = [(k, v) for k, v in self.biomarker_scores.items() if v.score > 0]
        return sorted(nonzero, key=lambda kv: kv[1].score, reverse=True)


@dataclass(frozen=True)
class CardioResult(_Serializable):
    ten_year_risk: int  # percent
    heart_age: int
    risk_points: int
    point_breakdown: Dict[str, int]
    status: Status
    interpretation: str
    risk_factors: Dict[str, RiskFactor]
    recommendations: Tuple[str, ...]
    triggered_rules: Tuple[str, ...]
    input_hash: str
    engine_version: str
    ruleset_version: str


@dataclass(frozen=True)
class MetabolicResult(_Serializable):
    total_score: float
    status: MetabolicStatus
    display_status: Status
    interpretation: str
    bmi: float
    bmi_category: str
    insulin_sensitivity: float  # HOMA-IR
    insulin_sensitivity_category: str
    metabolic_factors: Dict[str, FactorScore]
    reference_ranges: Dict[str, RangeReading]
    recommendations: Tuple[str, ...]
    triggered_rules: Tuple[str, ...]
    input_hash: str
    engine_version: str
    ruleset_version: str


@dataclass(frozen=True)
class BodyCompResult(_Serializable):
    bmi: float
    bmi_category: str
    bmi_status: Status
    body_fat_percentage: float
    body_fat_category: str
    body_fat_status: Status
    body_fat_method: BodyFatMethod
    ffmi: float
    ffmi_category: str
    waist_to_height_ratio: float
    waist_to_height_category: str
    waist_to_hip_ratio: float
    waist_to_hip_category: str
    visceral_fat_risk: VisceralFatRisk
    lean_mass: float
    fat_mass: float
    status: Status
    interpretation: str
    metrics: Dict[str, MetricCategory]
    recommendations: Tuple[str, ...]
    triggered_rules: Tuple[str, ...]
    input_hash: str
    engine_version: str
    ruleset_version: str
