"""
Data model shared by the risk profiler, the recommendation engine and the
surrounding pipeline.

PURPOSE: Closed enumerations for every categorical profile field, plus the
         immutable records that flow between components.
CONTEXT: Profiles arrive from user-editable storage (camelCase JSON records),
         so parsing never fails: out-of-domain values become None and the
         scorers map None to their most conservative bucket.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Tuple, Union


class _Choice(str, Enum):
    """Base for string enums parsed from stored answers; unknown values read as None."""

    @classmethod
    def parse(cls, value: Any):
        """
        Match value exactly against the member values.

        returns:
        - member or None – None for anything outside the domain (including non-strings).
        """
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        for member in cls:
            if member.value == value:
                return member
        return None


class Income(_Choice):
    BELOW_25K = "below-25k"
    FROM_25K_TO_50K = "25k-50k"
    FROM_50K_TO_100K = "50k-100k"
    ABOVE_100K = "above-100k"

    @property
    def rank(self) -> int:
        # Declaration order is bracket order.
        return list(Income).index(self)


class Experience(_Choice):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    EXPERIENCED = "experienced"


class RiskTolerance(_Choice):
    CONSERVATIVE = "conservative"
    MODERATE = "moderate"
    AGGRESSIVE = "aggressive"


class TimeHorizon(_Choice):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class RiskTier(_Choice):
    CONSERVATIVE = "Conservative"
    MODERATE = "Moderate"
    HIGH = "High"


class InstrumentType(_Choice):
    MUTUAL_FUND = "mutual_fund"
    EQUITY = "equity"


class RiskLevel(_Choice):
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"


def _value(member: Optional[Enum]) -> Optional[str]:
    return member.value if member is not None else None


def _first(data: Dict[str, Any], *keys: str, default: Any = None) -> Any:
    """Return the first key present in data (camelCase record or snake_case payload)."""
    for k in keys:
        if k in data:
            return data[k]
    return default


def coerce_age(value: Any) -> Optional[int]:
    """Whole years, or None when missing, unparseable or not positive."""
    if isinstance(value, bool):
        return None
    try:
        age = int(float(value))
    except (TypeError, ValueError, OverflowError):
        return None
    return age if age > 0 else None


def coerce_amount(value: Any) -> float:
    """Non-negative currency amount; anything unusable reads as 0."""
    if isinstance(value, bool):
        return 0.0
    try:
        amount = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(amount) or amount < 0:
        return 0.0
    return amount


def _percent(value: Any) -> Union[int, float]:
    # Whole numbers stay int; fractional weights are kept as given.
    amount = coerce_amount(value)
    return int(amount) if amount.is_integer() else amount


def _text(value: Any) -> str:
    return "" if value is None else str(value)


# Step-by-step required fields of the onboarding questionnaire.
ONBOARDING_STEPS: Tuple[Tuple[str, ...], ...] = (
    ("age", "income", "investmentExperience"),
    ("riskTolerance", "investmentGoals"),
    ("timeHorizon", "monthlyInvestment"),
    ("currentInvestments", "financialConcerns"),
)

# Values used when a user skips questions and asks for a basic profile.
ONBOARDING_DEFAULTS: Dict[str, Any] = {
    "age": 25,
    "income": "not-specified",
    "investmentExperience": "beginner",
    "riskTolerance": "moderate",
    "investmentGoals": "General investment",
    "timeHorizon": "medium",
    "currentInvestments": "None",
    "monthlyInvestment": 1000,
    "financialConcerns": "None specified",
}


def missing_onboarding_fields(data: Dict[str, Any]) -> List[str]:
    """
    List questionnaire fields left blank, in questionnaire order.

    notes:
    - A field counts as blank when absent, None or an all-whitespace string.
    """
    missing = []
    for step in ONBOARDING_STEPS:
        for name in step:
            v = data.get(name)
            if v is None or (isinstance(v, str) and not v.strip()):
                missing.append(name)
    return missing


@dataclass(frozen=True)
class FinancialProfile:
    """
    One user's answers, normalised for scoring.

    Categorical attributes hold an enum member or None (out of domain).
    Free-text attributes are carried only for the narrative prompt.
    """
    age: Optional[int]
    income: Optional[Income] = None
    investment_experience: Optional[Experience] = None
    risk_tolerance: Optional[RiskTolerance] = None
    time_horizon: Optional[TimeHorizon] = None
    monthly_investment: float = 0.0
    investment_goals: str = ""
    current_investments: str = ""
    financial_concerns: str = ""
    user_id: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FinancialProfile":
        """
        Build a profile from a stored record or request payload.

        parameters:
        - data: dict – camelCase keys (stored record) or snake_case keys.

        returns:
        - FinancialProfile – never raises for odd values; they become None / 0.
        """
        data = data or {}
        user_id = _first(data, "userId", "user_id")
        return cls(
            age=coerce_age(data.get("age")),
            income=Income.parse(data.get("income")),
            investment_experience=Experience.parse(_first(data, "investmentExperience", "investment_experience")),
            risk_tolerance=RiskTolerance.parse(_first(data, "riskTolerance", "risk_tolerance")),
            time_horizon=TimeHorizon.parse(_first(data, "timeHorizon", "time_horizon")),
            monthly_investment=coerce_amount(_first(data, "monthlyInvestment", "monthly_investment")),
            investment_goals=_text(_first(data, "investmentGoals", "investment_goals")),
            current_investments=_text(_first(data, "currentInvestments", "current_investments")),
            financial_concerns=_text(_first(data, "financialConcerns", "financial_concerns")),
            user_id=str(user_id) if user_id is not None else None,
            created_at=_first(data, "createdAt", "created_at"),
            updated_at=_first(data, "updatedAt", "updated_at"),
        )

    @classmethod
    def from_onboarding(cls, data: Dict[str, Any], fill_defaults: bool = False) -> "FinancialProfile":
        """Build from questionnaire answers, optionally filling blanks with ONBOARDING_DEFAULTS."""
        answers = dict(data or {})
        if fill_defaults:
            for name in missing_onboarding_fields(answers):
                answers[name] = ONBOARDING_DEFAULTS[name]
        return cls.from_dict(answers)

    @property
    def profile_id(self) -> Optional[str]:
        return f"profile_{self.user_id}" if self.user_id else None

    def to_dict(self) -> Dict[str, Any]:
        """Serialise to the camelCase record shape used by the profile stores."""
        return {
            "id": self.profile_id,
            "userId": self.user_id,
            "age": self.age,
            "income": _value(self.income),
            "investmentExperience": _value(self.investment_experience),
            "riskTolerance": _value(self.risk_tolerance),
            "investmentGoals": self.investment_goals,
            "timeHorizon": _value(self.time_horizon),
            "currentInvestments": self.current_investments,
            "monthlyInvestment": self.monthly_investment,
            "financialConcerns": self.financial_concerns,
            "createdAt": self.created_at,
            "updatedAt": self.updated_at,
        }


@dataclass(frozen=True)
class FactorScore:
    """
    One row of the factor breakdown.

    attributes:
    - factor: str – display name ("Age", "Experience", ...).
    - score: int – descriptive 0-100 capacity score for display.
    - points: int – additive contribution to the overall risk score.
    - rationale: str – human-readable explanation.
    """
    factor: str
    score: int
    points: int
    rationale: str

    def to_dict(self) -> Dict[str, Any]:
        return {"factor": self.factor, "score": self.score, "points": self.points, "rationale": self.rationale}


@dataclass(frozen=True)
class RiskAssessment:
    score: int
    tier: RiskTier
    factor_breakdown: Tuple[FactorScore, ...]
    asset_mix: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "score": self.score,
            "tier": self.tier.value,
            "factorBreakdown": [f.to_dict() for f in self.factor_breakdown],
            "assetMix": dict(self.asset_mix),
        }


@dataclass(frozen=True)
class InstrumentCandidate:
    """Read-only catalog entry."""
    id: str
    type: Optional[InstrumentType]
    name: str
    category: str
    risk_level: Optional[RiskLevel]
    expected_return_range: str
    min_investment: float
    base_allocation: Union[int, float]
    reasoning_template: str
    pros: Tuple[str, ...] = ()
    cons: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "InstrumentCandidate":
        return cls(
            id=str(data.get("id", "")),
            type=InstrumentType.parse(data.get("type")),
            name=_text(data.get("name")),
            category=_text(data.get("category")),
            risk_level=RiskLevel.parse(_first(data, "riskLevel", "risk_level")),
            expected_return_range=_text(_first(data, "expectedReturn", "expectedReturnRange", "expected_return_range")),
            min_investment=coerce_amount(_first(data, "minInvestment", "min_investment")),
            base_allocation=_percent(_first(data, "allocation", "baseAllocation", "base_allocation")),
            reasoning_template=_text(_first(data, "reasoning", "reasoningTemplate", "reasoning_template")),
            pros=tuple(str(p) for p in data.get("pros") or ()),
            cons=tuple(str(c) for c in data.get("cons") or ()),
        )


@dataclass(frozen=True)
class Recommendation:
    candidate: InstrumentCandidate
    allocation: Union[int, float]

    @property
    def id(self) -> str:
        return self.candidate.id

    @property
    def type(self) -> Optional[InstrumentType]:
        return self.candidate.type

    @property
    def risk_level(self) -> Optional[RiskLevel]:
        return self.candidate.risk_level

    @property
    def reasoning(self) -> str:
        return self.candidate.reasoning_template

    def to_dict(self) -> Dict[str, Any]:
        c = self.candidate
        return {
            "id": c.id,
            "type": _value(c.type),
            "name": c.name,
            "category": c.category,
            "riskLevel": _value(c.risk_level),
            "expectedReturn": c.expected_return_range,
            "minInvestment": c.min_investment,
            "reasoning": self.reasoning,
            "pros": list(c.pros),
            "cons": list(c.cons),
            "allocation": self.allocation,
        }
