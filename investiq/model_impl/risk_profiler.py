# PURPOSE: Deterministic risk profiler: financial profile -> score, tier, factor breakdown.
# CONTEXT: Weighted additive scoring over four factors (age, experience, risk
#          tolerance, time horizon). Every mapping is total: unknown values fall
#          to the most conservative bucket, so assess() never raises.

from __future__ import annotations
from typing import Dict, Optional, Sequence, Tuple

from investiq.constants import risk_bands as rb
from investiq.model_interface.risk_model import RiskModel
from investiq.model_interface.types import (
    Experience,
    FactorScore,
    FinancialProfile,
    RiskAssessment,
    RiskTier,
    RiskTolerance,
    TimeHorizon,
)


def _banded(age: Optional[int], bands: Sequence[Tuple[int, object]], floor):
    """Walk (exclusive upper bound, value) pairs; unknown ages take the floor."""
    if age is None:
        return floor
    for upper, value in bands:
        if age < upper:
            return value
    return floor


def _clamp(x: int, lo: int, hi: int) -> int:
    """Clamp x to the [lo, hi] interval."""
    return min(hi, max(lo, x))


# ---- Additive points ----

def age_points(age: Optional[int]) -> int:
    return _banded(age, rb.AGE_POINTS, rb.AGE_POINTS_FLOOR)


def experience_points(experience: Optional[Experience]) -> int:
    return rb.EXPERIENCE_POINTS.get(experience, rb.EXPERIENCE_POINTS_FLOOR)


def tolerance_points(tolerance: Optional[RiskTolerance]) -> int:
    return rb.TOLERANCE_POINTS.get(tolerance, rb.TOLERANCE_POINTS_FLOOR)


def horizon_points(horizon: Optional[TimeHorizon]) -> int:
    return rb.HORIZON_POINTS.get(horizon, rb.HORIZON_POINTS_FLOOR)


def risk_score(profile: FinancialProfile) -> int:
    """Sum of the four additive factor points, clamped to [0, 100]."""
    total = (
        age_points(profile.age)
        + experience_points(profile.investment_experience)
        + tolerance_points(profile.risk_tolerance)
        + horizon_points(profile.time_horizon)
    )
    return _clamp(total, rb.SCORE_MIN, rb.SCORE_MAX)


def tier_for_score(score: int) -> RiskTier:
    """
    Map a score onto a tier.

    notes:
    - Thresholds are inclusive lower bounds: 70 is High, 40 is Moderate.
    """
    for lower, tier in rb.TIER_THRESHOLDS:
        if score >= lower:
            return tier
    return rb.TIER_FLOOR


def asset_mix_for_score(score: int) -> Dict[str, str]:
    """Illustrative equity/debt ranges; bounds are strict (score > bound)."""
    for bound, mix in rb.ASSET_MIX:
        if score > bound:
            return dict(mix)
    return dict(rb.ASSET_MIX_FLOOR)


# ---- Descriptive capacity scores ----

def age_capacity(age: Optional[int]) -> int:
    return _banded(age, rb.AGE_CAPACITY, rb.AGE_CAPACITY_FLOOR)


def experience_capacity(experience: Optional[Experience]) -> int:
    return rb.EXPERIENCE_CAPACITY.get(experience, rb.EXPERIENCE_CAPACITY_FLOOR)


def tolerance_capacity(tolerance: Optional[RiskTolerance]) -> int:
    return rb.TOLERANCE_CAPACITY.get(tolerance, rb.TOLERANCE_CAPACITY_FLOOR)


def horizon_capacity(horizon: Optional[TimeHorizon]) -> int:
    return rb.HORIZON_CAPACITY.get(horizon, rb.HORIZON_CAPACITY_FLOOR)


def _label(member, fallback: str = "unspecified") -> str:
    return member.value if member is not None else fallback


def factor_breakdown(profile: FinancialProfile) -> Tuple[FactorScore, ...]:
    """
    Build the ordered per-factor breakdown (Age, Experience, Risk Tolerance, Time Horizon).

    returns:
    - tuple[FactorScore, ...] – each row carries the display score, the additive
      points and a one-sentence rationale.
    """
    age = profile.age
    exp = profile.investment_experience
    tol = profile.risk_tolerance
    hor = profile.time_horizon

    recovery = _banded(age, rb.AGE_RECOVERY, rb.AGE_RECOVERY_FLOOR)
    age_text = (
        f"At {age} years, you have {recovery} time to recover from market volatility"
        if age is not None
        else f"Without a known age, we assume {recovery} time to recover from market volatility"
    )
    return (
        FactorScore("Age", age_capacity(age), age_points(age), age_text),
        FactorScore(
            "Experience",
            experience_capacity(exp),
            experience_points(exp),
            f"{_label(exp).capitalize()} investors can handle "
            f"{rb.EXPERIENCE_STRATEGY.get(exp, rb.EXPERIENCE_STRATEGY_FLOOR)} investment strategies",
        ),
        FactorScore(
            "Risk Tolerance",
            tolerance_capacity(tol),
            tolerance_points(tol),
            f"Your {_label(tol)} risk tolerance suggests "
            f"{rb.TOLERANCE_STYLE.get(tol, rb.TOLERANCE_STYLE_FLOOR)} investments",
        ),
        FactorScore(
            "Time Horizon",
            horizon_capacity(hor),
            horizon_points(hor),
            f"{_label(hor).capitalize()}-term investment horizon allows for "
            f"{rb.HORIZON_STRATEGY.get(hor, rb.HORIZON_STRATEGY_FLOOR)} strategies",
        ),
    )


class RiskProfiler(RiskModel):
    """
    Risk profiler:
    1) Score each factor from its additive band (unknowns take the lowest band).
    2) Sum and clamp to [0, 100].
    3) Classify via inclusive lower thresholds (>=70 High, >=40 Moderate).
    4) Attach the descriptive breakdown and illustrative asset mix.
    """

    def assess(self, profile: FinancialProfile) -> RiskAssessment:
        score = risk_score(profile)
        return RiskAssessment(
            score=score,
            tier=tier_for_score(score),
            factor_breakdown=factor_breakdown(profile),
            asset_mix=asset_mix_for_score(score),
        )


_profiler = RiskProfiler()


def assess(profile: FinancialProfile) -> RiskAssessment:
    """Module-level entry point using a shared stateless profiler."""
    return _profiler.assess(profile)
