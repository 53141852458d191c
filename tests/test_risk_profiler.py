import itertools

import pytest

from investiq import assess
from investiq.model_impl import risk_profiler as rp
from investiq.model_interface.types import (
    Experience,
    FinancialProfile,
    RiskTier,
    RiskTolerance,
    TimeHorizon,
)


def test_young_aggressive_beginner_scores_high(young_aggressive):
    out = assess(FinancialProfile.from_dict(young_aggressive))
    assert [f.points for f in out.factor_breakdown] == [30, 5, 30, 15]
    assert out.score == 80
    assert out.tier is RiskTier.HIGH


def test_senior_conservative_scores_conservative(senior_conservative):
    out = assess(FinancialProfile.from_dict(senior_conservative))
    assert [f.points for f in out.factor_breakdown] == [10, 5, 10, 5]
    assert out.score == 30
    assert out.tier is RiskTier.CONSERVATIVE


@pytest.mark.parametrize("age,points", [(18, 30), (29, 30), (30, 25), (39, 25), (40, 20), (49, 20), (50, 10), (90, 10)])
def test_age_points_bands(age, points):
    assert rp.age_points(age) == points


@pytest.mark.parametrize("age,capacity", [(29, 85), (30, 70), (39, 70), (40, 55), (49, 55), (50, 30)])
def test_age_capacity_bands(age, capacity):
    assert rp.age_capacity(age) == capacity


@pytest.mark.parametrize("score,tier", [
    (100, RiskTier.HIGH), (70, RiskTier.HIGH),
    (69, RiskTier.MODERATE), (40, RiskTier.MODERATE),
    (39, RiskTier.CONSERVATIVE), (10, RiskTier.CONSERVATIVE), (0, RiskTier.CONSERVATIVE),
])
def test_tier_thresholds_are_inclusive_lower(score, tier):
    assert rp.tier_for_score(score) is tier


AGES = [None, 1, 25, 30, 35, 40, 45, 50, 80]
EXPERIENCES = list(Experience) + [None]
TOLERANCES = list(RiskTolerance) + [None]
HORIZONS = list(TimeHorizon) + [None]


def test_score_range_and_tier_consistency_over_all_inputs():
    for age, exp, tol, hor in itertools.product(AGES, EXPERIENCES, TOLERANCES, HORIZONS):
        profile = FinancialProfile(age=age, investment_experience=exp, risk_tolerance=tol, time_horizon=hor)
        out = assess(profile)
        assert 10 <= out.score <= 100
        assert out.tier is rp.tier_for_score(out.score)
        assert out.score == sum(f.points for f in out.factor_breakdown)
        assert all(0 <= f.score <= 100 for f in out.factor_breakdown)


def test_best_profile_reaches_maximum():
    profile = FinancialProfile(
        age=22,
        investment_experience=Experience.EXPERIENCED,
        risk_tolerance=RiskTolerance.AGGRESSIVE,
        time_horizon=TimeHorizon.LONG,
    )
    assert assess(profile).score == 100


def test_assess_is_idempotent(young_aggressive):
    profile = FinancialProfile.from_dict(young_aggressive)
    assert assess(profile) == assess(profile)
    assert assess(profile).to_dict() == assess(FinancialProfile.from_dict(dict(young_aggressive))).to_dict()


def test_unrecognized_values_fall_back_to_most_conservative():
    profile = FinancialProfile.from_dict({
        "age": "old enough",
        "investmentExperience": "guru",
        "riskTolerance": 42,
        "timeHorizon": None,
    })
    out = assess(profile)
    assert [f.points for f in out.factor_breakdown] == [10, 5, 10, 5]
    assert [f.score for f in out.factor_breakdown] == [30, 30, 30, 35]
    assert out.tier is RiskTier.CONSERVATIVE


def test_unrecognized_matches_lowest_recognized_bucket(senior_conservative):
    known = assess(FinancialProfile.from_dict(senior_conservative))
    unknown = assess(FinancialProfile.from_dict({"age": 70, "investmentExperience": "?", "riskTolerance": "", "timeHorizon": "forever"}))
    assert known.score == unknown.score


def test_descriptive_and_additive_bands_move_together():
    checks = [
        (rp.experience_points, rp.experience_capacity, [None, Experience.BEGINNER, Experience.INTERMEDIATE, Experience.EXPERIENCED]),
        (rp.tolerance_points, rp.tolerance_capacity, [None, RiskTolerance.CONSERVATIVE, RiskTolerance.MODERATE, RiskTolerance.AGGRESSIVE]),
        (rp.horizon_points, rp.horizon_capacity, [None, TimeHorizon.SHORT, TimeHorizon.MEDIUM, TimeHorizon.LONG]),
        (rp.age_points, rp.age_capacity, [None, 60, 45, 35, 25]),
    ]
    for points, capacity, ordered in checks:
        p = [points(v) for v in ordered]
        c = [capacity(v) for v in ordered]
        assert p == sorted(p)
        assert c == sorted(c)


def test_breakdown_order_and_rationale_text():
    profile = FinancialProfile.from_dict({
        "age": 45, "investmentExperience": "experienced", "riskTolerance": "moderate", "timeHorizon": "long",
    })
    rows = assess(profile).factor_breakdown
    assert [r.factor for r in rows] == ["Age", "Experience", "Risk Tolerance", "Time Horizon"]
    assert rows[0].rationale == "At 45 years, you have moderate time to recover from market volatility"
    assert rows[1].rationale == "Experienced investors can handle complex investment strategies"
    assert rows[2].rationale == "Your moderate risk tolerance suggests balanced investments"
    assert rows[3].rationale == "Long-term investment horizon allows for aggressive growth strategies"


@pytest.mark.parametrize("score,equity", [(80, "70-80%"), (70, "50-60%"), (41, "50-60%"), (40, "30-40%"), (30, "30-40%")])
def test_asset_mix_uses_strict_bounds(score, equity):
    assert rp.asset_mix_for_score(score)["equity"] == equity


def test_miscased_answers_score_as_unrecognized():
    profile = FinancialProfile.from_dict({
        "age": 25, "investmentExperience": "Experienced", "riskTolerance": "AGGRESSIVE", "timeHorizon": " long ",
    })
    out = assess(profile)
    assert [f.points for f in out.factor_breakdown] == [30, 5, 10, 5]
    assert out.score == 50
    assert out.tier is RiskTier.MODERATE
