# PURPOSE: Scoring tables for the risk profiler.
# CONTEXT: Two independent mappings per factor. The additive points build the
#          0-100 risk score and tier; the capacity scores are the finer 0-100
#          values shown per factor. Both rise and fall together.

from investiq.model_interface.types import Experience, RiskTier, RiskTolerance, TimeHorizon

# ---- Additive points (score / tier) ----

# (exclusive upper age bound, points); older or unknown ages get the floor.
AGE_POINTS = ((30, 30), (40, 25), (50, 20))
AGE_POINTS_FLOOR = 10

EXPERIENCE_POINTS = {
    Experience.EXPERIENCED: 25,
    Experience.INTERMEDIATE: 15,
    Experience.BEGINNER: 5,
}
EXPERIENCE_POINTS_FLOOR = 5

TOLERANCE_POINTS = {
    RiskTolerance.AGGRESSIVE: 30,
    RiskTolerance.MODERATE: 20,
    RiskTolerance.CONSERVATIVE: 10,
}
TOLERANCE_POINTS_FLOOR = 10

HORIZON_POINTS = {
    TimeHorizon.LONG: 15,
    TimeHorizon.MEDIUM: 10,
    TimeHorizon.SHORT: 5,
}
HORIZON_POINTS_FLOOR = 5

SCORE_MIN = 0
SCORE_MAX = 100

# Inclusive lower bounds, checked highest first.
TIER_THRESHOLDS = ((70, RiskTier.HIGH), (40, RiskTier.MODERATE))
TIER_FLOOR = RiskTier.CONSERVATIVE

# ---- Descriptive capacity scores (factor display) ----

AGE_CAPACITY = ((30, 85), (40, 70), (50, 55))
AGE_CAPACITY_FLOOR = 30

EXPERIENCE_CAPACITY = {
    Experience.EXPERIENCED: 80,
    Experience.INTERMEDIATE: 60,
}
EXPERIENCE_CAPACITY_FLOOR = 30

TOLERANCE_CAPACITY = {
    RiskTolerance.AGGRESSIVE: 90,
    RiskTolerance.MODERATE: 60,
}
TOLERANCE_CAPACITY_FLOOR = 30

HORIZON_CAPACITY = {
    TimeHorizon.LONG: 85,
    TimeHorizon.MEDIUM: 60,
}
HORIZON_CAPACITY_FLOOR = 35

# Rationale wording per factor.
AGE_RECOVERY = ((40, "high"), (50, "moderate"))
AGE_RECOVERY_FLOOR = "limited"

EXPERIENCE_STRATEGY = {
    Experience.EXPERIENCED: "complex",
    Experience.INTERMEDIATE: "moderate",
}
EXPERIENCE_STRATEGY_FLOOR = "simple"

TOLERANCE_STYLE = {
    RiskTolerance.AGGRESSIVE: "high growth",
    RiskTolerance.MODERATE: "balanced",
}
TOLERANCE_STYLE_FLOOR = "stable"

HORIZON_STRATEGY = {
    TimeHorizon.LONG: "aggressive growth",
    TimeHorizon.MEDIUM: "moderate growth",
}
HORIZON_STRATEGY_FLOOR = "conservative"

# Illustrative equity/debt split by score; bounds are exclusive (score > bound).
ASSET_MIX = (
    (70, {"equity": "70-80%", "debt": "20-30%"}),
    (40, {"equity": "50-60%", "debt": "40-50%"}),
)
ASSET_MIX_FLOOR = {"equity": "30-40%", "debt": "60-70%"}
