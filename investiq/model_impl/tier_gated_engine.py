from typing import Optional

from investiq.model_impl.recommendation_engine import RecommendationEngine
from investiq.model_interface.types import FinancialProfile, RiskTier, RiskTolerance

# Tier -> tolerance whose filtering rules apply.
TIER_TOLERANCE = {
    RiskTier.CONSERVATIVE: RiskTolerance.CONSERVATIVE,
    RiskTier.MODERATE: RiskTolerance.MODERATE,
    RiskTier.HIGH: RiskTolerance.AGGRESSIVE,
}


class TierGatedEngine(RecommendationEngine):
    """Filters on the risk profiler's tier when one is supplied, else on the raw tolerance."""

    def _tolerance(self, profile: FinancialProfile, tier: Optional[RiskTier]) -> Optional[RiskTolerance]:
        if tier is None:
            return profile.risk_tolerance
        return TIER_TOLERANCE.get(tier, profile.risk_tolerance)
