# PURPOSE: Recommendation engine: profile + catalog -> filtered, weighted recommendations.
# CONTEXT: Filtering is keyed on the raw risk tolerance field, so the engine runs
#          without the risk profiler. Output keeps catalog order; no re-sorting.

from __future__ import annotations
from typing import Iterable, List, Optional, Sequence

from investiq.constants.catalog import CONSERVATIVE_DEBT_ALLOCATION, DEBT_CATEGORY, REFERENCE_CATALOG
from investiq.model_interface.recommender import Recommender
from investiq.model_interface.types import (
    FinancialProfile,
    InstrumentCandidate,
    InstrumentType,
    Recommendation,
    RiskLevel,
    RiskTier,
    RiskTolerance,
)
from investiq.utils.rounding import renormalize_percentages

# Risk level dropped for each tolerance; tolerances not listed keep everything.
EXCLUDED_RISK_LEVEL = {
    RiskTolerance.CONSERVATIVE: RiskLevel.HIGH,
    RiskTolerance.AGGRESSIVE: RiskLevel.LOW,
}


def filter_candidates(
    catalog: Iterable[InstrumentCandidate],
    tolerance: Optional[RiskTolerance],
) -> List[InstrumentCandidate]:
    """Drop candidates whose risk level the tolerance excludes, preserving order."""
    excluded = EXCLUDED_RISK_LEVEL.get(tolerance)
    return [c for c in catalog if excluded is None or c.risk_level != excluded]


def allocation_for(candidate: InstrumentCandidate, tolerance: Optional[RiskTolerance]):
    """
    Allocation for one surviving candidate.

    notes:
    - Conservative investors get a fixed 40% in the debt mutual fund
      (capital preservation); everything else keeps its catalog weight.
    """
    if (
        tolerance is RiskTolerance.CONSERVATIVE
        and candidate.type is InstrumentType.MUTUAL_FUND
        and candidate.category == DEBT_CATEGORY
    ):
        return CONSERVATIVE_DEBT_ALLOCATION
    return candidate.base_allocation


class RecommendationEngine(Recommender):
    """
    Engine:
    1) Start from the injected catalog, or the reference catalog.
    2) Filter by risk tolerance (conservative drops High, aggressive drops Low).
    3) Override the debt fund allocation for conservative investors.
    4) Optionally rescale allocations to sum to exactly 100 (off by default;
       the reference behaviour leaves filtered sets unscaled).
    """

    def __init__(self, renormalize: bool = False):
        self.renormalize = renormalize

    def _tolerance(self, profile: FinancialProfile, tier: Optional[RiskTier]) -> Optional[RiskTolerance]:
        # The baseline engine ignores the tier.
        return profile.risk_tolerance

    def recommend(
        self,
        profile: FinancialProfile,
        catalog: Optional[Sequence[InstrumentCandidate]] = None,
        tier: Optional[RiskTier] = None,
    ) -> List[Recommendation]:
        """
        Produce recommendations for a profile.

        parameters:
        - profile: FinancialProfile – only risk_tolerance drives selection.
        - catalog: sequence|None – candidates to choose from (None = reference catalog).
        - tier: RiskTier|None – accepted for interface parity; see TierGatedEngine.

        returns:
        - list[Recommendation] – subset of the catalog in catalog order; may be empty.
        """
        candidates = REFERENCE_CATALOG if catalog is None else catalog
        tolerance = self._tolerance(profile, tier)
        kept = filter_candidates(candidates, tolerance)
        allocations = [allocation_for(c, tolerance) for c in kept]
        if self.renormalize:
            allocations = renormalize_percentages(allocations)
        return [Recommendation(candidate=c, allocation=a) for c, a in zip(kept, allocations)]


_engine = RecommendationEngine()


def recommend(
    profile: FinancialProfile,
    catalog: Optional[Sequence[InstrumentCandidate]] = None,
) -> List[Recommendation]:
    """Module-level entry point using the baseline engine."""
    return _engine.recommend(profile, catalog)


def make_renormalizing_engine() -> RecommendationEngine:
    """Factory for RECOMMENDER_MODULE, e.g. 'investiq.model_impl.recommendation_engine:make_renormalizing_engine'."""
    return RecommendationEngine(renormalize=True)
