from __future__ import annotations
from typing import Any, Dict, Optional, Sequence

from investiq.model_impl.recommendation_engine import RecommendationEngine
from investiq.model_impl.risk_profiler import RiskProfiler
from investiq.model_impl.tier_gated_engine import TierGatedEngine
from investiq.model_interface.loader import load_recommender
from investiq.model_interface.types import FinancialProfile, InstrumentCandidate
from investiq.tools.portfolio_figures import compute_kpis
from investiq.tools.risk_alerts import risk_alerts_from_recommendations

_profiler = RiskProfiler()


def _engine(options: Dict[str, Any]):
    # Explicit options win over the RECOMMENDER_MODULE default.
    if "tier_gated" not in options and "renormalize" not in options:
        return load_recommender()
    renorm = bool(options.get("renormalize"))
    if options.get("tier_gated"):
        return TierGatedEngine(renormalize=renorm)
    return RecommendationEngine(renormalize=renorm)


def run_analysis(
    profile: FinancialProfile,
    catalog: Optional[Sequence[InstrumentCandidate]] = None,
    options: Optional[Dict[str, Any]] = None,
):
    assessment = _profiler.assess(profile)
    recs = _engine(options or {}).recommend(profile, catalog, tier=assessment.tier)
    kpis = compute_kpis(recs)
    return {
        "risk_assessment": assessment,
        "recommendations": recs,
        "kpis": kpis,
        "risk_alerts": risk_alerts_from_recommendations(recs, kpis, profile.monthly_investment),
    }
