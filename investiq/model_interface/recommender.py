from typing import List, Optional, Sequence

from .types import FinancialProfile, InstrumentCandidate, Recommendation, RiskTier

class Recommender:
    def recommend(
        self,
        profile: FinancialProfile,
        catalog: Optional[Sequence[InstrumentCandidate]] = None,
        tier: Optional[RiskTier] = None,
    ) -> List[Recommendation]:
        raise NotImplementedError
