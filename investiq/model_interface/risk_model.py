from .types import FinancialProfile, RiskAssessment

class RiskModel:
    def assess(self, profile: FinancialProfile) -> RiskAssessment:
        raise NotImplementedError
