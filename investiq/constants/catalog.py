# PURPOSE: Reference catalog of candidate instruments used when callers do not inject one.
# CONTEXT: Static, read-only reference data. Base allocations sum to 100 for the
#          full list; filtered subsets are not rescaled by the baseline engine.

from investiq.model_interface.types import InstrumentCandidate, InstrumentType, RiskLevel

# Allocation given to the debt mutual fund for conservative investors.
CONSERVATIVE_DEBT_ALLOCATION = 40
DEBT_CATEGORY = "Debt"

REFERENCE_CATALOG = (
    InstrumentCandidate(
        id="1",
        type=InstrumentType.MUTUAL_FUND,
        name="SBI Bluechip Fund",
        category="Large Cap Equity",
        risk_level=RiskLevel.MEDIUM,
        expected_return_range="12-15%",
        min_investment=500,
        base_allocation=30,
        reasoning_template=(
            "Suitable for long-term wealth creation with moderate risk. "
            "Invests in established large-cap companies."
        ),
        pros=("Diversified portfolio", "Professional management", "Good track record"),
        cons=("Market risk", "No guaranteed returns"),
    ),
    InstrumentCandidate(
        id="2",
        type=InstrumentType.MUTUAL_FUND,
        name="HDFC Mid-Cap Opportunities Fund",
        category="Mid Cap Equity",
        risk_level=RiskLevel.HIGH,
        expected_return_range="15-18%",
        min_investment=500,
        base_allocation=25,
        reasoning_template=(
            "Higher growth potential through mid-cap companies. "
            "Suitable for aggressive investors."
        ),
        pros=("High growth potential", "Emerging companies", "Good diversification"),
        cons=("Higher volatility", "Market timing risk"),
    ),
    InstrumentCandidate(
        id="3",
        type=InstrumentType.MUTUAL_FUND,
        name="ICICI Prudential Balanced Advantage Fund",
        category="Hybrid",
        risk_level=RiskLevel.MEDIUM,
        expected_return_range="10-12%",
        min_investment=500,
        base_allocation=25,
        reasoning_template=(
            "Balanced approach with equity and debt allocation. "
            "Good for moderate risk tolerance."
        ),
        pros=("Balanced risk", "Dynamic allocation", "Stable returns"),
        cons=("Lower growth potential", "Fund manager dependency"),
    ),
    InstrumentCandidate(
        id="4",
        type=InstrumentType.EQUITY,
        name="Reliance Industries Ltd",
        category="Large Cap Stock",
        risk_level=RiskLevel.MEDIUM,
        expected_return_range="12-16%",
        min_investment=2500,
        base_allocation=10,
        reasoning_template=(
            "Strong fundamentals and diversified business model. "
            "Good for long-term investment."
        ),
        pros=("Market leader", "Diversified business", "Strong financials"),
        cons=("Single stock risk", "Market volatility"),
    ),
    InstrumentCandidate(
        id="5",
        type=InstrumentType.MUTUAL_FUND,
        name="SBI Short Term Debt Fund",
        category=DEBT_CATEGORY,
        risk_level=RiskLevel.LOW,
        expected_return_range="6-8%",
        min_investment=500,
        base_allocation=10,
        reasoning_template=(
            "Provides stability and regular income. "
            "Good for emergency fund and short-term goals."
        ),
        pros=("Low risk", "Regular income", "Liquidity"),
        cons=("Lower returns", "Interest rate risk"),
    ),
)
