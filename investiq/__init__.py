"""InvestIQ advisory core: risk profiling and instrument recommendations."""

from investiq.model_impl.recommendation_engine import recommend
from investiq.model_impl.risk_profiler import assess

__version__ = "0.1.0"

__all__ = ["assess", "recommend", "__version__"]
