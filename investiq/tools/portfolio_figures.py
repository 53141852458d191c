# PURPOSE: Static illustrative figures for a recommendation set.
# CONTEXT: No market data. Figures come from catalog text (expected return
#          ranges) and allocations only.

from __future__ import annotations
import re
from typing import Any, Dict, Optional, Sequence, Tuple

from investiq.model_interface.types import Recommendation
from investiq.utils.rounding import round_percent

_RANGE_RE = re.compile(r"^\s*(-?\d+(?:\.\d+)?)\s*(?:-\s*(-?\d+(?:\.\d+)?))?\s*%?\s*$")


def parse_return_range(text: str) -> Optional[Tuple[float, float]]:
    """
    Parse "12-15%" into (12.0, 15.0); a single figure "8%" gives (8.0, 8.0).

    returns:
    - tuple[float, float] or None – None when the text is not a range.
    """
    m = _RANGE_RE.match(text or "")
    if not m:
        return None
    low = float(m.group(1))
    high = float(m.group(2)) if m.group(2) is not None else low
    return (min(low, high), max(low, high))


def compute_kpis(recommendations: Sequence[Recommendation]) -> Dict[str, Any]:
    """
    Summarise a recommendation set.

    returns:
    - dict – {"recommendation_count", "allocation_total", "expected_return_low",
      "expected_return_high", "min_entry_amount"}.

    notes:
    - Expected return bounds are allocation-weighted over the recommendations
      whose range parses; both are None if none parse or all weights are zero.
    """
    total = sum(r.allocation for r in recommendations)
    if isinstance(total, float):
        total = round_percent(total)

    weight = 0.0
    low_acc = 0.0
    high_acc = 0.0
    for r in recommendations:
        rng = parse_return_range(r.candidate.expected_return_range)
        if rng is None or r.allocation <= 0:
            continue
        weight += r.allocation
        low_acc += rng[0] * r.allocation
        high_acc += rng[1] * r.allocation

    if weight > 0:
        exp_low = round_percent(low_acc / weight)
        exp_high = round_percent(high_acc / weight)
    else:
        exp_low = exp_high = None

    return {
        "recommendation_count": len(recommendations),
        "allocation_total": total,
        "expected_return_low": exp_low,
        "expected_return_high": exp_high,
        "min_entry_amount": sum(r.candidate.min_investment for r in recommendations),
    }
