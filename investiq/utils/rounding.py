# PURPOSE: Rounding helpers for allocation percentages and illustrative figures.
# CONTEXT: Allocations are whole percentages; renormalised sets must sum to exactly 100.

from decimal import Decimal, ROUND_FLOOR, ROUND_HALF_UP, getcontext
from typing import List, Sequence

# Enough precision for percentage arithmetic without float drift.
getcontext().prec = 28


def round_percent(x, places=1):
    """
    Round a percentage figure half-up to a fixed number of decimal places.

    parameters:
    - x: float|int|Decimal – value to round.
    - places: int – decimal places to keep (default = 1).

    returns:
    - float – rounded value (e.g. 11.25 → 11.3).
    """
    q = Decimal(1).scaleb(-places)
    return float(Decimal(str(x)).quantize(q, ROUND_HALF_UP))


def renormalize_percentages(weights: Sequence[float], total: int = 100) -> List[int]:
    """
    Rescale weights to whole percentages that sum exactly to `total`.

    parameters:
    - weights: sequence of non-negative numbers (negative values count as 0).
    - total: int – target sum (default 100).

    returns:
    - list[int] – same length as weights; empty in, empty out.

    notes:
    - Largest-remainder method: floor every share, then hand out the leftover
      units by descending fractional part, ties going to the earlier position.
    - When every weight is zero the total is split as evenly as possible.
    """
    if not weights:
        return []
    ws = [max(Decimal(str(w)), Decimal(0)) for w in weights]
    s = sum(ws)
    if s == 0:
        ws = [Decimal(1)] * len(ws)
        s = Decimal(len(ws))

    shares = [w * total / s for w in ws]
    floors = [int(sh.to_integral_value(ROUND_FLOOR)) for sh in shares]
    leftover = total - sum(floors)

    order = sorted(range(len(shares)), key=lambda i: (-(shares[i] - floors[i]), i))
    for i in order[:leftover]:
        floors[i] += 1
    return floors
