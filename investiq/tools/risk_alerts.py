from investiq.model_interface.types import InstrumentType


def risk_alerts_from_recommendations(recommendations, kpis: dict, monthly_investment: float):
    alerts = []
    if not recommendations:
        alerts.append({"type": "empty_recommendations", "severity": "high",
                       "evidence": "No catalog instrument matches your risk tolerance",
                       "suggested_action": "Review your risk tolerance or widen the catalog."})
        return alerts

    total = kpis.get("allocation_total", 0)
    if total != 100:
        alerts.append({"type": "allocation_gap", "severity": "medium",
                       "evidence": f"Allocations sum to {total}%, not 100%",
                       "suggested_action": "Scale the weights proportionally before investing."})

    for r in recommendations:
        c = r.candidate
        if c.type is InstrumentType.EQUITY and r.allocation >= 10:
            alerts.append({"type": "single_stock", "severity": "low",
                           "evidence": f"{c.name} is a single stock at {r.allocation}% of the portfolio",
                           "suggested_action": "Keep single-stock exposure small; prefer diversified funds."})
        if c.min_investment > monthly_investment:
            alerts.append({"type": "min_investment", "severity": "medium",
                           "evidence": f"{c.name} needs at least {c.min_investment:,.0f}, above your monthly {monthly_investment:,.0f}",
                           "suggested_action": "Accumulate for a few months or pick a lower-minimum alternative."})
    return alerts
