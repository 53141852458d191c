# PURPOSE: Advice pipeline: validates input, assesses risk, selects and weights
#          instruments, computes illustrative figures and alerts, optionally asks
#          the narrative generator for free text, and validates the final output.
# CONTEXT: Deterministic apart from run_id/latency and the optional narrative.

from __future__ import annotations
import json, time, uuid
from datetime import datetime
from typing import Any, Dict, Optional
from zoneinfo import ZoneInfo

from investiq.agent_io import validate_advice_output, validate_advice_request
from investiq.model_interface.types import FinancialProfile, InstrumentCandidate
from investiq.narrative import NarrativeGenerator, generate_analysis
from investiq.observability import xray_segment
from investiq.tools import analytics

TZ = ZoneInfo("Europe/London")


def _uuid_v7_like() -> str:
    """
    Create a readable run ID using a short random prefix and a timestamp suffix.
    Example: 'a1b2c3d4-20251021XXXXXX'
    """
    return uuid.uuid4().hex[:8] + "-" + datetime.now(TZ).strftime("%Y%m%d%H%M%S")


def run_pipeline(payload: dict, generator: Optional[NarrativeGenerator] = None) -> Dict[str, Any]:
    """
    End-to-end pipeline:

    steps:
    1) Validate input against advice_request.schema.json.
    2) Normalise the profile (and the injected catalog, if any).
    3) Assess risk and build recommendations.
    4) Ask the narrative generator (optional; failures degrade to a fallback text).
    5) Assemble output with run_id and latency.
    6) Validate output against advice_output.schema.json.

    returns:
    - dict – final response object suitable for the front-end.

    raises:
    - jsonschema.ValidationError – if the request shape is wrong.
    """
    t0 = time.time()

    # 1) Validate input
    validate_advice_request(payload)
    options = payload.get("options") or {}

    # 2) Normalise
    profile = FinancialProfile.from_onboarding(payload["profile"], fill_defaults=bool(options.get("fill_defaults")))
    if payload.get("user_id") and not profile.user_id:
        profile = FinancialProfile.from_dict({**profile.to_dict(), "userId": payload["user_id"]})
    catalog = None
    if "catalog" in payload:
        catalog = [InstrumentCandidate.from_dict(c) for c in payload["catalog"]]

    # 3) Deterministic core
    with xray_segment("assess_and_recommend"):
        result = analytics.run_analysis(profile, catalog, options)

    # 4) Narrative (independent of the structured result)
    narrate = options.get("narrate", True)
    text, narrative_status = generate_analysis(generator if narrate else None, profile)

    # 5) Assemble result
    out = {
        "status": "ok",
        "run_id": _uuid_v7_like(),
        "profile": profile.to_dict(),
        "risk_assessment": result["risk_assessment"].to_dict(),
        "recommendations": [r.to_dict() for r in result["recommendations"]],
        "kpis": result["kpis"],
        "risk_alerts": result["risk_alerts"],
        "analysis": {"text": text, "status": narrative_status},
        "latency_ms": int((time.time() - t0) * 1000),
    }

    # 6) Validate output
    validate_advice_output(out)
    return out


if __name__ == "__main__":
    # Quick manual run to see a formatted result in the console.
    demo = {"profile": {"age": 25, "investmentExperience": "beginner", "riskTolerance": "aggressive",
                        "timeHorizon": "long", "monthlyInvestment": 5000}}
    print(json.dumps(run_pipeline(demo), indent=2))
