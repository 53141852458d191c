"""
Narrative generator collaborator.

PURPOSE: Build the advisor prompt from a profile and obtain free-text analysis
         from an external text model.
CONTEXT: The narrative is independent of the structured recommendations. A
         failing generator yields a fixed fallback message and never blocks
         assess/recommend results.
"""

from __future__ import annotations
import os
from typing import Optional, Tuple

import structlog

from investiq.model_interface.types import FinancialProfile
from investiq.tools import bedrock_tool

log = structlog.get_logger(__name__)

FALLBACK_ANALYSIS = "Unable to generate recommendations at this time. Please try again."

# Load the prompt template once at import-time.
PROMPT_PATH = os.path.join(os.path.dirname(__file__), "prompts", "advisor_prompt.md")
with open(PROMPT_PATH, "r", encoding="utf-8") as f:
    PROMPT_TEMPLATE = f.read()


class NarrativeGenerator:
    def generate(self, prompt: str) -> str:
        raise NotImplementedError


class BedrockNarrativeGenerator(NarrativeGenerator):
    """Narrative generator backed by a Bedrock chat model."""

    def __init__(self, model_id: Optional[str] = None, max_tokens: int = 2000):
        self.model_id = model_id
        self.max_tokens = max_tokens

    def generate(self, prompt: str) -> str:
        return bedrock_tool.generate_text(prompt, model_id=self.model_id, max_tokens=self.max_tokens)


def _show(member) -> str:
    return member.value if member is not None else "not specified"


def build_prompt(profile: FinancialProfile) -> str:
    """Fill the advisor template with every profile field, free text included."""
    amount = profile.monthly_investment
    return PROMPT_TEMPLATE.format(
        age=profile.age if profile.age is not None else "not specified",
        income=_show(profile.income),
        investment_experience=_show(profile.investment_experience),
        risk_tolerance=_show(profile.risk_tolerance),
        investment_goals=profile.investment_goals or "not specified",
        time_horizon=_show(profile.time_horizon),
        monthly_investment=f"{amount:,.0f}" if amount == int(amount) else f"{amount:,.2f}",
        current_investments=profile.current_investments or "not specified",
        financial_concerns=profile.financial_concerns or "not specified",
    )


def generate_analysis(generator: Optional[NarrativeGenerator], profile: FinancialProfile) -> Tuple[Optional[str], str]:
    """
    Ask the generator for an analysis of the profile.

    parameters:
    - generator: NarrativeGenerator|None – None skips narration entirely.
    - profile: FinancialProfile – source of the prompt.

    returns:
    - (text, status): text is None when skipped; status is "skipped", "ok" or "failed".
    """
    if generator is None:
        return None, "skipped"
    try:
        text = generator.generate(build_prompt(profile))
    except Exception as e:
        # Structured recommendations stay valid; only the free text degrades.
        log.warning("narrative.failed", error=f"{type(e).__name__}: {e}")
        return FALLBACK_ANALYSIS, "failed"
    return text, "ok"
