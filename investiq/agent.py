"""
Agent core logic: interprets a request, plans actions, calls the profile store
and the advice pipeline.

PURPOSE: High-level controller that decides whether to save, load or only
         evaluate a profile, then runs the advice pipeline and records a
         lightweight trace.
CONTEXT: Used by the Lambda handler. The profile store and narrative generator
         are injected so the controller holds no global cache state.
"""

import os
import traceback
from typing import Any, Dict, Optional

import structlog

from investiq.agent_io import make_ok_message, error_to_string
from investiq.model_interface.types import FinancialProfile, missing_onboarding_fields
from investiq.narrative import BedrockNarrativeGenerator, NarrativeGenerator
from investiq.pipeline import run_pipeline
from investiq.profile_store import ProfileStore, default_store, stamp

log = structlog.get_logger(__name__)


def default_generator() -> Optional[NarrativeGenerator]:
    """Bedrock narration when USE_BEDROCK=1, otherwise none."""
    if os.getenv("USE_BEDROCK", "0") == "1":
        return BedrockNarrativeGenerator()
    return None


class Agent:
    """High-level controller for the InvestIQ advisor."""

    def __init__(self, store: Optional[ProfileStore] = None, generator: Optional[NarrativeGenerator] = None):
        self.store = store if store is not None else default_store()
        self.generator = generator
        # In-memory trace of key planning/execution steps for debugging or audits.
        self.trace = []

    def handle(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Main entry point.

        parameters:
        - payload: dict – {"user_id"?, "profile"?, "options"?, "catalog"?}.

        returns:
        - dict – pipeline output (status "ok"), or a status envelope:
          "incomplete" (questionnaire gaps), "not_found" (no stored profile)
          or "error". Always includes 'trace'.
        """
        try:
            plan = self._plan(payload)
            self.trace.append(plan)
            action = plan["action"]

            if action == "save_profile":
                return self._save_and_advise(payload)
            if action == "load_profile":
                return self._load_and_advise(payload)
            return self._advise(payload)

        except Exception as e:
            tb = traceback.format_exc(limit=2)
            log.error("agent.failed", error=error_to_string(e))
            return {
                "status": "error",
                "messages": [make_ok_message(error_to_string(e)), {"role": "system", "content": tb}],
                "trace": self.trace,
            }

    def _plan(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Rule-based planner.

        rules:
        - 'profile' and 'user_id' present: save the profile, then advise.
        - only 'user_id': load the stored profile, then advise.
        - only 'profile': advise without touching the store.

        raises:
        - ValueError – payload is not an object or carries neither key.
        """
        if not isinstance(payload, dict):
            raise ValueError("Payload must be a JSON object")
        has_profile = isinstance(payload.get("profile"), dict)
        user_id = payload.get("user_id")
        if has_profile and user_id:
            return {"action": "save_profile", "user_id": user_id}
        if user_id:
            return {"action": "load_profile", "user_id": user_id}
        if has_profile:
            return {"action": "advise"}
        raise ValueError("Payload needs a 'profile' or a 'user_id'")

    def _advise(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        out = run_pipeline(payload, generator=self.generator)
        out["trace"] = self.trace
        return out

    def _save_and_advise(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        user_id = str(payload["user_id"])
        answers = payload["profile"]
        fill = bool((payload.get("options") or {}).get("fill_defaults"))

        missing = [] if fill else missing_onboarding_fields(answers)
        if missing:
            return {
                "status": "incomplete",
                "missing_fields": missing,
                "messages": [make_ok_message("Please answer the remaining questions: " + ", ".join(missing) + ".")],
                "trace": self.trace,
            }

        existing = self.store.load(user_id)
        profile = FinancialProfile.from_onboarding(answers, fill_defaults=fill)
        if existing is not None and existing.created_at:
            profile = FinancialProfile.from_dict({**profile.to_dict(), "createdAt": existing.created_at})
        profile = stamp(profile, user_id)

        saved = self.store.save(profile)
        self.trace.append({"step": "save_profile", "saved": saved})
        if not saved:
            log.warning("profile.save_failed", user_id=user_id)

        out = self._advise({**payload, "profile": profile.to_dict(), "options": self._core_options(payload)})
        out["saved"] = saved
        return out

    def _load_and_advise(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        user_id = str(payload["user_id"])
        profile = self.store.load(user_id)
        self.trace.append({"step": "load_profile", "found": profile is not None})
        if profile is None:
            return {
                "status": "not_found",
                "messages": [make_ok_message("Profile not found. Please complete the onboarding process.")],
                "trace": self.trace,
            }
        return self._advise({**payload, "profile": profile.to_dict(), "options": self._core_options(payload)})

    @staticmethod
    def _core_options(payload: Dict[str, Any]) -> Dict[str, Any]:
        # Defaults were already applied before saving.
        opts = dict(payload.get("options") or {})
        opts.pop("fill_defaults", None)
        return opts
