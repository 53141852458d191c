import pytest

from investiq.agent import Agent, default_generator
from investiq.narrative import BedrockNarrativeGenerator
from investiq.profile_store import CachedProfileStore, LocalCacheStore


@pytest.fixture
def store(tmp_path):
    return CachedProfileStore(LocalCacheStore(str(tmp_path / "profiles")))


def test_plan_rules():
    a = Agent(store=object())
    assert a._plan({"profile": {}, "user_id": "u1"})["action"] == "save_profile"
    assert a._plan({"user_id": "u1"})["action"] == "load_profile"
    assert a._plan({"profile": {}})["action"] == "advise"
    with pytest.raises(ValueError):
        a._plan({"message": "hello"})


def test_advise_inline_does_not_touch_store(store, young_aggressive):
    out = Agent(store=store).handle({"profile": young_aggressive})
    assert out["status"] == "ok"
    assert out["risk_assessment"]["tier"] == "High"
    assert out["trace"][0] == {"action": "advise"}
    assert "saved" not in out


def test_save_then_load(store, full_answers):
    saved = Agent(store=store).handle({"user_id": "u1", "profile": full_answers})
    assert saved["status"] == "ok"
    assert saved["saved"] is True
    assert saved["profile"]["id"] == "profile_u1"
    assert saved["profile"]["createdAt"]

    loaded = Agent(store=store).handle({"user_id": "u1"})
    assert loaded["status"] == "ok"
    assert loaded["profile"]["investmentGoals"] == "Buy a house in 6 years"
    assert loaded["risk_assessment"] == saved["risk_assessment"]
    assert loaded["recommendations"] == saved["recommendations"]
    assert {"step": "load_profile", "found": True} in loaded["trace"]


def test_incomplete_questionnaire_is_not_saved(store, full_answers):
    answers = dict(full_answers, financialConcerns="")
    out = Agent(store=store).handle({"user_id": "u1", "profile": answers})
    assert out["status"] == "incomplete"
    assert out["missing_fields"] == ["financialConcerns"]
    assert store.load("u1") is None


def test_fill_defaults_completes_and_saves(store):
    out = Agent(store=store).handle({"user_id": "u2", "profile": {"age": 28}, "options": {"fill_defaults": True}})
    assert out["status"] == "ok"
    assert out["profile"]["riskTolerance"] == "moderate"
    assert out["profile"]["monthlyInvestment"] == 1000
    assert store.load("u2").age == 28


def test_unknown_user_is_not_found(store):
    out = Agent(store=store).handle({"user_id": "ghost"})
    assert out["status"] == "not_found"
    assert "onboarding" in out["messages"][0]["content"]


def test_resave_keeps_created_at(store, full_answers):
    Agent(store=store).handle({"user_id": "u1", "profile": full_answers})
    first = store.load("u1")
    Agent(store=store).handle({"user_id": "u1", "profile": dict(full_answers, riskTolerance="aggressive")})
    second = store.load("u1")
    assert second.created_at == first.created_at
    assert second.risk_tolerance.value == "aggressive"


def test_bad_payload_becomes_error_envelope(store):
    out = Agent(store=store).handle(["not", "an", "object"])
    assert out["status"] == "error"
    assert "JSON object" in out["messages"][0]["content"]


def test_schema_violation_becomes_error_envelope(store):
    out = Agent(store=store).handle({"profile": {"age": 30}, "options": {"turbo": True}})
    assert out["status"] == "error"
    assert "at $.options" in out["messages"][0]["content"]


def test_tier_gated_option_reaches_engine(store):
    profile = {"age": 22, "investmentExperience": "experienced", "riskTolerance": "conservative", "timeHorizon": "long"}
    out = Agent(store=store).handle({"profile": profile, "options": {"tier_gated": True}})
    assert [r["id"] for r in out["recommendations"]] == ["1", "2", "3", "4"]


def test_default_generator_follows_env(monkeypatch):
    assert default_generator() is None
    monkeypatch.setenv("USE_BEDROCK", "1")
    assert isinstance(default_generator(), BedrockNarrativeGenerator)
