from investiq import narrative
from investiq.model_interface.types import FinancialProfile
from investiq.narrative import (
    FALLBACK_ANALYSIS,
    BedrockNarrativeGenerator,
    NarrativeGenerator,
    build_prompt,
    generate_analysis,
)


class Canned(NarrativeGenerator):
    def generate(self, prompt):
        return "Stay diversified."


class Failing(NarrativeGenerator):
    def generate(self, prompt):
        raise RuntimeError("throttled")


def test_prompt_carries_every_answer(full_answers):
    prompt = build_prompt(FinancialProfile.from_dict(full_answers))
    for text in ("Age: 34", "Income: 50k-100k", "Investment Experience: intermediate",
                 "Risk Tolerance: moderate", "Investment Goals: Buy a house in 6 years",
                 "Time Horizon: medium", "Monthly Investment: ₹5,000",
                 "Current Investments: Fixed deposits", "Financial Concerns: Job security"):
        assert text in prompt


def test_prompt_marks_missing_answers():
    prompt = build_prompt(FinancialProfile.from_dict({"riskTolerance": "sky-high", "monthlyInvestment": 1250.5}))
    assert "Age: not specified" in prompt
    assert "Risk Tolerance: not specified" in prompt
    assert "Monthly Investment: ₹1,250.50" in prompt


def test_no_generator_skips(full_answers):
    assert generate_analysis(None, FinancialProfile.from_dict(full_answers)) == (None, "skipped")


def test_generator_text_is_returned(full_answers):
    assert generate_analysis(Canned(), FinancialProfile.from_dict(full_answers)) == ("Stay diversified.", "ok")


def test_generator_failure_falls_back(full_answers):
    text, status = generate_analysis(Failing(), FinancialProfile.from_dict(full_answers))
    assert status == "failed"
    assert text == FALLBACK_ANALYSIS


def test_bedrock_generator_delegates_to_tool(monkeypatch, full_answers):
    calls = {}

    def fake_generate_text(prompt, model_id=None, max_tokens=2000, temperature=0.2):
        calls.update(prompt=prompt, model_id=model_id, max_tokens=max_tokens)
        return "From the model."

    monkeypatch.setattr(narrative.bedrock_tool, "generate_text", fake_generate_text)
    gen = BedrockNarrativeGenerator(model_id="test-model", max_tokens=500)
    text, status = generate_analysis(gen, FinancialProfile.from_dict(full_answers))
    assert (text, status) == ("From the model.", "ok")
    assert calls["model_id"] == "test-model"
    assert calls["max_tokens"] == 500
    assert "Age: 34" in calls["prompt"]


def test_bedrock_tool_joins_text_blocks(monkeypatch):
    from investiq.tools import bedrock_tool

    class FakeClient:
        def converse(self, **kwargs):
            assert kwargs["messages"][0]["content"][0]["text"] == "hi"
            return {"output": {"message": {"content": [{"text": "a"}, {"toolUse": {}}, {"text": "b"}]}}}

    monkeypatch.setattr(bedrock_tool, "_get_client", lambda: FakeClient())
    assert bedrock_tool.generate_text("hi") == "ab"
