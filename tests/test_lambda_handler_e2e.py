import json

from investiq.lambda_handler import handler


class Ctx:
    aws_request_id = "req-xyz"


def _call(body):
    resp = handler({"body": json.dumps(body), "headers": {"x-correlation-id": "corr-1"}}, Ctx())
    assert resp["statusCode"] == 200
    return json.loads(resp["body"])


def test_handler_pipeline_ok(young_aggressive):
    data = _call({"profile": young_aggressive})
    assert data["status"] == "ok"
    assert data["risk_assessment"]["score"] == 80
    assert "recommendations" in data and "kpis" in data and "risk_alerts" in data
    assert data["analysis"]["status"] == "skipped"


def test_handler_save_and_load_round_trip(full_answers):
    saved = _call({"user_id": "lambda-user", "profile": full_answers})
    assert saved["saved"] is True
    loaded = _call({"user_id": "lambda-user"})
    assert loaded["status"] == "ok"
    assert loaded["profile"]["userId"] == "lambda-user"


def test_handler_direct_invocation_without_proxy_body(senior_conservative):
    resp = handler({"profile": senior_conservative})
    data = json.loads(resp["body"])
    assert data["status"] == "ok"
    assert data["risk_assessment"]["tier"] == "Conservative"
