import pytest


@pytest.fixture
def young_aggressive():
    return {"age": 25, "investmentExperience": "beginner", "riskTolerance": "aggressive", "timeHorizon": "long"}


@pytest.fixture
def senior_conservative():
    return {"age": 55, "investmentExperience": "beginner", "riskTolerance": "conservative", "timeHorizon": "short"}


@pytest.fixture
def full_answers():
    return {
        "age": 34,
        "income": "50k-100k",
        "investmentExperience": "intermediate",
        "riskTolerance": "moderate",
        "investmentGoals": "Buy a house in 6 years",
        "timeHorizon": "medium",
        "monthlyInvestment": 5000,
        "currentInvestments": "Fixed deposits",
        "financialConcerns": "Job security",
    }


@pytest.fixture
def aws_env(monkeypatch):
    # Fake credentials so moto never touches a real account.
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_SESSION_TOKEN", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "eu-west-2")
    monkeypatch.setenv("AWS_REGION", "eu-west-2")
    monkeypatch.setenv("DDB_PROFILE_TABLE", "user_profiles_test")


@pytest.fixture(autouse=True)
def _local_defaults(monkeypatch, tmp_path):
    # Keep every test off Bedrock/DynamoDB and away from the repo's cache dir.
    monkeypatch.setenv("USE_BEDROCK", "0")
    monkeypatch.setenv("USE_DYNAMODB", "0")
    monkeypatch.setenv("USE_XRAY", "0")
    monkeypatch.setenv("PROFILE_CACHE_DIR", str(tmp_path / "cache"))
    monkeypatch.delenv("RECOMMENDER_MODULE", raising=False)
