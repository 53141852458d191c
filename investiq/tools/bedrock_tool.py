# PURPOSE: Thin wrapper over the Bedrock runtime Converse API for free-text generation.
# CONTEXT: Used by the narrative generator; the client is created on first use so
#          importing this module never needs AWS credentials.

import os
import boto3

# Region and model come from environment for easy swapping in different deployments.
REGION = os.getenv("AWS_REGION", "eu-west-2")
MODEL_ID = os.getenv("MODEL_ID", "deepseek.v3-v1:0")

_client = None


def _get_client():
    global _client
    if _client is None:
        _client = boto3.client("bedrock-runtime", region_name=REGION)
    return _client


def generate_text(prompt: str, model_id: str = None, max_tokens: int = 2000, temperature: float = 0.2) -> str:
    """
    Send a single user prompt to the Bedrock model and return its textual response.

    parameters:
    - prompt: str – full prompt text.
    - model_id: str (optional) – overrides MODEL_ID.
    - max_tokens: int – response length cap (default 2000).
    - temperature: float – sampling temperature.

    returns:
    - str – concatenated text blocks from the model reply.

    raises:
    - botocore errors – propagated to the caller, which decides how to degrade.
    """
    resp = _get_client().converse(
        modelId=model_id or MODEL_ID,
        messages=[
            {"role": "user", "content": [{"text": prompt}]}
        ],
        inferenceConfig={"maxTokens": max_tokens, "temperature": temperature},
    )

    # Bedrock responses include a structured message list; most return a single text block.
    parts = resp["output"]["message"]["content"]
    return "".join(p.get("text", "") for p in parts)
