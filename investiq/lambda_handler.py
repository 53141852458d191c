"""
AWS Lambda handler: parses the request, calls the Agent, returns JSON output.
Adds structured, JSON CloudWatch-friendly logs with correlation IDs.

PURPOSE:
- Entry point for AWS Lambda behind API Gateway.
- Normalises the incoming event, delegates to Agent, and returns an HTTP-style
  response body with latency attached.

CONTEXT:
- Logging includes request_id and correlation_id so traces are easy to follow
  in CloudWatch. Errors are returned as status "error" with HTTP 200 so API
  Gateway does not retry.
"""

from __future__ import annotations
import json
import time
import traceback
import uuid
from typing import Any, Dict

from investiq.agent import Agent, default_generator
from investiq.agent_io import make_ok_message
from investiq.logging_setup import configure_logging
from investiq.observability import init_observability


# Configure a structured logger once; emits JSON key/value logs.
log = configure_logging()
init_observability()


def _response(body: Dict[str, Any], status_code: int = 200) -> Dict[str, Any]:
    """
    Wrap a Python dict into an API Gateway compatible response.

    returns:
    - dict – {"statusCode": int, "headers": {...}, "body": "<json-string>"}.
    """
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body),
    }


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """
    Lambda entry point.

    flow:
    1) Bind request/correlation IDs for traceability.
    2) Normalise body (handles API Gateway proxy format if present).
    3) Create Agent and call handle(body).
    4) Attach latency; on unhandled exceptions return an "error" payload and log traceback.

    returns:
    - dict – API Gateway compatible response with JSON body.
    """
    t0 = time.time()

    request_id = getattr(context, "aws_request_id", None) or str(uuid.uuid4())
    correlation_id = (event.get("headers", {}) or {}).get("x-correlation-id") or str(uuid.uuid4())
    rlog = log.bind(request_id=request_id, correlation_id=correlation_id)
    rlog.info("request.received", event_type=type(event).__name__)

    # Normalise body (when triggered by API Gateway proxy integration).
    body = event
    if isinstance(event, dict) and "body" in event:
        try:
            body = json.loads(event["body"]) if isinstance(event["body"], str) else (event["body"] or {})
        except ValueError:
            body = {}
            rlog.warning("request.body_parse_failed")

    try:
        agent = Agent(generator=default_generator())
        result = agent.handle(body)

        latency_ms = round((time.time() - t0) * 1000, 1)
        result["latency_ms"] = latency_ms
        if result.get("status") == "error":
            rlog.error("response.agent_error", latency_ms=latency_ms)
        else:
            rlog.info("response.success", status=result.get("status"), latency_ms=latency_ms)
        return _response(result, 200)

    except Exception as e:
        latency_ms = round((time.time() - t0) * 1000, 1)
        rlog.error(
            "response.error",
            error=str(e),
            traceback=traceback.format_exc(limit=2),
            latency_ms=latency_ms,
        )
        error_body = {
            "status": "error",
            "messages": [make_ok_message(f"{type(e).__name__}: {e}")],
            "latency_ms": latency_ms,
        }
        return _response(error_body, 200)
