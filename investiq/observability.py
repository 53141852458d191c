"""
Observability bootstrap.

PURPOSE:
- Optionally enables AWS X-Ray distributed tracing when USE_XRAY=1.
- Adds automatic instrumentation for common libraries (boto3 for DynamoDB and Bedrock).
- Degrades to a no-op if X-Ray is not enabled or the SDK is unavailable.

CONTEXT:
- Initialised by the Lambda entrypoint; the pipeline wraps its core step in
  xray_segment. Logging is configured separately in logging_setup.py.
"""
from __future__ import annotations
import os


def init_observability():
    """
    Optionally initialise AWS X-Ray instrumentation.

    returns:
    - xray_recorder object if successfully configured.
    - None if X-Ray is disabled or not available.

    notes:
    - In AWS Lambda, the main segment is automatically managed by AWS.
    - Tracing must never block or crash the application.
    """
    use_xray = os.getenv("USE_XRAY", "0") == "1"
    if not use_xray:
        return None
    try:
        from aws_xray_sdk.core import xray_recorder, patch_all
        xray_recorder.configure(service=os.getenv("XRAY_SERVICE_NAME", "InvestIQ"))
        patch_all()
        return xray_recorder
    except Exception:
        return None


class xray_segment:
    """
    Lightweight context manager for manual subsegments.

    usage example:
    >>> with xray_segment("assess_and_recommend"):
    >>>     result = run_analysis(profile)

    behaviour:
    - Begins an X-Ray subsegment on entry when USE_XRAY=1, otherwise does nothing.
    - Closes it on exit, even if an error occurs; exceptions from the body propagate.
    """

    def __init__(self, name: str):
        self.name = name
        self.sub = None

    def __enter__(self):
        if os.getenv("USE_XRAY", "0") != "1":
            return self
        try:
            from aws_xray_sdk.core import xray_recorder
            self.sub = xray_recorder.begin_subsegment(self.name)
        except Exception:
            self.sub = None
        return self

    def __exit__(self, exc_type, exc, tb):
        if self.sub is None:
            return False
        try:
            from aws_xray_sdk.core import xray_recorder
            xray_recorder.end_subsegment()
        except Exception:
            # Tracing stays optional and non-blocking.
            pass
        return False
