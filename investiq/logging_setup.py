"""
JSON logging for the InvestIQ Lambda, the local CLI and the test suite.

PURPOSE:
- One structlog configuration shared by every module that calls
  structlog.get_logger(__name__) (profile store, narrative, agent, handler).
- Event names are dotted and stable ("request.received", "profile.cache_miss",
  "narrative.failed", "response.success") so CloudWatch Insights queries can
  filter on them directly.

CONTEXT:
- The handler calls configure_logging() at import and binds request_id and
  correlation_id per invocation. Service and environment are bound here.
- boto3/botocore chatter is held at WARNING unless LOG_LEVEL=DEBUG, so profile
  reads and Bedrock calls do not flood the request log.
"""

from __future__ import annotations
import logging
import os
import sys
import structlog

SERVICE_NAME = "InvestIQ"

# Third-party loggers that are only useful when debugging AWS calls.
AWS_LOGGERS = ("boto3", "botocore", "urllib3")


def configure_logging(level: str | None = None):
    """
    Configure structlog and the stdlib root logger.

    parameters:
    - level: str (optional) – overrides LOG_LEVEL (default INFO).

    returns:
    - structlog.BoundLogger – bound with service="InvestIQ" and env=$ENV (default "dev").

    example log entry:
    {
      "event": "profile.cache_miss",
      "user_id": "u-42",
      "level": "info",
      "timestamp": "2025-10-21T13:00:00Z",
      "service": "InvestIQ",
      "env": "dev"
    }
    """
    name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    numeric = getattr(logging, name, logging.INFO)

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=numeric)
    logging.getLogger().setLevel(numeric)
    for noisy in AWS_LOGGERS:
        logging.getLogger(noisy).setLevel(numeric if numeric <= logging.DEBUG else logging.WARNING)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    return structlog.get_logger().bind(service=SERVICE_NAME, env=os.getenv("ENV", "dev"))
