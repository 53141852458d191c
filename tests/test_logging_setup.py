import logging

from structlog.testing import capture_logs

from investiq.logging_setup import AWS_LOGGERS, configure_logging


def test_logger_is_bound_with_service_and_env(monkeypatch):
    monkeypatch.setenv("ENV", "test")
    log = configure_logging()
    with capture_logs() as logs:
        log.info("profile.cache_miss", user_id="u-42")
    assert logs == [{
        "event": "profile.cache_miss",
        "user_id": "u-42",
        "service": "InvestIQ",
        "env": "test",
        "log_level": "info",
    }]


def test_aws_loggers_are_quiet_unless_debugging():
    try:
        configure_logging("INFO")
        assert all(logging.getLogger(n).level == logging.WARNING for n in AWS_LOGGERS)
        configure_logging("DEBUG")
        assert all(logging.getLogger(n).level == logging.DEBUG for n in AWS_LOGGERS)
    finally:
        configure_logging("INFO")


def test_unknown_level_falls_back_to_info(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "chatty")
    configure_logging()
    assert logging.getLogger().level == logging.INFO
