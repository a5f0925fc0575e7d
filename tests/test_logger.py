# tests/test_logger.py
import logging

from gh_api_service.utils import init_logging


def test_init_logging_is_idempotent():
    first = init_logging()
    handlers = list(first.handlers)
    level = first.level

    second = init_logging(logging.DEBUG)

    assert second is first is logging.getLogger()
    assert second.handlers == handlers
    assert second.level == level


def test_noisy_loggers_are_quiet():
    init_logging()

    assert logging.getLogger("httpx").level == logging.WARNING
    assert logging.getLogger("httpcore").level == logging.WARNING
