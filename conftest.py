import datetime
import logging

import pytest
from django.utils import timezone, translation


@pytest.fixture(autouse=True)
def silence_request_loggers():
    """Reduce noise from expected 4xx/5xx in passing tests.

    Many tests intentionally exercise error paths. Django logs these via
    'django.request' and the envelope handler logs them via 'api'. Lower
    both to CRITICAL during tests to avoid clutter.
    """
    loggers = [logging.getLogger(name) for name in ("django.request", "api")]
    old = [logger.level for logger in loggers]
    for logger in loggers:
        logger.setLevel(logging.CRITICAL)
    try:
        yield
    finally:
        for logger, level in zip(loggers, old):
            logger.setLevel(level)


@pytest.fixture
def future_date():
    return timezone.localdate() + datetime.timedelta(days=30)


@pytest.fixture(autouse=True)
def reset_active_language():
    """LocaleMiddleware activates the request language on the test thread."""
    yield
    translation.deactivate()
