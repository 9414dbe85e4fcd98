"""
Logging tests.

Tests for the structured logger used by the service layer.
"""

import json
import logging

from trigonquest_api.core import get_logger
from trigonquest_api.core.logging import LoggerAdapter, StructuredFormatter


def test_get_logger_accepts_extra_data(caplog):
    """Test extra_data reaches the log record"""
    logger = get_logger("trigonquest_api.tests.logging")
    assert isinstance(logger, LoggerAdapter)

    with caplog.at_level(logging.INFO, logger="trigonquest_api.tests.logging"):
        logger.info("Answer validated", extra_data={"question_id": "q1", "is_correct": True})

    record = caplog.records[-1]
    assert record.getMessage() == "Answer validated"
    assert record.extra_data == {"question_id": "q1", "is_correct": True}


def test_structured_formatter_includes_context(caplog):
    """Test JSON output carries the message and extra_data"""
    logger = get_logger("trigonquest_api.tests.logging")

    with caplog.at_level(logging.INFO, logger="trigonquest_api.tests.logging"):
        logger.info("Questions listed", extra_data={"count": 3})

    payload = json.loads(StructuredFormatter().format(caplog.records[-1]))
    assert payload["message"] == "Questions listed"
    assert payload["level"] == "INFO"
    assert payload["count"] == 3
