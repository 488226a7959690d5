"""Tests for loguru setup and stdlib interception."""

import logging

from loguru import logger

from gst_invoice.core.logging_config import setup_logging
from gst_invoice.domain.services.amount_words import amount_in_words


def test_stdlib_records_reach_loguru():
    setup_logging("DEBUG")
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    try:
        amount_in_words(-1)
    finally:
        logger.remove(sink_id)
    assert any("Cannot convert -1 to words" in str(m) for m in messages)


def test_level_applied_to_root_logger():
    setup_logging("warning")
    assert logging.getLogger().level == logging.WARNING
