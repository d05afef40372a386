"""
Tests for the logging setup used by python -m spark_review
"""

import logging

import pytest

from spark_review._log import LOG_FORMAT, setup_logging


@pytest.fixture
def root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    py4j_level = logging.getLogger("py4j").level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
    logging.getLogger("py4j").setLevel(py4j_level)


class TestSetupLogging:

    def test_single_handler(self, root_logger):
        setup_logging("debug")
        setup_logging("debug")
        assert len(root_logger.handlers) == 1
        assert root_logger.handlers[0].formatter._fmt == LOG_FORMAT
        assert root_logger.level == logging.DEBUG

    def test_silences_py4j(self, root_logger):
        setup_logging("info")
        assert logging.getLogger("py4j").level == logging.WARNING
