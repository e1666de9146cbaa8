"""
Test suite for observability helpers.

System role: Verification of correlation IDs and safe log values
"""

import logging

import pytest

from qaboard.observability import (
    clear_correlation_id,
    configure_logging,
    get_correlation_id,
    set_correlation_id,
)
from qaboard.observability.log_utils import (
    log_exception_with_context,
    log_with_context,
    safe_log_value,
)
from qaboard.observability.logger import CorrelationIdFilter


class TestCorrelation:

    def test_set_generates_when_missing(self) -> None:
        generated = set_correlation_id()

        assert get_correlation_id() == generated
        clear_correlation_id()
        assert get_correlation_id() == ""

    def test_set_keeps_given_id(self) -> None:
        assert set_correlation_id("req-1") == "req-1"
        clear_correlation_id()

    def test_filter_stamps_records(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

        set_correlation_id("req-2")
        CorrelationIdFilter().filter(record)
        clear_correlation_id()

        assert record.correlation_id == "req-2"

    def test_filter_placeholder_outside_requests(self) -> None:
        record = logging.LogRecord("t", logging.INFO, __file__, 1, "msg", None, None)

        CorrelationIdFilter().filter(record)

        assert record.correlation_id == "-"


class TestSafeLogValue:

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (None, "None"),
            ("short", "short"),
            ([1, 2, 3], "list(3 items)"),
            ({"a": 1}, "dict(1 keys)"),
            (42, "42"),
        ],
    )
    def test_conversions(self, value, expected) -> None:
        assert safe_log_value(value) == expected

    def test_truncation(self) -> None:
        assert safe_log_value("x" * 30, max_length=10) == "x" * 10 + "... (truncated, 30 total)"


class TestContextLogging:

    def test_log_with_context_stringifies_extra(self, caplog) -> None:
        logger = logging.getLogger("qaboard.test")

        with caplog.at_level(logging.INFO, logger="qaboard.test"):
            log_with_context(logger, logging.INFO, "Question posted", student_name="Bob", count=3)

        record = caplog.records[-1]
        assert record.getMessage() == "Question posted"
        assert (record.student_name, record.count) == ("Bob", "3")

    def test_log_exception_with_context(self, caplog) -> None:
        logger = logging.getLogger("qaboard.test")

        with caplog.at_level(logging.ERROR, logger="qaboard.test"):
            log_exception_with_context(logger, "Failed", ValueError("bad"), session_code="VV-7K2Q9A")

        record = caplog.records[-1]
        assert record.error_type == "ValueError"
        assert record.error_msg == "bad"
        assert record.exc_info is not None


def test_configure_logging_installs_single_handler() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    try:
        configure_logging("debug")
        configure_logging("warning")

        assert len(root.handlers) == 1
        assert root.level == logging.WARNING
    finally:
        root.handlers[:] = saved_handlers
        root.setLevel(saved_level)
