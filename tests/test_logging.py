"""Tests for the structured logging system (validation_kernel/logging_config.py)."""

import json
import logging
from decimal import Decimal
from io import StringIO
from uuid import uuid4

import pytest

from validation_config import load_matchers
from validation_kernel.logging_config import (
    LogContext,
    StructuredFormatter,
    configure_logging,
    get_logger,
    reset_logging,
)
from validation_kernel.matchers import DecimalNumberMatcher


@pytest.fixture(autouse=True)
def _clean_logging():
    """Reset logging state between tests."""
    reset_logging()
    LogContext.clear()
    yield
    LogContext.clear()
    reset_logging()


def _make_handler() -> tuple[logging.Handler, StringIO]:
    stream = StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    return handler, stream


def _parse_log(stream: StringIO) -> dict:
    """Parse the first JSON log line from a stream."""
    line = stream.getvalue().strip().split("\n")[0]
    return json.loads(line)


def _parse_all_logs(stream: StringIO) -> list[dict]:
    """Parse all JSON log lines from a stream."""
    lines = stream.getvalue().strip().split("\n")
    return [json.loads(line) for line in lines if line]


# ---------------------------------------------------------------------------
# StructuredFormatter tests
# ---------------------------------------------------------------------------


class TestStructuredFormatter:
    """Tests for JSON log output format."""

    def test_basic_json_output(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("hello")

        record = _parse_log(stream)
        assert record["level"] == "INFO"
        assert record["message"] == "hello"
        assert record["logger"] == "validation_kernel.test"
        assert "ts" in record

    def test_extra_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("checked", extra={"limit": 11, "field": "amount"})

        record = _parse_log(stream)
        assert record["limit"] == 11
        assert record["field"] == "amount"

    def test_context_fields_included(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        with LogContext.bind(config_path="sets/default.yaml", field_path="invoice.total"):
            logger.info("test_msg")

        record = _parse_log(stream)
        assert record["config_path"] == "sets/default.yaml"
        assert record["field_path"] == "invoice.total"

    def test_exception_fields(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        try:
            raise ValueError("boom")
        except ValueError:
            logger.error("failed", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_type"] == "ValueError"
        assert record["exc_message"] == "boom"
        assert "traceback" in record

    def test_kernel_exception_code_extracted(self):
        """Validation kernel exceptions carry .code attribute."""
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        from validation_kernel.exceptions import InvalidMatcherConfigError

        try:
            raise InvalidMatcherConfigError("max_total_digits", -1, "must not be negative")
        except InvalidMatcherConfigError:
            logger.error("config_error", exc_info=True)

        record = _parse_log(stream)
        assert record["exc_code"] == "INVALID_MATCHER_CONFIG"
        assert record["exc_type"] == "InvalidMatcherConfigError"
        assert record["exc_parameter"] == "max_total_digits"
        assert record["exc_value"] == -1

    def test_no_context_fields_when_empty(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("bare_message")

        record = _parse_log(stream)
        assert "config_path" not in record
        assert "field_path" not in record

    def test_uuid_and_decimal_serialized(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        uid = uuid4()
        logger.info("with_values", extra={"form": uid, "amount": Decimal("12.50")})

        record = _parse_log(stream)
        assert record["form"] == str(uid)
        assert record["amount"] == "12.50"

    def test_valid_json_every_line(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)
        logger = get_logger("test")
        logger.info("first")
        logger.warning("second", extra={"k": "v"})
        logger.debug("third")

        logs = _parse_all_logs(stream)
        # default level is INFO, so the debug line is dropped
        assert len(logs) == 2
        for record in logs:
            assert "ts" in record
            assert "level" in record
            assert "logger" in record
            assert "message" in record


# ---------------------------------------------------------------------------
# LogContext tests
# ---------------------------------------------------------------------------


class TestLogContext:
    """Tests for context propagation."""

    def test_bind_yields_fields(self):
        with LogContext.bind(config_path="x.yaml", field_path="y") as ctx:
            assert ctx == {"config_path": "x.yaml", "field_path": "y"}
            assert LogContext.get_all() == {"config_path": "x.yaml", "field_path": "y"}

    def test_clear(self):
        with LogContext.bind(field_path="x"):
            LogContext.clear()
            assert LogContext.get_all() == {}

    def test_nested_bind_restores_outer(self):
        with LogContext.bind(field_path="outer"):
            with LogContext.bind(field_path="inner"):
                assert LogContext.get_all()["field_path"] == "inner"
            assert LogContext.get_all()["field_path"] == "outer"

    def test_bind_removes_field_on_exit(self):
        assert "field_path" not in LogContext.get_all()
        with LogContext.bind(field_path="temp"):
            assert LogContext.get_all()["field_path"] == "temp"
        assert "field_path" not in LogContext.get_all()

    def test_bind_skips_none(self):
        with LogContext.bind(config_path="a.yaml"):
            with LogContext.bind(field_path=None):
                assert LogContext.get_all() == {"config_path": "a.yaml"}

    def test_bind_restores_after_exception(self):
        with pytest.raises(RuntimeError):
            with LogContext.bind(field_path="boom"):
                raise RuntimeError("fail")
        assert LogContext.get_all() == {}


# ---------------------------------------------------------------------------
# configure_logging tests
# ---------------------------------------------------------------------------


class TestConfigureLogging:
    """Tests for initialization."""

    def test_idempotent(self):
        h1, _ = _make_handler()
        configure_logging(handler=h1)
        h2, _ = _make_handler()
        configure_logging(handler=h2)  # second call is no-op
        root = logging.getLogger("validation_kernel")
        assert len(root.handlers) == 1

    def test_get_logger_returns_child(self):
        logger = get_logger("matchers.decimal_number")
        assert logger.name == "validation_kernel.matchers.decimal_number"

    def test_logger_hierarchy(self):
        """Child loggers inherit the validation_kernel root config."""
        handler, stream = _make_handler()
        configure_logging(handler=handler, level=logging.DEBUG)
        child = get_logger("deep.nested.module")
        child.debug("hierarchy_test")

        record = _parse_log(stream)
        assert record["message"] == "hierarchy_test"
        assert record["logger"] == "validation_kernel.deep.nested.module"


# ---------------------------------------------------------------------------
# Matcher log output
# ---------------------------------------------------------------------------


class TestMatcherLogging:
    """The decimal matcher reports failures through the structured logger."""

    def test_failure_summary_logged(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)

        with LogContext.bind(field_path="order.quantity"):
            DecimalNumberMatcher.from_params(5, 1).match("123.45")

        record = _parse_log(stream)
        assert record["message"] == "decimal_match_failed"
        assert record["error_codes"] == ["doubleNumber.e003"]
        assert record["field_path"] == "order.quantity"

    def test_debug_detail_logged(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler, level=logging.DEBUG)

        DecimalNumberMatcher().match("abc")

        logs = _parse_all_logs(stream)
        assert [r["message"] for r in logs] == [
            "decimal_match_not_a_number",
            "decimal_match_failed",
        ]
        assert logs[0]["reason"] == "invalid_syntax"

    def test_valid_value_logs_nothing_at_info(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)

        DecimalNumberMatcher().match("12.5")

        assert stream.getvalue() == ""

    def test_field_argument_bound_as_field_path(self):
        handler, stream = _make_handler()
        configure_logging(handler=handler)

        result = DecimalNumberMatcher.from_params(5, 2).match("1.234", field="invoice.total")

        record = _parse_log(stream)
        assert record["field_path"] == "invoice.total"
        assert result.errors[0].field == "invoice.total"
        assert LogContext.get_all() == {}


class TestConfigLogging:
    """Loading a configuration file binds its path on the load record."""

    def test_config_path_bound_on_load(self, write_config):
        path = write_config(
            {"version": 1, "matchers": [{"name": "a", "type": "decimal_number"}]}
        )
        handler, stream = _make_handler()
        configure_logging(handler=handler)

        load_matchers(path)

        record = _parse_log(stream)
        assert record["message"] == "matcher_config_loaded"
        assert record["logger"] == "validation_kernel.config"
        assert record["config_path"] == str(path)
        assert record["matcher_count"] == 1
        assert LogContext.get_all() == {}
