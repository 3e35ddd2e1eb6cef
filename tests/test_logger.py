"""
Tests for the logging module.
"""

import importlib
import logging
import os
from unittest.mock import Mock, patch

import pytest

import geocheck.engine
from geocheck.errors import ErrorCode, ValidationResult, issue
from geocheck.logger import (
    GeoCheckFormatter,
    ValidationCallLogger,
    get_log_level,
    get_logger,
)


class TestGetLogLevel:
    """Tests for get_log_level function."""

    def test_default_log_level(self):
        """Default log level should be INFO."""
        with patch.dict(os.environ, {}, clear=True):
            assert get_log_level() == logging.INFO

    def test_debug_log_level(self):
        with patch.dict(os.environ, {"GEOCHECK_LOG_LEVEL": "DEBUG"}):
            assert get_log_level() == logging.DEBUG

    def test_case_insensitive(self):
        with patch.dict(os.environ, {"GEOCHECK_LOG_LEVEL": "warning"}):
            assert get_log_level() == logging.WARNING

    def test_invalid_log_level_defaults_to_info(self):
        with patch.dict(os.environ, {"GEOCHECK_LOG_LEVEL": "LOUD"}):
            assert get_log_level() == logging.INFO

    def test_unrelated_invalid_setting(self):
        """A bad non-logging setting does not break logger creation."""
        env = {"GEOCHECK_LOG_LEVEL": "ERROR", "GEOCHECK_MAX_ERRORS": "0"}
        with patch.dict(os.environ, env):
            assert get_log_level() == logging.ERROR

    def test_engine_imports_with_unrelated_invalid_setting(self):
        get_logger.cache_clear()
        with patch.dict(os.environ, {"GEOCHECK_MAX_ERRORS": "0"}):
            module = importlib.reload(geocheck.engine)
        assert isinstance(module.logger, logging.Logger)


class TestGetLogger:
    """Tests for get_logger function."""

    def test_returns_logger(self):
        logger = get_logger("geocheck.test_returns_logger")
        assert isinstance(logger, logging.Logger)
        assert logger.propagate is False

    def test_cached(self):
        assert get_logger("geocheck.test_cached") is get_logger("geocheck.test_cached")

    def test_single_handler(self):
        logger = get_logger("geocheck.test_single_handler")
        get_logger("geocheck.test_single_handler")
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, GeoCheckFormatter)


class TestGeoCheckFormatter:
    """Tests for GeoCheckFormatter."""

    def make_record(self, **extra):
        record = logging.LogRecord(
            name="geocheck",
            level=logging.INFO,
            pathname=__file__,
            lineno=1,
            msg="Validated",
            args=(),
            exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_basic_format(self):
        output = GeoCheckFormatter().format(self.make_record())
        assert "geocheck" in output
        assert "INFO" in output
        assert output.endswith("Validated")

    def test_extra_fields(self):
        output = GeoCheckFormatter().format(self.make_record(features=10, workers=2))
        assert output.endswith("| features=10 workers=2")


class TestValidationCallLogger:
    """Tests for ValidationCallLogger."""

    def test_logs_call_and_completion(self):
        logger = Mock(spec=logging.Logger)
        with ValidationCallLogger(logger, "validate") as log:
            log.set_result(ValidationResult())

        assert logger.debug.call_count == 2
        completed = logger.debug.call_args_list[1]
        assert completed.kwargs["extra"]["result"] == "valid"
        assert "elapsed_ms" in completed.kwargs["extra"]

    def test_summarizes_invalid_result(self):
        logger = Mock(spec=logging.Logger)
        result = ValidationResult()
        result.add_error(issue(ErrorCode.TYPE_MISMATCH, (), "object", []))
        result.truncated = True
        with ValidationCallLogger(logger, "validate_feature") as log:
            log.set_result(result)

        extra = logger.debug.call_args_list[1].kwargs["extra"]
        assert extra["result"] == "invalid errors=1 truncated"

    def test_logs_and_reraises_errors(self):
        logger = Mock(spec=logging.Logger)
        with pytest.raises(RuntimeError):
            with ValidationCallLogger(logger, "validate"):
                raise RuntimeError("boom")

        logger.error.assert_called_once()
        assert "boom" in logger.error.call_args.args[0]
