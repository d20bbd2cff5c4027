"""Tests for correlation-aware logging."""

import logging

import pytest

from lightdom.shared import CorrelationLogger, get_logger


class TestCorrelationLogger:
    """Test CorrelationLogger behavior."""

    def test_get_logger_returns_correlation_logger(self) -> None:
        """Test factory function."""
        logger = get_logger("lightdom.tests.sample", "cid-1", "sample_component")

        assert isinstance(logger, CorrelationLogger)
        assert logger.correlation_id == "cid-1"
        assert logger.component == "sample_component"
        assert logger.logger.name == "lightdom.tests.sample"

    def test_component_defaults_to_last_name_segment(self) -> None:
        """Test default component naming."""
        assert get_logger("lightdom.tree.builder").component == "builder"

    def test_records_carry_correlation_info(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test every record includes component, correlation ID and extras."""
        caplog.set_level(logging.DEBUG, logger="lightdom.tests.sample")
        logger = get_logger("lightdom.tests.sample", "cid-2", "sample")

        logger.debug("debug message", extra={"detail": 1})
        logger.info("info message")
        logger.warning("warning message")

        assert [r.getMessage() for r in caplog.records] == [
            "debug message", "info message", "warning message"
        ]
        assert all(r.correlation_id == "cid-2" for r in caplog.records)
        assert all(r.component == "sample" for r in caplog.records)
        assert caplog.records[0].detail == 1

    def test_error_includes_exception_info(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test error records carry the active exception."""
        logger = get_logger("lightdom.tests.sample")

        try:
            raise ValueError("bad")
        except ValueError:
            logger.error("failed")

        assert caplog.records[-1].exc_info is not None
        assert caplog.records[-1].exc_info[0] is ValueError

    def test_is_enabled_for(self) -> None:
        """Test level checks delegate to the wrapped logger."""
        logger = get_logger("lightdom.tests.levels")
        logger.logger.setLevel(logging.WARNING)

        assert logger.is_enabled_for(logging.ERROR)
        assert not logger.is_enabled_for(logging.DEBUG)
