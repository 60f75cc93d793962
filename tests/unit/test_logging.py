"""Unit tests for logging utilities."""

import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from strokewidth.utils import MeasurementLogger, MeasurementStats, configure_logging


def _own_handlers() -> list[logging.Handler]:
    return [h for h in logging.getLogger().handlers if getattr(h, "_strokewidth", False)]


class TestConfigureLogging:
    """Tests for configure_logging."""

    def test_console_only(self):
        """Test no file handler is installed without a log file."""
        configure_logging()
        handlers = _own_handlers()
        assert len(handlers) == 1
        assert handlers[0].level == logging.WARNING

    def test_quiet(self):
        """Test quiet mode only lets errors through to the console."""
        configure_logging(console_level="DEBUG", quiet=True)
        assert _own_handlers()[0].level == logging.ERROR

    def test_file_output(self, tmp_path: Path):
        """Test structured events reach the log file."""
        log_file = tmp_path / "strokewidth.log"
        logger = configure_logging(log_file=log_file)
        logger.info("Location measured", family="Ring Test", min_width=59.94)
        for handler in _own_handlers():
            handler.flush()

        content = log_file.read_text(encoding="utf-8")
        assert "Location measured" in content
        assert '"family": "Ring Test"' in content

    def test_reconfigure_replaces_handlers(self, tmp_path: Path):
        """Test configuring twice does not duplicate handlers."""
        configure_logging(log_file=tmp_path / "a.log")
        configure_logging(log_file=tmp_path / "b.log")
        assert len(_own_handlers()) == 2


class TestMeasurementLogger:
    """Tests for MeasurementLogger statistics."""

    def test_counts(self):
        """Test every event updates its counter."""
        measurement_logger = MeasurementLogger(MagicMock())
        measurement_logger.log_measurement("Ring Test", "default", 59.9, 99.9, 360, 12.0)
        measurement_logger.log_measurement("Ring Test", "wght@900", 110.0, 150.0, 360, 8.0)
        measurement_logger.log_no_data("Ring Test", "wght@100", 12)
        measurement_logger.log_font_skipped("a.ttf", "character 'o' not supported")
        measurement_logger.log_font_error("b.ttf", ValueError("broken"))

        stats = measurement_logger.stats
        assert stats.measured_count == 2
        assert stats.records_written == 4
        assert stats.no_data_count == 1
        assert stats.skipped_count == 1
        assert stats.error_count == 1
        assert stats.errors == [("b.ttf", "broken")]
        assert stats.avg_measure_time_ms == pytest.approx(10.0)


class TestMeasurementStats:
    """Tests for MeasurementStats."""

    def test_duration(self):
        """Test the duration needs both timestamps."""
        assert MeasurementStats().duration_seconds == 0.0
        assert MeasurementStats(start_time=10.0, end_time=12.5).duration_seconds == 2.5

    def test_no_average_without_measurements(self):
        """Test the average is undefined before anything was measured."""
        assert MeasurementStats().avg_measure_time_ms is None
