"""Logging utilities for Strokewidth."""

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path

import structlog


@dataclass
class MeasurementStats:
    """Statistics from a measurement run."""

    measured_count: int = 0
    skipped_count: int = 0
    error_count: int = 0
    no_data_count: int = 0
    records_written: int = 0
    errors: list[tuple[str, str]] = field(default_factory=list)
    measure_times_ms: list[float] = field(default_factory=list)
    start_time: float | None = None
    end_time: float | None = None

    @property
    def duration_seconds(self) -> float:
        """Calculate run duration."""
        if self.start_time and self.end_time:
            return self.end_time - self.start_time
        return 0.0

    @property
    def avg_measure_time_ms(self) -> float | None:
        if not self.measure_times_ms:
            return None
        return sum(self.measure_times_ms) / len(self.measure_times_ms)


def configure_logging(
    log_file: Path | None = None,
    console_level: str = "WARNING",
    file_level: str = "DEBUG",
    quiet: bool = False,
) -> structlog.stdlib.BoundLogger:
    """Configure dual-output structured logging.

    Console records go to stderr so that stdout carries only the
    measurement rows.

    Args:
        log_file: Path to log file (no file logging if None)
        console_level: Logging level for console output
        file_level: Logging level for file output
        quiet: If True, suppress console output except errors

    Returns:
        Configured structlog logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_strokewidth", False):
            root_logger.removeHandler(handler)
            handler.close()

    if log_file is not None:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(getattr(logging, file_level.upper()))
        file_handler.setFormatter(
            logging.Formatter("%(asctime)s | %(levelname)-8s | %(name)s | %(message)s")
        )
        file_handler._strokewidth = True  # type: ignore[attr-defined]
        root_logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.ERROR if quiet else getattr(logging, console_level.upper()))
    console_handler.setFormatter(logging.Formatter("%(message)s"))
    console_handler._strokewidth = True  # type: ignore[attr-defined]
    root_logger.addHandler(console_handler)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_logger_name,
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    logger = structlog.get_logger("strokewidth")
    logger.debug(
        "Logging initialized",
        log_file=str(log_file) if log_file else None,
        level=file_level,
    )

    return logger


class MeasurementLogger:
    """Logger for tracking measurement progress and statistics."""

    def __init__(self, logger: structlog.stdlib.BoundLogger) -> None:
        self._logger = logger
        self._stats = MeasurementStats()

    def log_font_start(self, font: str, family: str, locations: int) -> None:
        """Log start of font measurement."""
        self._logger.info("Measuring font", font=font, family=family, locations=locations)

    def log_measurement(
        self,
        family: str,
        location: str,
        min_width: float,
        max_width: float,
        ribs: int,
        duration_ms: float,
    ) -> None:
        """Log a successful measurement at one location."""
        self._logger.info(
            "Location measured",
            family=family,
            location=location,
            min_width=round(min_width, 2),
            max_width=round(max_width, 2),
            ribs=ribs,
            duration_ms=round(duration_ms, 2),
        )
        self._stats.measured_count += 1
        self._stats.records_written += 2
        self._stats.measure_times_ms.append(duration_ms)

    def log_no_data(self, family: str, location: str, ribs: int) -> None:
        """Log a measurement in which no rib could be fitted."""
        self._logger.warning("No width measured", family=family, location=location, ribs=ribs)
        self._stats.no_data_count += 1

    def log_font_skipped(self, font: str, reason: str) -> None:
        """Log skipped font."""
        self._logger.info("Font skipped", font=font, reason=reason)
        self._stats.skipped_count += 1

    def log_font_error(
        self,
        font: str,
        error: Exception,
        traceback: str | None = None,
    ) -> None:
        """Log font measurement error."""
        self._logger.error(
            "Font measurement failed",
            font=font,
            error=str(error),
            error_type=type(error).__name__,
            traceback=traceback,
        )
        self._stats.error_count += 1
        self._stats.errors.append((font, str(error)))

    @property
    def stats(self) -> MeasurementStats:
        """Get current measurement statistics."""
        return self._stats
