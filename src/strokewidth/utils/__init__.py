"""Utility functions for strokewidth.

This module provides utility functions including:

- Logging setup and configuration
- Measurement statistics tracking
"""

from strokewidth.utils.logging import (
    MeasurementLogger,
    MeasurementStats,
    configure_logging,
)

__all__ = [
    "MeasurementLogger",
    "MeasurementStats",
    "configure_logging",
]
