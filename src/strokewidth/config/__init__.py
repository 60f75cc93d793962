"""Configuration management for strokewidth.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- ResolutionConfig: Sampling resolution of the probes
- GeometryConfig: Geometric tolerances
- MeasurementConfig: Strategy and measured character
- FontConfig: Outline extraction and normalization
- LoggingConfig: Logging settings
- StrokeWidthSettings: Main application settings
"""

from strokewidth.config.settings import (
    FontConfig,
    GeometryConfig,
    LoggingConfig,
    MeasurementConfig,
    RayStrategy,
    ResolutionConfig,
    StrokeWidthSettings,
    get_default_settings,
)

__all__ = [
    "FontConfig",
    "GeometryConfig",
    "LoggingConfig",
    "MeasurementConfig",
    "RayStrategy",
    "ResolutionConfig",
    "StrokeWidthSettings",
    "get_default_settings",
]
