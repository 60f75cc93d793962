"""Configuration settings for Strokewidth."""

from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class RayStrategy(str, Enum):
    """How rays are cast to discover strokes."""

    CENTER_OF_MASS = "center-of-mass"
    ALL_SEGMENTS = "all-segments"


class ResolutionConfig(BaseModel):
    """Sampling resolution of the brute-force probes.

    Every discrete scan in the engine reads its granularity from here so
    precision and run time can be traded independently.
    """

    grid_divisions: int = Field(
        default=100,
        ge=4,
        le=1000,
        description="Grid cells per bounding box side when estimating the center of mass",
    )
    angle_steps: int = Field(
        default=360,
        ge=4,
        le=3600,
        description="Number of rays spread around the center of mass",
    )
    segment_samples: int = Field(
        default=10,
        ge=1,
        le=100,
        description="Probe positions per outline segment for the all-segments strategy",
    )
    rotation_samples: int = Field(
        default=90,
        ge=4,
        le=720,
        description="Points tested around each candidate circle",
    )
    fit_initial_step: float = Field(
        default=0.001,
        gt=0.0,
        le=0.1,
        description="First step along the rib when shrinking a candidate circle",
    )
    fit_max_t: float = Field(
        default=0.1,
        gt=0.0,
        lt=0.5,
        description="Largest rib parameter tried when shrinking a candidate circle",
    )
    min_radius: float = Field(
        default=1.0,
        ge=0.0,
        description="Circles at or below this radius are discarded as noise (font units)",
    )


class GeometryConfig(BaseModel):
    """Tolerances and proportions used by the geometric primitives."""

    bbox_margin: float = Field(
        default=0.03,
        ge=0.0,
        le=0.5,
        description="Probe box margin as a fraction of the larger shape dimension",
    )
    ray_extent: float = Field(
        default=100.0,
        ge=2.0,
        description="Ray half-length as a multiple of the larger shape dimension",
    )
    graze_epsilon: float = Field(
        default=1e-5,
        gt=0.0,
        lt=0.01,
        description="Ray parameter offset used to look at both sides of an intersection",
    )
    duplicate_epsilon: float = Field(
        default=1e-6,
        ge=0.0,
        lt=0.01,
        description="Ray parameters closer than this are treated as one intersection",
    )
    intersection_epsilon: float = Field(
        default=1e-9,
        ge=0.0,
        lt=0.01,
        description="Slack on the segment parameter when accepting an intersection",
    )
    inverted_fill_ratio: float = Field(
        default=0.75,
        gt=0.0,
        le=1.0,
        description="Filled sample ratio above which an inverted fill is suspected",
    )
    min_filled_samples: int = Field(
        default=3,
        ge=1,
        description="Fewest filled grid samples accepted for a center of mass",
    )


class MeasurementConfig(BaseModel):
    """Configuration for a measurement run."""

    strategy: RayStrategy = Field(
        default=RayStrategy.CENTER_OF_MASS,
        description="Ray casting strategy",
    )
    include_rays: bool = Field(
        default=True,
        description="Keep diagnostic rays in the result",
    )
    char: str = Field(
        default="o",
        min_length=1,
        max_length=1,
        description="Character whose outline is measured",
    )


class FontConfig(BaseModel):
    """Configuration for turning font glyphs into shapes."""

    reference_upm: int = Field(
        default=1000,
        description="Units per em that reported widths are normalized to",
    )
    convert_cubics: bool = Field(
        default=True,
        description="Convert cubic outlines to quadratic ones before measuring",
    )
    cubic_max_error: float = Field(
        default=1.0,
        gt=0.0,
        le=10.0,
        description="Maximum cubic to quadratic approximation error (font units)",
    )
    weight_step: int = Field(
        default=100,
        ge=1,
        description="Distance between measured weight instances of a variable font",
    )

    def normalization_scale(self, upm: int) -> float:
        """Get the multiplier converting font units to reference units.

        Args:
            upm: The actual UPM of the font

        Returns:
            Scale factor
        """
        return self.reference_upm / upm


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class StrokeWidthSettings(BaseModel):
    """Main application settings."""

    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
    geometry: GeometryConfig = Field(default_factory=GeometryConfig)
    measurement: MeasurementConfig = Field(default_factory=MeasurementConfig)
    font: FontConfig = Field(default_factory=FontConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StrokeWidthSettings:
    """Get default application settings."""
    return StrokeWidthSettings()
