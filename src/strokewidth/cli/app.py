"""CLI application entry point for strokewidth.

This module provides the main CLI interface using Typer.
"""

import re
import time
from pathlib import Path
from typing import Annotated

import typer

from strokewidth import __version__
from strokewidth.cli.output import (
    console,
    create_progress,
    print_error,
    print_font_info,
    print_header,
    print_records,
    print_step,
    print_summary,
    print_warning,
    print_written,
)
from strokewidth.config import (
    LoggingConfig,
    MeasurementConfig,
    RayStrategy,
    StrokeWidthSettings,
)
from strokewidth.core import StrokeWidthMeter
from strokewidth.exceptions import (
    DegenerateShapeError,
    FontLoadError,
    GeometryError,
    GlyphNotFoundError,
    StrokeWidthError,
    UnsupportedSegmentError,
    UnsupportedShapeError,
)
from strokewidth.io import (
    FontReader,
    filename_fragment,
    location_descriptor,
    render_debug_html,
    render_debug_svg,
    svg_output_path,
    width_records,
)
from strokewidth.utils import MeasurementLogger, configure_logging

# Create the Typer app
app = typer.Typer(
    name="strokewidth",
    help="Measure the minimum and maximum stroke width of font glyphs.",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"[bold blue]Strokewidth[/bold blue] v{__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    _version: Annotated[  # noqa: ARG001
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """Measure the minimum and maximum stroke width of font glyphs."""


@app.command()
def measure(
    font: Annotated[
        Path,
        typer.Argument(
            help="Path to TTF/OTF font file",
            show_default=False,
        ),
    ],
    char: Annotated[
        str,
        typer.Option(
            "--char",
            "-c",
            help="Character to measure; 'o' is almost always the right choice",
        ),
    ] = "o",
    method: Annotated[
        RayStrategy,
        typer.Option(
            "--method",
            "-m",
            help="How to cast rays to discover strokes",
        ),
    ] = RayStrategy.CENTER_OF_MASS,
    output_svg: Annotated[
        Path | None,
        typer.Option(
            "--output-svg",
            "-o",
            help="Write a debug SVG per location (location appended to the file stem)",
        ),
    ] = None,
    show_rays: Annotated[
        bool,
        typer.Option(
            "--show-rays/--no-show-rays",
            help="Draw the rays in debug SVGs",
        ),
    ] = True,
    debug_html: Annotated[
        Path | None,
        typer.Option(
            "--debug-html",
            help="Write every location's debug SVG into one HTML page",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Verbose console output",
        ),
    ] = False,
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Measure the stroke width of one character of a font.

    Prints a min and a max row for every location of interest:
    one for static fonts, every 100 units of weight for variable fonts.

    Example:
        strokewidth measure Roboto[wdth,wght].ttf --output-svg /tmp/o.svg
    """
    if verbose and quiet:
        print_error("Cannot use --verbose and --quiet together")
        raise typer.Exit(code=1)

    if len(char) != 1:
        print_error(f"Expected a single character, got {char!r}")
        raise typer.Exit(code=1)

    settings = StrokeWidthSettings(
        measurement=MeasurementConfig(strategy=method, include_rays=show_rays, char=char),
        logging=LoggingConfig(
            log_file=log_file,
            log_level="DEBUG" if verbose else log_level,
        ),
    )
    measurement = settings.measurement
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    measurement_logger = MeasurementLogger(logger)
    meter = StrokeWidthMeter(settings, logger)
    render = output_svg is not None or debug_html is not None

    if not quiet:
        print_header(__version__)

    try:
        with FontReader(font, settings.font) as reader:
            reader.glyph_name_for(measurement.char)
            family = reader.family_name
            locations = reader.locations_of_interest()
            scale = reader.normalization_scale

            if not quiet:
                print_font_info(
                    font_path=str(font),
                    family=family,
                    font_type=reader.format,
                    upm=reader.units_per_em,
                    locations=len(locations),
                )
                print_step(f"Measuring {measurement.char!r} ({measurement.strategy.value})")
            measurement_logger.log_font_start(str(font), family, len(locations))

            svgs = []
            for location in locations:
                shape = reader.get_shape(measurement.char, location)
                start = time.perf_counter()
                candidates = meter.measure(shape)
                duration_ms = (time.perf_counter() - start) * 1000

                records = width_records(family, location, candidates, scale)
                print_records(records)
                descriptor = location_descriptor(location) or "default"
                if records:
                    measurement_logger.log_measurement(
                        family,
                        descriptor,
                        records[0].value,
                        records[1].value,
                        candidates.rib_count,
                        duration_ms,
                    )
                else:
                    measurement_logger.log_no_data(family, descriptor, candidates.rib_count)
                    if not quiet:
                        print_warning(f"No width measured at {descriptor}")
                if not quiet:
                    for warning in candidates.warnings:
                        print_warning(warning)

                if render:
                    svg = render_debug_svg(shape, candidates, show_rays, settings.geometry)
                    svgs.append(svg)
                    if output_svg is not None:
                        path = svg_output_path(output_svg, filename_fragment(location))
                        path.write_text(svg, encoding="utf-8")
                        if not quiet:
                            print_written(str(path))

            if debug_html is not None:
                debug_html.write_text(render_debug_html(svgs), encoding="utf-8")
                if not quiet:
                    print_written(str(debug_html))

    except FontLoadError as e:
        print_error(f"Could not load font: {e.reason}")
        raise typer.Exit(code=1)
    except GlyphNotFoundError as e:
        print_error(str(e))
        raise typer.Exit(code=1)
    except GeometryError as e:
        logger.error("Measurement failed", font=str(font), error=str(e))
        print_error(str(e))
        raise typer.Exit(code=1)
    except StrokeWidthError as e:
        print_error(str(e))
        raise typer.Exit(code=1)


@app.command()
def batch(
    fonts: Annotated[
        list[Path],
        typer.Argument(
            help="Font files to measure",
            show_default=False,
        ),
    ],
    char: Annotated[
        str,
        typer.Option(
            "--char",
            "-c",
            help="Character to measure",
        ),
    ] = "o",
    family_filter: Annotated[
        str | None,
        typer.Option(
            "--family-filter",
            help="Only measure fonts whose family name matches this regex",
        ),
    ] = None,
    log_file: Annotated[
        Path | None,
        typer.Option(
            "--log-file",
            help="Write detailed logs to file",
        ),
    ] = None,
    log_level: Annotated[
        str,
        typer.Option(
            "--log-level",
            help="Logging level (DEBUG|INFO|WARNING|ERROR)",
        ),
    ] = "WARNING",
    quiet: Annotated[
        bool,
        typer.Option(
            "--quiet",
            "-q",
            help="Minimal console output",
        ),
    ] = False,
) -> None:
    """Measure many fonts with the center of mass strategy.

    Fonts that do not map the character, or whose shape cannot be measured,
    are skipped and counted in the summary.

    Example:
        strokewidth batch fonts/*.ttf --family-filter '^Noto Sans'
    """
    if len(char) != 1:
        print_error(f"Expected a single character, got {char!r}")
        raise typer.Exit(code=1)

    try:
        pattern = re.compile(family_filter) if family_filter else None
    except re.error as e:
        print_error(f"Invalid family filter: {family_filter}", details=str(e))
        raise typer.Exit(code=1)

    settings = StrokeWidthSettings(
        measurement=MeasurementConfig(
            strategy=RayStrategy.CENTER_OF_MASS, include_rays=False, char=char
        ),
        logging=LoggingConfig(log_file=log_file, log_level=log_level),
    )
    measurement = settings.measurement
    logger = configure_logging(
        log_file=settings.logging.log_file,
        console_level=settings.logging.log_level,
        file_level=settings.logging.file_log_level,
        quiet=quiet,
    )
    measurement_logger = MeasurementLogger(logger)
    meter = StrokeWidthMeter(settings, logger)

    if not quiet:
        print_header(__version__)
        print_step(f"Measuring {len(fonts)} fonts")

    stats = measurement_logger.stats
    stats.start_time = time.time()

    def measure_font(font: Path) -> None:
        try:
            with FontReader(font, settings.font) as reader:
                family = reader.family_name
                if pattern is not None and not pattern.search(family):
                    measurement_logger.log_font_skipped(str(font), f"family {family!r} filtered")
                    return
                if not reader.has_char(measurement.char):
                    measurement_logger.log_font_skipped(
                        str(font), f"character {measurement.char!r} not supported"
                    )
                    return

                locations = reader.locations_of_interest()
                measurement_logger.log_font_start(str(font), family, len(locations))
                scale = reader.normalization_scale
                records = []
                for location in locations:
                    labelled = reader.record_location(location)
                    start = time.perf_counter()
                    candidates = meter.measure(reader.get_shape(measurement.char, location))
                    duration_ms = (time.perf_counter() - start) * 1000
                    found = width_records(family, labelled, candidates, scale)
                    descriptor = location_descriptor(labelled) or "default"
                    if found:
                        measurement_logger.log_measurement(
                            family,
                            descriptor,
                            found[0].value,
                            found[1].value,
                            candidates.rib_count,
                            duration_ms,
                        )
                    else:
                        measurement_logger.log_no_data(family, descriptor, candidates.rib_count)
                    records.extend(found)
                print_records(records)
        except (UnsupportedShapeError, DegenerateShapeError, UnsupportedSegmentError) as e:
            measurement_logger.log_font_skipped(str(font), str(e))
        except StrokeWidthError as e:
            measurement_logger.log_font_error(str(font), e)

    if quiet:
        for font in fonts:
            measure_font(font)
    else:
        with create_progress() as progress:
            task_id = progress.add_task(f"Measuring {len(fonts)} fonts", total=len(fonts))
            for font in fonts:
                measure_font(font)
                progress.advance(task_id)

    stats.end_time = time.time()
    if not quiet:
        print_summary(stats)


def cli() -> None:
    """Entry point for the CLI application."""
    app()


def main() -> None:
    """Entry point for the CLI application (alias for cli)."""
    cli()


if __name__ == "__main__":
    cli()
