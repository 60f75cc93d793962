"""Command-line interface for strokewidth.

This module provides the CLI using Typer with rich output for
user-friendly feedback and progress reporting.

Key features:
- Measurement rows on stdout, everything else on stderr
- Debug SVG and HTML output
- Batch measurement with a family filter
- Verbose/quiet output modes
"""

from strokewidth.cli.app import cli, main

__all__ = ["cli", "main"]
