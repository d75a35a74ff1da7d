"""Command-line interface for gridpolygons.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Key features:
- Verbose/quiet output modes
- Polygon listing without writing output
- Detailed error reporting
"""

from gridpolygons.cli.app import app, cli, main

__all__ = ["app", "cli", "main"]
