"""Command-line interface for ttfmesh.

This module provides the CLI using Typer with rich output for
user-friendly feedback.

Commands:
- check: per-character mesh generation report
- dump: 2D vertex and face listing per character
- export: whole-font .obj export
- info: font metadata
"""

from ttfmesh.cli.app import cli, main

__all__ = ["cli", "main"]
