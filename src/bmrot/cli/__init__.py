"""Command-line interface for bmrot.

This module provides the CLI using Typer, with rich output on stderr for
status and error reporting and the descriptor dump on stdout.
"""

from bmrot.cli.app import cli, main

__all__ = ["cli", "main"]
