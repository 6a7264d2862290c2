"""
CLI Layer - Typer command line interface.

This module contains the Typer application and the command groups for
sources, torrents, streaming and manga providers.
"""

from aniprov.cli.main import app, cli_main

__all__ = ["app", "cli_main"]
