"""
CLI Commands - Individual command implementations.

This module contains the command groups for provider management and for
each provider kind: torrents, online streaming and manga.
"""

from aniprov.cli.commands import manga, sources, stream, torrents

__all__ = ["sources", "torrents", "stream", "manga"]
