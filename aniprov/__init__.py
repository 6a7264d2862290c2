"""
AniProv - Content providers for an anime and manga host application.

Scrapers for Portuguese-language sites exposing anime torrents, online
streaming episodes and manga chapters through a common provider interface,
with a Typer and Rich command line for trying them out.
"""

__version__ = "0.1.0"
__author__ = "AniProv Team"

# Package metadata
__title__ = "aniprov"
__description__ = "Anime torrent, streaming and manga providers"
__license__ = "MIT"

# Version info tuple for programmatic access
VERSION_INFO = tuple(map(int, __version__.split(".")))

# Export main components for easy importing
from aniprov.core.models import AnimeTorrent, ChapterDetails, EpisodeDetails, SearchResult

__all__ = [
    "__version__",
    "__author__",
    "VERSION_INFO",
    "AnimeTorrent",
    "SearchResult",
    "EpisodeDetails",
    "ChapterDetails",
]
