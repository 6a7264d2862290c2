"""
Provider Layer - Content provider implementations.

This module contains the provider contracts and the individual site
implementations that supply torrents, streams and manga chapters to the host.
"""

from aniprov.providers.base import (
    AnimeTorrentProvider,
    BaseProvider,
    MangaProvider,
    OnlineStreamingProvider,
    ProviderKind,
    ProviderMetadata,
)
from aniprov.providers.common import HTMLParser, URLHelper, TextCleaner

__all__ = [
    # Base Provider Architecture
    "BaseProvider",
    "AnimeTorrentProvider",
    "OnlineStreamingProvider",
    "MangaProvider",
    "ProviderKind",
    "ProviderMetadata",
    # Provider Development Utilities
    "HTMLParser",
    "URLHelper",
    "TextCleaner",
]
