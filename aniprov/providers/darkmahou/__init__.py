"""
DarkMahou Provider - Anime torrent provider for darkmahou.org

Searches the site with Portuguese-translated queries and lists the magnet
links of the matching anime page.
"""

from .provider import DarkMahouProvider, provider_metadata
from .config import DarkMahouConfig, get_default_config, merge_with_defaults
from .parser import DarkMahouParser
from .torrent_parser import TorrentNameParser
from .translator import PortugueseQueryTranslator

__all__ = [
    "DarkMahouProvider",
    "provider_metadata",
    "DarkMahouConfig",
    "get_default_config",
    "merge_with_defaults",
    "DarkMahouParser",
    "TorrentNameParser",
    "PortugueseQueryTranslator",
]
