"""
MangaLivre Provider - Manga provider for mangalivre.tv
"""

from .provider import MangaLivreProvider, provider_metadata
from .config import MangaLivreConfig, get_default_config, merge_with_defaults
from .parser import MangaLivreParser

__all__ = [
    "MangaLivreProvider",
    "provider_metadata",
    "MangaLivreConfig",
    "get_default_config",
    "merge_with_defaults",
    "MangaLivreParser",
]
