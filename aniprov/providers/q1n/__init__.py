"""
Q1N Provider - Online streaming provider for q1n.net

Provides search (subbed and dubbed), episode listing and player resolution
for the chplay and ruplay servers.
"""

from .provider import Q1NProvider, provider_metadata
from .config import Q1NConfig, get_default_config, merge_with_defaults
from .extractor import Q1NPlayerExtractor
from .parser import Q1NParser

__all__ = [
    "Q1NProvider",
    "provider_metadata",
    "Q1NConfig",
    "get_default_config",
    "merge_with_defaults",
    "Q1NPlayerExtractor",
    "Q1NParser",
]
