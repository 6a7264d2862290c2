"""
AnimesROLL Provider - Online streaming provider for anroll.net

Series episodes are served from the site's HLS CDN and movies as MP4 files.
"""

from .provider import AnimesRollProvider, provider_metadata
from .config import AnimesRollConfig, get_default_config, merge_with_defaults
from .api import AnimesRollAPI
from .parser import AnimesRollParser

__all__ = [
    "AnimesRollProvider",
    "provider_metadata",
    "AnimesRollConfig",
    "get_default_config",
    "merge_with_defaults",
    "AnimesRollAPI",
    "AnimesRollParser",
]
