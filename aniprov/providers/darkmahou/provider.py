"""
DarkMahou Provider - Anime torrent provider for darkmahou.org

This module implements the torrent provider that searches DarkMahou, picks
the matching anime page and lists the magnet links published on it.
"""

import logging
from typing import Dict, List, Optional, Any

from aniprov.core.exceptions import NetworkError
from aniprov.core.models import (
    AnimeProviderSettings,
    AnimeProviderType,
    AnimeSearchOptions,
    AnimeSmartSearchOptions,
    AnimeTorrent,
)
from aniprov.providers.base import AnimeTorrentProvider, ProviderKind, ProviderMetadata
from aniprov.providers.common import URLHelper

from .config import DarkMahouConfig, load_config
from .parser import DarkMahouParser
from .torrent_parser import TorrentNameParser
from .translator import PortugueseQueryTranslator


logger = logging.getLogger(__name__)


provider_metadata = ProviderMetadata(
    name="DarkMahou",
    version="1.0.0",
    author="AniProv Team",
    description="Anime torrents (magnet links) from darkmahou.org",
    website="https://darkmahou.org",
    kind=ProviderKind.ANIME_TORRENT,
    language="pt-BR",
)


class DarkMahouProvider(AnimeTorrentProvider):
    """
    DarkMahou torrent provider.
    
    Search queries are translated to Portuguese, the best matching anime page
    is chosen from the site search and every magnet link on that page becomes
    a torrent. Failures are logged and produce empty results.
    """
    
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.provider_config: DarkMahouConfig = load_config(config)
        super().__init__(self.provider_config.model_dump())
        
        self.parser = DarkMahouParser(base_url=self.provider_config.base_url)
        self.translator = PortugueseQueryTranslator()
        
        logger.debug("DarkMahou provider initialized")
    
    @property
    def metadata(self) -> ProviderMetadata:
        return provider_metadata
    
    @property
    def base_url(self) -> str:
        return self.provider_config.base_url
    
    @property
    def default_headers(self) -> Dict[str, str]:
        return {'User-Agent': self.user_agent}
    
    def get_settings(self) -> AnimeProviderSettings:
        return AnimeProviderSettings(
            can_smart_search=True,
            smart_search_filters=["episodeNumber", "resolution", "query"],
            supports_adult=False,
            type=AnimeProviderType.MAIN,
        )
    
    async def search(self, opts: AnimeSearchOptions) -> List[AnimeTorrent]:
        """
        Search DarkMahou for torrents.
        
        Args:
            opts: Search options; ``query`` is translated before searching
            
        Returns:
            Torrents of the best matching anime page, or an empty list
        """
        query = self.translator.convert(opts.query)
        if not query:
            logger.info("Empty search query, nothing to search")
            return []
        
        search_url = f"{self.base_url}/?s={URLHelper.encode_component(query)}"
        logger.debug(f"Searching DarkMahou: '{opts.query}' -> '{query}' ({search_url})")
        
        try:
            search_html = await self._get_text(search_url)
        except NetworkError as e:
            logger.warning(f"DarkMahou search failed: {e}")
            return []
        
        page_url = self.parser.extract_anime_page_url(search_html, query)
        if not page_url:
            logger.info(f"No anime page found for '{opts.query}'")
            return []
        
        try:
            page_html = await self._get_text(page_url)
        except NetworkError as e:
            logger.warning(f"Failed to fetch anime page {page_url}: {e}")
            return []
        
        torrents = self.parser.parse_torrents(page_html, page_url)
        logger.info(f"Found {len(torrents)} torrents for '{opts.query}'")
        return torrents
    
    async def smart_search(self, opts: AnimeSmartSearchOptions) -> List[AnimeTorrent]:
        """
        Search and filter torrents.
        
        The query falls back to the media's romaji then English title. Episode
        filtering keeps batches and torrents with unknown episode numbers.
        """
        query = opts.query or opts.media.romaji_title or opts.media.english_title or ""
        logger.debug(f"Smart search for '{query}' episode={opts.episode_number} "
                     f"resolution='{opts.resolution}' batch={opts.batch}")
        
        results = await self.search(AnimeSearchOptions(media=opts.media, query=query))
        if not results:
            return []
        
        return self.apply_filters(results, opts)
    
    @staticmethod
    def apply_filters(torrents: List[AnimeTorrent], opts: AnimeSmartSearchOptions) -> List[AnimeTorrent]:
        """Apply the episode, resolution and batch filters of a smart search."""
        filtered = torrents
        
        if opts.episode_number > 0:
            filtered = [
                t for t in filtered
                if t.episode_number == opts.episode_number or t.is_batch or t.episode_number == -1
            ]
        
        if opts.resolution:
            wanted = opts.resolution.lower()
            filtered = [t for t in filtered if not t.resolution or wanted in t.resolution.lower()]
        
        if opts.batch:
            filtered = [t for t in filtered if t.is_batch]
        
        return filtered
    
    async def get_torrent_info_hash(self, torrent: AnimeTorrent) -> str:
        if torrent.info_hash:
            return torrent.info_hash
        
        info_hash = TorrentNameParser.extract_info_hash(torrent.magnet_link)
        if not info_hash:
            logger.debug(f"No info hash found for torrent: {torrent.name}")
        return info_hash
    
    async def get_torrent_magnet_link(self, torrent: AnimeTorrent) -> str:
        if not torrent.magnet_link:
            logger.debug(f"No magnet link found for torrent: {torrent.name}")
        return torrent.magnet_link
    
    async def get_latest(self) -> List[AnimeTorrent]:
        # The site has no feed of recent releases
        return []
