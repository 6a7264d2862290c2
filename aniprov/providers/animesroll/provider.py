"""
AnimesROLL Provider - Online streaming provider for anroll.net

This module implements the streaming provider for AnimesROLL: API search,
episode listing for series and movies, and direct HLS/MP4 sources.
"""

import logging
from typing import Dict, List, Optional, Any

from aniprov.core.exceptions import ExtractionError, NetworkError
from aniprov.core.models import (
    EpisodeDetails,
    EpisodeServer,
    SearchOptions,
    SearchResult,
    StreamingSettings,
    VideoSource,
    VideoSourceType,
)
from aniprov.providers.base import OnlineStreamingProvider, ProviderKind, ProviderMetadata

from .api import AnimesRollAPI
from .config import DEFAULT_QUALITY, DEFAULT_SERVER, AnimesRollConfig, load_config
from .parser import AnimesRollParser


logger = logging.getLogger(__name__)


provider_metadata = ProviderMetadata(
    name="AnimesROLL",
    version="1.0.0",
    author="AniProv Team",
    description="Subtitled anime series and movies from anroll.net",
    website="https://www.anroll.net",
    kind=ProviderKind.ONLINE_STREAMING,
    language="pt-BR",
)


class AnimesRollProvider(OnlineStreamingProvider):
    """
    AnimesROLL streaming provider.
    
    Episode URLs are already playable (HLS for series, MP4 for movies), so
    resolving a server needs no extra requests.
    """
    
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.provider_config: AnimesRollConfig = load_config(config)
        super().__init__(self.provider_config.model_dump())
        
        self.api = AnimesRollAPI(
            self,
            search_api_url=self.provider_config.search_api_url,
            episodes_api_url=self.provider_config.episodes_api_url,
        )
        self.parser = AnimesRollParser(
            base_url=self.provider_config.base_url,
            search_api_url=self.provider_config.search_api_url,
            cdn_url_template=self.provider_config.cdn_url_template,
        )
        
        logger.debug("AnimesROLL provider initialized")
    
    @property
    def metadata(self) -> ProviderMetadata:
        return provider_metadata
    
    @property
    def base_url(self) -> str:
        return self.provider_config.base_url
    
    @property
    def default_headers(self) -> Dict[str, str]:
        return {
            'Referer': self.base_url,
            'User-Agent': self.user_agent,
        }
    
    def get_settings(self) -> StreamingSettings:
        return StreamingSettings(episode_servers=[DEFAULT_SERVER], supports_dub=False)
    
    async def search(self, opts: SearchOptions) -> List[SearchResult]:
        query = opts.query or opts.media.romaji_title or opts.media.english_title or ""
        if not query:
            return []
        
        try:
            data = await self.api.search(query)
        except NetworkError as e:
            logger.warning(f"AnimesROLL search failed for '{query}': {e}")
            return []
        
        results = self.parser.parse_search_results(data)
        logger.info(f"Found {len(results)} results for '{query}'")
        return results
    
    async def find_episodes(self, id: str) -> List[EpisodeDetails]:
        """
        List the episodes of a series or movie.
        
        Args:
            id: ``anime/<slug>`` for series, ``f/<generate_id>`` for movies
        """
        page_url = f"{self.base_url}/{id}"
        
        try:
            html = await self._get_text(page_url)
            data = self.parser.parse_next_data(html)
        except (NetworkError, ExtractionError) as e:
            logger.warning(f"Failed to load AnimesROLL page {page_url}: {e}")
            return []
        
        if id.startswith("f/"):
            return self.parser.build_movie_episodes(data)
        
        generate_id = data.get("generate_id")
        if not generate_id:
            logger.warning(f"AnimesROLL page {page_url} has no series id")
            return []
        
        episodes = await self.api.fetch_all_episodes(str(generate_id))
        results = self.parser.build_series_episodes(data, episodes)
        logger.info(f"Found {len(results)} episodes for '{id}'")
        return results
    
    async def find_episode_server(self, episode: EpisodeDetails, server: str) -> EpisodeServer:
        """Wrap the episode's own URL: movies are MP4 files, series HLS playlists."""
        if "/filme" in episode.id:
            source_type = VideoSourceType.MP4
        else:
            source_type = VideoSourceType.M3U8
        
        return EpisodeServer(
            server=DEFAULT_SERVER,
            headers=dict(self.default_headers),
            video_sources=[VideoSource(
                url=episode.url,
                type=source_type,
                quality=DEFAULT_QUALITY,
                subtitles=[],
            )],
        )
