"""
Q1N Provider - Online streaming provider for q1n.net

This module implements the streaming provider that searches q1n.net, lists
episodes (from the anime page or by probing episode URLs) and resolves the
chplay/ruplay players of an episode into a playable source.
"""

import logging
import re
from typing import Dict, List, Optional, Any

from aniprov.core.exceptions import NetworkError, ProviderError, ValidationError
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
from aniprov.providers.common import URLHelper

from .config import DEFAULT_QUALITY, DEFAULT_SERVER, SUPPORTED_SERVERS, Q1NConfig, load_config
from .extractor import Q1NPlayerExtractor, select_player
from .parser import Q1NParser


logger = logging.getLogger(__name__)


provider_metadata = ProviderMetadata(
    name="Q1N",
    version="1.0.0",
    author="AniProv Team",
    description="Subbed and dubbed anime streaming from q1n.net",
    website="https://q1n.net",
    kind=ProviderKind.ONLINE_STREAMING,
    language="pt-BR",
)


class Q1NProvider(OnlineStreamingProvider):
    """
    Q1N streaming provider.
    
    Offers the ``chplay`` (disneycdn) and ``ruplay`` (secvideo) servers and
    dubbed versions through a ``dublado`` search suffix.
    """
    
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.provider_config: Q1NConfig = load_config(config)
        super().__init__(self.provider_config.model_dump())
        
        self.parser = Q1NParser(base_url=self.provider_config.base_url)
        self.extractor = Q1NPlayerExtractor(
            self,
            base_url=self.provider_config.base_url,
            disney_base_url=self.provider_config.disney_base_url,
            player_timeout=self.provider_config.player_timeout,
            probe_timeout=self.provider_config.probe_timeout,
        )
        
        logger.debug("Q1N provider initialized")
    
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
        return StreamingSettings(episode_servers=list(SUPPORTED_SERVERS), supports_dub=True)
    
    async def search(self, opts: SearchOptions) -> List[SearchResult]:
        """
        Search q1n.net.
        
        Dubbed versions are separate entries on the site, so ``dub`` searches
        append ``dublado`` to the query.
        """
        query = opts.query or opts.media.best_title()
        if not query:
            return []
        
        if opts.dub:
            query = f"{query} dublado"
        
        search_url = f"{self.base_url}/?s={URLHelper.encode_component(query)}"
        html = await self._try_get_text(search_url)
        if not html:
            logger.warning(f"Q1N search failed for '{query}'")
            return []
        
        results = self.parser.parse_search_results(html)
        logger.info(f"Found {len(results)} results for '{query}'")
        return results
    
    async def find_episodes(self, id: str) -> List[EpisodeDetails]:
        """
        List the episodes of an anime.
        
        Args:
            id: Anime slug as returned by search (numeric ids are rejected)
            
        Returns:
            Episodes sorted by number; probed from episode URLs when the
            anime page is unavailable or lists none
        """
        if not id or re.fullmatch(r'\d+', id):
            logger.warning(f"Invalid Q1N anime id: '{id}'")
            return []
        
        html = await self._try_get_text(f"{self.base_url}/animes/{id}/")
        episodes = self.parser.parse_episodes(html) if html else []
        
        if not episodes:
            logger.debug(f"No episode list for '{id}', probing episode pages")
            episodes = await self._probe_episode_pages(id)
        
        logger.info(f"Found {len(episodes)} episodes for '{id}'")
        return episodes
    
    async def _probe_episode_pages(self, anime_slug: str) -> List[EpisodeDetails]:
        """Probe ``/episodio/<slug>-episodio-<n>/`` until the first missing page after episode 1."""
        episodes = []
        
        for number in range(1, self.provider_config.max_episodes_scan + 1):
            episode_url = f"{self.base_url}/episodio/{anime_slug}-episodio-{number}/"
            if await self._head_ok(episode_url):
                episodes.append(EpisodeDetails(
                    id=f"{anime_slug}-episodio-{number}",
                    number=number,
                    url=episode_url,
                    title=f"Episódio {number}",
                ))
            elif number > 1:
                break
        
        return episodes
    
    async def find_episode_server(self, episode: EpisodeDetails, server: str) -> EpisodeServer:
        """
        Resolve a playable source for an episode.
        
        Args:
            episode: Episode as returned by ``find_episodes``
            server: ``chplay``, ``ruplay``, or ``default``/empty for chplay
            
        Returns:
            EpisodeServer with a single source and the headers it requires
            
        Raises:
            ValidationError: If the episode lacks an id or URL
            ProviderError: If the episode page cannot be loaded
            ExtractionError: If the page has no usable player
        """
        if not episode.id or not episode.url or not episode.url.strip():
            raise ValidationError("Episode data is missing an id or URL", field_name="url", invalid_value=episode.url)
        
        try:
            html = await self._get_text(episode.url)
        except NetworkError as e:
            raise ProviderError(
                f"Could not load episode page: {episode.url}",
                provider_name=self.metadata.name,
                details=str(e)
            )
        
        players = await self.extractor.extract_players(html, episode)
        selected_server = DEFAULT_SERVER if not server or server == "default" else server
        player_url = select_player(players, selected_server)
        
        return EpisodeServer(
            server=selected_server,
            headers=dict(self.default_headers),
            video_sources=[VideoSource(
                url=player_url,
                type=VideoSourceType.from_url(player_url),
                quality=DEFAULT_QUALITY,
                subtitles=[],
            )],
        )
