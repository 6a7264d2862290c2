"""
Base Provider Interface - Abstract base classes for content providers.

This module defines the contracts that anime torrent, online streaming and
manga providers implement for the media host, together with the shared HTTP
fetch layer every provider uses to talk to its website.
"""

import asyncio
import logging
from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict, List, Optional, Any
from urllib.parse import urljoin, urlparse

import aiohttp
from pydantic import BaseModel, Field

from aniprov.core.models import (
    AnimeProviderSettings,
    AnimeSearchOptions,
    AnimeSmartSearchOptions,
    AnimeTorrent,
    ChapterDetails,
    ChapterPage,
    EpisodeDetails,
    EpisodeServer,
    MangaSearchResult,
    MangaSettings,
    SearchOptions,
    SearchResult,
    StreamingSettings,
)
from aniprov.core.exceptions import NetworkError


logger = logging.getLogger(__name__)


DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class ProviderKind(str, Enum):
    """Host extension point a provider plugs into."""
    
    ANIME_TORRENT = "anime_torrent"
    ONLINE_STREAMING = "online_streaming"
    MANGA = "manga"


class ProviderMetadata(BaseModel):
    """Metadata information for a provider."""
    
    name: str = Field(..., description="Provider display name")
    version: str = Field(default="1.0.0", description="Provider version")
    author: str = Field(default="Unknown", description="Provider author")
    description: str = Field(default="", description="Provider description")
    website: Optional[str] = Field(None, description="Source website URL")
    kind: ProviderKind = Field(..., description="Host extension point")
    language: str = Field(default="pt-BR", description="Content language")


class BaseProvider(ABC):
    """
    Abstract base class for content providers.
    
    Owns a lazily created aiohttp session and the fetch helpers providers use
    to reach their website. Requests are made exactly once; failures surface
    as NetworkError (or None from ``_try_get_text``) and it is up to the
    provider to decide whether to fall back to another strategy.
    """
    
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize the provider with configuration.
        
        Args:
            config: Provider-specific configuration dictionary
        """
        self.config = config or {}
        self._session: Optional[aiohttp.ClientSession] = None
        
        # Set up logging for this provider
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")
        
        self._initialize_config()
    
    def _initialize_config(self) -> None:
        """Initialize provider configuration with defaults."""
        self.timeout = self.config.get('timeout', 30)
        self.user_agent = self.config.get('user_agent', DEFAULT_USER_AGENT)
    
    @property
    @abstractmethod
    def metadata(self) -> ProviderMetadata:
        """Get provider metadata information."""
        pass
    
    @property
    @abstractmethod
    def base_url(self) -> str:
        """Get the base URL of the website."""
        pass
    
    @property
    def kind(self) -> ProviderKind:
        """Host extension point implemented by this provider."""
        return self.metadata.kind
    
    @property
    def default_headers(self) -> Dict[str, str]:
        """Headers sent with every request."""
        return {
            'User-Agent': self.user_agent,
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'pt-BR,pt;q=0.9,en-US;q=0.8,en;q=0.7',
        }
    
    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create HTTP session with proper configuration."""
        if self._session is None or self._session.closed:
            connector = aiohttp.TCPConnector(
                limit=10,
                limit_per_host=5,
                ttl_dns_cache=300,
                use_dns_cache=True
            )
            
            self._session = aiohttp.ClientSession(
                connector=connector,
                timeout=aiohttp.ClientTimeout(total=self.timeout),
                headers=self.default_headers
            )
        
        return self._session
    
    def _resolve_url(self, url: str) -> str:
        """Make a relative URL absolute against the provider's base URL."""
        if not urlparse(url).netloc:
            return urljoin(self.base_url, url)
        return url
    
    @staticmethod
    def _request_kwargs(timeout: Optional[float], kwargs: Dict[str, Any]) -> Dict[str, Any]:
        if timeout is not None:
            kwargs['timeout'] = aiohttp.ClientTimeout(total=timeout)
        return kwargs
    
    async def _fetch(
        self,
        method: str,
        url: str,
        as_json: bool = False,
        timeout: Optional[float] = None,
        **kwargs
    ) -> Any:
        """
        Perform a single HTTP request and return the decoded body.
        
        Args:
            method: HTTP method
            url: Absolute or base-relative URL
            as_json: Decode the body as JSON instead of text
            timeout: Per-request timeout in seconds overriding the session's
            **kwargs: Additional arguments for the request
            
        Returns:
            Response text or decoded JSON
            
        Raises:
            NetworkError: On HTTP status >= 400, client errors and timeouts
        """
        url = self._resolve_url(url)
        kwargs = self._request_kwargs(timeout, kwargs)
        
        try:
            self.logger.debug(f"Making {method} request to {url}")
            
            async with self.session.request(method, url, **kwargs) as response:
                if response.status >= 400:
                    error_text = await response.text(errors='replace')
                    raise NetworkError(
                        f"HTTP {response.status} error for {url}",
                        url=url,
                        status_code=response.status,
                        details=error_text[:500]
                    )
                
                if as_json:
                    return await response.json(content_type=None)
                return await response.text(errors='replace')
                
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise NetworkError(
                f"Request to {url} failed: {e or type(e).__name__}",
                url=url,
                details=str(e)
            )
        except ValueError as e:
            raise NetworkError(f"Invalid JSON from {url}: {e}", url=url, details=str(e))
    
    async def _get_text(self, url: str, timeout: Optional[float] = None, **kwargs) -> str:
        """Get text content from URL."""
        return await self._fetch('GET', url, timeout=timeout, **kwargs)
    
    async def _try_get_text(self, url: str, timeout: Optional[float] = None, **kwargs) -> Optional[str]:
        """Get text content from URL, returning None when the request fails."""
        try:
            return await self._get_text(url, timeout=timeout, **kwargs)
        except NetworkError as e:
            self.logger.debug(f"Fetch failed, continuing without page: {e}")
            return None
    
    async def _get_json(self, url: str, timeout: Optional[float] = None, **kwargs) -> Any:
        """Get JSON content from URL."""
        return await self._fetch('GET', url, as_json=True, timeout=timeout, **kwargs)
    
    async def _post_text(self, url: str, timeout: Optional[float] = None, **kwargs) -> str:
        """POST to URL and return the response text."""
        return await self._fetch('POST', url, timeout=timeout, **kwargs)
    
    async def _head_ok(self, url: str, timeout: Optional[float] = None, **kwargs) -> bool:
        """
        Check whether a HEAD request to URL succeeds.
        
        Returns:
            True for 2xx/3xx responses, False otherwise (including failures)
        """
        url = self._resolve_url(url)
        kwargs = self._request_kwargs(timeout, kwargs)
        
        try:
            async with self.session.head(url, allow_redirects=True, **kwargs) as response:
                self.logger.debug(f"HEAD {url} -> {response.status}")
                return response.status < 400
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            self.logger.debug(f"HEAD {url} failed: {e}")
            return False
    
    async def validate_connection(self) -> bool:
        """
        Validate that the provider can reach its website.
        
        Returns:
            True if connection is successful, False otherwise
        """
        try:
            await self._get_text(self.base_url)
            return True
        except NetworkError as e:
            self.logger.error(f"Connection validation failed: {e}")
            return False
    
    async def cleanup(self) -> None:
        """Clean up resources used by the provider."""
        if self._session and not self._session.closed:
            await self._session.close()
            self.logger.debug("HTTP session closed")
        self._session = None
    
    async def __aenter__(self) -> "BaseProvider":
        return self
    
    async def __aexit__(self, exc_type, exc, tb) -> None:
        await self.cleanup()
    
    def __str__(self) -> str:
        return f"{self.metadata.name} v{self.metadata.version}"
    
    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.metadata.name}')"


class AnimeTorrentProvider(BaseProvider):
    """Contract for providers that find anime torrents."""
    
    @abstractmethod
    def get_settings(self) -> AnimeProviderSettings:
        """Describe the provider's search capabilities."""
        pass
    
    @abstractmethod
    async def search(self, opts: AnimeSearchOptions) -> List[AnimeTorrent]:
        """
        Search torrents for a query.
        
        Returns:
            Torrents found, or an empty list when the site cannot be scraped
        """
        pass
    
    @abstractmethod
    async def smart_search(self, opts: AnimeSmartSearchOptions) -> List[AnimeTorrent]:
        """Search torrents and apply episode, resolution and batch filters."""
        pass
    
    @abstractmethod
    async def get_torrent_info_hash(self, torrent: AnimeTorrent) -> str:
        """Return the torrent's BitTorrent info hash, or an empty string."""
        pass
    
    @abstractmethod
    async def get_torrent_magnet_link(self, torrent: AnimeTorrent) -> str:
        """Return the torrent's magnet link, or an empty string."""
        pass
    
    @abstractmethod
    async def get_latest(self) -> List[AnimeTorrent]:
        """Return the most recent releases."""
        pass


class OnlineStreamingProvider(BaseProvider):
    """Contract for providers that stream anime episodes."""
    
    @abstractmethod
    def get_settings(self) -> StreamingSettings:
        """Describe the provider's servers and dub support."""
        pass
    
    @abstractmethod
    async def search(self, opts: SearchOptions) -> List[SearchResult]:
        """Search the site for anime."""
        pass
    
    @abstractmethod
    async def find_episodes(self, id: str) -> List[EpisodeDetails]:
        """List the episodes of an anime, sorted by number."""
        pass
    
    @abstractmethod
    async def find_episode_server(self, episode: EpisodeDetails, server: str) -> EpisodeServer:
        """
        Resolve playable video sources for an episode.
        
        Raises:
            ProviderError: If no playable source can be produced
        """
        pass


class MangaProvider(BaseProvider):
    """Contract for providers that serve manga chapters."""
    
    @abstractmethod
    def get_settings(self) -> MangaSettings:
        """Describe the provider's language and scanlator support."""
        pass
    
    @abstractmethod
    async def search(self, query: str) -> List[MangaSearchResult]:
        """Search the site for manga."""
        pass
    
    @abstractmethod
    async def find_chapters(self, manga_id: str) -> List[ChapterDetails]:
        """List a manga's chapters in reading order."""
        pass
    
    @abstractmethod
    async def find_chapter_pages(self, chapter_id: str) -> List[ChapterPage]:
        """List the page images of a chapter."""
        pass


# Export base provider classes and metadata
__all__ = [
    "BaseProvider",
    "AnimeTorrentProvider",
    "OnlineStreamingProvider",
    "MangaProvider",
    "ProviderKind",
    "ProviderMetadata",
    "DEFAULT_USER_AGENT",
]
