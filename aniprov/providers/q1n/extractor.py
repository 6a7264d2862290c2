"""
Q1N Player Extractor - Video URL extraction for q1n.net episodes

Episode pages embed their players behind an "aviso" interstitial iframe
whose ``url=`` parameter holds the real player. Players live on two hosts:
disneycdn.net (served as ``chplay``) and secvideo/csst.online (``ruplay``).
This module unwraps the iframes, digs the playable stream URL out of each
player page and maps the result onto the site's server names.
"""

import logging
import re
from typing import Dict, List, Optional
from urllib.parse import urlparse

from aniprov.core.exceptions import AniProvError, ExtractionError
from aniprov.core.models import EpisodeDetails
from aniprov.providers.common import URLHelper

from .config import DEFAULT_SERVER, SUPPORTED_SERVERS
from .parser import Q1NParser


logger = logging.getLogger(__name__)


DISNEY_HASH = re.compile(r'#(.+)$')
PLAYER_TOKEN = re.compile(r'[?&]t=([a-f0-9]+)')
QUOTED_M3U8 = re.compile(r'["\']([^"\']*\.m3u8[^"\']*?)["\']')

SECVIDEO_URL = re.compile(r'["\']([^"\']*secvideo[^"\']*/get_file/[^"\']*\.mp4/)["\']', re.IGNORECASE)
SECVIDEO_CONCATENATED = re.compile(r'\[360p\]([^,]+),\[720p\]([^,]+),\[1080p\]([^\]]+)')
SECVIDEO_BARE_URL = re.compile(r'(https://[^"\'\s,\]]+secvideo[^"\'\s,\]]+\.mp4/)', re.IGNORECASE)
QUALITY_TAGS = ("360p", "720p", "1080p")
QUALITY_SUFFIXES = ("_360p", "_720p", "_1080p")

VIDEO_PATTERNS = [
    re.compile(r'["\']([^"\']*\.mp4[^"\']*?)["\']', re.IGNORECASE),
    re.compile(r'["\']([^"\']*\.m3u8[^"\']*?)["\']', re.IGNORECASE),
]

DOWNLOAD_PATTERNS = [
    re.compile(r'href=["\']([^"\']*/download[^"\']*?)["\']', re.IGNORECASE),
    re.compile(r'href=["\']([^"\']*\.mp4[^"\']*?)["\']', re.IGNORECASE),
    re.compile(r'href=["\']([^"\']*\.m3u8[^"\']*?)["\']', re.IGNORECASE),
    re.compile(r'href=["\']([^"\']*\d+\.\d+\.\d+\.\d+[^"\']*?)["\']', re.IGNORECASE),
    re.compile(r'href=["\']([^"\']*/[^/]*/[^/]*/hld/[^"\']*?)["\']', re.IGNORECASE),
    re.compile(r'<a[^>]*class=["\'][^"\']*downloader-button[^"\']*["\'][^>]*href=["\']([^"\']*)["\']', re.IGNORECASE),
]
DOWNLOAD_MARKERS = (".mp4", ".m3u8", "/download", "hld/")


def select_player(players: Dict[str, str], preferred: str) -> str:
    """
    Choose the player URL to serve.
    
    Order: preferred server, default server, second server, then any.
    
    Raises:
        ExtractionError: When no usable player URL exists
    """
    candidates = [preferred.strip(), DEFAULT_SERVER, SUPPORTED_SERVERS[1]]
    player_url = next((players[name] for name in candidates if players.get(name)), None)
    
    if player_url is None and players:
        player_url = next(iter(players.values()))
    
    if not player_url or "about:blank" in player_url:
        raise ExtractionError("No video source found on the episode page", provider_name="Q1N")
    
    return player_url


def map_player(players: Dict[str, str], url: str) -> None:
    """
    Assign a player or stream URL to a server slot, in place.
    
    disneycdn URLs belong to ``chplay`` (and replace an earlier guess),
    secvideo/csst.online URLs to ``ruplay``; anything else fills the first
    free slot.
    """
    is_disney = "disneycdn.net" in url
    
    if is_disney and "chplay" not in players:
        players["chplay"] = url
    elif ("csst.online" in url or "secvideo" in url) and "ruplay" not in players:
        players["ruplay"] = url
    elif is_disney:
        players["chplay"] = url
    elif "chplay" not in players:
        players["chplay"] = url
    elif "ruplay" not in players:
        players["ruplay"] = url
    else:
        logger.debug(f"No free server slot for player URL: {url}")


def extract_secvideo_urls(html: str) -> List[str]:
    """
    Find secvideo ``get_file`` MP4 URLs in a player page.
    
    Quoted URLs are preferred; otherwise the ``[360p]..,[720p]..,[1080p]..``
    quality list, then bare secvideo URLs anywhere in the text.
    """
    urls: List[str] = []
    
    for url in SECVIDEO_URL.findall(html):
        if url not in urls:
            urls.append(url)
    if urls:
        return urls
    
    for match in SECVIDEO_CONCATENATED.finditer(html):
        urls.extend(part.strip() for part in match.groups() if part)
    if urls:
        return urls
    
    for url in SECVIDEO_BARE_URL.findall(html):
        if url not in urls:
            urls.append(url)
    return urls


def separate_concatenated_urls(text: str) -> List[str]:
    """Split a ``[360p]url,[720p]url,[1080p]url`` string into its URLs."""
    urls = []
    for quality in QUALITY_TAGS:
        match = re.search(rf'\[{quality}\]([^,\[]+)', text)
        if match:
            urls.append(match.group(1).strip())
    return urls


def select_best_quality(urls: List[str]) -> Optional[str]:
    """
    Pick the best quality URL.
    
    URLs without a quality suffix are the original upload and rank first,
    then ``_1080p``, ``_720p`` and ``_360p``.
    """
    if not urls:
        return None
    
    for url in urls:
        if not any(suffix in url for suffix in QUALITY_SUFFIXES):
            return url
    
    for suffix in ("_1080p", "_720p", "_360p"):
        for url in urls:
            if suffix in url:
                return url
    
    return urls[0]


class Q1NPlayerExtractor:
    """Resolves q1n.net episode pages into per-server player or stream URLs."""
    
    def __init__(
        self,
        client,
        base_url: str = "https://q1n.net",
        disney_base_url: str = "https://disneycdn.net",
        player_timeout: float = 5,
        probe_timeout: float = 3
    ):
        """
        Initialize the extractor.
        
        Args:
            client: Provider whose fetch helpers are used for requests
            base_url: Site base URL, used for synthesized player URLs
            disney_base_url: disneycdn base URL
            player_timeout: Timeout for player and CDN page fetches
            probe_timeout: Timeout for HEAD probes of candidate streams
        """
        self.client = client
        self.base_url = base_url.rstrip('/')
        self.disney_base_url = disney_base_url.rstrip('/')
        self.player_timeout = player_timeout
        self.probe_timeout = probe_timeout
    
    @property
    def referer_host(self) -> str:
        return urlparse(self.base_url).netloc
    
    async def extract_players(self, html: str, episode: EpisodeDetails) -> Dict[str, str]:
        """
        Build the server to URL map for an episode page.
        
        Falls back to ``<base>/player/<server>/<episode id>`` for every
        server when the page yields nothing.
        """
        players: Dict[str, str] = {}
        
        try:
            await self._extract_from_html(html, players)
        except AniProvError as e:
            logger.warning(f"Player extraction failed for episode {episode.id}: {e}")
            players.clear()
        
        if not players:
            logger.debug(f"No players found for episode {episode.id}, using player pages")
            for server in SUPPORTED_SERVERS:
                players[server] = f"{self.base_url}/player/{server}/{episode.id}"
        
        logger.debug(f"Players for episode {episode.id}: {players}")
        return players
    
    async def _extract_from_html(self, html: str, players: Dict[str, str]) -> None:
        aviso_sources, direct_sources = Q1NParser.find_player_iframes(html)
        
        for iframe_src in aviso_sources:
            player_url = URLHelper.get_query_param(iframe_src, "url")
            if not player_url:
                map_player(players, iframe_src)
                continue
            
            video_url = await self.extract_video_url(player_url)
            map_player(players, video_url or player_url)
        
        for iframe_src in direct_sources:
            map_player(players, iframe_src)
    
    async def extract_video_url(self, player_url: str) -> Optional[str]:
        """
        Extract the stream URL from a player page.
        
        Args:
            player_url: Player page URL (disneycdn or secvideo)
            
        Returns:
            Stream URL, the player URL itself for disneycdn players whose
            stream could not be resolved, or None
        """
        player_html = await self.client._try_get_text(player_url, timeout=self.player_timeout)
        if not player_html:
            return None
        
        if "disneycdn.net" in player_url:
            if "#" in player_url:
                disney_url = await self.extract_disney_url(player_url, player_html)
                if disney_url and disney_url != player_url:
                    return disney_url
            return player_url
        
        video_urls = extract_secvideo_urls(player_html)
        if video_urls:
            if len(video_urls) == 1 and "[360p]" in video_urls[0] and "[720p]" in video_urls[0]:
                video_urls = separate_concatenated_urls(video_urls[0]) or video_urls
            best = select_best_quality(video_urls)
            if best:
                logger.debug(f"Selected secvideo stream: {best}")
                return best
        
        for pattern in VIDEO_PATTERNS:
            match = pattern.search(player_html)
            if match:
                video_url = match.group(1)
                if video_url.startswith('/'):
                    video_url = URLHelper.make_absolute(video_url, URLHelper.origin(player_url))
                logger.debug(f"Found stream URL in player page: {video_url}")
                return video_url
        
        return None
    
    async def extract_disney_url(self, player_url: str, player_html: str) -> Optional[str]:
        """
        Resolve a disneycdn player (``https://disneycdn.net/#<hash>``) to a stream.
        
        Tries, in order: the download page, the video API, the player API
        with the token found in the page, stream references inside the page
        and finally HEAD probes of well-known stream locations.
        """
        hash_match = DISNEY_HASH.search(player_url)
        if not hash_match:
            return None
        video_hash = hash_match.group(1)
        
        download_html = await self.client._try_get_text(
            f"{self.disney_base_url}/#{video_hash}&dl=1", timeout=self.player_timeout
        )
        if download_html:
            for pattern in DOWNLOAD_PATTERNS:
                for candidate in pattern.findall(download_html):
                    if any(marker in candidate for marker in DOWNLOAD_MARKERS):
                        logger.debug(f"disneycdn download link: {candidate}")
                        return candidate
        
        video_api_url = self._video_api_url(video_hash)
        api_response = await self.client._try_get_text(video_api_url, timeout=self.player_timeout)
        if api_response:
            match = QUOTED_M3U8.search(api_response)
            if match:
                return match.group(1)
        
        token_match = PLAYER_TOKEN.search(player_html)
        if token_match:
            player_api_url = f"{self.disney_base_url}/api/v1/player?t={token_match.group(1)}"
            api_response = await self.client._try_get_text(player_api_url, timeout=self.player_timeout)
            if api_response:
                match = QUOTED_M3U8.search(api_response)
                if match:
                    return match.group(1)
        
        in_page = self._find_stream_in_page(player_html, video_hash)
        if in_page:
            return in_page
        
        for candidate in (
            video_api_url,
            f"{self.disney_base_url}/hls/{video_hash}/master.m3u8",
            f"{self.disney_base_url}/video/{video_hash}.m3u8",
        ):
            if await self.client._head_ok(candidate, timeout=self.probe_timeout):
                return candidate
        
        logger.debug(f"Could not resolve disneycdn stream for hash {video_hash}")
        return None
    
    def _video_api_url(self, video_hash: str) -> str:
        return f"{self.disney_base_url}/api/v1/video?id={video_hash}&w=2560&h=1080&r={self.referer_host}"
    
    def _find_stream_in_page(self, html: str, video_hash: str) -> Optional[str]:
        patterns = [
            r'["\']([^"\']*/hls/[^"\']*/master\.m3u8[^"\']*?)["\']',
            r'["\']([^"\']*\.m3u8[^"\']*?)["\']',
            r'["\']([^"\']*/api/v1/video[^"\']*?)["\']',
            r'["\']([^"\']*/api/v1/player[^"\']*?)["\']',
            rf'["\']([^"\']*{re.escape(video_hash)}[^"\']*?)["\']',
        ]
        
        for pattern in patterns:
            for candidate in re.findall(pattern, html, re.IGNORECASE):
                if ".m3u8" in candidate or "/api/" in candidate:
                    if candidate.startswith('/'):
                        candidate = self.disney_base_url + candidate
                    return candidate
        
        return None


__all__ = [
    "Q1NPlayerExtractor",
    "map_player",
    "select_player",
    "extract_secvideo_urls",
    "separate_concatenated_urls",
    "select_best_quality",
]
