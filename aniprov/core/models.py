"""
Core Data Models - Pydantic models shared with the media host.

This module defines the data structures exchanged between providers and the
host application: media descriptions, search options, torrents, streaming
episodes and servers, and manga chapters and pages. Attributes use snake_case
in Python and are serialised to the host's camelCase names with
``model_dump(by_alias=True)``.
"""

from enum import Enum
from typing import Dict, List, Optional
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class HostModel(BaseModel):
    """Base model using camelCase aliases while accepting field names."""
    
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
    
    def to_host(self) -> Dict:
        """Serialise into the JSON-compatible shape the host expects."""
        return self.model_dump(by_alias=True, mode="json")


class Media(HostModel):
    """Media entry the host is asking about."""
    
    id: int = Field(0, description="Host media identifier")
    romaji_title: Optional[str] = Field(None, description="Romanised title")
    english_title: Optional[str] = Field(None, description="English title")
    synonyms: List[str] = Field(default_factory=list, description="Alternative titles")
    episode_count: int = Field(-1, description="Known episode count, -1 when unknown")
    is_adult: bool = Field(False, description="Adult content flag")
    
    def best_title(self) -> str:
        """Return the first non-empty title, romaji preferred."""
        for title in (self.romaji_title, self.english_title):
            if title and title.strip():
                return title.strip()
        return ""


# ---------------------------------------------------------------------------
# Torrent providers
# ---------------------------------------------------------------------------

class AnimeProviderType(str, Enum):
    """Role of a torrent provider inside the host."""
    
    MAIN = "main"
    SPECIAL = "special"


class AnimeProviderSettings(HostModel):
    """Capabilities advertised by a torrent provider."""
    
    can_smart_search: bool = False
    smart_search_filters: List[str] = Field(default_factory=list)
    supports_adult: bool = False
    type: AnimeProviderType = AnimeProviderType.MAIN


class AnimeSearchOptions(HostModel):
    """Plain torrent search request."""
    
    media: Media = Field(default_factory=Media)
    query: str = ""


class AnimeSmartSearchOptions(HostModel):
    """Torrent search request with optional filters."""
    
    media: Media = Field(default_factory=Media)
    query: str = ""
    batch: bool = False
    episode_number: int = 0
    resolution: str = ""


class AnimeTorrent(HostModel):
    """
    A single torrent release found by a torrent provider.
    
    Sites without tracker statistics report zero peers and ``formatted_size``
    ``"N/A"``; ``episode_number`` is ``-1`` for batches or when unknown.
    """
    
    name: str = Field(..., min_length=1)
    date: str = ""
    size: int = 0
    formatted_size: str = "N/A"
    seeders: int = 0
    leechers: int = 0
    download_count: int = 0
    link: str = ""
    download_url: str = ""
    magnet_link: str = ""
    info_hash: str = ""
    resolution: str = ""
    is_batch: bool = False
    episode_number: int = -1
    release_group: str = ""
    is_best_release: bool = False
    confirmed: bool = False
    
    @field_validator('name')
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Ensure name is stripped."""
        return v.strip()
    
    def __str__(self) -> str:
        return self.name


# ---------------------------------------------------------------------------
# Streaming providers
# ---------------------------------------------------------------------------

class SubOrDub(str, Enum):
    """Audio flavour of a streaming search result."""
    
    SUB = "sub"
    DUB = "dub"
    BOTH = "both"


class VideoSourceType(str, Enum):
    """Container type of a playable video URL."""
    
    MP4 = "mp4"
    M3U8 = "m3u8"
    
    @classmethod
    def from_url(cls, url: str) -> "VideoSourceType":
        """Infer the source type from the URL path."""
        path = urlparse(url).path.lower()
        if ".mp4" in path:
            return cls.MP4
        return cls.M3U8


class StreamingSettings(HostModel):
    """Capabilities advertised by a streaming provider."""
    
    episode_servers: List[str] = Field(default_factory=list)
    supports_dub: bool = False


class SearchOptions(HostModel):
    """Streaming search request."""
    
    media: Media = Field(default_factory=Media)
    query: str = ""
    dub: bool = False
    year: Optional[int] = None


class SearchResult(HostModel):
    """Streaming search hit."""
    
    id: str
    title: str
    url: str
    sub_or_dub: SubOrDub = SubOrDub.SUB


class EpisodeDetails(HostModel):
    """An episode listed by a streaming provider."""
    
    id: str = Field(..., min_length=1)
    number: float = Field(..., description="Episode number, fractional for recaps")
    url: str = ""
    title: str = ""
    
    @field_validator('number')
    @classmethod
    def normalize_number(cls, v: float) -> float:
        """Store whole episode numbers as ints so they print without '.0'."""
        if float(v).is_integer():
            return int(v)
        return v


class VideoSubtitle(HostModel):
    """Subtitle track attached to a video source."""
    
    id: str
    url: str
    language: str
    is_default: bool = False


class VideoSource(HostModel):
    """A playable video URL."""
    
    url: str = Field(..., min_length=1)
    type: VideoSourceType = VideoSourceType.M3U8
    quality: str = ""
    subtitles: List[VideoSubtitle] = Field(default_factory=list)


class EpisodeServer(HostModel):
    """Video sources of one episode on one server, with required headers."""
    
    server: str
    headers: Dict[str, str] = Field(default_factory=dict)
    video_sources: List[VideoSource] = Field(default_factory=list)


# ---------------------------------------------------------------------------
# Manga providers
# ---------------------------------------------------------------------------

class MangaSettings(HostModel):
    """Capabilities advertised by a manga provider."""
    
    supports_multi_language: bool = False
    supports_multi_scanlator: bool = False


class MangaSearchResult(HostModel):
    """Manga search hit."""
    
    id: str
    title: str
    image: str = ""


class ChapterDetails(HostModel):
    """A manga chapter."""
    
    id: str
    url: str
    title: str
    chapter: str
    index: int = 0
    language: str = ""


class ChapterPage(HostModel):
    """A single page image of a chapter."""
    
    url: str
    index: int
    headers: Dict[str, str] = Field(default_factory=dict)


# Export all models
__all__ = [
    "HostModel",
    "Media",
    "AnimeProviderType",
    "AnimeProviderSettings",
    "AnimeSearchOptions",
    "AnimeSmartSearchOptions",
    "AnimeTorrent",
    "SubOrDub",
    "VideoSourceType",
    "StreamingSettings",
    "SearchOptions",
    "SearchResult",
    "EpisodeDetails",
    "VideoSubtitle",
    "VideoSource",
    "EpisodeServer",
    "MangaSettings",
    "MangaSearchResult",
    "ChapterDetails",
    "ChapterPage",
]
