"""
MangaLivre Provider - Manga provider for mangalivre.tv

This module implements the manga provider: search, chapter listing through
the theme's AJAX endpoint (with a page scrape fallback) and chapter pages.
"""

import logging
import re
from typing import Dict, List, Optional, Any

from aniprov.core.exceptions import NetworkError
from aniprov.core.models import ChapterDetails, ChapterPage, MangaSearchResult, MangaSettings
from aniprov.providers.base import MangaProvider, ProviderKind, ProviderMetadata
from aniprov.providers.common import URLHelper

from .config import MangaLivreConfig, load_config
from .parser import MangaLivreParser


logger = logging.getLogger(__name__)


provider_metadata = ProviderMetadata(
    name="MangaLivre",
    version="1.0.0",
    author="AniProv Team",
    description="Portuguese manga chapters from mangalivre.tv",
    website="https://mangalivre.tv",
    kind=ProviderKind.MANGA,
    language="pt-BR",
)


class MangaLivreProvider(MangaProvider):
    """MangaLivre manga provider."""
    
    def __init__(self, config: Optional[Dict[str, Any]] = None):
        self.provider_config: MangaLivreConfig = load_config(config)
        super().__init__(self.provider_config.model_dump())
        
        self.parser = MangaLivreParser(
            base_url=self.provider_config.base_url,
            language=self.provider_config.language,
        )
        
        logger.debug("MangaLivre provider initialized")
    
    @property
    def metadata(self) -> ProviderMetadata:
        return provider_metadata
    
    @property
    def base_url(self) -> str:
        return self.provider_config.base_url
    
    def get_settings(self) -> MangaSettings:
        return MangaSettings(supports_multi_language=False, supports_multi_scanlator=False)
    
    async def search(self, query: str) -> List[MangaSearchResult]:
        if not query or not query.strip():
            return []
        
        search_url = f"{self.base_url}/?s={URLHelper.encode_component(query.strip())}&post_type=wp-manga"
        try:
            html = await self._get_text(search_url)
        except NetworkError as e:
            logger.warning(f"MangaLivre search failed for '{query}': {e}")
            return []
        
        results = self.parser.parse_search_results(html)
        logger.info(f"Found {len(results)} manga for '{query}'")
        return results
    
    async def find_chapters(self, manga_id: str) -> List[ChapterDetails]:
        """
        List a manga's chapters in reading order.
        
        Args:
            manga_id: Manga slug such as ``"dandadan"`` (numeric ids are rejected)
            
        Returns:
            Chapters sorted by number with 0-based indices, or an empty list
        """
        if not manga_id or not re.search(r'[a-zA-Z-]', manga_id):
            logger.warning(f"Invalid manga id '{manga_id}', expected a URL slug")
            return []
        
        manga_url = f"{self.base_url}/manga/{manga_id}/"
        try:
            manga_html = await self._get_text(manga_url)
        except NetworkError as e:
            logger.warning(f"Failed to load manga page {manga_url}: {e}")
            return []
        
        try:
            ajax_html = await self._post_text(
                f"{self.base_url}/manga/{manga_id}/ajax/chapters/",
                headers={
                    "Referer": manga_url,
                    "X-Requested-With": "XMLHttpRequest",
                    "User-Agent": self.provider_config.ajax_user_agent,
                    "Accept": "*/*",
                },
            )
            elements = self.parser.find_chapter_elements(ajax_html)
        except NetworkError as e:
            logger.debug(f"Chapter AJAX request failed, scraping manga page: {e}")
            elements = []
        
        if not elements:
            elements = self.parser.find_chapter_elements(manga_html, ".listing-chapters_wrap .wp-manga-chapter")
        
        if not elements:
            logger.warning(f"No chapters found for '{manga_id}'")
            return []
        
        chapters = self.parser.sort_and_index(self.parser.parse_chapters(elements))
        logger.info(f"Found {len(chapters)} chapters for '{manga_id}'")
        return chapters
    
    async def find_chapter_pages(self, chapter_id: str) -> List[ChapterPage]:
        """
        List the page images of a chapter.
        
        Args:
            chapter_id: Absolute chapter URL as returned by ``find_chapters``
        """
        if not chapter_id or not chapter_id.startswith("http"):
            logger.warning(f"Invalid chapter id '{chapter_id}', expected a full URL")
            return []
        
        try:
            html = await self._get_text(chapter_id)
        except NetworkError as e:
            logger.warning(f"Failed to load chapter {chapter_id}: {e}")
            return []
        
        pages = self.parser.parse_pages(html, chapter_id, self.user_agent)
        logger.info(f"Found {len(pages)} pages for {chapter_id}")
        return pages
