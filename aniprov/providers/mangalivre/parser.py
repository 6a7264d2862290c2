"""
MangaLivre Parser - HTML parsing utilities for mangalivre.tv

mangalivre.tv runs the WordPress "Madara" manga theme; this module reads
its search listings, chapter lists and reader pages.
"""

import logging
import re
from typing import List, Optional

from bs4 import Tag

from aniprov.core.models import ChapterDetails, ChapterPage, MangaSearchResult
from aniprov.providers.common import HTMLParser, TextCleaner, URLHelper, get_attr


logger = logging.getLogger(__name__)


MANGA_ID = re.compile(r'/manga/([^/]+)/')
CHAPTER_FROM_TITLE = re.compile(r'cap[íi]tulo\s*([\d.,]+)', re.IGNORECASE)
CHAPTER_FROM_URL = re.compile(r'capitulo-([\d.,]+)', re.IGNORECASE)

PAGE_IMAGES = [".reading-content img", ".manga-reading img", ".manga-page img"]


class MangaLivreParser:
    """Parser for mangalivre.tv pages."""
    
    def __init__(self, base_url: str = "https://mangalivre.tv", language: str = "pt-BR"):
        self.base_url = base_url
        self.language = language
    
    def parse_search_results(self, html: str) -> List[MangaSearchResult]:
        """
        Parse a search page.
        
        Items without a title, link or ``/manga/<slug>/`` URL are skipped.
        """
        parser = HTMLParser(html, self.base_url)
        results = []
        
        for item in parser.select(".search-lists .manga__item"):
            link = item.select_one("h2 a")
            if link is None:
                continue
            
            href = get_attr(link, "href")
            title = link.get_text(strip=True)
            if not title or not href:
                logger.debug("Skipping search item without title or link")
                continue
            
            match = MANGA_ID.search(href)
            if not match:
                logger.debug(f"Skipping search item with unexpected URL: {href}")
                continue
            
            results.append(MangaSearchResult(
                id=match.group(1),
                title=title,
                image=self._thumbnail(item),
            ))
        
        return results
    
    @staticmethod
    def _thumbnail(item: Tag) -> str:
        image = item.select_one(".manga__thumb img")
        if image is None:
            return ""
        # Lazy-loaded thumbnails keep the real URL in data-src
        src = get_attr(image, "data-src") or get_attr(image, "src")
        return URLHelper.fix_protocol_relative(src)
    
    def find_chapter_elements(self, html: str, selector: str = ".wp-manga-chapter") -> List[Tag]:
        """Return the chapter list items of an AJAX fragment or manga page."""
        return HTMLParser(html, self.base_url).select(selector)
    
    def parse_chapters(self, elements: List[Tag]) -> List[ChapterDetails]:
        """
        Build chapters from ``.wp-manga-chapter`` items.
        
        The chapter number comes from ``Capítulo N`` in the link text or
        ``capitulo-N`` in the URL; items with neither are skipped.
        """
        chapters = []
        
        for element in elements:
            link = element.select_one("a")
            if link is None:
                continue
            
            title = TextCleaner.normalize_whitespace(link.get_text(" ", strip=True))
            href = get_attr(link, "href")
            if not title or not href:
                continue
            
            match = CHAPTER_FROM_TITLE.search(title) or CHAPTER_FROM_URL.search(href)
            if not match:
                logger.debug(f"No chapter number in '{title}' ({href})")
                continue
            
            chapters.append(ChapterDetails(
                id=href,
                url=href,
                title=title,
                chapter=match.group(1),
                index=0,
                language=self.language,
            ))
        
        return chapters
    
    @staticmethod
    def sort_and_index(chapters: List[ChapterDetails]) -> List[ChapterDetails]:
        """Sort chapters numerically (unparsable numbers last) and assign 0-based indices."""
        def sort_key(chapter: ChapterDetails):
            number: Optional[float] = TextCleaner.parse_decimal(chapter.chapter)
            return (number is None, number or 0.0)
        
        ordered = sorted(chapters, key=sort_key)
        return [chapter.model_copy(update={"index": index}) for index, chapter in enumerate(ordered)]
    
    def parse_pages(self, html: str, chapter_url: str, user_agent: str) -> List[ChapterPage]:
        """
        Parse the page images of a chapter reader.
        
        Images without a source are skipped and do not consume an index.
        """
        parser = HTMLParser(html, self.base_url)
        pages = []
        
        for image in parser.select_first_nonempty(PAGE_IMAGES):
            src = get_attr(image, "data-src") or get_attr(image, "src")
            if not src:
                continue
            
            pages.append(ChapterPage(
                url=src,
                index=len(pages),
                headers={
                    "Referer": chapter_url,
                    "User-Agent": user_agent,
                },
            ))
        
        return pages
