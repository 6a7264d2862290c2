"""
DarkMahou HTML Parser

This module turns DarkMahou search pages and anime pages into torrents.
Anime pages list each episode in a ``div.soraddl`` block holding a table of
resolutions and magnet links; when that markup is missing, magnet links are
collected straight from the raw HTML.
"""

import html as html_lib
import logging
import re
from datetime import datetime, timezone
from typing import List
from urllib.parse import unquote

from aniprov.core.models import AnimeTorrent
from aniprov.providers.common import HTMLParser, TextCleaner, get_attr

from .torrent_parser import TorrentNameParser


logger = logging.getLogger(__name__)


EXCLUDED_URL_PATTERNS = (
    "/?s=", "/tag/", "/blog/", "/contato", "/az-lists",
    "/em-breve", "/animes-populares", "/categoria", "/genero",
)

MAGNET_LINK = re.compile(r'magnet:\?[^"\'\s<>]+', re.IGNORECASE)
MAGNET_NAME = re.compile(r'&dn=([^&]+)')

SCORE_EXACT_TITLE = 100
SCORE_TITLE_CONTAINS = 50
SCORE_URL_CONTAINS = 30


class DarkMahouParser:
    """Parser for DarkMahou search and anime pages."""
    
    def __init__(self, base_url: str = "https://darkmahou.org"):
        """
        Initialize parser.
        
        Args:
            base_url: Site base URL, used to recognise anime page links
        """
        self.base_url = base_url.rstrip('/')
        self._anime_link = re.compile(rf'{re.escape(self.base_url)}/[^/]+/')
    
    def extract_anime_page_url(self, html: str, query: str) -> str:
        """
        Pick the anime page that best matches a query from a search page.
        
        Candidates are anchors pointing at ``<base>/<slug>/`` with a title
        attribute. An exact title scores 100, a title containing the query 50
        and a URL containing the dashed query 30; ties keep page order.
        
        Args:
            html: Search results page
            query: Query the search was made with
            
        Returns:
            Best matching anime page URL, or ``""``
        """
        parser = HTMLParser(html, self.base_url)
        best_url, best_title, best_score = "", "", 0
        
        for anchor in parser.select('a[href][title]'):
            url = get_attr(anchor, 'href')
            title = anchor.get('title') or ""
            
            if not self._anime_link.fullmatch(url):
                continue
            if any(pattern in url for pattern in EXCLUDED_URL_PATTERNS):
                continue
            
            score = self._score(query, title, url)
            if score > 0:
                logger.debug(f"Candidate anime page: {title} ({url}) score={score}")
            if score > best_score:
                best_url, best_title, best_score = url, title, score
        
        if best_url:
            logger.debug(f"Best match: {best_title} - {best_url}")
        else:
            logger.debug(f"No anime page found for query '{query}'")
        return best_url
    
    @staticmethod
    def _score(query: str, title: str, url: str) -> int:
        query_lower = query.lower()
        title_lower = title.lower()
        
        if title_lower == query_lower:
            return SCORE_EXACT_TITLE
        if query_lower in title_lower:
            return SCORE_TITLE_CONTAINS
        if re.sub(r'\s+', '-', query_lower) in url.lower():
            return SCORE_URL_CONTAINS
        return 0
    
    def parse_torrents(self, html: str, page_url: str) -> List[AnimeTorrent]:
        """
        Extract all torrents listed on an anime page.
        
        Args:
            html: Anime page HTML
            page_url: URL the page was fetched from, stored as torrent link
            
        Returns:
            Torrents from the download tables, or from raw magnet links when
            the tables yield nothing
        """
        torrents = self._parse_download_tables(html, page_url)
        if torrents:
            logger.debug(f"Found {len(torrents)} torrents in download tables")
            return torrents
        
        logger.debug("No download tables found, scanning page for magnet links")
        torrents = self._parse_raw_magnets(html, page_url)
        logger.debug(f"Found {len(torrents)} torrents from raw magnet links")
        return torrents
    
    def _parse_download_tables(self, html: str, page_url: str) -> List[AnimeTorrent]:
        parser = HTMLParser(html, self.base_url)
        torrents = []
        
        for block in parser.select('div.soraddl'):
            heading = block.select_one('h3')
            episode_title = heading.get_text(strip=True) if heading else ""
            
            for row in block.select('div.content table tr'):
                link = row.select_one('td div.slink a')
                magnet = get_attr(link, 'href') if link else ""
                if not magnet.startswith('magnet:?'):
                    continue
                
                cell = row.select_one('td.reso')
                resolution = cell.get_text(strip=True) if cell else ""
                resolution = resolution.replace('>>', '').strip()
                
                torrents.append(self.create_torrent(
                    name=f"{episode_title} - {resolution}",
                    magnet_link=magnet,
                    page_url=page_url,
                    resolution=resolution,
                    episode_title=episode_title,
                ))
        
        return torrents
    
    def _parse_raw_magnets(self, html: str, page_url: str) -> List[AnimeTorrent]:
        torrents = []
        
        for index, magnet in enumerate(self.find_magnet_links(html), start=1):
            name = self.name_from_magnet(magnet, index)
            torrents.append(self.create_torrent(
                name=name,
                magnet_link=magnet,
                page_url=page_url,
                resolution=TorrentNameParser.parse_resolution(name),
                episode_title="",
            ))
        
        return torrents
    
    @staticmethod
    def find_magnet_links(html: str) -> List[str]:
        """Return unique magnet links found anywhere in text, in order."""
        seen = {}
        for match in MAGNET_LINK.findall(html or ""):
            seen.setdefault(html_lib.unescape(match), None)
        return list(seen)
    
    @staticmethod
    def name_from_magnet(magnet_link: str, fallback_number: int) -> str:
        """Use the magnet's ``dn`` parameter as name, else ``"Episode <n>"``."""
        match = MAGNET_NAME.search(magnet_link)
        if match:
            name = TextCleaner.normalize_whitespace(unquote(match.group(1).replace('+', ' ')))
            if name:
                return name
        return f"Episode {fallback_number}"
    
    @staticmethod
    def create_torrent(
        name: str,
        magnet_link: str,
        page_url: str,
        resolution: str,
        episode_title: str
    ) -> AnimeTorrent:
        """
        Build an AnimeTorrent from a name and magnet link.
        
        The site exposes no size, peer or date information, so those fields
        carry neutral values and the date is the time of scraping.
        """
        return AnimeTorrent(
            name=name,
            date=datetime.now(timezone.utc).isoformat(),
            size=0,
            formatted_size="N/A",
            seeders=0,
            leechers=0,
            download_count=0,
            link=page_url,
            download_url="",
            magnet_link=magnet_link,
            info_hash=TorrentNameParser.extract_info_hash(magnet_link),
            resolution=TorrentNameParser.parse_resolution(name) or resolution,
            is_batch=TorrentNameParser.is_batch(name, episode_title),
            episode_number=TorrentNameParser.extract_episode_number(name, episode_title),
            release_group=TorrentNameParser.extract_release_group(name),
            is_best_release=False,
            confirmed=True,
        )


__all__ = ["DarkMahouParser"]
