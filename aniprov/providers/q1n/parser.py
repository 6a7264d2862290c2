"""
Q1N Parser - HTML parsing utilities for q1n.net

The site's theme has changed markup over time, so search results and
episode lists are located by trying several selectors in order.
"""

import logging
import re
from typing import List, Optional, Tuple

from bs4 import Tag

from aniprov.core.models import EpisodeDetails, SearchResult, SubOrDub
from aniprov.providers.common import HTMLParser, TextCleaner, URLHelper, get_attr


logger = logging.getLogger(__name__)


SEARCH_CONTAINERS = [".items .item", ".result .item", ".search-result .item", "article", ".post", ".anime-item"]
SEARCH_TITLES = [".data h3", "h3", "h2", ".title", ".name"]
SEARCH_URLS = [".poster a", "a", ".link"]

EPISODE_LISTS = ["ul.episodios2 li", "ul.episodios li", ".episodios2 li", ".episodios li", "li.episode", ".episode-list li"]
EPISODE_LINK = ".episodiotitle a"
EPISODE_NUMBER_SELECTOR = ".numerando"

EPISODE_NUMBER = re.compile(r'episodio-(\d+)')
ANIME_ID = re.compile(r'animes/([^/]+)')
EPISODE_ID = re.compile(r'episodio/([^/]+)')

DIRECT_PLAYER_HOSTS = ("blogger.com", "youtube.com", "youtu.be")


def _id_from_url(url: str, pattern: re.Pattern) -> str:
    match = pattern.search(url)
    if match:
        return match.group(1)
    return URLHelper.last_path_segment(url) or url


def anime_id_from_url(url: str) -> str:
    """Return the anime slug of an ``/animes/<slug>/`` URL."""
    return _id_from_url(url, ANIME_ID)


def episode_id_from_url(url: str) -> str:
    """Return the episode slug of an ``/episodio/<slug>/`` URL."""
    return _id_from_url(url, EPISODE_ID)


def detect_sub_or_dub(title: str) -> SubOrDub:
    """Dubbed titles carry ``dublado`` (or ``dub``) in their name."""
    lower_title = title.lower()
    if "dublado" in lower_title or "dub" in lower_title:
        return SubOrDub.DUB
    return SubOrDub.SUB


class Q1NParser:
    """Parser for q1n.net search, anime and episode pages."""
    
    def __init__(self, base_url: str = "https://q1n.net"):
        self.base_url = base_url
    
    def parse_search_results(self, html: str) -> List[SearchResult]:
        """
        Parse a search results page.
        
        Container selectors are tried in order; the first one yielding at
        least one complete result (title and anime URL) wins.
        """
        parser = HTMLParser(html, self.base_url)
        
        for selector in SEARCH_CONTAINERS:
            results = []
            for element in parser.select(selector):
                result = self._parse_search_item(element)
                if result:
                    results.append(result)
            
            if results:
                logger.debug(f"Search container '{selector}' produced {len(results)} results")
                return results
        
        return []
    
    @staticmethod
    def _parse_search_item(element: Tag) -> Optional[SearchResult]:
        title = HTMLParser.first_text(element, SEARCH_TITLES)
        url = HTMLParser.first_attr(element, SEARCH_URLS, 'href', lambda href: "/animes/" in href)
        
        if not url:
            own_href = get_attr(element, 'href')
            if "/animes/" in own_href:
                url = own_href
        
        if not title or not url:
            return None
        
        return SearchResult(
            id=anime_id_from_url(url),
            title=title,
            url=url,
            sub_or_dub=detect_sub_or_dub(title),
        )
    
    def parse_episodes(self, html: str) -> List[EpisodeDetails]:
        """
        Parse the episode list of an anime page.
        
        Returns:
            Episodes sorted by number, empty when no list is present
        """
        parser = HTMLParser(html, self.base_url)
        episodes = []
        
        for element in parser.select_first_nonempty(EPISODE_LISTS):
            episode = self._parse_episode_item(element)
            if episode:
                episodes.append(episode)
        
        return sorted(episodes, key=lambda ep: ep.number)
    
    @staticmethod
    def _parse_episode_item(element: Tag) -> Optional[EpisodeDetails]:
        link = element.select_one(EPISODE_LINK)
        url = get_attr(link, 'href') if link else ""
        if not url:
            return None
        
        match = EPISODE_NUMBER.search(url)
        if match:
            number = int(match.group(1))
        else:
            numerando = element.select_one(EPISODE_NUMBER_SELECTOR)
            # A zero or missing number counts as the first episode
            number = TextCleaner.leading_int(numerando.get_text(strip=True) if numerando else "") or 1
        
        title = link.get_text(strip=True) or f"Episódio {number}"
        
        return EpisodeDetails(
            id=episode_id_from_url(url),
            number=number,
            url=url,
            title=title,
        )
    
    @staticmethod
    def find_player_iframes(html: str) -> Tuple[List[str], List[str]]:
        """
        Find embedded player iframes on an episode page.
        
        Returns:
            ``(aviso_sources, direct_sources)``: interstitial ``/aviso/``
            iframes wrapping the real player URL, and directly embedded
            blogger/youtube players, each in document order
        """
        parser = HTMLParser(html)
        aviso, direct = [], []
        
        for iframe in parser.select('iframe[src]'):
            src = get_attr(iframe, 'src')
            if "/aviso/" in src:
                aviso.append(src)
            elif any(host in src for host in DIRECT_PLAYER_HOSTS):
                direct.append(src)
        
        return aviso, direct


__all__ = [
    "Q1NParser",
    "anime_id_from_url",
    "episode_id_from_url",
    "detect_sub_or_dub",
]
