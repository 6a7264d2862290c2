"""
AnimesROLL Parser - Data extraction for anroll.net

anroll.net is a Next.js site: anime and movie pages carry their data in the
``__NEXT_DATA__`` script, while search and episode listings come from JSON
APIs. This module turns both into host models.
"""

import json
import logging
import re
from typing import Dict, List, Optional, Any, Union

from aniprov.core.exceptions import ExtractionError
from aniprov.core.models import EpisodeDetails, SearchResult, SubOrDub
from aniprov.providers.common import HTMLParser


logger = logging.getLogger(__name__)


PAGE_PROPS = re.compile(r'"pageProps":(\{.*?\}),"page"', re.DOTALL)


def parse_episode_number(value: Any) -> Optional[Union[int, float]]:
    """Parse ``n_episodio`` values such as ``"12"`` or ``"12.5"``."""
    try:
        number = float(str(value).strip())
    except ValueError:
        return None
    return int(number) if number.is_integer() else number


class AnimesRollParser:
    """Parser for anroll.net API payloads and Next.js pages."""
    
    def __init__(
        self,
        base_url: str = "https://www.anroll.net",
        search_api_url: str = "https://apiv2-prd.anroll.net",
        cdn_url_template: str = "https://cdn-01.gamabunta.xyz/hls/animes/{slug}/{episode}.mp4/media-1/stream.m3u8"
    ):
        self.base_url = base_url
        self.search_api_url = search_api_url
        self.cdn_url_template = cdn_url_template
    
    def parse_search_results(self, data: Dict[str, Any]) -> List[SearchResult]:
        """
        Convert a search payload into results.
        
        Series get ``anime/<slug>`` ids, movies (no ``slug_serie``) get
        ``f/<generate_id>``. The site only carries subtitled releases.
        """
        results = []
        items = list(data.get("data_anime") or []) + list(data.get("data_filme") or [])
        
        for item in items:
            if not isinstance(item, dict):
                continue
            
            slug = item.get("slug_serie") or ""
            if slug:
                item_id = f"anime/{slug}"
            elif item.get("generate_id"):
                item_id = f"f/{item['generate_id']}"
            else:
                logger.debug(f"Skipping search item without slug or id: {item}")
                continue
            
            results.append(SearchResult(
                id=item_id,
                title=item.get("titulo") or item.get("nome_filme") or "",
                url=f"{self.base_url}/{item_id}",
                sub_or_dub=SubOrDub.SUB,
            ))
        
        return results
    
    @staticmethod
    def parse_next_data(html: str) -> Dict[str, Any]:
        """
        Extract ``props.pageProps.data`` from a Next.js page.
        
        Raises:
            ExtractionError: If the page carries no usable data
        """
        script = HTMLParser(html).soup.find("script", id="__NEXT_DATA__")
        raw = script.string if script and script.string else ""
        if not raw:
            raise ExtractionError("Could not find __NEXT_DATA__ script", provider_name="AnimesROLL")
        
        try:
            data = json.loads(raw)
        except ValueError:
            data = None
        
        page_data = (((data or {}).get("props") or {}).get("pageProps") or {}).get("data")
        if isinstance(page_data, dict):
            return page_data
        
        match = PAGE_PROPS.search(raw)
        if match:
            try:
                page_data = json.loads(match.group(1)).get("data")
            except ValueError:
                page_data = None
            if isinstance(page_data, dict):
                return page_data
        
        raise ExtractionError("Could not parse page data structure", provider_name="AnimesROLL")
    
    def build_movie_episodes(self, data: Dict[str, Any]) -> List[EpisodeDetails]:
        """A movie is a single ``Filme`` episode served as MP4 by its ``od`` key."""
        movie = data.get("data_movie") if isinstance(data.get("data_movie"), dict) else data
        od = movie.get("od")
        if not od:
            logger.debug("Movie page has no 'od' key, no playable file")
            return []
        
        return [EpisodeDetails(
            id=f"{od}/filme",
            number=1,
            url=f"{self.search_api_url}/od/{od}/filme.mp4",
            title="Filme",
        )]
    
    def build_series_episodes(self, anime: Dict[str, Any], episodes: List[Dict[str, Any]]) -> List[EpisodeDetails]:
        """Turn episode API items into HLS episodes, sorted by number."""
        slug = anime.get("slug_serie") or ""
        results = []
        
        for item in episodes:
            if not isinstance(item, dict):
                continue
            raw_number = str(item.get("n_episodio", "")).strip()
            number = parse_episode_number(raw_number)
            if number is None:
                logger.debug(f"Skipping episode with invalid number: {raw_number!r}")
                continue
            
            results.append(EpisodeDetails(
                id=f"{slug}/{raw_number}",
                number=number,
                url=self.cdn_url_template.format(slug=slug, episode=raw_number),
                title=f"Episódio #{raw_number}",
            ))
        
        return sorted(results, key=lambda ep: ep.number)
