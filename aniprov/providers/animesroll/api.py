"""
AnimesROLL API Client

This module handles the JSON API calls of anroll.net: search on the v2 API
and paginated episode listings on the v3 API.
"""

import logging
from typing import Dict, List, Any

from aniprov.core.exceptions import NetworkError
from aniprov.providers.common import URLHelper


logger = logging.getLogger(__name__)


class AnimesRollAPI:
    """Client for the anroll.net JSON APIs."""
    
    def __init__(
        self,
        client,
        search_api_url: str = "https://apiv2-prd.anroll.net",
        episodes_api_url: str = "https://apiv3-prd.anroll.net"
    ):
        """
        Initialize AnimesROLL API client.
        
        Args:
            client: Provider whose fetch helpers are used for requests
            search_api_url: Base URL of the search API
            episodes_api_url: Base URL of the episodes API
        """
        self.client = client
        self.search_api_url = search_api_url
        self.episodes_api_url = episodes_api_url
    
    async def search(self, query: str) -> Dict[str, Any]:
        """
        Search animes and movies.
        
        Returns:
            Raw payload with ``data_anime`` and ``data_filme`` lists
            
        Raises:
            NetworkError: If the request fails
        """
        url = f"{self.search_api_url}/search?q={URLHelper.encode_component(query)}"
        data = await self.client._get_json(url)
        return data if isinstance(data, dict) else {}
    
    async def fetch_episode_page(self, generate_id: str, page: int = 1) -> Dict[str, Any]:
        """
        Fetch one page of a series' episodes, newest first.
        
        Raises:
            NetworkError: If the request fails
        """
        url = f"{self.episodes_api_url}/animes/{generate_id}/episodes?page={page}&order=desc"
        data = await self.client._get_json(url)
        return data if isinstance(data, dict) else {}
    
    async def fetch_all_episodes(self, generate_id: str) -> List[Dict[str, Any]]:
        """
        Fetch every episode page of a series.
        
        Pagination follows ``meta.totalOfPages``; a failing page ends the
        listing and the episodes collected so far are returned.
        """
        episodes: List[Dict[str, Any]] = []
        page = 1
        
        while True:
            try:
                data = await self.fetch_episode_page(generate_id, page)
            except NetworkError as e:
                logger.warning(f"Failed to fetch episodes page {page} for {generate_id}: {e}")
                break
            
            items = data.get("data")
            if isinstance(items, list):
                episodes.extend(items)
            
            meta = data.get("meta")
            total_pages = meta.get("totalOfPages") if isinstance(meta, dict) else 0
            if not isinstance(total_pages, int) or total_pages <= page:
                break
            page += 1
        
        logger.debug(f"Fetched {len(episodes)} episodes across {page} pages for {generate_id}")
        return episodes
