"""
DarkMahou Torrent Name Parser

Heuristics that infer metadata from release names such as
``"[Group] Show - 05 [1080p]"``: info hash, resolution, release group,
batch detection and episode number.
"""

import re


MIN_EPISODE_NUMBER = 1
MAX_EPISODE_NUMBER = 9999
MAX_BATCH_EPISODE = 999
# Bare numbers at or above this are treated as years
MAX_ISOLATED_NUMBER = 2000
COMMON_RESOLUTIONS = (480, 720, 1080)
VALID_RESOLUTIONS = ("480p", "720p", "1080p", "1440p")

INFO_HASH = re.compile(r'btih:([a-fA-F0-9]{40})', re.IGNORECASE)
RESOLUTION = re.compile(r'\b(\d{3,4}p)\b', re.IGNORECASE)
RELEASE_GROUP = re.compile(r'^\[([^\]]+)\]')
EPISODE_RANGE = re.compile(r'\b(\d{2,3})\s*[-~]\s*(\d{2,3})\b')
SEASON_ONLY = re.compile(r'\bs\d+\b')
SEASON_WITH_EPISODE = re.compile(r'\bs\d+e\d+\b')
SEASON_EPISODE = re.compile(r'S(\d+)E(\d+)', re.IGNORECASE)
EPISODE_DASH = re.compile(r'\s-\s(\d{1,4})\s')
EPISODE_PORTUGUESE = re.compile(r'episódio\s+(\d+)', re.IGNORECASE)
EPISODE_ENGLISH = re.compile(r'(?:ep|episode)\s*(\d+)', re.IGNORECASE)
ISOLATED_NUMBER = re.compile(r'\b(\d{1,4})\b')


def _valid_episode(number: int) -> bool:
    return MIN_EPISODE_NUMBER <= number <= MAX_EPISODE_NUMBER


class TorrentNameParser:
    """Static helpers extracting metadata from torrent names and magnet links."""
    
    @staticmethod
    def extract_info_hash(magnet_link: str) -> str:
        """Return the 40 character btih hash of a magnet link, or ``""``."""
        if not magnet_link or not magnet_link.startswith("magnet:?") or len(magnet_link) <= 20:
            return ""
        
        match = INFO_HASH.search(magnet_link)
        return match.group(1) if match else ""
    
    @staticmethod
    def parse_resolution(name: str) -> str:
        """Return the first known resolution tag (e.g. ``"1080p"``) in name, or ``""``."""
        match = RESOLUTION.search(name or "")
        if not match:
            return ""
        
        resolution = match.group(1).lower()
        return resolution if resolution in VALID_RESOLUTIONS else ""
    
    @staticmethod
    def extract_release_group(name: str) -> str:
        """Return the leading ``[Group]`` of a release name, or ``""``."""
        match = RELEASE_GROUP.search(name or "")
        return match.group(1) if match else ""
    
    @staticmethod
    def is_batch(name: str, episode_title: str = "") -> bool:
        """
        Decide whether a release covers several episodes.
        
        Args:
            name: Torrent name
            episode_title: Heading of the block the torrent was listed under
            
        Returns:
            True for explicit batch wording, episode ranges and season-only tags
        """
        lower_name = (name or "").lower()
        
        if "batch" in lower_name or "complete" in lower_name or "~" in (episode_title or ""):
            return True
        
        range_match = EPISODE_RANGE.search(name or "")
        if range_match:
            start, end = int(range_match.group(1)), int(range_match.group(2))
            if end > start and start >= MIN_EPISODE_NUMBER and end <= MAX_BATCH_EPISODE:
                return True
        
        if SEASON_ONLY.search(lower_name) and not SEASON_WITH_EPISODE.search(lower_name):
            return True
        
        return False
    
    @staticmethod
    def extract_episode_number(name: str, episode_title: str = "") -> int:
        """
        Infer the episode number of a single-episode release.
        
        Strategies, first valid (1..9999) hit wins: ``episódio N`` in the
        block heading, ``" - N "`` in the name, ``SxxEyy``, ``ep N`` /
        ``episode N``, then any isolated number that is not a common
        resolution or a year.
        
        Returns:
            Episode number, or -1 for batches and unrecognised names
        """
        name = name or ""
        episode_title = episode_title or ""
        
        if TorrentNameParser.is_batch(name, episode_title):
            return -1
        
        for text, pattern in (
            (episode_title, EPISODE_PORTUGUESE),
            (name, EPISODE_DASH),
        ):
            match = pattern.search(text)
            if match and _valid_episode(int(match.group(1))):
                return int(match.group(1))
        
        match = SEASON_EPISODE.search(name)
        if match and _valid_episode(int(match.group(2))):
            return int(match.group(2))
        
        match = EPISODE_ENGLISH.search(name)
        if match and _valid_episode(int(match.group(1))):
            return int(match.group(1))
        
        for candidate in ISOLATED_NUMBER.findall(name):
            number = int(candidate)
            if (_valid_episode(number)
                    and number not in COMMON_RESOLUTIONS
                    and number < MAX_ISOLATED_NUMBER):
                return number
        
        return -1


__all__ = ["TorrentNameParser"]
