"""
Provider Utilities - Common helpers for provider development.

This module provides the parsing helpers shared by all providers: a
BeautifulSoup wrapper with multi-selector fallback, URL manipulation and
text normalisation.
"""

import re
import logging
from typing import Callable, List, Optional, Sequence
from urllib.parse import urljoin, urlparse, parse_qs, quote

from bs4 import BeautifulSoup, Tag


logger = logging.getLogger(__name__)


class HTMLParser:
    """Utility class for HTML parsing operations."""
    
    def __init__(self, html_content: str, base_url: str = ""):
        """
        Initialize HTML parser.
        
        Args:
            html_content: HTML content to parse
            base_url: Base URL for resolving relative links
        """
        self.soup = BeautifulSoup(html_content or "", 'html.parser')
        self.base_url = base_url
    
    def select(self, selector: str) -> List[Tag]:
        """Return all elements matching a CSS selector."""
        return self.soup.select(selector)
    
    def select_first_nonempty(self, selectors: Sequence[str]) -> List[Tag]:
        """
        Try selectors in order and return the elements of the first that matches.
        
        Args:
            selectors: CSS selectors, most specific first
            
        Returns:
            Matching elements, or an empty list when no selector matches
        """
        for selector in selectors:
            elements = self.soup.select(selector)
            if elements:
                logger.debug(f"Selector '{selector}' matched {len(elements)} elements")
                return elements
        return []
    
    @staticmethod
    def first_text(element: Tag, selectors: Sequence[str]) -> str:
        """Return the first non-empty text found under any of the selectors."""
        for selector in selectors:
            found = element.select_one(selector)
            if found is None:
                continue
            text = TextCleaner.normalize_whitespace(found.get_text(" ", strip=True))
            if text:
                return text
        return ""
    
    @staticmethod
    def first_attr(
        element: Tag,
        selectors: Sequence[str],
        attr: str,
        predicate: Optional[Callable[[str], bool]] = None
    ) -> str:
        """
        Return the first attribute value under the selectors that passes predicate.
        
        Args:
            element: Element to search within
            selectors: CSS selectors tried in order
            attr: Attribute name
            predicate: Optional filter applied to candidate values
            
        Returns:
            Attribute value or empty string
        """
        for selector in selectors:
            for found in element.select(selector):
                value = get_attr(found, attr)
                if value and (predicate is None or predicate(value)):
                    return value
        return ""
    
    def find_text(self, selector: str, default: str = "") -> str:
        """
        Find text content using CSS selector.
        
        Args:
            selector: CSS selector string
            default: Default value if element not found
            
        Returns:
            Text content or default value
        """
        element = self.soup.select_one(selector)
        if element:
            return element.get_text(strip=True)
        return default
    
    def find_attr(self, selector: str, attr: str, default: str = "") -> str:
        """
        Find attribute value using CSS selector.
        
        Relative ``href``/``src`` values are resolved against ``base_url``.
        """
        element = self.soup.select_one(selector)
        if element and element.has_attr(attr):
            value = get_attr(element, attr)
            if attr in ['href', 'src'] and self.base_url and value:
                return urljoin(self.base_url, value)
            return value
        return default


def get_attr(element: Tag, attr: str) -> str:
    """Return a stripped attribute value, flattening list attributes."""
    value = element.get(attr)
    # Handle case where BeautifulSoup returns a list
    if isinstance(value, list):
        value = value[0] if value else ""
    return (value or "").strip()


class URLHelper:
    """Utility class for URL manipulation and validation."""
    
    @staticmethod
    def is_absolute(url: str) -> bool:
        """Check if URL is absolute."""
        return bool(urlparse(url).netloc)
    
    @staticmethod
    def make_absolute(url: str, base_url: str) -> str:
        """Convert relative URL to absolute."""
        if URLHelper.is_absolute(url):
            return url
        return urljoin(base_url, url)
    
    @staticmethod
    def origin(url: str) -> str:
        """Return ``scheme://host[:port]`` of a URL."""
        parsed = urlparse(url)
        return f"{parsed.scheme}://{parsed.netloc}"
    
    @staticmethod
    def get_query_param(url: str, param: str, default: str = "") -> str:
        """Extract query parameter from URL."""
        parsed = urlparse(url)
        params = parse_qs(parsed.query)
        return params.get(param, [default])[0]
    
    @staticmethod
    def last_path_segment(url: str) -> str:
        """Return the last non-empty path segment of a URL."""
        segments = [part for part in urlparse(url).path.split('/') if part]
        return segments[-1] if segments else ""
    
    @staticmethod
    def fix_protocol_relative(url: str) -> str:
        """Prefix ``//host/...`` URLs with ``https:``."""
        if url.startswith('//'):
            return f"https:{url}"
        return url
    
    @staticmethod
    def encode_component(value: str) -> str:
        """Percent-encode a value for use inside a query string."""
        return quote(value, safe='')


class TextCleaner:
    """Utility class for cleaning and normalizing text content."""
    
    @staticmethod
    def normalize_whitespace(text: str) -> str:
        """Collapse whitespace runs into single spaces and strip."""
        if not text:
            return ""
        return re.sub(r'\s+', ' ', text).strip()
    
    @staticmethod
    def leading_int(text: str) -> Optional[int]:
        """
        Parse the integer at the start of text.
        
        Args:
            text: Text such as ``"12 - 3"`` or ``"7"``
            
        Returns:
            The leading integer, or None when text does not start with a digit
        """
        match = re.match(r'\s*(\d+)', text or "")
        if match:
            return int(match.group(1))
        return None
    
    @staticmethod
    def parse_decimal(text: str) -> Optional[float]:
        """Parse a number accepting a comma as decimal separator."""
        try:
            return float((text or "").strip().replace(',', '.'))
        except ValueError:
            return None


# Export utility classes and functions
__all__ = [
    "HTMLParser",
    "URLHelper",
    "TextCleaner",
    "get_attr",
]
