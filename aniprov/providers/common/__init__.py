"""
Common utilities for provider development.

This package contains shared utilities and helper functions
used across multiple providers.
"""

from .utils import (
    HTMLParser,
    URLHelper,
    TextCleaner,
    get_attr,
)

__all__ = [
    "HTMLParser",
    "URLHelper",
    "TextCleaner",
    "get_attr",
]
