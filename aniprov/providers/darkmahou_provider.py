"""
DarkMahou Provider Entry Point

This module serves as the entry point for the DarkMahou provider,
importing the provider class from the darkmahou subdirectory.
"""

from aniprov.providers.darkmahou.provider import DarkMahouProvider

# Export the provider class for discovery
__all__ = ["DarkMahouProvider"]
