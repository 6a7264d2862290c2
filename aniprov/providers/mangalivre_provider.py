"""
MangaLivre Provider Entry Point

This module serves as the entry point for the MangaLivre provider,
importing the provider class from the mangalivre subdirectory.
"""

from aniprov.providers.mangalivre.provider import MangaLivreProvider

# Export the provider class for discovery
__all__ = ["MangaLivreProvider"]
