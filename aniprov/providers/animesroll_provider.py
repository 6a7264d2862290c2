"""
AnimesROLL Provider Entry Point

This module serves as the entry point for the AnimesROLL provider,
importing the provider class from the animesroll subdirectory.
"""

from aniprov.providers.animesroll.provider import AnimesRollProvider

# Export the provider class for discovery
__all__ = ["AnimesRollProvider"]
