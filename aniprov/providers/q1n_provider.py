"""
Q1N Provider Entry Point

This module serves as the entry point for the Q1N provider,
importing the provider class from the q1n subdirectory.
"""

from aniprov.providers.q1n.provider import Q1NProvider

# Export the provider class for discovery
__all__ = ["Q1NProvider"]
