"""
Configuration Defaults - Default configuration templates.

This module provides the default settings and the registration of the
built-in providers written to a fresh configuration directory.
"""

from aniprov.core.config_schemas import AppSettings, SourcesConfig, SourceConfig


BUILTIN_SOURCES = {
    "darkmahou": SourceConfig(
        enabled=True,
        priority=1,
        name="DarkMahou",
        description="Anime torrents from darkmahou.org",
        config={"base_url": "https://darkmahou.org"},
    ),
    "q1n": SourceConfig(
        enabled=True,
        priority=2,
        name="Q1N",
        description="Subbed and dubbed anime streaming from q1n.net",
        config={"base_url": "https://q1n.net"},
    ),
    "animesroll": SourceConfig(
        enabled=True,
        priority=3,
        name="AnimesROLL",
        description="Subtitled anime series and movies from anroll.net",
        config={"base_url": "https://www.anroll.net"},
    ),
    "mangalivre": SourceConfig(
        enabled=True,
        priority=4,
        name="MangaLivre",
        description="Portuguese manga chapters from mangalivre.tv",
        config={"base_url": "https://mangalivre.tv"},
    ),
}


def get_default_settings() -> AppSettings:
    """
    Get default application settings.
    
    Returns:
        AppSettings instance with sensible defaults
    """
    return AppSettings()


def get_default_sources() -> SourcesConfig:
    """
    Get default sources configuration with every built-in provider enabled.
    
    Returns:
        SourcesConfig instance
    """
    sources_config = SourcesConfig()
    
    for name, source in BUILTIN_SOURCES.items():
        sources_config.add_source(name, source.model_copy(deep=True))
    
    return sources_config


# Export utility functions
__all__ = [
    "BUILTIN_SOURCES",
    "get_default_settings",
    "get_default_sources",
]
