"""
Core Layer - Models, configuration and provider management.

This module contains the host data models, the exception hierarchy,
configuration handling and the provider manager that power AniProv.
"""

from aniprov.core.config_manager import ConfigManager
from aniprov.core.config_schemas import AppSettings, SourcesConfig, SourceConfig
from aniprov.core.config_defaults import get_default_settings, get_default_sources
from aniprov.core.exceptions import (
    AniProvError,
    ConfigurationError,
    ExtractionError,
    NetworkError,
    ProviderError,
    ValidationError,
)
from aniprov.core.provider_manager import ProviderManager

__all__ = [
    # Configuration Management
    "ConfigManager",
    "AppSettings",
    "SourcesConfig",
    "SourceConfig",
    "get_default_settings",
    "get_default_sources",
    # Provider Management
    "ProviderManager",
    # Exceptions
    "AniProvError",
    "ConfigurationError",
    "ExtractionError",
    "NetworkError",
    "ProviderError",
    "ValidationError",
]
