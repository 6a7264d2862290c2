"""
MangaLivre Provider Configuration

This module handles configuration validation and defaults for the MangaLivre provider.
"""

import logging
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)


class MangaLivreConfig(BaseModel):
    """Configuration model for MangaLivre provider."""
    
    enabled: bool = Field(default=True, description="Enable/disable the provider")
    priority: int = Field(default=4, description="Provider priority (lower = higher priority)")
    timeout: int = Field(default=30, description="Request timeout in seconds")
    base_url: str = Field(default="https://mangalivre.tv", description="Site base URL")
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36",
        description="User agent sent with requests and page image headers"
    )
    ajax_user_agent: str = Field(default="Mozilla/5.0", description="User agent of the chapter list AJAX call")
    language: str = Field(default="pt-BR", description="Language tag of chapters")
    
    @field_validator('timeout')
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v < 5:
            raise ValueError("Timeout must be at least 5 seconds")
        return v
    
    @field_validator('base_url')
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        if not v.startswith(('http://', 'https://')):
            raise ValueError("Base URL must start with http:// or https://")
        return v.rstrip('/')


def get_default_config() -> Dict[str, Any]:
    """Get default configuration for MangaLivre provider."""
    return MangaLivreConfig().model_dump()


def merge_with_defaults(config: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge provided config with defaults.
    
    Args:
        config: User configuration dictionary
        
    Returns:
        Merged configuration dictionary
    """
    merged = get_default_config()
    if config:
        merged.update(config)
    return merged


def load_config(config: Optional[Dict[str, Any]] = None) -> MangaLivreConfig:
    """Build a validated config, falling back to defaults when overrides are invalid."""
    try:
        return MangaLivreConfig(**merge_with_defaults(config))
    except ValueError as e:
        logger.warning(f"Invalid MangaLivre configuration, using defaults: {e}")
        return MangaLivreConfig()
