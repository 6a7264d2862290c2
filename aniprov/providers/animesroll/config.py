"""
AnimesROLL Provider Configuration

This module handles configuration validation and defaults for the AnimesROLL provider.
"""

import logging
from typing import Dict, Any, Optional
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)


DEFAULT_SERVER = "default"
DEFAULT_QUALITY = "HD"


class AnimesRollConfig(BaseModel):
    """Configuration model for AnimesROLL provider."""
    
    enabled: bool = Field(default=True, description="Enable/disable the provider")
    priority: int = Field(default=3, description="Provider priority (lower = higher priority)")
    timeout: int = Field(default=30, description="Request timeout in seconds")
    base_url: str = Field(default="https://www.anroll.net", description="Site base URL")
    search_api_url: str = Field(default="https://apiv2-prd.anroll.net", description="Search and movie API base URL")
    episodes_api_url: str = Field(default="https://apiv3-prd.anroll.net", description="Episode listing API base URL")
    cdn_url_template: str = Field(
        default="https://cdn-01.gamabunta.xyz/hls/animes/{slug}/{episode}.mp4/media-1/stream.m3u8",
        description="HLS stream URL template for series episodes"
    )
    user_agent: str = Field(
        default="Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
        description="User agent string for requests"
    )
    
    @field_validator('timeout')
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v < 5:
            raise ValueError("Timeout must be at least 5 seconds")
        return v
    
    @field_validator('base_url', 'search_api_url', 'episodes_api_url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(('http://', 'https://')):
            raise ValueError("URLs must start with http:// or https://")
        return v.rstrip('/')
    
    @field_validator('cdn_url_template')
    @classmethod
    def validate_cdn_template(cls, v: str) -> str:
        if '{slug}' not in v or '{episode}' not in v:
            raise ValueError("CDN template must contain {slug} and {episode}")
        return v


def get_default_config() -> Dict[str, Any]:
    """Get default configuration for AnimesROLL provider."""
    return AnimesRollConfig().model_dump()


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


def load_config(config: Optional[Dict[str, Any]] = None) -> AnimesRollConfig:
    """Build a validated config, falling back to defaults when overrides are invalid."""
    try:
        return AnimesRollConfig(**merge_with_defaults(config))
    except ValueError as e:
        logger.warning(f"Invalid AnimesROLL configuration, using defaults: {e}")
        return AnimesRollConfig()
