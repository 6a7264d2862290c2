"""
Q1N Provider Configuration

This module handles configuration validation and defaults for the Q1N provider.
"""

import logging
from typing import Dict, Any, List, Optional
from pydantic import BaseModel, Field, field_validator


logger = logging.getLogger(__name__)


SUPPORTED_SERVERS = ["chplay", "ruplay"]
DEFAULT_SERVER = "chplay"
DEFAULT_QUALITY = "1080p"
MAX_EPISODES_SCAN = 50

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
)


class Q1NConfig(BaseModel):
    """Configuration model for Q1N provider."""
    
    enabled: bool = Field(default=True, description="Enable/disable the provider")
    priority: int = Field(default=2, description="Provider priority (lower = higher priority)")
    timeout: int = Field(default=10, description="Request timeout in seconds")
    player_timeout: int = Field(default=5, description="Timeout for player and CDN pages")
    probe_timeout: int = Field(default=3, description="Timeout for HEAD probes of stream URLs")
    base_url: str = Field(default="https://q1n.net", description="Site base URL")
    disney_base_url: str = Field(default="https://disneycdn.net", description="ChPlay CDN base URL")
    max_episodes_scan: int = Field(default=MAX_EPISODES_SCAN, description="Episode pages probed when the anime page has no list")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User agent string for requests")
    
    @field_validator('timeout', 'player_timeout', 'probe_timeout')
    @classmethod
    def validate_timeout(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Timeouts must be at least 1 second")
        return v
    
    @field_validator('max_episodes_scan')
    @classmethod
    def validate_max_episodes_scan(cls, v: int) -> int:
        if v < 1:
            raise ValueError("Episode scan limit must be at least 1")
        return v
    
    @field_validator('base_url', 'disney_base_url')
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(('http://', 'https://')):
            raise ValueError("URLs must start with http:// or https://")
        return v.rstrip('/')


def get_default_config() -> Dict[str, Any]:
    """Get default configuration for Q1N provider."""
    return Q1NConfig().model_dump()


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


def load_config(config: Optional[Dict[str, Any]] = None) -> Q1NConfig:
    """Build a validated config, falling back to defaults when overrides are invalid."""
    try:
        return Q1NConfig(**merge_with_defaults(config))
    except ValueError as e:
        logger.warning(f"Invalid Q1N configuration, using defaults: {e}")
        return Q1NConfig()
