"""
Configuration Schemas - Pydantic models for configuration validation.

This module defines the data structures and validation rules for
application settings and provider configurations using Pydantic models.
"""

import logging
from typing import Any, Dict, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


logger = logging.getLogger(__name__)


class NetworkSettings(BaseModel):
    """Network defaults applied to providers without their own overrides."""
    
    timeout: Optional[int] = Field(
        default=None,
        ge=1,
        le=300,
        description="Network timeout in seconds overriding every provider's default"
    )
    user_agent: Optional[str] = Field(
        default=None,
        description="User agent overriding every provider's default"
    )


class LoggingSettings(BaseModel):
    """Logging configuration settings."""
    
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="WARNING",
        description="Logging level"
    )
    
    @field_validator('level', mode='before')
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept lowercase level names."""
        return v.upper() if isinstance(v, str) else v


class DisplaySettings(BaseModel):
    """Command line output settings."""
    
    max_rows: int = Field(
        default=50,
        ge=1,
        le=1000,
        description="Maximum rows shown in result tables"
    )
    show_urls: bool = Field(
        default=True,
        description="Whether result tables include URL columns"
    )


class AppSettings(BaseModel):
    """Main application settings container."""
    
    network: NetworkSettings = Field(default_factory=NetworkSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    display: DisplaySettings = Field(default_factory=DisplaySettings)


class SourceConfig(BaseModel):
    """Configuration for an individual content provider."""
    
    enabled: bool = Field(
        default=True,
        description="Whether the provider is enabled"
    )
    priority: int = Field(
        default=1,
        ge=1,
        le=100,
        description="Provider priority (lower numbers = higher priority)"
    )
    name: Optional[str] = Field(
        default=None,
        description="Display name for the provider"
    )
    description: Optional[str] = Field(
        default=None,
        description="Description of the provider"
    )
    config: Dict[str, Any] = Field(
        default_factory=dict,
        description="Provider-specific configuration"
    )
    
    @field_validator('config')
    @classmethod
    def validate_config(cls, v: Dict[str, Any]) -> Dict[str, Any]:
        """Validate the keys every provider understands."""
        if 'timeout' in v and (not isinstance(v['timeout'], int) or v['timeout'] < 1):
            raise ValueError("timeout must be a positive integer")
        
        if 'base_url' in v and not str(v['base_url']).startswith(('http://', 'https://')):
            raise ValueError("base_url must start with http:// or https://")
        
        return v


class GlobalSourceConfig(BaseModel):
    """Global configuration for provider management."""
    
    auto_discover: bool = Field(
        default=True,
        description="Whether to automatically discover provider modules"
    )


class SourcesConfig(BaseModel):
    """Sources configuration container."""
    
    sources: Dict[str, SourceConfig] = Field(
        default_factory=dict,
        description="Individual provider configurations"
    )
    global_config: GlobalSourceConfig = Field(
        default_factory=GlobalSourceConfig,
        description="Global provider management settings"
    )
    
    @model_validator(mode='after')
    def validate_source_priorities(self) -> 'SourcesConfig':
        """Warn about duplicate priorities without failing validation."""
        priorities = {}
        for name, config in self.sources.items():
            if config.priority in priorities:
                logger.warning(
                    f"Duplicate priority {config.priority} for sources "
                    f"{name} and {priorities[config.priority]}"
                )
            priorities[config.priority] = name
        
        return self
    
    def get_enabled_sources(self) -> Dict[str, SourceConfig]:
        """Get all enabled sources sorted by priority."""
        enabled = {
            name: config for name, config in self.sources.items()
            if config.enabled
        }
        
        return dict(sorted(
            enabled.items(),
            key=lambda item: item[1].priority
        ))
    
    def add_source(self, name: str, config: SourceConfig) -> None:
        """Add a new source configuration."""
        self.sources[name] = config
    
    def get_source(self, name: str) -> Optional[SourceConfig]:
        """Get configuration for a specific source."""
        return self.sources.get(name)


# Export all configuration models
__all__ = [
    "NetworkSettings",
    "LoggingSettings",
    "DisplaySettings",
    "AppSettings",
    "SourceConfig",
    "GlobalSourceConfig",
    "SourcesConfig",
]
