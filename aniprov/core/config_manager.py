"""
Configuration Manager - JSON-based settings and provider configuration management.

This module provides centralized configuration management for AniProv,
handling user preferences and provider settings with validation, atomic
persistence and default value management.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union
from threading import Lock

from pydantic import ValidationError

from aniprov.core.config_defaults import get_default_settings, get_default_sources
from aniprov.core.config_schemas import AppSettings, SourcesConfig, SourceConfig
from aniprov.core.exceptions import ConfigurationError


logger = logging.getLogger(__name__)


class ConfigManager:
    """
    Manages application configuration with JSON persistence and validation.
    
    Provides thread-safe access to ``settings.json`` and ``sources.json``.
    Missing files are created with defaults; unreadable files are moved
    aside to ``*.json.backup`` and replaced with defaults.
    """
    
    def __init__(self, config_dir: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.
        
        Args:
            config_dir: Directory containing configuration files.
                       Defaults to './config' if not specified.
        """
        self.config_dir = Path(config_dir or "config")
        try:
            self.config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ConfigurationError(
                f"Cannot create configuration directory: {e}",
                config_path=str(self.config_dir)
            )
        
        self._settings_file = self.config_dir / "settings.json"
        self._sources_file = self.config_dir / "sources.json"
        
        # Thread-safe access to configuration data
        self._lock = Lock()
        self._settings: Optional[AppSettings] = None
        self._sources: Optional[SourcesConfig] = None
        
        self._load_configurations()
    
    def _load_configurations(self) -> None:
        """Load all configuration files."""
        self._settings = self._load_file(self._settings_file, AppSettings, get_default_settings)
        self._sources = self._load_file(self._sources_file, SourcesConfig, get_default_sources)
        logger.debug("Configuration loaded successfully")
    
    def _load_file(self, path: Path, model, default_factory):
        """Load and validate one configuration file, recovering from corruption."""
        if not path.exists():
            logger.info(f"{path.name} not found, creating default configuration")
            value = default_factory()
            self._save_file(path, value)
            return value
        
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            return model.model_validate(data)
        except (json.JSONDecodeError, UnicodeDecodeError, ValidationError) as e:
            logger.warning(f"Invalid {path.name}, using defaults: {e}")
            backup_path = path.with_suffix('.json.backup')
            path.replace(backup_path)
            logger.info(f"Corrupted {path.name} backed up to {backup_path}")
            
            value = default_factory()
            self._save_file(path, value)
            return value
    
    def _save_file(self, path: Path, value) -> None:
        """Save a configuration model with an atomic write."""
        temp_file = path.with_suffix('.tmp')
        try:
            with open(temp_file, 'w', encoding='utf-8') as f:
                json.dump(value.model_dump(), f, indent=2, ensure_ascii=False)
            temp_file.replace(path)
            logger.debug(f"{path.name} saved successfully")
        except OSError as e:
            if temp_file.exists():
                temp_file.unlink()
            raise ConfigurationError(f"Failed to save {path.name}: {e}", config_path=str(path))
    
    @property
    def settings(self) -> AppSettings:
        """Get current application settings (thread-safe)."""
        with self._lock:
            if self._settings is None:
                self._settings = self._load_file(self._settings_file, AppSettings, get_default_settings)
            return self._settings
    
    @property
    def sources(self) -> SourcesConfig:
        """Get current sources configuration (thread-safe)."""
        with self._lock:
            if self._sources is None:
                self._sources = self._load_file(self._sources_file, SourcesConfig, get_default_sources)
            return self._sources
    
    def update_source(self, source_name: str, changes: Dict[str, Any]) -> SourceConfig:
        """
        Update configuration for a specific source.
        
        Args:
            source_name: Name of the provider
            changes: Fields of SourceConfig to change
            
        Returns:
            The updated source configuration
            
        Raises:
            ConfigurationError: If the resulting configuration is invalid
        """
        with self._lock:
            if self._sources is None:
                raise ConfigurationError("Sources configuration not loaded")
            
            sources_dict = self._sources.model_dump()
            sources_dict['sources'].setdefault(source_name, {}).update(changes)
            
            try:
                updated_sources = SourcesConfig.model_validate(sources_dict)
            except ValidationError as e:
                raise ConfigurationError(
                    f"Invalid source configuration: {e}",
                    config_path=str(self._sources_file)
                )
            
            self._save_file(self._sources_file, updated_sources)
            self._sources = updated_sources
            logger.info(f"Source configuration updated: {source_name}")
            return updated_sources.sources[source_name]
    
    def set_source_enabled(self, source_name: str, enabled: bool) -> SourceConfig:
        """Enable or disable a provider."""
        return self.update_source(source_name, {"enabled": enabled})
    
    def get_provider_config(self, source_name: str) -> Dict[str, Any]:
        """
        Build the configuration dictionary handed to a provider.
        
        Network settings apply first and the source's own ``config`` wins.
        """
        network = self.settings.network
        config: Dict[str, Any] = {}
        if network.timeout is not None:
            config['timeout'] = network.timeout
        if network.user_agent:
            config['user_agent'] = network.user_agent
        
        source = self.sources.get_source(source_name)
        if source is not None:
            config.update(source.config)
        return config
    
    def get_enabled_sources(self) -> Dict[str, SourceConfig]:
        """Get all enabled source configurations sorted by priority."""
        return self.sources.get_enabled_sources()
    
    def reload_configuration(self) -> None:
        """Reload configuration from files."""
        with self._lock:
            logger.info("Reloading configuration from files")
            self._load_configurations()
    
    def validate_configuration(self) -> Dict[str, Any]:
        """
        Validate current configuration and return validation report.
        
        Returns:
            Dictionary containing validation results and any issues found
        """
        report = {
            "valid": True,
            "issues": [],
            "warnings": []
        }
        
        for label, value, model in (
            ("Settings", self._settings, AppSettings),
            ("Sources", self._sources, SourcesConfig),
        ):
            if value is None:
                report["valid"] = False
                report["issues"].append(f"{label} not loaded")
                continue
            try:
                model.model_validate(value.model_dump())
            except ValidationError as e:
                report["valid"] = False
                report["issues"].append(f"{label} validation failed: {e}")
        
        if not self.get_enabled_sources():
            report["warnings"].append("No sources are enabled")
        
        return report


# Export configuration manager
__all__ = ["ConfigManager"]
