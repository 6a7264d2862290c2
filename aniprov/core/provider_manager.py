"""
Provider Manager - Dynamic provider discovery and management system.

This module handles the discovery, loading and management of content
providers, giving the command line a single place to obtain a configured
provider by name and kind.
"""

import asyncio
import importlib
import inspect
import logging
from pathlib import Path
from typing import Dict, Optional, Type, Any

from aniprov.core.config_manager import ConfigManager
from aniprov.core.exceptions import ProviderError
from aniprov.providers.base import (
    AnimeTorrentProvider,
    BaseProvider,
    MangaProvider,
    OnlineStreamingProvider,
    ProviderKind,
)


logger = logging.getLogger(__name__)


ENTRY_MODULE_SUFFIX = "_provider"
EXCLUDED_MODULES = {"__init__", "base"}


class ProviderManager:
    """
    Manages content providers with dynamic discovery and loading.
    
    Entry modules named ``<name>_provider.py`` in the providers package are
    imported and their concrete BaseProvider subclass is registered as
    ``<name>``. Providers are instantiated on first use with the
    configuration of the matching source.
    """
    
    def __init__(self, config_manager: ConfigManager, providers_dir: Optional[Path] = None):
        """
        Initialize provider manager.
        
        Args:
            config_manager: Configuration manager instance
            providers_dir: Directory containing provider entry modules
                          (defaults to the aniprov.providers package)
        """
        self.config_manager = config_manager
        self.providers_dir = providers_dir or Path(__file__).parent.parent / "providers"
        self.package = "aniprov.providers"
        
        self._available_providers: Dict[str, Type[BaseProvider]] = {}
        self._loaded_providers: Dict[str, BaseProvider] = {}
        self._provider_errors: Dict[str, Exception] = {}
        
        self._discovery_complete = False
    
    @staticmethod
    def provider_name(module_stem: str) -> str:
        """Map an entry module name (``q1n_provider``) to its provider name (``q1n``)."""
        if module_stem.endswith(ENTRY_MODULE_SUFFIX):
            return module_stem[:-len(ENTRY_MODULE_SUFFIX)]
        return module_stem
    
    def discover_providers(self) -> None:
        """
        Discover available providers in the providers directory.
        
        Import failures are recorded per module and do not stop discovery.
        """
        if not self.providers_dir.exists():
            logger.warning(f"Providers directory does not exist: {self.providers_dir}")
            return
        
        logger.debug(f"Discovering providers in {self.providers_dir}")
        
        self._available_providers.clear()
        self._provider_errors.clear()
        
        module_files = sorted(
            f for f in self.providers_dir.glob("*.py")
            if f.stem not in EXCLUDED_MODULES
        )
        
        for module_file in module_files:
            name = self.provider_name(module_file.stem)
            try:
                provider_class = self._discover_provider_module(module_file.stem)
            except ImportError as e:
                self._provider_errors[name] = e
                logger.error(f"Failed to import provider module {module_file.stem}: {e}")
                continue
            
            if provider_class is None:
                logger.warning(f"No provider class found in {module_file}")
                continue
            
            self._available_providers[name] = provider_class
            logger.debug(f"Discovered provider: {name} ({provider_class.__name__})")
        
        self._discovery_complete = True
        logger.info(f"Provider discovery complete: {len(self._available_providers)} providers found")
    
    def _discover_provider_module(self, module_stem: str) -> Optional[Type[BaseProvider]]:
        """Import an entry module and return its concrete provider class."""
        module = importlib.import_module(f"{self.package}.{module_stem}")
        
        for _, obj in inspect.getmembers(module, inspect.isclass):
            if issubclass(obj, BaseProvider) and not inspect.isabstract(obj):
                return obj
        return None
    
    def _ensure_discovered(self) -> None:
        if not self._discovery_complete:
            self.discover_providers()
    
    @property
    def available_providers(self) -> Dict[str, Type[BaseProvider]]:
        """Discovered provider classes by name."""
        self._ensure_discovered()
        return dict(self._available_providers)
    
    def load_provider(self, name: str) -> Optional[BaseProvider]:
        """
        Load a provider by name.
        
        Args:
            name: Provider name, e.g. ``"darkmahou"``
            
        Returns:
            Provider instance or None if it is unknown or failed to load
        """
        if name in self._loaded_providers:
            return self._loaded_providers[name]
        
        self._ensure_discovered()
        provider_class = self._available_providers.get(name)
        if provider_class is None:
            logger.error(f"Provider not found: {name}")
            return None
        
        if self.config_manager.sources.get_source(name) is None:
            logger.warning(f"No configuration found for provider {name}, using defaults")
        
        try:
            provider = provider_class(config=self.config_manager.get_provider_config(name))
        except (TypeError, ValueError) as e:
            self._provider_errors[name] = e
            logger.error(f"Failed to load provider {name}: {e}")
            return None
        
        self._loaded_providers[name] = provider
        logger.debug(f"Loaded provider: {name}")
        return provider
    
    def get_provider(self, name: str, kind: Optional[ProviderKind] = None) -> BaseProvider:
        """
        Get a loaded provider, checking it implements the requested kind.
        
        Raises:
            ProviderError: If the provider is unknown, disabled, failed to
                          load or is of another kind
        """
        self._ensure_discovered()
        
        if name not in self._available_providers:
            known = ", ".join(sorted(self._available_providers)) or "none"
            raise ProviderError(f"Unknown provider '{name}' (available: {known})", provider_name=name)
        
        source_config = self.config_manager.sources.get_source(name)
        if source_config is not None and not source_config.enabled:
            raise ProviderError(
                f"Provider '{name}' is disabled (enable it with: aniprov sources enable {name})",
                provider_name=name
            )
        
        provider = self.load_provider(name)
        if provider is None:
            raise ProviderError(
                f"Provider '{name}' could not be loaded",
                provider_name=name,
                details=str(self._provider_errors.get(name, ""))
            )
        
        if kind is not None and provider.kind != kind:
            raise ProviderError(
                f"Provider '{name}' is a {provider.kind.value} provider, not {kind.value}",
                provider_name=name
            )
        
        return provider
    
    def get_torrent_provider(self, name: str) -> AnimeTorrentProvider:
        return self.get_provider(name, ProviderKind.ANIME_TORRENT)
    
    def get_streaming_provider(self, name: str) -> OnlineStreamingProvider:
        return self.get_provider(name, ProviderKind.ONLINE_STREAMING)
    
    def get_manga_provider(self, name: str) -> MangaProvider:
        return self.get_provider(name, ProviderKind.MANGA)
    
    def get_enabled_providers(self, kind: Optional[ProviderKind] = None) -> Dict[str, BaseProvider]:
        """
        Get all enabled providers, in priority order.
        
        Args:
            kind: Only return providers of this kind
        """
        self._ensure_discovered()
        providers = {}
        
        for name in self.config_manager.get_enabled_sources():
            if name not in self._available_providers:
                continue
            provider = self.load_provider(name)
            if provider is not None and (kind is None or provider.kind == kind):
                providers[name] = provider
        
        return providers
    
    def get_provider_status(self) -> Dict[str, Any]:
        """
        Get status information for all providers.
        
        Returns:
            Counts plus a per-provider entry with class, kind, enabled,
            loaded, error and metadata
        """
        self._ensure_discovered()
        status = {
            "discovered": len(self._available_providers),
            "loaded": len(self._loaded_providers),
            "errors": len(self._provider_errors),
            "providers": {}
        }
        
        for name in sorted(set(self._available_providers) | set(self._provider_errors)):
            provider_class = self._available_providers.get(name)
            source_config = self.config_manager.sources.get_source(name)
            
            info = {
                "class": provider_class.__name__ if provider_class else None,
                "loaded": name in self._loaded_providers,
                "enabled": source_config.enabled if source_config else False,
                "error": str(self._provider_errors[name]) if name in self._provider_errors else None,
                "kind": None,
                "metadata": None,
            }
            
            if provider_class is not None:
                if source_config is not None and not source_config.enabled:
                    metadata = getattr(inspect.getmodule(provider_class), "provider_metadata", None)
                else:
                    provider = self.load_provider(name)
                    metadata = provider.metadata if provider is not None else None
                if metadata is not None:
                    info["kind"] = metadata.kind.value
                    info["metadata"] = metadata.model_dump(mode="json")
            
            status["providers"][name] = info
        
        return status
    
    async def reload_provider(self, name: str) -> bool:
        """
        Reload a provider with the current configuration.
        
        Returns:
            True if reload was successful, False otherwise
        """
        if name in self._loaded_providers:
            await self._loaded_providers.pop(name).cleanup()
        
        self._provider_errors.pop(name, None)
        self.config_manager.reload_configuration()
        return self.load_provider(name) is not None
    
    async def cleanup(self) -> None:
        """Close the HTTP sessions of all loaded providers."""
        if self._loaded_providers:
            await asyncio.gather(
                *(provider.cleanup() for provider in self._loaded_providers.values()),
                return_exceptions=True
            )
        self._loaded_providers.clear()
        logger.debug("Provider manager cleanup complete")


# Export provider manager
__all__ = ["ProviderManager"]
