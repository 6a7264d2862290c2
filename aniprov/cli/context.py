"""
CLI Context - Global application context and state management.

This module holds the configuration and provider manager instances shared
by every command, and the helper commands use to drive a provider call.
"""

import asyncio
from typing import Any, Awaitable, Callable, Optional, TypeVar

from aniprov.core import ConfigManager, ProviderManager
from aniprov.ui import ResultDisplay


T = TypeVar("T")

# Global application state
_config_manager: Optional[ConfigManager] = None
_provider_manager: Optional[ProviderManager] = None
_debug: bool = False


def get_config_manager() -> ConfigManager:
    """Get the global configuration manager instance."""
    global _config_manager
    if _config_manager is None:
        raise RuntimeError("Configuration manager not initialized")
    return _config_manager


def set_config_manager(config_manager: ConfigManager) -> None:
    """Set the global configuration manager and drop the provider manager built on the old one."""
    global _config_manager, _provider_manager
    _config_manager = config_manager
    _provider_manager = None


def get_provider_manager() -> ProviderManager:
    """Get the global provider manager, creating it on first use."""
    global _provider_manager
    if _provider_manager is None:
        _provider_manager = ProviderManager(get_config_manager())
    return _provider_manager


def set_provider_manager(provider_manager: Optional[ProviderManager]) -> None:
    """Set the global provider manager instance."""
    global _provider_manager
    _provider_manager = provider_manager


def is_debug() -> bool:
    return _debug


def set_debug(debug: bool) -> None:
    global _debug
    _debug = debug


def get_display() -> ResultDisplay:
    """Build a result display from the current display settings."""
    display = get_config_manager().settings.display
    return ResultDisplay(max_rows=display.max_rows, show_urls=display.show_urls)


def run_with_provider(
    getter: Callable[[ProviderManager], Any],
    call: Callable[[Any], Awaitable[T]],
) -> T:
    """
    Resolve a provider and await one call on it, closing sessions afterwards.
    
    Args:
        getter: Picks the provider from the manager, e.g.
                ``lambda m: m.get_torrent_provider("darkmahou")``
        call: Coroutine factory receiving the provider
        
    Returns:
        Whatever the call returned
    """
    manager = get_provider_manager()
    
    async def _run() -> T:
        try:
            provider = getter(manager)
            return await call(provider)
        finally:
            await manager.cleanup()
    
    return asyncio.run(_run())


# Export context functions
__all__ = [
    "get_config_manager",
    "set_config_manager",
    "get_provider_manager",
    "set_provider_manager",
    "is_debug",
    "set_debug",
    "get_display",
    "run_with_provider",
]
