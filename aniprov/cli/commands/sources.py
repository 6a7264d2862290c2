"""
Sources Command - Provider management functionality.

This module implements the commands that list providers, check that their
websites answer, and enable or disable them in the sources configuration.
"""

import asyncio
import typer

from aniprov.cli.context import (
    get_config_manager,
    get_display,
    get_provider_manager,
    is_debug,
)
from aniprov.core.exceptions import ProviderError
from aniprov.ui import get_console, handle_error, display_info


# Create sources command group
app = typer.Typer(
    name="sources",
    help="🔌 Manage providers",
    no_args_is_help=True,
)


def _require_known(name: str) -> None:
    """Raise ProviderError unless a provider module named ``name`` was discovered."""
    available = get_provider_manager().available_providers
    if name not in available:
        known = ", ".join(sorted(available)) or "none"
        raise ProviderError(f"Unknown provider '{name}' (available: {known})", provider_name=name)


@app.command(name="list")
def list_sources(
    enabled_only: bool = typer.Option(
        False,
        "--enabled",
        "-e",
        help="Show only enabled providers"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of a table"),
) -> None:
    """
    📋 List discovered providers.
    
    Examples:
    
        aniprov sources list
        
        aniprov sources list --enabled --json
    """
    try:
        status = get_provider_manager().get_provider_status()
    except Exception as e:
        handle_error(e, "Failed to list providers", show_traceback=is_debug())
        raise typer.Exit(1)
    
    if enabled_only:
        status["providers"] = {
            name: info for name, info in status["providers"].items() if info["enabled"]
        }
    
    display = get_display()
    if as_json:
        display.print_json(status["providers"])
    else:
        display.show_sources(status)


@app.command(name="check")
def check_source(
    source_name: str = typer.Argument(..., help="Provider name to check"),
) -> None:
    """
    🩺 Check that a provider's website is reachable.
    
    Examples:
    
        aniprov sources check darkmahou
    """
    manager = get_provider_manager()
    
    async def _check() -> bool:
        try:
            provider = manager.get_provider(source_name)
            return await provider.validate_connection()
        finally:
            await manager.cleanup()
    
    try:
        _require_known(source_name)
        ok = asyncio.run(_check())
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Check cancelled[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, f"Failed to check provider '{source_name}'", show_traceback=is_debug())
        raise typer.Exit(1)
    
    console = get_console()
    if ok:
        console.print(f"[green]✅ {source_name} is reachable[/green]")
    else:
        console.print(f"[red]❌ {source_name} is not reachable[/red]")
        raise typer.Exit(1)


def _set_enabled(source_name: str, enabled: bool) -> None:
    try:
        _require_known(source_name)
        get_config_manager().set_source_enabled(source_name, enabled)
    except Exception as e:
        action = "enable" if enabled else "disable"
        handle_error(e, f"Failed to {action} provider '{source_name}'", show_traceback=is_debug())
        raise typer.Exit(1)
    
    state = "enabled" if enabled else "disabled"
    display_info(f"Provider '{source_name}' {state}")


@app.command(name="enable")
def enable_source(
    source_name: str = typer.Argument(..., help="Provider name to enable"),
) -> None:
    """
    ✅ Enable a provider.
    
    Examples:
    
        aniprov sources enable q1n
    """
    _set_enabled(source_name, True)


@app.command(name="disable")
def disable_source(
    source_name: str = typer.Argument(..., help="Provider name to disable"),
) -> None:
    """
    ❌ Disable a provider.
    
    Disabled providers are rejected by every search command.
    
    Examples:
    
        aniprov sources disable mangalivre
    """
    _set_enabled(source_name, False)


# Export command group
__all__ = ["app"]
