"""
Torrents Command - Anime torrent search.

This module implements the commands backed by anime torrent providers:
plain and filtered (smart) search, and the latest releases listing.
"""

from typing import Optional

import typer

from aniprov.cli.context import get_display, is_debug, run_with_provider
from aniprov.core.models import AnimeSearchOptions, AnimeSmartSearchOptions
from aniprov.ui import get_console, handle_error


# Create torrents command group
app = typer.Typer(
    name="torrents",
    help="🧲 Search anime torrents",
    no_args_is_help=True,
)


@app.command(name="search")
def search_torrents(
    provider_name: str = typer.Argument(..., metavar="PROVIDER", help="Torrent provider name"),
    query: str = typer.Argument(..., help="Anime title to search for"),
    episode: Optional[int] = typer.Option(
        None,
        "--episode",
        "-e",
        min=1,
        help="Only keep torrents for this episode"
    ),
    resolution: Optional[str] = typer.Option(
        None,
        "--resolution",
        "-r",
        help="Only keep torrents with this resolution, e.g. 1080p"
    ),
    batch: bool = typer.Option(False, "--batch", "-b", help="Only keep batch releases"),
    as_json: bool = typer.Option(False, "--json", help="Print host JSON instead of a table"),
) -> None:
    """
    🔍 Search a torrent provider.
    
    Any filter switches to smart search.
    
    Examples:
    
        aniprov torrents search darkmahou "Shingeki no Kyojin"
        
        aniprov torrents search darkmahou "Frieren" --episode 3 --resolution 1080p
    """
    smart = episode is not None or bool(resolution) or batch
    
    async def _search(provider):
        if smart:
            opts = AnimeSmartSearchOptions(
                query=query,
                episode_number=episode or 0,
                resolution=resolution or "",
                batch=batch,
            )
            return await provider.smart_search(opts)
        return await provider.search(AnimeSearchOptions(query=query))
    
    try:
        torrents = run_with_provider(
            lambda manager: manager.get_torrent_provider(provider_name),
            _search,
        )
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Search cancelled[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, f"Torrent search failed for '{query}'", show_traceback=is_debug())
        raise typer.Exit(1)
    
    display = get_display()
    if as_json:
        display.print_json(torrents)
    else:
        display.show_torrents(torrents, title=f"Torrents for '{query}'")


@app.command(name="latest")
def latest_torrents(
    provider_name: str = typer.Argument(..., metavar="PROVIDER", help="Torrent provider name"),
    as_json: bool = typer.Option(False, "--json", help="Print host JSON instead of a table"),
) -> None:
    """
    🆕 List the latest releases of a torrent provider.
    
    Examples:
    
        aniprov torrents latest darkmahou
    """
    try:
        torrents = run_with_provider(
            lambda manager: manager.get_torrent_provider(provider_name),
            lambda provider: provider.get_latest(),
        )
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Listing cancelled[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, "Failed to list latest torrents", show_traceback=is_debug())
        raise typer.Exit(1)
    
    display = get_display()
    if as_json:
        display.print_json(torrents)
    else:
        display.show_torrents(torrents, title="Latest")


# Export command group
__all__ = ["app"]
