"""
Stream Command - Online streaming search and episode sources.

This module implements the commands backed by online streaming providers:
search, episode listing and resolving an episode's video sources.
"""

from typing import Optional

import typer

from aniprov.cli.context import get_display, is_debug, run_with_provider
from aniprov.core.models import EpisodeDetails, SearchOptions
from aniprov.ui import get_console, handle_error


# Create stream command group
app = typer.Typer(
    name="stream",
    help="📺 Find streaming episodes",
    no_args_is_help=True,
)


@app.command(name="search")
def search_anime(
    provider_name: str = typer.Argument(..., metavar="PROVIDER", help="Streaming provider name"),
    query: str = typer.Argument(..., help="Anime title to search for"),
    dub: bool = typer.Option(False, "--dub", "-d", help="Search for dubbed versions"),
    as_json: bool = typer.Option(False, "--json", help="Print host JSON instead of a table"),
) -> None:
    """
    🔍 Search a streaming provider.
    
    Examples:
    
        aniprov stream search q1n "One Piece"
        
        aniprov stream search animesroll "Naruto" --dub
    """
    try:
        results = run_with_provider(
            lambda manager: manager.get_streaming_provider(provider_name),
            lambda provider: provider.search(SearchOptions(query=query, dub=dub)),
        )
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Search cancelled[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, f"Search failed for '{query}'", show_traceback=is_debug())
        raise typer.Exit(1)
    
    display = get_display()
    if as_json:
        display.print_json(results)
    else:
        display.show_search_results(results)


@app.command(name="episodes")
def list_episodes(
    provider_name: str = typer.Argument(..., metavar="PROVIDER", help="Streaming provider name"),
    anime_id: str = typer.Argument(..., metavar="ID", help="Anime id from a search result"),
    as_json: bool = typer.Option(False, "--json", help="Print host JSON instead of a table"),
) -> None:
    """
    📋 List the episodes of an anime.
    
    Examples:
    
        aniprov stream episodes q1n one-piece
    """
    try:
        episodes = run_with_provider(
            lambda manager: manager.get_streaming_provider(provider_name),
            lambda provider: provider.find_episodes(anime_id),
        )
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Listing cancelled[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, f"Failed to list episodes of '{anime_id}'", show_traceback=is_debug())
        raise typer.Exit(1)
    
    display = get_display()
    if as_json:
        display.print_json(episodes)
    else:
        display.show_episodes(episodes)


@app.command(name="server")
def episode_server(
    provider_name: str = typer.Argument(..., metavar="PROVIDER", help="Streaming provider name"),
    episode_id: str = typer.Argument(..., help="Episode id from the episode listing"),
    episode_url: str = typer.Argument(..., help="Episode URL from the episode listing"),
    number: float = typer.Option(1, "--number", "-n", help="Episode number"),
    server: Optional[str] = typer.Option(
        None,
        "--server",
        "-s",
        help="Server to use (defaults to the provider's first server)"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print host JSON instead of a table"),
) -> None:
    """
    ▶️  Resolve the video sources of an episode.
    
    Examples:
    
        aniprov stream server q1n one-piece-episodio-1 https://q1n.net/episodio/one-piece-episodio-1/
    """
    async def _resolve(provider):
        chosen = server or (provider.get_settings().episode_servers or ["default"])[0]
        episode = EpisodeDetails(id=episode_id, number=number, url=episode_url)
        return await provider.find_episode_server(episode, chosen)
    
    try:
        result = run_with_provider(
            lambda manager: manager.get_streaming_provider(provider_name),
            _resolve,
        )
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Resolution cancelled[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, f"Failed to resolve episode '{episode_id}'", show_traceback=is_debug())
        raise typer.Exit(1)
    
    display = get_display()
    if as_json:
        display.print_json(result)
    else:
        display.show_episode_server(result)


# Export command group
__all__ = ["app"]
