"""
Manga Command - Manga search, chapters and pages.

This module implements the commands backed by manga providers.
"""

import typer

from aniprov.cli.context import get_display, is_debug, run_with_provider
from aniprov.ui import get_console, handle_error


# Create manga command group
app = typer.Typer(
    name="manga",
    help="📖 Browse manga chapters",
    no_args_is_help=True,
)


@app.command(name="search")
def search_manga(
    provider_name: str = typer.Argument(..., metavar="PROVIDER", help="Manga provider name"),
    query: str = typer.Argument(..., help="Manga title to search for"),
    as_json: bool = typer.Option(False, "--json", help="Print host JSON instead of a table"),
) -> None:
    """
    🔍 Search a manga provider.
    
    Examples:
    
        aniprov manga search mangalivre "Berserk"
    """
    try:
        results = run_with_provider(
            lambda manager: manager.get_manga_provider(provider_name),
            lambda provider: provider.search(query),
        )
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Search cancelled[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, f"Manga search failed for '{query}'", show_traceback=is_debug())
        raise typer.Exit(1)
    
    display = get_display()
    if as_json:
        display.print_json(results)
    else:
        display.show_manga_results(results)


@app.command(name="chapters")
def list_chapters(
    provider_name: str = typer.Argument(..., metavar="PROVIDER", help="Manga provider name"),
    manga_id: str = typer.Argument(..., help="Manga id from a search result"),
    as_json: bool = typer.Option(False, "--json", help="Print host JSON instead of a table"),
) -> None:
    """
    📋 List the chapters of a manga.
    
    Examples:
    
        aniprov manga chapters mangalivre berserk
    """
    try:
        chapters = run_with_provider(
            lambda manager: manager.get_manga_provider(provider_name),
            lambda provider: provider.find_chapters(manga_id),
        )
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Listing cancelled[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, f"Failed to list chapters of '{manga_id}'", show_traceback=is_debug())
        raise typer.Exit(1)
    
    display = get_display()
    if as_json:
        display.print_json(chapters)
    else:
        display.show_chapters(chapters)


@app.command(name="pages")
def list_pages(
    provider_name: str = typer.Argument(..., metavar="PROVIDER", help="Manga provider name"),
    chapter_url: str = typer.Argument(..., help="Chapter URL from the chapter listing"),
    as_json: bool = typer.Option(False, "--json", help="Print host JSON instead of a table"),
) -> None:
    """
    🖼️  List the page images of a chapter.
    
    Examples:
    
        aniprov manga pages mangalivre https://mangalivre.tv/manga/berserk/capitulo-1/
    """
    try:
        pages = run_with_provider(
            lambda manager: manager.get_manga_provider(provider_name),
            lambda provider: provider.find_chapter_pages(chapter_url),
        )
    except KeyboardInterrupt:
        get_console().print("\n[yellow]Listing cancelled[/yellow]")
        raise typer.Exit(130)
    except Exception as e:
        handle_error(e, "Failed to list chapter pages", show_traceback=is_debug())
        raise typer.Exit(1)
    
    display = get_display()
    if as_json:
        display.print_json(pages)
    else:
        display.show_pages(pages)


# Export command group
__all__ = ["app"]
