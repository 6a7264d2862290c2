"""
CLI Main Application - Typer app entry point.

This module provides the main CLI application entry point: global options,
logging and configuration setup, and command group registration.
"""

import sys
import logging
from pathlib import Path
from typing import Optional

import typer

from aniprov import __version__
from aniprov.core import ConfigManager
from aniprov.core.exceptions import AniProvError, ConfigurationError
from aniprov.ui import get_console, handle_error
from aniprov.cli.context import set_config_manager, set_debug


# Create main Typer application
app = typer.Typer(
    name="aniprov",
    help="🎌 Anime torrent, streaming and manga providers from the command line",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def _version_callback(value: bool) -> None:
    if value:
        console = get_console()
        console.print(f"[bold blue]AniProv[/bold blue] version [green]{__version__}[/green]")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        False,
        "--version",
        "-v",
        help="Show version information and exit",
        callback=_version_callback,
        is_eager=True,
    ),
    config_dir: Optional[Path] = typer.Option(
        None,
        "--config-dir",
        help="Configuration directory path",
        file_okay=False,
        dir_okay=True,
    ),
    debug: bool = typer.Option(
        False,
        "--debug",
        help="Enable debug mode with detailed logging",
    ),
) -> None:
    """
    🎌 AniProv - anime content providers.
    
    Search Portuguese-language sites for anime torrents, streaming episodes
    and manga chapters, and print the results as tables or host JSON.
    """
    set_debug(debug)
    
    try:
        config_manager = ConfigManager(config_dir or Path("config"))
    except AniProvError as e:
        handle_error(e, "During application initialization", show_traceback=debug)
        raise typer.Exit(1)
    except OSError as e:
        handle_error(
            ConfigurationError(f"Failed to load configuration: {e}", str(config_dir)),
            "During application initialization"
        )
        raise typer.Exit(1)
    
    set_config_manager(config_manager)
    _setup_logging(config_manager.settings.logging.level, debug)


def _setup_logging(level_name: str = "WARNING", debug: bool = False) -> None:
    """
    Set up application logging.
    
    Args:
        level_name: Configured logging level
        debug: Enable debug logging regardless of configuration
    """
    level = logging.DEBUG if debug else getattr(logging, level_name, logging.WARNING)
    
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[
            logging.StreamHandler(sys.stderr),
        ],
    )
    logging.getLogger().setLevel(level)
    
    # Reduce noise from third-party libraries
    if not debug:
        logging.getLogger("aiohttp").setLevel(logging.WARNING)


def _register_commands() -> None:
    """Register command groups with the main app."""
    # Import commands here to avoid circular imports
    from aniprov.cli.commands import manga, sources, stream, torrents
    
    app.add_typer(sources.app, name="sources", help="🔌 Manage providers")
    app.add_typer(torrents.app, name="torrents", help="🧲 Search anime torrents")
    app.add_typer(stream.app, name="stream", help="📺 Find streaming episodes")
    app.add_typer(manga.app, name="manga", help="📖 Browse manga chapters")


_register_commands()


def cli_main() -> None:
    """
    Main CLI entry point for the aniprov command.
    
    This function is called when the user runs 'aniprov' from the command line.
    """
    try:
        app()
    except KeyboardInterrupt:
        console = get_console()
        console.print("\n[yellow]Operation cancelled by user[/yellow]")
        sys.exit(130)  # Standard exit code for SIGINT
    except Exception as e:
        handle_error(e, "Unexpected error in CLI")
        sys.exit(1)


# Export main components
__all__ = ["app", "cli_main"]
