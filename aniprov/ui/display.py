"""
Result Display - Rich tables for provider results.

This module turns provider results into Rich tables, or into the
host-shaped camelCase JSON when a command runs with ``--json``.
"""

import json
from typing import Any, Dict, List, Optional, Sequence

from rich import box
from rich.table import Table

from aniprov.core.models import (
    AnimeTorrent,
    ChapterDetails,
    ChapterPage,
    EpisodeDetails,
    EpisodeServer,
    HostModel,
    MangaSearchResult,
    SearchResult,
)
from aniprov.ui.console import get_console


class ResultDisplay:
    """
    Renders provider results.
    
    Tables are truncated to ``max_rows`` rows with a footer noting how many
    were hidden; URL columns are dropped when ``show_urls`` is false.
    """
    
    def __init__(self, max_rows: int = 50, show_urls: bool = True):
        self.console = get_console()
        self.max_rows = max_rows
        self.show_urls = show_urls
    
    def print_json(self, data: Any) -> None:
        """Print models (or lists of models) as host-shaped JSON."""
        if isinstance(data, HostModel):
            payload = data.to_host()
        elif isinstance(data, (list, tuple)):
            payload = [item.to_host() if isinstance(item, HostModel) else item for item in data]
        else:
            payload = data
        self.console.print_json(json.dumps(payload, ensure_ascii=False))
    
    def _new_table(self, title: str, count: int) -> Table:
        return Table(
            title=f"{title} ({count})",
            box=box.ROUNDED,
            header_style="bold cyan",
            show_lines=False,
        )
    
    def _visible(self, items: Sequence) -> Sequence:
        return items[: self.max_rows]
    
    def _print_table(self, table: Table, total: int) -> None:
        self.console.print(table)
        hidden = total - self.max_rows
        if hidden > 0:
            self.console.print(f"[dim]... {hidden} more not shown (use --json for all)[/dim]")
    
    def _no_results(self, what: str) -> None:
        self.console.print(f"[yellow]No {what} found[/yellow]")
    
    def show_torrents(self, torrents: List[AnimeTorrent], title: str = "Torrents") -> None:
        if not torrents:
            self._no_results("torrents")
            return
        
        table = self._new_table(title, len(torrents))
        table.add_column("#", style="dim", width=4)
        table.add_column("Name", style="bold", min_width=30)
        table.add_column("Ep", justify="right", width=5)
        table.add_column("Res", width=6)
        table.add_column("Batch", width=5)
        table.add_column("Group", width=14)
        if self.show_urls:
            table.add_column("Magnet", style="dim", overflow="fold")
        
        for i, torrent in enumerate(self._visible(torrents), 1):
            row = [
                str(i),
                torrent.name,
                "-" if torrent.episode_number < 0 else str(torrent.episode_number),
                torrent.resolution or "-",
                "yes" if torrent.is_batch else "",
                torrent.release_group or "-",
            ]
            if self.show_urls:
                row.append(torrent.magnet_link)
            table.add_row(*row)
        
        self._print_table(table, len(torrents))
    
    def show_search_results(self, results: List[SearchResult]) -> None:
        if not results:
            self._no_results("results")
            return
        
        table = self._new_table("Search Results", len(results))
        table.add_column("#", style="dim", width=4)
        table.add_column("ID", style="cyan")
        table.add_column("Title", style="bold", min_width=25)
        table.add_column("Audio", width=5)
        if self.show_urls:
            table.add_column("URL", style="dim", overflow="fold")
        
        for i, result in enumerate(self._visible(results), 1):
            row = [str(i), result.id, result.title, result.sub_or_dub.value]
            if self.show_urls:
                row.append(result.url)
            table.add_row(*row)
        
        self._print_table(table, len(results))
    
    def show_episodes(self, episodes: List[EpisodeDetails]) -> None:
        if not episodes:
            self._no_results("episodes")
            return
        
        table = self._new_table("Episodes", len(episodes))
        table.add_column("Number", justify="right", width=7)
        table.add_column("ID", style="cyan")
        table.add_column("Title", style="bold")
        if self.show_urls:
            table.add_column("URL", style="dim", overflow="fold")
        
        for episode in self._visible(episodes):
            row = [str(episode.number), episode.id, episode.title]
            if self.show_urls:
                row.append(episode.url)
            table.add_row(*row)
        
        self._print_table(table, len(episodes))
    
    def show_episode_server(self, server: EpisodeServer) -> None:
        table = Table(title=f"Server: {server.server}", box=box.ROUNDED, header_style="bold cyan")
        table.add_column("Type", width=5)
        table.add_column("Quality", width=8)
        table.add_column("URL", overflow="fold")
        
        for source in server.video_sources:
            table.add_row(source.type.value, source.quality or "-", source.url)
        
        self.console.print(table)
        
        if server.headers:
            headers = Table(title="Required headers", box=box.SIMPLE, show_header=False)
            headers.add_column("Header", style="cyan")
            headers.add_column("Value", overflow="fold")
            for key, value in server.headers.items():
                headers.add_row(key, value)
            self.console.print(headers)
    
    def show_manga_results(self, results: List[MangaSearchResult]) -> None:
        if not results:
            self._no_results("manga")
            return
        
        table = self._new_table("Manga", len(results))
        table.add_column("#", style="dim", width=4)
        table.add_column("ID", style="cyan")
        table.add_column("Title", style="bold", min_width=25)
        if self.show_urls:
            table.add_column("Cover", style="dim", overflow="fold")
        
        for i, result in enumerate(self._visible(results), 1):
            row = [str(i), result.id, result.title]
            if self.show_urls:
                row.append(result.image)
            table.add_row(*row)
        
        self._print_table(table, len(results))
    
    def show_chapters(self, chapters: List[ChapterDetails]) -> None:
        if not chapters:
            self._no_results("chapters")
            return
        
        table = self._new_table("Chapters", len(chapters))
        table.add_column("Index", justify="right", style="dim", width=5)
        table.add_column("Chapter", justify="right", width=8)
        table.add_column("Title", style="bold")
        if self.show_urls:
            table.add_column("URL", style="dim", overflow="fold")
        
        for chapter in self._visible(chapters):
            row = [str(chapter.index), chapter.chapter, chapter.title]
            if self.show_urls:
                row.append(chapter.url)
            table.add_row(*row)
        
        self._print_table(table, len(chapters))
    
    def show_pages(self, pages: List[ChapterPage]) -> None:
        if not pages:
            self._no_results("pages")
            return
        
        table = self._new_table("Pages", len(pages))
        table.add_column("Index", justify="right", style="dim", width=5)
        table.add_column("URL", overflow="fold")
        
        for page in self._visible(pages):
            table.add_row(str(page.index), page.url)
        
        self._print_table(table, len(pages))
    
    def show_sources(self, status: Dict[str, Any]) -> None:
        """Render the output of ``ProviderManager.get_provider_status``."""
        providers: Dict[str, Dict[str, Any]] = status.get("providers", {})
        if not providers:
            self._no_results("providers")
            return
        
        table = self._new_table("Providers", len(providers))
        table.add_column("Name", style="bold")
        table.add_column("Kind")
        table.add_column("Enabled", width=7)
        table.add_column("Version", width=8)
        table.add_column("Website", style="dim", overflow="fold")
        table.add_column("Error", style="red", overflow="fold")
        
        for name, info in sorted(providers.items()):
            metadata: Optional[Dict[str, Any]] = info.get("metadata")
            enabled = "[green]yes[/green]" if info.get("enabled") else "[red]no[/red]"
            table.add_row(
                name,
                info.get("kind") or "-",
                enabled,
                metadata.get("version", "-") if metadata else "-",
                metadata.get("website", "") if metadata else "",
                info.get("error") or "",
            )
        
        self.console.print(table)


# Export display components
__all__ = ["ResultDisplay"]
