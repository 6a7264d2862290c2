"""
Error Handler - Error panels with context and suggestions.

This module renders AniProv exceptions as Rich panels with the fields each
error type carries, plus a short list of things worth trying next.
"""

import traceback
from typing import List, Optional

from rich.panel import Panel

from aniprov.core.exceptions import (
    AniProvError,
    ConfigurationError,
    ExtractionError,
    NetworkError,
    ProviderError,
    ValidationError,
)
from aniprov.ui.console import get_console


ERROR_STYLE = "red"
INFO_STYLE = "cyan"
WARNING_STYLE = "yellow"


class ErrorHandler:
    """Handles error display with consistent formatting and helpful context."""
    
    def __init__(self):
        self.console = get_console()
    
    def handle_error(
        self,
        error: Exception,
        context: Optional[str] = None,
        show_traceback: bool = False
    ) -> None:
        """
        Handle and display an error with appropriate formatting.
        
        Args:
            error: Exception to handle
            context: Additional context about where the error occurred
            show_traceback: Whether to show the full traceback
        """
        if isinstance(error, AniProvError):
            title, fields, suggestions = self._describe(error)
            message = error.message
            details = error.details
        else:
            title = "❌ Unexpected Error"
            fields = [("Type", type(error).__name__)]
            suggestions = ["Run again with [cyan]--debug[/cyan] for the full log"]
            message = str(error) or type(error).__name__
            details = None
        
        content_parts = [f"[{ERROR_STYLE}]{message}[/{ERROR_STYLE}]"]
        
        for label, value in fields:
            if value is not None and value != "":
                content_parts.append(f"[dim]{label}:[/dim] {value}")
        
        if context:
            content_parts.append(f"[dim]Context:[/dim] {context}")
        
        if suggestions:
            content_parts.append(f"\n[{INFO_STYLE}]💡 Suggestions:[/{INFO_STYLE}]")
            for suggestion in suggestions:
                content_parts.append(f"• {suggestion}")
        
        if show_traceback:
            if details:
                content_parts.append(f"\n[dim]Details:[/dim]\n{details}")
            if error.__traceback__ is not None:
                tb = "".join(traceback.format_exception(type(error), error, error.__traceback__))
                content_parts.append(f"\n[dim]Traceback:[/dim]\n{tb}")
        
        panel = Panel(
            "\n".join(content_parts),
            title=title,
            border_style=ERROR_STYLE,
            padding=(1, 2)
        )
        
        self.console.print(panel)
    
    @staticmethod
    def _describe(error: AniProvError):
        """Return title, labelled fields and suggestions for an AniProv error."""
        fields: List = []
        suggestions: List[str] = []
        
        if isinstance(error, ConfigurationError):
            title = "⚙️  Configuration Error"
            fields.append(("Configuration file", error.config_path))
            suggestions = [
                "Check the JSON syntax of the configuration file",
                "Delete the file to have it recreated with defaults",
            ]
        elif isinstance(error, ExtractionError):
            title = "🔎 Extraction Error"
            fields.append(("Provider", error.provider_name))
            fields.append(("URL", error.url))
            suggestions = [
                "Try another server for the same episode",
                "The site layout may have changed",
            ]
        elif isinstance(error, ProviderError):
            title = "🔌 Provider Error"
            fields.append(("Provider", error.provider_name))
            suggestions = [
                "List providers with [cyan]aniprov sources list[/cyan]",
                "Check connectivity with [cyan]aniprov sources check NAME[/cyan]",
            ]
        elif isinstance(error, NetworkError):
            title = "🌐 Network Error"
            fields.append(("URL", error.url))
            fields.append(("Status Code", error.status_code))
            suggestions = ["Check your internet connection", "Try again in a few moments"]
            if error.status_code == 403:
                suggestions.insert(0, "The site may be blocking requests, try a different user agent")
            elif error.status_code == 404:
                suggestions.insert(0, "The requested content may no longer be available")
        elif isinstance(error, ValidationError):
            title = "✋ Validation Error"
            fields.append(("Field", error.field_name))
            if error.invalid_value is not None:
                fields.append(("Value", repr(error.invalid_value)))
        else:
            title = "❌ Error"
        
        return title, fields, suggestions
    
    def display_warning(self, message: str, title: Optional[str] = None) -> None:
        """Display a warning message."""
        self.console.print(
            Panel(
                f"[{WARNING_STYLE}]{message}[/{WARNING_STYLE}]",
                title=title or "⚠️  Warning",
                border_style=WARNING_STYLE,
                padding=(0, 1),
            )
        )
    
    def display_info(self, message: str, title: Optional[str] = None) -> None:
        """Display an informational message."""
        if title:
            self.console.print(
                Panel(message, title=title, border_style=INFO_STYLE, padding=(0, 1))
            )
        else:
            self.console.print(f"[{INFO_STYLE}]ℹ️  {message}[/{INFO_STYLE}]")


def handle_error(
    error: Exception,
    context: Optional[str] = None,
    show_traceback: bool = False
) -> None:
    """Display an error using a fresh handler bound to the current console."""
    ErrorHandler().handle_error(error, context, show_traceback)


def display_warning(message: str, title: Optional[str] = None) -> None:
    """Display a warning message."""
    ErrorHandler().display_warning(message, title)


def display_info(message: str, title: Optional[str] = None) -> None:
    """Display an informational message."""
    ErrorHandler().display_info(message, title)


# Export error handling functions
__all__ = [
    "ErrorHandler",
    "handle_error",
    "display_warning",
    "display_info",
]
