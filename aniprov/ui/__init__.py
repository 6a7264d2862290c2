"""
UI Layer - Rich console, error panels and result tables.

This module contains the console setup, error rendering and the result
tables shared by every CLI command.
"""

from aniprov.ui.console import get_console, setup_console
from aniprov.ui.error_handler import ErrorHandler, handle_error, display_warning, display_info
from aniprov.ui.display import ResultDisplay

__all__ = [
    # Console Management
    "get_console",
    "setup_console",
    # Error Handling
    "ErrorHandler",
    "handle_error",
    "display_warning",
    "display_info",
    # Result Display
    "ResultDisplay",
]
