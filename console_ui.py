#!/usr/bin/env python3
"""
Console UI Module using Rich

Styled output for Kenosis. Regular output goes to stdout, errors and
skipped-entry notices go to stderr so they can be redirected separately.
"""

import contextlib
from typing import Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel


class ConsoleUI:
    """Console output handler using Rich"""

    def __init__(self, force_terminal: Optional[bool] = None):
        """Initialize stdout and stderr consoles with optional terminal forcing"""
        self.console = Console(force_terminal=force_terminal, highlight=False, emoji=False)
        self.error_console = Console(stderr=True, force_terminal=force_terminal, highlight=False, emoji=False)

    # Basic styled output methods; paths print verbatim and unwrapped
    def print_success(self, message: str):
        """Print success message in green"""
        self.console.print(message, style="green", markup=False, soft_wrap=True)

    def print_error(self, message: str):
        """Print error message in red on stderr"""
        self.error_console.print(message, style="red bold", markup=False, soft_wrap=True)

    def print_warning(self, message: str):
        """Print warning message in yellow on stderr"""
        self.error_console.print(message, style="yellow", markup=False, soft_wrap=True)

    def print_plain(self, message: str):
        """Print message without styling"""
        self.console.print(message, markup=False, soft_wrap=True)

    def print_header(self, title: str, subtitle: Optional[str] = None):
        """Print a header panel, only on interactive terminals"""
        if not self.console.is_terminal:
            return
        header_text = f"[bold]{title}[/bold]"
        if subtitle:
            header_text += f"\n[dim]{escape(subtitle)}[/dim]"
        self.console.print(Panel(header_text, box=box.ROUNDED, padding=(0, 1)))

    def activity(self, description: str):
        """Spinner context manager for long operations

        Returns a no-op context when stdout is not a terminal.
        """
        if not self.console.is_terminal:
            return contextlib.nullcontext()
        return self.console.status(description)
