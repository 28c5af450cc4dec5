"""CLI display implementation using Rich library."""

import json
import sys
from typing import Any

import typer
import yaml
from rich.console import Console
from rich.markup import escape


class CLIDisplay:
    """Status messages on stderr, report output on stdout."""

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        # Bound at construction so test runners that swap streams are honoured
        self.stderr_console = Console(file=sys.stderr, soft_wrap=True, highlight=False, emoji=False)

    def status(self, message: str, **kwargs) -> None:  # noqa: ARG002
        """Display a status message in blue (verbose only)."""
        if self.verbose:
            self.stderr_console.print(f"[blue]i[/blue] {escape(message)}")

    def progress(self, fraction: float, message: str) -> None:
        if self.verbose:
            self.stderr_console.print(f"[dim]Progress:[/dim] {escape(message)} ({fraction:.0%})")

    def success(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[green]✓[/green] {escape(message)}")

    def warning(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[yellow]⚠[/yellow] {escape(message)}")

    def error(self, message: str, **kwargs) -> None:  # noqa: ARG002
        self.stderr_console.print(f"[red]✗[/red] {escape(message)}")

    def text_output(self, text: str) -> None:
        """Print pre-rendered text verbatim (no markup) on stdout."""
        typer.echo(text, nl=False)

    def json_output(self, data: Any, **kwargs) -> None:
        output_format = kwargs.get("format", "json")
        indent = kwargs.get("indent", 2)

        if output_format == "yaml":
            text = yaml.safe_dump(data, default_flow_style=False, sort_keys=False, allow_unicode=True)
        else:
            text = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"
        self.text_output(text)
