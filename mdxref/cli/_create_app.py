"""Create the mdxref Typer CLI app."""

import logging
from pathlib import Path

import typer

from .. import __version__
from ..api._constants import EXIT_FATAL
from ..api.cmd_check import cmd_check
from ..api.config.MdxrefConfig import MdxrefConfig
from ..logging_config import setup_logging
from ._run_single_execution import _run_single_execution
from .display.CLIDisplay import CLIDisplay

DISPLAY_FORMATS = ("text", "json", "yaml")


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"mdxref {__version__}")
        raise typer.Exit()


def _create_app() -> typer.Typer:
    """Create and configure the CLI Typer app."""
    app = typer.Typer(
        pretty_exceptions_show_locals=False,
        pretty_exceptions_enable=False,
        help="Check cross-references between the markdown documents of a directory.",
        context_settings={"help_option_names": ["-h", "--help"]},
        add_completion=False,
    )

    @app.command()
    def check(
        root: Path | None = typer.Argument(None, help="Corpus root directory (default: current directory)"),
        entry: list[str] | None = typer.Option(
            None, "--entry", "-e", help="Entry point exempt from the orphan check (repeatable)"
        ),
        config_path: Path | None = typer.Option(
            None, "--config", "-c", help="JSON config file (default: <root>/.mdxref.json if present)"
        ),
        ext: list[str] | None = typer.Option(None, "--ext", help="Document extension, e.g. .md (repeatable)"),
        workers: int | None = typer.Option(None, "--workers", "-w", help="Threads used to read documents"),
        display: str = typer.Option("text", "--display", "-d", help="Report format: text, json or yaml"),
        verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress and info logging"),
        version: bool = typer.Option(  # noqa: ARG001
            False, "--version", callback=_version_callback, is_eager=True, help="Show version and exit"
        ),
    ) -> None:
        """Report dangling links, orphan documents and self-references."""
        cli_display = CLIDisplay(verbose=verbose)

        if display not in DISPLAY_FORMATS:
            cli_display.error(f"--display must be one of {', '.join(DISPLAY_FORMATS)}, got {display!r}")
            raise typer.Exit(EXIT_FATAL)

        root_path = (root or Path.cwd()).expanduser().absolute()
        try:
            config = MdxrefConfig.for_root(root_path, config_path.expanduser() if config_path else None)
        except ValueError as e:
            cli_display.error(f"Invalid configuration: {e}")
            raise typer.Exit(EXIT_FATAL) from e

        level = logging.INFO if verbose else getattr(logging, config.log_level)
        setup_logging(level=level, log_file=Path(config.log_file).expanduser() if config.log_file else None)

        _run_single_execution(
            cmd_check,
            (root_path,),
            {"entry_points": entry or [], "extensions": ext, "workers": workers, "config": config},
            cli_display,
            display,
        )

    return app
