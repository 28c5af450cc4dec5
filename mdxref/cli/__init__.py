"""CLI - main entry point."""

import sys


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    import click
    import typer

    from mdxref.cli._create_app import _create_app

    if argv is None:
        argv = sys.argv[1:]

    app = _create_app()
    try:
        # Non-standalone mode returns the typer.Exit code instead of calling sys.exit
        exit_code = app(argv, standalone_mode=False)
    except click.exceptions.UsageError as e:
        typer.echo(f"Usage error: {e.format_message()}", err=True)
        return 2
    except click.exceptions.Abort:
        return 1
    return exit_code if isinstance(exit_code, int) else 0
