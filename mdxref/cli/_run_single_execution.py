"""Run a command once and display its result using the 4-stage pattern."""

from collections.abc import Callable
from typing import Any

import typer

from ..api._constants import EXIT_FATAL
from ..api.StageResult import StageResult
from ._render_report import _render_report
from .display.CLIDisplay import CLIDisplay


def _run_single_execution(
    func: Callable[..., StageResult],
    args: tuple,
    kwargs: dict,
    display: CLIDisplay,
    display_format: str,
) -> None:
    """Run command once, display it, and exit with the command's exit code.

    Stages: announce and progress go to stderr (verbose only), the one-line
    result always goes to stderr, and the report goes to stdout. A fatal
    result prints no report.
    """
    result = func(*args, **kwargs)

    # Stage 1: Announce
    display.status(result.announce)

    # Stage 2: Progress
    for progress_percent, message in result.progress_callback(result):
        display.progress(progress_percent, message)

    if not result.result:
        raise ValueError("progress_callback must set result.result to a non-empty string")
    if not result.output:
        raise ValueError("progress_callback must set result.output to a non-empty dict")

    # Stage 3: Result
    if result.success:
        display.success(result.result)
    elif result.exit_code == EXIT_FATAL:
        display.error(result.result)
    else:
        display.warning(result.result)

    # Stage 4: Output
    if result.exit_code != EXIT_FATAL:
        _print_output(display, result.output, display_format)

    raise typer.Exit(code=result.exit_code)


def _print_output(display: CLIDisplay, output: dict[str, Any], display_format: str) -> None:
    if display_format == "text":
        display.text_output(_render_report(output))
    else:
        display.json_output(output, format=display_format)
