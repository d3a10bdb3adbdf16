"""Main CLI entry point for lh-timing-trace.

Converts the user-timing entries of a Lighthouse results file into a Chrome
trace file written next to it:

    lh-timing-trace results.json
    # -> results.json.run-timing.trace.json

Open the produced file in ``chrome://tracing`` (or Perfetto) to inspect marks,
audit/gatherer measures and resource loads on separate lanes.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer

from .config import get_settings
from .errors import ResultsNotFoundError, TimingTraceError
from .results import load_timing_entries
from .trace_writer import save_trace_of_timings, trace_path_for_results

app = typer.Typer(help="Lighthouse user-timing to Chrome trace converter", add_completion=False)


def _print_error_and_quit(msg: str) -> NoReturn:
    typer.echo(
        f"ERROR:\n  > {msg}\n  > Example:\n  >     lh-timing-trace results.json\n",
        err=True,
    )
    raise typer.Exit(code=1)


@app.command()
def save_trace_from_cli(
    results_path: Optional[str] = typer.Argument(
        None, help="Path to a Lighthouse JSON results file", show_default=False
    ),
) -> None:
    """Write <RESULTS_PATH>.run-timing.trace.json from the file's timing entries."""
    settings = get_settings()
    logging.basicConfig(level=settings.LOG_LEVEL)

    if not results_path:
        _print_error_and_quit("Lighthouse JSON results path not provided")
    filename = Path.cwd() / results_path
    if not filename.exists():
        _print_error_and_quit("Lighthouse JSON results not found.")

    try:
        entries = load_timing_entries(filename)
    except ResultsNotFoundError:
        _print_error_and_quit("Lighthouse JSON results not found.")
    except TimingTraceError as e:
        _print_error_and_quit(str(e))

    trace_file_path = save_trace_of_timings(entries, trace_path_for_results(filename))
    typer.echo(
        f"\n  > Timing trace file saved to: {trace_file_path}\n"
        "  > Open this file in chrome://tracing\n"
    )


if __name__ == "__main__":  # pragma: no cover
    app()
