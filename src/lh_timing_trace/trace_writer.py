"""Rendering and writing of Chrome trace-event files.

The output layout keeps one event per line inside the ``traceEvents`` array so
large traces stay diffable; only JSON validity and the ``traceEvents`` key are
relied upon by trace viewers.

`save_trace_of_timings` writes atomically (temporary file then rename) so an
interrupted run never leaves a truncated trace behind.
"""
from __future__ import annotations

import json
import logging
import math
import os
from pathlib import Path
from typing import Any, Iterable, Optional, Sequence, Union

from .config import get_settings
from .mapper import EntryLike, generate_trace_events
from .models.trace import TraceEvent

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def _finite_or_null(value: Any) -> Any:
    """Recursively replace NaN/inf floats, which strict JSON cannot carry, with None."""
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, dict):
        return {k: _finite_or_null(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_finite_or_null(v) for v in value]
    return value


def render_trace_json(events: Sequence[TraceEvent]) -> str:
    """Render events as a ``{"traceEvents": [...]}`` JSON document.

    Non-finite numbers anywhere in an event (including passthrough ``args``)
    are written as ``null``.
    """
    body = ",\n".join(
        json.dumps(_finite_or_null(evt.to_trace_dict()), allow_nan=False) for evt in events
    )
    return f'\n  {{ "traceEvents": [\n    {body}\n  ]}}'


def default_trace_path() -> Path:
    """Trace path used when the caller does not supply one."""
    return Path.cwd() / get_settings().DEFAULT_TRACE_FILENAME


def trace_path_for_results(results_path: PathLike) -> Path:
    """Derive the trace path written next to a results file."""
    return Path(f"{os.fspath(results_path)}{get_settings().TRACE_FILE_SUFFIX}")


def save_trace_of_timings(
    entries: Iterable[EntryLike],
    trace_file_path: Optional[PathLike] = None,
) -> Path:
    """Map timing entries to trace events and write them to disk.

    Args:
        entries: User-timing entries to convert.
        trace_file_path: Destination file. Defaults to `default_trace_path`.

    Returns:
        The path that was written.
    """
    events = generate_trace_events(entries)
    path = Path(trace_file_path) if trace_file_path else default_trace_path()
    rendered = render_trace_json(events)

    tmp_path = f"{path}.tmp"
    os.makedirs(path.parent, exist_ok=True)
    with open(tmp_path, "w", encoding="utf-8") as f:
        f.write(rendered)
    os.replace(tmp_path, path)
    logger.info("Wrote %d trace events to %s", len(events), path)
    return path


__all__ = [
    "default_trace_path",
    "render_trace_json",
    "save_trace_of_timings",
    "trace_path_for_results",
]
