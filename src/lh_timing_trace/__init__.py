"""Package initialization for lh-timing-trace.

Re-exports the public conversion API so callers can write
`from lh_timing_trace import generate_trace_events`.
"""

from .mapper import generate_trace_events
from .trace_writer import render_trace_json, save_trace_of_timings

__all__ = ["generate_trace_events", "render_trace_json", "save_trace_of_timings"]
