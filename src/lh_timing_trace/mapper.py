"""Conversion of Lighthouse user-timing entries into Chrome trace events.

`generate_trace_events` is a pure function: no I/O, no shared state. Each call
owns its own id counter, so repeated calls over the same input yield identical
output.

Lane classification (precedence order):
    1. Start on the ``Measurements`` process lane.
    2. ``mark`` -> ``Marks``.
    3. ``measure`` stays on ``Measurements`` and gets a thread lane from its
       name prefix: ``audit-`` -> ``Audits``, ``gather-`` -> ``Gatherers``,
       anything else -> ``TopLevelMeasures``.
    4. Every other entry type (``resource`` included) -> ``Primary``.

Resource entries additionally carry their original name as ``args.url`` and
are renamed to ``resource``.

Malformed entries are passed through rather than rejected: a non-numeric
``startTime``/``duration`` becomes a NaN timestamp/duration.
"""
from __future__ import annotations

import logging
import math
from typing import Any, Dict, Iterable, List, Mapping, Optional, Union

from .models.timing import TimingEntry
from .models.trace import TraceEvent

logger = logging.getLogger(__name__)

MARKS_LANE = "Marks"
MEASUREMENTS_LANE = "Measurements"
PRIMARY_LANE = "Primary"

AUDITS_LANE = "Audits"
GATHERERS_LANE = "Gatherers"
TOP_LEVEL_MEASURES_LANE = "TopLevelMeasures"

RESOURCE_EVENT_NAME = "resource"

# ``toJSON`` is the serialization helper attached to browser PerformanceEntry
# objects; it is behavior, not data.
ARGS_EXCLUDED_KEYS = frozenset({"entryType", "name", "toJSON"})

EntryLike = Union[TimingEntry, Mapping[str, Any]]

__all__ = [
    "ARGS_EXCLUDED_KEYS",
    "classify_process_lane",
    "classify_thread_lane",
    "format_event_id",
    "generate_trace_events",
]


def classify_process_lane(entry_type: Any) -> str:
    """Return the ``pid`` lane label for an entry type."""
    if entry_type == "mark":
        return MARKS_LANE
    if entry_type == "measure":
        return MEASUREMENTS_LANE
    return PRIMARY_LANE


def classify_thread_lane(entry_type: Any, name: Any) -> Optional[str]:
    """Return the ``tid`` lane label, or None for anything but a measure."""
    if entry_type != "measure":
        return None
    if isinstance(name, str):
        if name.startswith("audit-"):
            return AUDITS_LANE
        if name.startswith("gather-"):
            return GATHERERS_LANE
    return TOP_LEVEL_MEASURES_LANE


def format_event_id(counter: int) -> str:
    return f"0x{counter:x}"


def _to_micros(value: Any) -> float:
    # bool is an int subclass but not a valid timing value
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return math.nan
    return value * 1000


def _entry_fields(entry: EntryLike) -> Dict[str, Any]:
    """Return a fresh, ordered copy of an entry's fields.

    Models only contribute fields present in the source document, in source
    order, so a key missing from the input does not appear in ``args``.
    """
    if isinstance(entry, TimingEntry):
        return entry.ordered_fields()
    return dict(entry)


def _build_event(fields: Dict[str, Any], counter: int) -> TraceEvent:
    entry_type = fields.get("entryType")
    name = fields.get("name")
    duration = fields.get("duration")

    if entry_type == "resource":
        fields["url"] = name
        event_name = RESOURCE_EVENT_NAME
    else:
        event_name = name

    ts = _to_micros(fields.get("startTime"))
    dur = _to_micros(duration)
    if math.isnan(ts) or math.isnan(dur):
        logger.debug("Timing entry %r has non-numeric startTime/duration", name)

    instant = not isinstance(duration, bool) and duration == 0
    args = {k: v for k, v in fields.items() if k not in ARGS_EXCLUDED_KEYS}
    return TraceEvent(
        name=event_name,
        cat=entry_type,
        ts=ts,
        dur=dur,
        pid=classify_process_lane(entry_type),
        tid=classify_thread_lane(entry_type, name),
        ph="n" if instant else "X",
        s="t" if instant else None,
        id=format_event_id(counter),
        args=args,
    )


def generate_trace_events(entries: Iterable[EntryLike]) -> List[TraceEvent]:
    """Map timing entries to trace events, one per entry, preserving order.

    Args:
        entries: Timing entries as `TimingEntry` models or plain mappings
            (e.g. decoded JSON objects). They are never mutated.

    Returns:
        Trace events whose ids are ``0x0``, ``0x1``, ... in input order.
    """
    events: List[TraceEvent] = []
    for counter, entry in enumerate(entries):
        events.append(_build_event(_entry_fields(entry), counter))
    logger.debug("Mapped %d timing entries to trace events", len(events))
    return events
