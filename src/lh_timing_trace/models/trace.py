"""Pydantic model for a single Chrome trace-format event.

`TraceEvent` is the target structure of the `mapper` module. `to_trace_dict`
produces the exact mapping written to the ``traceEvents`` array.
"""
from __future__ import annotations

import math
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_serializer


class TraceEvent(BaseModel):
    """One instant (``ph="n"``) or complete (``ph="X"``) trace event.

    ``pid``/``tid`` are lane labels used by trace viewers to group events; they
    are not OS identifiers. ``tid`` is only populated for measures and ``s``
    only for instant events; both are omitted from the output when unset.
    """

    name: Any
    cat: Any
    ts: Any
    dur: Any
    pid: str
    tid: Optional[str] = None
    ph: str
    s: Optional[str] = None
    id: str
    args: Dict[str, Any] = Field(default_factory=dict)

    @field_serializer("ts", "dur")
    def _finite_or_null(self, value: Any) -> Any:
        # NaN/inf are not valid JSON
        if isinstance(value, float) and not math.isfinite(value):
            return None
        return value

    def to_trace_dict(self) -> Dict[str, Any]:
        """Return the event as a plain dict with unset optional keys removed."""
        data = self.model_dump()
        if data["tid"] is None:
            del data["tid"]
        if data["s"] is None:
            del data["s"]
        return data


__all__ = ["TraceEvent"]
