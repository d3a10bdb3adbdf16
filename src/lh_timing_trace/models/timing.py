"""Pydantic models for the timing section of a Lighthouse results (LHR) file.

Only `timing.entries` is consumed; every other LHR key is ignored. Entry fields
are typed permissively because malformed values must flow through the mapper
unchanged instead of being rejected at load time.
"""
from __future__ import annotations

from typing import Any, Dict, List, Tuple

from pydantic import BaseModel, ConfigDict, Field, PrivateAttr, model_validator


class TimingEntry(BaseModel):
    """A single user-timing measurement (mark, measure, resource, ...).

    Additional fields are kept (``extra="allow"``) so they can be surfaced
    under the trace event ``args``. The key order of the source object is
    remembered; `ordered_fields` replays it.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    name: Any = None
    entryType: Any = None
    startTime: Any = None
    duration: Any = None

    _key_order: Tuple[str, ...] = PrivateAttr(default=())

    @model_validator(mode="wrap")
    @classmethod
    def _remember_key_order(cls, data: Any, handler: Any) -> "TimingEntry":
        entry = handler(data)
        if isinstance(data, dict):
            entry._key_order = tuple(data)
        return entry

    def ordered_fields(self) -> Dict[str, Any]:
        """Return the fields present in the source, in source order.

        Declared fields that were never supplied are left out.
        """
        dumped = self.model_dump(exclude_unset=True)
        ordered = {k: dumped[k] for k in self._key_order if k in dumped}
        for k, v in dumped.items():
            ordered.setdefault(k, v)
        return ordered


class TimingData(BaseModel):
    """Container for the ordered list of timing entries."""

    model_config = ConfigDict(extra="ignore")

    entries: List[TimingEntry] = Field(...)


class LighthouseResult(BaseModel):
    """The subset of a Lighthouse result document this tool reads."""

    model_config = ConfigDict(extra="ignore")

    timing: TimingData
