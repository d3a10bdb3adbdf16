from __future__ import annotations

import json

import pytest

from lh_timing_trace.errors import InvalidResultsError, ResultsNotFoundError, TimingTraceError
from lh_timing_trace.models.timing import TimingEntry
from lh_timing_trace.results import load_lighthouse_result, load_timing_entries


def _write(path, payload):
    path.write_text(json.dumps(payload), encoding="utf-8")
    return path


def test_loads_entries_in_order_with_extra_fields(tmp_path):
    lhr = _write(
        tmp_path / "lhr.json",
        {
            "lighthouseVersion": "9.6.8",
            "timing": {
                "total": 1234,
                "entries": [
                    {"name": "lh:init:config", "entryType": "mark", "startTime": 1, "duration": 0},
                    {"name": "audit-a", "entryType": "measure", "startTime": 2, "duration": 5, "detail": None},
                ],
            },
        },
    )
    entries = load_timing_entries(lhr)
    assert all(isinstance(e, TimingEntry) for e in entries)
    assert [e.name for e in entries] == ["lh:init:config", "audit-a"]
    assert entries[1].model_extra == {"detail": None}


def test_empty_entries(tmp_path):
    lhr = _write(tmp_path / "lhr.json", {"timing": {"entries": []}})
    assert load_lighthouse_result(lhr).timing.entries == []


def test_missing_file(tmp_path):
    with pytest.raises(ResultsNotFoundError):
        load_timing_entries(tmp_path / "nope.json")


def test_invalid_json(tmp_path):
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(InvalidResultsError) as excinfo:
        load_timing_entries(bad)
    assert isinstance(excinfo.value.__cause__, json.JSONDecodeError)


@pytest.mark.parametrize("payload", [{}, {"timing": {}}, {"timing": {"entries": "x"}}, []])
def test_missing_timing_entries(tmp_path, payload):
    lhr = _write(tmp_path / "lhr.json", payload)
    with pytest.raises(TimingTraceError, match="timing.entries"):
        load_timing_entries(lhr)


def test_non_utf8_bytes(tmp_path):
    bad = tmp_path / "lhr.json"
    bad.write_bytes(b'{"timing":{"entries":[{"name":"\xff"}]}}')
    with pytest.raises(InvalidResultsError) as excinfo:
        load_timing_entries(bad)
    assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


def test_directory_path(tmp_path):
    with pytest.raises(InvalidResultsError) as excinfo:
        load_timing_entries(tmp_path)
    assert isinstance(excinfo.value.__cause__, OSError)


def test_entries_keep_source_key_order(tmp_path):
    lhr = tmp_path / "lhr.json"
    lhr.write_text(
        '{"timing": {"entries": [{"detail": 1, "name": "audit-a", "entryType": "measure",'
        ' "duration": 2, "startTime": 3}]}}',
        encoding="utf-8",
    )
    (entry,) = load_timing_entries(lhr)
    assert list(entry.ordered_fields()) == ["detail", "name", "entryType", "duration", "startTime"]
