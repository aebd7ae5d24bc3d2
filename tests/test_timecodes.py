import math
from types import SimpleNamespace

import pytest

from app import timecodes
from app.models import TimeEntry
from app.timecodes import (
    decode_document,
    filter_entries,
    select_entries,
    sum_seconds,
    tally,
    time_strings,
    to_seconds,
    total_seconds,
    total_seconds_single_pass,
)

ENTRIES = [
    TimeEntry(label="Flexbox intro", time="3:20"),
    TimeEntry(label="CSS Grid", time="5:00"),
    TimeEntry(label="Flexbox advanced", time="4:15"),
]


def _same(a, b):
    if isinstance(a, float) and math.isnan(a):
        return isinstance(b, float) and math.isnan(b)
    return a == b


def test_worked_example():
    kept = filter_entries(ENTRIES, "Flexbox")
    assert [e.label for e in kept] == ["Flexbox intro", "Flexbox advanced"]
    assert time_strings(kept) == ["3:20", "4:15"]
    assert total_seconds(ENTRIES, "Flexbox") == 455


def test_empty_input_sums_to_zero():
    assert total_seconds([], "Flexbox") == 0
    assert sum_seconds([]) == 0


def test_single_zero_entry():
    assert total_seconds([TimeEntry(label="Flexbox", time="0:00")], "Flexbox") == 0


def test_filter_is_case_sensitive_substring():
    entries = [TimeEntry(label="flexbox", time="1:00"), TimeEntry(label="MyFlexboxes", time="2:00")]
    assert [e.label for e in filter_entries(entries, "Flexbox")] == ["MyFlexboxes"]


@pytest.mark.parametrize(
    "time, expected",
    [
        ("3:20", 200),
        ("0:00", 0),
        ("10:05", 605),
        ("1:5", 65),
        ("2:", 120),
        (":30", 30),
        ("1:00:59", 60),
        ("1.5:00", 90),
        ("0x10:00", 960),
        ("0b11:0o7", 187),
        ("1e1:00", 600),
        (" 2 : 05 ", 125),
        ("010:.5e1", 605),
    ],
)
def test_to_seconds(time, expected):
    value = to_seconds(time)
    assert value == expected
    assert isinstance(value, int)


@pytest.mark.parametrize(
    "time",
    ["abc", "3:xx", "5", "", "x:10", "1_0:00", "inf:00", "nan:00", "+0x10:00", "0x:00", "Infinity:-Infinity"],
)
def test_malformed_time_yields_nan(time):
    assert math.isnan(to_seconds(time))


def test_nan_propagates_into_total():
    entries = ENTRIES + [TimeEntry(label="Flexbox broken", time="oops")]
    assert math.isnan(total_seconds(entries, "Flexbox"))


@pytest.mark.parametrize(
    "entries, match",
    [
        (ENTRIES, "Flexbox"),
        (ENTRIES, "Grid"),
        (ENTRIES, ""),
        (ENTRIES, "nothing"),
        ([], "Flexbox"),
        (ENTRIES + [TimeEntry(label="Flexbox bad", time="?:10")], "Flexbox"),
        ([TimeEntry(label="a", time="0.5:0.25"), TimeEntry(label="a", time="1:1")], "a"),
    ],
)
def test_chain_matches_single_pass(entries, match):
    assert _same(total_seconds(entries, match), total_seconds_single_pass(entries, match))


def test_select_entries_reads_text_content_and_attribute():
    html = '<div><span data-time="1:00">Flexbox <em>deep</em> dive</span><span>Flexbox</span></div>'
    entries = select_entries(html)
    assert entries == [TimeEntry(label="Flexbox deep dive", time="1:00")]


def test_decode_document_handles_utf8():
    assert decode_document("<p data-time='1:00'>Straße</p>".encode("utf-8")) == "<p data-time='1:00'>Straße</p>"


def test_tally_report():
    result = tally(ENTRIES, "Flexbox")
    assert result.match == "Flexbox"
    assert len(result.entries) == 2
    assert result.seconds == [200, 255]
    assert result.total == 455


def test_infinity_is_a_number():
    assert to_seconds("Infinity:00") == math.inf
    assert to_seconds("1:-Infinity") == -math.inf


def test_no_matches_sums_to_zero():
    assert total_seconds(ENTRIES, "nothing") == 0
    assert tally(ENTRIES, "nothing").total == 0


def test_decode_document_falls_back_to_utf8_replacement(monkeypatch):
    guess = SimpleNamespace(best=lambda: None)
    monkeypatch.setattr(timecodes, "from_bytes", lambda raw: guess)
    assert decode_document(b"<p>\xff</p>") == "<p>�</p>"


def test_decode_document_unknown_encoding_falls_back(monkeypatch):
    guess = SimpleNamespace(best=lambda: SimpleNamespace(encoding="no-such-codec"))
    monkeypatch.setattr(timecodes, "from_bytes", lambda raw: guess)
    assert decode_document(b"<p>ok</p>") == "<p>ok</p>"
