"""
Timecode aggregation.

Pipeline steps:
- select the elements carrying a `data-time` attribute
- filter on a label substring
- map to time strings, then to seconds
- reduce to a total

Parsing is lenient: malformed time strings do not raise, they turn into NaN
and the NaN carries through to the total.
"""

from __future__ import annotations

import logging
import math
import re
from functools import reduce
from typing import Iterable, List, Optional

from bs4 import BeautifulSoup
from charset_normalizer import from_bytes

from .models import Number, TimecodeTally, TimeEntry
from .rules import SECONDS_PER_MINUTE, TIME_ATTRIBUTE, TIME_SELECTOR, TIME_SEPARATOR

logger = logging.getLogger(__name__)

# Accepted segment forms: decimals with an optional exponent, signed Infinity,
# and unsigned 0x/0o/0b integers.
_DECIMAL_LITERAL = re.compile(r"[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)", re.ASCII)
_PREFIXED_INTEGER = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)", re.ASCII)


def decode_document(raw: bytes) -> str:
    """
    Decode uploaded document bytes to text.

    Uses charset-normalizer's best guess; anything it cannot decode falls back
    to UTF-8 with replacement characters.
    """
    match = from_bytes(raw).best()
    encoding = match.encoding if match is not None else "utf-8"

    try:
        return raw.decode(encoding)
    except (LookupError, UnicodeDecodeError):
        logger.debug("Decoding as %s failed, using utf-8 with replacement", encoding)
        return raw.decode("utf-8", errors="replace")


def select_entries(html: str) -> List[TimeEntry]:
    soup = BeautifulSoup(html, "html.parser")
    entries = [
        TimeEntry(label=element.get_text(), time=element.get(TIME_ATTRIBUTE))
        for element in soup.select(TIME_SELECTOR)
    ]
    logger.debug("Selected %d timed elements", len(entries))
    return entries


def filter_entries(entries: Iterable[TimeEntry], match: str) -> List[TimeEntry]:
    return [entry for entry in entries if match in entry.label]


def time_strings(entries: Iterable[TimeEntry]) -> List[str]:
    return [entry.time for entry in entries]


def _segment_value(segment: Optional[str]) -> Number:
    # Missing segment -> NaN, blank segment -> 0, any other form -> NaN.
    if segment is None:
        return math.nan
    text = segment.strip()
    if not text:
        return 0
    if _PREFIXED_INTEGER.fullmatch(text):
        return int(text, 0)
    if _DECIMAL_LITERAL.fullmatch(text):
        return float(text)
    return math.nan


def _tidy(value: float) -> Number:
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def to_seconds(time: str) -> Number:
    """Convert an "M:SS" string to seconds as minutes*60 + seconds.

    Only the first two segments are read. Never raises on bad input.
    """
    parts = time.split(TIME_SEPARATOR)
    minutes = _segment_value(parts[0])
    seconds = _segment_value(parts[1] if len(parts) > 1 else None)
    return _tidy(minutes * SECONDS_PER_MINUTE + seconds)


def seconds_list(times: Iterable[str]) -> List[Number]:
    return [to_seconds(time) for time in times]


def sum_seconds(values: Iterable[Number]) -> Number:
    return _tidy(reduce(lambda acc, secs: acc + secs, values, 0))


def total_seconds(entries: Iterable[TimeEntry], match: str) -> Number:
    return sum_seconds(seconds_list(time_strings(filter_entries(entries, match))))


def total_seconds_single_pass(entries: Iterable[TimeEntry], match: str) -> Number:
    """Same result as `total_seconds`, folded in one pass."""
    return _tidy(
        reduce(
            lambda acc, entry: acc + to_seconds(entry.time) if match in entry.label else acc,
            entries,
            0,
        )
    )


def tally(entries: Iterable[TimeEntry], match: str) -> TimecodeTally:
    kept = filter_entries(entries, match)
    times = time_strings(kept)
    seconds = seconds_list(times)
    total = sum_seconds(seconds)

    logger.info("Total for %r over %d entries: %s", match, len(kept), total)
    if isinstance(total, float) and not math.isfinite(total):
        logger.warning("Total for %r is not a finite number; check the time strings", match)

    return TimecodeTally(
        match=match,
        entries=kept,
        time_strings=times,
        seconds=seconds,
        total=total,
    )
