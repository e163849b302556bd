"""
Tolerant timestamp/value scanner.

extract() walks raw text looking for an anchor literal (``"2014-"`` by
default) and tries to read a quoted timestamp starting at the anchor
followed by ``:`` and a number. Candidates that do not resolve are
dropped silently; scanning always resumes one character past the current
anchor so a corrupt region cannot hide later records.
"""

from __future__ import annotations

from tempsort._api import (
    DEFAULT_ANCHOR,
    MAX_ENTRIES,
    MAX_TIMESTAMP_LEN,
    VALUE_LEAD,
    _is_blank,
    _is_delimiter,
    _scan_float,
)
from tempsort.records import Record, RecordCollection


def extract(
    raw_text: str,
    *,
    max_entries: int = MAX_ENTRIES,
    anchor: str = DEFAULT_ANCHOR,
) -> RecordCollection:
    """
    Scan raw_text for timestamp/value pairs.

    Args:
        raw_text: Loosely structured text, e.g. ``{"2014-02-13T06:20:00": "3.0"}``.
        max_entries: Capacity of the returned collection. Scanning stops
            once it is full.
        anchor: Literal that starts every timestamp field.

    Returns:
        RecordCollection in the order the records appear in the text.

    Raises:
        ValueError: anchor is empty.
    """
    if not anchor:
        raise ValueError("anchor must be a non-empty string")

    records = RecordCollection(capacity=max_entries)
    n = len(raw_text)
    cursor = 0

    while cursor < n and not records.is_full:
        start = raw_text.find(anchor, cursor)
        if start < 0:
            break
        record = _read_candidate(raw_text, start, cursor)
        if record is not None:
            records.append(record)
        cursor = start + 1

    return records


def _read_candidate(text: str, start: int, floor: int) -> Record | None:
    """Resolve the candidate whose timestamp begins at start, or None."""
    n = len(text)

    # Opening delimiter: walk back no further than the scan floor.
    pos = start - 1
    while pos > floor and not _is_delimiter(text[pos]):
        pos -= 1
    if pos < 0 or not _is_delimiter(text[pos]):
        return None

    end = start
    while end < n and not _is_delimiter(text[end]):
        end += 1
    timestamp = text[start:end]
    if len(timestamp) > MAX_TIMESTAMP_LEN:
        return None

    colon = text.find(":", end)
    if colon < 0:
        return None

    pos = colon + 1
    while pos < n and (_is_blank(text[pos]) or _is_delimiter(text[pos])):
        pos += 1
    if pos >= n or text[pos] not in VALUE_LEAD:
        return None

    parsed = _scan_float(text, pos)
    if parsed is None:
        return None
    value, _ = parsed
    return Record(timestamp, value)
