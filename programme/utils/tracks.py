"""Ordering helpers matching how the front end lists the programme."""

from __future__ import annotations

import datetime as dt
import re
from typing import Iterable, List, Tuple

from programme.models.session import SessionRecord

MISSING_TRACK = (999.0, 0.0)
# Letter-prefixed tracks (posters) sort after every numbered track.
LETTER_TRACK_OFFSET = 1000.0


def _to_float(value: str, default: float) -> float:
    try:
        return float(value)
    except ValueError:
        return default


def track_sort_key(track: str) -> Tuple[float, float]:
    if not track:
        return MISSING_TRACK
    if track[0].isalpha():
        digits = re.sub(r"[^0-9.]", "", track)
        return LETTER_TRACK_OFFSET + _to_float(digits, 999.0), 0.0
    if "." in track:
        major, minor = track.split(".", 1)
        return _to_float(major, 0.0), _to_float(minor.rstrip("*"), 0.0)
    return _to_float(track.rstrip("*"), 0.0), 0.0


def start_instant(record: SessionRecord) -> dt.datetime:
    """First timestamp of ``formatted_time``; bare dates start at midnight."""
    head = record.formatted_time.split(" - ", 1)[0]
    try:
        return dt.datetime.fromisoformat(head)
    except ValueError:
        return dt.datetime.min


def sort_records(records: Iterable[SessionRecord]) -> List[SessionRecord]:
    return sorted(records, key=lambda record: (track_sort_key(record.track), start_instant(record)))
