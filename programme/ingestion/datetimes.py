"""Turn weekday and ``HH.MM - HH.MM`` pairs into ISO-8601 strings."""

from __future__ import annotations

from typing import Optional

from programme.models.profile import ConferenceProfile


def to_clock(token: str) -> str:
    """``"11.15"`` -> ``"11:15:00"``; values are not range-checked."""
    return f"{token.strip().replace('.', ':', 1)}:00"


def format_date_time(
    day: Optional[str], time_range: Optional[str], profile: ConferenceProfile
) -> str:
    """Return ``"<date>T<start> - <date>T<end>"`` or the bare date when no time is known."""
    base_date = profile.date_for(day)
    if not time_range:
        return base_date
    start, _, end = time_range.partition(" - ")
    start_stamp = f"{base_date}T{to_clock(start)}"
    if not end:
        return start_stamp
    return f"{start_stamp} - {base_date}T{to_clock(end)}"
