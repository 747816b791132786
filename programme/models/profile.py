"""Per-year conference profile.

Everything that ties the parser to one year's timetable layout lives here:
the weekday calendar, the room names used to tell speakers from locations,
and the phrases that close a block. A new year means a new profile file,
not new parsing code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class ConferenceProfile(BaseModel):
    """Literal values the timetable parser matches against."""

    day_dates: Dict[str, str] = Field(
        default_factory=lambda: {
            "Monday": "2025-09-08",
            "Tuesday": "2025-09-09",
            "Wednesday": "2025-09-10",
            "Thursday": "2025-09-11",
            "Friday": "2025-09-12",
        }
    )
    default_date: str = "2025-09-08"
    # A line after the title containing one of these is a room, not a speaker.
    room_names: List[str] = Field(
        default_factory=lambda: ["Michael Sadler", "Clothworkers", "Stage@Leeds"]
    )
    location_names: List[str] = Field(
        default_factory=lambda: [
            "Michael Sadler",
            "Clothworkers",
            "Stage@Leeds",
            "Esther Simpson",
        ]
    )
    terminators: List[str] = Field(
        default_factory=lambda: ["BREAK:", "LUNCH:", "Tea/coffee and Farewell"]
    )
    poster_terminators: List[str] = Field(
        default_factory=lambda: ["Tuesday 09.00 - 09.10"]
    )
    poster_location: str = "Parkinson Court"
    item_tags: List[str] = Field(
        default_factory=lambda: ["WORKSHOP", "LIGHTNING TALKS", "Exhibitor Presentation"]
    )

    def date_for(self, day: Optional[str]) -> str:
        if not day:
            return self.default_date
        return self.day_dates.get(day, self.default_date)


def load_profile(path: Optional[Path] = None) -> ConferenceProfile:
    """Read a profile from JSON, or return the built-in defaults."""
    if path is None:
        return ConferenceProfile()
    return ConferenceProfile.model_validate_json(path.read_text(encoding="utf-8"))
