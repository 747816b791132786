"""Block and session-level data models."""

from __future__ import annotations

from typing import List, Literal, Optional

from pydantic import BaseModel, Field

BlockKind = Literal["session", "poster"]

# Shorter "titles" are stray fragments such as room numbers.
MIN_TITLE_LENGTH = 5


class Block(BaseModel):
    """Lines captured from one anchor up to the next boundary."""

    kind: BlockKind
    session_number: Optional[str] = None
    is_exhibitor: bool = False
    day_name: Optional[str] = None
    time_range: Optional[str] = None
    lines: List[str] = Field(default_factory=list)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


class SessionItem(BaseModel):
    """One parsed timetable entry before ids are assigned."""

    session_number: str
    title: str = ""
    speaker: str = ""
    time: str = ""
    date: str = ""
    category: str = ""
    location: str = ""
    track: str = ""
    abstract_number: str = ""


class SessionRecord(BaseModel):
    """Entry written to the front-end fixture."""

    id: int
    session_number: str
    title: str = Field(..., min_length=MIN_TITLE_LENGTH + 1)
    speaker: str = ""
    time: str = ""
    date: str = ""
    category: str = ""
    location: str = ""
    track: str = ""
    abstract_number: str = ""
    formatted_time: str


class ImportRow(BaseModel):
    """Row shape of the hosted ``sessions`` table."""

    title: str
    speaker: str
    description: str
    location: str
    start_time: str
    end_time: str
    track: str
    day: str
