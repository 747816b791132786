"""Diagnostics collected during a parse run."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from .session import SessionRecord


class ParseReport(BaseModel):
    """Counts describing how the input was segmented and filtered."""

    blocks_found: int = 0
    session_blocks: int = 0
    poster_blocks: int = 0
    blocks_without_time: int = 0
    candidates_seen: int = 0
    candidates_discarded: int = 0
    records: List[SessionRecord] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.records)
