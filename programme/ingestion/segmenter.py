"""Split raw timetable text into session and poster blocks."""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Tuple

from programme.models.profile import ConferenceProfile
from programme.models.session import Block, BlockKind

logger = logging.getLogger(__name__)

SESSION_ANCHOR = re.compile(r"^(EXHIBITOR\s+)?SESSION\s+(\d+)$")
POSTER_ANCHOR = "Posters"
DAY_TIME_PATTERN = re.compile(
    r"(Monday|Tuesday|Wednesday|Thursday|Friday)\s+(\d{1,2}\.\d{2})\s*-\s*(\d{1,2}\.\d{2})"
)

# Window sizes tuned against the 2025 timetable, anchor line included.
SESSION_LOOKAHEAD = 50
POSTER_LOOKAHEAD = 100


def match_day_time(line: str) -> Optional[Tuple[str, str]]:
    """Return ``(weekday, "HH.MM - HH.MM")`` if the line carries a slot header."""
    match = DAY_TIME_PATTERN.search(line.strip())
    if not match:
        return None
    return match.group(1), f"{match.group(2)} - {match.group(3)}"


def is_session_anchor(line: str) -> bool:
    return SESSION_ANCHOR.match(line.strip()) is not None


def _closes_block(line: str, kind: BlockKind, profile: ConferenceProfile) -> bool:
    if is_session_anchor(line):
        return True
    if any(phrase in line for phrase in profile.terminators):
        return True
    if kind == "poster":
        return any(phrase in line for phrase in profile.poster_terminators)
    return False


def collect_block(
    lines: List[str],
    start: int,
    kind: BlockKind,
    profile: ConferenceProfile,
    session_number: Optional[str] = None,
    is_exhibitor: bool = False,
) -> Block:
    """Gather lines from the anchor at ``start`` until a boundary or the lookahead cap."""
    lookahead = SESSION_LOOKAHEAD if kind == "session" else POSTER_LOOKAHEAD
    block = Block(kind=kind, session_number=session_number, is_exhibitor=is_exhibitor)
    for index in range(start, min(start + lookahead, len(lines))):
        line = lines[index]
        if index > start and _closes_block(line, kind, profile):
            break
        if kind == "session" and line.strip() == POSTER_ANCHOR:
            # The poster block is segmented separately; its header may also parse here.
            logger.debug("Session %s window runs into a Posters block", session_number)
        block.lines.append(line)
        if index == start + 1:
            header = match_day_time(line)
            if header:
                block.day_name, block.time_range = header
    return block


def segment_blocks(text: str, profile: ConferenceProfile) -> List[Block]:
    """Return every anchored block in document order."""
    lines = text.split("\n")
    blocks: List[Block] = []
    for index, raw_line in enumerate(lines):
        line = raw_line.strip()
        anchor = SESSION_ANCHOR.match(line)
        if anchor:
            block = collect_block(
                lines,
                index,
                "session",
                profile,
                session_number=anchor.group(2),
                is_exhibitor=bool(anchor.group(1)),
            )
        elif line == POSTER_ANCHOR:
            block = collect_block(lines, index, "poster", profile)
        else:
            continue
        logger.debug(
            "Found %s block %s (exhibitor: %s) %s %s",
            block.kind,
            block.session_number or "-",
            block.is_exhibitor,
            block.day_name or "",
            block.time_range or "",
        )
        blocks.append(block)
    return blocks
