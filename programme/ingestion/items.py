"""Recover individual timetable entries from session and poster blocks.

Fields are located by position relative to the ``#<abstract>`` marker: the
line after it is the title and the line after the title is the speaker.
The PDF carries no field labels, so a document that swaps title and speaker
around the marker will be mis-assigned silently.
"""

from __future__ import annotations

import logging
import re
from typing import Callable, Iterator, List, Optional

from programme.models.profile import ConferenceProfile
from programme.models.report import ParseReport
from programme.models.session import MIN_TITLE_LENGTH, Block, SessionItem

logger = logging.getLogger(__name__)

SESSION_HEADER_PATTERN = re.compile(r"^(\d+\.\d+\*?)\s+(.+)$")
POSTER_HEADER_PATTERN = re.compile(r"^(P\d+)\s+(.+)$")
POSTER_CANDIDATE_PATTERN = re.compile(r"P\d+\s+[^\n]+[\s\S]*?(?=P\d+|\Z)")
ABSTRACT_PATTERN = re.compile(r"#(\d+)")
TITLE_PATTERN = re.compile(r"#\d+\s*\n([^\n]+)")
SPEAKER_PATTERN = re.compile(r"#\d+\s*\n[^\n]+\n([^\n]+)")

# Header, title and speaker/room lines at minimum.
MIN_CANDIDATE_LINES = 3

# Returns None when the first line is not a track-code header.
ItemBuilder = Callable[[List[str], str], Optional[SessionItem]]


def session_candidate_pattern(profile: ConferenceProfile) -> re.Pattern[str]:
    """Track-code header, optional tag, then everything up to the next track code."""
    tags = "|".join(rf"{re.escape(tag)}\s+" for tag in profile.item_tags)
    return re.compile(rf"\d+\.\d+\*?\s+(?:{tags})?[^\n]+[\s\S]*?(?=\d+\.\d+|\Z)")


def candidate_lines(candidate: str) -> List[str]:
    return [line.strip() for line in candidate.split("\n") if line.strip()]


def extract_abstract_number(candidate: str) -> str:
    match = ABSTRACT_PATTERN.search(candidate)
    return match.group(1) if match else ""


def extract_title(candidate: str) -> str:
    match = TITLE_PATTERN.search(candidate)
    return match.group(1).strip() if match else ""


def extract_speaker(candidate: str, rejected: List[str]) -> str:
    """Return the line after the title unless it names a room."""
    match = SPEAKER_PATTERN.search(candidate)
    if not match:
        return ""
    line = match.group(1).strip()
    if any(name in line for name in rejected):
        return ""
    return line


def extract_location(lines: List[str], names: List[str]) -> str:
    for line in lines:
        if any(name in line for name in names):
            return line
    return ""


def _parse_candidates(
    candidates: Iterator[str],
    build: ItemBuilder,
    report: Optional[ParseReport],
) -> List[SessionItem]:
    items: List[SessionItem] = []
    for candidate in candidates:
        if report is not None:
            report.candidates_seen += 1
        lines = candidate_lines(candidate)
        item = build(lines, candidate) if len(lines) >= MIN_CANDIDATE_LINES else None
        if item is None or len(item.title) <= MIN_TITLE_LENGTH:
            if report is not None:
                report.candidates_discarded += 1
            continue
        items.append(item)
    return items


def parse_session_block(
    block: Block,
    profile: ConferenceProfile,
    report: Optional[ParseReport] = None,
) -> List[SessionItem]:
    """Parse the decimal-coded entries (``1.1``, ``7.2*``) of a session block."""

    def build(lines: List[str], candidate: str) -> Optional[SessionItem]:
        header = SESSION_HEADER_PATTERN.match(lines[0])
        if not header:
            return None
        return SessionItem(
            session_number=block.session_number or "",
            track=header.group(1),
            category=header.group(2),
            time=block.time_range or "",
            date=block.day_name or "",
            abstract_number=extract_abstract_number(candidate),
            title=extract_title(candidate),
            speaker=extract_speaker(candidate, profile.room_names),
            location=extract_location(lines, profile.location_names),
        )

    pattern = session_candidate_pattern(profile)
    candidates = (match.group(0) for match in pattern.finditer(block.text))
    items = _parse_candidates(candidates, build, report)
    logger.debug("Found %s items in session %s", len(items), block.session_number)
    return items


def parse_poster_block(
    block: Block,
    profile: ConferenceProfile,
    report: Optional[ParseReport] = None,
) -> List[SessionItem]:
    """Parse the ``P<n>`` entries of a poster block."""
    rejected = [profile.poster_location, *profile.room_names]

    def build(lines: List[str], candidate: str) -> Optional[SessionItem]:
        header = POSTER_HEADER_PATTERN.match(lines[0])
        if not header:
            return None
        return SessionItem(
            session_number="Poster",
            track=header.group(1),
            category=header.group(2),
            time=block.time_range or "",
            date=block.day_name or "",
            location=profile.poster_location,
            abstract_number=extract_abstract_number(candidate),
            title=extract_title(candidate),
            speaker=extract_speaker(candidate, rejected),
        )

    candidates = (match.group(0) for match in POSTER_CANDIDATE_PATTERN.finditer(block.text))
    items = _parse_candidates(candidates, build, report)
    logger.debug("Found %s poster items", len(items))
    return items
