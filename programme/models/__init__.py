"""Typed models shared across the parser."""

from .profile import ConferenceProfile, load_profile
from .report import ParseReport
from .session import Block, ImportRow, SessionItem, SessionRecord

__all__ = [
    "Block",
    "ConferenceProfile",
    "ImportRow",
    "ParseReport",
    "SessionItem",
    "SessionRecord",
    "load_profile",
]
