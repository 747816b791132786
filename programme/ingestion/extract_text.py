"""Pull the text layer out of a timetable PDF."""

from __future__ import annotations

import logging
import re
from pathlib import Path

import fitz

logger = logging.getLogger(__name__)

LOOSE_SESSION_PATTERN = re.compile(r"SESSION\s+\d+[\s\S]*?(?=SESSION\s+\d+|\Z)", re.IGNORECASE)


def extract_text(pdf_path: Path) -> str:
    """Return the text of every page joined by newlines."""
    if not pdf_path.exists():
        raise FileNotFoundError(f"PDF file not found at: {pdf_path}")
    doc = fitz.open(str(pdf_path))
    try:
        pages = [doc[page_index].get_text() for page_index in range(doc.page_count)]
    finally:
        doc.close()
    text = "\n".join(pages)
    logger.debug("Extracted %s lines from %s", len(text.splitlines()), pdf_path)
    return text


def dump_raw_text(text: str, output_path: Path) -> int:
    """Save extracted text for re-tuning; return the number of loose session matches."""
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text, encoding="utf-8")
    matches = LOOSE_SESSION_PATTERN.findall(text)
    logger.info("Raw text saved to %s (%s session-like blocks)", output_path, len(matches))
    for index, match in enumerate(matches, start=1):
        logger.debug("SESSION block %s: %s...", index, match[:200])
    return len(matches)
