"""Number parsed items and write the front-end fixture."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Iterable, List, Sequence

from programme.ingestion.datetimes import format_date_time
from programme.models.profile import ConferenceProfile
from programme.models.session import SessionItem, SessionRecord

logger = logging.getLogger(__name__)


def assign_ids(
    session_items: Sequence[SessionItem],
    poster_items: Sequence[SessionItem],
    profile: ConferenceProfile,
) -> List[SessionRecord]:
    """Sessions first, then posters; ids start at 1 in that order."""
    records: List[SessionRecord] = []
    for index, item in enumerate([*session_items, *poster_items]):
        records.append(
            SessionRecord(
                id=index + 1,
                **item.model_dump(),
                formatted_time=format_date_time(item.date, item.time, profile),
            )
        )
    return records


def render_records(records: Iterable[SessionRecord]) -> str:
    return json.dumps([record.model_dump() for record in records], indent=2, ensure_ascii=False)


def write_records(records: Sequence[SessionRecord], output_paths: Iterable[Path]) -> None:
    """Overwrite every output path with the full record array."""
    payload = render_records(records)
    for output_path in output_paths:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(payload, encoding="utf-8")
        logger.info("Wrote %s sessions to %s", len(records), output_path)
