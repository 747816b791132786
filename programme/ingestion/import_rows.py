"""Convert the parsed fixture into rows for the hosted ``sessions`` table."""

from __future__ import annotations

import datetime as dt
import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from programme.config import settings
from programme.models.profile import ConferenceProfile, load_profile
from programme.models.session import ImportRow, SessionRecord

logger = logging.getLogger(__name__)

DEFAULT_DURATION = dt.timedelta(minutes=45)


def _stamp(date: str, token: str) -> str:
    hours, _, minutes = token.strip().partition(".")
    return f"{date}T{hours.zfill(2)}:{minutes}:00"


def build_description(record: SessionRecord) -> str:
    return (
        f"Session {record.session_number} - Track {record.track}\n\n"
        f"Abstract #{record.abstract_number}\n\n"
        f"Category: {record.category}"
    )


def to_import_row(record: SessionRecord, profile: ConferenceProfile) -> Optional[ImportRow]:
    """Return the table row for a record, or ``None`` when it has no time slot."""
    if not record.time:
        return None
    date = profile.date_for(record.date)
    start, _, end = record.time.partition(" - ")
    start_time = _stamp(date, start)
    if end:
        end_time = _stamp(date, end)
    else:
        end_time = (dt.datetime.fromisoformat(start_time) + DEFAULT_DURATION).isoformat()
    return ImportRow(
        title=record.title,
        speaker=record.speaker,
        description=build_description(record),
        location=record.location.removesuffix(","),
        start_time=start_time,
        end_time=end_time,
        track=record.track,
        day=record.date,
    )


def build_import_rows(
    records: Iterable[SessionRecord], profile: ConferenceProfile
) -> List[ImportRow]:
    rows: List[ImportRow] = []
    skipped = 0
    for record in records:
        row = to_import_row(record, profile)
        if row is None:
            skipped += 1
            continue
        rows.append(row)
    if skipped:
        logger.warning("Skipped %s sessions without a time slot", skipped)
    return rows


def write_import_rows(rows: Iterable[ImportRow], output_path: Path) -> int:
    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = [row.model_dump() for row in rows]
    output_path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
    return len(payload)


def read_records(path: Path) -> List[SessionRecord]:
    with path.open("r", encoding="utf-8") as handle:
        return [SessionRecord(**item) for item in json.load(handle)]


def main() -> None:
    """Rebuild import rows from the first configured fixture."""
    logging.basicConfig(level=settings.log_level)
    source = settings.output_path_objs[0]
    if not source.exists():
        logger.error("Parsed sessions not found at %s. Run the parser first.", source)
        raise SystemExit(1)
    try:
        profile = load_profile(settings.profile_path_obj)
        rows = build_import_rows(read_records(source), profile)
        total = write_import_rows(rows, settings.import_rows_path_obj)
    except ValueError as exc:
        logger.exception("Building import rows from %s failed: %s", source, exc)
        raise SystemExit(1) from exc
    logger.info("Wrote %s import rows to %s", total, settings.import_rows_path)


if __name__ == "__main__":
    main()
