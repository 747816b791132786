"""Parse the conference timetable PDF into the session fixture."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import List, Optional, Sequence

from programme.config import settings
from programme.ingestion.emit import assign_ids, write_records
from programme.ingestion.extract_text import dump_raw_text, extract_text
from programme.ingestion.import_rows import build_import_rows, write_import_rows
from programme.ingestion.items import parse_poster_block, parse_session_block
from programme.ingestion.segmenter import segment_blocks
from programme.models.profile import ConferenceProfile, load_profile
from programme.models.report import ParseReport
from programme.models.session import SessionItem

logger = logging.getLogger(__name__)


def parse_text(text: str, profile: ConferenceProfile) -> ParseReport:
    """Segment, parse and number every entry found in ``text``."""
    report = ParseReport()
    session_items: List[SessionItem] = []
    poster_items: List[SessionItem] = []
    logger.debug("Parsing %s lines", len(text.split("\n")))

    for block in segment_blocks(text, profile):
        report.blocks_found += 1
        if not block.time_range:
            report.blocks_without_time += 1
        if block.kind == "session":
            report.session_blocks += 1
            session_items.extend(parse_session_block(block, profile, report))
        else:
            report.poster_blocks += 1
            poster_items.extend(parse_poster_block(block, profile, report))

    report.records = assign_ids(session_items, poster_items, profile)
    logger.info(
        "Parsed %s sessions from %s blocks (%s candidates discarded, %s blocks without a time)",
        report.total,
        report.blocks_found,
        report.candidates_discarded,
        report.blocks_without_time,
    )
    return report


def log_sample(report: ParseReport, size: int) -> None:
    for index, record in enumerate(report.records[:size], start=1):
        logger.info(
            "%s. %s | speaker: %s | time: %s | location: %s | track: %s",
            index,
            record.title,
            record.speaker,
            record.formatted_time,
            record.location,
            record.track,
        )


def run(
    input_path: Path,
    output_paths: Sequence[Path],
    profile: ConferenceProfile,
    raw_text_path: Optional[Path] = None,
    import_rows_path: Optional[Path] = None,
) -> ParseReport:
    """Read the PDF, write the fixture and return the run diagnostics."""
    logger.info("Reading PDF file %s", input_path)
    text = extract_text(input_path)
    if raw_text_path is not None:
        dump_raw_text(text, raw_text_path)

    report = parse_text(text, profile)
    write_records(report.records, output_paths)

    if import_rows_path is not None:
        rows = build_import_rows(report.records, profile)
        total = write_import_rows(rows, import_rows_path)
        logger.info("Wrote %s import rows to %s", total, import_rows_path)
    return report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--input", type=Path, help="Timetable PDF (overrides INPUT_PATH).")
    parser.add_argument(
        "--output",
        type=Path,
        action="append",
        help="Fixture destination; repeat for several (overrides OUTPUT_PATHS).",
    )
    parser.add_argument("--profile", type=Path, help="Conference profile JSON.")
    parser.add_argument(
        "--dump-text", action="store_true", help="Also save the extracted text."
    )
    parser.add_argument(
        "--import-rows", action="store_true", help="Also write rows for the sessions table."
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> None:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level)

    input_path = args.input or settings.input_path_obj
    if input_path is None:
        logger.error("No timetable PDF given. Set INPUT_PATH or pass --input.")
        raise SystemExit(2)

    try:
        profile = load_profile(args.profile or settings.profile_path_obj)
        report = run(
            input_path,
            args.output or settings.output_path_objs,
            profile,
            raw_text_path=settings.raw_text_path_obj if args.dump_text else None,
            import_rows_path=settings.import_rows_path_obj if args.import_rows else None,
        )
    except Exception as exc:
        logger.exception("Timetable parsing failed: %s", exc)
        raise SystemExit(1) from exc

    log_sample(report, settings.sample_size)


if __name__ == "__main__":
    main()
