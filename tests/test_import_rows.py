import json

import pytest

from programme.ingestion import import_rows
from programme.ingestion.import_rows import (
    build_import_rows,
    read_records,
    to_import_row,
    write_import_rows,
)
from programme.models.profile import ConferenceProfile
from programme.models.session import SessionRecord

PROFILE = ConferenceProfile()


def make_record(time: str = "11.15 - 12.00", location: str = "Michael Sadler, Room 1,") -> SessionRecord:
    return SessionRecord(
        id=1,
        session_number="4",
        title="Living With Aided Language",
        speaker="Sam Jones",
        time=time,
        date="Tuesday",
        category="Personal Stories",
        location=location,
        track="4.1",
        abstract_number="12",
        formatted_time="2025-09-09T11:15:00 - 2025-09-09T12:00:00",
    )


def test_row_carries_start_and_end_times() -> None:
    row = to_import_row(make_record(), PROFILE)
    assert row.start_time == "2025-09-09T11:15:00"
    assert row.end_time == "2025-09-09T12:00:00"
    assert row.day == "Tuesday"


def test_row_strips_trailing_comma_from_location() -> None:
    row = to_import_row(make_record(), PROFILE)
    assert row.location == "Michael Sadler, Room 1"


def test_row_description_summarises_record() -> None:
    row = to_import_row(make_record(), PROFILE)
    assert row.description == (
        "Session 4 - Track 4.1\n\nAbstract #12\n\nCategory: Personal Stories"
    )


def test_single_time_gets_default_duration() -> None:
    row = to_import_row(make_record(time="9.30"), PROFILE)
    assert row.start_time == "2025-09-09T09:30:00"
    assert row.end_time == "2025-09-09T10:15:00"


def test_records_without_time_are_skipped() -> None:
    rows = build_import_rows([make_record(), make_record(time="")], PROFILE)
    assert len(rows) == 1


def test_rows_written_from_fixture(tmp_path) -> None:
    fixture = tmp_path / "parsed-sessions.json"
    fixture.write_text(json.dumps([make_record().model_dump()]), encoding="utf-8")
    output = tmp_path / "rows.json"

    total = write_import_rows(build_import_rows(read_records(fixture), PROFILE), output)

    assert total == 1
    assert json.loads(output.read_text(encoding="utf-8"))[0]["track"] == "4.1"


def test_malformed_start_without_end_raises() -> None:
    with pytest.raises(ValueError):
        to_import_row(make_record(time="9."), PROFILE)


def test_main_exits_non_zero_for_malformed_fixture(tmp_path, monkeypatch) -> None:
    fixture = tmp_path / "parsed-sessions.json"
    fixture.write_text(json.dumps([make_record(time="9.").model_dump()]), encoding="utf-8")
    monkeypatch.setattr(import_rows.settings, "output_paths", [str(fixture)])
    monkeypatch.setattr(import_rows.settings, "import_rows_path", str(tmp_path / "rows.json"))

    with pytest.raises(SystemExit) as excinfo:
        import_rows.main()

    assert excinfo.value.code == 1
    assert not (tmp_path / "rows.json").exists()
