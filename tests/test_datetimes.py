from programme.ingestion.datetimes import format_date_time, to_clock
from programme.models.profile import ConferenceProfile

PROFILE = ConferenceProfile()


def test_weekday_and_range_become_iso_range() -> None:
    assert (
        format_date_time("Tuesday", "11.15 - 12.00", PROFILE)
        == "2025-09-09T11:15:00 - 2025-09-09T12:00:00"
    )


def test_each_weekday_maps_to_conference_week() -> None:
    dates = [format_date_time(day, None, PROFILE) for day in PROFILE.day_dates]
    assert dates == ["2025-09-08", "2025-09-09", "2025-09-10", "2025-09-11", "2025-09-12"]


def test_missing_time_gives_bare_date() -> None:
    assert format_date_time("Friday", "", PROFILE) == "2025-09-12"


def test_unknown_or_missing_day_defaults_to_monday() -> None:
    assert format_date_time("Saturday", None, PROFILE) == "2025-09-08"
    assert format_date_time(None, "9.00 - 9.45", PROFILE) == "2025-09-08T9:00:00 - 2025-09-08T9:45:00"


def test_out_of_range_times_pass_through() -> None:
    assert format_date_time("Monday", "99.99 - 10.00", PROFILE) == "2025-09-08T99:99:00 - 2025-09-08T10:00:00"


def test_profile_supplies_calendar() -> None:
    profile = ConferenceProfile(day_dates={"Monday": "2026-09-07"}, default_date="2026-09-07")
    assert format_date_time("Monday", "14.00 - 14.45", profile) == "2026-09-07T14:00:00 - 2026-09-07T14:45:00"
    assert format_date_time("Tuesday", None, profile) == "2026-09-07"


def test_to_clock() -> None:
    assert to_clock(" 14.00 ") == "14:00:00"
