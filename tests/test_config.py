from pathlib import Path

from programme.config import Settings
from programme.models.profile import ConferenceProfile, load_profile


def test_settings_default_outputs() -> None:
    settings = Settings(_env_file=None)
    assert settings.output_path_objs == [
        Path("data/parsed-sessions-2025.json"),
        Path("src/data/parsed-sessions.json"),
    ]
    assert settings.input_path_obj is None


def test_settings_read_environment(monkeypatch) -> None:
    monkeypatch.setenv("INPUT_PATH", "/tmp/timetable.pdf")
    monkeypatch.setenv("OUTPUT_PATHS", '["out/a.json", "out/b.json"]')
    settings = Settings(_env_file=None)
    assert settings.input_path_obj == Path("/tmp/timetable.pdf")
    assert settings.output_path_objs == [Path("out/a.json"), Path("out/b.json")]


def test_load_profile_defaults_without_path() -> None:
    profile = load_profile(None)
    assert profile == ConferenceProfile()
    assert profile.poster_location == "Parkinson Court"


def test_load_profile_from_json(tmp_path) -> None:
    path = tmp_path / "profile.json"
    path.write_text('{"poster_location": "Great Hall", "room_names": ["Room A"]}', encoding="utf-8")
    profile = load_profile(path)
    assert profile.poster_location == "Great Hall"
    assert profile.room_names == ["Room A"]
    assert profile.date_for("Thursday") == "2025-09-11"
