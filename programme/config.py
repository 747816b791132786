"""Application configuration loaded from environment variables."""

from pathlib import Path
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Global parser settings."""

    input_path: Optional[str] = Field(
        default=None, description="Timetable PDF to parse."
    )
    output_paths: List[str] = Field(
        default_factory=lambda: [
            "data/parsed-sessions-2025.json",
            "src/data/parsed-sessions.json",
        ],
        description="Every path the parsed session array is written to.",
    )
    raw_text_path: str = "data/raw-pdf-text.txt"
    import_rows_path: str = "data/session-import-rows.json"
    profile_path: Optional[str] = Field(
        default=None, description="JSON file overriding the per-year conference profile."
    )

    log_level: str = "INFO"
    sample_size: int = 5

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def input_path_obj(self) -> Optional[Path]:
        return Path(self.input_path) if self.input_path else None

    @property
    def output_path_objs(self) -> List[Path]:
        return [Path(path) for path in self.output_paths]

    @property
    def raw_text_path_obj(self) -> Path:
        return Path(self.raw_text_path)

    @property
    def import_rows_path_obj(self) -> Path:
        return Path(self.import_rows_path)

    @property
    def profile_path_obj(self) -> Optional[Path]:
        return Path(self.profile_path) if self.profile_path else None


settings = Settings()
