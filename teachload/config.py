"""teachload configuration loaded from environment variables.

Every field can be set with a TEACHLOAD_ prefixed variable or in a .env file,
e.g. TEACHLOAD_DATA_DIR=/srv/teachload or TEACHLOAD_COURSE_PREFIXES='["IS","IT","CS"]'.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings


def _default_data_dir() -> Path:
    # same place the processed data always lived: next to the package
    return Path(__file__).resolve().parent / "data"


class Settings(BaseSettings):
    """Runtime settings with sensible defaults for local use."""

    data_dir: Path = Field(
        default_factory=_default_data_dir,
        description="Directory holding instructors.json, sections.json and schedules.json",
    )

    course_prefixes: list[str] = Field(
        default=["IS", "IT"],
        description="Program prefixes that start a course header line (e.g. IS101)",
    )

    # Logging
    log_json: bool = Field(
        default=False,
        description="Output logs in JSON format (for production)",
    )
    log_level: str = Field(
        default="INFO",
        description="Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    model_config = {
        "env_prefix": "TEACHLOAD_",
        "case_sensitive": False,
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


# Singleton pattern
_settings: Settings | None = None


def get_settings() -> Settings:
    """Get the settings singleton.

    Returns:
        Settings: teachload configuration instance
    """
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
