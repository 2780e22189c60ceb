from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, field_validator

from .diagnostics import SUPPORTED_LANGUAGES


class LoggingSettings(BaseModel):
    level: str = "INFO"
    color: bool = True
    warnings_log: Optional[Path] = None

    @field_validator("level", mode="before")
    @classmethod
    def _normalize_level(cls, value: str) -> str:
        level = str(value).upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown logging level: {value}")
        return level

    @field_validator("warnings_log", mode="before")
    @classmethod
    def _expand_warnings_log(cls, value: Optional[str | Path]) -> Optional[Path]:
        if value is None:
            return None
        return Path(value).expanduser().resolve()


class DiagnosticSettings(BaseModel):
    language: str = "en"

    @field_validator("language")
    @classmethod
    def _check_language(cls, value: str) -> str:
        if value not in SUPPORTED_LANGUAGES:
            raise ValueError(f"language must be one of {', '.join(SUPPORTED_LANGUAGES)}")
        return value


class Settings(BaseModel):
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    diagnostics: DiagnosticSettings = Field(default_factory=DiagnosticSettings)

    @classmethod
    def load(cls, path: Path) -> "Settings":
        with path.open("r", encoding="utf-8") as fh:
            raw = yaml.safe_load(fh)
        return cls.model_validate(raw or {})


def find_config(explicit_path: Optional[Path]) -> Path:
    if explicit_path:
        return explicit_path
    cwd = Path.cwd()
    for candidate in (cwd / "songbook.yaml", cwd / "songbook.yml"):
        if candidate.exists():
            return candidate
    raise FileNotFoundError("Could not find songbook.yaml - pass the config path explicitly.")
