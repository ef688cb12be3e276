# config.py
from __future__ import annotations

import os
from pathlib import Path
from typing import Optional
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from dotenv import load_dotenv
from pydantic import BaseModel, field_validator

from agenda import Strictness

BASE_DIR = Path(__file__).resolve().parent
DEFAULT_DATABASE_URL = f"sqlite:///{(BASE_DIR / 'appointments.db').as_posix()}"
VALID_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseModel):
    timezone: str = "America/Sao_Paulo"
    database_url: str = DEFAULT_DATABASE_URL
    parse_mode: Strictness = Strictness.LENIENT
    log_level: str = "INFO"

    model_config = {"frozen": True}

    @field_validator("timezone")
    @classmethod
    def _known_zone(cls, v: str) -> str:
        try:
            ZoneInfo(v)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown time zone: {v!r}") from e
        return v

    @field_validator("parse_mode", mode="before")
    @classmethod
    def _mode(cls, v):
        return Strictness.parse(v, Strictness.LENIENT)

    @field_validator("log_level", mode="before")
    @classmethod
    def _level(cls, v: Optional[str]) -> str:
        # Unknown levels fall back to INFO rather than failing startup.
        level = (v or "INFO").strip().upper()
        return level if level in VALID_LOG_LEVELS else "INFO"

    @property
    def zone(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @classmethod
    def from_env(cls, load_env_file: bool = True) -> "Settings":
        """Read once at process start (after loading a local .env, if any)."""
        if load_env_file:
            load_dotenv()
        return cls(
            timezone=os.getenv("TIMEZONE", "America/Sao_Paulo").strip() or "America/Sao_Paulo",
            database_url=os.getenv("DATABASE_URL", DEFAULT_DATABASE_URL).strip() or DEFAULT_DATABASE_URL,
            parse_mode=os.getenv("PARSE_MODE", "lenient"),
            log_level=os.getenv("LOG_LEVEL", "INFO"),
        )
