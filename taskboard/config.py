"""Settings read from TASKBOARD_* environment variables."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel

from .storage import DEFAULT_KEY

ENV_PREFIX = "TASKBOARD"


def _env(suffix: str, default: str) -> str:
    value = os.getenv(f"{ENV_PREFIX}_{suffix}")
    if value is None or value.strip() == "":
        return default
    return value.strip()


class Settings(BaseModel):
    data_dir: Path = Path(".taskboard")
    storage_key: str = DEFAULT_KEY
    log_level: str = "WARNING"


def get_settings(
    data_dir: Optional[str] = None,
    storage_key: Optional[str] = None,
    log_level: Optional[str] = None
) -> Settings:
    """Environment values, overridden by any explicit (command-line) value"""
    return Settings(
        data_dir=Path(data_dir or _env("DIR", ".taskboard")).expanduser(),
        storage_key=storage_key or _env("KEY", DEFAULT_KEY),
        log_level=(log_level or _env("LOG_LEVEL", "WARNING")).upper()
    )
