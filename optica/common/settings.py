"""Application-wide settings helpers."""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    viacep_base_url: str = "https://viacep.com.br/ws"
    viacep_timeout: int = 10
    database_url: Optional[str] = None  # nunca versionar credenciais, usar .env
    log_json: bool = True
    log_level: str = "INFO"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    load_dotenv()
    timeout_raw = os.getenv("VIACEP_TIMEOUT")
    database_url = os.getenv("DATABASE_URL")

    viacep_timeout = Settings.viacep_timeout
    if timeout_raw is not None and timeout_raw.strip():
        try:
            viacep_timeout = max(int(timeout_raw), 1)
        except ValueError:
            viacep_timeout = Settings.viacep_timeout

    return Settings(
        viacep_base_url=os.getenv("VIACEP_BASE_URL", Settings.viacep_base_url),
        viacep_timeout=viacep_timeout,
        database_url=database_url.strip() if database_url and database_url.strip() else None,
        log_json=os.getenv("LOG_JSON", "true").lower() == "true",
        log_level=os.getenv("LOG_LEVEL", Settings.log_level).upper(),
    )
