"""
Centralised settings loader.

Values come from the environment (or a local `.env` file); unknown
variables are ignored so the same `.env` can be shared with the frontend.
"""

from __future__ import annotations
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


# ------------------------------------------------------------------ #
#  Master settings model
# ------------------------------------------------------------------ #
class _Settings(BaseSettings):
    # ─── runtime / DB ───────────────────────────────────────────────
    env_name: str = "local"
    database_url: str = "sqlite+aiosqlite:///./fitlife.db"
    db_echo: bool = False

    # ─── identity ───────────────────────────────────────────────────
    jwt_secret: str = "change-me-to-a-long-random-secret"
    jwt_ttl_minutes: int = Field(30 * 24 * 60, gt=0)   # 30-day sessions

    # ─── behaviour switches ─────────────────────────────────────────
    # recompute `completed` from progress >= target when a progress
    # update does not send it
    goal_auto_complete: bool = False

    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    model_config = SettingsConfigDict(
        extra="ignore", env_file=".env", env_file_encoding="utf-8"
    )


# ------------------------------------------------------------------ #
#  Cached singleton accessor
# ------------------------------------------------------------------ #
@lru_cache
def _cached() -> _Settings:  # pragma: no cover
    return _Settings()  # type: ignore[call-arg]


settings: _Settings = _cached()
