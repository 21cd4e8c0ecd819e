"""
services/db.py
────────────────────────────────────────────────────────────────────────
* Async SQLAlchemy v2 handle (`Database`) – opened once at start-up,
  disposed at shutdown, passed to every resource service
* Tables for accounts and the four tracked resources
"""
from __future__ import annotations

import logging
import uuid
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Any, AsyncIterator

from sqlalchemy import JSON, Boolean, DateTime, Float, String, Text
from sqlalchemy.types import TypeDecorator
from sqlalchemy.ext.asyncio import (
    AsyncAttrs,
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import Mapped, declarative_base, mapped_column

_LOG = logging.getLogger(__name__)


def new_id() -> str:
    return uuid.uuid4().hex


class UTCDateTime(TypeDecorator):
    """Timezone-aware UTC in and out; SQLite drops the offset on storage."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is not None and value.tzinfo is not None:
            value = value.astimezone(timezone.utc)
        return value

    def process_result_value(self, value: datetime | None, dialect: Any) -> datetime | None:
        if value is not None and value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value


# ───────── connection handle ─────────────────────────────────────────
class Database:
    def __init__(self, url: str, *, echo: bool = False) -> None:
        self.url = url
        self._echo = echo
        self._engine: AsyncEngine | None = None
        self._sessions: async_sessionmaker[AsyncSession] | None = None

    @property
    def engine(self) -> AsyncEngine:
        if self._engine is None:
            raise RuntimeError("Database is not connected")
        return self._engine

    async def connect(self) -> None:
        if self._engine is not None:
            return
        self._engine = create_async_engine(self.url, echo=self._echo, pool_pre_ping=True)
        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        self._sessions = async_sessionmaker(self._engine, expire_on_commit=False)
        _LOG.info("database ready (%s)", self._engine.url.render_as_string(hide_password=True))

    async def close(self) -> None:
        if self._engine is None:
            return
        await self._engine.dispose()
        self._engine = None
        self._sessions = None
        _LOG.info("database closed")

    @asynccontextmanager
    async def session(self) -> AsyncIterator[AsyncSession]:
        if self._sessions is None:
            raise RuntimeError("Database is not connected")
        async with self._sessions() as session:
            yield session


# ───────── declarative base ──────────────────────────────────────────
Base = declarative_base(cls=AsyncAttrs)


class _Document:
    """Row → plain dict; columns win over passthrough keys in `extra`."""

    def to_document(self) -> dict[str, Any]:
        doc: dict[str, Any] = dict(getattr(self, "extra", None) or {})
        for col in self.__table__.columns:  # type: ignore[attr-defined]
            if col.key in ("extra", "password_hash"):
                continue
            doc[col.key] = getattr(self, col.key)
        return doc


# ───────── tables ────────────────────────────────────────────────────
class User(Base, _Document):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    name: Mapped[str] = mapped_column(String(200))
    email: Mapped[str] = mapped_column(String(320), unique=True, index=True)
    password_hash: Mapped[str] = mapped_column(String(100))
    role: Mapped[str] = mapped_column(String(20), default="user")
    created_at: Mapped[datetime] = mapped_column(UTCDateTime)


class BMIRecord(Base, _Document):
    __tablename__ = "bmi_records"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    height: Mapped[float] = mapped_column(Float)
    weight: Mapped[float] = mapped_column(Float)
    bmi: Mapped[float] = mapped_column(Float)
    category: Mapped[str] = mapped_column(String(40))
    notes: Mapped[str | None] = mapped_column(Text)
    date: Mapped[datetime] = mapped_column(UTCDateTime)
    extra: Mapped[dict | None] = mapped_column(JSON)


class DietPlan(Base, _Document):
    __tablename__ = "diet_plans"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    name: Mapped[str] = mapped_column(String(200))
    goal_type: Mapped[str] = mapped_column(String(20))
    target_calories: Mapped[float] = mapped_column(Float)
    meals: Mapped[list] = mapped_column(JSON)          # embedded, ordered
    notes: Mapped[str | None] = mapped_column(Text)
    date: Mapped[datetime] = mapped_column(UTCDateTime)
    extra: Mapped[dict | None] = mapped_column(JSON)


class FitnessActivity(Base, _Document):
    __tablename__ = "fitness_activities"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    activity_type: Mapped[str] = mapped_column(String(20))
    name: Mapped[str] = mapped_column(String(200))
    duration: Mapped[float] = mapped_column(Float)     # minutes
    calories: Mapped[float] = mapped_column(Float)
    notes: Mapped[str | None] = mapped_column(Text)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    date: Mapped[datetime] = mapped_column(UTCDateTime)
    extra: Mapped[dict | None] = mapped_column(JSON)


class FitnessGoal(Base, _Document):
    __tablename__ = "fitness_goals"

    id: Mapped[str] = mapped_column(String(32), primary_key=True, default=new_id)
    user_id: Mapped[str] = mapped_column(String(64), index=True)
    name: Mapped[str] = mapped_column(String(200))
    target: Mapped[float] = mapped_column(Float)
    unit: Mapped[str] = mapped_column(String(40))
    deadline: Mapped[datetime] = mapped_column(UTCDateTime)
    progress: Mapped[float] = mapped_column(Float, default=0)
    completed: Mapped[bool] = mapped_column(Boolean, default=False)
    created_at: Mapped[datetime] = mapped_column(UTCDateTime)
    extra: Mapped[dict | None] = mapped_column(JSON)
