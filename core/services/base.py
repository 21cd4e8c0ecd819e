"""
Shared plumbing for the per-resource services.

Every query carries `user_id == caller` as a filter term, so a record that
belongs to somebody else looks exactly like one that does not exist.
"""
from __future__ import annotations

import logging
from typing import Any, ClassVar

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from core.errors import Internal, Unauthorized
from core.models.identity import Identity
from services.db import Base, Database

_LOG = logging.getLogger(__name__)


def require_identity(identity: Identity | None) -> Identity:
    if identity is None or not identity.user_id:
        raise Unauthorized()
    return identity


class ResourceService:
    table: ClassVar[type[Base]]
    noun: ClassVar[str]                 # "BMI record"
    plural: ClassVar[str]               # "BMI records"
    sort_field: ClassVar[str] = "date"
    newest_first: ClassVar[bool] = True

    def __init__(self, db: Database) -> None:
        self.db = db

    # ───────────────────────── read ─────────────────────────────
    async def list_own(self, identity: Identity | None) -> list[dict[str, Any]]:
        caller = require_identity(identity)
        column = getattr(self.table, self.sort_field)
        stmt = (
            select(self.table)
            .where(self.table.user_id == caller.user_id)
            .order_by(column.desc() if self.newest_first else column.asc())
        )
        try:
            async with self.db.session() as db:
                rows = (await db.execute(stmt)).scalars().all()
        except SQLAlchemyError:
            _LOG.exception("listing %s for %s failed", self.plural, caller.user_id)
            raise Internal(f"Failed to retrieve {self.plural}") from None
        return [r.to_document() for r in rows]

    # ───────────────────────── write ────────────────────────────
    async def _insert(self, row: Any) -> str:
        try:
            async with self.db.session() as db:
                db.add(row)
                await db.commit()
        except SQLAlchemyError:
            _LOG.exception("saving %s failed", self.noun)
            raise Internal(f"Failed to save {self.noun}") from None
        _LOG.info("%s %s created for %s", self.noun, row.id, row.user_id)
        return row.id
