"""
Credential accounts: registration and password login.

Login hands back a signed token; the resource services only ever see the
`Identity` resolved from it.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.errors import Conflict, Internal, Unauthorized
from core.models.common import utcnow
from core.models.user import LoginIn, RegisterIn
from core.validation import validate_payload
from services.auth import check_password, create_token, hash_password
from services.db import Database, User, new_id

_LOG = logging.getLogger(__name__)


class AccountService:
    def __init__(self, db: Database) -> None:
        self.db = db

    async def register(self, payload: Any) -> str:
        body = validate_payload(RegisterIn, payload)
        email = body.email.lower()

        # bcrypt is CPU-bound; keep it off the event loop
        password_hash = await asyncio.to_thread(hash_password, body.password)
        user = User(
            id=new_id(),
            name=body.name,
            email=email,
            password_hash=password_hash,
            role="user",
            created_at=utcnow(),
        )
        try:
            async with self.db.session() as db:
                existing = await db.scalar(select(User.id).where(User.email == email))
                if existing is not None:
                    raise Conflict("Email already exists")
                db.add(user)
                await db.commit()
        except IntegrityError:
            # lost a race with a concurrent registration
            raise Conflict("Email already exists") from None
        except SQLAlchemyError:
            _LOG.exception("registration failed")
            raise Internal("Database connection error. Please try again later.") from None

        _LOG.info("user %s registered", user.id)
        return user.id

    async def login(self, payload: Any) -> tuple[str, str]:
        """Return `(user_id, access_token)` for valid credentials."""
        body = validate_payload(LoginIn, payload)
        try:
            async with self.db.session() as db:
                user = await db.scalar(select(User).where(User.email == body.email.lower()))
        except SQLAlchemyError:
            _LOG.exception("login lookup failed")
            raise Internal("Authentication failed") from None

        if user is None or not await asyncio.to_thread(
            check_password, body.password, user.password_hash
        ):
            _LOG.info("rejected login for %s", body.email)
            raise Unauthorized("Invalid email or password")
        return user.id, create_token(user.id)
