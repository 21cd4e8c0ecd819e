from __future__ import annotations

import logging
from typing import Any

import jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from config import settings
from core.models.identity import Identity
from core.services.accounts import AccountService
from core.services.bmi import BMIRecordService
from core.services.diet import DietPlanService
from core.services.fitness import FitnessActivityService, FitnessGoalService
from services.auth import verify_token
from services.db import Database

_LOG = logging.getLogger(__name__)
_bearer = HTTPBearer(auto_error=False)


def get_database(request: Request) -> Database:
    return request.app.state.db


async def json_body(request: Request) -> Any:
    """Raw JSON body. An empty or undecodable body comes back as `None`, so
    the service still answers 401 before it rejects the payload."""
    if not await request.body():
        return None
    try:
        return await request.json()
    except ValueError:
        _LOG.debug("undecodable request body on %s", request.url.path)
        return None


# ───────────────────────── identity ─────────────────────────
def get_identity(
    creds: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> Identity | None:
    """Resolve the bearer token; `None` lets the service answer 401."""
    if creds is None:
        return None
    try:
        return Identity(user_id=verify_token(creds.credentials))
    except jwt.PyJWTError as exc:
        _LOG.debug("rejected bearer token: %s", exc)
        return None


# ───────────────────────── services ─────────────────────────
def bmi_service(db: Database = Depends(get_database)) -> BMIRecordService:
    return BMIRecordService(db)


def diet_service(db: Database = Depends(get_database)) -> DietPlanService:
    return DietPlanService(db)


def activity_service(db: Database = Depends(get_database)) -> FitnessActivityService:
    return FitnessActivityService(db)


def goal_service(db: Database = Depends(get_database)) -> FitnessGoalService:
    return FitnessGoalService(db, auto_complete=settings.goal_auto_complete)


def account_service(db: Database = Depends(get_database)) -> AccountService:
    return AccountService(db)
