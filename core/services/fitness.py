"""
Fitness activities and goals.

Both mutations (activity delete, goal progress update) run as one
statement filtered on id *and* owner; zero affected rows means NotFound
whether the id is unknown or belongs to another user. Concurrent progress
updates on the same goal are last-write-wins.
"""
from __future__ import annotations

import logging
from typing import Any

from sqlalchemy import delete, update
from sqlalchemy.exc import SQLAlchemyError

from core.errors import Internal, NotFound
from core.metrics import DEFAULT_WEIGHT_KG, calories_burned
from core.models.common import utcnow
from core.models.fitness import FitnessActivityIn
from core.models.goal import FitnessGoalIn, GoalProgressIn
from core.models.identity import Identity
from core.services.base import ResourceService, require_identity
from core.validation import passthrough_fields, validate_payload
from services.db import Database, FitnessActivity, FitnessGoal, new_id

_LOG = logging.getLogger(__name__)


class FitnessActivityService(ResourceService):
    table = FitnessActivity
    noun = "fitness activity"
    plural = "fitness activities"

    async def create(self, payload: Any, identity: Identity | None) -> str:
        caller = require_identity(identity)
        body = validate_payload(FitnessActivityIn, payload)

        calories = body.calories
        if calories is None:
            calories = calories_burned(
                body.activity_type, body.duration, body.weight or DEFAULT_WEIGHT_KG
            )

        activity = FitnessActivity(
            id=new_id(),
            user_id=caller.user_id,
            activity_type=body.activity_type,
            name=body.name,
            duration=body.duration,
            calories=calories,
            notes=body.notes,
            completed=body.completed,
            date=utcnow(),
            extra=passthrough_fields(body) or None,
        )
        return await self._insert(activity)

    async def delete(self, activity_id: str, identity: Identity | None) -> None:
        caller = require_identity(identity)
        stmt = delete(FitnessActivity).where(
            FitnessActivity.id == activity_id,
            FitnessActivity.user_id == caller.user_id,
        )
        try:
            async with self.db.session() as db:
                result = await db.execute(stmt)
                affected = result.rowcount
                await db.commit()
        except SQLAlchemyError:
            _LOG.exception("deleting activity %s failed", activity_id)
            raise Internal("Failed to delete fitness activity") from None

        if affected == 0:
            raise NotFound("Activity not found")
        _LOG.info("fitness activity %s deleted by %s", activity_id, caller.user_id)


class FitnessGoalService(ResourceService):
    table = FitnessGoal
    noun = "fitness goal"
    plural = "fitness goals"
    sort_field = "deadline"
    newest_first = False            # soonest deadline first

    def __init__(self, db: Database, *, auto_complete: bool = False) -> None:
        super().__init__(db)
        self.auto_complete = auto_complete

    async def create(self, payload: Any, identity: Identity | None) -> str:
        caller = require_identity(identity)
        body = validate_payload(FitnessGoalIn, payload)

        goal = FitnessGoal(
            id=new_id(),
            user_id=caller.user_id,
            name=body.name,
            target=body.target,
            unit=body.unit,
            deadline=body.deadline,
            progress=body.progress,
            completed=body.completed,
            created_at=utcnow(),
            extra=passthrough_fields(body) or None,
        )
        return await self._insert(goal)

    async def update_progress(
        self, goal_id: str, payload: Any, identity: Identity | None
    ) -> None:
        """Set `progress` (and `completed` when given); nothing else changes."""
        caller = require_identity(identity)
        body = validate_payload(GoalProgressIn, payload)

        values: dict[str, Any] = {"progress": body.progress}
        if body.completed is not None:
            values["completed"] = body.completed
        elif self.auto_complete:
            values["completed"] = FitnessGoal.target <= body.progress

        stmt = (
            update(FitnessGoal)
            .where(FitnessGoal.id == goal_id, FitnessGoal.user_id == caller.user_id)
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        try:
            async with self.db.session() as db:
                result = await db.execute(stmt)
                affected = result.rowcount
                await db.commit()
        except SQLAlchemyError:
            _LOG.exception("updating goal %s failed", goal_id)
            raise Internal("Failed to update fitness goal") from None

        if affected == 0:
            raise NotFound("Goal not found")
