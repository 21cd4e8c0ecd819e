# api/v1/fitness.py
from __future__ import annotations
from typing import Any

from fastapi import APIRouter, Depends, status

from api.v1.deps import activity_service, get_identity, goal_service, json_body
from api.v1.schemas import Created, FitnessActivityOut, FitnessGoalOut, Message
from core.models.identity import Identity
from core.services.fitness import FitnessActivityService, FitnessGoalService

router = APIRouter()


# ───────────────────────── goals ────────────────────────────
# registered before /{activity_id} so "goals" is never taken for an id
@router.get(
    "/goals",
    response_model=list[FitnessGoalOut],
    summary="List the caller's goals, soonest deadline first",
)
async def list_goals(
    identity: Identity | None = Depends(get_identity),
    svc: FitnessGoalService = Depends(goal_service),
) -> list[dict[str, Any]]:
    return await svc.list_own(identity)


@router.post("/goals", response_model=Created, status_code=status.HTTP_201_CREATED)
async def create_goal(
    payload: Any = Depends(json_body),
    identity: Identity | None = Depends(get_identity),
    svc: FitnessGoalService = Depends(goal_service),
) -> Created:
    goal_id = await svc.create(payload, identity)
    return Created(id=goal_id, message="Fitness goal saved successfully")


@router.put(
    "/goals/{goal_id}",
    response_model=Message,
    summary="Update progress (and optionally completion) of one of the caller's goals",
)
async def update_goal_progress(
    goal_id: str,
    payload: Any = Depends(json_body),
    identity: Identity | None = Depends(get_identity),
    svc: FitnessGoalService = Depends(goal_service),
) -> Message:
    await svc.update_progress(goal_id, payload, identity)
    return Message(message="Fitness goal updated successfully")


# ───────────────────────── activities ───────────────────────
@router.get(
    "",
    response_model=list[FitnessActivityOut],
    summary="List the caller's activities, newest first",
)
async def list_activities(
    identity: Identity | None = Depends(get_identity),
    svc: FitnessActivityService = Depends(activity_service),
) -> list[dict[str, Any]]:
    return await svc.list_own(identity)


@router.post("", response_model=Created, status_code=status.HTTP_201_CREATED)
async def create_activity(
    payload: Any = Depends(json_body),
    identity: Identity | None = Depends(get_identity),
    svc: FitnessActivityService = Depends(activity_service),
) -> Created:
    activity_id = await svc.create(payload, identity)
    return Created(id=activity_id, message="Fitness activity saved successfully")


@router.delete("/{activity_id}", response_model=Message)
async def delete_activity(
    activity_id: str,
    identity: Identity | None = Depends(get_identity),
    svc: FitnessActivityService = Depends(activity_service),
) -> Message:
    await svc.delete(activity_id, identity)
    return Message(message="Fitness activity deleted successfully")
