from __future__ import annotations
from typing import Any

from fastapi import APIRouter, Depends, status

from api.v1.deps import diet_service, get_identity, json_body
from api.v1.schemas import Created, DietPlanOut
from core.models.identity import Identity
from core.services.diet import DietPlanService

router = APIRouter()


@router.get("", response_model=list[DietPlanOut])
async def list_diet_plans(
    identity: Identity | None = Depends(get_identity),
    svc: DietPlanService = Depends(diet_service),
) -> list[dict[str, Any]]:
    return await svc.list_own(identity)


@router.post("", response_model=Created, status_code=status.HTTP_201_CREATED)
async def create_diet_plan(
    payload: Any = Depends(json_body),
    identity: Identity | None = Depends(get_identity),
    svc: DietPlanService = Depends(diet_service),
) -> Created:
    plan_id = await svc.create(payload, identity)
    return Created(id=plan_id, message="Diet plan saved successfully")
