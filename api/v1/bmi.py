from __future__ import annotations
from typing import Any

from fastapi import APIRouter, Depends, status

from api.v1.deps import bmi_service, get_identity, json_body
from api.v1.schemas import BMIRecordOut, Created
from core.models.identity import Identity
from core.services.bmi import BMIRecordService

router = APIRouter()


@router.get(
    "",
    response_model=list[BMIRecordOut],
    summary="List the caller's BMI records, newest first",
)
async def list_bmi_records(
    identity: Identity | None = Depends(get_identity),
    svc: BMIRecordService = Depends(bmi_service),
) -> list[dict[str, Any]]:
    return await svc.list_own(identity)


@router.post(
    "",
    response_model=Created,
    status_code=status.HTTP_201_CREATED,
    summary="Save a BMI measurement",
)
async def create_bmi_record(
    payload: Any = Depends(json_body),
    identity: Identity | None = Depends(get_identity),
    svc: BMIRecordService = Depends(bmi_service),
) -> Created:
    record_id = await svc.create(payload, identity)
    return Created(id=record_id, message="BMI record saved successfully")
