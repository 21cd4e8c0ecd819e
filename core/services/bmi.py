from __future__ import annotations

from typing import Any

from core.metrics import bmi_category, compute_bmi
from core.models.bmi import BMIRecordIn
from core.models.common import utcnow
from core.models.identity import Identity
from core.services.base import ResourceService, require_identity
from core.validation import passthrough_fields, validate_payload
from services.db import BMIRecord, new_id


class BMIRecordService(ResourceService):
    table = BMIRecord
    noun = "BMI record"
    plural = "BMI records"

    async def create(self, payload: Any, identity: Identity | None) -> str:
        caller = require_identity(identity)
        body = validate_payload(BMIRecordIn, payload)

        bmi = compute_bmi(body.weight, body.height)
        record = BMIRecord(
            id=new_id(),
            user_id=caller.user_id,
            height=body.height,
            weight=body.weight,
            bmi=bmi,
            category=bmi_category(bmi),
            notes=body.notes,
            date=utcnow(),
            extra=passthrough_fields(body) or None,
        )
        return await self._insert(record)
