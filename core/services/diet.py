from __future__ import annotations

from typing import Any

from core.models.common import utcnow
from core.models.diet import DietPlanIn
from core.models.identity import Identity
from core.services.base import ResourceService, require_identity
from core.validation import passthrough_fields, validate_payload
from services.db import DietPlan, new_id


class DietPlanService(ResourceService):
    table = DietPlan
    noun = "diet plan"
    plural = "diet plans"

    async def create(self, payload: Any, identity: Identity | None) -> str:
        caller = require_identity(identity)
        body = validate_payload(DietPlanIn, payload)

        plan = DietPlan(
            id=new_id(),
            user_id=caller.user_id,
            name=body.name,
            goal_type=body.goal_type,
            target_calories=body.target_calories,
            # meals keep their order and any extra keys the client sent
            meals=[m.model_dump(mode="json") for m in body.meals],
            notes=body.notes,
            date=utcnow(),
            extra=passthrough_fields(body) or None,
        )
        return await self._insert(plan)
