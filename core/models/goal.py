from __future__ import annotations
from datetime import datetime

from pydantic import Field, field_validator

from core.models.common import CamelModel, as_utc


class FitnessGoalIn(CamelModel):
    name: str = Field(..., min_length=1)
    target: float = Field(..., gt=0)
    unit: str = Field(..., min_length=1, examples=["km", "kg", "days"])
    deadline: datetime
    progress: float = 0
    completed: bool = False

    @field_validator("deadline")
    @classmethod
    def _deadline_utc(cls, v: datetime) -> datetime:
        return as_utc(v)


class GoalProgressIn(CamelModel):
    progress: float
    completed: bool | None = None
