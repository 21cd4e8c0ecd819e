from __future__ import annotations
from typing import Literal

from pydantic import Field

from core.models.common import CamelModel

ActivityType = Literal["cardio", "strength", "flexibility", "sports", "other"]


class FitnessActivityIn(CamelModel):
    activity_type: ActivityType
    name: str = Field(..., min_length=1)
    duration: float = Field(..., ge=1, description="Duration in minutes")
    # estimated from the MET table when left out
    calories: float | None = Field(None, ge=0)
    weight: float | None = Field(None, ge=20, le=500, description="kg, for the estimate")
    notes: str | None = None
    completed: bool = False
