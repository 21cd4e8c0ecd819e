from __future__ import annotations
from typing import Literal

from pydantic import Field

from core.models.common import CamelModel

GoalType = Literal["weight_loss", "weight_gain", "maintenance"]


class MealIn(CamelModel):
    name: str = Field(..., min_length=1)
    description: str
    calories: float = Field(..., ge=0)
    protein: float = Field(..., ge=0, description="grams")
    carbs: float = Field(..., ge=0, description="grams")
    fats: float = Field(..., ge=0, description="grams")


class DietPlanIn(CamelModel):
    name: str = Field(..., min_length=1)
    goal_type: GoalType
    target_calories: float = Field(..., ge=500)
    meals: list[MealIn] = Field(..., min_length=1)
    notes: str | None = None
