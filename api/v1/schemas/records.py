from __future__ import annotations
from datetime import datetime

from pydantic import ConfigDict

from .common import CamelOut


class _RecordOut(CamelOut):
    # passthrough keys stored with the record come back as-is
    model_config = ConfigDict(extra="allow")

    id: str
    user_id: str


class BMIRecordOut(_RecordOut):
    height: float
    weight: float
    bmi: float
    category: str
    date: datetime
    notes: str | None = None


class MealOut(CamelOut):
    model_config = ConfigDict(extra="allow")

    name: str
    description: str
    calories: float
    protein: float
    carbs: float
    fats: float


class DietPlanOut(_RecordOut):
    name: str
    goal_type: str
    target_calories: float
    meals: list[MealOut]
    date: datetime
    notes: str | None = None


class FitnessActivityOut(_RecordOut):
    activity_type: str
    name: str
    duration: float
    calories: float
    notes: str | None = None
    completed: bool
    date: datetime


class FitnessGoalOut(_RecordOut):
    name: str
    target: float
    unit: str
    deadline: datetime
    progress: float
    completed: bool
    created_at: datetime
