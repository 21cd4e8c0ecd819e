from __future__ import annotations
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .common import CamelOut


class _CalcIn(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, allow_inf_nan=False
    )


class BMIIn(_CalcIn):
    height: float = Field(..., ge=50, le=300, description="cm")
    weight: float = Field(..., ge=20, le=500, description="kg")


class BMIOut(CamelOut):
    bmi: float
    category: str
    recommendation: str


class CaloriesBurnedIn(_CalcIn):
    activity_type: str = Field(..., examples=["cardio", "strength"])
    duration: float = Field(..., ge=1, description="minutes")
    weight: float = Field(70, ge=20, le=500, description="kg")


class CaloriesBurnedOut(CamelOut):
    calories: int


class DailyCaloriesIn(_CalcIn):
    age: int = Field(..., ge=1, le=120)
    gender: Literal["male", "female"]
    weight: float = Field(..., ge=20, le=500, description="kg")
    height: float = Field(..., ge=50, le=300, description="cm")
    activity_level: Literal["sedentary", "light", "moderate", "active", "very-active"] = "sedentary"
    goal: Literal["lose", "maintain", "gain"] = "maintain"

    @field_validator("gender", mode="before")
    @classmethod
    def _lower_gender(cls, v: object) -> object:
        return v.lower() if isinstance(v, str) else v


class DailyCaloriesOut(CamelOut):
    bmr: float
    calories: int
