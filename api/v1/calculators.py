"""Stateless calculators – no session, nothing stored."""
from __future__ import annotations

from fastapi import APIRouter

from api.v1.schemas import (
    BMIIn,
    BMIOut,
    CaloriesBurnedIn,
    CaloriesBurnedOut,
    DailyCaloriesIn,
    DailyCaloriesOut,
)
from core import metrics

router = APIRouter()


@router.post("/bmi", response_model=BMIOut)
def bmi(body: BMIIn) -> BMIOut:
    value = metrics.compute_bmi(body.weight, body.height)
    return BMIOut(
        bmi=value,
        category=metrics.bmi_category(value),
        recommendation=metrics.diet_recommendation(value),
    )


@router.post("/calories-burned", response_model=CaloriesBurnedOut)
def calories_burned(body: CaloriesBurnedIn) -> CaloriesBurnedOut:
    return CaloriesBurnedOut(
        calories=metrics.calories_burned(body.activity_type, body.duration, body.weight)
    )


@router.post("/daily-calories", response_model=DailyCaloriesOut)
def daily_calories(body: DailyCaloriesIn) -> DailyCaloriesOut:
    return DailyCaloriesOut(
        bmr=round(metrics.bmr(body.age, body.gender, body.weight, body.height), 1),
        calories=metrics.daily_calorie_target(
            body.age, body.gender, body.weight, body.height, body.activity_level, body.goal
        ),
    )
