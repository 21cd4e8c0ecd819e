"""Re-export individual schema modules for easy imports."""

from .auth import TokenOut
from .calculators import (
    BMIIn,
    BMIOut,
    CaloriesBurnedIn,
    CaloriesBurnedOut,
    DailyCaloriesIn,
    DailyCaloriesOut,
)
from .common import Created, ErrorOut, Message
from .records import BMIRecordOut, DietPlanOut, FitnessActivityOut, FitnessGoalOut

__all__ = [
    "TokenOut",
    "BMIIn",
    "BMIOut",
    "CaloriesBurnedIn",
    "CaloriesBurnedOut",
    "DailyCaloriesIn",
    "DailyCaloriesOut",
    "Created",
    "ErrorOut",
    "Message",
    "BMIRecordOut",
    "DietPlanOut",
    "FitnessActivityOut",
    "FitnessGoalOut",
]
