"""
core/metrics.py
────────────────────────────────────────────────────────────────────────
Pure body-metric formulas shared by the services and the calculator
endpoints:

1. BMI + WHO category
2. Calories burned (MET table)
3. BMR (Harris–Benedict) → daily calorie target (activity + goal)
"""

from __future__ import annotations

# ──────────────────────────────────────────────────────────────────────
#  Tables
# ──────────────────────────────────────────────────────────────────────
# (lower bound, label) – each band runs up to the next lower bound
_BMI_BANDS: list[tuple[float, str]] = [
    (40.0, "Obesity Class III"),
    (35.0, "Obesity Class II"),
    (30.0, "Obesity Class I"),
    (25.0, "Overweight"),
    (18.5, "Normal weight"),
]
UNDERWEIGHT = "Underweight"

BMI_CATEGORIES = (
    UNDERWEIGHT,
    "Normal weight",
    "Overweight",
    "Obesity Class I",
    "Obesity Class II",
    "Obesity Class III",
)

MET_VALUES: dict[str, float] = {
    "cardio": 8.0,        # running / jogging
    "strength": 5.0,      # weight training
    "flexibility": 2.5,   # yoga / stretching
    "sports": 6.0,        # basketball, soccer, …
    "other": 4.0,
}
DEFAULT_WEIGHT_KG = 70.0

ACTIVITY_MULTIPLIERS: dict[str, float] = {
    "sedentary": 1.2,
    "light": 1.375,
    "moderate": 1.55,
    "active": 1.725,
    "very-active": 1.9,
}
GOAL_ADJUSTMENT: dict[str, int] = {"lose": -500, "maintain": 0, "gain": 500}


# ──────────────────────────────────────────────────────────────────────
#  BMI
# ──────────────────────────────────────────────────────────────────────
def compute_bmi(weight_kg: float, height_cm: float) -> float:
    """weight / height(m)², rounded to one decimal."""
    if height_cm <= 0:
        raise ValueError("height must be positive")
    height_m = height_cm / 100
    return round(weight_kg / (height_m * height_m), 1)


def bmi_category(bmi: float) -> str:
    for lower, label in _BMI_BANDS:
        if bmi >= lower:
            return label
    return UNDERWEIGHT


def diet_recommendation(bmi: float | None) -> str:
    """One-line advice shown next to a generated diet plan."""
    if bmi is None:
        return "Personalized diet recommendations based on your health profile."
    if bmi < 18.5:
        return ("Your BMI indicates you're underweight. "
                "Focus on nutrient-dense foods to gain healthy weight.")
    if bmi < 25:
        return ("Your BMI is in the healthy range. "
                "Maintain a balanced diet to support overall health.")
    if bmi < 30:
        return ("Your BMI indicates you're overweight. "
                "Focus on portion control and increasing physical activity.")
    return ("Your BMI indicates obesity. Consider consulting a healthcare "
            "professional for personalized guidance.")


# ──────────────────────────────────────────────────────────────────────
#  Energy expenditure
# ──────────────────────────────────────────────────────────────────────
def calories_burned(
    activity_type: str,
    duration_minutes: float,
    weight_kg: float = DEFAULT_WEIGHT_KG,
) -> int:
    """MET × weight(kg) × hours. Unknown activity types count as "other"."""
    met = MET_VALUES.get(activity_type, MET_VALUES["other"])
    return round(met * weight_kg * duration_minutes / 60)


def bmr(age: int, gender: str, weight_kg: float, height_cm: float) -> float:
    """Harris–Benedict (revised). Anything but "male" uses the female branch."""
    if gender.lower() == "male":
        return 88.362 + 13.397 * weight_kg + 4.799 * height_cm - 5.677 * age
    return 447.593 + 9.247 * weight_kg + 3.098 * height_cm - 4.330 * age


def daily_calorie_target(
    age: int,
    gender: str,
    weight_kg: float,
    height_cm: float,
    activity_level: str,
    goal: str,
) -> int:
    # no lower clamp – an aggressive deficit can go below healthy minimums
    multiplier = ACTIVITY_MULTIPLIERS.get(activity_level, ACTIVITY_MULTIPLIERS["sedentary"])
    tdee = bmr(age, gender, weight_kg, height_cm) * multiplier
    return round(tdee + GOAL_ADJUSTMENT.get(goal, 0))
