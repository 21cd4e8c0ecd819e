# api/v1/router.py
from fastapi import APIRouter

from . import auth, bmi, calculators, diet, fitness
from .schemas import ErrorOut

# every failure comes back as {"error": "..."}
_ERRORS = {code: {"model": ErrorOut} for code in (400, 401, 404, 409, 500)}

api_router = APIRouter(responses=_ERRORS)

api_router.include_router(auth.router, prefix="/auth", tags=["Auth"])
api_router.include_router(bmi.router, prefix="/bmi", tags=["BMI"])
api_router.include_router(diet.router, prefix="/diet", tags=["Diet plans"])
# activities at /fitness, goals nested under /fitness/goals
api_router.include_router(fitness.router, prefix="/fitness", tags=["Fitness"])
api_router.include_router(calculators.router, prefix="/calculators", tags=["Calculators"])
