"""
Seed a demo account with a few BMI records, a diet plan, activities and goals.

Usage
-----

    # demo@fitlife.app / fitlife-demo
    python -m scripts.seed_demo

    # custom records (same payload shapes as the API) in a JSON file
    python -m scripts.seed_demo --email me@example.com --file path/to/records.json
"""
from __future__ import annotations

import argparse
import asyncio
import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Any

from config import settings
from core.errors import Conflict
from core.models.identity import Identity
from core.services.accounts import AccountService
from core.services.bmi import BMIRecordService
from core.services.diet import DietPlanService
from core.services.fitness import FitnessActivityService, FitnessGoalService
from services.db import Database

_LOG = logging.getLogger("seed_demo")

# ────────────────────────────────────────────────────────────────────
def _default_records() -> dict[str, list[dict[str, Any]]]:
    soon = datetime.now(timezone.utc) + timedelta(days=30)
    return {
        "bmi": [
            {"height": 175, "weight": 82, "notes": "start"},
            {"height": 175, "weight": 79.5},
        ],
        "diet": [
            {
                "name": "Lean week",
                "goalType": "weight_loss",
                "targetCalories": 2100,
                "meals": [
                    {"name": "Breakfast", "description": "Oatmeal with berries and nuts",
                     "calories": 420, "protein": 15, "carbs": 62, "fats": 12},
                    {"name": "Lunch", "description": "Quinoa salad with grilled chicken",
                     "calories": 610, "protein": 45, "carbs": 55, "fats": 20},
                    {"name": "Dinner", "description": "Salmon, roasted vegetables, quinoa",
                     "calories": 680, "protein": 42, "carbs": 48, "fats": 30},
                ],
            },
        ],
        "fitness": [
            {"activityType": "cardio", "name": "Morning run", "duration": 35, "completed": True},
            {"activityType": "strength", "name": "Upper body", "duration": 50,
             "calories": 300, "completed": True},
        ],
        "goals": [
            {"name": "Run 50 km", "target": 50, "unit": "km", "deadline": soon.isoformat()},
            {"name": "Reach 75 kg", "target": 75, "unit": "kg",
             "deadline": (soon + timedelta(days=60)).isoformat(), "progress": 79.5},
        ],
    }


async def _seed(email: str, password: str, records: dict[str, list[dict[str, Any]]]) -> None:
    db = Database(settings.database_url)
    await db.connect()
    try:
        accounts = AccountService(db)
        try:
            await accounts.register({"name": "Demo User", "email": email, "password": password})
        except Conflict:
            _LOG.info("%s already registered, reusing it", email)
        user_id, _ = await accounts.login({"email": email, "password": password})
        me = Identity(user_id=user_id)

        services = {
            "bmi": BMIRecordService(db),
            "diet": DietPlanService(db),
            "fitness": FitnessActivityService(db),
            "goals": FitnessGoalService(db),
        }
        for kind, payloads in records.items():
            svc = services[kind]
            for payload in payloads:
                await svc.create(payload, me)
            print(f"✓ inserted {len(payloads)} {svc.plural} for {email}")
    finally:
        await db.close()


def _load_json(path: Path) -> dict[str, list[dict[str, Any]]]:
    data = json.loads(path.read_text())
    if not isinstance(data, dict):
        raise ValueError("JSON file must map bmi/diet/fitness/goals to lists of payloads")
    return data


def main() -> None:
    parser = argparse.ArgumentParser()
    parser.add_argument("--email", default="demo@fitlife.app")
    parser.add_argument("--password", default="fitlife-demo")
    parser.add_argument(
        "--file",
        type=Path,
        help="optional JSON file with records to seed (overrides defaults)",
    )
    args = parser.parse_args()

    logging.basicConfig(level=settings.log_level.upper())
    records = _load_json(args.file) if args.file else _default_records()
    asyncio.run(_seed(args.email, args.password, records))


if __name__ == "__main__":
    main()
